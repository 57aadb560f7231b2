import unittest
from unittest.mock import MagicMock, patch

from ppsspp_runner import settings
from ppsspp_runner.exceptions import AlreadyRunningError, NotRunningError
from ppsspp_runner.supervisor import EmulatorSupervisor


class FakeStatusIcon:
    def __init__(self):
        self.visible = False

    def show(self):
        self.visible = True

    def hide(self):
        self.visible = False


class FakeFlags:
    def __init__(self):
        self.values = {}
        self.calls = []

    def set_flag(self, name, value):
        self.calls.append((name, value))
        self.values[name] = value

    def get_flag(self, name):
        return self.values.get(name, False)


class SupervisorTestCase(unittest.TestCase):
    def setUp(self):
        self.status_icon = FakeStatusIcon()
        self.notifier = MagicMock()
        self.flags = FakeFlags()
        self.supervisor = EmulatorSupervisor(self.status_icon, self.notifier, self.flags)

        self.watches = []
        spawn_patcher = patch("ppsspp_runner.supervisor.system.spawn_detached")
        self.mock_spawn = spawn_patcher.start()
        self.addCleanup(spawn_patcher.stop)
        self.mock_spawn.side_effect = self.make_process

        watch_patcher = patch("ppsspp_runner.supervisor.watch_child")
        self.mock_watch = watch_patcher.start()
        self.addCleanup(watch_patcher.stop)
        self.mock_watch.side_effect = lambda pid, func, *args: self.watches.append((pid, func, args))

    def make_process(self, command):
        process = MagicMock()
        process.pid = 4000 + len(self.watches)
        process.args = command
        return process

    def exit_child(self, index=-1, status=0):
        """Simulate GLib reporting the termination of a watched child"""
        pid, func, args = self.watches[index]
        func(pid, status, *args)

    @property
    def is_running_flag(self):
        return self.flags.get_flag(settings.RUNNING_FLAG)


class TestStart(SupervisorTestCase):
    def test_start_launches_with_image_as_only_argument(self):
        self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.mock_spawn.assert_called_once_with(["/usr/bin/ppsspp", "/games/EBOOT.PBP"])

    def test_start_updates_ui(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.assertIs(self.supervisor.process, process)
        self.assertTrue(self.supervisor.is_running)
        self.assertTrue(self.is_running_flag)
        self.assertTrue(self.status_icon.visible)
        self.notifier.info.assert_called_once_with("Launching PPSSPP…")

    def test_start_watches_child(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.assertEqual(len(self.watches), 1)
        pid, _func, args = self.watches[0]
        self.assertEqual(pid, process.pid)
        self.assertEqual(args, (process,))

    def test_second_start_is_rejected(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        for _i in range(3):
            with self.assertRaises(AlreadyRunningError):
                self.supervisor.start("/usr/bin/ppsspp", "/games/OTHER.PBP")
        self.assertIs(self.supervisor.process, process)
        self.assertEqual(self.mock_spawn.call_count, 1)
        self.assertEqual(len(self.watches), 1)

    def test_spawn_failure_leaves_supervisor_idle(self):
        self.mock_spawn.side_effect = FileNotFoundError(2, "No such file or directory")
        with self.assertRaises(FileNotFoundError):
            self.supervisor.start("/nowhere/ppsspp", "/games/EBOOT.PBP")
        self.assertFalse(self.supervisor.is_running)
        self.assertFalse(self.status_icon.visible)
        self.assertEqual(self.flags.calls, [])
        self.notifier.info.assert_not_called()


class TestExit(SupervisorTestCase):
    def test_child_exit_returns_to_idle(self):
        self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.exit_child(status=139)
        self.assertFalse(self.supervisor.is_running)
        self.assertFalse(self.is_running_flag)
        self.assertFalse(self.status_icon.visible)
        self.notifier.info.assert_called_with("PPSSPP closed.")

    def test_exit_after_stop_is_ignored(self):
        self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.supervisor.stop()
        self.notifier.reset_mock()
        flag_calls = list(self.flags.calls)

        self.exit_child()
        self.notifier.info.assert_not_called()
        self.assertEqual(self.flags.calls, flag_calls)

    def test_stale_exit_does_not_clear_new_process(self):
        self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.supervisor.stop()
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")

        self.exit_child(index=0)
        self.assertIs(self.supervisor.process, process)
        self.assertTrue(self.is_running_flag)
        self.assertTrue(self.status_icon.visible)

    def test_crash_then_stop_reports_not_running(self):
        self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.exit_child(status=134)
        with self.assertRaises(NotRunningError):
            self.supervisor.stop()
        closed = [call for call in self.notifier.info.call_args_list if call.args == ("PPSSPP closed.",)]
        self.assertEqual(len(closed), 1)
        self.assertEqual(self.flags.calls, [(settings.RUNNING_FLAG, True), (settings.RUNNING_FLAG, False)])


class TestStop(SupervisorTestCase):
    def test_stop_when_idle(self):
        with self.assertRaises(NotRunningError) as context:
            self.supervisor.stop()
        self.assertEqual(context.exception.message, "PPSSPP is not running.")
        self.assertEqual(self.flags.calls, [])
        self.notifier.info.assert_not_called()

    def test_stop_terminates_and_clears_immediately(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.supervisor.stop()
        process.terminate.assert_called_once_with()
        process.kill.assert_not_called()
        process.wait.assert_not_called()
        self.assertFalse(self.supervisor.is_running)
        self.assertFalse(self.is_running_flag)
        self.assertFalse(self.status_icon.visible)
        self.notifier.info.assert_called_with("PPSSPP stopped.")

    def test_stop_reports_stopped_when_process_already_gone(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        process.terminate.side_effect = ProcessLookupError()
        self.supervisor.stop()
        self.assertFalse(self.supervisor.is_running)
        self.notifier.info.assert_called_with("PPSSPP stopped.")

    def test_stop_reports_stopped_when_signal_is_denied(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        process.terminate.side_effect = PermissionError(1, "Operation not permitted")
        self.supervisor.stop()
        self.assertFalse(self.supervisor.is_running)
        self.assertFalse(self.is_running_flag)
        self.notifier.info.assert_called_with("PPSSPP stopped.")


class TestShutdown(SupervisorTestCase):
    def test_shutdown_terminates_running_emulator(self):
        process = self.supervisor.start("/usr/bin/ppsspp", "/games/EBOOT.PBP")
        self.notifier.reset_mock()
        self.supervisor.shutdown()
        process.terminate.assert_called_once_with()
        self.assertFalse(self.supervisor.is_running)
        self.assertFalse(self.is_running_flag)
        self.notifier.info.assert_not_called()

    def test_shutdown_when_idle_resets_flag(self):
        self.supervisor.shutdown()
        self.assertEqual(self.flags.calls, [(settings.RUNNING_FLAG, False)])
