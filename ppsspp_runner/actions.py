"""Keeps the application's actions and lifetime in line with the emulator"""
from ppsspp_runner import settings


class RunnerActions:
    """Drives the `run` and `stop` actions of the application.

    `run` is enabled only while no emulator runs, `stop` only while one does.
    The application is held for as long as an emulator it started runs, and
    released once it is gone, whichever way it went."""

    def __init__(self, application, supervisor, run_action, stop_action):
        self.application = application
        self.supervisor = supervisor
        self.run_action = run_action
        self.stop_action = stop_action
        self.is_held = False

    def run(self, commands):
        started = commands.run()
        if started and not self.is_held:
            self.application.hold()
            self.is_held = True
        return started

    def stop(self, commands):
        return commands.stop()

    def on_flag_changed(self, name, _value):
        """Listener for the context flags"""
        if name != settings.RUNNING_FLAG:
            return
        # Changes are delivered late; the supervisor has the current state
        is_running = self.supervisor.is_running
        self.update_actions(is_running)
        if not is_running and self.is_held:
            self.application.release()
            self.is_held = False

    def update_actions(self, is_running):
        self.run_action.set_enabled(not is_running)
        self.stop_action.set_enabled(is_running)
