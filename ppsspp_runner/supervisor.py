"""Launch the emulator while keeping track of its state"""
from gettext import gettext as _

from ppsspp_runner import settings
from ppsspp_runner.exceptions import AlreadyRunningError, NotRunningError
from ppsspp_runner.util import system
from ppsspp_runner.util.jobs import watch_child
from ppsspp_runner.util.log import logger


class EmulatorSupervisor:

    """Owns the single emulator process that may run at any time.

    The supervisor is either idle (`process` is None) or running. UI
    collaborators are passed in: `status_icon` with show()/hide(), `notifier`
    with info()/warn()/error() and `flags` with set_flag().
    """

    def __init__(self, status_icon, notifier, flags):
        self.status_icon = status_icon
        self.notifier = notifier
        self.flags = flags
        self.process = None

    @property
    def is_running(self):
        return self.process is not None

    def start(self, executable_path, image_path):
        """Launch the emulator on a game image.

        Raises AlreadyRunningError if an emulator is already running; OSError
        from process creation is passed through untouched.
        """
        if self.process:
            raise AlreadyRunningError()

        process = system.spawn_detached([executable_path, image_path])
        logger.info("Started %s (pid %s) on %s", executable_path, process.pid, image_path)
        self.process = process
        watch_child(process.pid, self.on_exit, process)

        self.notifier.info(_("Launching PPSSPP…"))
        self.status_icon.show()
        self.flags.set_flag(settings.RUNNING_FLAG, True)
        return process

    def on_exit(self, pid, status, process):
        """Callback registered on emulator process termination"""
        if process is not self.process:
            # stop() already cleaned up after this process
            logger.debug("Ignoring exit of stale process %s", pid)
            return
        logger.info("PPSSPP (pid %s) exited with status %s", pid, status)
        self._clear()
        self.notifier.info(_("PPSSPP closed."))

    def stop(self):
        """Ask the emulator to terminate and return to the idle state right away,
        without waiting for the process to actually exit."""
        if not self.process:
            raise NotRunningError()

        self._terminate()
        self._clear()
        self.notifier.info(_("PPSSPP stopped."))

    def shutdown(self):
        """Terminates any running emulator before the application quits"""
        if self.process:
            self._terminate()
            self.process = None
        self.flags.set_flag(settings.RUNNING_FLAG, False)

    def _terminate(self):
        logger.info("Sending SIGTERM to PPSSPP (pid %s)", self.process.pid)
        try:
            self.process.terminate()
        except ProcessLookupError:
            # process already dead.
            pass
        except PermissionError as ex:
            logger.error("Could not terminate PPSSPP (pid %s): %s", self.process.pid, ex)

    def _clear(self):
        self.process = None
        self.status_icon.hide()
        self.flags.set_flag(settings.RUNNING_FLAG, False)
