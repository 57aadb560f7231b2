"""Entry points of the run and stop commands"""
from ppsspp_runner import settings
from ppsspp_runner.config import EXECUTABLE_PATH, IMAGE_PATH
from ppsspp_runner.exceptions import (
    AlreadyRunningError,
    MisconfigurationError,
    MissingExecutableError,
    MissingImageError,
    NotRunningError,
)
from ppsspp_runner.util.log import logger


class RunnerCommands:
    """Handlers for the commands exposed to the user. Errors never leave
    these methods: they end up in the notification channel."""

    def __init__(self, config, locator, supervisor, notifier, flags):
        self.config = config
        self.locator = locator
        self.supervisor = supervisor
        self.notifier = notifier
        self.flags = flags

    def run(self):
        """Resolve the executable, then the image, then launch the emulator.
        Returns True if the emulator was started."""
        try:
            if self.supervisor.is_running:
                raise AlreadyRunningError()
            executable, image = self.resolve_paths()
            self.supervisor.start(executable, image)
        except MisconfigurationError as ex:
            self.notifier.error(ex.message)
            self.flags.set_flag(settings.RUNNING_FLAG, False)
            return False
        except AlreadyRunningError as ex:
            self.notifier.warn(ex.message)
            return False
        except OSError as ex:
            logger.exception("Failed to launch PPSSPP: %s", ex)
            self.notifier.error(str(ex))
            return False
        return True

    def resolve_paths(self):
        """Return the (executable, image) pair to launch, saving newly
        discovered paths. Raises a MisconfigurationError subclass on the first
        path that can't be resolved."""
        self.config.load()

        executable = self.locator.resolve_executable(self.config.get(EXECUTABLE_PATH))
        if not executable:
            raise MissingExecutableError()

        image = self.locator.resolve_image(self.config.workspace_dir, self.config.get(IMAGE_PATH))
        if not image:
            raise MissingImageError()
        return executable, image

    def stop(self):
        """Stop the running emulator. Returns True if there was one to stop."""
        try:
            self.supervisor.stop()
        except NotRunningError as ex:
            self.notifier.warn(ex.message)
            return False
        return True
