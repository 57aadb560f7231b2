"""Exception handling module"""

from gettext import gettext as _


class PPSSPPRunnerError(Exception):
    """Base exception for errors reported to the user"""

    def __init__(self, message, *args, **kwarg):
        super().__init__(message, *args, **kwarg)
        self.message = message


class MisconfigurationError(PPSSPPRunnerError):
    """Raised when a required path is missing and could not be discovered."""


class MissingExecutableError(MisconfigurationError):
    """Raised when the PPSSPP executable can't be located."""

    def __init__(self, message=None, *args, **kwargs):
        super().__init__(
            message or _("PPSSPP executable not found. Configure executable_path."),
            *args,
            **kwargs
        )


class MissingImageError(MisconfigurationError):
    """Raised when the game image can't be located."""

    def __init__(self, message=None, *args, **kwargs):
        if not message:
            message = _(
                "EBOOT.PBP not found in workspace. "
                "Configure image_path or place EBOOT.PBP in the workspace root."
            )
        super().__init__(message, *args, **kwargs)


class AlreadyRunningError(PPSSPPRunnerError):
    """Raised when starting the emulator while it already runs."""

    def __init__(self, message=None, *args, **kwargs):
        super().__init__(message or _("PPSSPP is already running."), *args, **kwargs)


class NotRunningError(PPSSPPRunnerError):
    """Raised when stopping the emulator while none runs."""

    def __init__(self, message=None, *args, **kwargs):
        super().__init__(message or _("PPSSPP is not running."), *args, **kwargs)
