"""Find the PPSSPP executable and the game image to run"""
import os
import sys
from typing import List, Optional

from ppsspp_runner import settings
from ppsspp_runner.config import EXECUTABLE_PATH, IMAGE_PATH, SCOPE_GLOBAL, SCOPE_WORKSPACE
from ppsspp_runner.util import system
from ppsspp_runner.util.log import logger

WINDOWS_CANDIDATES = [
    "C:\\Program Files\\PPSSPP\\PPSSPPWindows64.exe",
    "C:\\Program Files (x86)\\PPSSPP\\PPSSPPWindows.exe",
]

# SDL build first, then the regular app bundle
MACOS_CANDIDATES = [
    "/Applications/PPSSPPSDL.app/Contents/MacOS/PPSSPPSDL",
    "/Applications/PPSSPP.app/Contents/MacOS/PPSSPP",
]

LINUX_CANDIDATES = [
    "/usr/bin/ppsspp",
    "/usr/local/bin/ppsspp",
    "/usr/bin/PPSSPPSDL",
    "/usr/local/bin/PPSSPPSDL",
]


def get_executable_candidates(platform: Optional[str] = None) -> List[str]:
    """Return the well known install locations of PPSSPP for a platform,
    in the order they should be checked."""
    platform = platform or sys.platform
    if platform == "win32":
        return list(WINDOWS_CANDIDATES)
    if platform == "darwin":
        return list(MACOS_CANDIDATES)
    return list(LINUX_CANDIDATES)


class Locator:
    """Resolves the paths needed to launch a game.

    Discovered paths are saved to the configuration: the executable in the
    global scope, the image in the workspace scope. Nothing here raises when
    a path can't be found; None is returned instead.
    """

    def __init__(self, config, picker, platform=None):
        self.config = config
        self.picker = picker
        self.platform = platform

    def find_installed_executable(self) -> Optional[str]:
        """Return the first candidate location that exists"""
        for candidate in get_executable_candidates(self.platform):
            if system.path_exists(candidate):
                logger.info("Found PPSSPP at %s", candidate)
                return candidate
        return None

    def resolve_executable(self, configured_value: Optional[str] = None) -> Optional[str]:
        if configured_value:
            return configured_value

        executable = self.find_installed_executable()
        if not executable:
            logger.info("PPSSPP not found in default locations, asking the user")
            executable = self.picker.pick_file()
            if not executable:
                logger.info("PPSSPP executable selection cancelled")
                return None

        self.config.set(EXECUTABLE_PATH, executable, SCOPE_GLOBAL)
        return executable

    def resolve_image(self, workspace_root: Optional[str], configured_value: Optional[str] = None) -> Optional[str]:
        if configured_value:
            return configured_value

        if not workspace_root:
            logger.warning("No workspace open, can't look for %s", settings.IMAGE_FILENAME)
            return None

        image = os.path.join(workspace_root, settings.IMAGE_FILENAME)
        if not system.path_exists(image):
            logger.info("%s not found in %s", settings.IMAGE_FILENAME, workspace_root)
            return None

        self.config.set(IMAGE_PATH, image, SCOPE_WORKSPACE)
        return image
