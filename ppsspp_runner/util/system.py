"""System utilities"""

import os
import subprocess
from typing import Dict, List

from ppsspp_runner.util.log import logger


def get_environment() -> Dict[str, str]:
    """Return a safe to use copy of the system's environment.
    Values starting with BASH_FUNC can cause issues when passed to a child."""
    return {key: value for key, value in os.environ.items() if not key.startswith("BASH_FUNC")}


def spawn_detached(command: List[str]) -> subprocess.Popen:
    """
    Start a program in its own session, with its standard streams bound
    to the null device, and return the Popen object without waiting for it.

    Raises:
        OSError: the system refused to start the program
    """
    logger.debug("Spawning %s", " ".join(command))
    return subprocess.Popen(  # pylint: disable=consider-using-with
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        env=get_environment(),
        start_new_session=True,
    )


def create_folder(path):
    """Creates a folder specified by path"""
    if not path:
        return
    path = os.path.expanduser(path)
    os.makedirs(path, exist_ok=True)
    return path


def path_exists(path: str) -> bool:
    """os.path.exists that accepts empty values and paths starting with '~'"""
    if not path:
        return False
    return os.path.exists(os.path.expanduser(path))
