"""Application wide logger, writing to the console and to a log file in the
user's cache directory."""
import logging
import logging.handlers
import os
import sys

from gi.repository import GLib

LOG_DIR = os.path.join(GLib.get_user_cache_dir(), "ppsspp-runner")
LOG_FILENAME = os.path.join(LOG_DIR, "ppsspp-runner.log")

CONSOLE_FORMATTER = logging.Formatter("%(asctime)s: %(message)s")
DEBUG_FORMATTER = logging.Formatter(
    "%(levelname)-8s %(asctime)s [%(module)s.%(funcName)s:%(lineno)s]: %(message)s"
)


def get_file_handler():
    """Return a handler keeping the last few emulator sessions on disk"""
    os.makedirs(LOG_DIR, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        LOG_FILENAME, maxBytes=1048576, backupCount=2, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter("[%(levelname)s:%(asctime)s:%(module)s]: %(message)s"))
    return handler


logger = logging.getLogger("ppsspp_runner")
logger.setLevel(logging.INFO)
logger.addHandler(get_file_handler())

console_handler = logging.StreamHandler(stream=sys.stdout)
console_handler.setFormatter(CONSOLE_FORMATTER)
logger.addHandler(console_handler)


def enable_debug():
    """Show debug messages on the console, along with where they come from"""
    console_handler.setFormatter(DEBUG_FORMATTER)
    logger.setLevel(logging.DEBUG)
