"""Internal settings."""

import os

from gi.repository import GLib

from ppsspp_runner import __version__

PROJECT = "PPSSPP Runner"
VERSION = __version__
APPLICATION_ID = "org.ppsspp.Runner"

# Paths
CONFIG_DIR = os.path.join(GLib.get_user_config_dir(), "ppsspp-runner")
CONFIG_FILE = os.path.join(CONFIG_DIR, "ppsspp-runner.yml")

# Per workspace settings, stored at the root of the workspace folder
WORKSPACE_SETTINGS_FILENAME = "ppsspp-runner.json"

# Game image expected at the root of the workspace
IMAGE_FILENAME = "EBOOT.PBP"

RUNNING_FLAG = "running"
