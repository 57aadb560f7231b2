"""Handle the global and workspace configurations."""

import json
import os

import yaml

from ppsspp_runner import settings
from ppsspp_runner.util.log import logger
from ppsspp_runner.util.system import create_folder
from ppsspp_runner.workspace import Workspace

SCOPE_GLOBAL = "global"
SCOPE_WORKSPACE = "workspace"

# Section of the global YAML file holding the runner options
CONFIG_SECTION = "ppsspp"

EXECUTABLE_PATH = "executable_path"
IMAGE_PATH = "image_path"


def write_atomically(path, content):
    """Replace the file at 'path' with 'content', leaving the old file in
    place if anything goes wrong."""
    temp_path = path + ".tmp"
    try:
        with open(temp_path, "w", encoding="utf-8") as temp_file:
            temp_file.write(content)
        os.rename(temp_path, path)
    finally:
        if os.path.isfile(temp_path):
            os.unlink(temp_path)


def read_global_config(path):
    """Return the whole global YAML document; a missing or broken file gives
    an empty one."""
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as config_file:
            content = yaml.safe_load(config_file) or {}
    except (OSError, yaml.YAMLError) as ex:
        logger.error("Failed to read %s: %s", path, ex)
        return {}
    if not isinstance(content, dict):
        logger.error("'%s' does not contain a mapping, and will be ignored.", path)
        return {}
    return content


def read_workspace_config(directory):
    """Return the settings stored in a workspace folder; missing, unreadable
    or invalid files give an empty dict."""
    if not directory:
        return {}
    path = os.path.join(directory, settings.WORKSPACE_SETTINGS_FILENAME)
    if not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as settings_file:
            content = json.load(settings_file)
    except (OSError, ValueError) as ex:
        logger.error("Failed to read %s: %s", path, ex)
        return {}
    if not isinstance(content, dict):
        logger.error("'%s' does not contain a dict, and will be ignored.", path)
        return {}
    return content


class RunnerConfig:
    """Class where all the configuration handling happens.

    The configuration cascades over two levels, each higher level overriding
    the lower one:

      workspace | `ppsspp-runner.json` at the root of the first workspace folder
         global | `ppsspp-runner.yml` in the user configuration directory

    Read values with `get()`; the cascaded values are kept in `config`.
    Write with `set()`, naming the scope the value belongs to. Writes are
    done immediately and never raise: a failure is logged and `set()`
    returns False.
    """

    def __init__(self, workspace=None, config_path=None):
        self.workspace = workspace or Workspace()
        self.config_path = config_path or settings.CONFIG_FILE

        self.global_level = {CONFIG_SECTION: {}}
        self.workspace_level = {}
        self.config = {}

        self.load()

    def __repr__(self):
        return "RunnerConfig(config_path=%s, workspace=%s)" % (self.config_path, self.workspace_dir)

    @property
    def workspace_dir(self):
        return self.workspace.first_root()

    def load(self):
        """Read both configuration levels from disk"""
        self.global_level = {CONFIG_SECTION: {}}
        self.global_level.update(read_global_config(self.config_path))
        if not isinstance(self.global_level.get(CONFIG_SECTION), dict):
            self.global_level[CONFIG_SECTION] = {}
        self.workspace_level = read_workspace_config(self.workspace_dir)
        self.update_cascaded_config()

    def update_cascaded_config(self):
        self.config.clear()
        self.config.update(self.global_level[CONFIG_SECTION])
        self.config.update(self.workspace_level)

    def get(self, key, default=None):
        """Return the value of a setting; unset and empty values give `default`"""
        value = self.config.get(key)
        if value is None or value == "":
            return default
        return str(value)

    def set(self, key, value, scope=SCOPE_GLOBAL):
        """Save a setting in the given scope. Returns whether it was written."""
        if scope == SCOPE_WORKSPACE:
            saved = self._save_workspace_setting(key, value)
        elif scope == SCOPE_GLOBAL:
            saved = self._save_global_setting(key, value)
        else:
            raise ValueError("Invalid configuration scope: %s" % scope)
        if saved:
            logger.debug("Saved %s=%s in %s configuration", key, value, scope)
            self.update_cascaded_config()
        return saved

    def _save_global_setting(self, key, value):
        raw_config = dict(self.global_level)
        raw_config[CONFIG_SECTION] = dict(self.global_level[CONFIG_SECTION], **{key: value})
        try:
            create_folder(os.path.dirname(self.config_path))
            write_atomically(self.config_path, yaml.safe_dump(raw_config, default_flow_style=False))
        except (OSError, yaml.YAMLError) as ex:
            logger.error("Could not save %s to %s: %s", key, self.config_path, ex)
            return False
        self.global_level = raw_config
        return True

    def _save_workspace_setting(self, key, value):
        if not self.workspace_dir:
            logger.warning("No workspace folder open, %s not saved", key)
            return False
        # Merge into the file as it is now, keeping keys written by others
        workspace_level = read_workspace_config(self.workspace_dir)
        workspace_level[key] = value
        path = os.path.join(self.workspace_dir, settings.WORKSPACE_SETTINGS_FILENAME)
        try:
            write_atomically(path, json.dumps(workspace_level, indent=2))
        except (OSError, TypeError, ValueError) as ex:
            logger.error("Could not save %s to %s: %s", key, path, ex)
            return False
        self.workspace_level = workspace_level
        return True
