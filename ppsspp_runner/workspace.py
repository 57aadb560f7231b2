"""Folders the runner was opened on"""
import os


class Workspace:
    """The ordered list of folders making up the current workspace."""

    def __init__(self, folders=None):
        self.folders = [os.path.abspath(os.path.expanduser(folder)) for folder in folders or [] if folder]

    def __repr__(self):
        return "Workspace(%s)" % ", ".join(self.folders)

    def first_root(self):
        """Return the first workspace folder, or None when no folder is open"""
        if not self.folders:
            return None
        return self.folders[0]
