"""Dialogs asking the user for input"""
import os
from gettext import gettext as _

from gi.repository import Gtk


class FileDialog:
    """Ask the user to select a file."""

    def __init__(self, message=None, default_path=None, accept_label=None, parent=None):
        self.filename = None
        if not message:
            message = _("Please choose a file")
        dialog = Gtk.FileChooserNative.new(
            message,
            parent,
            Gtk.FileChooserAction.OPEN,
            accept_label or _("_OK"),
            _("_Cancel"),
        )
        if default_path and os.path.exists(default_path):
            dialog.set_current_folder(default_path)
        response = dialog.run()
        if response == Gtk.ResponseType.ACCEPT:
            self.filename = dialog.get_filename()

        dialog.destroy()


class ExecutablePicker:
    """Lets the user point at the PPSSPP executable when it wasn't found"""

    def __init__(self, parent=None, default_path=None):
        self.parent = parent
        self.default_path = default_path

    def pick_file(self):
        dialog = FileDialog(
            _("Select PPSSPP executable"),
            default_path=self.default_path,
            accept_label=_("_Select"),
            parent=self.parent,
        )
        return dialog.filename
