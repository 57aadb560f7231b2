"""AppIndicator based tray icon"""
from gettext import gettext as _

import gi
from gi.repository import Gdk, Gtk

from ppsspp_runner import settings
from ppsspp_runner.util import cache_single

try:
    gi.require_version("AppIndicator3", "0.1")
    from gi.repository import AppIndicator3 as AppIndicator

    APP_INDICATOR_SUPPORTED = True
except (ImportError, ValueError):
    APP_INDICATOR_SUPPORTED = False

STATUS_TEXT = _("PPSSPP running (click to stop)")


@cache_single
def supports_status_icon():
    if APP_INDICATOR_SUPPORTED:
        return True

    display = Gdk.Display.get_default()
    return "x11" in type(display).__name__.casefold()


class RunnerStatusIcon:
    """This is a proxy for the status icon, which can be an AppIndicator or a Gtk.StatusIcon. Or if
    neither is supported, it can be a null object that silently does nothing.

    The icon is only shown while the emulator runs; clicking it stops the emulator."""

    def __init__(self, application):
        self.application = application
        self.indicator = None
        self.tray_icon = None
        self.menu = None

        if supports_status_icon():
            self.menu = self._get_menu()
            if APP_INDICATOR_SUPPORTED:
                self.indicator = AppIndicator.Indicator.new(
                    settings.APPLICATION_ID, "media-playback-start", AppIndicator.IndicatorCategory.APPLICATION_STATUS
                )
                self.indicator.set_title(STATUS_TEXT)
                self.indicator.set_menu(self.menu)
            else:
                self.tray_icon = self._get_tray_icon()
                self.tray_icon.connect("activate", self.on_activate)
                self.tray_icon.connect("popup-menu", self.on_menu_popup)

        self.hide()

    def is_visible(self):
        """Whether the icon is visible"""
        if self.indicator:
            return self.indicator.get_status() != AppIndicator.IndicatorStatus.PASSIVE

        if self.tray_icon:
            return self.tray_icon.get_visible()

        return False

    def set_visible(self, value):
        """Set the visibility of the icon"""
        if self.indicator:
            if value:
                visible = AppIndicator.IndicatorStatus.ACTIVE
            else:
                visible = AppIndicator.IndicatorStatus.PASSIVE
            self.indicator.set_status(visible)
        elif self.tray_icon:
            self.tray_icon.set_visible(value)

    def show(self):
        self.set_visible(True)

    def hide(self):
        self.set_visible(False)

    def _get_menu(self):
        """Instantiates the menu attached to the tray icon"""
        menu = Gtk.Menu()
        stop_menu = Gtk.MenuItem()
        stop_menu.set_label(_("Stop PPSSPP"))
        stop_menu.connect("activate", self.on_activate)
        menu.append(stop_menu)
        menu.show_all()
        return menu

    def _get_tray_icon(self):
        tray_icon = Gtk.StatusIcon()
        tray_icon.set_tooltip_text(STATUS_TEXT)
        tray_icon.set_from_icon_name("media-playback-start")
        return tray_icon

    def on_activate(self, _widget, _data=None):
        """Callback to stop the emulator"""
        self.application.activate_action("stop", None)

    def on_menu_popup(self, _status_icon, button, time):
        """Callback to show the contextual menu"""
        self.menu.popup(None, None, None, None, button, time)
