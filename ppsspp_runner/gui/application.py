# pylint: disable=wrong-import-position
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import signal
from gettext import gettext as _

import gi

gi.require_version("Gdk", "3.0")
gi.require_version("Gtk", "3.0")

from gi.repository import Gio, GLib, Gtk

from ppsspp_runner import settings
from ppsspp_runner.actions import RunnerActions
from ppsspp_runner.commands import RunnerCommands
from ppsspp_runner.config import RunnerConfig
from ppsspp_runner.context import ContextFlags
from ppsspp_runner.gui.dialogs import ExecutablePicker
from ppsspp_runner.gui.notifications import DesktopNotifier
from ppsspp_runner.gui.status_icon import RunnerStatusIcon
from ppsspp_runner.locator import Locator
from ppsspp_runner.supervisor import EmulatorSupervisor
from ppsspp_runner.util import log
from ppsspp_runner.util.log import logger
from ppsspp_runner.workspace import Workspace


class Application(Gtk.Application):
    def __init__(self):
        super().__init__(
            application_id=settings.APPLICATION_ID,
            flags=Gio.ApplicationFlags.HANDLES_COMMAND_LINE,
        )
        GLib.set_application_name(_("PPSSPP Runner"))

        self.flags = None
        self.notifier = None
        self.status_icon = None
        self.supervisor = None
        self.commands = None
        self.actions = None

        self.add_arguments()

    def add_arguments(self):
        self.set_option_context_summary(
            _(
                "Launch PPSSPP on the EBOOT.PBP found at the root of the workspace.\n"
                "Run again with --stop to stop the running emulator."
            )
        )
        self.add_main_option(
            "workspace",
            ord("w"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.STRING_ARRAY,
            _("Workspace folder, defaults to the current directory"),
            _("DIRECTORY"),
        )
        self.add_main_option(
            "stop",
            ord("s"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.NONE,
            _("Stop the running emulator"),
            None,
        )
        self.add_main_option(
            "debug",
            ord("d"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.NONE,
            _("Show debug messages"),
            None,
        )
        self.add_main_option(
            "version",
            ord("v"),
            GLib.OptionFlags.NONE,
            GLib.OptionArg.NONE,
            _("Print the version and exit"),
            None,
        )

    def do_startup(self):  # pylint: disable=arguments-differ
        """Sets up the application on first start."""
        Gtk.Application.do_startup(self)
        signal.signal(signal.SIGINT, signal.SIG_DFL)

        run_action = Gio.SimpleAction.new("run")
        run_action.connect("activate", lambda *x: self.on_run())
        self.add_action(run_action)

        stop_action = Gio.SimpleAction.new("stop")
        stop_action.connect("activate", lambda *x: self.on_stop())
        self.add_action(stop_action)

        self.flags = ContextFlags()
        self.notifier = DesktopNotifier(application=self)
        self.status_icon = RunnerStatusIcon(application=self)
        self.supervisor = EmulatorSupervisor(self.status_icon, self.notifier, self.flags)
        self.commands = self.get_commands(Workspace([GLib.get_current_dir()]))
        self.actions = RunnerActions(self, self.supervisor, run_action, stop_action)
        self.flags.connect(self.actions.on_flag_changed)

        self.flags.set_flag(settings.RUNNING_FLAG, False)
        self.actions.update_actions(False)

    def do_activate(self):  # pylint: disable=arguments-differ
        pass

    def do_command_line(self, command_line):  # pylint: disable=arguments-differ
        options = command_line.get_options_dict()

        if options.contains("debug"):
            log.enable_debug()

        if options.contains("version"):
            command_line.print_("%s %s\n" % (settings.PROJECT, settings.VERSION))
            return 0

        if options.contains("stop"):
            return 0 if self.on_stop() else 1

        if options.contains("workspace"):
            folders = options.lookup_value("workspace").get_strv()
        else:
            folders = [command_line.get_cwd()]

        self.commands = self.get_commands(Workspace(folders))
        return 0 if self.on_run() else 1

    def get_commands(self, workspace):
        """Return command handlers working on a workspace, sharing the
        application's single supervisor."""
        logger.debug("Using workspace %s", workspace)
        config = RunnerConfig(workspace=workspace)
        locator = Locator(config, ExecutablePicker(default_path=workspace.first_root()))
        return RunnerCommands(config, locator, self.supervisor, self.notifier, self.flags)

    def on_run(self):
        return self.actions.run(self.commands)

    def on_stop(self):
        return self.actions.stop(self.commands)

    def do_shutdown(self):  # pylint: disable=arguments-differ
        logger.info("Shutting down %s", settings.PROJECT)
        if self.supervisor:
            self.supervisor.shutdown()
        Gtk.Application.do_shutdown(self)
