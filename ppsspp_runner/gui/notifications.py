from gi.repository import Gio

from ppsspp_runner import settings
from ppsspp_runner.util.log import logger


class DesktopNotifier:
    """Notification channel; every message is logged, then sent as a desktop
    notification through the application, if there is one."""

    def __init__(self, application=None):
        self.application = application

    def info(self, text):
        logger.info(text)
        self.send_notification(text, Gio.NotificationPriority.NORMAL)

    def warn(self, text):
        logger.warning(text)
        self.send_notification(text, Gio.NotificationPriority.NORMAL)

    def error(self, text):
        logger.error(text)
        self.send_notification(text, Gio.NotificationPriority.HIGH)

    def send_notification(self, text, priority):
        application = self.application or Gio.Application.get_default()
        if not application:
            return
        notification = Gio.Notification.new(settings.PROJECT)
        notification.set_body(text)
        notification.set_priority(priority)
        application.send_notification(None, notification)
