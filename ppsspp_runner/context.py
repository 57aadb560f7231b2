"""Boolean flags describing the state of the runner, used to enable commands"""
from ppsspp_runner.util.jobs import schedule_at_idle
from ppsspp_runner.util.log import logger


class ContextFlags:
    """Named boolean flags. Listeners added with connect() are called with
    (name, value) for every change, at idle time on the main loop, in the
    order the flags were set."""

    def __init__(self):
        self._flags = {}
        self._listeners = []
        self._pending = []

    def __contains__(self, name):
        return name in self._flags

    def connect(self, callback):
        self._listeners.append(callback)

    def get_flag(self, name):
        return self._flags.get(name, False)

    def set_flag(self, name, value):
        value = bool(value)
        logger.debug("Context flag %s set to %s", name, value)
        self._flags[name] = value
        if self._listeners:
            self._pending.append((name, value))
            schedule_at_idle(self._notify)

    def _notify(self):
        while self._pending:
            name, value = self._pending.pop(0)
            for callback in self._listeners:
                callback(name, value)
