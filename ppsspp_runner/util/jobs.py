"""Callbacks run on the GLib main loop"""
from typing import Callable

from gi.repository import GLib  # type: ignore


def schedule_at_idle(func: Callable[..., None], *args) -> int:
    """Run func(*args) once, the next time the main loop is idle.
    Returns the GLib source id."""

    def wrapper(*a) -> bool:
        func(*a)
        return False

    return GLib.idle_add(wrapper, *args)


def watch_child(pid: int, func: Callable[..., None], *args) -> int:
    """Call func(pid, status, *args) on the main loop once the child process
    'pid' has terminated. GLib reaps the child.
    Returns the GLib source id."""
    return GLib.child_watch_add(GLib.PRIORITY_DEFAULT, pid, func, *args)
