"""Key events and the base class for devices that produce them."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto

from .scheduler import Scheduler


class KeyType(Enum):
    """Kind of key read from an input device."""

    ASCII = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    BACKSPACE = auto()
    CANC = auto()
    HOME = auto()
    END = auto()
    RET = auto()
    EOF = auto()
    IGNORED = auto()


Key = tuple[KeyType, str]
KeyHandler = Callable[[Key], object]


class InputDevice:
    """Source of key events, delivered to a handler through a scheduler.

    Keys are ``(KeyType, str)`` pairs. The handler runs on the thread that
    drives the scheduler, and is looked up when the task runs, not when the
    key is notified.
    """

    def __init__(self, scheduler: Scheduler) -> None:
        self._scheduler = scheduler
        self._handler: KeyHandler | None = None

    def register(self, handler: KeyHandler | None) -> None:
        """Set the function that receives every key."""
        self._handler = handler

    def _deliver(self, key: Key) -> None:
        if self._handler is not None:
            self._handler(key)

    def notify(self, key: Key) -> None:
        """Schedule delivery of ``key`` to the registered handler."""
        self._scheduler.post(lambda: self._deliver(key))