"""Storage for command-line history."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable


class HistoryStorage(ABC):
    """Where a session keeps the commands it has seen."""

    @abstractmethod
    def store(self, commands: Iterable[str]) -> None:
        """Append ``commands`` to the storage."""

    @abstractmethod
    def commands(self) -> list[str]:
        """Return all the stored commands, oldest first."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored command."""


class VolatileHistoryStorage(HistoryStorage):
    """In-memory history keeping at most ``max_size`` recent commands."""

    def __init__(self, max_size: int = 1000) -> None:
        self.max_size = max_size
        self._commands: deque[str] = deque(maxlen=max_size)

    def store(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)

    def commands(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()