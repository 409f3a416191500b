"""Schedulers that run posted tasks on the thread that drives them."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable

Task = Callable[[], object]


class Scheduler(ABC):
    """An engine that runs submitted tasks.

    ``post`` may be called from any thread; the task runs later, never
    inside the call to ``post`` itself.
    """

    @abstractmethod
    def post(self, task: Task) -> None:
        """Submit ``task`` for execution as soon as possible."""


class QueueScheduler(Scheduler):
    """Thread-safe task queue run by whichever thread calls ``run``.

    ``run`` keeps waiting for work until ``stop`` is called. An exception
    raised by a task propagates out of ``run``, ``exec_one`` or ``poll_one``;
    the scheduler can then be run again.
    """

    def __init__(self) -> None:
        self._tasks: deque[Task] = deque()
        self._cond = threading.Condition()
        self._stopped = False

    def post(self, task: Task) -> None:
        with self._cond:
            self._tasks.append(task)
            self._cond.notify()

    def stop(self) -> None:
        """Stop the scheduler; running loops return as soon as possible."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def stopped(self) -> bool:
        """Return whether ``stop`` has been called."""
        with self._cond:
            return self._stopped

    def _next(self, block: bool) -> Task | None:
        with self._cond:
            while block and not self._stopped and not self._tasks:
                self._cond.wait()
            if self._stopped or not self._tasks:
                return None
            return self._tasks.popleft()

    def run(self) -> None:
        """Run tasks until the scheduler is stopped."""
        while (task := self._next(block=True)) is not None:
            task()

    def exec_one(self) -> bool:
        """Wait for one task and run it. Return False if stopped instead."""
        task = self._next(block=True)
        if task is None:
            return False
        task()
        return True

    def poll_one(self) -> bool:
        """Run one task if one is ready, without waiting. Return whether one ran."""
        task = self._next(block=False)
        if task is None:
            return False
        task()
        return True