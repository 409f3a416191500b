"""Replays alternating LSP database samples to exercise a peer."""

from __future__ import annotations

import threading
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass

from .utils import inc_sequence_num

_KEY_SUFFIX_LEN = 6
_TESTDB_SEQ_BUMP = 1000


@dataclass
class TesterStats:
    """Counters kept by a running tester."""

    cycles: int = 0


def send_db(lsdb: MutableMapping[str, bytes], send: Callable[[bytes], object]) -> None:
    """Send every LSP in ``lsdb`` and bump each stored sequence number by one."""
    for key, value in list(lsdb.items()):
        send(value)
        inc_sequence_num(lsdb, key, value, 1)


def build_test_samples(
    lsdb: MutableMapping[str, bytes], testdb: MutableMapping[str, bytes]
) -> tuple[dict[str, bytes], dict[str, bytes]]:
    """Build the two alternating samples from ``lsdb`` and ``testdb``.

    Each test LSP is first written into ``lsdb`` with its sequence number
    raised by 1000. The first sample holds those ``lsdb`` entries, the second
    the original test LSPs; both also hold every ``lsdb`` entry from the same
    system.
    """
    for key, value in list(testdb.items()):
        inc_sequence_num(lsdb, key, value, _TESTDB_SEQ_BUMP)

    sample1: dict[str, bytes] = {}
    sample2: dict[str, bytes] = {}
    for key, value in testdb.items():
        if len(key) < _KEY_SUFFIX_LEN:
            raise ValueError(f"LSP key {key!r} is too short")
        sample1.setdefault(key, lsdb.setdefault(key, b""))
        sample2.setdefault(key, value)
        system = key[:-_KEY_SUFFIX_LEN]
        for other_key, other_value in lsdb.items():
            if system in other_key:
                sample1.setdefault(other_key, other_value)
                sample2.setdefault(other_key, other_value)
    return sample1, sample2


class Tester:
    """Background thread that alternately sends two LSP samples."""

    def __init__(
        self,
        lsdb: MutableMapping[str, bytes],
        send: Callable[[bytes], object],
        state: Callable[[], bool],
        testdb: MutableMapping[str, bytes],
        test_interval: int,
    ) -> None:
        self.stats = TesterStats()
        self._lsdb = lsdb
        self._send = send
        self._state = state
        self._testdb = testdb
        self._interval = test_interval / 1000.0
        self._terminate = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        sample1, sample2 = build_test_samples(self._lsdb, self._testdb)
        while not self._terminate.is_set():
            sample = sample1 if self.stats.cycles % 2 else sample2
            if self._state():
                send_db(sample, self._send)
            self.stats.cycles += 1
            self._terminate.wait(self._interval)

    def stop(self) -> None:
        """Stop sending and wait for the thread to finish."""
        self._terminate.set()
        if self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> Tester:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()