"""Console keyboard input on Windows, decoded into key events."""

from __future__ import annotations

import threading
from collections.abc import Callable

from .inputdevice import InputDevice, Key, KeyType
from .scheduler import Scheduler

try:
    import msvcrt
except ImportError:  # only present on Windows
    msvcrt = None

_EOF_CODES = frozenset({-1, 4, 26, 3})
_SYMBOL = 224
_BACKSPACE = 8
_RETURN = 13
_SYMBOLS = {
    72: KeyType.UP,
    80: KeyType.DOWN,
    75: KeyType.LEFT,
    77: KeyType.RIGHT,
    71: KeyType.HOME,
    79: KeyType.END,
    83: KeyType.CANC,
}
_POLL_INTERVAL = 0.01


def decode_key(get_char: Callable[[], int]) -> Key:
    """Read one key using ``get_char``, which returns a console key code or -1.

    Ctrl-D, Ctrl-Z and Ctrl-C count as end of input.
    """
    code = get_char()
    if code in _EOF_CODES:
        return KeyType.EOF, " "
    if code == _SYMBOL:
        return _SYMBOLS.get(get_char(), KeyType.IGNORED), " "
    if code == _BACKSPACE:
        return KeyType.BACKSPACE, chr(code)
    if code == _RETURN:
        return KeyType.RET, chr(code)
    return KeyType.ASCII, chr(code)


class WinKeyboard(InputDevice):
    """Reads keys from the Windows console in a background thread."""

    def __init__(self, scheduler: Scheduler) -> None:
        if msvcrt is None:
            raise OSError("console keyboard input needs the Windows console")
        super().__init__(scheduler)
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._read, daemon=True)
        self._thread.start()

    @staticmethod
    def _get_char() -> int:
        return ord(msvcrt.getch())

    def _read(self) -> None:
        try:
            while not self._stop.is_set():
                if msvcrt.kbhit():
                    self.notify(decode_key(self._get_char))
                else:
                    self._stop.wait(_POLL_INTERVAL)
        except OSError:
            pass

    def close(self) -> None:
        """Stop reading and wait for the reader thread."""
        self._stop.set()
        self._thread.join()