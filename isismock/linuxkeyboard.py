"""Raw keyboard input from a POSIX terminal, decoded into key events."""

from __future__ import annotations

import os
import select
import threading
from collections.abc import Callable

from .inputdevice import InputDevice, Key, KeyType
from .scheduler import Scheduler

try:
    import termios
except ImportError:  # not available on every platform
    termios = None

_EOF_CODES = frozenset({-1, 4, 0xFF})
_BACKSPACE_CODES = frozenset({127, 8})
_RETURN = 10
_ESCAPE = 27
_BRACKET = 91
_CANC_LEAD = 51
_TILDE = 126
_ARROWS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


def decode_key(get_char: Callable[[], int]) -> Key:
    """Read one key using ``get_char``, which returns a byte or -1 at end of input.

    Escape sequences for arrows, home, end and delete are recognised; a byte
    of 0xFF, like -1, counts as end of input.
    """
    ch = get_char()
    if ch in _EOF_CODES:
        return KeyType.EOF, " "
    if ch in _BACKSPACE_CODES:
        return KeyType.BACKSPACE, " "
    if ch == _RETURN:
        return KeyType.RET, " "
    if ch == _ESCAPE:
        if get_char() != _BRACKET:
            return KeyType.IGNORED, " "
        code = get_char()
        if code == _CANC_LEAD:
            if get_char() == _TILDE:
                return KeyType.CANC, " "
            return KeyType.IGNORED, " "
        return _ARROWS.get(code, KeyType.IGNORED), " "
    return KeyType.ASCII, chr(ch)


class InputSource:
    """Waits until a file descriptor is readable or the wait is stopped."""

    def __init__(self, fd: int = 0) -> None:
        self._fd = fd
        self._read_pipe, self._write_pipe = os.pipe()
        self._read_open = True
        self._write_open = True

    def wait_kb_hit(self) -> None:
        """Block until input is ready; raise RuntimeError once stopped."""
        ready, _, _ = select.select([self._fd, self._read_pipe], [], [])
        if self._read_pipe in ready:
            self._close_read()
            raise RuntimeError("InputSource stop")

    def stop(self) -> None:
        """Wake any waiter and make every later wait raise."""
        if self._write_open:
            os.write(self._write_pipe, b" ")
            os.close(self._write_pipe)
            self._write_open = False

    def _close_read(self) -> None:
        if self._read_open:
            os.close(self._read_pipe)
            self._read_open = False


class LinuxKeyboard(InputDevice):
    """Reads keys from ``fd`` in a background thread.

    A terminal is switched to non-canonical mode without echo while the
    keyboard is open. Reading stops after end of input or on ``close``.
    """

    def __init__(self, scheduler: Scheduler, fd: int = 0) -> None:
        super().__init__(scheduler)
        self._fd = fd
        self._source = InputSource(fd)
        self._saved_mode: list | None = None
        self._at_end = False
        self._closed = False
        self._to_manual_mode()
        self._thread = threading.Thread(target=self._read, daemon=True)
        self._thread.start()

    def _to_manual_mode(self) -> None:
        if termios is None:
            return
        try:
            old = termios.tcgetattr(self._fd)
        except termios.error:
            return
        self._saved_mode = old
        new = list(old)
        new[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self._fd, termios.TCSANOW, new)

    def _to_standard_mode(self) -> None:
        if termios is not None and self._saved_mode is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved_mode)
            self._saved_mode = None

    def _get_char(self) -> int:
        try:
            data = os.read(self._fd, 1)
        except OSError:
            data = b""
        if not data:
            self._at_end = True
            return -1
        return data[0]

    def _read(self) -> None:
        try:
            while not self._at_end:
                self._source.wait_kb_hit()
                self.notify(decode_key(self._get_char))
        except (RuntimeError, OSError):
            pass

    def close(self) -> None:
        """Restore the terminal, stop reading and wait for the reader thread."""
        if self._closed:
            return
        self._closed = True
        self._to_standard_mode()
        self._source.stop()
        self._thread.join()
        self._source._close_read()

    def __enter__(self) -> LinuxKeyboard:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()