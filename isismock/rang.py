"""ANSI colours and styles for terminal output."""

from __future__ import annotations

import os
import sys
from enum import IntEnum
from typing import TextIO

_COLOR_TERMS = (
    "ansi", "color", "console", "cygwin", "gnome", "konsole", "kterm",
    "linux", "msys", "putty", "rxvt", "screen", "vt100", "xterm",
)


class Style(IntEnum):
    """Text attributes."""

    RESET = 0
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    RBLINK = 6
    REVERSED = 7
    CONCEAL = 8
    CROSSED = 9


class Fg(IntEnum):
    """Foreground colours."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37
    RESET = 39


class Bg(IntEnum):
    """Background colours."""

    BLACK = 40
    RED = 41
    GREEN = 42
    YELLOW = 43
    BLUE = 44
    MAGENTA = 45
    CYAN = 46
    GRAY = 47
    RESET = 49


class FgB(IntEnum):
    """Bright foreground colours."""

    BLACK = 90
    RED = 91
    GREEN = 92
    YELLOW = 93
    BLUE = 94
    MAGENTA = 95
    CYAN = 96
    GRAY = 97


class BgB(IntEnum):
    """Bright background colours."""

    BLACK = 100
    RED = 101
    GREEN = 102
    YELLOW = 103
    BLUE = 104
    MAGENTA = 105
    CYAN = 106
    GRAY = 107


class Control(IntEnum):
    """Whether colours are emitted only on colour terminals or always."""

    AUTO_COLOR = 0
    FORCE_COLOR = 1


_ATTRIBUTES = (Style, Fg, Bg, FgB, BgB)


def supports_color() -> bool:
    """Return whether the TERM environment variable names a colour terminal."""
    if os.name == "nt":
        return True
    term = os.environ.get("TERM")
    if term is None:
        return False
    return any(name in term for name in _COLOR_TERMS)


def is_terminal(stream: object) -> bool:
    """Return whether ``stream`` is standard output or error attached to a terminal."""
    standard = (sys.stdout, sys.__stdout__, sys.stderr, sys.__stderr__)
    if not any(stream is s for s in standard if s is not None):
        return False
    try:
        return bool(stream.isatty())  # type: ignore[attr-defined]
    except (AttributeError, ValueError, OSError):
        return False


class ColorWriter:
    """Writes text and colour attributes to a stream.

    Attributes are emitted as ANSI escape sequences when colours are forced
    on this writer, or when the terminal supports colours and the stream is a
    terminal; otherwise they are dropped.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.forced = False

    def _colors_on(self) -> bool:
        return self.forced or (supports_color() and is_terminal(self.stream))

    def write(self, *args: object) -> ColorWriter:
        """Write each argument in turn and return the writer."""
        for arg in args:
            if isinstance(arg, Control):
                self.forced = arg is Control.FORCE_COLOR
            elif isinstance(arg, _ATTRIBUTES):
                if self._colors_on():
                    self.stream.write(f"\033[{int(arg)}m")
            else:
                self.stream.write(str(arg))
        return self