import io
import sys

import pytest

from isismock.rang import (
    Bg,
    ColorWriter,
    Control,
    Fg,
    Style,
    is_terminal,
    supports_color,
)


class _FakeTty(io.StringIO):
    def isatty(self):
        return True


@pytest.mark.parametrize("term", ["xterm", "xterm-256color", "screen", "linux"])
def test_supports_color_known_terms(monkeypatch, term):
    monkeypatch.setattr("os.name", "posix")
    monkeypatch.setenv("TERM", term)
    assert supports_color() is True


def test_supports_color_unknown_term(monkeypatch):
    monkeypatch.setattr("os.name", "posix")
    monkeypatch.setenv("TERM", "dumb")
    assert supports_color() is False


def test_supports_color_without_term(monkeypatch):
    monkeypatch.setattr("os.name", "posix")
    monkeypatch.delenv("TERM", raising=False)
    assert supports_color() is False


def test_is_terminal_false_for_plain_buffer():
    assert is_terminal(io.StringIO()) is False


def test_is_terminal_false_for_non_standard_tty():
    assert is_terminal(_FakeTty()) is False


def test_is_terminal_true_for_stdout_tty(monkeypatch):
    fake = _FakeTty()
    monkeypatch.setattr(sys, "stdout", fake)
    assert is_terminal(fake) is True


def test_attributes_dropped_when_not_terminal():
    out = io.StringIO()
    ColorWriter(out).write(Fg.GREEN, "hello", Style.RESET)
    assert out.getvalue() == "hello"


def test_force_color_emits_escape():
    out = io.StringIO()
    ColorWriter(out).write(Control.FORCE_COLOR, Fg.GREEN)
    assert out.getvalue() == "\x1b[32m"


def test_auto_color_turns_forcing_off():
    out = io.StringIO()
    writer = ColorWriter(out)
    writer.write(Control.FORCE_COLOR, Control.AUTO_COLOR, Bg.RED, "x")
    assert out.getvalue() == "x"
    assert writer.forced is False


def test_write_returns_writer_and_keeps_order():
    out = io.StringIO()
    writer = ColorWriter(out)
    result = writer.write("a", 1, "b")
    assert result is writer
    assert out.getvalue() == "a1b"


def test_terminal_with_color_support_emits(monkeypatch):
    monkeypatch.setattr("os.name", "posix")
    monkeypatch.setenv("TERM", "xterm")
    fake = _FakeTty()
    monkeypatch.setattr(sys, "stdout", fake)
    ColorWriter(fake).write(Style.RESET)
    assert fake.getvalue() == "\x1b[0m"


def test_forced_escape_contains_enum_value():
    out = io.StringIO()
    ColorWriter(out).write(Control.FORCE_COLOR, Bg.CYAN)
    value = out.getvalue()
    assert value.startswith("\x1b[") and value.endswith("m")
    assert int(value[2:-1]) == Bg.CYAN