import io

import pytest

from isismock.colorprofile import (
    after_input,
    after_prompt,
    before_input,
    before_prompt,
    color_enabled,
    set_color,
    set_no_color,
)
from isismock.rang import ColorWriter


@pytest.fixture(autouse=True)
def _reset_color():
    set_no_color()
    yield
    set_no_color()


@pytest.fixture
def buffer():
    return io.StringIO()


def test_color_disabled_by_default():
    assert color_enabled() is False


def test_set_color_and_back():
    set_color()
    assert color_enabled() is True
    set_no_color()
    assert color_enabled() is False


def test_before_prompt_without_color_writes_nothing(buffer):
    writer = ColorWriter(buffer)
    assert before_prompt(writer) is writer
    assert buffer.getvalue() == ""


def test_before_prompt_with_color(buffer):
    set_color()
    before_prompt(ColorWriter(buffer))
    assert buffer.getvalue() == "\x1b[32m\x1b[1m"


def test_before_input_with_color(buffer):
    set_color()
    before_input(ColorWriter(buffer))
    assert buffer.getvalue() == "\x1b[97m"


def test_before_input_without_color_writes_nothing(buffer):
    before_input(ColorWriter(buffer))
    assert buffer.getvalue() == ""


def test_after_prompt_on_plain_stream_writes_nothing(buffer):
    writer = ColorWriter(buffer)
    assert after_prompt(writer) is writer
    assert buffer.getvalue() == ""


def test_after_input_resets_once_forced(buffer):
    set_color()
    writer = ColorWriter(buffer)
    before_input(writer)
    start = len(buffer.getvalue())
    after_input(writer)
    assert buffer.getvalue()[start:] == "\x1b[0m"


def test_prompt_reset_matches_input_reset(buffer):
    set_color()
    writer = ColorWriter(buffer)
    before_prompt(writer)
    mark = len(buffer.getvalue())
    after_prompt(writer)
    prompt_reset = buffer.getvalue()[mark:]
    mark = len(buffer.getvalue())
    after_input(writer)
    assert buffer.getvalue()[mark:] == prompt_reset
    assert prompt_reset.startswith("\x1b[")