"""Colour profile for prompts and user input."""

from __future__ import annotations

from .rang import ColorWriter, Control, Fg, FgB, Style


class _Profile:
    color = False


_profile = _Profile()


def set_color() -> None:
    """Enable colours for prompt and input."""
    _profile.color = True


def set_no_color() -> None:
    """Disable colours for prompt and input."""
    _profile.color = False


def color_enabled() -> bool:
    """Return whether colours are enabled."""
    return _profile.color


def before_prompt(writer: ColorWriter) -> ColorWriter:
    """Start the prompt colour: bold green when colours are enabled."""
    if _profile.color:
        writer.write(Control.FORCE_COLOR, Fg.GREEN, Style.BOLD)
    return writer


def after_prompt(writer: ColorWriter) -> ColorWriter:
    """Reset the attributes after the prompt."""
    return writer.write(Style.RESET)


def before_input(writer: ColorWriter) -> ColorWriter:
    """Start the input colour: bright gray when colours are enabled."""
    if _profile.color:
        writer.write(Control.FORCE_COLOR, FgB.GRAY)
    return writer


def after_input(writer: ColorWriter) -> ColorWriter:
    """Reset the attributes after the input."""
    return writer.write(Style.RESET)