"""Split a command line into words, honouring quotes and backslash escapes."""

from __future__ import annotations

from enum import Enum, auto

_BLANKS = frozenset(" \t\n")
_QUOTES = frozenset("\"'")


class _State(Enum):
    SPACE = auto()
    WORD = auto()
    SENTENCE = auto()
    ESCAPE = auto()


class _Splitter:
    """State machine that turns one input line into a list of words."""

    def __init__(self) -> None:
        self.state = _State.SPACE
        self.prev_state = _State.SPACE
        self.quote = '"'
        self.words: list[str] = []

    def feed(self, char: str) -> None:
        handler = {
            _State.SPACE: self._space,
            _State.WORD: self._word,
            _State.SENTENCE: self._sentence,
            _State.ESCAPE: self._escape,
        }[self.state]
        handler(char)

    def _new_sentence(self, char: str) -> None:
        self.state = _State.SENTENCE
        self.quote = char
        self.words.append("")

    def _space(self, char: str) -> None:
        if char in _BLANKS:
            return
        if char in _QUOTES:
            self._new_sentence(char)
        elif char == "\\":
            # An escaped first character: resume in the word state afterwards.
            self.prev_state = _State.WORD
            self.state = _State.ESCAPE
            self.words.append("")
        else:
            self.state = _State.WORD
            self.words.append(char)

    def _word(self, char: str) -> None:
        if char in _BLANKS:
            self.state = _State.SPACE
        elif char in _QUOTES:
            self._new_sentence(char)
        elif char == "\\":
            self.prev_state = self.state
            self.state = _State.ESCAPE
        else:
            self.words[-1] += char

    def _sentence(self, char: str) -> None:
        if char in _QUOTES:
            if char == self.quote:
                self.state = _State.SPACE
            else:
                self.words[-1] += char
        elif char == "\\":
            self.prev_state = self.state
            self.state = _State.ESCAPE
        else:
            self.words[-1] += char

    def _escape(self, char: str) -> None:
        if char not in _QUOTES and char != "\\":
            self.words[-1] += "\\"
        self.words[-1] += char
        self.state = self.prev_state


def split(text: str) -> list[str]:
    """Split ``text`` on blanks; quoted parts stay whole and may be escaped.

    Single or double quotes group words containing blanks. A backslash
    escapes a following quote or backslash; before any other character it
    is kept as is. Empty words are dropped.
    """
    splitter = _Splitter()
    for char in text:
        splitter.feed(char)
    return [word for word in splitter.words if word]