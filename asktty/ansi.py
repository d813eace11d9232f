"""Iteration over strings that may contain ANSI escape sequences."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Union


@dataclass(frozen=True)
class AnsiEscapeSequence:
    """A complete ANSI escape sequence found in a string."""

    text: str

    def __str__(self) -> str:
        return self.text


AnsiAwareChar = Union[AnsiEscapeSequence, str]

_ESC = 0x1B
_STRING_INTRODUCERS = frozenset({0x5D, 0x50, 0x58, 0x5E, 0x5F})
_STRING_TERMINATORS = frozenset({0x07, 0x9C})


class _State(Enum):
    ESCAPE = auto()
    CSI_ENTRY = auto()
    ESCAPE_INTERMEDIATE = auto()
    STRING = auto()


def _is_escape_final(code: int) -> bool:
    return (
        0x30 <= code <= 0x4F
        or 0x51 <= code <= 0x57
        or code in (0x59, 0x5A, 0x5C)
        or 0x60 <= code <= 0x7E
    )


def _match_escape(text: str, start: int) -> int | None:
    """Return the end index of an escape sequence starting at ``start``, if any.

    A simplified VT parser: only the transitions into and out of the ground
    state matter. The only way out of the ground state is the ESC character.
    """
    if start >= len(text) or ord(text[start]) != _ESC:
        return None

    state = _State.ESCAPE
    pos = start + 1
    while pos < len(text):
        code = ord(text[pos])
        pos += 1

        if state is _State.ESCAPE:
            if code == 0x5B:
                state = _State.CSI_ENTRY
            elif code in _STRING_INTRODUCERS:
                state = _State.STRING
            elif 0x20 <= code <= 0x2F:
                state = _State.ESCAPE_INTERMEDIATE
            elif _is_escape_final(code):
                return pos
        elif code == _ESC:
            state = _State.ESCAPE
        elif state is _State.CSI_ENTRY:
            if 0x40 <= code <= 0x7E:
                return pos
        elif state is _State.ESCAPE_INTERMEDIATE:
            if 0x30 <= code <= 0x7E:
                return pos
        elif code in _STRING_TERMINATORS:
            return pos

    return len(text)


def ansi_aware_chars(text: str) -> Iterator[AnsiAwareChar]:
    """Yield escape sequences as AnsiEscapeSequence and other characters as str."""
    pos = 0
    while pos < len(text):
        end = _match_escape(text, pos)
        if end is None:
            yield text[pos]
            pos += 1
        else:
            yield AnsiEscapeSequence(text[pos:end])
            pos = end


def ansi_stripped_chars(text: str) -> Iterator[str]:
    """Yield the characters of ``text``, skipping ANSI escape sequences."""
    for item in ansi_aware_chars(text):
        if isinstance(item, str):
            yield item


def strip_ansi(text: str) -> str:
    """Return ``text`` with all ANSI escape sequences removed."""
    return "".join(ansi_stripped_chars(text))