"""Editable single-line text input with a grapheme-aware cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

import regex

_GRAPHEME = regex.compile(r"\X")
_WORD_CHAR = regex.compile(r"[\p{Alphabetic}\p{N}]")


class Magnitude(Enum):
    """How far an action reaches: one character, one word or the whole line."""

    CHAR = auto()
    WORD = auto()
    LINE = auto()


class LineDirection(Enum):
    """Direction along the line."""

    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class Delete:
    """Delete part of the input in a direction."""

    magnitude: Magnitude
    direction: LineDirection


@dataclass(frozen=True)
class MoveCursor:
    """Move the cursor in a direction."""

    magnitude: Magnitude
    direction: LineDirection


@dataclass(frozen=True)
class Write:
    """Insert a character at the cursor."""

    char: str


InputAction = Union[Delete, MoveCursor, Write]


class InputActionResult(Enum):
    """Outcome of applying an action to an Input."""

    CONTENT_CHANGED = auto()
    POSITION_CHANGED = auto()
    CLEAN = auto()

    def needs_redraw(self) -> bool:
        """True when the action changed something visible."""
        return self is not InputActionResult.CLEAN


def _graphemes(text: str) -> list[str]:
    return _GRAPHEME.findall(text)


def _is_alphanumeric(grapheme: str) -> bool:
    return _WORD_CHAR.search(grapheme) is not None


class Input:
    """Text content with a cursor measured in grapheme clusters."""

    def __init__(self, content: str = "") -> None:
        self._content = content
        self._length = len(_graphemes(content))
        self._cursor = self._length
        self._placeholder: str | None = None

    @property
    def content(self) -> str:
        return self._content

    @property
    def length(self) -> int:
        return self._length

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def placeholder(self) -> str | None:
        return self._placeholder

    def __repr__(self) -> str:
        return (
            f"Input(content={self._content!r}, cursor={self._cursor}, "
            f"placeholder={self._placeholder!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Input):
            return NotImplemented
        return (
            self._content,
            self._cursor,
            self._length,
            self._placeholder,
        ) == (other._content, other._cursor, other._length, other._placeholder)

    def with_placeholder(self, placeholder: str) -> Input:
        """Set the placeholder shown while the input is empty."""
        self._placeholder = placeholder
        return self

    def with_cursor(self, cursor: int) -> Input:
        """Place the cursor; raise ValueError if it is past the end."""
        if not 0 <= cursor <= self._length:
            raise ValueError(
                f"cursor index {cursor} should be less than or equal to "
                f"content length {self._length}"
            )
        self._cursor = cursor
        return self

    def is_empty(self) -> bool:
        return self._length == 0

    def handle(self, action: InputAction) -> InputActionResult:
        """Apply an action and report what it changed."""
        match action:
            case MoveCursor(mag, LineDirection.LEFT):
                return self._move_left(mag)
            case MoveCursor(mag, LineDirection.RIGHT):
                return self._move_right(mag)
            case Delete(mag, LineDirection.LEFT):
                return self._backwards_delete(mag)
            case Delete(mag, LineDirection.RIGHT):
                return self._forwards_delete(mag)
            case Write(char):
                return self._insert(char)
        raise TypeError(f"unsupported input action: {action!r}")

    def clear(self) -> None:
        """Remove all content; the placeholder is kept."""
        self._content = ""
        self._cursor = 0
        self._length = 0

    def pre_cursor(self) -> str:
        """The content to the left of the cursor."""
        if self._cursor == self._length:
            return self._content
        return "".join(_graphemes(self._content)[: self._cursor])

    def _move_left(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN

        if mag is Magnitude.CHAR:
            self._cursor -= 1
        elif mag is Magnitude.WORD:
            self._cursor = self._prev_word_index()
        else:
            self._cursor = 0
        return InputActionResult.POSITION_CHANGED

    def _move_right(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == self._length:
            return InputActionResult.CLEAN
        if self._cursor > self._length:
            self._cursor = self._length
            return InputActionResult.POSITION_CHANGED

        if mag is Magnitude.CHAR:
            self._cursor += 1
        elif mag is Magnitude.WORD:
            self._cursor = self._next_word_index()
        else:
            self._cursor = self._length
        return InputActionResult.POSITION_CHANGED

    def _next_word_index(self) -> int:
        seen_word = False
        graphemes = _graphemes(self._content)
        for idx, g in enumerate(graphemes[self._cursor :], start=self._cursor):
            if _is_alphanumeric(g):
                seen_word = True
            elif seen_word:
                return idx
        return self._length

    def _prev_word_index(self) -> int:
        seen_word = False
        before = _graphemes(self._content)[: self._cursor]
        for dist, g in enumerate(reversed(before), start=1):
            if _is_alphanumeric(g):
                seen_word = True
            elif seen_word:
                return max(self._cursor - (dist - 1), 0)
        return 0

    def _insert(self, char: str) -> InputActionResult:
        if self._cursor >= self._length:
            self._content += char
        else:
            graphemes = _graphemes(self._content)
            graphemes.insert(self._cursor, char)
            self._content = "".join(graphemes)

        if self._update_length():
            self._cursor += 1
        return InputActionResult.CONTENT_CHANGED

    def _backwards_delete(self, mag: Magnitude) -> InputActionResult:
        if self._cursor == 0:
            return InputActionResult.CLEAN

        current = self._cursor
        if mag is Magnitude.CHAR:
            new_pos = current - 1
        elif mag is Magnitude.WORD:
            new_pos = self._prev_word_index()
        else:
            new_pos = 0

        if new_pos == current:
            return InputActionResult.CLEAN

        self._cursor = new_pos
        return self._delete_at_right(current - new_pos)

    def _forwards_delete(self, mag: Magnitude) -> InputActionResult:
        start = self._cursor
        if mag is Magnitude.CHAR:
            end = start + 1
        elif mag is Magnitude.WORD:
            end = self._next_word_index()
        else:
            end = self._length
        return self._delete_at_right(max(end - start, 0))

    def _delete_at_right(self, qty: int) -> InputActionResult:
        start = self._cursor
        end = start + qty
        graphemes = _graphemes(self._content)
        kept = graphemes[:start] + graphemes[end:]

        result = (
            InputActionResult.CONTENT_CHANGED
            if len(kept) != len(graphemes)
            else InputActionResult.CLEAN
        )
        self._content = "".join(kept)
        self._length = len(kept)
        return result

    def _update_length(self) -> bool:
        new_len = len(_graphemes(self._content))
        changed = new_len != self._length
        self._length = new_len
        return changed