"""Autocompletion support for text prompts.

An autocompleter receives the current text input and returns suggestions to
display. When the completion hotkey is pressed, it decides whether the input
should be replaced, given the currently highlighted suggestion, if any.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

Replacement = Optional[str]
"""None means no completion; a string replaces the current text input."""

Suggester = Callable[[str], list]


class Autocomplete(ABC):
    """Provides suggestions and completions for a text input."""

    @abstractmethod
    def get_suggestions(self, input: str) -> list[str]:
        """Return the suggestions to display for the current input."""

    @abstractmethod
    def get_completion(
        self, input: str, highlighted_suggestion: str | None
    ) -> Replacement:
        """Return the text that should replace the input, or None to keep it."""


class NoAutoCompletion(Autocomplete):
    """Autocompleter that never suggests or completes anything."""

    def get_suggestions(self, input: str) -> list[str]:
        return []

    def get_completion(
        self, input: str, highlighted_suggestion: str | None
    ) -> Replacement:
        return None


class FunctionAutocomplete(Autocomplete):
    """Autocompleter built from a function returning suggestions.

    Completion replaces the input with the highlighted suggestion, if any.
    """

    def __init__(self, suggester: Suggester) -> None:
        self.suggester = suggester

    def get_suggestions(self, input: str) -> list[str]:
        return list(self.suggester(input))

    def get_completion(
        self, input: str, highlighted_suggestion: str | None
    ) -> Replacement:
        return highlighted_suggestion


def as_autocomplete(obj: Autocomplete | Suggester | None) -> Autocomplete:
    """Turn None, an Autocomplete or a suggestion function into an Autocomplete."""
    if obj is None:
        return NoAutoCompletion()
    if isinstance(obj, Autocomplete):
        return obj
    if callable(obj):
        return FunctionAutocomplete(obj)
    raise TypeError(f"cannot use {type(obj).__name__} as an autocompleter")