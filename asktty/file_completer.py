"""Autocompleter that suggests file-system paths."""

from __future__ import annotations

import os

from asktty.autocompletion import Autocomplete, Replacement

_LIMIT = 15


def _parent(path: str) -> str:
    """Parent directory of ``path``, falling back to "." when it has none."""
    trimmed = path.rstrip("/")
    if not trimmed:
        return "."
    idx = trimmed.rfind("/")
    if idx == -1:
        return "."
    parent = trimmed[:idx].rstrip("/")
    return parent if parent else "/"


class FilePathCompleter(Autocomplete):
    """Suggests paths that extend the current input, at most fifteen of them.

    Directories are suggested with a trailing slash. When nothing is
    highlighted, completion fills in the longest common prefix of the
    suggestions.
    """

    def __init__(self) -> None:
        self._input = ""
        self.paths: list[str] = []
        self.lcp = ""

    def _update_input(self, input: str) -> None:
        if input == self._input:
            return

        self._input = input
        self.paths = []

        fallback_parent = _parent(input)
        scan_dir = input if input.endswith("/") else fallback_parent

        try:
            with os.scandir(scan_dir) as it:
                entries = list(it)
        except FileNotFoundError:
            with os.scandir(fallback_parent) as it:
                entries = list(it)

        for entry in entries:
            if len(self.paths) >= _LIMIT:
                break
            path = f"{entry.path}/" if entry.is_dir() else entry.path
            if path.startswith(self._input) and path != self._input:
                self.paths.append(path)

        self.lcp = self.longest_common_prefix()

    def longest_common_prefix(self) -> str:
        """Longest prefix shared by all current suggestions."""
        if not self.paths:
            return ""
        first, last = min(self.paths), max(self.paths)
        prefix = []
        for a, b in zip(first, last):
            if a != b:
                break
            prefix.append(a)
        return "".join(prefix)

    def get_suggestions(self, input: str) -> list[str]:
        self._update_input(input)
        return list(self.paths)

    def get_completion(
        self, input: str, highlighted_suggestion: str | None
    ) -> Replacement:
        self._update_input(input)
        if highlighted_suggestion is not None:
            return highlighted_suggestion
        return self.lcp or None