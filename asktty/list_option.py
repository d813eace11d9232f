"""Wrapper for selections made in list prompts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ListOption(Generic[T]):
    """An option chosen by the user, with its index in the full list given to the prompt."""

    index: int
    value: T

    def __str__(self) -> str:
        return str(self.value)