"""Formatters that render a submitted value for display."""

from __future__ import annotations

import datetime
from typing import Callable, Sequence, TypeVar

from asktty.date_utils import Month
from asktty.list_option import ListOption

T = TypeVar("T")

StringFormatter = Callable[[str], str]
BoolFormatter = Callable[[bool], str]
OptionFormatter = Callable[[ListOption[T]], str]
MultiOptionFormatter = Callable[[Sequence[ListOption[T]]], str]
CustomTypeFormatter = Callable[[T], str]
DateFormatter = Callable[[datetime.date], str]

_BOOL_LABELS = {True: "Yes", False: "No"}


def default_string_formatter(value: str) -> str:
    """Echo the input as a string."""
    return str(value)


def default_bool_formatter(answer: bool) -> str:
    """Render True as "Yes" and False as "No"."""
    return _BOOL_LABELS[bool(answer)]


def default_date_formatter(value: datetime.date) -> str:
    """Render a date as "Month Day, Year", e.g. "July 25, 2021"."""
    return f"{Month(value.month).name} {value.day}, {value.year:04d}"