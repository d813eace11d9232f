"""Parsers that turn user input into values."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")

BoolParser = Callable[[str], bool]
CustomTypeParser = Callable[[str], T]


class ParseError(ValueError):
    """Raised by a parser when the input cannot be parsed."""


def default_bool_parser(answer: str) -> bool:
    """Accept y/yes as True and n/no as False, case-insensitively."""
    if len(answer.encode("utf-8")) > 3:
        raise ParseError(answer)

    match answer.lower():
        case "y" | "yes":
            return True
        case "n" | "no":
            return False
        case _:
            raise ParseError(answer)


def parse_type(type_: Callable[[str], T]) -> Callable[[str], T]:
    """Build a parser that converts input with ``type_``, raising ParseError on failure."""

    def parser(answer: str) -> T:
        try:
            return type_(answer)
        except (ValueError, TypeError, ArithmeticError) as exc:
            raise ParseError(answer) from exc

    return parser