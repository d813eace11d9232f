"""Calendar helpers used by date prompts."""

from __future__ import annotations

import datetime
from enum import IntEnum


class Month(IntEnum):
    """Months of the year, numbered from 1."""

    January = 1
    February = 2
    March = 3
    April = 4
    May = 5
    June = 6
    July = 7
    August = 8
    September = 9
    October = 10
    November = 11
    December = 12


def get_current_date() -> datetime.date:
    """Return today's date in local time."""
    return datetime.date.today()


def get_start_date(month: Month, year: int) -> datetime.date:
    """Return the first day of the given month and year."""
    return datetime.date(year, int(month), 1)


def get_month(month: int) -> Month:
    """Return the Month numbered ``month``; raise ValueError outside 1..12."""
    try:
        return Month(month)
    except ValueError:
        raise ValueError("Invalid month") from None