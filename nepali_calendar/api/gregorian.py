"""Proleptic Gregorian day-count arithmetic.

Ordinals follow ``datetime.date.toordinal``: 0001-01-01 is day 1.
"""
from __future__ import annotations

from typing import Tuple

from .errors import InvalidMonthError

__all__ = [
    "gregorian_month_length",
    "gregorian_to_ordinal",
    "is_gregorian_leap",
    "ordinal_to_gregorian",
]

_GREGORIAN_MONTH_LENGTHS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
_DAYS_BEFORE_MONTH = [0]
for _length in _GREGORIAN_MONTH_LENGTHS[:-1]:
    _DAYS_BEFORE_MONTH.append(_DAYS_BEFORE_MONTH[-1] + _length)
del _length

_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_month(month: int) -> None:
    if not (1 <= month <= 12):
        raise InvalidMonthError(f"month must be in 1..12, got {month}")


def gregorian_month_length(year: int, month: int) -> int:
    _check_month(month)
    if month == 2 and is_gregorian_leap(year):
        return 29
    return _GREGORIAN_MONTH_LENGTHS[month - 1]


def gregorian_to_ordinal(year: int, month: int, day: int) -> int:
    """Return the day number of a Gregorian date (no range checking on ``day``)."""

    _check_month(month)
    y = year - 1
    days = y * 365 + y // 4 - y // 100 + y // 400
    days += _DAYS_BEFORE_MONTH[month - 1]
    if month > 2 and is_gregorian_leap(year):
        days += 1
    return days + day


def ordinal_to_gregorian(ordinal: int) -> Tuple[int, int, int]:
    """Inverse of :func:`gregorian_to_ordinal`."""

    day_no = ordinal - 1

    cycles_400, day_no = divmod(day_no, _DAYS_IN_400_YEARS)
    year = 1 + 400 * cycles_400

    cycles_100, day_no = divmod(day_no, _DAYS_IN_100_YEARS)
    cycles_4, day_no = divmod(day_no, _DAYS_IN_4_YEARS)
    single_years, day_no = divmod(day_no, 365)
    year += 100 * cycles_100 + 4 * cycles_4 + single_years

    # The last day of a 4-year or 400-year cycle overflows into a fifth "year".
    if single_years == 4 or cycles_100 == 4:
        return year - 1, 12, 31

    leap = is_gregorian_leap(year)
    for index, month_len in enumerate(_GREGORIAN_MONTH_LENGTHS):
        month_length = month_len
        if index == 1 and leap:
            month_length += 1
        if day_no < month_length:
            month = index + 1
            day = day_no + 1
            break
        day_no -= month_length
    else:  # pragma: no cover
        raise ValueError(f"Failed to convert ordinal {ordinal} to a Gregorian date")

    return year, month, day
