"""Rendering of already-validated dates."""
from __future__ import annotations

from typing import Tuple

from .types import Calendar, CalendarLike, CivilDate, Style, StyleLike

__all__ = [
    "AD_MONTHS",
    "BS_MONTHS",
    "describe",
    "format_date",
    "month_name",
    "pad_zero",
    "to_canonical",
]

BS_MONTHS: Tuple[str, ...] = (
    "Baishakh",
    "Jestha",
    "Ashadh",
    "Shrawan",
    "Bhadra",
    "Ashwin",
    "Kartik",
    "Mangsir",
    "Poush",
    "Magh",
    "Falgun",
    "Chaitra",
)

AD_MONTHS: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def pad_zero(number: int) -> str:
    return f"{number:02d}"


def month_name(month: int, calendar: CalendarLike) -> str:
    names = BS_MONTHS if Calendar.coerce(calendar) is Calendar.BS else AD_MONTHS
    if not (1 <= month <= 12):
        raise ValueError(f"Invalid month: {month}")
    return names[month - 1]


def format_date(value: CivilDate, style: StyleLike = Style.SHORT, calendar: CalendarLike = Calendar.BS) -> str:
    """Render ``value`` as ``DD-MM-YYYY`` or as ``"15 Baishakh 2081"``."""

    if Style.coerce(style) is Style.LONG:
        return f"{value.day} {month_name(value.month, calendar)} {value.year}"
    return f"{pad_zero(value.day)}-{pad_zero(value.month)}-{value.year:04d}"


def to_canonical(value: CivilDate, calendar: CalendarLike) -> str:
    """Return the stored/copied form: ISO for AD, ``DD-MM-YYYY`` for BS."""

    if Calendar.coerce(calendar) is Calendar.AD:
        return value.isoformat()
    return format_date(value, Style.SHORT, Calendar.BS)


def describe(value: CivilDate, calendar: CalendarLike) -> str:
    return f"{format_date(value, Style.LONG, calendar)} ({to_canonical(value, calendar)})"
