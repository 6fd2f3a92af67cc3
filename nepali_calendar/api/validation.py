"""Range and shape checks applied before any conversion.

Checks run month first, then year range, then day, so the first structural
problem is the one reported.
"""
from __future__ import annotations

from .calendar_data import BS_YEAR_RANGE, month_length
from .errors import InvalidDayError, InvalidMonthError, YearOutOfRangeError
from .gregorian import gregorian_month_length
from .types import Calendar, CalendarLike, CivilDate, YearRange

__all__ = [
    "AD_YEAR_RANGE",
    "BS_YEAR_RANGE",
    "validate",
    "validate_ad",
    "validate_bs",
    "year_range",
]

AD_YEAR_RANGE = YearRange(1900, 2100)


def year_range(calendar: CalendarLike) -> YearRange:
    if Calendar.coerce(calendar) is Calendar.BS:
        return BS_YEAR_RANGE
    return AD_YEAR_RANGE


def _check_month(value: CivilDate) -> None:
    if not (1 <= value.month <= 12):
        raise InvalidMonthError(f"month must be in 1..12, got {value.month}")


def _check_year(value: CivilDate, allowed: YearRange, label: str) -> None:
    if value.year not in allowed:
        raise YearOutOfRangeError(
            f"{label} year {value.year} is outside {allowed.first}-{allowed.last}"
        )


def _check_day(value: CivilDate, max_day: int) -> None:
    if not (1 <= value.day <= max_day):
        raise InvalidDayError(
            f"day must be in 1..{max_day} for {value.year}-{value.month:02d}, got {value.day}"
        )


def validate_bs(value: CivilDate) -> CivilDate:
    _check_month(value)
    _check_year(value, BS_YEAR_RANGE, "BS")
    _check_day(value, month_length(value.year, value.month))
    return value


def validate_ad(value: CivilDate) -> CivilDate:
    _check_month(value)
    _check_year(value, AD_YEAR_RANGE, "AD")
    _check_day(value, gregorian_month_length(value.year, value.month))
    return value


def validate(value: CivilDate, calendar: CalendarLike) -> CivilDate:
    """Return ``value`` unchanged if it is a real date in ``calendar``.

    Raises ``InvalidMonthError``, ``YearOutOfRangeError`` or ``InvalidDayError``.
    """

    if Calendar.coerce(calendar) is Calendar.BS:
        return validate_bs(value)
    return validate_ad(value)
