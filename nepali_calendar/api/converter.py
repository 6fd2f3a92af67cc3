"""Bikram Sambat ↔ Gregorian conversion anchored to a known date pair."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Union

from . import calendar_data
from .errors import ConversionOutOfRangeError
from .gregorian import gregorian_to_ordinal, ordinal_to_gregorian
from .types import Calendar, CalendarLike, CivilDate, ConversionResult
from .validation import validate_ad, validate_bs

__all__ = [
    "EPOCH_ANCHOR",
    "EpochAnchor",
    "ad_to_bs",
    "bs_day_offset",
    "bs_to_ad",
    "bs_to_ad_date",
    "coerce_civil",
    "convert",
    "today_bs",
]

logger = logging.getLogger(__name__)

DateLike = Union[CivilDate, date, datetime, Iterable[int]]


@dataclass(frozen=True)
class EpochAnchor:
    """A BS date and the AD date naming the same day."""

    bs: CivilDate
    ad: CivilDate


# Baishakh 1, 2000 BS fell on 14 April 1943 (so Poush 17, 2000 BS is 1 January 1944).
EPOCH_ANCHOR = EpochAnchor(bs=CivilDate(2000, 1, 1), ad=CivilDate(1943, 4, 14))


def coerce_civil(value: DateLike) -> CivilDate:
    if isinstance(value, CivilDate):
        return value
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return CivilDate.from_date(value)
    if isinstance(value, str):
        raise TypeError("Date strings must go through parsing.parse before conversion")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a CivilDate, date, or iterable of three integers") from exc
    return CivilDate(int(year), int(month), int(day))


def bs_day_offset(year: int, month: int, day: int) -> int:
    """Zero-based day offset of a BS date from BS 1970-01-01."""

    record = calendar_data.year_record(year)
    return calendar_data.year_start_offset(year) + sum(record.month_lengths[: month - 1]) + day - 1


def _check_anchor(anchor: EpochAnchor) -> None:
    validate_bs(anchor.bs)
    validate_ad(anchor.ad)


_check_anchor(EPOCH_ANCHOR)
_ANCHOR_OFFSET = bs_day_offset(*EPOCH_ANCHOR.bs.as_tuple())
_ANCHOR_ORDINAL = gregorian_to_ordinal(*EPOCH_ANCHOR.ad.as_tuple())


def bs_to_ad(year: int, month: int, day: int) -> CivilDate:
    """Convert a BS date to its Gregorian equivalent.

    Raises ``InvalidMonthError``, ``YearOutOfRangeError`` or ``InvalidDayError``
    for an impossible BS date.
    """

    validate_bs(CivilDate(year, month, day))
    delta = bs_day_offset(year, month, day) - _ANCHOR_OFFSET
    return CivilDate(*ordinal_to_gregorian(_ANCHOR_ORDINAL + delta))


def ad_to_bs(year: int, month: int, day: int) -> CivilDate:
    """Convert a Gregorian date to BS.

    Raises ``ConversionOutOfRangeError`` when the date lies outside the BS table,
    in addition to the validation errors of the AD input.
    """

    validate_ad(CivilDate(year, month, day))
    delta = gregorian_to_ordinal(year, month, day) - _ANCHOR_ORDINAL
    offset = _ANCHOR_OFFSET + delta
    if not (0 <= offset < calendar_data.total_days()):
        raise ConversionOutOfRangeError(
            f"AD {year:04d}-{month:02d}-{day:02d} is outside BS "
            f"{calendar_data.first_year()}-{calendar_data.last_year()}"
        )

    bs_year, remaining = calendar_data.locate_offset(offset)
    month_lengths = calendar_data.year_record(bs_year).month_lengths
    bs_month = 0
    while remaining >= month_lengths[bs_month]:
        remaining -= month_lengths[bs_month]
        bs_month += 1
    return CivilDate(bs_year, bs_month + 1, remaining + 1)


def bs_to_ad_date(year: int, month: int, day: int) -> date:
    return bs_to_ad(year, month, day).to_date()


def today_bs(today: Optional[date] = None) -> CivilDate:
    today = today or date.today()
    return ad_to_bs(today.year, today.month, today.day)


def convert(value: DateLike, source: CalendarLike) -> ConversionResult:
    """Convert ``value`` from ``source`` into the other calendar.

    User errors come back as a failed ``ConversionResult``; only a bad
    ``source`` argument raises.
    """

    source = Calendar.coerce(source)
    civil = coerce_civil(value)
    func = bs_to_ad if source is Calendar.BS else ad_to_bs
    result = ConversionResult.capture(func, *civil.as_tuple())
    if not result.success:
        logger.debug("Rejected %s date %s: %s", source.value, civil.isoformat(), result.error_kind.value)
    return result
