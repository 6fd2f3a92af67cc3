"""Bikram Sambat month-length table for BS 1970-2100.

The table is the only source of truth for BS month lengths: there is no
closed-form rule. It is checked for self-consistency once, at import, and the
import fails with ``CalendarTableError`` if any year is missing or does not
add up to a plausible solar year.

Rows from 1975 follow the data file of the nepali-datetime package.
"""
from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Sequence, Tuple

from .errors import CalendarTableError, InvalidMonthError, YearOutOfRangeError
from .types import YearRange

__all__ = [
    "BS_YEAR_RANGE",
    "CalendarYear",
    "days_in_year",
    "first_year",
    "last_year",
    "locate_offset",
    "month_length",
    "total_days",
    "validate_table",
    "year_record",
    "year_start_offset",
]

logger = logging.getLogger(__name__)

BS_YEAR_RANGE = YearRange(1970, 2100)

MONTHS_PER_YEAR = 12
MONTH_LENGTH_BOUNDS = (29, 32)
YEAR_LENGTH_BOUNDS = (365, 366)

_MONTH_LENGTHS: Dict[int, Tuple[int, ...]] = {
    1970: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1971: (31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    1972: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1973: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1974: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1975: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1976: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1977: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1978: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1979: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1980: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1981: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    1982: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1983: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1984: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1985: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    1986: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1987: (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    1988: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    1989: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    1990: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1991: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    1992: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1993: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1994: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1995: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    1996: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    1997: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1998: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    1999: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2000: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2001: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2002: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2003: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2004: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2005: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2006: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2007: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2008: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2009: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2010: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2011: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2012: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2013: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2014: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2015: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2016: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2017: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2018: (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2019: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2020: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2021: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2022: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2023: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2024: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2025: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2026: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2027: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2028: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2029: (31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    2030: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2031: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2032: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2033: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2034: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2035: (30, 32, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2036: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2037: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2038: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2039: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2040: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2041: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2042: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2043: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2044: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2045: (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2046: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2047: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2048: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2049: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2050: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2051: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2052: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2053: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2054: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2055: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2056: (31, 31, 32, 31, 32, 30, 30, 29, 30, 29, 30, 30),
    2057: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2058: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2059: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2060: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2061: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2062: (31, 31, 31, 32, 31, 31, 29, 30, 29, 30, 29, 31),
    2063: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2064: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2065: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2066: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 29, 31),
    2067: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2068: (31, 31, 32, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2069: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2070: (31, 31, 31, 32, 31, 31, 29, 30, 30, 29, 30, 30),
    2071: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2072: (31, 32, 31, 32, 31, 30, 30, 29, 30, 29, 30, 30),
    2073: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2074: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2075: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2076: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2077: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2078: (31, 31, 31, 32, 31, 31, 30, 29, 30, 29, 30, 30),
    2079: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2080: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 30),
    2081: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 29, 31),
    2082: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2083: (31, 31, 32, 31, 31, 31, 30, 29, 30, 29, 30, 30),
    2084: (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2085: (31, 32, 31, 32, 30, 31, 30, 30, 29, 30, 30, 30),
    2086: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2087: (31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 30, 30),
    2088: (30, 31, 32, 32, 30, 31, 30, 30, 29, 30, 30, 30),
    2089: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2090: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2091: (31, 31, 32, 31, 31, 31, 30, 30, 29, 30, 30, 30),
    2092: (30, 31, 32, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2093: (30, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2094: (31, 31, 32, 31, 31, 30, 30, 30, 29, 30, 30, 30),
    2095: (31, 31, 32, 31, 31, 31, 30, 29, 30, 30, 30, 30),
    # nepali-datetime lists a 364-day 2096; this row is the one shipped by the nepali package.
    2096: (31, 32, 31, 32, 31, 30, 30, 30, 29, 29, 30, 31),
    2097: (31, 32, 31, 32, 31, 30, 30, 30, 29, 30, 30, 30),
    2098: (31, 31, 32, 31, 31, 31, 29, 30, 29, 30, 29, 31),
    2099: (31, 31, 32, 31, 31, 31, 30, 29, 29, 30, 30, 30),
    2100: (31, 32, 31, 32, 30, 31, 30, 29, 30, 29, 30, 30),
}


@dataclass(frozen=True)
class CalendarYear:
    """Month lengths of a single BS year."""

    year: int
    month_lengths: Tuple[int, ...]

    @property
    def days(self) -> int:
        return sum(self.month_lengths)


def validate_table(
    years: Sequence[CalendarYear],
    first: int = BS_YEAR_RANGE.first,
    last: int = BS_YEAR_RANGE.last,
) -> None:
    """Raise ``CalendarTableError`` unless ``years`` covers ``first..last`` consistently."""

    expected = list(range(first, last + 1))
    actual = [record.year for record in years]
    if actual != expected:
        missing = sorted(set(expected) - set(actual))
        extra = sorted(set(actual) - set(expected))
        raise CalendarTableError(
            f"calendar table must list every year {first}-{last} once and in order "
            f"(missing: {missing or 'none'}, unexpected: {extra or 'none'})"
        )

    low_month, high_month = MONTH_LENGTH_BOUNDS
    low_year, high_year = YEAR_LENGTH_BOUNDS
    for record in years:
        if len(record.month_lengths) != MONTHS_PER_YEAR:
            raise CalendarTableError(
                f"BS {record.year} lists {len(record.month_lengths)} months, expected {MONTHS_PER_YEAR}"
            )
        for month, length in enumerate(record.month_lengths, start=1):
            if not (low_month <= length <= high_month):
                raise CalendarTableError(
                    f"BS {record.year}-{month:02d} has {length} days, expected {low_month}..{high_month}"
                )
        if not (low_year <= record.days <= high_year):
            raise CalendarTableError(
                f"BS {record.year} has {record.days} days, expected {low_year} or {high_year}"
            )


def _build_years(raw: Mapping[int, Iterable[int]]) -> Tuple[CalendarYear, ...]:
    return tuple(CalendarYear(year, tuple(lengths)) for year, lengths in raw.items())


def _build_offsets(years: Sequence[CalendarYear]) -> Tuple[int, ...]:
    offsets = [0]
    for record in years:
        offsets.append(offsets[-1] + record.days)
    return tuple(offsets)


_YEARS = _build_years(_MONTH_LENGTHS)
validate_table(_YEARS)
# _YEAR_OFFSETS[i] is the day offset of BS (first + i)-01-01; the last entry is the table length.
_YEAR_OFFSETS = _build_offsets(_YEARS)
del _MONTH_LENGTHS

logger.debug(
    "Loaded Bikram Sambat table %d-%d (%d days)",
    BS_YEAR_RANGE.first,
    BS_YEAR_RANGE.last,
    _YEAR_OFFSETS[-1],
)


def _require_year(year: int) -> int:
    if year not in BS_YEAR_RANGE:
        raise YearOutOfRangeError(
            f"BS year {year} is outside {BS_YEAR_RANGE.first}-{BS_YEAR_RANGE.last}"
        )
    return year - BS_YEAR_RANGE.first


def first_year() -> int:
    return BS_YEAR_RANGE.first


def last_year() -> int:
    return BS_YEAR_RANGE.last


def year_record(year: int) -> CalendarYear:
    return _YEARS[_require_year(year)]


def month_length(year: int, month: int) -> int:
    """Return the number of days in BS ``month`` of ``year``."""

    record = year_record(year)
    if not (1 <= month <= MONTHS_PER_YEAR):
        raise InvalidMonthError(f"month must be in 1..12, got {month}")
    return record.month_lengths[month - 1]


def days_in_year(year: int) -> int:
    return year_record(year).days


def year_start_offset(year: int) -> int:
    """Days from BS 1970-01-01 to the first day of ``year``."""

    return _YEAR_OFFSETS[_require_year(year)]


def total_days() -> int:
    """Number of days covered by the whole table."""

    return _YEAR_OFFSETS[-1]


def locate_offset(offset: int) -> Tuple[int, int]:
    """Split a table offset into ``(year, day_of_year)`` with ``day_of_year`` zero-based.

    ``offset`` must already be inside ``0..total_days() - 1``.
    """

    index = bisect_right(_YEAR_OFFSETS, offset) - 1
    return BS_YEAR_RANGE.first + index, offset - _YEAR_OFFSETS[index]
