import pytest

from nepali_calendar.api.formatting import (
    AD_MONTHS,
    BS_MONTHS,
    describe,
    format_date,
    month_name,
    pad_zero,
    to_canonical,
)
from nepali_calendar.api.types import Calendar, CivilDate, Style


@pytest.mark.parametrize(
    "value,style,calendar,expected",
    [
        (CivilDate(2081, 1, 15), Style.SHORT, Calendar.BS, "15-01-2081"),
        (CivilDate(2081, 1, 5), "short", "bs", "05-01-2081"),
        (CivilDate(2025, 1, 15), Style.LONG, Calendar.AD, "15 January 2025"),
        (CivilDate(2081, 1, 15), Style.LONG, Calendar.BS, "15 Baishakh 2081"),
        (CivilDate(2080, 12, 30), "LONG", "BS", "30 Chaitra 2080"),
        (CivilDate(2024, 4, 27), Style.SHORT, Calendar.AD, "27-04-2024"),
    ],
)
def test_format_date(value, style, calendar, expected):
    assert format_date(value, style, calendar) == expected


def test_format_date_defaults_to_short_bs():
    assert format_date(CivilDate(2081, 4, 1)) == "01-04-2081"


def test_to_canonical_uses_iso_for_ad_only():
    assert to_canonical(CivilDate(2024, 4, 27), Calendar.AD) == "2024-04-27"
    assert to_canonical(CivilDate(2081, 1, 15), Calendar.BS) == "15-01-2081"


def test_describe_combines_long_and_canonical_forms():
    assert describe(CivilDate(2024, 4, 27), "ad") == "27 April 2024 (2024-04-27)"


def test_month_tables():
    assert len(BS_MONTHS) == len(AD_MONTHS) == 12
    assert BS_MONTHS[0] == "Baishakh"
    assert BS_MONTHS[-1] == "Chaitra"
    assert month_name(4, "bs") == "Shrawan"
    assert month_name(12, Calendar.AD) == "December"


@pytest.mark.parametrize("month", [0, 13])
def test_month_name_rejects_invalid_month(month):
    with pytest.raises(ValueError):
        month_name(month, "ad")


def test_invalid_style_raises():
    with pytest.raises(ValueError):
        format_date(CivilDate(2081, 1, 1), "medium", "bs")


def test_pad_zero():
    assert pad_zero(5) == "05"
    assert pad_zero(12) == "12"
