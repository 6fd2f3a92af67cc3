import pytest

from nepali_calendar.api.errors import ErrorKind, MalformedInputError
from nepali_calendar.api.parsing import (
    FieldState,
    ad_iso_to_bs,
    auto_format,
    evaluate,
    parse,
    parse_and_validate,
)
from nepali_calendar.api.types import Calendar, CivilDate
from nepali_calendar.api.validation import AD_YEAR_RANGE, BS_YEAR_RANGE, validate, year_range


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", ""),
        ("1", "1"),
        ("15", "15"),
        ("150", "15-0"),
        ("1501", "15-01"),
        ("15012", "15-01-2"),
        ("15012081", "15-01-2081"),
        ("1501208199", "15-01-2081"),
        ("15/01/2081", "15-01-2081"),
        ("ab15-0x1", "15-01"),
    ],
)
def test_auto_format(raw, expected):
    assert auto_format(raw) == expected


@pytest.mark.parametrize("raw", ["1", "150", "15012081", "15-01-2081", "15-01-20"])
def test_auto_format_is_idempotent(raw):
    once = auto_format(raw)
    assert auto_format(once) == once


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2081-01-15", (2081, 1, 15)),
        ("2081/1/5", (2081, 1, 5)),
        ("2081.01.15", (2081, 1, 15)),
        ("15-01-2081", (2081, 1, 15)),
        ("15/01/2081", (2081, 1, 15)),
        ("15.01.2081", (2081, 1, 15)),
        ("15 01 2081", (2081, 1, 15)),
        ("  5 / 1 / 2081 ", (2081, 1, 5)),
        ("15012081", (2081, 1, 15)),
        ("99-99-9999", (9999, 99, 99)),
        ("01-13-2081", (2081, 13, 1)),
    ],
)
def test_parse_accepts_supported_shapes(text, expected):
    assert parse(text) == CivilDate(*expected)


@pytest.mark.parametrize(
    "text",
    ["", "   ", "abc", "2081-01", "1-2-3", "123-01-2081", "2081-001-01", "15-01-2081-01", "2081_01_15", "20810115x"],
)
def test_parse_rejects_malformed_input(text):
    with pytest.raises(MalformedInputError):
        parse(text)


def test_parse_rejects_non_strings():
    with pytest.raises(MalformedInputError):
        parse(None)


@pytest.mark.parametrize(
    "text,calendar,kind",
    [
        ("99-99-9999", Calendar.BS, ErrorKind.INVALID_MONTH),
        ("99-99-1969", Calendar.BS, ErrorKind.INVALID_MONTH),
        ("15-01-1969", Calendar.BS, ErrorKind.YEAR_OUT_OF_RANGE),
        ("15-01-2101", Calendar.BS, ErrorKind.YEAR_OUT_OF_RANGE),
        ("40-05-2200", Calendar.BS, ErrorKind.YEAR_OUT_OF_RANGE),
        ("32-01-2081", Calendar.BS, ErrorKind.INVALID_DAY),
        ("00-01-2081", Calendar.BS, ErrorKind.INVALID_DAY),
        ("01-13-2081", Calendar.BS, ErrorKind.INVALID_MONTH),
        ("2023-02-29", Calendar.AD, ErrorKind.INVALID_DAY),
        ("1900-02-29", Calendar.AD, ErrorKind.INVALID_DAY),
        ("1899-12-31", Calendar.AD, ErrorKind.YEAR_OUT_OF_RANGE),
        ("2024-04-31", Calendar.AD, ErrorKind.INVALID_DAY),
        ("not a date", Calendar.AD, ErrorKind.MALFORMED_INPUT),
    ],
)
def test_parse_and_validate_error_kinds(text, calendar, kind):
    result = parse_and_validate(text, calendar)
    assert not result.success
    assert result.value is None
    assert result.error_kind is kind
    assert result.message


@pytest.mark.parametrize(
    "text,calendar,expected",
    [
        ("15-01-2081", "bs", (2081, 1, 15)),
        ("01-01-1970", "bs", (1970, 1, 1)),
        ("30-12-2100", "bs", (2100, 12, 30)),
        ("2024-02-29", "ad", (2024, 2, 29)),
        ("2000-02-29", "ad", (2000, 2, 29)),
        ("31-12-2100", "ad", (2100, 12, 31)),
    ],
)
def test_parse_and_validate_accepts_real_dates(text, calendar, expected):
    result = parse_and_validate(text, calendar)
    assert result.success
    assert result.value == CivilDate(*expected)
    assert result.error_kind is None


def test_validate_returns_the_same_value():
    value = CivilDate(2081, 2, 32)
    assert validate(value, "bs") is value


def test_year_ranges():
    assert year_range("bs") == BS_YEAR_RANGE
    assert year_range(Calendar.AD) == AD_YEAR_RANGE
    assert (AD_YEAR_RANGE.first, AD_YEAR_RANGE.last) == (1900, 2100)
    assert 2100 in BS_YEAR_RANGE
    assert 2101 not in BS_YEAR_RANGE


def test_ad_iso_to_bs_accepts_dates_and_datetimes():
    assert ad_iso_to_bs("2024-04-27") == CivilDate(2081, 1, 15)
    assert ad_iso_to_bs("2024-04-27T10:30:00") == CivilDate(2081, 1, 15)
    assert ad_iso_to_bs("2024-04-13 06:00") == CivilDate(2081, 1, 1)


def test_ad_iso_to_bs_requires_iso_shape():
    with pytest.raises(MalformedInputError):
        ad_iso_to_bs("27-04-2024")


def test_evaluate_walks_through_field_states():
    assert evaluate("", "bs").state is FieldState.EMPTY
    assert evaluate("--", "bs").state is FieldState.EMPTY

    typing = evaluate("150", "bs")
    assert typing.state is FieldState.TYPING
    assert typing.text == "15-0"
    assert typing.converted is None

    valid = evaluate("15012081", "bs")
    assert valid.state is FieldState.VALID
    assert valid.text == "15-01-2081"
    assert valid.value == CivilDate(2081, 1, 15)
    assert valid.converted == CivilDate(2024, 4, 27)
    assert valid.copy_text == "2024-04-27"
    assert valid.display == "27 April 2024"
    assert valid.error_kind is None


def test_evaluate_reports_invalid_dates():
    invalid = evaluate("32-01-2081", "bs")
    assert invalid.state is FieldState.INVALID
    assert invalid.error_kind is ErrorKind.INVALID_DAY
    assert invalid.copy_text is None

    month = evaluate("99999999", "bs")
    assert month.error_kind is ErrorKind.INVALID_MONTH


def test_evaluate_ad_field_converts_to_bs():
    valid = evaluate("27042024", "ad")
    assert valid.state is FieldState.VALID
    assert valid.copy_text == "15-01-2081"
    assert valid.display == "15 Baishakh 2081"


def test_evaluate_reports_conversion_out_of_range():
    result = evaluate("01011900", "ad")
    assert result.state is FieldState.INVALID
    assert result.value == CivilDate(1900, 1, 1)
    assert result.error_kind is ErrorKind.CONVERSION_OUT_OF_RANGE


def test_evaluate_payload_is_serialisable():
    payload = evaluate("15-01-2081", "bs").as_dict()
    assert payload == {
        "calendar": "bs",
        "state": "valid",
        "text": "15-01-2081",
        "value": {"year": 2081, "month": 1, "day": 15},
        "converted": {"year": 2024, "month": 4, "day": 27},
        "copy_text": "2024-04-27",
        "display": "27 April 2024",
        "error_kind": None,
        "message": None,
    }
