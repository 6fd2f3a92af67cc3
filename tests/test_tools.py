import importlib
import json
from datetime import date
from types import SimpleNamespace

import pytest

from nepali_calendar import boot, hooks
from nepali_calendar.api import tools
from nepali_calendar.api.errors import ConversionOutOfRangeError, InvalidDayError, MalformedInputError


def test_auto_format_input():
    assert tools.auto_format_input("15012081") == "15-01-2081"


def test_parse_date_returns_payload():
    payload = tools.parse_date("15-01-2081", calendar="bs")
    assert payload["success"] is True
    assert payload["value"] == {"year": 2081, "month": 1, "day": 15}
    assert payload["canonical"] == "15-01-2081"
    assert payload["display"] == "15 Baishakh 2081 (15-01-2081)"


def test_parse_date_reports_error_kind():
    payload = tools.parse_date("99-99-9999")
    assert payload == {
        "success": False,
        "value": None,
        "error_kind": "invalid_month",
        "message": "Month must be between 01 and 12.",
    }


def test_convert_date_bs_to_ad():
    payload = tools.convert_date("15-01-2081", source="bs")
    assert payload["success"] is True
    assert payload["source"] == "bs"
    assert payload["target"] == "ad"
    assert payload["canonical"] == "2024-04-27"
    assert payload["display"] == "27 April 2024 (2024-04-27)"


def test_convert_date_ad_to_bs():
    payload = tools.convert_date("2024-04-27", source="ad")
    assert payload["canonical"] == "15-01-2081"
    assert payload["display"] == "15 Baishakh 2081 (15-01-2081)"


def test_convert_date_out_of_table():
    payload = tools.convert_date("1900-01-01", source="ad")
    assert payload["success"] is False
    assert payload["error_kind"] == "conversion_out_of_range"
    assert "canonical" not in payload


def test_convert_date_rejects_unknown_source():
    with pytest.raises(ValueError):
        tools.convert_date("2024-04-27", source="hijri")


def test_format_civil_date():
    assert tools.format_civil_date("2081/1/15", style="long", calendar="bs") == "15 Baishakh 2081"
    assert tools.format_civil_date("2024-01-05", calendar="ad") == "05-01-2024"
    with pytest.raises(InvalidDayError):
        tools.format_civil_date("2023-02-29", calendar="ad")


def test_evaluate_input():
    payload = tools.evaluate_input("150", calendar="bs")
    assert payload["state"] == "typing"
    assert payload["text"] == "15-0"


def test_bulk_convert_keeps_one_row_per_input():
    summary = tools.bulk_convert(["15-01-2081", "99-99-9999", "2081/01/01"], source="bs")
    assert summary["converted"] == 2
    assert summary["failed"] == 1
    rows = summary["rows"]
    assert [row["input"] for row in rows] == ["15-01-2081", "99-99-9999", "2081/01/01"]
    assert rows[0]["canonical"] == "2024-04-27"
    assert rows[1]["error_kind"] == "invalid_month"
    assert rows[2]["canonical"] == "2024-04-13"


def test_bulk_convert_accepts_json_payload():
    summary = tools.bulk_convert(json.dumps(["2024-04-13", "2023-02-29"]), source="ad")
    assert summary["target"] == "bs"
    assert summary["rows"][0]["canonical"] == "01-01-2081"
    assert summary["rows"][1]["error_kind"] == "invalid_day"


def test_bulk_convert_rejects_non_list_payload():
    with pytest.raises(ValueError):
        tools.bulk_convert(json.dumps({"date": "2024-04-13"}))


def test_get_today():
    assert tools.get_today(date(2024, 4, 27)) == {
        "ad": "2024-04-27",
        "bs": "15-01-2081",
        "ad_display": "27 April 2024",
        "bs_display": "15 Baishakh 2081",
    }


@pytest.mark.parametrize("value", ["2024-04-27", "27-04-2024", "2024/4/27"])
def test_get_today_accepts_date_strings(value):
    assert tools.get_today(value) == tools.get_today(date(2024, 4, 27))


def test_get_today_treats_empty_string_as_missing():
    assert tools.get_today("")["ad"] == date.today().isoformat()


def test_get_today_rejects_bad_strings():
    with pytest.raises(InvalidDayError):
        tools.get_today("2023-02-29")
    with pytest.raises(MalformedInputError):
        tools.get_today("yesterday")
    with pytest.raises(ConversionOutOfRangeError):
        tools.get_today("1900-01-01")


def test_boot_context_without_today_outside_table():
    context = boot.get_boot_context(date(2050, 1, 1))
    assert context["today"] is None
    assert context["bs_year_range"] == [1970, 2100]


def test_boot_context_describes_supported_ranges():
    context = boot.get_boot_context(date(2024, 4, 13))
    assert context["bs_year_range"] == [1970, 2100]
    assert context["ad_year_range"] == [1900, 2100]
    assert context["bs_months"][0] == "Baishakh"
    assert context["epoch_anchor"] == {"bs": "2000-01-01", "ad": "1943-04-14"}
    assert context["today"]["bs"] == "01-01-2081"


def test_boot_session_injects_context():
    bootinfo = {}
    boot.boot_session(bootinfo)
    assert bootinfo["nepali_calendar"]["bs_year_range"] == [1970, 2100]

    namespace = SimpleNamespace()
    boot.boot_session(namespace)
    assert namespace.nepali_calendar["ad_months"][0] == "January"


def _resolve(path):
    module_name, _, attribute = path.rpartition(".")
    return getattr(importlib.import_module(module_name), attribute)


def test_hooks_point_at_real_callables():
    assert _resolve(hooks.boot_session) is boot.boot_session
    for path in hooks.jinja["methods"]:
        assert callable(_resolve(path))
