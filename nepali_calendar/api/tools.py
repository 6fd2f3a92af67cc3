"""Date tools exposed to the browser as Frappe whitelisted methods.

Every method returns plain JSON-serialisable data so the converter page, the
date picker and the bulk entry page can share one server-side pipeline.
"""
from __future__ import annotations

import json
import logging
from datetime import date
from typing import Dict, List, Sequence, Union

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - whitelisting is skipped
    frappe = None  # type: ignore

from .converter import convert, today_bs
from .formatting import describe, format_date, to_canonical
from .parsing import auto_format, evaluate, parse, parse_and_validate
from .types import Calendar, CivilDate, ConversionResult, Style
from .validation import validate

__all__ = [
    "auto_format_input",
    "bulk_convert",
    "convert_date",
    "evaluate_input",
    "format_civil_date",
    "get_today",
    "parse_date",
]

logger = logging.getLogger(__name__)


def _result_payload(result: ConversionResult, calendar: Calendar) -> Dict[str, object]:
    payload = result.as_dict()
    if result.value is not None:
        payload["canonical"] = to_canonical(result.value, calendar)
        payload["display"] = describe(result.value, calendar)
    return payload


def _convert_text(text: str, source: Calendar) -> ConversionResult:
    parsed = parse_and_validate(text, source)
    if not parsed.success:
        return parsed
    return convert(parsed.value, source)


def auto_format_input(text: str) -> str:
    """Return ``text`` reformatted as the user types it."""

    return auto_format(text)


def parse_date(text: str, calendar: str = "bs") -> Dict[str, object]:
    """Parse and validate ``text`` without converting it."""

    selected = Calendar.coerce(calendar)
    return _result_payload(parse_and_validate(text, selected), selected)


def convert_date(value: str, source: str = "bs") -> Dict[str, object]:
    """Convert a date string from ``source`` into the other calendar."""

    selected = Calendar.coerce(source)
    result = _convert_text(value, selected)
    payload = _result_payload(result, selected.other)
    payload["source"] = selected.value
    payload["target"] = selected.other.value
    return payload


def format_civil_date(value: str, style: str = "short", calendar: str = "bs") -> str:
    """Re-render a valid date string; invalid input raises ``DateError``."""

    selected = Calendar.coerce(calendar)
    parsed = validate(parse(value), selected)
    return format_date(parsed, Style.coerce(style), selected)


def evaluate_input(text: str, calendar: str = "bs") -> Dict[str, object]:
    """Run the live keystroke pipeline for a date input field."""

    return evaluate(text, calendar).as_dict()


def _load_dates(dates: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(dates, str):
        loaded = json.loads(dates)
    else:
        loaded = dates
    if not isinstance(loaded, (list, tuple)):
        raise ValueError("dates must be a list of date strings")
    return [str(item) for item in loaded]


def bulk_convert(dates: Union[str, Sequence[str]], source: str = "bs") -> Dict[str, object]:
    """Convert many date strings at once, keeping one result per row."""

    selected = Calendar.coerce(source)
    rows = []
    converted = 0
    for text in _load_dates(dates):
        result = _convert_text(text, selected)
        converted += int(result.success)
        row = _result_payload(result, selected.other)
        row["input"] = text
        rows.append(row)

    failed = len(rows) - converted
    logger.info("Bulk %s conversion: %d converted, %d failed", selected.value, converted, failed)
    return {
        "source": selected.value,
        "target": selected.other.value,
        "rows": rows,
        "converted": converted,
        "failed": failed,
    }


def _coerce_today(today: Union[None, str, date]) -> date:
    if not today:
        return date.today()
    if isinstance(today, str):
        return validate(parse(today), Calendar.AD).to_date()
    return today


def get_today(today: Union[None, str, date] = None) -> Dict[str, object]:
    """Return today's date in both calendars.

    ``today`` may be an AD date string, as it arrives over HTTP.
    """

    today = _coerce_today(today)
    ad_value = CivilDate.from_date(today)
    bs_value = today_bs(today)
    return {
        "ad": to_canonical(ad_value, Calendar.AD),
        "bs": to_canonical(bs_value, Calendar.BS),
        "ad_display": format_date(ad_value, Style.LONG, Calendar.AD),
        "bs_display": format_date(bs_value, Style.LONG, Calendar.BS),
    }


def _maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func


auto_format_input = _maybe_whitelist(auto_format_input)
parse_date = _maybe_whitelist(parse_date)
convert_date = _maybe_whitelist(convert_date)
format_civil_date = _maybe_whitelist(format_civil_date)
evaluate_input = _maybe_whitelist(evaluate_input)
bulk_convert = _maybe_whitelist(bulk_convert)
get_today = _maybe_whitelist(get_today)
