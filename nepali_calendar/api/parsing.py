"""Keystroke formatting, date-string parsing and the live field pipeline."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .converter import ad_to_bs, convert
from .errors import DateError, ErrorKind, ERROR_MESSAGES, MalformedInputError
from .formatting import format_date, to_canonical
from .types import Calendar, CalendarLike, CivilDate, ConversionResult, Style
from .validation import validate

__all__ = [
    "FieldEvaluation",
    "FieldState",
    "ad_iso_to_bs",
    "auto_format",
    "evaluate",
    "parse",
    "parse_and_validate",
]

MAX_DIGITS = 8

_NON_DIGITS_RE = re.compile(r"[^0-9]")
_SEPARATORS_RE = re.compile(r"[./\s]")
_DASH_RUN_RE = re.compile(r"-{2,}")
_YMD_RE = re.compile(r"^([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})$")
_DMY_RE = re.compile(r"^([0-9]{1,2})-([0-9]{1,2})-([0-9]{4})$")
_COMPACT_DMY_RE = re.compile(r"^([0-9]{2})([0-9]{2})([0-9]{4})$")


def auto_format(raw: str) -> str:
    """Render typed digits progressively as ``DD-MM-YYYY``.

    >>> auto_format("150")
    '15-0'
    """

    digits = _NON_DIGITS_RE.sub("", raw or "")[:MAX_DIGITS]
    formatted = digits[:2]
    if len(digits) > 2:
        formatted += "-" + digits[2:4]
    if len(digits) > 4:
        formatted += "-" + digits[4:8]
    return formatted


def _normalize(text: str) -> str:
    normalized = _SEPARATORS_RE.sub("-", text.strip())
    return _DASH_RUN_RE.sub("-", normalized)


def _ymd(match: re.Match[str]) -> CivilDate:
    year, month, day = (int(group) for group in match.groups())
    return CivilDate(year, month, day)


def _dmy(match: re.Match[str]) -> CivilDate:
    day, month, year = (int(group) for group in match.groups())
    return CivilDate(year, month, day)


def parse(text: str) -> CivilDate:
    """Read ``YYYY-MM-DD``, ``DD-MM-YYYY`` or ``DDMMYYYY`` into a ``CivilDate``.

    ``.``, ``/`` and whitespace count as separators. The result is shaped but
    not validated; day and month are never swapped to make a date fit.
    """

    if not isinstance(text, str):
        raise MalformedInputError(f"Expected a date string, got {type(text).__name__}")
    normalized = _normalize(text)

    match = _YMD_RE.match(normalized)
    if match:
        return _ymd(match)
    match = _DMY_RE.match(normalized)
    if match:
        return _dmy(match)
    match = _COMPACT_DMY_RE.match(normalized)
    if match:
        return _dmy(match)
    raise MalformedInputError(f"Unsupported date string: {text!r}")


def parse_and_validate(text: str, calendar: CalendarLike) -> ConversionResult:
    calendar = Calendar.coerce(calendar)
    return ConversionResult.capture(lambda: validate(parse(text), calendar))


def ad_iso_to_bs(text: str) -> CivilDate:
    """Convert an ISO date or datetime string (``2024-04-27T10:30``) to BS."""

    if not isinstance(text, str):
        raise MalformedInputError(f"Expected an ISO date string, got {type(text).__name__}")
    date_part = text.strip().split("T")[0].split(" ")[0]
    match = _YMD_RE.match(date_part)
    if not match:
        raise MalformedInputError(f"Unsupported ISO date string: {text!r}")
    return ad_to_bs(*_ymd(match).as_tuple())


class FieldState(str, Enum):
    EMPTY = "empty"
    TYPING = "typing"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class FieldEvaluation:
    """Snapshot of a date input field after one edit."""

    calendar: Calendar
    state: FieldState
    text: str
    value: Optional[CivilDate] = None
    converted: Optional[CivilDate] = None
    error_kind: Optional[ErrorKind] = None

    @property
    def copy_text(self) -> Optional[str]:
        if self.converted is None:
            return None
        return to_canonical(self.converted, self.calendar.other)

    @property
    def display(self) -> Optional[str]:
        if self.converted is None:
            return None
        return format_date(self.converted, Style.LONG, self.calendar.other)

    @property
    def message(self) -> Optional[str]:
        if self.error_kind is None:
            return None
        return ERROR_MESSAGES[self.error_kind]

    def as_dict(self) -> Dict[str, object]:
        return {
            "calendar": self.calendar.value,
            "state": self.state.value,
            "text": self.text,
            "value": self.value.as_dict() if self.value else None,
            "converted": self.converted.as_dict() if self.converted else None,
            "copy_text": self.copy_text,
            "display": self.display,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
        }


def evaluate(raw: str, calendar: CalendarLike) -> FieldEvaluation:
    """Run one keystroke through auto-format, parse, validate and convert."""

    calendar = Calendar.coerce(calendar)
    text = auto_format(raw)
    if not text:
        return FieldEvaluation(calendar, FieldState.EMPTY, text)
    if len(_NON_DIGITS_RE.sub("", text)) < MAX_DIGITS:
        return FieldEvaluation(calendar, FieldState.TYPING, text)

    try:
        value = validate(parse(text), calendar)
    except DateError as exc:
        return FieldEvaluation(calendar, FieldState.INVALID, text, error_kind=exc.kind)

    result = convert(value, calendar)
    if not result.success:
        return FieldEvaluation(calendar, FieldState.INVALID, text, value=value, error_kind=result.error_kind)
    return FieldEvaluation(calendar, FieldState.VALID, text, value=value, converted=result.value)
