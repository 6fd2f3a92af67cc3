"""Error taxonomy shared by the conversion core and its Frappe endpoints."""
from __future__ import annotations

from enum import Enum
from typing import Dict

__all__ = [
    "CalendarTableError",
    "ConversionOutOfRangeError",
    "DateError",
    "ERROR_MESSAGES",
    "ErrorKind",
    "InvalidDayError",
    "InvalidMonthError",
    "MalformedInputError",
    "NepaliCalendarError",
    "OutOfRangeError",
    "YearOutOfRangeError",
]


class ErrorKind(str, Enum):
    MALFORMED_INPUT = "malformed_input"
    INVALID_MONTH = "invalid_month"
    INVALID_DAY = "invalid_day"
    YEAR_OUT_OF_RANGE = "year_out_of_range"
    CONVERSION_OUT_OF_RANGE = "conversion_out_of_range"


ERROR_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.MALFORMED_INPUT: "Enter the date as DD-MM-YYYY or YYYY-MM-DD.",
    ErrorKind.INVALID_MONTH: "Month must be between 01 and 12.",
    ErrorKind.INVALID_DAY: "That month does not have this many days.",
    ErrorKind.YEAR_OUT_OF_RANGE: "Year is outside the supported range (1970-2100 BS, 1900-2100 AD).",
    ErrorKind.CONVERSION_OUT_OF_RANGE: "The converted date falls outside the supported calendar table.",
}


class NepaliCalendarError(Exception):
    """Base error."""


class CalendarTableError(NepaliCalendarError):
    """Raised when the bundled month table fails its load-time consistency check.

    This is a programming error; it is never reported to end users as a
    validation message.
    """


class DateError(NepaliCalendarError, ValueError):
    """A user-recoverable problem with a date value or date string."""

    kind: ErrorKind = ErrorKind.MALFORMED_INPUT

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.kind]


class MalformedInputError(DateError):
    kind = ErrorKind.MALFORMED_INPUT


class OutOfRangeError(DateError):
    """A year, month or day outside what the calendar supports."""


class InvalidMonthError(OutOfRangeError):
    kind = ErrorKind.INVALID_MONTH


class InvalidDayError(OutOfRangeError):
    kind = ErrorKind.INVALID_DAY


class YearOutOfRangeError(OutOfRangeError):
    kind = ErrorKind.YEAR_OUT_OF_RANGE


class ConversionOutOfRangeError(OutOfRangeError):
    kind = ErrorKind.CONVERSION_OUT_OF_RANGE
