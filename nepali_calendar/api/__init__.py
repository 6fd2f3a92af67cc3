"""Server-side helpers exposed by the Nepali calendar package."""

from . import calendar_data, converter, formatting, parsing, tools, validation
from .converter import ad_to_bs, bs_to_ad, convert
from .errors import CalendarTableError, DateError, ErrorKind
from .formatting import format_date
from .parsing import auto_format, parse, parse_and_validate
from .types import Calendar, CivilDate, ConversionResult, Style
from .validation import validate

__all__ = [
    "Calendar",
    "CalendarTableError",
    "CivilDate",
    "ConversionResult",
    "DateError",
    "ErrorKind",
    "Style",
    "ad_to_bs",
    "auto_format",
    "bs_to_ad",
    "calendar_data",
    "convert",
    "converter",
    "format_date",
    "formatting",
    "parse",
    "parse_and_validate",
    "parsing",
    "tools",
    "validate",
    "validation",
]
