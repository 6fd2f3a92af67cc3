"""Value types passed between the table, converter, parser and formatter."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from .errors import DateError, ErrorKind, ERROR_MESSAGES

__all__ = [
    "Calendar",
    "CivilDate",
    "ConversionResult",
    "Style",
    "YearRange",
    "CalendarLike",
    "StyleLike",
]


class Calendar(str, Enum):
    BS = "bs"
    AD = "ad"

    @classmethod
    def coerce(cls, value: Union["Calendar", str]) -> "Calendar":
        """Accept a member or its case-insensitive name/value."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError(
            "calendar must be one of: {}".format(", ".join(member.value for member in cls))
        )

    @property
    def other(self) -> "Calendar":
        return Calendar.AD if self is Calendar.BS else Calendar.BS


class Style(str, Enum):
    SHORT = "short"
    LONG = "long"

    @classmethod
    def coerce(cls, value: Union["Style", str]) -> "Style":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        raise ValueError("style must be either 'short' or 'long'")


@dataclass(frozen=True)
class YearRange:
    """Inclusive range of supported years."""

    first: int
    last: int

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and self.first <= year <= self.last


@dataclass(frozen=True)
class CivilDate:
    """Calendar-agnostic year/month/day triple.

    Instances are not validated on construction; a parsed but impossible
    date (``99-99-9999``) is a legitimate value until ``validate`` rejects it.
    """

    year: int
    month: int
    day: int

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def as_dict(self) -> Dict[str, int]:
        return {"year": self.year, "month": self.month, "day": self.day}

    def to_date(self) -> date:
        """Return the Gregorian ``datetime.date`` for an AD value."""

        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CivilDate":
        return cls(value.year, value.month, value.day)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a parse, validation or conversion.

    Exactly one of ``value`` and ``error_kind`` is set.
    """

    success: bool
    value: Optional[CivilDate] = None
    error_kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        if self.success and (self.value is None or self.error_kind is not None):
            raise ValueError("a successful result carries a value and no error")
        if not self.success and (self.value is not None or self.error_kind is None):
            raise ValueError("a failed result carries an error and no value")

    @classmethod
    def ok(cls, value: CivilDate) -> "ConversionResult":
        return cls(True, value, None)

    @classmethod
    def fail(cls, kind: ErrorKind) -> "ConversionResult":
        return cls(False, None, kind)

    @classmethod
    def capture(cls, func: Callable[..., CivilDate], *args, **kwargs) -> "ConversionResult":
        """Run ``func`` and fold a ``DateError`` into a failed result."""

        try:
            return cls.ok(func(*args, **kwargs))
        except DateError as exc:
            return cls.fail(exc.kind)

    @property
    def message(self) -> Optional[str]:
        if self.error_kind is None:
            return None
        return ERROR_MESSAGES[self.error_kind]

    def as_dict(self) -> Dict[str, object]:
        return {
            "success": self.success,
            "value": self.value.as_dict() if self.value else None,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "message": self.message,
        }


CalendarLike = Union[Calendar, str]
StyleLike = Union[Style, str]
