"""Calendar engine protocol.

DateTimeImmutable never does calendar math itself. Everything that needs
timezone rules, month lengths or parsing goes through an object
implementing CalendarEngine, which keeps the value type independent of the
library doing the work.

Instants handled by an engine are aware ``datetime`` objects. Operations
that would produce an instant the engine cannot represent return None
instead of raising; the caller decides how to report it.
"""

from __future__ import annotations

import datetime as _datetime
from enum import Enum
from typing import Any, Protocol

from datetime_immutable.units.timeunit import TimeUnit


class Field(Enum):
    """Calendar fields readable with get_field() and writable with set_field()."""

    YEAR = "year"
    MONTH = "month"  # 0-indexed
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"
    ISO_WEEKDAY = "iso_weekday"


class Comparison(Enum):
    """Ordering of the first instant relative to the second."""

    BEFORE = -1
    EQUAL = 0
    AFTER = 1


class CalendarEngine(Protocol):
    """Primitive calendar operations the value type is built on."""

    def timezone(self, tz: str | _datetime.tzinfo | None) -> _datetime.tzinfo:
        """Resolve a timezone name or object; None selects the default."""
        ...

    def now(self, tz: _datetime.tzinfo) -> _datetime.datetime:
        ...

    def parse(
        self, text: str, fmt: str, tz: _datetime.tzinfo
    ) -> _datetime.datetime | None:
        """Parse text with a token pattern; None if it does not match."""
        ...

    def from_native(
        self, value: _datetime.datetime, tz: _datetime.tzinfo
    ) -> _datetime.datetime | None:
        """Adopt a native datetime; naive values are read as wall time in tz."""
        ...

    def is_valid(self, value: _datetime.datetime | None) -> bool:
        ...

    def clone(self, value: _datetime.datetime) -> _datetime.datetime:
        ...

    def get_field(self, value: _datetime.datetime, field: Field) -> int:
        ...

    def set_field(
        self, value: _datetime.datetime, field: Field, amount: int
    ) -> _datetime.datetime | None:
        """Set one field, rolling out-of-range amounts into the next unit."""
        ...

    def add_duration(
        self, value: _datetime.datetime, amount: Any, unit: TimeUnit | str | None = None
    ) -> _datetime.datetime | None:
        ...

    def subtract_duration(
        self, value: _datetime.datetime, amount: Any, unit: TimeUnit | str | None = None
    ) -> _datetime.datetime | None:
        ...

    def diff(
        self,
        left: _datetime.datetime,
        right: _datetime.datetime,
        unit: TimeUnit | str | None = None,
    ) -> int:
        """Return left - right in unit, truncated toward zero."""
        ...

    def compare(
        self,
        left: _datetime.datetime,
        right: _datetime.datetime,
        unit: TimeUnit | str | None = None,
    ) -> Comparison:
        ...

    def start_of(self, value: _datetime.datetime, unit: TimeUnit | str) -> _datetime.datetime:
        ...

    def format(self, value: _datetime.datetime, pattern: str) -> str:
        ...


__all__ = [
    "CalendarEngine",
    "Comparison",
    "Field",
]
