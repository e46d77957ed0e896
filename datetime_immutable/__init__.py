"""DateTimeImmutable: an immutable date/time value in the manner of PHP.

DateTimeImmutable wraps one timezone-aware instant and never changes it:
every "modifying" call returns a new value. Calendar math (timezones,
month lengths, parsing and formatting) is delegated to a calendar engine,
pendulum by default.

Core Types:
    DateTimeImmutable: The immutable value type

Units:
    Month: Calendar month (1-based value, 0-indexed id)
    TimeUnit: Units for add/subtract/diff and granular comparisons
    Inclusivity: Bound codes for is_between ("()", "[)", "(]", "[]")

Engine:
    CalendarEngine: Protocol of primitive calendar operations
    PendulumEngine: Default engine backed by pendulum

Exceptions:
    DateTimeImmutableError: Base exception
    InvalidTypeError: Argument of an unsupported kind
    RangeError: Value out of range or invalid instant

Example:
    >>> from datetime_immutable import DateTimeImmutable, Month
    >>> dt = DateTimeImmutable("2021-01-29 09:00:00+00:00")
    >>> dt.add_weekdays(1).format("YYYY-MM-DD")
    '2021-02-01'
    >>> dt.set_date(2021, Month.FEBRUARY, 28).format("YYYY-MM-DD")
    '2021-02-28'
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from datetime_immutable.core.datetime_immutable import DateTimeImmutable

# Engine
from datetime_immutable.engine import CalendarEngine, PendulumEngine

# Exceptions
from datetime_immutable.errors import (
    DateTimeImmutableError,
    InvalidTypeError,
    RangeError,
)

# Units
from datetime_immutable.units.inclusivity import Inclusivity
from datetime_immutable.units.month import Month
from datetime_immutable.units.timeunit import TimeUnit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "DateTimeImmutable",
    # Units
    "Inclusivity",
    "Month",
    "TimeUnit",
    # Engine
    "CalendarEngine",
    "PendulumEngine",
    # Exceptions
    "DateTimeImmutableError",
    "InvalidTypeError",
    "RangeError",
]
