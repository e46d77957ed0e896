"""TimeUnit enumeration for calendar units.

This module provides the TimeUnit enum representing the units accepted by
add(), subtract(), diff() and the granular comparisons, along with the
moment-style aliases ("d", "days", "M", "ms", ...) they may be spelled as.
"""

from __future__ import annotations

from enum import Enum

from datetime_immutable.errors import RangeError


class TimeUnit(Enum):
    """Calendar units for temporal operations.

    Units from MILLISECOND to HOUR have a fixed length and are applied as
    elapsed time. DAY and above follow the wall clock, so they keep the
    time of day across DST transitions.

    Examples:
        >>> TimeUnit.parse("days")
        <TimeUnit.DAY: 'day'>

        >>> TimeUnit.parse("M")
        <TimeUnit.MONTH: 'month'>

        >>> TimeUnit.HOUR.is_calendar
        False
    """

    MILLISECOND = "millisecond"
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @property
    def is_calendar(self) -> bool:
        """Return True for units that follow the wall clock (DAY and above)."""
        return self in _CALENDAR_UNITS

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Resolve a unit from a TimeUnit member or an alias string.

        Single-letter aliases are case sensitive ("M" is month, "m" is
        minute); full names are not.

        Args:
            value: A TimeUnit or an alias such as "day", "days", "d".

        Returns:
            The matching TimeUnit.

        Raises:
            RangeError: If the alias is unknown.
        """
        if isinstance(value, TimeUnit):
            return value
        if isinstance(value, str):
            unit = _ALIASES.get(value)
            if unit is None:
                unit = _ALIASES.get(value.lower())
            if unit is not None:
                return unit
        raise RangeError(f"Unknown time unit {value!r}", value=value)


_CALENDAR_UNITS = frozenset(
    {TimeUnit.DAY, TimeUnit.WEEK, TimeUnit.MONTH, TimeUnit.QUARTER, TimeUnit.YEAR}
)

_ALIASES: dict[str, TimeUnit] = {
    "ms": TimeUnit.MILLISECOND,
    "millisecond": TimeUnit.MILLISECOND,
    "milliseconds": TimeUnit.MILLISECOND,
    "s": TimeUnit.SECOND,
    "second": TimeUnit.SECOND,
    "seconds": TimeUnit.SECOND,
    "m": TimeUnit.MINUTE,
    "minute": TimeUnit.MINUTE,
    "minutes": TimeUnit.MINUTE,
    "h": TimeUnit.HOUR,
    "hour": TimeUnit.HOUR,
    "hours": TimeUnit.HOUR,
    "d": TimeUnit.DAY,
    "day": TimeUnit.DAY,
    "days": TimeUnit.DAY,
    "date": TimeUnit.DAY,
    "w": TimeUnit.WEEK,
    "week": TimeUnit.WEEK,
    "weeks": TimeUnit.WEEK,
    "isoweek": TimeUnit.WEEK,
    "M": TimeUnit.MONTH,
    "month": TimeUnit.MONTH,
    "months": TimeUnit.MONTH,
    "Q": TimeUnit.QUARTER,
    "quarter": TimeUnit.QUARTER,
    "quarters": TimeUnit.QUARTER,
    "y": TimeUnit.YEAR,
    "year": TimeUnit.YEAR,
    "years": TimeUnit.YEAR,
}


__all__ = ["TimeUnit"]
