"""Comparison operations for engine instants.

This module provides the comparison predicates behind is_before(),
is_after(), is_same() and is_between(). Each takes an optional unit: with
a unit, both sides are truncated to the start of that unit in the left
instant's timezone, so ``is_before(b, "day")`` ignores the time of day.

Comparison Rules:
    - is_before: strictly earlier
    - is_after: strictly later
    - is_same: same instant (or same unit period)
    - is_between: each end is open "(" / ")" or closed "[" / "]"
"""

from __future__ import annotations

import datetime as _datetime

from datetime_immutable.engine.base import CalendarEngine, Comparison
from datetime_immutable.units.inclusivity import Inclusivity
from datetime_immutable.units.timeunit import TimeUnit

UnitLike = TimeUnit | str | None


def is_before(
    engine: CalendarEngine,
    left: _datetime.datetime,
    right: _datetime.datetime,
    unit: UnitLike = None,
) -> bool:
    """Test whether left is strictly earlier than right."""
    return engine.compare(left, right, unit) is Comparison.BEFORE


def is_after(
    engine: CalendarEngine,
    left: _datetime.datetime,
    right: _datetime.datetime,
    unit: UnitLike = None,
) -> bool:
    """Test whether left is strictly later than right."""
    return engine.compare(left, right, unit) is Comparison.AFTER


def is_same(
    engine: CalendarEngine,
    left: _datetime.datetime,
    right: _datetime.datetime,
    unit: UnitLike = None,
) -> bool:
    """Test whether left and right fall on the same instant or unit period."""
    return engine.compare(left, right, unit) is Comparison.EQUAL


def is_between(
    engine: CalendarEngine,
    value: _datetime.datetime,
    start: _datetime.datetime,
    end: _datetime.datetime,
    granularity: UnitLike = None,
    inclusivity: Inclusivity | str | None = None,
) -> bool:
    """Test whether value lies between start and end.

    Args:
        engine: The calendar engine.
        value: The instant to test.
        start: Lower bound.
        end: Upper bound.
        granularity: Optional unit both sides are truncated to.
        inclusivity: One of "()", "[)", "(]", "[]"; None means "()".

    Returns:
        True if value lies within the bounds.

    Raises:
        RangeError: If inclusivity is not a known code.

    Examples:
        >>> is_between(engine, jan_1, jan_1, jan_31, "day", "[)")
        True
        >>> is_between(engine, jan_1, jan_1, jan_31, "day", "()")
        False
    """
    bounds = Inclusivity.parse(inclusivity)
    if bounds.includes_start:
        after_start = not is_before(engine, value, start, granularity)
    else:
        after_start = is_after(engine, value, start, granularity)
    if bounds.includes_end:
        before_end = not is_after(engine, value, end, granularity)
    else:
        before_end = is_before(engine, value, end, granularity)
    return after_start and before_end


__all__ = [
    "is_before",
    "is_after",
    "is_same",
    "is_between",
]
