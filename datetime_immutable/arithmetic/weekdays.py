"""Weekday-skipping day arithmetic.

This module provides the day-by-day advance loop behind add_weekdays()
and add_working_days(). A day is "skipped" purely by its ISO weekday;
there is no holiday calendar.
"""

from __future__ import annotations

import datetime as _datetime
from collections.abc import Collection

from datetime_immutable.engine.base import CalendarEngine, Field
from datetime_immutable.units.timeunit import TimeUnit


def advance_skipping(
    engine: CalendarEngine,
    value: _datetime.datetime,
    days: int,
    skipped: Collection[int],
) -> _datetime.datetime | None:
    """Advance one calendar day at a time, counting only non-skipped days.

    A landing day whose ISO weekday is in ``skipped`` is stepped over and
    never counted. Counts of zero or less return the value unchanged.

    Args:
        engine: The calendar engine doing the per-day addition.
        value: The starting instant.
        days: Number of counted days to advance.
        skipped: ISO weekdays (1=Monday..7=Sunday) that do not count.

    Returns:
        The resulting instant, or None if the engine could not represent it.

    Examples:
        >>> # Friday + 1 weekday, skipping Saturday and Sunday -> Monday
        >>> advance_skipping(engine, friday, 1, {6, 7}).isoweekday()
        1
    """
    current: _datetime.datetime | None = value
    while days > 0:
        current = engine.add_duration(current, 1, TimeUnit.DAY)
        if current is None:
            return None
        if engine.get_field(current, Field.ISO_WEEKDAY) not in skipped:
            days -= 1
    return current


__all__ = ["advance_skipping"]
