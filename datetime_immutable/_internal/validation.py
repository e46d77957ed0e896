"""Validation utilities for DateTimeImmutable.

This module provides the bound checks used by the strict setters. Every
check raises RangeError carrying the offending field and its bounds.

This module is not part of the public API.
"""

from __future__ import annotations

import calendar
import logging

from datetime_immutable._internal.constants import (
    MAX_HOUR,
    MAX_MILLISECOND,
    MAX_MINUTE,
    MAX_SECOND,
    MAX_YEAR,
    MIN_YEAR,
)
from datetime_immutable.errors import RangeError

logger = logging.getLogger(__name__)


def validate_field(name: str, value: int, minimum: int, maximum: int) -> None:
    """Validate that a single field lies within an inclusive range.

    Args:
        name: Field name, used in the error message.
        value: The value to check.
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound.

    Raises:
        RangeError: If value is outside minimum..maximum.

    Examples:
        >>> validate_field("hour", 24, 0, 23)
        Traceback (most recent call last):
        ...
        RangeError: hour must be between 0 and 23, got 24
    """
    if value < minimum or value > maximum:
        logger.debug("rejected %s=%r (bounds %d..%d)", name, value, minimum, maximum)
        raise RangeError(
            f"{name} must be between {minimum} and {maximum}, got {value}",
            field=name,
            minimum=minimum,
            maximum=maximum,
            value=value,
        )


def validate_time(
    hour: int,
    minute: int | None = None,
    second: int | None = None,
    millisecond: int | None = None,
) -> None:
    """Validate time-of-day fields in order, stopping at the first violation.

    Fields passed as None are not checked.

    Raises:
        RangeError: If any provided field is out of its natural range.
    """
    validate_field("hour", hour, 0, MAX_HOUR)
    if minute is not None:
        validate_field("minute", minute, 0, MAX_MINUTE)
    if second is not None:
        validate_field("second", second, 0, MAX_SECOND)
    if millisecond is not None:
        validate_field("millisecond", millisecond, 0, MAX_MILLISECOND)


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        RangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    validate_field("year", year, MIN_YEAR, MAX_YEAR)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month using the platform calendar.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    return calendar.monthrange(year, month)[1]


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        RangeError: If day is invalid for the month.
    """
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        logger.debug("rejected day=%r for %04d-%02d", day, year, month)
        raise RangeError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}",
            field="day",
            minimum=1,
            maximum=max_day,
            value=day,
        )


__all__ = [
    "validate_field",
    "validate_time",
    "validate_year",
    "validate_day",
    "days_in_month",
]
