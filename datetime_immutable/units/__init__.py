"""Unit types for DateTimeImmutable."""

from __future__ import annotations

from datetime_immutable.units.inclusivity import Inclusivity
from datetime_immutable.units.month import Month
from datetime_immutable.units.timeunit import TimeUnit

__all__: list[str] = [
    "Inclusivity",
    "Month",
    "TimeUnit",
]
