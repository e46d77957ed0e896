"""Internal utilities for DateTimeImmutable.

This module contains private implementation details:
    - Strict bound checks for the setters
    - Constants and defaults

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datetime_immutable._internal.validation import (
    days_in_month,
    validate_day,
    validate_field,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "days_in_month",
    "validate_day",
    "validate_field",
    "validate_time",
    "validate_year",
]
