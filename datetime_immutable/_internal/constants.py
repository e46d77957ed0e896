"""Internal constants for DateTimeImmutable.

These constants define the defaults and limits used throughout the
library. This module is not part of the public API.
"""

from __future__ import annotations

# Parse pattern used when a string is given without a format
DEFAULT_FORMAT: str = "YYYY-MM-DD HH:mm:ssZ"

# Timezone used for "now", naive datetimes and offset-less strings
DEFAULT_TIMEZONE: str = "local"

# Inclusive bounds for the strict setters
MAX_HOUR: int = 23
MAX_MINUTE: int = 59
MAX_SECOND: int = 59
MAX_MILLISECOND: int = 999

# Year limits (what the native datetime can represent)
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

MONTHS_PER_YEAR: int = 12

# ISO weekdays (1=Monday..7=Sunday)
SATURDAY: int = 6
SUNDAY: int = 7
WEEKEND: frozenset[int] = frozenset({SATURDAY, SUNDAY})


__all__ = [
    "DEFAULT_FORMAT",
    "DEFAULT_TIMEZONE",
    "MAX_HOUR",
    "MAX_MINUTE",
    "MAX_SECOND",
    "MAX_MILLISECOND",
    "MIN_YEAR",
    "MAX_YEAR",
    "MONTHS_PER_YEAR",
    "SATURDAY",
    "SUNDAY",
    "WEEKEND",
]
