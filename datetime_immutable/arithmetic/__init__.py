"""Arithmetic and comparison built on calendar engine primitives.

Comparison Operations (from datetime_immutable.arithmetic.comparisons):
    - is_before, is_after, is_same: granular ordering tests
    - is_between: range test with open/closed ends

Day Arithmetic (from datetime_immutable.arithmetic.weekdays):
    - advance_skipping: step day by day, counting only non-skipped weekdays
"""

from __future__ import annotations

from datetime_immutable.arithmetic.comparisons import (
    is_after,
    is_before,
    is_between,
    is_same,
)
from datetime_immutable.arithmetic.weekdays import advance_skipping

__all__ = [
    "is_after",
    "is_before",
    "is_between",
    "is_same",
    "advance_skipping",
]
