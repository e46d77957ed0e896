"""Core temporal types.

This module provides:
    - DateTimeImmutable: immutable point in time over a calendar engine
"""

from __future__ import annotations

from datetime_immutable.core.datetime_immutable import DateTimeImmutable

__all__: list[str] = [
    "DateTimeImmutable",
]
