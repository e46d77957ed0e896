"""Calendar engine used by DateTimeImmutable.

This module provides:
    - CalendarEngine: the protocol of primitive calendar operations
    - PendulumEngine: the default implementation, backed by pendulum
    - default_engine(): the shared engine instance
"""

from __future__ import annotations

from datetime_immutable.engine.base import CalendarEngine, Comparison, Field
from datetime_immutable.engine.pendulum_engine import PendulumEngine

_DEFAULT_ENGINE = PendulumEngine()


def default_engine() -> CalendarEngine:
    """Return the engine shared by all DateTimeImmutable values."""
    return _DEFAULT_ENGINE


__all__: list[str] = [
    "CalendarEngine",
    "Comparison",
    "Field",
    "PendulumEngine",
    "default_engine",
]
