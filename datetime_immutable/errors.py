"""DateTimeImmutable exception hierarchy.

All library-specific exceptions inherit from DateTimeImmutableError. Each
concrete error also derives from the matching builtin, so callers can catch
either ``InvalidTypeError`` or a plain ``TypeError``.
"""

from __future__ import annotations


class DateTimeImmutableError(Exception):
    """Base exception for all DateTimeImmutable errors."""

    pass


class InvalidTypeError(DateTimeImmutableError, TypeError):
    """Argument of an unsupported kind.

    Raised at a boundary when the received value is not one of the accepted
    types. The message names the received type.

    Examples:
        - Constructing from an int or a date
        - Passing a native datetime as a bound to is_between()
    """

    pass


class RangeError(DateTimeImmutableError, ValueError):
    """A value violates a numeric bound or yields an invalid instant.

    Strict setters fill in the structured attributes so callers can branch
    on the offending field without parsing the message.

    Attributes:
        field: Name of the offending field, if known.
        minimum: Inclusive lower bound for the field, if known.
        maximum: Inclusive upper bound for the field, if known.
        value: The rejected value, if known.

    Examples:
        - Parsing a string that does not match the format
        - set_time(24)
        - set_date(2021, Month.FEBRUARY, 30)
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.minimum = minimum
        self.maximum = maximum
        self.value = value


__all__ = [
    "DateTimeImmutableError",
    "InvalidTypeError",
    "RangeError",
]
