"""DateTimeImmutable value type.

This module provides the DateTimeImmutable class, an immutable point in
time modeled after PHP's ``DateTimeImmutable``. All calendar math is
delegated to a CalendarEngine; this class adds construction rules, strict
vs overflow-permitting setters and weekday-skipping day arithmetic.
"""

from __future__ import annotations

import datetime as _datetime
import logging
from collections.abc import Collection, Mapping
from typing import Any, ClassVar

from datetime_immutable._internal.constants import DEFAULT_FORMAT, SUNDAY, WEEKEND
from datetime_immutable._internal.validation import (
    validate_day,
    validate_time,
    validate_year,
)
from datetime_immutable.arithmetic import comparisons
from datetime_immutable.arithmetic.weekdays import advance_skipping
from datetime_immutable.engine import CalendarEngine, Field, default_engine
from datetime_immutable.errors import InvalidTypeError, RangeError
from datetime_immutable.units.inclusivity import Inclusivity
from datetime_immutable.units.month import Month
from datetime_immutable.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)

_MISSING: Any = object()

_UNIX_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)


class DateTimeImmutable:
    """An immutable, always-valid point in time.

    A DateTimeImmutable wraps one timezone-aware instant owned by the
    calendar engine. Every operation that "modifies" the value returns a
    new instance; the receiver never changes. Every instance passes the
    engine's validity check, whichever way it was created.

    Attributes:
        timestamp: Milliseconds since 1970-01-01T00:00:00Z.
        year: The year.
        month: The month as a Month member.
        month_id: The 0-indexed month (0 = January).
        date: The day of the month.
        iso_weekday: The ISO weekday (1 = Monday .. 7 = Sunday).

    Examples:
        >>> dt = DateTimeImmutable("2020-01-03 15:30:00+00:00")
        >>> dt.iso_weekday
        5
        >>> dt.add_weekdays(1).format("YYYY-MM-DD HH:mm:ss")
        '2020-01-06 00:00:00'

        >>> dt.set_time(24)
        Traceback (most recent call last):
        ...
        RangeError: hour must be between 0 and 23, got 24
    """

    __slots__ = ("_dt",)

    engine: ClassVar[CalendarEngine] = default_engine()

    def __init__(
        self,
        value: Any = _MISSING,
        fmt: str | None = None,
        *,
        tz: str | _datetime.tzinfo | None = None,
    ) -> None:
        """Create a DateTimeImmutable.

        Args:
            value: What to build from:
                - omitted: the current instant
                - a ``datetime``: wrapped (naive values are read in ``tz``)
                - a DateTimeImmutable: copied
                - a ``str``: parsed with ``fmt``
            fmt: Token pattern for string input. Defaults to
                ``"YYYY-MM-DD HH:mm:ssZ"``.
            tz: Timezone for "now", naive datetimes and strings without an
                offset. Defaults to the local timezone.

        Raises:
            InvalidTypeError: If value is of any other type.
            RangeError: If the result is not a valid instant.
        """
        engine = self.engine
        if value is _MISSING:
            instant = engine.now(engine.timezone(tz))
        elif isinstance(value, DateTimeImmutable):
            instant = engine.clone(value._dt)
        elif isinstance(value, _datetime.datetime):
            instant = engine.from_native(value, engine.timezone(tz))
        elif isinstance(value, str):
            if not isinstance(fmt, str):
                fmt = DEFAULT_FORMAT
            instant = engine.parse(value, fmt, engine.timezone(tz))
        else:
            logger.debug("rejected input of type %s", type(value).__name__)
            raise InvalidTypeError(f"Invalid input type {type(value).__name__}")

        self._dt: _datetime.datetime = self._checked(instant)

    @classmethod
    def _checked(cls, instant: _datetime.datetime | None) -> _datetime.datetime:
        if not cls.engine.is_valid(instant):
            logger.debug("engine produced an invalid instant: %r", instant)
            raise RangeError("Could not create a valid date")
        return instant  # type: ignore[return-value]

    @classmethod
    def _from_engine(cls, instant: _datetime.datetime | None) -> DateTimeImmutable:
        """Wrap an engine instant produced by a mutator.

        Runs the same validity check as the constructor.
        """
        result = object.__new__(cls)
        result._dt = cls._checked(instant)
        return result

    @classmethod
    def now(cls, tz: str | _datetime.tzinfo | None = None) -> DateTimeImmutable:
        """Return the current instant."""
        return cls(tz=tz)

    # Accessors

    @property
    def timestamp(self) -> int:
        """Return the UNIX timestamp in milliseconds since 1970-01-01."""
        return self.engine.diff(self._dt, _UNIX_EPOCH)

    def value_of(self) -> int:
        """Return the UNIX timestamp in milliseconds since 1970-01-01."""
        return self.timestamp

    @property
    def year(self) -> int:
        return self.engine.get_field(self._dt, Field.YEAR)

    @property
    def month_id(self) -> int:
        """Return the 0-indexed month (0 = January .. 11 = December)."""
        return self.engine.get_field(self._dt, Field.MONTH)

    @property
    def month(self) -> Month:
        return Month.from_id(self.month_id)

    @property
    def date(self) -> int:
        """Return the day of the month."""
        return self.engine.get_field(self._dt, Field.DAY)

    @property
    def iso_weekday(self) -> int:
        """Return the ISO weekday (1 = Monday .. 7 = Sunday)."""
        return self.engine.get_field(self._dt, Field.ISO_WEEKDAY)

    @property
    def hour(self) -> int:
        return self.engine.get_field(self._dt, Field.HOUR)

    @property
    def minute(self) -> int:
        return self.engine.get_field(self._dt, Field.MINUTE)

    @property
    def second(self) -> int:
        return self.engine.get_field(self._dt, Field.SECOND)

    @property
    def millisecond(self) -> int:
        return self.engine.get_field(self._dt, Field.MILLISECOND)

    @property
    def timezone_name(self) -> str | None:
        return self._dt.tzname()

    def format(self, pattern: str) -> str:
        """Render the instant with an engine token pattern.

        Args:
            pattern: Token pattern such as ``"YYYY-MM-DD HH:mm:ss"``; passed
                to the engine unchanged.

        Returns:
            The formatted string.
        """
        return self.engine.format(self._dt, pattern)

    def to_datetime(self) -> _datetime.datetime:
        """Return the instant as an aware ``datetime`` (an independent copy)."""
        return self.engine.clone(self._dt)

    def to_iso_format(self) -> str:
        return self._dt.isoformat()

    # Duration arithmetic

    def add(self, amount: Any = None, unit: TimeUnit | str | None = None) -> DateTimeImmutable:
        """Return a new instance shifted forward by a duration.

        Args:
            amount: One of:
                - a ``timedelta`` or ``pendulum.Duration``
                - a number with ``unit`` (milliseconds if no unit)
                - an ISO 8601 duration string such as ``"P1DT2H"``
                - a ``(start, end)`` pair or ``{"from": ..., "to": ...}``
                - a unit mapping such as ``{"days": 1, "months": 2}``
            unit: A TimeUnit or alias ("days", "d", "M", ...).

        Returns:
            A new DateTimeImmutable.

        Raises:
            InvalidTypeError: If amount is of an unsupported type.
            RangeError: If the unit or duration string is invalid, or the
                result is out of range.

        Examples:
            >>> DateTimeImmutable("2021-01-31 00:00:00+00:00").add(1, "month").date
            28
        """
        return self._from_engine(
            self.engine.add_duration(self._dt, self._unwrap_amount(amount), unit)
        )

    def subtract(
        self, amount: Any = None, unit: TimeUnit | str | None = None
    ) -> DateTimeImmutable:
        """Return a new instance shifted backward by a duration.

        Accepts the same amounts as add().
        """
        return self._from_engine(
            self.engine.subtract_duration(self._dt, self._unwrap_amount(amount), unit)
        )

    @staticmethod
    def _unwrap_amount(amount: Any) -> Any:
        if isinstance(amount, tuple) and len(amount) == 2:
            return tuple(_unwrap(end) for end in amount)
        if isinstance(amount, Mapping) and set(amount) == {"from", "to"}:
            return {"from": _unwrap(amount["from"]), "to": _unwrap(amount["to"])}
        return amount

    # Setters

    def set_time(
        self,
        hour: int,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> DateTimeImmutable:
        """Return a new instance with the time of day replaced.

        Every provided field is checked against its natural range before
        anything is applied. Fields passed as None are left untouched.

        Args:
            hour: Hour (0-23).
            minute: Minute (0-59).
            second: Second (0-59).
            millisecond: Millisecond (0-999).

        Returns:
            A new DateTimeImmutable.

        Raises:
            RangeError: If any provided field is out of range. The error's
                ``field``, ``minimum`` and ``maximum`` name the violation.
        """
        validate_time(hour, minute, second, millisecond)
        return self.set_time_with_overflow(hour, minute, second, millisecond)

    def set_time_with_overflow(
        self,
        hour: int,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
    ) -> DateTimeImmutable:
        """Return a new instance with the time of day replaced, rolling over.

        Out-of-range values roll into the next unit, so ``minute=74`` adds
        one hour and sets the minute to 14. Fields are applied in order
        hour, minute, second, millisecond.

        Examples:
            >>> dt = DateTimeImmutable("2020-01-01 00:00:00+00:00")
            >>> dt.set_time_with_overflow(0, 74).format("HH:mm")
            '01:14'
        """
        return self._set_fields(
            (Field.HOUR, hour),
            (Field.MINUTE, minute),
            (Field.SECOND, second),
            (Field.MILLISECOND, millisecond),
        )

    def set_date(self, year: int, month: Month | int, day: int) -> DateTimeImmutable:
        """Return a new instance with the calendar date replaced.

        Args:
            year: The year.
            month: A Month, or the 1-based month number.
            day: The day of the month.

        Returns:
            A new DateTimeImmutable.

        Raises:
            RangeError: If the month is not 1-12, the year is unsupported,
                or the day does not exist in that month.

        Examples:
            >>> dt = DateTimeImmutable("2021-01-15 00:00:00+00:00")
            >>> dt.set_date(2021, Month.FEBRUARY, 30)
            Traceback (most recent call last):
            ...
            RangeError: day must be between 1 and 28 for 2021-02, got 30
        """
        month = Month.coerce(month)
        validate_year(year)
        validate_day(year, month.value, day)
        return self.set_date_with_overflow(year, month.id, day)

    def set_date_with_overflow(
        self, year: int, month_id: int, day: int
    ) -> DateTimeImmutable:
        """Return a new instance with the calendar date replaced, rolling over.

        A month_id beyond 11 rolls into the following year(s); a day beyond
        the month's length rolls into the following month(s). Fields are
        applied in order year, month, day.

        Args:
            year: The year.
            month_id: The 0-indexed month.
            day: The day of the month.

        Examples:
            >>> dt = DateTimeImmutable("2021-01-15 00:00:00+00:00")
            >>> dt.set_date_with_overflow(2021, 1, 30).format("YYYY-MM-DD")
            '2021-03-02'
        """
        return self._set_fields(
            (Field.YEAR, year),
            (Field.MONTH, month_id),
            (Field.DAY, day),
        )

    def _set_fields(self, *fields: tuple[Field, int | None]) -> DateTimeImmutable:
        instant = self._dt
        for field, amount in fields:
            if amount is None:
                continue
            instant = self._checked(self.engine.set_field(instant, field, amount))
        return self._from_engine(instant)

    # Day arithmetic

    def add_weekdays(self, days: int) -> DateTimeImmutable:
        """Return a new instance ``days`` weekdays later, at midnight.

        Saturdays and Sundays are stepped over and never counted, even as
        the landing day. ``days <= 0`` keeps the calendar day.

        Examples:
            >>> friday = DateTimeImmutable("2020-01-03 15:30:00+00:00")
            >>> friday.add_weekdays(1).format("dddd HH:mm")
            'Monday 00:00'
        """
        return self._advance(days, WEEKEND)

    def add_working_days(self, days: int) -> DateTimeImmutable:
        """Return a new instance ``days`` working days later, at midnight.

        Only Sundays are stepped over; Saturday is a working day.
        """
        return self._advance(days, {SUNDAY})

    def _advance(self, days: int, skipped: Collection[int]) -> DateTimeImmutable:
        instant = advance_skipping(self.engine, self._dt, days, skipped)
        # Time of day is always cleared, as with PHP's DateTimeImmutable
        return self._from_engine(instant).set_time(0, 0, 0, 0)

    # Comparison

    def diff(self, other: DateTimeImmutable | _datetime.datetime, unit: TimeUnit | str | None = None) -> int:
        """Return the signed difference ``self - other``.

        Args:
            other: A DateTimeImmutable or an aware/naive ``datetime``.
            unit: Result unit; milliseconds if omitted. The result is
                truncated toward zero.

        Returns:
            The difference as an int.

        Examples:
            >>> a = DateTimeImmutable("2020-01-02 12:00:00+00:00")
            >>> b = DateTimeImmutable("2020-01-01 00:00:00+00:00")
            >>> a.diff(b, "days"), b.diff(a, "days")
            (1, -1)
        """
        return self.engine.diff(self._dt, self._coerce(other), unit)

    def is_before(
        self, other: DateTimeImmutable | _datetime.datetime, unit: TimeUnit | str | None = None
    ) -> bool:
        """Return True if this instant is strictly earlier than other.

        With a unit, both sides are truncated to that unit first, so
        ``is_before(other, "day")`` ignores the time of day.
        """
        return comparisons.is_before(self.engine, self._dt, self._coerce(other), unit)

    def is_after(
        self, other: DateTimeImmutable | _datetime.datetime, unit: TimeUnit | str | None = None
    ) -> bool:
        """Return True if this instant is strictly later than other."""
        return comparisons.is_after(self.engine, self._dt, self._coerce(other), unit)

    def is_same(
        self, other: DateTimeImmutable | _datetime.datetime, unit: TimeUnit | str | None = None
    ) -> bool:
        """Return True if both fall on the same instant (or unit period)."""
        return comparisons.is_same(self.engine, self._dt, self._coerce(other), unit)

    def is_between(
        self,
        from_: DateTimeImmutable,
        to: DateTimeImmutable,
        granularity: TimeUnit | str | None = None,
        inclusivity: Inclusivity | str | None = None,
    ) -> bool:
        """Return True if this instant lies between two others.

        Args:
            from_: Lower bound.
            to: Upper bound.
            granularity: Optional unit both sides are truncated to.
            inclusivity: "()" (default), "[)", "(]" or "[]".

        Raises:
            InvalidTypeError: If either bound is not a DateTimeImmutable.
            RangeError: If inclusivity is not a known code.
        """
        if not isinstance(from_, DateTimeImmutable):
            raise InvalidTypeError(
                'Argument "from_" must be an instance of DateTimeImmutable, '
                f"got {type(from_).__name__}"
            )
        if not isinstance(to, DateTimeImmutable):
            raise InvalidTypeError(
                'Argument "to" must be an instance of DateTimeImmutable, '
                f"got {type(to).__name__}"
            )
        return comparisons.is_between(
            self.engine, self._dt, from_._dt, to._dt, granularity, inclusivity
        )

    def _coerce(self, other: object) -> _datetime.datetime:
        if isinstance(other, DateTimeImmutable):
            return other._dt
        if isinstance(other, _datetime.datetime):
            engine = self.engine
            return self._checked(engine.from_native(other, engine.timezone(None)))
        raise InvalidTypeError(
            f"Expected DateTimeImmutable or datetime, got {type(other).__name__}"
        )

    # Operators

    def __add__(self, other: object) -> DateTimeImmutable:
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> DateTimeImmutable:
        if not isinstance(other, _datetime.timedelta):
            return NotImplemented
        return self.subtract(other)

    def __eq__(self, other: object) -> bool:
        """Two values are equal if they represent the same instant."""
        if not isinstance(other, DateTimeImmutable):
            return NotImplemented
        return self.is_same(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeImmutable):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTimeImmutable):
            return NotImplemented
        return not self.is_after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTimeImmutable):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTimeImmutable):
            return NotImplemented
        return not self.is_before(other)

    def __hash__(self) -> int:
        return hash(self.timestamp)

    def __int__(self) -> int:
        return self.timestamp

    def __repr__(self) -> str:
        return f"DateTimeImmutable({self.to_iso_format()!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


def _unwrap(value: object) -> object:
    if isinstance(value, DateTimeImmutable):
        return value._dt
    return value


__all__ = ["DateTimeImmutable"]
