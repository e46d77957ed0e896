"""Calendar engine backed by pendulum.

This module implements CalendarEngine on top of pendulum. pendulum owns
the timezone database, token parsing/formatting and month arithmetic; this
module only adapts its API to the primitive operations the value type
needs, and reports anything pendulum cannot represent as None.

Wall-clock vs elapsed time:
    - Field setters and DAY-or-larger units work on the wall clock, so the
      time of day is kept across DST transitions.
    - HOUR-or-smaller units are elapsed time.
"""

from __future__ import annotations

import calendar
import datetime as _datetime
import logging
import math
from collections.abc import Mapping
from typing import Any

import pendulum

from datetime_immutable._internal.constants import (
    DEFAULT_TIMEZONE,
    MAX_YEAR,
    MIN_YEAR,
    MONTHS_PER_YEAR,
)
from datetime_immutable.engine.base import Comparison, Field
from datetime_immutable.errors import InvalidTypeError, RangeError
from datetime_immutable.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)

MICROS_PER_MILLISECOND = 1_000
MICROS_PER_SECOND = 1_000_000
MICROS_PER_MINUTE = 60 * MICROS_PER_SECOND
MICROS_PER_HOUR = 60 * MICROS_PER_MINUTE
MICROS_PER_DAY = 24 * MICROS_PER_HOUR
MICROS_PER_WEEK = 7 * MICROS_PER_DAY

_ELAPSED_MICROS = {
    TimeUnit.MILLISECOND: MICROS_PER_MILLISECOND,
    TimeUnit.SECOND: MICROS_PER_SECOND,
    TimeUnit.MINUTE: MICROS_PER_MINUTE,
    TimeUnit.HOUR: MICROS_PER_HOUR,
}

_WALL_MICROS = {
    TimeUnit.DAY: MICROS_PER_DAY,
    TimeUnit.WEEK: MICROS_PER_WEEK,
}


def _abs_round(number: float) -> int:
    """Round half away from zero."""
    rounded = int(math.floor(abs(number) + 0.5))
    return -rounded if number < 0 else rounded


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division truncated toward zero."""
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def _epoch_micros(value: _datetime.datetime) -> int:
    return calendar.timegm(value.utctimetuple()) * MICROS_PER_SECOND + value.microsecond


def _wall_micros(value: _datetime.datetime) -> int:
    return calendar.timegm(value.timetuple()) * MICROS_PER_SECOND + value.microsecond


def _naive(value: _datetime.datetime) -> _datetime.datetime:
    return _datetime.datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class PendulumEngine:
    """CalendarEngine implementation using pendulum.

    The engine is stateless; one instance is shared by every value.

    Examples:
        >>> engine = PendulumEngine()
        >>> dt = engine.parse("2021-02-28 10:00:00+00:00", "YYYY-MM-DD HH:mm:ssZ", engine.timezone("UTC"))
        >>> engine.format(engine.set_field(dt, Field.DAY, 30), "YYYY-MM-DD")
        '2021-03-02'
    """

    # Construction

    def timezone(self, tz: str | _datetime.tzinfo | None) -> _datetime.tzinfo:
        if tz is None:
            tz = DEFAULT_TIMEZONE
        if isinstance(tz, _datetime.tzinfo):
            return tz
        if tz == "local":
            return pendulum.local_timezone()
        try:
            return pendulum.timezone(tz)
        except (ValueError, LookupError):
            raise RangeError(f"Unknown timezone {tz!r}", field="tz", value=tz) from None

    def now(self, tz: _datetime.tzinfo) -> pendulum.DateTime:
        return pendulum.now(tz)

    def parse(
        self, text: str, fmt: str, tz: _datetime.tzinfo
    ) -> pendulum.DateTime | None:
        try:
            return pendulum.from_format(text, fmt, tz=tz)
        except ValueError as exc:
            logger.debug("could not parse %r with %r: %s", text, fmt, exc)
            return None

    def from_native(
        self, value: _datetime.datetime, tz: _datetime.tzinfo
    ) -> pendulum.DateTime | None:
        try:
            return pendulum.instance(value, tz=tz)
        except (OverflowError, ValueError) as exc:
            logger.debug("could not adopt %r: %s", value, exc)
            return None

    def is_valid(self, value: _datetime.datetime | None) -> bool:
        return (
            isinstance(value, pendulum.DateTime)
            and value.tzinfo is not None
            and MIN_YEAR <= value.year <= MAX_YEAR
        )

    def clone(self, value: _datetime.datetime) -> pendulum.DateTime:
        return pendulum.instance(value, tz=value.tzinfo)

    # Fields

    def get_field(self, value: _datetime.datetime, field: Field) -> int:
        if field is Field.YEAR:
            return value.year
        if field is Field.MONTH:
            return value.month - 1
        if field is Field.DAY:
            return value.day
        if field is Field.HOUR:
            return value.hour
        if field is Field.MINUTE:
            return value.minute
        if field is Field.SECOND:
            return value.second
        if field is Field.MILLISECOND:
            return value.microsecond // MICROS_PER_MILLISECOND
        return value.isoweekday()

    def set_field(
        self, value: _datetime.datetime, field: Field, amount: int
    ) -> pendulum.DateTime | None:
        wall = _naive(value)
        try:
            if field is Field.YEAR:
                wall = self._with_year_month(wall, amount, wall.month - 1)
            elif field is Field.MONTH:
                wall = self._with_year_month(wall, wall.year, amount)
            elif field is Field.DAY:
                wall = wall.replace(day=1) + _datetime.timedelta(days=amount - 1)
            elif field is Field.HOUR:
                wall = wall.replace(hour=0) + _datetime.timedelta(hours=amount)
            elif field is Field.MINUTE:
                wall = wall.replace(minute=0) + _datetime.timedelta(minutes=amount)
            elif field is Field.SECOND:
                wall = wall.replace(second=0) + _datetime.timedelta(seconds=amount)
            elif field is Field.MILLISECOND:
                wall = wall.replace(microsecond=0) + _datetime.timedelta(
                    milliseconds=amount
                )
            else:
                wall = wall + _datetime.timedelta(days=amount - wall.isoweekday())
        except (OverflowError, ValueError) as exc:
            logger.debug("setting %s=%r on %s overflowed: %s", field.value, amount, value, exc)
            return None
        return self._localize(wall, value.tzinfo)

    def _with_year_month(
        self, wall: _datetime.datetime, year: int, month_id: int
    ) -> _datetime.datetime:
        # The day is clamped to the target month before any day is applied
        year, month_id = divmod(year * MONTHS_PER_YEAR + month_id, MONTHS_PER_YEAR)
        day = min(wall.day, calendar.monthrange(year, month_id + 1)[1])
        return wall.replace(year=year, month=month_id + 1, day=day)

    def _localize(
        self, wall: _datetime.datetime, tz: _datetime.tzinfo | None
    ) -> pendulum.DateTime | None:
        try:
            return pendulum.datetime(
                wall.year,
                wall.month,
                wall.day,
                wall.hour,
                wall.minute,
                wall.second,
                wall.microsecond,
                tz=tz,
            )
        except (OverflowError, ValueError) as exc:
            logger.debug("could not localize %s in %s: %s", wall, tz, exc)
            return None

    # Durations

    def add_duration(
        self, value: _datetime.datetime, amount: Any, unit: TimeUnit | str | None = None
    ) -> pendulum.DateTime | None:
        return self._shift(value, amount, unit, 1)

    def subtract_duration(
        self, value: _datetime.datetime, amount: Any, unit: TimeUnit | str | None = None
    ) -> pendulum.DateTime | None:
        return self._shift(value, amount, unit, -1)

    def _shift(
        self,
        value: _datetime.datetime,
        amount: Any,
        unit: TimeUnit | str | None,
        sign: int,
    ) -> pendulum.DateTime | None:
        delta = self._to_delta(amount, unit)
        try:
            if isinstance(delta, _datetime.timedelta):
                return value + delta if sign > 0 else value - delta
            return value.add(**{name: sign * part for name, part in delta.items()})
        except (OverflowError, ValueError) as exc:
            logger.debug("shifting %s by %r %s overflowed: %s", value, amount, unit, exc)
            return None

    def _to_delta(
        self, amount: Any, unit: TimeUnit | str | None
    ) -> _datetime.timedelta | dict[str, float]:
        """Normalize an amount to a timedelta or to pendulum add() keywords."""
        if amount is None:
            return {}
        if isinstance(amount, _datetime.timedelta):
            return amount
        if isinstance(amount, str):
            if unit is not None:
                return self._unit_delta(self._to_number(amount), unit)
            return self._parse_duration(amount)
        if _is_number(amount):
            return self._unit_delta(
                amount, TimeUnit.MILLISECOND if unit is None else unit
            )
        if isinstance(amount, tuple) and len(amount) == 2:
            return self._interval(*amount)
        if isinstance(amount, Mapping):
            if set(amount) == {"from", "to"}:
                return self._interval(amount["from"], amount["to"])
            delta: dict[str, float] = {}
            for key, part in amount.items():
                if isinstance(part, str):
                    part = self._to_number(part)
                elif not _is_number(part):
                    raise InvalidTypeError(
                        f"Invalid duration amount type {type(part).__name__} for {key!r}"
                    )
                for name, value in self._unit_delta(part, key).items():
                    delta[name] = delta.get(name, 0) + value
            return delta
        raise InvalidTypeError(f"Invalid duration type {type(amount).__name__}")

    def _unit_delta(self, amount: float, unit: TimeUnit | str) -> dict[str, float]:
        # Calendar units are whole numbers, rounded half away from zero
        unit = TimeUnit.parse(unit)
        if unit is TimeUnit.YEAR:
            return {"years": _abs_round(amount)}
        if unit is TimeUnit.QUARTER:
            return {"months": _abs_round(amount * 3)}
        if unit is TimeUnit.MONTH:
            return {"months": _abs_round(amount)}
        if unit is TimeUnit.WEEK:
            return {"days": _abs_round(amount * 7)}
        if unit is TimeUnit.DAY:
            return {"days": _abs_round(amount)}
        if unit is TimeUnit.HOUR:
            return {"hours": amount}
        if unit is TimeUnit.MINUTE:
            return {"minutes": amount}
        if unit is TimeUnit.SECOND:
            return {"seconds": amount}
        return {"microseconds": round(amount * MICROS_PER_MILLISECOND)}

    def _to_number(self, text: str) -> float:
        try:
            return float(text)
        except ValueError:
            raise RangeError(f"Invalid duration amount {text!r}", value=text) from None

    def _parse_duration(self, text: str) -> pendulum.Duration:
        try:
            parsed = pendulum.parse(text)
        except ValueError:
            parsed = None
        if not isinstance(parsed, pendulum.Duration):
            raise RangeError(f"Invalid ISO 8601 duration {text!r}", value=text)
        return parsed

    def _interval(self, start: Any, end: Any) -> _datetime.timedelta:
        if not isinstance(start, _datetime.datetime) or not isinstance(
            end, _datetime.datetime
        ):
            raise InvalidTypeError(
                "Duration bounds must be datetimes, got "
                f"{type(start).__name__} and {type(end).__name__}"
            )
        tz = self.timezone(None)
        return pendulum.instance(end, tz=tz) - pendulum.instance(start, tz=tz)

    # Comparison

    def diff(
        self,
        left: _datetime.datetime,
        right: _datetime.datetime,
        unit: TimeUnit | str | None = None,
    ) -> int:
        unit = TimeUnit.MILLISECOND if unit is None else TimeUnit.parse(unit)
        if unit in _ELAPSED_MICROS:
            elapsed = _epoch_micros(left) - _epoch_micros(right)
            return _trunc_div(elapsed, _ELAPSED_MICROS[unit])
        if unit in _WALL_MICROS:
            # Same wall clock in left's zone, so DST shifts do not count
            wall = _wall_micros(left) - _wall_micros(right.astimezone(left.tzinfo))
            return _trunc_div(wall, _WALL_MICROS[unit])
        interval = pendulum.instance(right).diff(pendulum.instance(left), False)
        if unit is TimeUnit.YEAR:
            return interval.in_years()
        months = interval.in_months()
        if unit is TimeUnit.QUARTER:
            return _trunc_div(months, 3)
        return months

    def compare(
        self,
        left: _datetime.datetime,
        right: _datetime.datetime,
        unit: TimeUnit | str | None = None,
    ) -> Comparison:
        if unit is not None:
            left = self.start_of(left, unit)
            right = self.start_of(right.astimezone(left.tzinfo), unit)
        delta = _epoch_micros(left) - _epoch_micros(right)
        if delta < 0:
            return Comparison.BEFORE
        if delta > 0:
            return Comparison.AFTER
        return Comparison.EQUAL

    def start_of(self, value: _datetime.datetime, unit: TimeUnit | str) -> pendulum.DateTime:
        unit = TimeUnit.parse(unit)
        value = pendulum.instance(value)
        if unit is TimeUnit.MILLISECOND:
            return value.replace(microsecond=value.microsecond // 1000 * 1000)
        if unit is TimeUnit.QUARTER:
            return value.start_of("year").add(months=(value.month - 1) // 3 * 3)
        return value.start_of(unit.value)

    # Rendering

    def format(self, value: _datetime.datetime, pattern: str) -> str:
        return pendulum.instance(value).format(pattern)


__all__ = ["PendulumEngine"]
