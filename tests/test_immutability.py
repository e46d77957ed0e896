"""Tests that no operation changes the receiver."""

from __future__ import annotations

import datetime as _datetime
from typing import Callable

import pytest

from datetime_immutable import DateTimeImmutable, Month

MUTATORS: list[tuple[str, Callable[[DateTimeImmutable], DateTimeImmutable]]] = [
    ("add", lambda dt: dt.add(3, "days")),
    ("add_timedelta", lambda dt: dt.add(_datetime.timedelta(hours=1))),
    ("subtract", lambda dt: dt.subtract(1, "month")),
    ("set_time", lambda dt: dt.set_time(1, 2, 3, 4)),
    ("set_time_with_overflow", lambda dt: dt.set_time_with_overflow(30, 90)),
    ("set_date", lambda dt: dt.set_date(2021, Month.JUNE, 30)),
    ("set_date_with_overflow", lambda dt: dt.set_date_with_overflow(2021, 14, 40)),
    ("add_weekdays", lambda dt: dt.add_weekdays(7)),
    ("add_working_days", lambda dt: dt.add_working_days(7)),
    ("operator_add", lambda dt: dt + _datetime.timedelta(days=1)),
]


class TestImmutability:
    """Test every mutator returns a new instance and leaves the receiver alone."""

    @pytest.mark.parametrize(
        "mutate", [m for _, m in MUTATORS], ids=[name for name, _ in MUTATORS]
    )
    def test_receiver_unchanged(
        self,
        friday: DateTimeImmutable,
        mutate: Callable[[DateTimeImmutable], DateTimeImmutable],
    ) -> None:
        """Test the receiver's instant and fields are unchanged."""
        timestamp = friday.timestamp
        rendered = friday.format("YYYY-MM-DD HH:mm:ss.SSSZ")

        result = mutate(friday)

        assert result is not friday
        assert isinstance(result, DateTimeImmutable)
        assert friday.timestamp == timestamp
        assert friday.format("YYYY-MM-DD HH:mm:ss.SSSZ") == rendered

    def test_failed_mutation_leaves_receiver(self, friday: DateTimeImmutable) -> None:
        """Test a rejected mutation produces nothing and changes nothing."""
        timestamp = friday.timestamp
        with pytest.raises(ValueError):
            friday.set_time(10, 61)
        assert friday.timestamp == timestamp

    def test_copy_is_independent(self, friday: DateTimeImmutable) -> None:
        """Test a copy does not share state with its source."""
        copy = DateTimeImmutable(friday)
        moved = copy.add(1, "day")
        assert copy == friday
        assert moved != friday

    def test_no_attribute_assignment(self, friday: DateTimeImmutable) -> None:
        """Test instances do not accept new attributes."""
        with pytest.raises(AttributeError):
            friday.extra = 1  # type: ignore[attr-defined]
