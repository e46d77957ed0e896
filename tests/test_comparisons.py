"""Tests for diff() and the comparison predicates."""

from __future__ import annotations

import datetime as _datetime

import pytest

from datetime_immutable import DateTimeImmutable, Inclusivity, InvalidTypeError, RangeError


def dt(text: str) -> DateTimeImmutable:
    return DateTimeImmutable(text + "+00:00")


class TestDiff:
    """Test diff()."""

    def test_milliseconds_by_default(self, jan_1: DateTimeImmutable) -> None:
        """Test the default unit is milliseconds."""
        assert jan_1.add(1, "second").diff(jan_1) == 1000

    def test_sign_convention(self, jan_1: DateTimeImmutable, jan_31: DateTimeImmutable) -> None:
        """Test diff is self - other."""
        assert jan_31.diff(jan_1, "days") == 30
        assert jan_1.diff(jan_31, "days") == -30

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("2020-01-01 00:00:00", "2020-01-01 00:00:00"),
            ("2020-01-01 00:00:00", "2021-06-15 13:45:10"),
            ("1999-12-31 23:59:59", "2000-01-01 00:00:00"),
        ],
    )
    @pytest.mark.parametrize("unit", [None, "seconds", "hours", "days", "weeks", "months", "years"])
    def test_antisymmetric(self, a: str, b: str, unit: str | None) -> None:
        """Test a.diff(b) == -b.diff(a)."""
        left, right = dt(a), dt(b)
        assert left.diff(right, unit) == -right.diff(left, unit)

    def test_truncates_toward_zero(self) -> None:
        """Test partial units are truncated toward zero on both sides."""
        a = dt("2020-01-02 11:00:00")
        b = dt("2020-01-01 12:00:00")
        assert a.diff(b, "days") == 0
        assert a.diff(b, "hours") == 23
        assert b.diff(a, "hours") == -23

    def test_months_and_years(self) -> None:
        """Test calendar units."""
        a = dt("2022-03-15 00:00:00")
        b = dt("2020-01-15 00:00:00")
        assert a.diff(b, "months") == 26
        assert a.diff(b, "quarters") == 8
        assert a.diff(b, "years") == 2
        assert b.diff(a, "months") == -26

    def test_days_across_dst_change(self) -> None:
        """Test day differences follow the wall clock across DST."""
        fmt = "YYYY-MM-DD HH:mm"
        before = DateTimeImmutable("2021-03-27 12:00", fmt, tz="Europe/Paris")
        after = DateTimeImmutable("2021-03-28 12:00", fmt, tz="Europe/Paris")
        assert after.diff(before, "days") == 1
        assert after.diff(before, "hours") == 23

    def test_native_datetime(self, jan_1: DateTimeImmutable) -> None:
        """Test a native datetime is accepted."""
        native = _datetime.datetime(2019, 12, 31, tzinfo=_datetime.timezone.utc)
        assert jan_1.diff(native, "days") == 1

    def test_invalid_type(self, jan_1: DateTimeImmutable) -> None:
        """Test unsupported types raise InvalidTypeError."""
        with pytest.raises(InvalidTypeError, match="str"):
            jan_1.diff("2020-01-01")


class TestBeforeAfter:
    """Test is_before(), is_after() and is_same()."""

    def test_plain(self, jan_1: DateTimeImmutable, jan_31: DateTimeImmutable) -> None:
        """Test strict ordering without a unit."""
        assert jan_1.is_before(jan_31)
        assert not jan_31.is_before(jan_1)
        assert jan_31.is_after(jan_1)
        assert not jan_1.is_before(jan_1)
        assert not jan_1.is_after(jan_1)

    def test_day_granularity(self) -> None:
        """Test a unit ignores smaller fields."""
        morning = dt("2020-01-01 08:00:00")
        evening = dt("2020-01-01 20:00:00")
        assert morning.is_before(evening)
        assert not morning.is_before(evening, "day")
        assert not evening.is_after(morning, "day")
        assert morning.is_same(evening, "day")
        assert not morning.is_same(evening)

    def test_month_granularity(self, jan_1: DateTimeImmutable, jan_31: DateTimeImmutable) -> None:
        """Test month granularity."""
        assert jan_1.is_same(jan_31, "month")
        assert jan_1.is_before(dt("2020-02-01 00:00:00"), "month")

    def test_granularity_uses_own_timezone(self) -> None:
        """Test the other side is read in this instance's timezone."""
        tokyo = DateTimeImmutable("2020-01-02 01:00:00+09:00")
        utc = dt("2020-01-02 03:00:00")
        # Both on Jan 2 in Tokyo; Jan 1 and Jan 2 in UTC
        assert tokyo.is_same(utc, "day")
        assert not utc.is_same(tokyo, "day")

    def test_native_datetime(self, jan_1: DateTimeImmutable) -> None:
        """Test a native datetime is accepted."""
        native = _datetime.datetime(2020, 6, 1, tzinfo=_datetime.timezone.utc)
        assert jan_1.is_before(native)
        assert not jan_1.is_after(native, "year")

    def test_operators(self, jan_1: DateTimeImmutable, jan_31: DateTimeImmutable) -> None:
        """Test Python comparison operators."""
        assert jan_1 < jan_31
        assert jan_1 <= jan_31
        assert jan_31 > jan_1
        assert jan_31 >= jan_31
        assert jan_1 == DateTimeImmutable(jan_1)
        assert jan_1 != jan_31
        assert sorted([jan_31, jan_1]) == [jan_1, jan_31]

    def test_equal_across_offsets(self) -> None:
        """Test equality and hashing are by instant."""
        a = DateTimeImmutable("2020-01-01 12:00:00+00:00")
        b = DateTimeImmutable("2020-01-01 14:00:00+02:00")
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_not_equal_to_other_types(self, jan_1: DateTimeImmutable) -> None:
        """Test comparing with other types is never equal."""
        assert jan_1 != jan_1.timestamp
        with pytest.raises(TypeError):
            jan_1 < 5  # noqa: B015


class TestIsBetween:
    """Test is_between()."""

    @pytest.fixture
    def bounds(self) -> tuple[DateTimeImmutable, DateTimeImmutable]:
        return dt("2020-01-01 00:00:00"), dt("2020-01-31 00:00:00")

    def test_inclusive_start(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test "[)" includes the start and "()" does not."""
        start, end = bounds
        x = dt("2020-01-01 00:00:00")
        assert x.is_between(start, end, "day", "[)")
        assert not x.is_between(start, end, "day", "()")

    def test_default_is_exclusive(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test omitting inclusivity excludes both ends."""
        start, end = bounds
        assert not start.is_between(start, end)
        assert not end.is_between(start, end)
        assert dt("2020-01-15 00:00:00").is_between(start, end)

    @pytest.mark.parametrize(
        ("code", "at_start", "at_end"),
        [
            ("()", False, False),
            ("[)", True, False),
            ("(]", False, True),
            ("[]", True, True),
            (Inclusivity.INCLUSIVE, True, True),
        ],
    )
    def test_inclusivity_codes(
        self,
        bounds: tuple[DateTimeImmutable, DateTimeImmutable],
        code: Inclusivity | str,
        at_start: bool,
        at_end: bool,
    ) -> None:
        """Test every inclusivity code at both ends."""
        start, end = bounds
        assert start.is_between(start, end, None, code) is at_start
        assert end.is_between(start, end, None, code) is at_end

    def test_granularity(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test granularity truncates before comparing."""
        start, end = bounds
        late_on_last_day = dt("2020-01-31 18:00:00")
        assert not late_on_last_day.is_between(start, end, None, "[]")
        assert late_on_last_day.is_between(start, end, "day", "[]")

    def test_outside(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test values outside the range."""
        start, end = bounds
        assert not dt("2019-12-31 23:59:59").is_between(start, end, None, "[]")
        assert not dt("2020-02-01 00:00:00").is_between(start, end, None, "[]")

    def test_invalid_inclusivity(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test unknown codes raise RangeError."""
        start, end = bounds
        with pytest.raises(RangeError, match="inclusivity"):
            start.is_between(start, end, None, "[[")

    def test_from_must_be_instance(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test a native lower bound raises InvalidTypeError."""
        start, end = bounds
        native = start.to_datetime()
        with pytest.raises(InvalidTypeError, match='"from_"'):
            start.is_between(native, end)  # type: ignore[arg-type]

    def test_to_must_be_instance(self, bounds: tuple[DateTimeImmutable, DateTimeImmutable]) -> None:
        """Test a string upper bound raises InvalidTypeError naming the argument."""
        start, _ = bounds
        with pytest.raises(InvalidTypeError, match='"to"'):
            start.is_between(start, "2020-01-31")  # type: ignore[arg-type]
