"""Month enumeration.

This module provides the Month enum. Its value is the conventional
1-based month number; ``id`` is the 0-indexed number the calendar engine
works with.
"""

from __future__ import annotations

from enum import IntEnum

from datetime_immutable.errors import RangeError


class Month(IntEnum):
    """Calendar month.

    Examples:
        >>> Month.FEBRUARY.id
        1

        >>> Month.from_id(11)
        <Month.DECEMBER: 12>
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def id(self) -> int:
        """Return the 0-indexed month number (0 = January)."""
        return self.value - 1

    @classmethod
    def from_id(cls, month_id: int) -> Month:
        """Return the Month for a 0-indexed month number.

        Raises:
            RangeError: If month_id is outside 0-11.
        """
        return cls.coerce(month_id + 1)

    @classmethod
    def coerce(cls, value: Month | int) -> Month:
        """Return a Month from a member or a 1-based month number.

        Raises:
            RangeError: If value is not between 1 and 12.
        """
        if isinstance(value, Month):
            return value
        try:
            return cls(value)
        except ValueError:
            raise RangeError(
                f"month must be between 1 and 12, got {value}",
                field="month",
                minimum=1,
                maximum=12,
                value=value,
            ) from None


__all__ = ["Month"]
