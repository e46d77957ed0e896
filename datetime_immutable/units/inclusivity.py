"""Inclusivity enumeration for range checks.

This module provides the Inclusivity enum used by is_between(). Each
member is one of the two-character bound codes: a parenthesis excludes
the bound, a square bracket includes it.
"""

from __future__ import annotations

from enum import Enum

from datetime_immutable.errors import RangeError


class Inclusivity(Enum):
    """Which ends of a range are included.

    Examples:
        >>> Inclusivity.parse("[)")
        <Inclusivity.INCLUDE_START: '[)'>

        >>> Inclusivity.parse(None)
        <Inclusivity.EXCLUSIVE: '()'>
    """

    EXCLUSIVE = "()"
    INCLUDE_START = "[)"
    INCLUDE_END = "(]"
    INCLUSIVE = "[]"

    @property
    def includes_start(self) -> bool:
        return self.value[0] == "["

    @property
    def includes_end(self) -> bool:
        return self.value[1] == "]"

    @classmethod
    def parse(cls, value: Inclusivity | str | None) -> Inclusivity:
        """Resolve an Inclusivity from a member, a code, or None.

        None selects EXCLUSIVE.

        Raises:
            RangeError: If the code is not one of "()", "[)", "(]", "[]".
        """
        if value is None:
            return cls.EXCLUSIVE
        if isinstance(value, Inclusivity):
            return value
        try:
            return cls(value)
        except ValueError:
            raise RangeError(
                f'inclusivity must be one of "()", "[)", "(]", "[]", got {value!r}',
                field="inclusivity",
                value=value,
            ) from None


__all__ = ["Inclusivity"]
