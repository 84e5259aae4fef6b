"""
Shared base for the bounded coordinate enums.

Every core type is an IntEnum whose value is its coordinate. The members of
each type cover one contiguous integer range, so a raw integer is valid
exactly when it lies between the smallest and largest member.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeVar

_C = TypeVar("_C", bound="Coordinate")


class Coordinate(IntEnum):
    """
    A bounded, contiguous integer coordinate.

    Addition and subtraction are closed: a subclass supports only the
    operands it handles explicitly, everything else raises TypeError rather
    than falling back to int arithmetic. Use ``.value`` for raw integers.

    Comparison and hashing stay those of int, so members of different
    types with the same coordinate are equal (Key.C == Tpc.C == Step.C == 0)
    and collide as keys of one dict. Compare within a single type.
    """

    @classmethod
    def checked(cls: type[_C], value: int) -> _C | None:
        """
        Convert a raw coordinate, reporting absence instead of raising.

        Use the constructor (``Tpc(7)``) when an out-of-range value is a
        programming error, and ``checked`` when it is a legitimate outcome.
        """
        if min(cls).value <= value <= max(cls).value:
            return cls(value)
        return None

    def _unsupported(self, op: str, other: object) -> object:
        # Another coordinate type may implement the reflected operation;
        # a plain int would otherwise answer with int arithmetic.
        if isinstance(other, Coordinate):
            return NotImplemented
        raise TypeError(
            f"unsupported operand type(s) for {op}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __add__(self, other: object) -> object:
        return self._unsupported("+", other)

    def __radd__(self, other: object) -> object:
        return self._unsupported("+", other)

    def __sub__(self, other: object) -> object:
        return self._unsupported("-", other)

    def __rsub__(self, other: object) -> object:
        return self._unsupported("-", other)

    def __format__(self, format_spec: str) -> str:
        # IntEnum would format the bare coordinate; format the name instead.
        return format(str(self), format_spec)
