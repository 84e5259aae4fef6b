"""
Step - a position on the music staff.

A Step is the letter of a pitch with its accidental stripped. Steps form a
true cycle (B + 1 == C), so step arithmetic never fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tonality.constants import DELTA_SEMITONE, ErrorMessages
from tonality.core.accidental import Accidental
from tonality.core.coordinate import Coordinate

if TYPE_CHECKING:
    from tonality.core.key import Key
    from tonality.core.tpc import Tpc

NUM_STEPS = 7

# Position of each step on the circle of fifths starting at F, indexed by step
# (F=0, C=1, G=2, D=3, A=4, E=5, B=6).
_FIFTHS_POSITION: tuple[int, ...] = (1, 3, 5, 0, 2, 4, 6)

# Tpc coordinate of F double flat, the origin the fifths positions count from
_TPC_ORIGIN = -15


class Step(Coordinate):
    """
    The seven staff letters in alphabetical order (C=0 .. B=6).

    Note the order differs from the line of fifths used by Tpc and Key.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    MIN: ClassVar[Step]
    MAX: ClassVar[Step]

    def fifths_position(self) -> int:
        """Position on the circle of fifths counted from F (F=0 .. B=6)."""
        return _FIFTHS_POSITION[self.value]

    def with_accidental(self, accidental: Accidental) -> Tpc:
        """
        The tonal pitch class resulting from applying an accidental to the step.

        Step.A.with_accidental(Accidental.Flat) -> Tpc.Ab
        """
        from tonality.core.tpc import Tpc

        level = accidental.value - Accidental.DblFlat.value
        return Tpc(DELTA_SEMITONE * level + self.fifths_position() + _TPC_ORIGIN)

    def with_key(self, key: Key) -> Tpc:
        """
        The diatonic spelling of the step in the major scale of a key.

        Step.C.with_key(Key.D) -> Tpc.Cs
        Step.B.with_key(Key.Ab) -> Tpc.Bb
        """
        from tonality.core.tpc import Tpc

        # The scale of a key occupies the seven fifths [key - 1, key + 5];
        # each letter appears there exactly once.
        lowest = key.value - 1
        natural = self.fifths_position() - 1
        return Tpc(lowest + (natural - lowest) % NUM_STEPS)

    def __add__(self, other: object) -> Step:
        # Plain step counts only; other coordinates are not step distances
        if not isinstance(other, int) or isinstance(other, Coordinate):
            return self._unsupported("+", other)
        return Step((self.value + int(other)) % NUM_STEPS)

    __radd__ = __add__

    def __sub__(self, other: object) -> Step:
        if not isinstance(other, int) or isinstance(other, Coordinate):
            return self._unsupported("-", other)
        return Step((self.value - int(other)) % NUM_STEPS)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Step.{self.name}"

    @classmethod
    def parse(cls, name: str) -> Step:
        """Parse a step from its letter ('C', 'd', ...)."""
        letter = name.strip().upper()
        if letter in cls.__members__:
            return cls[letter]
        raise ValueError(ErrorMessages.UNKNOWN_STEP.format(name=name))


Step.MIN = Step.C
Step.MAX = Step.B
