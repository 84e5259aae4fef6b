"""
Interval - distances between tonal pitch classes with enharmonic distinction.

Intervals are measured along the line of fifths, not in semitones: the
augmented fourth and the diminished fifth span the same six semitones but
are different intervals, twelve fifths apart.
"""

from __future__ import annotations

import re
from typing import ClassVar

from tonality.constants import DELTA_ENHARMONIC, ErrorMessages
from tonality.core.coordinate import Coordinate

_SHORT_NAME_RE = re.compile(r"^(d|m|P|M|A)([1-7])$")


class Interval(Coordinate):
    """
    An interval relates two tonal pitch classes to each other.

    Intervals are ordered by distance on the line of fifths, not by the
    number of semitones: Interval.P5 < Interval.Aug4.
    """

    Dim2 = -12
    Dim6 = -11
    Dim3 = -10
    Dim7 = -9
    Dim4 = -8
    Dim1 = -7
    Dim5 = -6
    Min2 = -5
    Min6 = -4
    Min3 = -3
    Min7 = -2
    P4 = -1
    Unison = 0
    P5 = 1
    Maj2 = 2
    Maj6 = 3
    Maj3 = 4
    Maj7 = 5
    Aug4 = 6
    Aug1 = 7
    Aug5 = 8
    Aug2 = 9
    Aug6 = 10
    Aug3 = 11
    Aug7 = 12

    # The biggest interval is an augmented seventh, the smallest a diminished second
    MIN: ClassVar[Interval]
    MAX: ClassVar[Interval]
    DELTA_ENHARMONIC: ClassVar[int]

    @classmethod
    def default(cls) -> Interval:
        return cls.Unison

    def enharmonic(self, other: Interval) -> bool:
        """
        Whether two intervals span the same number of semitones in 12-TET.

        Interval.Aug4.enharmonic(Interval.Dim5) -> True
        Interval.Unison.enharmonic(Interval.Aug1) -> False
        """
        return (self.value - other.value) % DELTA_ENHARMONIC == 0

    def semitones(self) -> int:
        """Size in 12-TET semitones, reduced to 0..11."""
        return (self.value * 7) % 12

    def number(self) -> int:
        """The generic interval (1 = unison .. 7 = seventh)."""
        # A fifth spans four steps
        return (self.value * 4) % 7 + 1

    def quality(self) -> str:
        """Quality letter: 'd', 'm', 'P', 'M' or 'A'."""
        if self.value <= -6:
            return "d"
        if self.value <= -2:
            return "m"
        if self.value <= 1:
            return "P"
        if self.value <= 5:
            return "M"
        return "A"

    def short_name(self) -> str:
        """Quality and number, e.g. 'A4', 'm3', 'P1'."""
        return f"{self.quality()}{self.number()}"

    def __add__(self, other: object) -> Interval | None:
        if not isinstance(other, Interval):
            return self._unsupported("+", other)
        return Interval.checked(self.value + other.value)

    def __sub__(self, other: object) -> Interval | None:
        if not isinstance(other, Interval):
            return self._unsupported("-", other)
        return Interval.checked(self.value - other.value)

    def __neg__(self) -> Interval:
        """The same interval in the opposite direction."""
        return Interval(-self.value)

    def __str__(self) -> str:
        return self.short_name()

    def __repr__(self) -> str:
        return f"Interval.{self.name}"

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse an interval from its short name ('P5', 'A4', 'd7')."""
        match = _SHORT_NAME_RE.match(name.strip())
        if match is None:
            raise ValueError(ErrorMessages.UNKNOWN_INTERVAL.format(name=name))
        for interval in cls:
            if interval.short_name() == name.strip():
                return interval
        # Perfect seconds, major fifths and the like do not exist
        raise ValueError(ErrorMessages.UNKNOWN_INTERVAL.format(name=name))


Interval.MIN = Interval.Dim2
Interval.MAX = Interval.Aug7
Interval.DELTA_ENHARMONIC = DELTA_ENHARMONIC
