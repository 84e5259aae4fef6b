"""
Key - major key signatures on the line of fifths.

A key's value is the signed number of sharps (positive) or flats (negative)
in its signature, which is also the line-of-fifths coordinate of its tonic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from tonality.constants import DELTA_ENHARMONIC, ErrorMessages
from tonality.core.coordinate import Coordinate

if TYPE_CHECKING:
    from tonality.core.tpc import Tpc

# Fifths-distance of each major scale degree (I..VII) from the tonic
_DEGREE_OFFSETS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)


class Key(Coordinate):
    """
    Key signatures, named after their major key.

    Key.C is the default (no sharps or flats).
    """

    Cb = -7
    Gb = -6
    Db = -5
    Ab = -4
    Eb = -3
    Bb = -2
    F = -1
    C = 0
    G = 1
    D = 2
    A = 3
    E = 4
    B = 5
    Fs = 6
    Cs = 7

    MIN: ClassVar[Key]
    MAX: ClassVar[Key]
    NUM_OF: ClassVar[int]
    DELTA_ENHARMONIC: ClassVar[int]

    @classmethod
    def default(cls) -> Key:
        return cls.C

    def root(self) -> Tpc:
        """The tonic of the key (same coordinate, read as a Tpc)."""
        from tonality.core.tpc import Tpc

        return Tpc(self.value)

    def scale_degree(self, degree: int) -> Tpc:
        """
        The tonal pitch class on a scale degree, counted from 0 (the tonic).

        Degrees wrap around the octave, so 7 is the tonic again.
        """
        from tonality.core.tpc import Tpc

        return Tpc(self.value + _DEGREE_OFFSETS[degree % len(_DEGREE_OFFSETS)])

    def scale(self) -> list[Tpc]:
        """The seven degrees of the major scale, tonic first."""
        return [self.scale_degree(degree) for degree in range(len(_DEGREE_OFFSETS))]

    def contains(self, tpc: Tpc) -> bool:
        """Whether the pitch is diatonic in this key, spelling included."""
        return self.value - 1 <= tpc.value <= self.value + 5

    def signature(self) -> int:
        """Sharps (positive) or flats (negative) in the key signature."""
        return self.value

    def enharmonic(self, other: Key) -> bool:
        """Whether two keys sound the same in 12-TET (Gb and F#)."""
        return (self.value - other.value) % DELTA_ENHARMONIC == 0

    def __str__(self) -> str:
        return f"{self.root()} major"

    def __repr__(self) -> str:
        return f"Key.{self.name}"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from the spelling of its major tonic.

        Accepts 'Bb', 'F#', 'C#' and an optional ' major' suffix.
        """
        from tonality.core.tpc import Tpc

        text = name.strip()
        if text.lower().endswith("major"):
            text = text[: -len("major")].rstrip(" _")

        try:
            tonic = Tpc.parse(text)
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_KEY.format(name=name)) from e

        key = cls.checked(tonic.value)
        if key is None:
            raise ValueError(ErrorMessages.INVALID_KEY.format(name=name))
        return key


Key.MIN = Key.Cb
Key.MAX = Key.Cs
Key.NUM_OF = Key.MAX.value - Key.MIN.value + 1
Key.DELTA_ENHARMONIC = DELTA_ENHARMONIC
