"""
Tpc - tonal pitch classes.

A tonal pitch class is a pitch class together with its spelling: G# and Ab
are different Tpcs. Tpcs are laid out on the line of fifths from F double
flat (-15) to B double sharp (19), with C at 0, so that

- adding DELTA_SEMITONE (7) raises the accidental by one, keeping the letter;
- coordinates DELTA_ENHARMONIC (12) apart are enharmonic.
"""

from __future__ import annotations

from typing import ClassVar

from tonality.constants import DELTA_ENHARMONIC, DELTA_SEMITONE, ErrorMessages
from tonality.core.accidental import Accidental
from tonality.core.alteration import Alteration, fifths_offset
from tonality.core.coordinate import Coordinate
from tonality.core.interval import Interval
from tonality.core.key import Key
from tonality.core.step import Step

# Step of a Tpc by coordinate modulo 7
_STEP_BY_RESIDUE: tuple[Step, ...] = (
    Step.C,
    Step.G,
    Step.D,
    Step.A,
    Step.E,
    Step.B,
    Step.F,
)


class Tpc(Coordinate):
    """
    Tonal pitch class: the fully spelled pitch class.

    Ordered along the line of fifths (Tpc.F < Tpc.C < Tpc.G), not by pitch.
    """

    Fbb = -15
    Cbb = -14
    Gbb = -13
    Dbb = -12
    Abb = -11
    Ebb = -10
    Bbb = -9
    Fb = -8
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
    Gs = 8
    Ds = 9
    As = 10
    Es = 11
    Bs = 12
    Fss = 13
    Css = 14
    Gss = 15
    Dss = 16
    Ass = 17
    Ess = 18
    Bss = 19

    MIN: ClassVar[Tpc]
    MAX: ClassVar[Tpc]
    DELTA_SEMITONE: ClassVar[int]
    DELTA_ENHARMONIC: ClassVar[int]

    def step(self) -> Step:
        """The staff letter of the pitch, without its accidental."""
        return _STEP_BY_RESIDUE[self.value % 7]

    def accidental(self) -> Accidental:
        """The absolute accidental of the spelling."""
        return Accidental((self.value + 1) // DELTA_SEMITONE)

    def alteration(self, key: Key) -> Alteration:
        """
        Semitones by which this spelling differs from the diatonic one in a key.

        Tpc.Fs.alteration(Key.C) -> 1
        Tpc.C.alteration(Key.D) -> -1
        """
        return (self.value - key.value - Tpc.MIN.value + Key.MAX.value) // DELTA_SEMITONE - 3

    def altered_step(self, key: Key | None = None) -> tuple[Step, Accidental | None]:
        """
        The step and the accidental needed to notate this pitch in a key.

        The accidental is None when the pitch is diatonic in the key (the key
        signature already spells it). Without a key, C major is assumed.
        """
        if key is None:
            key = Key.C
        step = self.step()
        if step.with_key(key) == self:
            return step, None
        return step, self.accidental()

    def alter(self, delta: Alteration) -> Tpc | None:
        """
        Raise (or lower, if negative) the pitch by semitones, keeping the letter.

        Returns None when the result would need more than two sharps or flats.
        """
        return Tpc.checked(self.value + fifths_offset(delta))

    def pitch_class(self) -> int:
        """The 12-TET pitch class (C=0 .. B=11)."""
        return (self.value * 7) % 12

    def enharmonic(self, other: Tpc) -> bool:
        """Whether two spellings sound the same in 12-TET."""
        return (self.value - other.value) % DELTA_ENHARMONIC == 0

    def enharmonics(self) -> list[Tpc]:
        """All spellings of this pitch class (itself included), flattest first."""
        return [tpc for tpc in Tpc if self.enharmonic(tpc)]

    def interval_to(self, other: Tpc) -> Interval | None:
        """The interval leading from this spelling to another, if representable."""
        return Interval.checked(other.value - self.value)

    def spell(self) -> str:
        """ASCII name: letter followed by accidental ('F#', 'Bbb', 'Cx')."""
        return f"{self.step().name}{self.accidental().symbol}"

    def __add__(self, other: object) -> Tpc | None:
        if not isinstance(other, Interval):
            return self._unsupported("+", other)
        return Tpc.checked(self.value + other.value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Tpc | None:
        if not isinstance(other, Interval):
            return self._unsupported("-", other)
        return Tpc.checked(self.value - other.value)

    def __str__(self) -> str:
        return self.spell()

    def __repr__(self) -> str:
        return f"Tpc.{self.name}"

    @classmethod
    def from_step(cls, step: Step, accidental: Accidental = Accidental.Natural) -> Tpc:
        """Spell a step with an absolute accidental."""
        return step.with_accidental(accidental)

    @classmethod
    def parse(cls, name: str) -> Tpc:
        """
        Parse a tonal pitch class from a name like 'C', 'F#', 'Bbb', 'Gx', 'E♭'.
        """
        text = name.strip()
        if not text:
            raise ValueError(ErrorMessages.UNKNOWN_TPC.format(name=name))
        try:
            step = Step.parse(text[0])
            accidental = Accidental.parse(text[1:])
        except ValueError as e:
            raise ValueError(ErrorMessages.UNKNOWN_TPC.format(name=name)) from e
        return step.with_accidental(accidental)


Tpc.MIN = Tpc.Fbb
Tpc.MAX = Tpc.Bss
Tpc.DELTA_SEMITONE = DELTA_SEMITONE
Tpc.DELTA_ENHARMONIC = DELTA_ENHARMONIC
