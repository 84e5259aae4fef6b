"""
Accidental - the absolute spelling modifier of a step.
"""

from __future__ import annotations

from tonality.constants import ErrorMessages
from tonality.core.coordinate import Coordinate

# Display symbols indexed by level + 2 (module level to avoid IntEnum member issues)
_SYMBOLS: tuple[str, ...] = ("bb", "b", "", "#", "x")
_UNICODE_SYMBOLS: tuple[str, ...] = ("𝄫", "♭", "♮", "♯", "𝄪")

_PARSE_TABLE: dict[str, int] = {
    "bb": -2,
    "𝄫": -2,
    "♭♭": -2,
    "b": -1,
    "♭": -1,
    "": 0,
    "n": 0,
    "♮": 0,
    "#": 1,
    "♯": 1,
    "x": 2,
    "##": 2,
    "𝄪": 2,
    "♯♯": 2,
}


class Accidental(Coordinate):
    """
    Double or single flat, natural, double or single sharp.

    The value is the accidental level: the number of semitones the
    accidental moves its step away from the natural spelling.
    """

    DblFlat = -2
    Flat = -1
    Natural = 0
    Sharp = 1
    DblSharp = 2

    @property
    def symbol(self) -> str:
        """ASCII symbol ('bb', 'b', '', '#', 'x')."""
        return _SYMBOLS[self.value + 2]

    @property
    def unicode(self) -> str:
        """Unicode symbol, with an explicit natural sign."""
        return _UNICODE_SYMBOLS[self.value + 2]

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Accidental.{self.name}"

    @classmethod
    def parse(cls, name: str) -> Accidental:
        """Parse an accidental from ASCII or Unicode symbols like '#', 'bb', '♭'."""
        text = name.strip()
        if text in _PARSE_TABLE:
            return cls(_PARSE_TABLE[text])
        raise ValueError(ErrorMessages.UNKNOWN_ACCIDENTAL.format(name=name))
