"""
Speller - choosing a notated spelling for a 12-TET pitch class.

A pitch class has several spellings (8 -> G#, Ab, Fx). The speller picks
the one lying in a twelve-fifth window of the line of fifths anchored at
the key: every pitch class occurs exactly once in any twelve consecutive
fifths, so the choice is unique. The window position encodes the
preference:

    FLATS    [key - 6, key + 5]
    NEAREST  [key - 3, key + 8]
    SHARPS   [key - 1, key + 10]

Diatonic notes ([key - 1, key + 5]) fall inside every window and are
always spelled as the key signature spells them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tonality.constants import Prefer
from tonality.core.accidental import Accidental
from tonality.core.key import Key
from tonality.core.tpc import Tpc
from tonality.models.config import SpellingConfig

logger = logging.getLogger(__name__)

# Window start relative to the key, per preference
_WINDOW_START: dict[Prefer, int] = {
    Prefer.FLATS: -6,
    Prefer.NEAREST: -3,
    Prefer.SHARPS: -1,
}


def spell_pitch_class(pitch: int, key: Key = Key.C, prefer: Prefer = Prefer.NEAREST) -> Tpc:
    """
    Spell a 12-TET pitch class in a key.

    Args:
        pitch: Pitch class or MIDI note number (only pitch % 12 is used)
        key: The key providing the diatonic spellings
        prefer: Which way to lean for notes outside the key

    Returns:
        The chosen tonal pitch class
    """
    start = key.value + _WINDOW_START[prefer]
    # Tpc coordinate c sounds pitch class 7c mod 12, and 7 is its own inverse mod 12
    return Tpc(start + (pitch * 7 - start) % 12)


class Speller:
    """
    Spells sequences of pitch classes according to a SpellingConfig.

    Immutable once created, so one instance can be shared freely.
    """

    def __init__(self, config: SpellingConfig | None = None):
        """
        Initialize the speller.

        Args:
            config: Spelling context (defaults to C major, nearest spelling)
        """
        self.config = config or SpellingConfig()
        self.key = self.config.get_key()

    def spell(self, pitch: int) -> Tpc:
        """Spell a single pitch class."""
        tpc = spell_pitch_class(pitch, self.key, self.config.prefer)
        logger.debug(f"Spelled pitch class {pitch % 12} as {tpc} in {self.key}")
        return tpc

    def spell_all(self, pitches: Iterable[int]) -> list[Tpc]:
        """Spell each pitch class of a sequence independently."""
        return [self.spell(pitch) for pitch in pitches]

    def notate(self, tpc: Tpc) -> str:
        """
        Render a spelling as it is written under the key signature.

        Diatonic notes show only the letter. Others show the letter with the
        accidental that must be printed, 'n' (or ♮) for a natural cancelling
        the signature.
        """
        step, accidental = tpc.altered_step(self.key)
        if accidental is None:
            return step.name
        if self.config.unicode_symbols:
            return f"{step.name}{accidental.unicode}"
        if accidental is Accidental.Natural:
            return f"{step.name}n"
        return f"{step.name}{accidental.symbol}"

    def __repr__(self) -> str:
        return f"Speller(key={self.key!r}, prefer={self.config.prefer.value!r})"
