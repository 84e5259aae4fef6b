"""
Alteration - a relative semitone delta between two spellings of one step.

Alterations are plain integers: they relate a Tpc to the diatonic spelling
a Key implies, and are consumed by Tpc.alter. Any integer is a syntactically
valid alteration; only those keeping the altered Tpc inside its range can
be applied.
"""

from __future__ import annotations

from typing import TypeAlias

from tonality.constants import DELTA_SEMITONE
from tonality.core.accidental import Accidental

Alteration: TypeAlias = int


def fifths_offset(alteration: Alteration) -> int:
    """Distance along the line of fifths that applies the alteration."""
    return alteration * DELTA_SEMITONE


def accidental_for(alteration: Alteration) -> Accidental | None:
    """
    The accidental an alteration of a natural step produces.

    Returns None beyond a double sharp or double flat.
    """
    return Accidental.checked(alteration)
