"""
Core spelling primitives - the line-of-fifths algebra.

Every type is a bounded integer coordinate:
- Accidental: Absolute spelling modifier (double flat .. double sharp)
- Alteration: Relative semitone delta between spellings of one step
- Step: Staff letter, cyclic (C .. B)
- Interval: Enharmonically distinct interval on the line of fifths
- Key: Major key signature (Cb .. C#)
- Tpc: Tonal pitch class, the fully spelled pitch class
"""

from tonality.core.accidental import Accidental
from tonality.core.alteration import Alteration, accidental_for, fifths_offset
from tonality.core.interval import Interval
from tonality.core.key import Key
from tonality.core.step import Step
from tonality.core.tpc import Tpc

__all__ = [
    # Spelling modifiers
    "Accidental",
    "Alteration",
    "accidental_for",
    "fifths_offset",
    # Letters
    "Step",
    # Line of fifths
    "Interval",
    "Key",
    "Tpc",
]
