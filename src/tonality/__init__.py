"""
Tonality - enharmonic-aware tonal spelling.

Answers questions like "which accidental, if any, is used for writing the
pitch A flat in the key of B flat major?"
"""

from tonality.constants import DELTA_ENHARMONIC, DELTA_SEMITONE, Prefer
from tonality.core import Accidental, Alteration, Interval, Key, Step, Tpc
from tonality.models.config import SpellingConfig
from tonality.spelling import Speller, spell_pitch_class

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "Alteration",
    "DELTA_ENHARMONIC",
    "DELTA_SEMITONE",
    "Interval",
    "Key",
    "Prefer",
    "Speller",
    "SpellingConfig",
    "Step",
    "Tpc",
    "spell_pitch_class",
]
