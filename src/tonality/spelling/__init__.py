"""
Spelling of 12-TET pitch classes in a key context.
"""

from tonality.spelling.speller import Speller, spell_pitch_class

__all__ = [
    "Speller",
    "spell_pitch_class",
]
