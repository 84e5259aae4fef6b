"""
Constants and enums for the spelling system.

No magic numbers - the line-of-fifths deltas live here.
"""

from enum import Enum

# Steps along the line of fifths that raise a spelling by one semitone
# while keeping its letter (F -> F#).
DELTA_SEMITONE: int = 7

# Steps along the line of fifths to reach the next enharmonic spelling
# (C -> B#, Gb -> F#).
DELTA_ENHARMONIC: int = 12


class Prefer(str, Enum):
    """Which side of the line of fifths to favour when spelling a pitch class."""

    FLATS = "flats"
    NEAREST = "nearest"
    SHARPS = "sharps"


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_ACCIDENTAL = "Unknown accidental: '{name}'."
    UNKNOWN_STEP = "Unknown step: '{name}'. Expected one of C, D, E, F, G, A, B."
    UNKNOWN_TPC = "Unknown tonal pitch class: '{name}'. Expected a letter and accidental like 'F#'."
    UNKNOWN_INTERVAL = "Unknown interval: '{name}'. Expected quality and number like 'A4' or 'm3'."
    INVALID_KEY = "Invalid key: '{name}'. No major key signature has this tonic."
