"""
chuk-music-theory - pitches, intervals and interval sets.

Parse note strings, convert between notes, MIDI numbers and frequencies,
and apply intervals, scales and chords to a root pitch.
"""

from chuk_music_theory.core import (
    Accidental,
    AccidentalType,
    Chord,
    Interval,
    IntervalSet,
    InvalidIntervalError,
    Key,
    KeyType,
    Pitch,
    PitchParsingError,
    Quality,
    Scale,
)
from chuk_music_theory.library import IntervalSetLoader

__version__ = "0.1.0"

__all__ = [
    "Accidental",
    "AccidentalType",
    "Chord",
    "Interval",
    "IntervalSet",
    "IntervalSetLoader",
    "InvalidIntervalError",
    "Key",
    "KeyType",
    "Pitch",
    "PitchParsingError",
    "Quality",
    "Scale",
]
