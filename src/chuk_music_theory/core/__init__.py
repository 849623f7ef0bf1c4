"""
Core music primitives - the value layer.

These are the invariants everything else composes on:
- Key: The seven natural note letters (A-G)
- Accidental: Natural, flat, double flat, sharp, double sharp
- Pitch: Key + Accidental + octave, with MIDI and frequency conversion
- Interval: Quality + degree, convertible to and from semitones
- IntervalSet: Ordered intervals applied to a root (Scale, Chord)

All types are immutable values. Construction errors raise
PitchParsingError or InvalidIntervalError.
"""

from chuk_music_theory.core.errors import InvalidIntervalError, PitchParsingError
from chuk_music_theory.core.interval import Interval, Quality
from chuk_music_theory.core.interval_set import Chord, IntervalSet, Scale
from chuk_music_theory.core.key import Accidental, AccidentalType, Key, KeyType
from chuk_music_theory.core.pitch import Pitch

__all__ = [
    # Letters
    "Key",
    "KeyType",
    "Accidental",
    "AccidentalType",
    # Pitch
    "Pitch",
    # Interval
    "Interval",
    "Quality",
    # Collections
    "IntervalSet",
    "Scale",
    "Chord",
    # Errors
    "PitchParsingError",
    "InvalidIntervalError",
]
