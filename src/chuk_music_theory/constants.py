"""
Constants for the music theory library.

No magic numbers - tuning references, MIDI ranges and error templates live here.
"""

from typing import Literal

# Equal-temperament tuning reference (A4 = 440 Hz)
A4_FREQUENCY = 440.0
A4_MIDI = 69

# MIDI note number range
MIDI_MIN = 0
MIDI_MAX = 127

# Lowest MIDI value accepted by Pitch.from_midi
MIDI_PARSE_MIN = 10

SEMITONES_PER_OCTAVE = 12
DEGREES_PER_OCTAVE = 7

# Middle C is C4
DEFAULT_OCTAVE = 4

# Schema versions for library files
SchemaVersion = Literal["interval-set/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Failed to parse note: '{text}'. Expected a note like 'C4', 'F#3' or 'Bbb2'."
    INVALID_KEY = "Invalid key letter: '{letter}'. Expected one of A-G."
    INVALID_ACCIDENTAL = "Invalid accidental: '{symbol}'. Expected '', 'b', 'bb', '#' or '##'."
    MIDI_OUT_OF_RANGE = "Couldn't parse MIDI value to note: {value}. Must be between {low} and {high}."
    INVALID_INTERVAL = "Invalid interval: {quality} {degree}. Need a valid quality and degree."
    INVALID_INTERVAL_NAME = "Invalid interval name: '{text}'. Expected a name like 'P5' or 'm3'."
    NEGATIVE_SEMITONES = "Semitone distance must be >= 0, got {semitones}."
