"""
Pitch primitive - a spelled, octave-qualified note.

A Pitch is Key + Accidental + octave, e.g. C#4 or Bb3.
It can be built three ways: from its parts, from a note string,
or from a MIDI note number (with a sharps/flats spelling preference).

MIDI 60 = C4 (middle C). A4 = MIDI 69 = 440 Hz.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import (
    A4_FREQUENCY,
    A4_MIDI,
    DEFAULT_OCTAVE,
    MIDI_MAX,
    MIDI_PARSE_MIN,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from .errors import PitchParsingError
from .key import Accidental, AccidentalType, Key, KeyType

# MIDI value of each natural letter in octave 0
_KEY_MIDI_BASE: dict[KeyType, int] = {
    KeyType.A: 21,
    KeyType.B: 23,
    KeyType.C: 12,
    KeyType.D: 14,
    KeyType.E: 16,
    KeyType.F: 17,
    KeyType.G: 19,
}

# Spelling of each chromatic residue (MIDI value mod 12)
_SHARP_SPELLINGS: list[tuple[KeyType, AccidentalType]] = [
    (KeyType.C, AccidentalType.NATURAL),
    (KeyType.C, AccidentalType.SHARP),
    (KeyType.D, AccidentalType.NATURAL),
    (KeyType.D, AccidentalType.SHARP),
    (KeyType.E, AccidentalType.NATURAL),
    (KeyType.F, AccidentalType.NATURAL),
    (KeyType.F, AccidentalType.SHARP),
    (KeyType.G, AccidentalType.NATURAL),
    (KeyType.G, AccidentalType.SHARP),
    (KeyType.A, AccidentalType.NATURAL),
    (KeyType.A, AccidentalType.SHARP),
    (KeyType.B, AccidentalType.NATURAL),
]
_FLAT_SPELLINGS: list[tuple[KeyType, AccidentalType]] = [
    (KeyType.C, AccidentalType.NATURAL),
    (KeyType.D, AccidentalType.FLAT),
    (KeyType.D, AccidentalType.NATURAL),
    (KeyType.E, AccidentalType.FLAT),
    (KeyType.E, AccidentalType.NATURAL),
    (KeyType.F, AccidentalType.NATURAL),
    (KeyType.G, AccidentalType.FLAT),
    (KeyType.G, AccidentalType.NATURAL),
    (KeyType.A, AccidentalType.FLAT),
    (KeyType.A, AccidentalType.NATURAL),
    (KeyType.B, AccidentalType.FLAT),
    (KeyType.B, AccidentalType.NATURAL),
]

_OCTAVE_DIGITS = "0123456789"


@dataclass(frozen=True)
class Pitch:
    """
    A specific sounding pitch with its spelling.

    Immutable and hashable. Equality is by spelling, so C#4 != Db4;
    compare midi_value for enharmonic equivalence.

    Examples:
        Pitch() = C4
        Pitch(Key(KeyType.B), Accidental(AccidentalType.FLAT), 3) = Bb3
        Pitch.parse("F#2")
        Pitch.from_midi(61, use_sharps=False) = Db4
    """

    key: Key = field(default_factory=Key)
    accidental: Accidental = field(default_factory=Accidental)
    octave: int = DEFAULT_OCTAVE

    @property
    def midi_value(self) -> int:
        """MIDI note number. C4 = 60."""
        base = _KEY_MIDI_BASE[self.key.type]
        return base + self.accidental.offset + self.octave * SEMITONES_PER_OCTAVE

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz (A4 = 440)."""
        return A4_FREQUENCY * 2 ** ((self.midi_value - A4_MIDI) / SEMITONES_PER_OCTAVE)

    def __str__(self) -> str:
        return f"{self.key}{self.accidental}{self.octave}"

    def __repr__(self) -> str:
        return f"Pitch.parse({str(self)!r})"

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """
        Parse a pitch from a note string like 'C4', 'c#4' or 'Dbb3'.

        Grammar: letter A-G (any case), optional accidental run of one or
        two '#' or one or two 'b', then a single octave digit 0-9.

        Raises:
            PitchParsingError: If the string does not match the grammar
        """
        if not isinstance(text, str) or not 2 <= len(text) <= 4:
            raise PitchParsingError(ErrorMessages.INVALID_NOTE.format(text=text))

        octave_char = text[-1]
        if octave_char not in _OCTAVE_DIGITS:
            raise PitchParsingError(ErrorMessages.INVALID_NOTE.format(text=text))

        try:
            key = Key.parse(text[0])
            accidental = Accidental.parse(text[1:-1])
        except PitchParsingError as e:
            raise PitchParsingError(ErrorMessages.INVALID_NOTE.format(text=text)) from e

        return cls(key, accidental, int(octave_char))

    @classmethod
    def from_midi(cls, midi_value: int, use_sharps: bool = True) -> Pitch:
        """
        Build a pitch from a MIDI note number.

        Black keys are spelled as the sharp of the letter below
        (use_sharps=True) or the flat of the letter above (use_sharps=False).

        Args:
            midi_value: MIDI note number, 10-127
            use_sharps: Spelling preference for black keys

        Raises:
            PitchParsingError: If midi_value is outside 10-127
        """
        if (
            isinstance(midi_value, bool)
            or not isinstance(midi_value, int)
            or not MIDI_PARSE_MIN <= midi_value <= MIDI_MAX
        ):
            raise PitchParsingError(
                ErrorMessages.MIDI_OUT_OF_RANGE.format(
                    value=midi_value, low=MIDI_PARSE_MIN, high=MIDI_MAX
                )
            )

        spellings = _SHARP_SPELLINGS if use_sharps else _FLAT_SPELLINGS
        key_type, accidental_type = spellings[midi_value % SEMITONES_PER_OCTAVE]
        # MIDI 10 and 11 sit below C0 and clamp to octave 0
        octave = max(midi_value - SEMITONES_PER_OCTAVE, 0) // SEMITONES_PER_OCTAVE
        return cls(Key(key_type), Accidental(accidental_type), octave)

    @staticmethod
    def midi_value_of(text: str) -> int:
        """Get the MIDI note number of a note string ('A4' -> 69)."""
        return Pitch.parse(text).midi_value
