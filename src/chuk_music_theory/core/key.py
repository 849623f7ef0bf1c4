"""
Letter primitives - Key and Accidental.

A Key is one of the seven natural note letters (A-G).
An Accidental raises or lowers a letter by one or two semitones.
Together with an octave they spell a Pitch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ..constants import ErrorMessages
from .errors import PitchParsingError


class KeyType(IntEnum):
    """The seven natural note letters, in alphabetical order."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6


class AccidentalType(IntEnum):
    """The five supported accidentals."""

    NATURAL = 0
    FLAT = 1
    DOUBLE_FLAT = 2
    SHARP = 3
    DOUBLE_SHARP = 4


# Display symbols and semitone offsets (module level to avoid IntEnum member issues)
_ACCIDENTAL_SYMBOLS: dict[AccidentalType, str] = {
    AccidentalType.NATURAL: "",
    AccidentalType.FLAT: "b",
    AccidentalType.DOUBLE_FLAT: "bb",
    AccidentalType.SHARP: "#",
    AccidentalType.DOUBLE_SHARP: "##",
}
_ACCIDENTAL_OFFSETS: dict[AccidentalType, int] = {
    AccidentalType.NATURAL: 0,
    AccidentalType.FLAT: -1,
    AccidentalType.DOUBLE_FLAT: -2,
    AccidentalType.SHARP: 1,
    AccidentalType.DOUBLE_SHARP: 2,
}
_SYMBOL_TO_ACCIDENTAL: dict[str, AccidentalType] = {
    symbol: accidental for accidental, symbol in _ACCIDENTAL_SYMBOLS.items()
}


@dataclass(frozen=True)
class Key:
    """
    A natural note letter.

    Examples:
        Key() = C
        Key(KeyType.A) = A
    """

    type: KeyType = KeyType.C

    def __str__(self) -> str:
        return self.type.name

    def __repr__(self) -> str:
        return f"Key(KeyType.{self.type.name})"

    @classmethod
    def parse(cls, letter: str) -> Key:
        """Parse a key from a single letter, case-insensitive ('c' or 'C')."""
        name = letter.upper()
        if len(name) != 1 or name not in KeyType.__members__:
            raise PitchParsingError(ErrorMessages.INVALID_KEY.format(letter=letter))
        return cls(KeyType[name])


@dataclass(frozen=True)
class Accidental:
    """
    A sharp/flat modifier on a note letter.

    Natural renders as the empty string, so str(Key) + str(Accidental)
    is always the note name.
    """

    type: AccidentalType = AccidentalType.NATURAL

    @property
    def offset(self) -> int:
        """Semitones this accidental moves the letter (-2 to +2)."""
        return _ACCIDENTAL_OFFSETS[self.type]

    def __str__(self) -> str:
        return _ACCIDENTAL_SYMBOLS[self.type]

    def __repr__(self) -> str:
        return f"Accidental(AccidentalType.{self.type.name})"

    @classmethod
    def parse(cls, symbol: str) -> Accidental:
        """Parse an accidental from '', 'b', 'bb', '#' or '##'."""
        if symbol not in _SYMBOL_TO_ACCIDENTAL:
            raise PitchParsingError(ErrorMessages.INVALID_ACCIDENTAL.format(symbol=symbol))
        return cls(_SYMBOL_TO_ACCIDENTAL[symbol])
