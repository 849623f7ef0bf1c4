"""
Interval primitive - a root-independent quality/degree pair.

An interval is spelled as a quality (perfect, major, minor, augmented,
diminished) plus a diatonic degree (1 = unison, 3 = third, 8 = octave).
Degrees above 8 are compound intervals: degree = simple + 7 * octaves.

Intervals can be built from a quality and degree, from a semitone count,
or parsed from shorthand like 'm3' or 'P5'.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import ClassVar

from ..constants import DEGREES_PER_OCTAVE, SEMITONES_PER_OCTAVE, ErrorMessages
from .errors import InvalidIntervalError
from .pitch import Pitch


class Quality(str, Enum):
    """Interval qualities, valued by their shorthand letter."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


# Quality and simple degree for each semitone residue (0-11)
_CHROMATIC_INTERVALS: list[tuple[Quality, int]] = [
    (Quality.PERFECT, 1),
    (Quality.MINOR, 2),
    (Quality.MAJOR, 2),
    (Quality.MINOR, 3),
    (Quality.MAJOR, 3),
    (Quality.PERFECT, 4),
    (Quality.AUGMENTED, 4),
    (Quality.PERFECT, 5),
    (Quality.MINOR, 6),
    (Quality.MAJOR, 6),
    (Quality.MINOR, 7),
    (Quality.MAJOR, 7),
]

# Inverse table keyed by (quality, degree mod 7); sevenths land on residue 0
_SIMPLE_SEMITONES: dict[tuple[Quality, int], int] = {
    (quality, degree % DEGREES_PER_OCTAVE): semitones
    for semitones, (quality, degree) in enumerate(_CHROMATIC_INTERVALS)
}

# Legal degree residues per quality
_PERFECT_RESIDUES = frozenset({1, 4, 5})
_IMPERFECT_RESIDUES = frozenset({2, 3, 6, 0})

_INTERVAL_NAME = re.compile(r"^([PMmAd])([0-9]+)$")


class Interval:
    """
    A generic interval, decoupled from any root.

    Immutable and hashable. Two intervals are equal when quality and
    degree match, so A4 != d5 even though both span 6 semitones.
    """

    __slots__ = ("_quality", "_degree")
    _quality: Quality
    _degree: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, quality: Quality | str, degree: int) -> None:
        """
        Create an interval from a quality and a degree.

        Perfect intervals need a unison/fourth/fifth degree, major and
        minor need a second/third/sixth/seventh, diminished needs a
        degree of at least 2. Augmented is not restricted here.

        Raises:
            InvalidIntervalError: If the combination is not a valid interval
        """
        error = InvalidIntervalError(
            ErrorMessages.INVALID_INTERVAL.format(
                quality=getattr(quality, "value", quality), degree=degree
            )
        )
        try:
            quality = Quality(quality)
        except ValueError:
            raise error from None
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < 1:
            raise error

        residue = degree % DEGREES_PER_OCTAVE
        if quality is Quality.PERFECT and residue not in _PERFECT_RESIDUES:
            raise error
        if quality in (Quality.MAJOR, Quality.MINOR) and residue not in _IMPERFECT_RESIDUES:
            raise error
        if quality is Quality.DIMINISHED and degree < 2:
            raise error

        object.__setattr__(self, "_quality", quality)
        object.__setattr__(self, "_degree", degree)

    @classmethod
    def from_semitones(cls, semitones: int) -> Interval:
        """
        Create an interval from a semitone distance.

        Black-key distances resolve to minor intervals (and the tritone to
        an augmented fourth). Each full octave adds 7 to the degree.

        Examples:
            Interval.from_semitones(4) = M3
            Interval.from_semitones(12) = P8
            Interval.from_semitones(15) = m10
        """
        if isinstance(semitones, bool) or not isinstance(semitones, int) or semitones < 0:
            raise InvalidIntervalError(ErrorMessages.NEGATIVE_SEMITONES.format(semitones=semitones))
        octaves, residue = divmod(semitones, SEMITONES_PER_OCTAVE)
        quality, degree = _CHROMATIC_INTERVALS[residue]
        return cls(quality, degree + DEGREES_PER_OCTAVE * octaves)

    @classmethod
    def parse(cls, name: str) -> Interval:
        """Parse an interval from shorthand like 'P5', 'm3' or 'M10'."""
        match = _INTERVAL_NAME.match(name.strip()) if isinstance(name, str) else None
        if match is None:
            raise InvalidIntervalError(ErrorMessages.INVALID_INTERVAL_NAME.format(text=name))
        return cls(Quality(match.group(1)), int(match.group(2)))

    @property
    def quality(self) -> Quality:
        """The interval quality."""
        return self._quality

    @property
    def degree(self) -> int:
        """The diatonic degree (1 = unison, 8 = octave)."""
        return self._degree

    @property
    def semitones(self) -> int:
        """
        Semitone distance spanned by this interval.

        Only quality/degree pairs that from_semitones can produce have a
        distance; anything else (diminished, augmented other than the
        fourth) is reported as 0.
        """
        residue = self._degree % DEGREES_PER_OCTAVE
        offset = _SIMPLE_SEMITONES.get((self._quality, residue))
        if offset is None:
            return 0

        octaves = self._degree // DEGREES_PER_OCTAVE
        if residue == 0:
            # Sevenths divide evenly by 7 but belong to the octave below
            octaves -= 1
        return offset + SEMITONES_PER_OCTAVE * octaves

    def pitch_from_root(self, root: Pitch, use_sharps: bool = True) -> Pitch:
        """
        Get the pitch this interval lands on above a root.

        The result is respelled from its MIDI value, so C4 + m3 gives D#4
        with sharps and Eb4 with flats.

        Raises:
            PitchParsingError: If the result falls outside the MIDI range
        """
        return Pitch.from_midi(root.midi_value + self.semitones, use_sharps=use_sharps)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Interval is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Interval is immutable, cannot delete {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._quality is other._quality and self._degree == other._degree

    def __hash__(self) -> int:
        return hash((self._quality, self._degree))

    def __repr__(self) -> str:
        return f"Interval(Quality.{self._quality.name}, {self._degree})"

    def __str__(self) -> str:
        """Shorthand name, e.g. 'm3' or 'P5'."""
        return f"{self._quality.value}{self._degree}"


# Initialize class constants after class is defined
Interval.UNISON = Interval(Quality.PERFECT, 1)
Interval.MINOR_SECOND = Interval(Quality.MINOR, 2)
Interval.MAJOR_SECOND = Interval(Quality.MAJOR, 2)
Interval.MINOR_THIRD = Interval(Quality.MINOR, 3)
Interval.MAJOR_THIRD = Interval(Quality.MAJOR, 3)
Interval.PERFECT_FOURTH = Interval(Quality.PERFECT, 4)
Interval.TRITONE = Interval(Quality.AUGMENTED, 4)
Interval.PERFECT_FIFTH = Interval(Quality.PERFECT, 5)
Interval.MINOR_SIXTH = Interval(Quality.MINOR, 6)
Interval.MAJOR_SIXTH = Interval(Quality.MAJOR, 6)
Interval.MINOR_SEVENTH = Interval(Quality.MINOR, 7)
Interval.MAJOR_SEVENTH = Interval(Quality.MAJOR, 7)
Interval.OCTAVE = Interval(Quality.PERFECT, 8)

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.A4 = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
