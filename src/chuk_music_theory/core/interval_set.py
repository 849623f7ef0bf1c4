"""
Interval collections - IntervalSet, Scale, Chord.

An interval set is an ordered list of intervals measured from a root.
Applying it to a root pitch gives one pitch per interval, in order.
Scales and chords are named interval sets.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import ClassVar

from .interval import Interval
from .pitch import Pitch


@dataclass(frozen=True, init=False)
class IntervalSet:
    """
    An ordered sequence of intervals from a common root.

    Order is significant (it is the degree order of the scale or chord)
    and duplicates are allowed. An empty set is legal.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]

    def __init__(self, intervals: Iterable[Interval] = ()) -> None:
        object.__setattr__(self, "intervals", tuple(intervals))

    def get_intervals(self) -> list[Interval]:
        """Get a copy of the intervals, in order."""
        return list(self.intervals)

    @property
    def semitones(self) -> list[int]:
        """Semitone distance of each interval from the root."""
        return [interval.semitones for interval in self.intervals]

    def pitches_from_root(self, root: Pitch, use_sharps: bool = True) -> list[Pitch]:
        """
        Apply every interval to a root pitch.

        Args:
            root: The root pitch
            use_sharps: Spelling preference for black keys

        Returns:
            One pitch per interval, in interval order
        """
        return [interval.pitch_from_root(root, use_sharps) for interval in self.intervals]

    def __len__(self) -> int:
        return len(self.intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __str__(self) -> str:
        return " ".join(str(interval) for interval in self.intervals)


@dataclass(frozen=True, init=False)
class Scale(IntervalSet):
    """
    A named interval set read as a scale.

    Intervals are cumulative from the tonic:
    major = P1 M2 M3 P4 P5 M6 M7.
    """

    name: str = ""

    # Common scales (defined after class)
    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]
    HARMONIC_MINOR: ClassVar[Scale]

    def __init__(self, intervals: Iterable[Interval] = (), name: str = "") -> None:
        super().__init__(intervals)
        object.__setattr__(self, "name", name)

    def __repr__(self) -> str:
        if self.name:
            return f"Scale.{self.name.upper().replace(' ', '_')}"
        return f"Scale({self.intervals!r})"


@dataclass(frozen=True, init=False)
class Chord(IntervalSet):
    """
    A named interval set read as a chord, root first.

    A major triad is P1 M3 P5.
    """

    name: str = ""

    # Common chords (defined after class)
    MAJOR: ClassVar[Chord]
    MINOR: ClassVar[Chord]
    DOMINANT_7: ClassVar[Chord]
    MAJOR_7: ClassVar[Chord]
    MINOR_7: ClassVar[Chord]

    def __init__(self, intervals: Iterable[Interval] = (), name: str = "") -> None:
        super().__init__(intervals)
        object.__setattr__(self, "name", name)

    def __repr__(self) -> str:
        if self.name:
            return f"Chord.{self.name.upper().replace(' ', '_')}"
        return f"Chord({self.intervals!r})"


_I = Interval

Scale.MAJOR = Scale((_I.P1, _I.M2, _I.M3, _I.P4, _I.P5, _I.M6, _I.M7), "major")
Scale.NATURAL_MINOR = Scale((_I.P1, _I.M2, _I.m3, _I.P4, _I.P5, _I.m6, _I.m7), "natural minor")
Scale.HARMONIC_MINOR = Scale((_I.P1, _I.M2, _I.m3, _I.P4, _I.P5, _I.m6, _I.M7), "harmonic minor")

Chord.MAJOR = Chord((_I.P1, _I.M3, _I.P5), "major")
Chord.MINOR = Chord((_I.P1, _I.m3, _I.P5), "minor")
Chord.DOMINANT_7 = Chord((_I.P1, _I.M3, _I.P5, _I.m7), "dominant 7")
Chord.MAJOR_7 = Chord((_I.P1, _I.M3, _I.P5, _I.M7), "major 7")
Chord.MINOR_7 = Chord((_I.P1, _I.m3, _I.P5, _I.m7), "minor 7")
