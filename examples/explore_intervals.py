#!/usr/bin/env python3
"""
Example: Pitches, intervals, scales and chords.

This demonstrates parsing notes, converting to MIDI and frequency,
building intervals both ways, and applying library scales and chords
to a root pitch.

Usage:
    python examples/explore_intervals.py
"""

import logging

from chuk_music_theory import (
    Chord,
    Interval,
    IntervalSetLoader,
    Pitch,
    PitchParsingError,
    Quality,
)
from chuk_music_theory.models import IntervalSetKind


def main() -> None:
    """Walk through the library."""
    logging.basicConfig(level=logging.INFO)

    print("CHUK Music Theory Demo")
    print("=" * 40)
    print()

    # Pitches
    print("Pitches:")
    for text in ["C4", "A4", "Bb3", "F##2"]:
        pitch = Pitch.parse(text)
        print(f"  {pitch}: MIDI {pitch.midi_value}, {pitch.frequency:.2f} Hz")
    print(f"  MIDI 61 -> {Pitch.from_midi(61)} / {Pitch.from_midi(61, use_sharps=False)}")
    try:
        Pitch.parse("H4")
    except PitchParsingError as e:
        print(f"  {e}")
    print()

    # Intervals
    print("Intervals:")
    for semitones in [3, 7, 11, 14, 19]:
        interval = Interval.from_semitones(semitones)
        print(f"  {semitones:2d} semitones = {interval}")
    print(f"  {Interval(Quality.MAJOR, 13)} = {Interval(Quality.MAJOR, 13).semitones} semitones")
    print()

    # Built-in chord constant
    root = Pitch.parse("E4")
    pitches = " ".join(str(p) for p in Chord.DOMINANT_7.pitches_from_root(root))
    print(f"{root} dominant 7: {pitches}")
    print()

    # Library scales
    loader = IntervalSetLoader()
    print("Library scales from D4:")
    for meta in loader.list_definitions(IntervalSetKind.SCALE):
        scale = loader.get_scale(meta.name)
        pitches = " ".join(str(p) for p in scale.pitches_from_root(Pitch.parse("D4")))
        print(f"  {meta.name:18s} {pitches}")


if __name__ == "__main__":
    main()
