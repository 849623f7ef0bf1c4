"""
Tests for intervals and interval sets.

Tests cover:
- Quality and Interval construction, validation and semitone conversion (interval.py)
- IntervalSet, Scale, Chord (interval_set.py)
"""

import pytest

from chuk_music_theory.core import (
    Chord,
    Interval,
    IntervalSet,
    InvalidIntervalError,
    Pitch,
    PitchParsingError,
    Quality,
    Scale,
)


class TestIntervalConstruction:
    """Tests for building intervals from quality and degree."""

    def test_major_third(self) -> None:
        """A major third has quality, degree and name."""
        interval = Interval(Quality.MAJOR, 3)
        assert interval.quality == Quality.MAJOR
        assert interval.degree == 3
        assert str(interval) == "M3"

    def test_perfect_fifth_semitones(self) -> None:
        """A perfect fifth spans 7 semitones."""
        assert Interval(Quality.PERFECT, 5).semitones == 7

    def test_quality_from_shorthand(self) -> None:
        """Qualities can be given by their shorthand letter."""
        assert Interval("m", 3) == Interval(Quality.MINOR, 3)

    @pytest.mark.parametrize("degree", [1, 4, 5, 8, 11, 12, 15])
    def test_valid_perfect(self, degree: int) -> None:
        """Perfect intervals on unisons, fourths and fifths (and compounds)."""
        assert Interval(Quality.PERFECT, degree).degree == degree

    @pytest.mark.parametrize("degree", [2, 3, 6, 7, 9, 10, 13, 14])
    def test_valid_major_minor(self, degree: int) -> None:
        """Major and minor intervals on seconds, thirds, sixths and sevenths."""
        assert Interval(Quality.MAJOR, degree).degree == degree
        assert Interval(Quality.MINOR, degree).degree == degree

    @pytest.mark.parametrize("degree", [2, 3, 6, 7, 9])
    def test_invalid_perfect(self, degree: int) -> None:
        """Perfect seconds, thirds, sixths and sevenths are invalid."""
        with pytest.raises(InvalidIntervalError):
            Interval(Quality.PERFECT, degree)

    @pytest.mark.parametrize("degree", [1, 4, 5, 8])
    def test_invalid_major_minor(self, degree: int) -> None:
        """Major and minor unisons, fourths and fifths are invalid."""
        with pytest.raises(InvalidIntervalError):
            Interval(Quality.MAJOR, degree)
        with pytest.raises(InvalidIntervalError):
            Interval(Quality.MINOR, degree)

    def test_diminished(self) -> None:
        """Any degree above unison may be diminished."""
        assert str(Interval(Quality.DIMINISHED, 5)) == "d5"
        assert str(Interval(Quality.DIMINISHED, 2)) == "d2"
        with pytest.raises(InvalidIntervalError):
            Interval(Quality.DIMINISHED, 1)

    def test_augmented_unrestricted(self) -> None:
        """Augmented intervals are accepted on any degree."""
        assert str(Interval(Quality.AUGMENTED, 4)) == "A4"
        assert str(Interval(Quality.AUGMENTED, 1)) == "A1"

    @pytest.mark.parametrize("degree", [0, -1])
    def test_degree_below_one(self, degree: int) -> None:
        """Degrees below 1 are invalid."""
        with pytest.raises(InvalidIntervalError):
            Interval(Quality.AUGMENTED, degree)

    def test_unknown_quality(self) -> None:
        """Unknown qualities are invalid."""
        with pytest.raises(InvalidIntervalError):
            Interval("X", 3)

    def test_invalid_interval_is_value_error(self) -> None:
        """Interval errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Interval(Quality.PERFECT, 2)

    def test_error_message_uses_shorthand(self) -> None:
        """Error messages name the quality by its shorthand letter."""
        with pytest.raises(InvalidIntervalError) as exc_info:
            Interval(Quality.PERFECT, 2)
        message = str(exc_info.value)
        assert "P 2" in message
        assert "Quality" not in message


class TestIntervalSemitones:
    """Tests for the semitone/degree duality."""

    def test_from_semitones_table(self) -> None:
        """Each residue maps to its quality and degree."""
        names = [str(Interval.from_semitones(s)) for s in range(12)]
        assert names == ["P1", "m2", "M2", "m3", "M3", "P4", "A4", "P5", "m6", "M6", "m7", "M7"]

    def test_from_semitones_compound(self) -> None:
        """Full octaves add 7 to the degree."""
        assert str(Interval.from_semitones(12)) == "P8"
        assert str(Interval.from_semitones(15)) == "m10"
        assert str(Interval.from_semitones(19)) == "P12"
        assert str(Interval.from_semitones(23)) == "M14"
        assert str(Interval.from_semitones(24)) == "P15"

    def test_round_trip(self) -> None:
        """Semitones survive a round trip through quality and degree."""
        for semitones in range(25):
            assert Interval.from_semitones(semitones).semitones == semitones

    def test_sevenths(self) -> None:
        """Sevenths stay in their own octave."""
        assert Interval(Quality.MINOR, 7).semitones == 10
        assert Interval(Quality.MAJOR, 7).semitones == 11
        assert Interval(Quality.MINOR, 14).semitones == 22
        assert Interval(Quality.MAJOR, 14).semitones == 23

    def test_unrepresentable_is_zero(self) -> None:
        """Pairs the semitone table never produces report 0."""
        assert Interval(Quality.DIMINISHED, 5).semitones == 0
        assert Interval(Quality.AUGMENTED, 5).semitones == 0

    def test_negative_semitones(self) -> None:
        """Negative distances are rejected."""
        with pytest.raises(InvalidIntervalError):
            Interval.from_semitones(-1)


class TestIntervalParse:
    """Tests for parsing interval shorthand."""

    def test_parse(self) -> None:
        """Shorthand parses back to the interval."""
        assert Interval.parse("m3") == Interval.m3
        assert Interval.parse("P5") == Interval.P5
        assert Interval.parse("M10") == Interval(Quality.MAJOR, 10)

    @pytest.mark.parametrize("name", ["", "3", "m", "X3", "P2", "m0", "M 3"])
    def test_parse_invalid(self, name: str) -> None:
        """Malformed or illegal shorthand is rejected."""
        with pytest.raises(InvalidIntervalError):
            Interval.parse(name)


class TestNamedIntervals:
    """Tests for the named interval constants."""

    def test_short_names(self) -> None:
        """Constants render their own names."""
        names = [
            Interval.P1,
            Interval.m2,
            Interval.M2,
            Interval.m3,
            Interval.M3,
            Interval.P4,
            Interval.A4,
            Interval.P5,
            Interval.m6,
            Interval.M6,
            Interval.m7,
            Interval.M7,
            Interval.P8,
        ]
        assert [str(i) for i in names] == [
            "P1", "m2", "M2", "m3", "M3", "P4", "A4", "P5", "m6", "M6", "m7", "M7", "P8"
        ]
        assert [i.semitones for i in names] == list(range(13))

    def test_long_aliases(self) -> None:
        """Long names alias the short ones."""
        assert Interval.UNISON == Interval.P1
        assert Interval.TRITONE == Interval.A4
        assert Interval.PERFECT_FIFTH == Interval.P5
        assert Interval.OCTAVE == Interval.P8

    def test_hashable(self) -> None:
        """Intervals are hashable for use in sets."""
        intervals = {Interval.P1, Interval.M3, Interval(Quality.MAJOR, 3)}
        assert len(intervals) == 2

    def test_immutable(self) -> None:
        """Intervals, including the shared constants, cannot be modified."""
        with pytest.raises(AttributeError):
            Interval.P1._degree = 9  # type: ignore[misc]
        with pytest.raises(AttributeError):
            Interval.M3._quality = Quality.MINOR  # type: ignore[misc]
        with pytest.raises(AttributeError):
            del Interval.P5._degree
        assert str(Interval.P1) == "P1"
        assert str(Interval.M3) == "M3"

    def test_equality_is_by_spelling(self) -> None:
        """Enharmonic intervals with different spelling are unequal."""
        assert Interval(Quality.AUGMENTED, 4) != Interval(Quality.DIMINISHED, 5)


class TestPitchFromRoot:
    """Tests for applying an interval to a root pitch."""

    def test_major_third_above_c(self, middle_c: Pitch) -> None:
        """C4 + M3 = E4."""
        assert str(Interval.M3.pitch_from_root(middle_c)) == "E4"

    def test_spelling_preference(self, middle_c: Pitch) -> None:
        """Black-key results follow the spelling preference."""
        assert str(Interval.m3.pitch_from_root(middle_c)) == "D#4"
        assert str(Interval.m3.pitch_from_root(middle_c, use_sharps=False)) == "Eb4"

    def test_octave(self) -> None:
        """An octave lands on the same letter one octave up."""
        assert str(Interval.P8.pitch_from_root(Pitch.parse("A3"))) == "A4"

    def test_out_of_range(self) -> None:
        """Results above MIDI 127 raise a parsing error."""
        with pytest.raises(PitchParsingError):
            Interval.P8.pitch_from_root(Pitch.parse("C9"))


class TestIntervalSet:
    """Tests for IntervalSet, Scale and Chord."""

    def test_c_major_triad(self) -> None:
        """P1 M3 P5 from C4 is C E G."""
        triad = IntervalSet([Interval.P1, Interval.M3, Interval.P5])
        pitches = triad.pitches_from_root(Pitch.parse("C4"))
        assert [str(p) for p in pitches] == ["C4", "E4", "G4"]

    def test_order_preserved(self, middle_c: Pitch) -> None:
        """Pitches follow interval order, not pitch order."""
        intervals = IntervalSet([Interval.P5, Interval.P1, Interval.P5])
        pitches = intervals.pitches_from_root(middle_c)
        assert [str(p) for p in pitches] == ["G4", "C4", "G4"]

    def test_empty(self, middle_c: Pitch) -> None:
        """An empty set yields no pitches."""
        assert IntervalSet().pitches_from_root(middle_c) == []
        assert len(IntervalSet()) == 0

    def test_get_intervals_is_copy(self) -> None:
        """Mutating the returned list leaves the set untouched."""
        interval_set = IntervalSet([Interval.P1, Interval.M3])
        intervals = interval_set.get_intervals()
        intervals.append(Interval.P5)
        assert interval_set.get_intervals() == [Interval.P1, Interval.M3]

    def test_input_is_copied(self) -> None:
        """Later changes to the source list do not leak in."""
        source = [Interval.P1]
        interval_set = IntervalSet(source)
        source.append(Interval.P5)
        assert len(interval_set) == 1

    def test_semitones(self) -> None:
        """Semitone offsets in interval order."""
        assert Scale.MAJOR.semitones == [0, 2, 4, 5, 7, 9, 11]
        assert Chord.DOMINANT_7.semitones == [0, 4, 7, 10]

    def test_str(self) -> None:
        """Interval sets render as space-separated shorthand."""
        assert str(Chord.MINOR) == "P1 m3 P5"

    def test_scale_pitches(self) -> None:
        """A major scale from D4 spells with sharps."""
        pitches = Scale.MAJOR.pitches_from_root(Pitch.parse("D4"))
        assert [str(p) for p in pitches] == ["D4", "E4", "F#4", "G4", "A4", "B4", "C#5"]

    def test_chord_flats(self) -> None:
        """A minor triad from F4 with flats."""
        pitches = Chord.MINOR.pitches_from_root(Pitch.parse("F4"), use_sharps=False)
        assert [str(p) for p in pitches] == ["F4", "Ab4", "C5"]

    def test_named_values(self) -> None:
        """Scales and chords carry names and compare by value."""
        assert Scale.NATURAL_MINOR.name == "natural minor"
        assert Chord([Interval.P1, Interval.M3, Interval.P5], "major") == Chord.MAJOR
        assert repr(Chord.MAJOR) == "Chord.MAJOR"
