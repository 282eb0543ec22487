"""
Tests for ScaleType, Scale and harmonic fields.
"""

import pytest

from chuk_music_theory.core import (
    ChordType,
    HarmonicField,
    Interval,
    Key,
    Scale,
    ScaleType,
)


def _strict_keys(scale: Scale, expected: list[str]) -> bool:
    keys = scale.keys
    return len(keys) == len(expected) and all(
        key.strict_equals(Key.parse(text)) for key, text in zip(keys, expected)
    )


class TestScaleType:
    """Tests for the scale type catalog."""

    def test_catalog_size(self) -> None:
        """The catalog holds the full set of named scales."""
        assert len(ScaleType.all()) == 110
        assert ScaleType.all()[0] is ScaleType.MAJOR

    def test_intervals(self) -> None:
        """Catalog entries carry their interval lists."""
        assert ScaleType.LYDIAN.intervals == (
            Interval.P1,
            Interval.M2,
            Interval.M3,
            Interval.A4,
            Interval.P5,
            Interval.M6,
            Interval.M7,
        )
        assert len(ScaleType.CHROMATIC.intervals) == 12

    def test_named(self) -> None:
        """Lookup by description is case-insensitive."""
        assert ScaleType.named("dorian") is ScaleType.DORIAN
        assert ScaleType.named("Harmonic Minor") is ScaleType.HARMONIC_MINOR
        assert ScaleType.named("nope") is None

    def test_equality(self) -> None:
        """Equality includes the description, hashing does not."""
        assert ScaleType.MINOR != ScaleType.NATURAL_MINOR
        assert hash(ScaleType.MINOR) == hash(ScaleType.NATURAL_MINOR)
        assert ScaleType(list(ScaleType.MINOR.intervals), "Minor") == ScaleType.MINOR

    def test_custom_scale_type(self) -> None:
        """Scale types are plain data."""
        custom = ScaleType((Interval.P1, Interval.M3, Interval.P5), "Triad")
        assert str(custom) == "Triad"
        assert "P1, M3, P5" in repr(custom)


class TestScale:
    """Tests for Scale."""

    def test_major_keys(self, c_major: Scale) -> None:
        """C major is the white keys."""
        assert _strict_keys(c_major, ["C", "D", "E", "F", "G", "A", "B"])

    def test_minor_keys(self, c_minor: Scale) -> None:
        """C minor is spelled with flats."""
        assert _strict_keys(c_minor, ["C", "D", "Eb", "F", "G", "Ab", "Bb"])

    def test_sharp_key_spelling(self) -> None:
        """E major is spelled with sharps."""
        scale = Scale(ScaleType.MAJOR, Key.parse("E"))
        assert _strict_keys(scale, ["E", "F#", "G#", "A", "B", "C#", "D#"])

    def test_pitches(self, c_major: Scale) -> None:
        """pitches() concatenates octaves in order."""
        pitches = c_major.pitches(4, 5)
        assert len(pitches) == 14
        assert str(pitches[0]) == "C4"
        assert str(pitches[7]) == "C5"
        assert str(pitches[-1]) == "B5"
        assert c_major.pitches() == []

    def test_pitches_not_sorted(self, c_major: Scale) -> None:
        """Octaves are emitted in the order given."""
        pitches = c_major.pitches(5, 4)
        assert str(pitches[0]) == "C5"
        assert str(pitches[7]) == "C4"

    def test_str(self, c_minor: Scale) -> None:
        assert str(c_minor) == "C Minor"


class TestHarmonicField:
    """Tests for stacking thirds on scale degrees."""

    def test_field_sizes(self) -> None:
        """Fields run from triads to thirteenth chords."""
        assert [int(f) for f in HarmonicField.all()] == [3, 4, 5, 6, 7]
        assert HarmonicField.TETRAD.description == "Tetrad"

    def test_major_triads(self, c_major: Scale) -> None:
        """C major triads: C Dm Em F G Am Bdim."""
        chords = c_major.harmonic_field(HarmonicField.TRIAD)
        assert [c.type for c in chords] == [
            ChordType.MAJOR,
            ChordType.MINOR,
            ChordType.MINOR,
            ChordType.MAJOR,
            ChordType.MAJOR,
            ChordType.MINOR,
            ChordType.DIMINISHED,
        ]
        assert [str(c.key) for c in chords] == ["C", "D", "E", "F", "G", "A", "B"]

    def test_major_tetrads(self, c_major: Scale) -> None:
        """C major seventh chords."""
        chords = c_major.harmonic_field(HarmonicField.TETRAD)
        assert [c.notation for c in chords] == [
            "Cmaj7",
            "Dm7",
            "Em7",
            "Fmaj7",
            "G7",
            "Am7",
            "Bm7(♭5)",
        ]

    def test_minor_triads(self, c_minor: Scale) -> None:
        """C minor triads use the flat-spelled roots."""
        chords = c_minor.harmonic_field(HarmonicField.TRIAD)
        assert [str(c.key) for c in chords] == ["C", "D", "E♭", "F", "G", "A♭", "B♭"]
        assert chords[1].type == ChordType.DIMINISHED

    def test_roman_numerals_major(self, c_major: Scale) -> None:
        """Major scale numerals."""
        chords = c_major.harmonic_field(HarmonicField.TRIAD)
        assert [c.roman_numeral(c_major) for c in chords] == [
            "I",
            "ii",
            "iii",
            "IV",
            "V",
            "vi",
            "vii°",
        ]

    def test_roman_numerals_minor(self, c_minor: Scale) -> None:
        """Minor scale numerals."""
        chords = c_minor.harmonic_field(HarmonicField.TRIAD)
        assert [c.roman_numeral(c_minor) for c in chords] == [
            "i",
            "ii°",
            "III",
            "iv",
            "v",
            "VI",
            "VII",
        ]

    def test_inversion_applied(self, c_major: Scale) -> None:
        """The inversion is applied to every chord."""
        chords = c_major.harmonic_field(HarmonicField.TRIAD, inversion=1)
        assert all(c.inversion == 1 for c in chords)
        assert chords[0].notation == "C/E"

    def test_inversion_beyond_chord_size(self, c_major: Scale) -> None:
        """Triads have no third inversion."""
        with pytest.raises(ValueError):
            c_major.harmonic_field(HarmonicField.TRIAD, inversion=3)
        tetrads = c_major.harmonic_field(HarmonicField.TETRAD, inversion=3)
        assert all(c is not None and c.inversion == 3 for c in tetrads)

    def test_thirteenth_field(self, c_major: Scale) -> None:
        """Every degree of a seven-note scale gets a thirteenth chord."""
        chords = c_major.harmonic_field(HarmonicField.THIRTEENTH)
        assert len(chords) == 7
        assert all(c is not None for c in chords)
        assert len(chords[0].type.intervals) == 7

    def test_pentatonic_field(self) -> None:
        """Five-note scales give five chords."""
        scale = Scale(ScaleType.PENTATONIC_MAJOR, Key.parse("C"))
        chords = scale.harmonic_field(HarmonicField.TRIAD)
        assert len(chords) == 5
        assert all(c is not None for c in chords)

    def test_short_scale_truncates(self) -> None:
        """Chords that run past the expanded scale are dropped."""
        scale = Scale(ScaleType((Interval.P1, Interval.d5), "Tritone Pair"), Key.parse("C"))
        assert scale.harmonic_field(HarmonicField.THIRTEENTH) == []
        triads = scale.harmonic_field(HarmonicField.TRIAD)
        assert [c.notation for c in triads] == ["C8", "G♭8"]
        assert triads[0].description == "C Octave"
