"""
Tests for Pitch.

Tests cover:
- MIDI and frequency mapping
- Parsing
- Interval arithmetic and spelling
- Equality and ordering
"""

import logging

import pytest

from chuk_music_theory.core import Accidental, Interval, Key, KeyType, Pitch

CLOSURE_PITCHES = ["C4", "F#3", "Bb2", "E5", "Cb4", "B#3", "G-1"]


class TestMidi:
    """Tests for the MIDI mapping."""

    def test_middle_c(self) -> None:
        """C4 is MIDI 60."""
        assert Pitch(Key(KeyType.C), 4).midi == 60
        assert Pitch(Key(KeyType.C), -1).midi == 0

    def test_round_trip(self) -> None:
        """from_midi(n).midi == n over the full MIDI range."""
        for midi in range(128):
            assert Pitch.from_midi(midi).midi == midi
            assert Pitch.from_midi(midi, prefer_sharps=False).midi == midi

    def test_from_midi_spelling(self) -> None:
        """Black keys are spelled with sharps by default."""
        assert Pitch.from_midi(61).strict_equals(Pitch(Key(KeyType.C, Accidental.SHARP), 4))
        assert Pitch.from_midi(61, prefer_sharps=False).strict_equals(
            Pitch(Key(KeyType.D, Accidental.FLAT), 4)
        )


class TestFrequency:
    """Tests for frequency conversion."""

    def test_a440(self) -> None:
        """A4 is 440 Hz."""
        assert Pitch(Key(KeyType.A), 4).frequency == 440.0

    def test_middle_c_frequency(self) -> None:
        """C4 is about 261.63 Hz."""
        assert Pitch.parse("C4").frequency == pytest.approx(261.63, abs=0.01)

    def test_nearest(self) -> None:
        """nearest() finds the closest sharp-spelled pitch."""
        assert Pitch.nearest(440.0).strict_equals(Pitch(Key(KeyType.A), 4))
        assert Pitch.nearest(445.0) == Pitch.parse("A4")
        assert Pitch.nearest(261.0) == Pitch.parse("C4")
        assert Pitch.nearest(277.0).strict_equals(Pitch.parse("C#4"))

    def test_nearest_clamps_to_search_range(self) -> None:
        """Frequencies outside octaves 1-7 snap to the outermost pitch."""
        assert Pitch.nearest(1.0).strict_equals(Pitch.parse("C1"))
        assert Pitch.nearest(100000.0).strict_equals(Pitch.parse("B7"))


class TestParse:
    """Tests for pitch parsing."""

    def test_parse(self) -> None:
        """Letter, accidentals, optional sign and octave."""
        assert Pitch.parse("C4").midi == 60
        assert Pitch.parse("f#-1").strict_equals(Pitch(Key(KeyType.F, Accidental.SHARP), -1))
        assert Pitch.parse("cb2").strict_equals(Pitch(Key(KeyType.C, Accidental.FLAT), 2))
        assert Pitch.parse("f#-5").octave == -5

    def test_cb_is_below_c(self) -> None:
        """Cb2 sounds as B1."""
        assert Pitch.parse("cb2") == Pitch.parse("B1")

    def test_lenient_default(self, caplog: pytest.LogCaptureFixture) -> None:
        """Malformed text falls back to C0."""
        with caplog.at_level(logging.DEBUG, logger="chuk_music_theory.core.pitch"):
            pitch = Pitch.parse("???")
        assert pitch.strict_equals(Pitch(Key(KeyType.C), 0))
        assert "Unparseable pitch" in caplog.text

    def test_strict_raises(self) -> None:
        """Strict parsing rejects malformed text."""
        with pytest.raises(ValueError):
            Pitch.parse("C", strict=True)
        with pytest.raises(ValueError):
            Pitch.parse("C4 major", strict=True)

    def test_str(self) -> None:
        """str() uses accidental glyphs."""
        assert str(Pitch.parse("Bb2")) == "B♭2"
        assert repr(Pitch.parse("C#4")) == "Pitch(C♯4)"


class TestArithmetic:
    """Tests for interval arithmetic."""

    def test_add_interval_spells_by_degree(self) -> None:
        """C + m3 is Eb, not D#."""
        c4 = Pitch.parse("C4")
        assert (c4 + Interval.M3).strict_equals(Pitch.parse("E4"))
        assert (c4 + Interval.m3).strict_equals(Pitch.parse("Eb4"))
        assert (c4 + Interval.A2).strict_equals(Pitch.parse("D#4"))
        assert (c4 + Interval.P8).strict_equals(Pitch.parse("C5"))

    def test_add_crosses_octave(self) -> None:
        """Stepping from B to C moves up an octave."""
        assert (Pitch.parse("B3") + Interval.m2).strict_equals(Pitch.parse("C4"))

    def test_subtract_interval(self) -> None:
        """Subtracting an interval walks down."""
        assert (Pitch.parse("C4") - Interval.m2).strict_equals(Pitch.parse("B3"))
        assert (Pitch.parse("E4") - Interval.M3).strict_equals(Pitch.parse("C4"))

    def test_add_subtract_semitones(self) -> None:
        """Integers move by semitones."""
        assert (Pitch.parse("C4") + 1).strict_equals(Pitch.parse("C#4"))
        assert (Pitch.parse("C4") - 12).strict_equals(Pitch.parse("C3"))

    def test_interval_between_pitches(self) -> None:
        """pitch - pitch gives the interval, regardless of order."""
        c4 = Pitch.parse("C4")
        e4 = Pitch.parse("E4")
        assert (c4 - e4).strict_equals(Interval.M3)
        assert (e4 - c4).strict_equals(Interval.M3)
        assert (Pitch.parse("C4") - Pitch.parse("Gb4")).strict_equals(Interval.d5)
        assert (Pitch.parse("C4") - Pitch.parse("F#4")).strict_equals(Interval.A4)

    def test_compound_interval(self) -> None:
        """Intervals beyond an octave are named."""
        assert (Pitch.parse("C4") - Pitch.parse("E5")).strict_equals(Interval.M10)
        assert (Pitch.parse("C4") - Pitch.parse("D5")).strict_equals(Interval.M9)

    @pytest.mark.parametrize("text", CLOSURE_PITCHES)
    def test_interval_closure(self, text: str) -> None:
        """(p + i) - p recovers i for every named interval above the unison."""
        pitch = Pitch.parse(text)
        for interval in Interval.all():
            if interval.semitones < 0:
                continue
            assert ((pitch + interval) - pitch).strict_equals(interval), interval

    @pytest.mark.parametrize("text", CLOSURE_PITCHES)
    def test_add_then_subtract(self, text: str) -> None:
        """(p + i) - i sounds the same as p."""
        pitch = Pitch.parse(text)
        for interval in Interval.all():
            assert (pitch + interval) - interval == pitch


class TestEquality:
    """Tests for equality and ordering."""

    def test_enharmonic_equality(self) -> None:
        """== compares MIDI numbers."""
        assert Pitch.parse("C#4") == Pitch.parse("Db4")
        assert not Pitch.parse("C#4").strict_equals(Pitch.parse("Db4"))
        assert Pitch.parse("C4") != Pitch.parse("C5")

    def test_ordering(self) -> None:
        """Pitches order by MIDI number."""
        pitches = [Pitch.parse("G4"), Pitch.parse("C4"), Pitch.parse("E4")]
        assert [str(p) for p in sorted(pitches)] == ["C4", "E4", "G4"]
        assert Pitch.parse("B3") < Pitch.parse("C4")

    def test_hash(self) -> None:
        """Enharmonic pitches collapse in sets."""
        assert len({Pitch.parse("C#4"), Pitch.parse("Db4")}) == 1
