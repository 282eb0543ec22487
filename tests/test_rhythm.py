"""
Tests for rhythm arithmetic.
"""

import pytest

from chuk_music_theory.core import (
    NoteModifier,
    NoteValue,
    NoteValueType,
    Tempo,
    TimeSignature,
)

QUARTER = NoteValue(NoteValueType.QUARTER)


class TestNoteValue:
    """Tests for note values."""

    def test_rates(self) -> None:
        """Rates are fractions of a whole note."""
        assert NoteValueType.FOUR_BARS.rate == 16
        assert NoteValueType.QUARTER.rate == 0.25
        assert NoteValueType.SIXTY_FOURTH.rate == 1 / 64

    def test_modifier_rate(self) -> None:
        """Modifiers scale the rate."""
        assert QUARTER.rate == 0.25
        assert NoteValue(NoteValueType.HALF, NoteModifier.DOTTED).rate == 0.75

    def test_division(self) -> None:
        """Dividing by a type counts how many fit."""
        assert NoteValue(NoteValueType.WHOLE, NoteModifier.DOTTED) / NoteValueType.EIGHTH == 12
        assert NoteValue(NoteValueType.QUARTER, NoteModifier.DOTTED) / NoteValueType.HALF == 0.75
        assert NoteValue(NoteValueType.HALF, NoteModifier.DOTTED) / NoteValueType.SIXTEENTH == 12
        assert NoteValue(NoteValueType.HALF, NoteModifier.DOTTED) / NoteValueType.WHOLE == 0.75

    def test_description(self) -> None:
        assert NoteValue(NoteValueType.QUARTER, NoteModifier.DOTTED).description == "1/4D"
        assert NoteValue(NoteValueType.ONE_BAR).description == "1 Bar"
        assert NoteModifier.TRIPLET.description == "T"


class TestTimeSignature:
    """Tests for time signatures."""

    def test_default(self) -> None:
        """Default is 4/4."""
        assert TimeSignature().description == "4/4"
        assert TimeSignature() == TimeSignature.COMMON_TIME

    def test_constants(self) -> None:
        assert str(TimeSignature.SIX_EIGHT) == "6/8"
        assert str(TimeSignature.CUT_TIME) == "2/2"

    def test_parse(self) -> None:
        """'3/4' parses to three quarter beats."""
        assert TimeSignature.parse("3/4") == TimeSignature(3)
        assert TimeSignature.parse("6/8") == TimeSignature.SIX_EIGHT

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid time signature"):
            TimeSignature.parse("4")
        with pytest.raises(ValueError, match="denominator: 3"):
            TimeSignature.parse("4/3")

    def test_description_ignores_modifier(self) -> None:
        """The denominator comes from the beat note type alone."""
        dotted = TimeSignature(6, NoteValue(NoteValueType.QUARTER, NoteModifier.DOTTED))
        assert dotted.description == "6/4"
        assert TimeSignature(4, NoteValue(NoteValueType.WHOLE)).description == "4/1"

    def test_needs_a_beat(self) -> None:
        with pytest.raises(ValueError):
            TimeSignature(0)


class TestTempo:
    """Tests for tempo arithmetic."""

    def test_duration(self) -> None:
        """A quarter note at 120 BPM lasts half a second."""
        tempo = Tempo(TimeSignature(), 120)
        assert tempo.duration(QUARTER) == 0.5
        assert tempo.duration(NoteValue(NoteValueType.QUARTER, NoteModifier.DOTTED)) == 0.75
        assert tempo.duration(NoteValue(NoteValueType.WHOLE)) == 2.0

    def test_duration_depends_on_time_signature(self) -> None:
        """In 6/8 the beat is an eighth note, so a quarter is two beats."""
        tempo = Tempo(TimeSignature.SIX_EIGHT, 120)
        assert tempo.duration(QUARTER) == 1.0

    def test_hertz(self) -> None:
        assert Tempo().hertz(QUARTER) == 2.0

    @pytest.mark.parametrize(
        "note_type,modifier,expected",
        [
            (NoteValueType.WHOLE, NoteModifier.DEFAULT, 88200.0),
            (NoteValueType.HALF, NoteModifier.DEFAULT, 44100.0),
            (NoteValueType.HALF, NoteModifier.DOTTED, 66150.0),
            (NoteValueType.HALF, NoteModifier.TRIPLET, 29401.47),
            (NoteValueType.QUARTER, NoteModifier.DEFAULT, 22050.0),
            (NoteValueType.QUARTER, NoteModifier.DOTTED, 33075.0),
            (NoteValueType.QUARTER, NoteModifier.TRIPLET, 14700.73),
            (NoteValueType.EIGHTH, NoteModifier.DEFAULT, 11025.0),
            (NoteValueType.EIGHTH, NoteModifier.DOTTED, 16537.5),
            (NoteValueType.SIXTEENTH, NoteModifier.DEFAULT, 5512.5),
            (NoteValueType.SIXTEENTH, NoteModifier.DOTTED, 8268.75),
            (NoteValueType.THIRTY_SECOND, NoteModifier.DEFAULT, 2756.25),
            (NoteValueType.SIXTY_FOURTH, NoteModifier.DEFAULT, 1378.13),
        ],
    )
    def test_sample_length(
        self, note_type: NoteValueType, modifier: NoteModifier, expected: float
    ) -> None:
        """Sample lengths at 120 BPM and 44.1 kHz."""
        tempo = Tempo(TimeSignature(), 120)
        assert tempo.sample_length(NoteValue(note_type, modifier)) == pytest.approx(
            expected, abs=0.01
        )

    def test_sample_length_ignores_time_signature(self) -> None:
        """Sample length always counts four beats per whole note."""
        assert Tempo(TimeSignature.SIX_EIGHT, 120).sample_length(QUARTER) == 22050.0

    def test_sample_rate(self) -> None:
        assert Tempo().sample_length(QUARTER, sample_rate=48000) == 24000.0
        with pytest.raises(ValueError):
            Tempo().sample_length(QUARTER, sample_rate=0)

    def test_bpm_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            Tempo(bpm=0)

    def test_str(self) -> None:
        assert str(Tempo(TimeSignature(3), 90)) == "90 BPM 3/4"
