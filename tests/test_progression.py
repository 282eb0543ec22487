"""
Tests for progressions and harmonic functions.
"""

import pytest

from chuk_music_theory.core import (
    ChordProgression,
    ChordProgressionNode,
    CustomChordProgression,
    HarmonicField,
    HarmonicFunction,
    Key,
    Scale,
    ScaleType,
)


class TestChordProgressionNode:
    """Tests for progression nodes."""

    def test_parse(self) -> None:
        """Numerals parse case-insensitively."""
        assert ChordProgressionNode.parse("vi") == ChordProgressionNode.VI
        assert ChordProgressionNode.parse("IV") == ChordProgressionNode.IV

    def test_parse_invalid(self) -> None:
        with pytest.raises(ValueError):
            ChordProgressionNode.parse("VIII")

    def test_next(self) -> None:
        """Recommended continuations."""
        assert ChordProgressionNode.V.next == [ChordProgressionNode.I]
        assert len(ChordProgressionNode.I.next) == 7
        assert ChordProgressionNode.VII.next == [ChordProgressionNode.VI]

    def test_str(self) -> None:
        assert str(ChordProgressionNode.IV) == "IV"


class TestChordProgression:
    """Tests for ChordProgression."""

    def test_named_catalog(self) -> None:
        """Eighteen named progressions."""
        progressions = ChordProgression.all()
        assert len(progressions) == 18
        assert progressions[0] is ChordProgression.ALL_NODES

    def test_description(self) -> None:
        """Nodes joined by dashes, or 'All'."""
        assert ChordProgression.I_V_VI_IV.description == "I - V - VI - IV"
        assert ChordProgression.ALL_NODES.description == "All"

    def test_parse(self) -> None:
        """Parsing numerals builds the progression."""
        assert ChordProgression.parse("I-V-vi-IV") == ChordProgression.I_V_VI_IV
        assert len(ChordProgression.parse("ii V I")) == 3

    def test_from_nodes(self) -> None:
        """Known node sequences resolve to the named progression."""
        nodes = [ChordProgressionNode.II, ChordProgressionNode.IV]
        nodes += [ChordProgressionNode.I, ChordProgressionNode.V]
        assert ChordProgression.from_nodes(nodes) is ChordProgression.II_IV_I_V
        custom = ChordProgression.from_nodes([ChordProgressionNode.III])
        assert custom.nodes == (ChordProgressionNode.III,)

    def test_chords(self, c_major: Scale) -> None:
        """Nodes resolve through the harmonic field."""
        chords = ChordProgression.I_V_VI_IV.chords(c_major, HarmonicField.TRIAD)
        assert [c.notation for c in chords] == ["C", "G", "Am", "F"]

    def test_chords_tetrads(self, c_major: Scale) -> None:
        chords = ChordProgression.VI_II_V_I.chords(c_major, HarmonicField.TETRAD)
        assert [c.notation for c in chords] == ["Am7", "Dm7", "G7", "Cmaj7"]

    def test_chords_with_inversion(self, c_major: Scale) -> None:
        """The inversion is passed to every chord."""
        chords = ChordProgression.I_IV_VI_V.chords(c_major, HarmonicField.TRIAD, inversion=1)
        assert all(c.inversion == 1 for c in chords)

    def test_out_of_range_nodes(self) -> None:
        """Nodes beyond a short scale give None."""
        scale = Scale(ScaleType.PENTATONIC_MAJOR, Key.parse("C"))
        chords = ChordProgression.I_VI_III_VII.chords(scale, HarmonicField.TRIAD)
        assert chords[0] is not None
        assert chords[1] is None
        assert chords[2] is not None
        assert chords[3] is None


class TestCustomChordProgression:
    """Tests for user-named progressions."""

    def test_str(self) -> None:
        custom = CustomChordProgression("axis", ChordProgression.I_V_VI_IV)
        assert str(custom) == "axis: I - V - VI - IV"
        assert custom.progression is ChordProgression.I_V_VI_IV


class TestHarmonicFunction:
    """Tests for harmonic functions."""

    def test_roman_numeral(self) -> None:
        assert HarmonicFunction.SUBDOMINANT.roman_numeral == "IV"
        assert HarmonicFunction.LEADING.node == ChordProgressionNode.VII

    def test_direction(self) -> None:
        """Functions lead to their usual successors."""
        assert HarmonicFunction.TONIC.direction == list(HarmonicFunction)
        assert HarmonicFunction.DOMINANT.direction == [HarmonicFunction.TONIC]
        assert HarmonicFunction.SUBDOMINANT.direction == [
            HarmonicFunction.SUPERTONIC,
            HarmonicFunction.DOMINANT,
            HarmonicFunction.LEADING,
        ]
        assert HarmonicFunction.SUPERTONIC.direction == HarmonicFunction.dominant_functions()

    def test_function_groups(self) -> None:
        assert HarmonicFunction.tonic_prolongation_functions() == [
            HarmonicFunction.MEDIANT,
            HarmonicFunction.SUBMEDIANT,
        ]
        assert HarmonicFunction.predominant_functions() == [
            HarmonicFunction.SUBMEDIANT,
            HarmonicFunction.SUPERTONIC,
        ]
