"""
Tests for the serialization schemas and codec.

Tests cover:
- Wire shape of pitch, harmony and rhythm schemas
- Round trips through dump/load and dumps/loads
- Validation errors on malformed documents
"""

import json

import pytest
from pydantic import ValidationError

from chuk_music_theory.core import (
    Accidental,
    Chord,
    ChordExtension,
    ChordExtensionType,
    ChordProgression,
    ChordSeventh,
    ChordThird,
    ChordType,
    CustomChordProgression,
    Interval,
    Key,
    NoteModifier,
    NoteValue,
    NoteValueType,
    Pitch,
    Scale,
    ScaleType,
    Tempo,
    TimeSignature,
)
from chuk_music_theory.models import (
    AccidentalSchema,
    ChordProgressionSchema,
    IntervalSchema,
    KeySchema,
    dump,
    dumps,
    load,
    loads,
    schema_for,
)


class TestPitchSchemas:
    """Tests for accidental, interval, key and pitch schemas."""

    def test_dump_pitch(self) -> None:
        """A pitch dumps as nested key and accidental."""
        assert dump(Pitch.parse("C#4")) == {
            "key": {"type": "C", "accidental": {"kind": "sharps", "amount": 1}},
            "octave": 4,
        }

    def test_pitch_round_trip(self) -> None:
        pitch = Pitch.parse("Eb3")
        loaded = load(Pitch, dump(pitch))
        assert loaded.strict_equals(pitch)

    def test_natural_key_defaults(self) -> None:
        """Accidental may be omitted for a natural key."""
        key = load(Key, {"type": "G"})
        assert key.strict_equals(Key.parse("G"))

    def test_invalid_letter(self) -> None:
        with pytest.raises(ValidationError):
            KeySchema(type="H")

    def test_negative_amount(self) -> None:
        with pytest.raises(ValidationError):
            AccidentalSchema(kind="sharps", amount=-1)

    def test_zero_flats_rejected_by_core(self) -> None:
        """The schema accepts it, the core type does not."""
        with pytest.raises(ValueError):
            AccidentalSchema(kind="flats", amount=0).to_core()

    def test_accidental_round_trip(self) -> None:
        assert load(Accidental, dump(Accidental.DOUBLE_FLAT)) == Accidental.DOUBLE_FLAT

    def test_interval_resolves_to_catalog(self) -> None:
        """Named intervals load back as the catalog instance."""
        schema = IntervalSchema(quality="major", degree=3, semitones=4)
        assert schema.to_core() is Interval.M3

    def test_unnamed_interval(self) -> None:
        interval = IntervalSchema(quality="major", degree=3, semitones=5).to_core()
        assert interval.degree == 3
        assert interval.semitones == 5


class TestHarmonySchemas:
    """Tests for scale, chord and progression schemas."""

    def test_dump_scale_type(self) -> None:
        data = dump(ScaleType.MAJOR)
        assert set(data) == {"intervals", "description"}
        assert data["description"] == "Major"
        assert data["intervals"][2] == {"quality": "major", "degree": 3, "semitones": 4}

    def test_scale_type_round_trip(self) -> None:
        assert load(ScaleType, dump(ScaleType.DORIAN)) == ScaleType.DORIAN

    def test_scale_round_trip(self) -> None:
        scale = Scale(ScaleType.DORIAN, Key.parse("D"))
        loaded = load(Scale, dump(scale))
        assert loaded.type == ScaleType.DORIAN
        assert loaded.keys == scale.keys

    def test_dump_progression(self) -> None:
        assert dump(ChordProgression.I_V_VI_IV) == {"nodes": ["I", "V", "VI", "IV"]}

    def test_load_progression_lowercase(self) -> None:
        """Lowercase numerals normalize and resolve to the named progression."""
        progression = load(ChordProgression, {"nodes": ["i", "v", "vi", "iv"]})
        assert progression is ChordProgression.I_V_VI_IV

    def test_invalid_node(self) -> None:
        with pytest.raises(ValidationError):
            ChordProgressionSchema(nodes=["I", "VIII"])

    def test_custom_progression_round_trip(self) -> None:
        custom = CustomChordProgression("Plagal", ChordProgression.parse("IV I"))
        assert load(CustomChordProgression, dump(custom)) == custom

    def test_chord_round_trip(self) -> None:
        chord = Chord(ChordType.MINOR_7, Key.parse("Eb"), inversion=1)
        loaded = loads(Chord, dumps(chord))
        assert loaded.strict_equals(chord)

    def test_dump_chord_parts(self) -> None:
        data = dump(Chord(ChordType.DOMINANT_7, Key.parse("G")))
        assert data["type"]["third"] == "major"
        assert data["type"]["seventh"] == "dominant"
        assert data["type"]["sixth"] is None
        assert data["inversion"] == 0

    def test_added_extension(self) -> None:
        """A lone thirteenth without a seventh is an add chord."""
        chord_type = ChordType(
            ChordThird.MAJOR, extensions=(ChordExtension(ChordExtensionType.THIRTEENTH),)
        )
        data = dump(chord_type)
        assert data["extensions"][0]["is_added"] is True
        assert load(ChordType, data) == chord_type

    def test_extension_with_seventh(self) -> None:
        chord_type = ChordType(
            ChordThird.MAJOR,
            seventh=ChordSeventh.DOMINANT,
            extensions=(ChordExtension(ChordExtensionType.NINTH, Accidental.FLAT),),
        )
        data = dump(chord_type)
        assert data["extensions"][0]["accidental"] == {"kind": "flats", "amount": 1}
        assert data["extensions"][0]["is_added"] is False

    def test_negative_inversion(self) -> None:
        data = dump(Chord(ChordType.MAJOR, Key.parse("C")))
        data["inversion"] = -1
        with pytest.raises(ValidationError):
            load(Chord, data)


class TestRhythmSchemas:
    """Tests for note value, time signature and tempo schemas."""

    def test_tempo_round_trip(self) -> None:
        tempo = Tempo(TimeSignature.SIX_EIGHT, 96)
        assert loads(Tempo, dumps(tempo)) == tempo

    def test_dump_note_value(self) -> None:
        data = dump(NoteValue(NoteValueType.EIGHTH, NoteModifier.DOTTED))
        assert data == {"type": "eighth", "modifier": 1.5}

    def test_tempo_defaults(self) -> None:
        """An empty document is 4/4 at 120 BPM."""
        assert load(Tempo, {}) == Tempo()

    def test_invalid_bpm(self) -> None:
        with pytest.raises(ValidationError):
            load(Tempo, {"bpm": 0})

    def test_invalid_beats(self) -> None:
        with pytest.raises(ValidationError):
            load(TimeSignature, {"beats": 0})


class TestCodec:
    """Tests for the codec helpers."""

    def test_dumps_is_json(self) -> None:
        text = dumps(Pitch.parse("A4"), indent=2)
        assert json.loads(text)["octave"] == 4
        assert "\n" in text

    def test_unsupported_type(self) -> None:
        with pytest.raises(ValueError, match="object"):
            dump(object())

    def test_schema_for(self) -> None:
        assert schema_for(Key) is KeySchema
        with pytest.raises(ValueError):
            schema_for(int)
