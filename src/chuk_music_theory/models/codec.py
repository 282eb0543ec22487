"""
Codec - encode and decode core value types through their schemas.

    data = dump(Pitch.parse("C#4"))      # {"key": {...}, "octave": 4}
    pitch = load(Pitch, data)

dumps()/loads() do the same with JSON text.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.accidental import Accidental
from chuk_music_theory.core.chord import Chord, ChordExtension, ChordType
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.key import Key
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.progression import ChordProgression, CustomChordProgression
from chuk_music_theory.core.rhythm import NoteValue, Tempo, TimeSignature
from chuk_music_theory.core.scale import Scale, ScaleType
from chuk_music_theory.models.harmony import (
    ChordExtensionSchema,
    ChordProgressionSchema,
    ChordSchema,
    ChordTypeSchema,
    CustomChordProgressionSchema,
    ScaleSchema,
    ScaleTypeSchema,
)
from chuk_music_theory.models.pitch import (
    AccidentalSchema,
    IntervalSchema,
    KeySchema,
    PitchSchema,
)
from chuk_music_theory.models.rhythm import NoteValueSchema, TempoSchema, TimeSignatureSchema

T = TypeVar("T")

SCHEMAS: dict[type, type[BaseModel]] = {
    Accidental: AccidentalSchema,
    Interval: IntervalSchema,
    Key: KeySchema,
    Pitch: PitchSchema,
    ScaleType: ScaleTypeSchema,
    Scale: ScaleSchema,
    ChordExtension: ChordExtensionSchema,
    ChordType: ChordTypeSchema,
    Chord: ChordSchema,
    ChordProgression: ChordProgressionSchema,
    CustomChordProgression: CustomChordProgressionSchema,
    NoteValue: NoteValueSchema,
    TimeSignature: TimeSignatureSchema,
    Tempo: TempoSchema,
}


def schema_for(value_type: type) -> Any:
    """
    Get the schema class for a core value type.

    Raises:
        ValueError: If the type has no registered schema
    """
    schema = SCHEMAS.get(value_type)
    if schema is None:
        raise ValueError(ErrorMessages.UNSUPPORTED_TYPE.format(type_name=value_type.__name__))
    return schema


def dump(value: Any) -> dict[str, Any]:
    """Encode a core value as a JSON-compatible dict."""
    return schema_for(type(value)).from_core(value).model_dump(mode="json")


def dumps(value: Any, indent: int | None = None) -> str:
    """Encode a core value as JSON text."""
    return schema_for(type(value)).from_core(value).model_dump_json(indent=indent)


def load(value_type: type[T], data: dict[str, Any]) -> T:
    """
    Decode a dict into a core value.

    Raises:
        pydantic.ValidationError: If the data does not match the schema
        ValueError: If the type has no registered schema
    """
    result: T = schema_for(value_type).model_validate(data).to_core()
    return result


def loads(value_type: type[T], text: str | bytes) -> T:
    """Decode JSON text into a core value."""
    result: T = schema_for(value_type).model_validate_json(text).to_core()
    return result
