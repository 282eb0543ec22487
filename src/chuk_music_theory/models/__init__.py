"""
Pydantic models for the music theory system.

This module provides:
- Schemas: Structural form of every core value type
- Codec: dump/dumps/load/loads between core values and JSON
- Catalog: YAML catalog documents of scale types and progressions
"""

from chuk_music_theory.models.catalog import (
    CatalogFile,
    CatalogMetadata,
    CatalogProgression,
    CatalogScale,
)
from chuk_music_theory.models.codec import dump, dumps, load, loads, schema_for
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

__all__ = [
    # Pitch
    "AccidentalSchema",
    "IntervalSchema",
    "KeySchema",
    "PitchSchema",
    # Harmony
    "ScaleTypeSchema",
    "ScaleSchema",
    "ChordExtensionSchema",
    "ChordTypeSchema",
    "ChordSchema",
    "ChordProgressionSchema",
    "CustomChordProgressionSchema",
    # Rhythm
    "NoteValueSchema",
    "TimeSignatureSchema",
    "TempoSchema",
    # Catalog
    "CatalogFile",
    "CatalogMetadata",
    "CatalogScale",
    "CatalogProgression",
    # Codec
    "dump",
    "dumps",
    "load",
    "loads",
    "schema_for",
]
