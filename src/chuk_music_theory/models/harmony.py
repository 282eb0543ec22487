"""
Harmony schemas - structural form of scales, chords and progressions.

ScaleType encodes as {intervals, description} and ChordProgression as
{nodes}, with nodes written as roman numerals.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from chuk_music_theory.core.chord import (
    Chord,
    ChordEighth,
    ChordExtension,
    ChordExtensionType,
    ChordFifth,
    ChordSeventh,
    ChordSixth,
    ChordSuspended,
    ChordThird,
    ChordType,
)
from chuk_music_theory.core.progression import (
    ChordProgression,
    ChordProgressionNode,
    CustomChordProgression,
)
from chuk_music_theory.core.scale import Scale, ScaleType
from chuk_music_theory.models.pitch import AccidentalSchema, IntervalSchema, KeySchema


class ScaleTypeSchema(BaseModel):
    """Scale type as {intervals, description}."""

    intervals: list[IntervalSchema] = Field(..., description="Intervals above the root")
    description: str = Field(..., description="Scale name")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, scale_type: ScaleType) -> ScaleTypeSchema:
        return cls(
            intervals=[IntervalSchema.from_core(i) for i in scale_type.intervals],
            description=scale_type.description,
        )

    def to_core(self) -> ScaleType:
        return ScaleType(tuple(i.to_core() for i in self.intervals), self.description)


class ScaleSchema(BaseModel):
    """Scale as {type, key}."""

    type: ScaleTypeSchema = Field(..., description="Scale type")
    key: KeySchema = Field(..., description="Root key")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, scale: Scale) -> ScaleSchema:
        return cls(type=ScaleTypeSchema.from_core(scale.type), key=KeySchema.from_core(scale.key))

    def to_core(self) -> Scale:
        return Scale(self.type.to_core(), self.key.to_core())


class ChordExtensionSchema(BaseModel):
    """Chord extension as {type, accidental, is_added}."""

    type: ChordExtensionType = Field(..., description="Extension degree (8, 9, 11 or 13)")
    accidental: AccidentalSchema = Field(
        default_factory=AccidentalSchema, description="Natural, flat or sharp"
    )
    is_added: bool = Field(False, description="Added without a seventh")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, extension: ChordExtension) -> ChordExtensionSchema:
        return cls(
            type=extension.type,
            accidental=AccidentalSchema.from_core(extension.accidental),
            is_added=extension.is_added,
        )

    def to_core(self) -> ChordExtension:
        return ChordExtension(self.type, self.accidental.to_core(), self.is_added)


class ChordTypeSchema(BaseModel):
    """Chord type as its parts; absent parts are null."""

    third: ChordThird | None = Field(None, description="Third")
    fifth: ChordFifth | None = Field(None, description="Fifth")
    sixth: ChordSixth | None = Field(None, description="Added sixth")
    seventh: ChordSeventh | None = Field(None, description="Seventh")
    eighth: ChordEighth | None = Field(None, description="Octave")
    suspended: ChordSuspended | None = Field(None, description="Suspension")
    extensions: list[ChordExtensionSchema] = Field(
        default_factory=list, description="Extensions"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, chord_type: ChordType) -> ChordTypeSchema:
        return cls(
            third=chord_type.third,
            fifth=chord_type.fifth,
            sixth=chord_type.sixth,
            seventh=chord_type.seventh,
            eighth=chord_type.eighth,
            suspended=chord_type.suspended,
            extensions=[ChordExtensionSchema.from_core(e) for e in chord_type.extensions],
        )

    def to_core(self) -> ChordType:
        return ChordType(
            third=self.third,
            fifth=self.fifth,
            sixth=self.sixth,
            seventh=self.seventh,
            eighth=self.eighth,
            suspended=self.suspended,
            extensions=tuple(e.to_core() for e in self.extensions),
        )


class ChordSchema(BaseModel):
    """Chord as {type, key, inversion}."""

    type: ChordTypeSchema = Field(..., description="Chord type")
    key: KeySchema = Field(..., description="Root key")
    inversion: int = Field(0, ge=0, description="Inversion (0 is root position)")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, chord: Chord) -> ChordSchema:
        return cls(
            type=ChordTypeSchema.from_core(chord.type),
            key=KeySchema.from_core(chord.key),
            inversion=chord.inversion,
        )

    def to_core(self) -> Chord:
        return Chord(self.type.to_core(), self.key.to_core(), self.inversion)


class ChordProgressionSchema(BaseModel):
    """Chord progression as {nodes}, nodes as roman numerals."""

    nodes: list[str] = Field(..., description="Roman numerals, e.g. ['I', 'V', 'VI', 'IV']")

    model_config = {"frozen": True}

    @field_validator("nodes")
    @classmethod
    def validate_nodes(cls, v: list[str]) -> list[str]:
        """Normalize numerals to upper case, rejecting unknown ones."""
        return [str(ChordProgressionNode.parse(node)) for node in v]

    @classmethod
    def from_core(cls, progression: ChordProgression) -> ChordProgressionSchema:
        return cls(nodes=[str(node) for node in progression.nodes])

    def to_core(self) -> ChordProgression:
        """Resolve to the named progression when one matches."""
        return ChordProgression.from_nodes([ChordProgressionNode.parse(n) for n in self.nodes])


class CustomChordProgressionSchema(BaseModel):
    """User-named progression as {name, progression}."""

    name: str = Field(..., min_length=1, description="Progression name")
    progression: ChordProgressionSchema = Field(..., description="Progression nodes")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, custom: CustomChordProgression) -> CustomChordProgressionSchema:
        return cls(
            name=custom.name, progression=ChordProgressionSchema.from_core(custom.progression)
        )

    def to_core(self) -> CustomChordProgression:
        return CustomChordProgression(self.name, self.progression.to_core())
