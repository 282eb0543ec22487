"""
Rhythm schemas - structural form of NoteValue, TimeSignature and Tempo.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_music_theory.constants import DEFAULT_BEATS, DEFAULT_BPM
from chuk_music_theory.core.rhythm import (
    NoteModifier,
    NoteValue,
    NoteValueType,
    Tempo,
    TimeSignature,
)


class NoteValueSchema(BaseModel):
    """Note value as {type, modifier}."""

    type: NoteValueType = Field(..., description="Note length")
    modifier: NoteModifier = Field(NoteModifier.DEFAULT, description="Length multiplier")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, note_value: NoteValue) -> NoteValueSchema:
        return cls(type=note_value.type, modifier=note_value.modifier)

    def to_core(self) -> NoteValue:
        return NoteValue(self.type, self.modifier)


class TimeSignatureSchema(BaseModel):
    """Time signature as {beats, note_value}."""

    beats: int = Field(DEFAULT_BEATS, ge=1, description="Beats per bar")
    note_value: NoteValueSchema = Field(
        default_factory=lambda: NoteValueSchema(type=NoteValueType.QUARTER),
        description="Note value of one beat",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, time_signature: TimeSignature) -> TimeSignatureSchema:
        return cls(
            beats=time_signature.beats,
            note_value=NoteValueSchema.from_core(time_signature.note_value),
        )

    def to_core(self) -> TimeSignature:
        return TimeSignature(self.beats, self.note_value.to_core())


class TempoSchema(BaseModel):
    """Tempo as {time_signature, bpm}."""

    time_signature: TimeSignatureSchema = Field(
        default_factory=TimeSignatureSchema, description="Time signature"
    )
    bpm: float = Field(DEFAULT_BPM, gt=0, description="Beats per minute")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, tempo: Tempo) -> TempoSchema:
        return cls(
            time_signature=TimeSignatureSchema.from_core(tempo.time_signature), bpm=tempo.bpm
        )

    def to_core(self) -> Tempo:
        return Tempo(self.time_signature.to_core(), self.bpm)
