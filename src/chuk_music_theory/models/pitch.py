"""
Pitch schemas - structural form of Accidental, Interval, Key and Pitch.

Each schema mirrors the fields of its core value type and converts both
ways with from_core() / to_core(). Core types stay plain dataclasses;
validation of the wire form happens here.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from chuk_music_theory.core.accidental import Accidental, AccidentalKind
from chuk_music_theory.core.interval import Interval, IntervalQuality
from chuk_music_theory.core.key import Key, KeyType
from chuk_music_theory.core.pitch import Pitch

Letter = Literal["C", "D", "E", "F", "G", "A", "B"]


class AccidentalSchema(BaseModel):
    """Accidental as {kind, amount}."""

    kind: AccidentalKind = Field(AccidentalKind.NATURAL, description="natural, flats or sharps")
    amount: int = Field(0, ge=0, description="Number of flats or sharps (0 for natural)")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, accidental: Accidental) -> AccidentalSchema:
        return cls(kind=accidental.kind, amount=accidental.amount)

    def to_core(self) -> Accidental:
        return Accidental(self.kind, self.amount)


class IntervalSchema(BaseModel):
    """Interval as {quality, degree, semitones}."""

    quality: IntervalQuality = Field(..., description="Interval quality")
    degree: int = Field(..., ge=1, description="Letter-step degree (a third is 3)")
    semitones: int = Field(..., description="Semitone distance")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, interval: Interval) -> IntervalSchema:
        return cls(quality=interval.quality, degree=interval.degree, semitones=interval.semitones)

    def to_core(self) -> Interval:
        """Resolve to the named catalog interval when one matches."""
        return Interval.find(self.quality, self.degree, self.semitones)


class KeySchema(BaseModel):
    """Key as {type, accidental}, with the letter name as type."""

    type: Letter = Field(..., description="Letter name")
    accidental: AccidentalSchema = Field(
        default_factory=AccidentalSchema, description="Accidental applied to the letter"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, key: Key) -> KeySchema:
        return cls(type=key.type.name, accidental=AccidentalSchema.from_core(key.accidental))

    def to_core(self) -> Key:
        return Key(KeyType[self.type], self.accidental.to_core())


class PitchSchema(BaseModel):
    """Pitch as {key, octave}."""

    key: KeySchema = Field(..., description="Key of the pitch")
    octave: int = Field(..., description="Octave number (C4 is middle C)")

    model_config = {"frozen": True}

    @classmethod
    def from_core(cls, pitch: Pitch) -> PitchSchema:
        return cls(key=KeySchema.from_core(pitch.key), octave=pitch.octave)

    def to_core(self) -> Pitch:
        return Pitch(self.key.to_core(), self.octave)
