"""
Catalog models - user-extensible scale types and named progressions.

A catalog file is a YAML document bundling extra scale types and
progressions under a name. Intervals are written in notation ("M3") and
progression nodes as roman numerals ("IV").
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_music_theory.constants import SchemaVersion
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.progression import (
    ChordProgression,
    ChordProgressionNode,
    CustomChordProgression,
)
from chuk_music_theory.core.scale import ScaleType


class CatalogScale(BaseModel):
    """A scale type entry in a catalog file."""

    name: str = Field(..., min_length=1, description="Lookup name, e.g. 'bebop-major'")
    description: str = Field(..., description="Scale name shown to users")
    intervals: list[str] = Field(..., min_length=1, description="Interval notations")

    model_config = {"frozen": True}

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Every interval must be a named interval."""
        for notation in v:
            Interval.parse(notation)
        return v

    def to_scale_type(self) -> ScaleType:
        return ScaleType(tuple(Interval.parse(n) for n in self.intervals), self.description)


class CatalogProgression(BaseModel):
    """A named progression entry in a catalog file."""

    name: str = Field(..., min_length=1, description="Lookup name, e.g. 'ii-V-I'")
    description: str = Field("", description="Human-readable description")
    nodes: list[str] = Field(..., min_length=1, description="Roman numerals")

    model_config = {"frozen": True}

    @field_validator("nodes")
    @classmethod
    def validate_nodes(cls, v: list[str]) -> list[str]:
        return [str(ChordProgressionNode.parse(node)) for node in v]

    def to_progression(self) -> CustomChordProgression:
        progression = ChordProgression.from_nodes(
            [ChordProgressionNode.parse(node) for node in self.nodes]
        )
        return CustomChordProgression(self.name, progression)


class CatalogFile(BaseModel):
    """A catalog document as stored in YAML."""

    schema_version: SchemaVersion = Field("catalog/v1", alias="schema")
    name: str = Field(..., min_length=1, description="Catalog name")
    description: str = Field("", description="Human-readable description")
    scales: list[CatalogScale] = Field(default_factory=list)
    progressions: list[CatalogProgression] = Field(default_factory=list)

    model_config = {"frozen": True, "populate_by_name": True}

    def get_scale(self, name: str) -> CatalogScale | None:
        return next((scale for scale in self.scales if scale.name == name), None)

    def get_progression(self, name: str) -> CatalogProgression | None:
        return next((p for p in self.progressions if p.name == name), None)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a dict ready for yaml.safe_dump."""
        return self.model_dump(mode="json", by_alias=True)


class CatalogMetadata(BaseModel):
    """Lightweight catalog summary for listing."""

    name: str
    description: str
    scale_count: int
    progression_count: int

    model_config = {"frozen": True}

    @classmethod
    def from_catalog(cls, catalog: CatalogFile) -> CatalogMetadata:
        return cls(
            name=catalog.name,
            description=catalog.description,
            scale_count=len(catalog.scales),
            progression_count=len(catalog.progressions),
        )
