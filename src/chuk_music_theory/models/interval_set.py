"""
Interval set definitions - the on-disk form of scales and chords.

Definitions are YAML documents validated by these models, then
resolved into core Scale or Chord values.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from chuk_music_theory.constants import SchemaVersion
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.interval_set import Chord, Scale


def normalize_name(name: str) -> str:
    """Canonical form of a definition name: lowercase, hyphen-separated."""
    return name.lower().replace("_", "-")


class IntervalSetKind(str, Enum):
    """How an interval set is read."""

    SCALE = "scale"
    CHORD = "chord"


class IntervalSetDefinition(BaseModel):
    """
    A named scale or chord as stored in a library file.

    Intervals are shorthand names ('P1', 'M3', 'P5'), measured from the root.
    """

    schema_version: SchemaVersion = Field(
        "interval-set/v1", alias="schema", description="Definition schema version"
    )
    name: str = Field(..., description="Unique name, e.g. 'major' or 'minor-7'")
    kind: IntervalSetKind = Field(..., description="Scale or chord")
    description: str = Field("", description="Human-readable description")
    intervals: list[str] = Field(default_factory=list, description="Interval names from the root")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is a valid identifier."""
        if not v or not v.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid interval set name: {v}")
        return normalize_name(v)

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: list[str]) -> list[str]:
        """Ensure every interval name parses, normalizing to shorthand."""
        return [str(Interval.parse(name)) for name in v]

    def to_interval_set(self) -> Scale | Chord:
        """Resolve to a Scale or Chord value."""
        intervals = [Interval.parse(name) for name in self.intervals]
        if self.kind == IntervalSetKind.SCALE:
            return Scale(intervals, self.name)
        return Chord(intervals, self.name)


class IntervalSetMetadata(BaseModel):
    """Lightweight metadata for listing interval sets."""

    name: str
    kind: IntervalSetKind
    description: str
    size: int

    model_config = {"frozen": True}

    @classmethod
    def from_definition(cls, definition: IntervalSetDefinition) -> IntervalSetMetadata:
        """Create metadata from a definition."""
        return cls(
            name=definition.name,
            kind=definition.kind,
            description=definition.description,
            size=len(definition.intervals),
        )
