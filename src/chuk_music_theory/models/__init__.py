"""
Pydantic models for the music theory library.

This module provides:
- IntervalSetDefinition: A named scale or chord as stored on disk
- IntervalSetKind: Scale or chord
- IntervalSetMetadata: Listing summary of a definition
- normalize_name: Canonical definition name (lowercase, hyphens)
"""

from chuk_music_theory.models.interval_set import (
    IntervalSetDefinition,
    IntervalSetKind,
    IntervalSetMetadata,
    normalize_name,
)

__all__ = [
    "IntervalSetDefinition",
    "IntervalSetKind",
    "IntervalSetMetadata",
    "normalize_name",
]
