"""
Interval set loader - discovers and loads scale and chord definitions.

Definitions can come from:
1. Built-in library (shipped with package)
2. Project definitions (user's own directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_music_theory.core.interval_set import Chord, Scale
from chuk_music_theory.models.interval_set import (
    IntervalSetDefinition,
    IntervalSetKind,
    IntervalSetMetadata,
    normalize_name,
)

logger = logging.getLogger(__name__)


class IntervalSetLoader:
    """
    Discovers and loads interval set definitions.

    Definitions are loaded from YAML files in the library and project directories.
    Project definitions override library definitions with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the loader.

        Args:
            library_path: Path to built-in definition library
            project_path: Path to project definitions directory
        """
        self.library_path = library_path or (Path(__file__).parent / "builtin")
        self.project_path = project_path
        self._cache: dict[str, IntervalSetDefinition] = {}

    def list_definitions(self, kind: IntervalSetKind | None = None) -> list[IntervalSetMetadata]:
        """
        List all available definitions, sorted by name.

        Args:
            kind: Only list scales or only chords

        Returns definitions from both library and project, with project
        definitions taking precedence.
        """
        found = self._discover()
        return [
            IntervalSetMetadata.from_definition(definition)
            for name, definition in sorted(found.items())
            if kind is None or definition.kind == kind
        ]

    def get_definition(self, name: str) -> IntervalSetDefinition | None:
        """
        Get a definition by name.

        Project definitions take precedence over library definitions.

        Args:
            name: Definition name; "whole_tone" and "Whole-Tone" both find "whole-tone"

        Returns:
            IntervalSetDefinition if found, None otherwise
        """
        key = normalize_name(name)
        if key in self._cache:
            return self._cache[key]

        definition = self._discover().get(key)
        if definition:
            self._cache[key] = definition
        return definition

    def get(self, name: str) -> Scale | Chord | None:
        """Resolve a definition by name into a Scale or Chord."""
        definition = self.get_definition(name)
        if definition is None:
            return None
        return definition.to_interval_set()

    def get_scale(self, name: str) -> Scale | None:
        """Get a scale by name, or None if missing or not a scale."""
        interval_set = self.get(name)
        return interval_set if isinstance(interval_set, Scale) else None

    def get_chord(self, name: str) -> Chord | None:
        """Get a chord by name, or None if missing or not a chord."""
        interval_set = self.get(name)
        return interval_set if isinstance(interval_set, Chord) else None

    def _discover(self) -> dict[str, IntervalSetDefinition]:
        """
        Load every definition file, keyed by definition name.

        Library files load first so project files override them. A file
        whose name does not match its file stem is skipped with a warning.
        """
        found: dict[str, IntervalSetDefinition] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_definition_file(path)
                if definition is None:
                    continue
                if definition.name != normalize_name(path.stem):
                    logger.warning(
                        f"Skipping interval set file {path}: name '{definition.name}' "
                        f"does not match file name '{path.stem}'"
                    )
                    continue
                found[definition.name] = definition

        return found

    def _load_definition_file(self, path: Path) -> IntervalSetDefinition | None:
        """Load a definition from a YAML file, or None if it is invalid."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            definition = IntervalSetDefinition.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Skipping interval set file {path}: {e}")
            return None

        logger.debug(f"Loaded interval set '{definition.name}' from {path}")
        return definition

    def clear_cache(self) -> None:
        """Clear the definition cache."""
        self._cache.clear()
