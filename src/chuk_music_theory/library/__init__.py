"""
Interval set library - named scales and chords stored as YAML.

The built-in library ships with the package; a project directory can
add definitions or override built-in ones by file name.
"""

from chuk_music_theory.library.loader import IntervalSetLoader

__all__ = ["IntervalSetLoader"]
