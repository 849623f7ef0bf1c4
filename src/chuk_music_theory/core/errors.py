"""
Errors raised by the core value types.

Both are ValueError subclasses so callers can treat them as bad input.
"""


class PitchParsingError(ValueError):
    """A note string or MIDI value could not be turned into a Pitch."""


class InvalidIntervalError(ValueError):
    """A quality/degree pair does not describe a valid interval."""
