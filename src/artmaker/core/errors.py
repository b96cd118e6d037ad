"""Error taxonomy for the genetic engine."""
from __future__ import annotations


class ArtmakerError(Exception):
    """Base class for every error raised by artmaker."""


class InvalidState(ArtmakerError, RuntimeError):
    """An operation was invoked in a state that cannot satisfy it."""


class OutOfRange(ArtmakerError, IndexError):
    """A genome index or a genome itself falls outside the schema layout."""


class ConfigurationError(ArtmakerError, ValueError):
    """Schema or population settings are invalid."""
