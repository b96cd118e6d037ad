"""Core helpers shared across the engine."""
from .errors import ArtmakerError, ConfigurationError, InvalidState, OutOfRange
from .rng import ensure_rng, make_rng

__all__ = ["ArtmakerError", "ConfigurationError", "InvalidState", "OutOfRange", "ensure_rng", "make_rng"]
