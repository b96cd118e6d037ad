"""Configuration utilities for artmaker."""
from .schema import DEFAULTS_PATH, ConfigSchema, load_config

__all__ = ["ConfigSchema", "DEFAULTS_PATH", "load_config"]
