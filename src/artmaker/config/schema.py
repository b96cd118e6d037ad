"""Pydantic config schema and loader."""
from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from artmaker.core.errors import ConfigurationError


class PopulationConfig(BaseModel):
    size: int = 18
    mutation_rate: float = 0.2
    truncate_overshoot: bool = False

    @field_validator("size")
    @classmethod
    def validate_size(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("size must be positive")
        return v

    @field_validator("mutation_rate")
    @classmethod
    def validate_rate(cls, v: float) -> float:
        if not 0 <= v <= 1:
            raise ValueError("mutation_rate must be within [0, 1]")
        return v


class GalleryConfig(BaseModel):
    rows: int = 3
    columns: int = 6

    @field_validator("rows", "columns")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("gallery dimensions must be positive")
        return v


class OutputConfig(BaseModel):
    metrics_path: Optional[Path] = None


class ConfigSchema(BaseModel):
    seed: Optional[int] = None
    population: PopulationConfig = Field(default_factory=PopulationConfig)
    gallery: GalleryConfig = Field(default_factory=GalleryConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)


DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")


def load_config(path: Path = DEFAULTS_PATH) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    try:
        return ConfigSchema(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid config {path}: {exc}") from exc
