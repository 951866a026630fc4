"""Configuration models and YAML loader for the agency match engine."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class MatchingConfig(BaseModel):
    """Defaults applied by the result consumer around an engine run."""

    min_score: int = Field(default=20, ge=0, le=100)
    limit: int = Field(default=20, ge=1)
    max_workers: int | None = Field(default=None, ge=1)


class CatalogConfig(BaseModel):
    """Where agency profiles are read from."""

    path: str = "config/agencies.yaml"


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
