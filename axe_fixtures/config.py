"""Fixture configuration.

Loaded from a small YAML file (see ``config/fixtures.yaml``). Every field has a
default, so the fixtures work with no config file at all.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

LEGACY_ENGINE_NAME = "axe-legacy"
NEWER_ENTRY_POINTS = ["run_partial", "finish_run"]


class ConfigError(ValueError):
    """Raised when a config file cannot be read or does not validate."""


class FixtureConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    legacy_engine_name: str = LEGACY_ENGINE_NAME
    # Entry points hidden by the legacy shim
    removed_entry_points: List[str] = list(NEWER_ENTRY_POINTS)


def load_config(path: Optional[Union[str, Path]] = None) -> FixtureConfig:
    """Read and validate a YAML config file; ``None`` returns the defaults."""
    if path is None:
        return FixtureConfig()
    p = Path(path)
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed reading config {p}: {e}") from e
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {p} must be a mapping, got {type(raw).__name__}")
    try:
        return FixtureConfig(**raw.get("fixtures", raw))
    except (ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid config {p}: {e}") from e


__all__ = ["FixtureConfig", "ConfigError", "load_config", "LEGACY_ENGINE_NAME", "NEWER_ENTRY_POINTS"]
