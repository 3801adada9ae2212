"""Typed configuration schema and loader for the regexcollection package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from ..patterns import names as pattern_names
from ..utils.errors import ConfigFormatError

CONFIG_ENV = "REGEXCOLLECTION_CONFIG"
OUTPUT_FORMAT_ENV = "REGEXCOLLECTION_OUTPUT_FORMAT"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ScanSettings(BaseModel):
    """Which patterns ``regexcollection scan`` runs and how much it reports."""

    patterns: list[str]
    max_matches: conint(ge=0) = 0
    show_groups: bool = True

    model_config = ConfigDict(extra="forbid")

    @field_validator("patterns")
    @classmethod
    def _known_patterns(cls, value: list[str]) -> list[str]:
        known = set(pattern_names())
        unknown = [name for name in value if name not in known]
        if unknown:
            raise ValueError(f"unknown pattern name(s): {', '.join(unknown)}")
        return list(dict.fromkeys(value))


class OutputSettings(BaseModel):
    """Rendering of scan results."""

    format: Literal["text", "json"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    scan: ScanSettings
    output: OutputSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML (``path``,
    else the file named by ``REGEXCOLLECTION_CONFIG``) < ``REGEXCOLLECTION_OUTPUT_FORMAT``.
    """

    environ = env if env is not None else os.environ

    with (
        importlib_resources.files("regexcollection.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is None and environ.get(CONFIG_ENV):
        path = environ[CONFIG_ENV]

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ConfigFormatError(
                f"{path}: expected a mapping at the top level, got {type(overrides).__name__}"
            )
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    if environ.get(OUTPUT_FORMAT_ENV):
        merged = deep_merge_dicts(merged, {"output": {"format": environ[OUTPUT_FORMAT_ENV]}})

    return ConfigModel.model_validate(merged)


__all__ = [
    "CONFIG_ENV",
    "OUTPUT_FORMAT_ENV",
    "ConfigModel",
    "ScanSettings",
    "OutputSettings",
    "deep_merge_dicts",
    "load_config",
]
