"""Typed configuration schema and loader for the moldova package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

from moldova.generate import Command
from moldova.utils.errors import ConfigError

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    iterations: conint(ge=1) = 1
    seed_env: str = "MOLDOVA_SEED"
    seed: str | None = None
    commands: dict[str, dict[str, str]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("seed", mode="before")
    @classmethod
    def _seed_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("commands", mode="before")
    @classmethod
    def _stringify_options(cls, value: Any) -> Any:
        # YAML turns ``min: 5`` into an int; option values are strings.
        if not isinstance(value, Mapping):
            return value
        return {
            name: (
                {str(k): _scalar_text(v) for k, v in opts.items()}
                if isinstance(opts, Mapping)
                else opts
            )
            for name, opts in value.items()
        }

    @field_validator("commands")
    @classmethod
    def _known_commands(cls, value: dict[str, dict[str, str]]) -> dict[str, dict[str, str]]:
        unknown = sorted(name for name in value if Command.lookup(name) is None)
        if unknown:
            raise ValueError(f"unknown commands: {', '.join(unknown)}")
        return value


def _scalar_text(value: Any) -> Any:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return value


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


def _read_yaml_mapping(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source}: invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top-level YAML must be a mapping")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed_env``.
    """

    defaults_text = (
        importlib_resources.files("moldova.config")
        .joinpath("defaults.yml")
        .read_text(encoding="utf-8")
    )
    merged = _read_yaml_mapping(defaults_text, "defaults.yml")

    if path is not None:
        user_path = Path(path)
        try:
            user_text = user_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"cannot read config {user_path}: {exc}") from exc
        merged = deep_merge_dicts(merged, _read_yaml_mapping(user_text, str(user_path)))

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    if cfg.seed_env in environ:
        cfg.seed = environ[cfg.seed_env]

    return cfg


__all__ = [
    "ConfigModel",
    "deep_merge_dicts",
    "load_config",
]
