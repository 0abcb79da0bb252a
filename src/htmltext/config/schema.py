"""Typed configuration schema and loader for the extraction package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint

from ..options import ExtractionOptions, get_preset

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class OptionOverrides(BaseModel):
    """Per-field overrides of the selected preset.  ``None`` keeps the preset."""

    preserve_line_breaks: bool | None = None
    preserve_paragraphs: bool | None = None
    extract_links: bool | None = None
    extract_images: bool | None = None
    max_text_length: conint(ge=1) | None = None

    model_config = ConfigDict(extra="forbid")


class IOSettings(BaseModel):
    """Text encodings used when reading markup and writing results."""

    encoding_in: str
    encoding_out: str

    model_config = ConfigDict(extra="forbid")


class EnvSettings(BaseModel):
    """Names of environment variables consulted by :func:`load_config`."""

    max_text_length: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    preset: Literal["default", "minimal"]
    options: OptionOverrides
    io: IOSettings
    env: EnvSettings

    model_config = ConfigDict(extra="forbid")

    def resolve_options(self) -> ExtractionOptions:
        """Return the preset named by :attr:`preset` with overrides applied."""

        base = get_preset(self.preset)
        overrides = self.options.model_dump(exclude_none=True)
        if not overrides:
            return base
        return ExtractionOptions.model_validate({**base.model_dump(), **overrides})


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

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``env.max_text_length``.  A non-integer or
    non-positive value in that variable fails validation like a bad YAML value.
    """

    with (
        importlib_resources.files("htmltext.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    length_env = cfg.env.max_text_length
    if environ.get(length_env):
        data = cfg.model_dump()
        data["options"]["max_text_length"] = environ[length_env]
        cfg = ConfigModel.model_validate(data)

    return cfg


__all__ = [
    "ConfigModel",
    "OptionOverrides",
    "IOSettings",
    "EnvSettings",
    "deep_merge_dicts",
    "load_config",
]
