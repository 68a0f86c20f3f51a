# src/okerr/config/loaders.py

"""Configuration loaders for environment and pyproject.toml.

Each loader returns a plain dictionary; validation happens in
:mod:`okerr.config.core`.
"""

from __future__ import annotations

import os
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING, Any

from okerr.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_TOOL_NAME = "okerr"
ENV_PREFIX = "OKERR_"

# Control variables that steer resolution but aren't config fields
META_ENV_FIELDS = {"pyproject_path"}


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


def load_env() -> Mapping[str, Any]:
    """Load configuration from ``OKERR_*`` environment variables.

    Values are coerced to ``bool``/``int`` when the matching ``Settings``
    field has that type. Unknown keys are passed through so that the schema
    can reject them with a precise message.
    """
    from .core import Settings  # local import to keep loaders import-light

    config: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in META_ENV_FIELDS:
            continue
        info = Settings.model_fields.get(field_name)
        target_type = info.annotation if info is not None else None
        config[field_name] = _coerce_env_value(value, target_type)
    return config


def _coerce_env_value(value: str, target_type: Any) -> Any:
    """Coerce env string to target type when possible.

    Falls back to the original string on conversion failure, leaving the
    error to schema validation.
    """
    if target_type is bool:
        return _coerce_bool(value)
    if target_type is int:
        try:
            return int(value)
        except ValueError:
            return value
    return value


def get_pyproject_path() -> Path:
    """Return the pyproject.toml path, honoring ``OKERR_PYPROJECT_PATH``."""
    override = os.environ.get(f"{ENV_PREFIX}PYPROJECT_PATH")
    if override:
        return Path(override).expanduser()
    return Path.cwd() / "pyproject.toml"


def load_pyproject(path: Path | None = None) -> Mapping[str, Any]:
    """Load the ``[tool.okerr]`` table from pyproject.toml.

    A missing file yields an empty mapping. A file that exists but is not
    valid TOML is reported rather than silently ignored.
    """
    target = path if path is not None else get_pyproject_path()
    if not target.is_file():
        return {}
    try:
        with target.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Could not parse {target}: {e}",
            hint=f"Fix the TOML syntax or point {ENV_PREFIX}PYPROJECT_PATH elsewhere",
        ) from e
    section = data.get("tool", {}).get(CONFIG_TOOL_NAME, {})
    return dict(section) if isinstance(section, dict) else {}
