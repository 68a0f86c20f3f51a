"""Configuration for okerr.

Public API:
    - resolve_config(): Build a FrozenConfig from pyproject, env and overrides
    - current_config(): The config in effect for the current context
    - config_scope(): Temporarily set the config for a block
"""

from .core import (
    DEFAULT_CONFIG,
    ConfigScope,
    FrozenConfig,
    Settings,
    config_scope,
    current_config,
    current_config_or_default,
    reset_config_cache,
    resolve_config,
)
from .loaders import load_env, load_pyproject

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigScope",
    "FrozenConfig",
    "Settings",
    "config_scope",
    "current_config",
    "current_config_or_default",
    "load_env",
    "load_pyproject",
    "reset_config_cache",
    "resolve_config",
]
