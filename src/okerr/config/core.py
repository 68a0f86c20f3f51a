# src/okerr/config/core.py

"""Configuration schema and resolution for okerr.

- Single source of truth for fields, defaults and validation (``Settings``)
- Immutable runtime payload (``FrozenConfig``)
- Guarded ambient scope for temporary overrides (``config_scope``)

Result instances never hold configuration. It is read only when a failure
is turned into a raise.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
from typing import TYPE_CHECKING, Any, Literal
import warnings

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from okerr.errors import ConfigurationError

from .loaders import ENV_PREFIX, load_env, load_pyproject

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping
    from types import TracebackType

log = logging.getLogger(__name__)

# --- Schema (Pydantic wall) ---


class Settings(BaseModel):
    """Pydantic schema for okerr configuration."""

    #: Log every failure-to-raise conversion at DEBUG level.
    log_raises: bool = Field(default=False)
    #: Upper bound on the rendered payload in ``UnwrapError`` messages.
    max_repr_length: int = Field(default=200, ge=8)

    model_config = {"extra": "allow"}


# --- Immutable runtime payload ---


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Validated, immutable configuration."""

    log_raises: bool
    max_repr_length: int


DEFAULT_CONFIG = FrozenConfig(log_raises=False, max_repr_length=200)


# --- Ambient scope (guarded) ---

_AMBIENT: contextvars.ContextVar[FrozenConfig | None] = contextvars.ContextVar(
    "okerr_ambient_config", default=None
)

_DOTENV_LOADED: bool = False


class ConfigScope:
    """Context manager that sets the ambient configuration for its body."""

    def __init__(self, cfg: FrozenConfig):
        self._token: contextvars.Token[FrozenConfig | None] | None = None
        self._cfg = cfg

    def __enter__(self) -> FrozenConfig:
        self._token = _AMBIENT.set(self._cfg)
        return self._cfg

    def __exit__(
        self,
        _: type[BaseException] | None,
        __: BaseException | None,
        ___: TracebackType | None,
    ) -> Literal[False]:
        if self._token is not None:
            _AMBIENT.reset(self._token)
        return False


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | FrozenConfig | None = None,
    **overrides: object,
) -> Generator[FrozenConfig]:
    """Run a block with a specific configuration.

    The scope lives in a ``ContextVar``, so threads and asyncio tasks each
    see their own value.

    Example:
        with config_scope(log_raises=True):
            parse(raw).throw()
    """
    if isinstance(cfg_or_overrides, FrozenConfig):
        cfg = cfg_or_overrides
    else:
        combined = {**(cfg_or_overrides or {}), **overrides}
        cfg = resolve_config(overrides=combined)

    with ConfigScope(cfg):
        yield cfg


def _load_dotenv_once() -> None:
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    load_dotenv()
    _DOTENV_LOADED = True


# --- Public resolution API ---


def resolve_config(overrides: Mapping[str, Any] | None = None) -> FrozenConfig:
    """Resolve configuration from all sources into a FrozenConfig.

    Precedence: defaults < pyproject.toml < environment < overrides.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    _load_dotenv_once()

    merged: dict[str, Any] = {
        **load_pyproject(),
        **load_env(),
        **(overrides or {}),
    }

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {err.get('msg')}",
            hint=f"Check [tool.okerr] in pyproject.toml or {ENV_PREFIX}{field.upper()}",
        ) from e

    _warn_extra_fields(settings.model_extra or {})
    return FrozenConfig(
        log_raises=settings.log_raises,
        max_repr_length=settings.max_repr_length,
    )


@cache
def _default_config() -> FrozenConfig:
    return resolve_config()


def current_config() -> FrozenConfig:
    """Return the ambient config if a scope is active, else the process default."""
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _default_config()


def reset_config_cache() -> None:
    """Forget the cached process default so the next lookup re-resolves it."""
    _default_config.cache_clear()


def current_config_or_default() -> FrozenConfig:
    """Return ``current_config()``, or ``DEFAULT_CONFIG`` if it cannot be resolved.

    Used on the raise path, where a broken environment variable or
    pyproject.toml must not replace the payload being raised. Warnings
    promoted to errors (``-W error``) are treated the same way.
    """
    try:
        return current_config()
    except (ConfigurationError, UserWarning) as e:
        log.warning("Ignoring unusable okerr configuration: %s", e)
        return DEFAULT_CONFIG


def _warn_extra_fields(extra: Mapping[str, Any]) -> None:
    """Warn about unknown keys without failing resolution."""
    if not extra:
        return
    known = ", ".join(sorted(Settings.model_fields))
    for name in sorted(extra):
        warnings.warn(
            f"Unknown okerr configuration field {name!r} ignored (known: {known})",
            stacklevel=3,
        )
