"""okerr: a two-variant Result type for explicit error handling.

Public API:
    - Ok() / Err(): Build a successful or failed result
    - Result: Return annotation covering both variants
    - Success / Failure: The variants, for ``match`` and ``isinstance``
    - is_ok() / is_err(): Type-narrowing predicates
    - UnwrapError: Carrier for non-exception payloads raised by ``throw()``
"""

from __future__ import annotations

import logging

from okerr.config import FrozenConfig, config_scope, current_config, resolve_config
from okerr.errors import ConfigurationError, OkerrError, UnwrapError
from okerr.result import Err, Failure, Ok, Result, Success, is_err, is_ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("okerr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("okerr").addHandler(logging.NullHandler())

__all__ = [
    "ConfigurationError",
    "Err",
    "Failure",
    "FrozenConfig",
    "Ok",
    "OkerrError",
    "Result",
    "Success",
    "UnwrapError",
    "config_scope",
    "current_config",
    "is_err",
    "is_ok",
    "resolve_config",
]
