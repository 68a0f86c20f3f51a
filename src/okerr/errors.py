"""Exception hierarchy for okerr."""

from __future__ import annotations

import reprlib
from typing import Any

_ELLIPSIS = "..."


class OkerrError(Exception):
    """Base exception for all okerr errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message, followed by the hint when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class ConfigurationError(OkerrError):
    """Configuration validation or resolution failed."""


class UnwrapError(OkerrError):
    """Carries a failure payload that is not itself an exception.

    ``Failure.throw()`` raises exception payloads as they are. Anything else
    (a string, an error code, a record) cannot be raised directly, so it
    travels on ``value`` unchanged: ``exc.value is payload`` holds.
    """

    def __init__(
        self,
        value: Any,
        *,
        max_repr_length: int = 200,
        hint: str | None = None,
    ) -> None:
        self.value = value
        super().__init__(_describe(value, max_repr_length), hint=hint)


def _describe(value: Any, limit: int) -> str:
    """Render *value* for an error message, at most *limit* characters long.

    Strings are shown as they are. Everything else goes through ``reprlib``,
    which bounds large containers and survives a ``__repr__`` that raises.
    """
    if isinstance(value, str):
        text = value
    else:
        text = reprlib.Repr(maxstring=limit, maxlong=limit, maxother=limit).repr(value)
    if len(text) <= limit:
        return text
    return text[: max(limit - len(_ELLIPSIS), 0)] + _ELLIPSIS
