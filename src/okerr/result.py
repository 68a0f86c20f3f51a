"""Result type for explicit error handling.

A ``Result`` is either a ``Success`` holding a value or a ``Failure`` holding
an error. Functions return one instead of raising, and callers decide at the
call site how to deal with the failure:

- branch on ``is_ok()`` / ``is_err()`` (or ``match`` on the variant),
- fall back with ``or_(default)``,
- or convert back into an exception with ``throw()`` / ``throw_map()``.

Usage:
    def is_number(x: object) -> bool:
        return isinstance(x, (int, float)) and not isinstance(x, bool)

    def add(a: object, b: object) -> Result[float, str]:
        if not is_number(a) or not is_number(b):
            return Err("Both arguments are not numbers")
        return Ok(a + b)

    add(1, 2).or_(0)         # 3
    add("a", 2).or_(0)       # 0
    add("a", 2).throw()      # raises UnwrapError; exc.value == "Both arguments ..."

    match add(1, 2):
        case Success(value):
            print(value)
        case Failure(error):
            print(error)

Instances are immutable and hold their payload by reference. The payload is
never validated; the error side does not have to be an exception.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
import logging
from typing import Any, Literal, NoReturn, TypeIs

from okerr.config import current_config_or_default
from okerr.errors import UnwrapError

log = logging.getLogger(__name__)

type Mapper[E] = Callable[[E], object] | str | BaseException


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Success[S, E]:
    """A completed operation and its value.

    Create with :func:`Ok`.
    """

    value: S

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def or_(self, default: S) -> S:  # noqa: ARG002
        """Return the value; *default* is ignored."""
        return self.value

    def throw(self) -> S:
        """Return the value."""
        return self.value

    def throw_map(self, mapper: Mapper[E]) -> S:  # noqa: ARG002
        """Return the value. *mapper* is never called."""
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Failure[S, E]:
    """A failed operation and its error payload.

    Create with :func:`Err`.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def or_(self, default: S) -> S:
        """Return *default* unchanged."""
        return default

    def throw(self) -> NoReturn:
        """Raise the stored error.

        Exception payloads (instances or classes) are raised as they are.
        Any other payload is raised as :class:`~okerr.errors.UnwrapError`
        with ``exc.value`` set to the payload itself.

        Raising a stored exception follows normal Python semantics: frames
        are prepended to its existing ``__traceback__``, so the original
        raise site is kept and each repeated ``throw()`` adds its own frames.
        """
        _raise_signal(self.error, operation="throw")

    def throw_map(self, mapper: Mapper[E]) -> NoReturn:
        """Raise a caller-chosen signal in place of the stored error.

        A callable *mapper* is called once with the error and its return
        value is raised; exception classes count as callables, so
        ``throw_map(ValueError)`` raises ``ValueError(error)``. Any other
        *mapper* (typically a message string) is raised as given. The raise
        follows the same rules as :meth:`throw`.
        """
        signal = mapper(self.error) if callable(mapper) else mapper
        _raise_signal(signal, operation="throw_map")

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[S, E] = Success[S, E] | Failure[S, E]


def Ok[S](data: S) -> Success[S, Any]:  # noqa: N802
    """Wrap *data* as a successful result."""
    return Success(data)


def Err[E](error: E) -> Failure[Any, E]:  # noqa: N802
    """Wrap *error* as a failed result."""
    return Failure(error)


def is_ok[S, E](result: Result[S, E]) -> TypeIs[Success[S, E]]:
    """Return True for a ``Success``; narrows *result* for type checkers."""
    return result.is_ok()


def is_err[S, E](result: Result[S, E]) -> TypeIs[Failure[S, E]]:
    """Return True for a ``Failure``; narrows *result* for type checkers."""
    return result.is_err()


def _raise_signal(signal: object, *, operation: str) -> NoReturn:
    # Exception payloads never depend on configuration.
    if isinstance(signal, BaseException):
        raise signal
    if isinstance(signal, type) and issubclass(signal, BaseException):
        raise signal

    cfg = current_config_or_default()
    if cfg.log_raises:
        log.debug(
            "%s() raising failure payload of type %s",
            operation,
            type(signal).__name__,
        )
    raise UnwrapError(signal, max_repr_length=cfg.max_repr_length)
