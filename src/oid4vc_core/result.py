"""Result type for explicit, data-driven error handling.

A ``Result`` is either a ``Success`` holding a value or a ``Failure`` holding
an exception, never both. ``run_catching`` and ``run_async_catching`` turn
ordinary raising code into a ``Result`` so failures flow through as data:

    result = await run_async_catching(store.get, "nonce:abc")
    match result:
        case Success(value):
            ...
        case Failure(error):
            ...

The only operation that raises a captured error again is ``get_or_throw``.
"""

from __future__ import annotations

import abc
import asyncio
import dataclasses
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    NoReturn,
    ParamSpec,
    TypeVar,
    overload,
)

from oid4vc_core.error_utils import UNDEFINED, to_error
from oid4vc_core.errors import ResultInvariantError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

__all__ = ["Failure", "Result", "Success", "run_async_catching", "run_catching"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")


class Result(abc.ABC, Generic[T]):
    """Outcome of an operation that may fail.

    Build instances with ``Result.success`` / ``Result.failure`` (or the
    variant classes directly); the base class itself is abstract.
    """

    __slots__ = ()

    @staticmethod
    def success(value: T) -> Result[T]:
        """Create a successful result holding *value*."""
        return Success(value)

    @staticmethod
    def failure(error: Any) -> Result[Any]:
        """Create a failed result.

        Exceptions are stored as-is; any other value is normalized with
        ``to_error`` first.
        """
        return Failure(to_error(error))

    @staticmethod
    def of(*, value: Any = UNDEFINED, error: Any = None) -> Result[Any]:
        """Create a result from a value/error pair.

        Raises:
            ResultInvariantError: If *error* is given together with a value
                other than None.
        """
        if error is not None:
            if value is not UNDEFINED and value is not None:
                raise ResultInvariantError(
                    "Result cannot be both success and failure",
                    hint="Pass either value= or error=, not both.",
                )
            return Result.failure(error)
        return Success(None if value is UNDEFINED else value)

    @abc.abstractmethod
    def is_success(self) -> bool:
        """Return True for a ``Success``."""

    def is_failure(self) -> bool:
        """Return True for a ``Failure``."""
        return not self.is_success()

    @abc.abstractmethod
    def get_or_throw(self) -> T:
        """Return the value, or raise the held error."""

    @abc.abstractmethod
    def get_or_default(self, default: T) -> T:
        """Return the value, or *default* on failure."""

    @abc.abstractmethod
    def get_or_else(self, transform: Callable[[BaseException], T]) -> T:
        """Return the value, or ``transform(error)`` on failure."""

    @abc.abstractmethod
    def on_success(self, f: Callable[[T], object]) -> Result[T]:
        """Call ``f(value)`` on success; always return this same result."""

    @abc.abstractmethod
    def on_failure(self, f: Callable[[BaseException], object]) -> Result[T]:
        """Call ``f(error)`` on failure; always return this same result."""

    @abc.abstractmethod
    def recover(self, transform: Callable[[BaseException], T]) -> Result[T]:
        """Map a failure to a value.

        Success returns itself untouched. On failure *transform* runs through
        ``run_catching``, so an exception raised by it becomes a new failure.
        """

    @abc.abstractmethod
    async def recover_async(
        self, transform: Callable[[BaseException], Awaitable[T]]
    ) -> Result[T]:
        """Async variant of ``recover``, routed through ``run_async_catching``."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success(Result[T]):
    """A successful result."""

    value: T

    @property
    def error(self) -> None:
        return None

    def is_success(self) -> bool:
        return True

    def get_or_throw(self) -> T:
        return self.value

    def get_or_default(self, default: T) -> T:
        return self.value

    def get_or_else(self, transform: Callable[[BaseException], T]) -> T:
        return self.value

    def on_success(self, f: Callable[[T], object]) -> Result[T]:
        f(self.value)
        return self

    def on_failure(self, f: Callable[[BaseException], object]) -> Result[T]:
        return self

    def recover(self, transform: Callable[[BaseException], T]) -> Result[T]:
        return self

    async def recover_async(
        self, transform: Callable[[BaseException], Awaitable[T]]
    ) -> Result[T]:
        return self


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(Result[T]):
    """A failed result, containing the error."""

    error: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            raise ResultInvariantError(
                f"Failure requires an exception, got {type(self.error).__name__}",
                hint="Use Result.failure() to normalize arbitrary error values.",
            )

    @property
    def value(self) -> None:
        return None

    def is_success(self) -> bool:
        return False

    def get_or_throw(self) -> NoReturn:
        raise self.error

    def get_or_default(self, default: T) -> T:
        return default

    def get_or_else(self, transform: Callable[[BaseException], T]) -> T:
        return transform(self.error)

    def on_success(self, f: Callable[[T], object]) -> Result[T]:
        return self

    def on_failure(self, f: Callable[[BaseException], object]) -> Result[T]:
        f(self.error)
        return self

    def recover(self, transform: Callable[[BaseException], T]) -> Result[T]:
        return run_catching(transform, self.error)

    async def recover_async(
        self, transform: Callable[[BaseException], Awaitable[T]]
    ) -> Result[T]:
        return await run_async_catching(transform, self.error)


def _name_of(f: Callable[..., Any]) -> str:
    return getattr(f, "__qualname__", None) or repr(f)


def _captured(f: Callable[..., Any], exc: BaseException) -> Result[Any]:
    error = to_error(exc)
    logger.debug(
        "Captured %s from %s: %s", type(error).__name__, _name_of(f), error
    )
    return Failure(error)


@overload
def run_catching(
    f: Callable[P, Result[T]], *args: P.args, **kwargs: P.kwargs
) -> Result[T]: ...


@overload
def run_catching(f: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T]: ...


def run_catching(
    f: Callable[P, Any], *args: P.args, **kwargs: P.kwargs
) -> Result[Any]:
    """Call ``f(*args, **kwargs)`` and capture the outcome as a ``Result``.

    Contract:
    - A returned ``Result`` is passed through unchanged (no nesting).
    - Any other return value is wrapped in ``Success``.
    - Any ``Exception`` becomes a ``Failure``; none escapes.
    """
    try:
        value = f(*args, **kwargs)
    except Exception as exc:
        return _captured(f, exc)
    if isinstance(value, Result):
        return value
    return Success(value)


@overload
async def run_async_catching(
    f: Callable[P, Awaitable[Result[T]]], *args: P.args, **kwargs: P.kwargs
) -> Result[T]: ...


@overload
async def run_async_catching(
    f: Callable[P, Awaitable[T]], *args: P.args, **kwargs: P.kwargs
) -> Result[T]: ...


async def run_async_catching(
    f: Callable[P, Awaitable[Any]], *args: P.args, **kwargs: P.kwargs
) -> Result[Any]:
    """Await ``f(*args, **kwargs)`` and capture the outcome as a ``Result``.

    Same contract as ``run_catching``. Cancellation of the awaited operation
    is captured as a ``Failure`` holding the ``CancelledError``.
    """
    try:
        value = await f(*args, **kwargs)
    except (Exception, asyncio.CancelledError) as exc:
        return _captured(f, exc)
    if isinstance(value, Result):
        return value
    return Success(value)
