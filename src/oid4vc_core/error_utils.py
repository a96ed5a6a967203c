"""Normalize arbitrary failure values into messages and exceptions.

Anything can end up as the "error" of a failed operation: exceptions, plain
strings, numbers, mappings, ``None``. These helpers map such values onto a
deterministic display string (``to_message``) and onto an exception instance
(``to_error``) so callers only ever deal with one error shape.

Structured values render as compact JSON with insertion-ordered keys.
Non-finite floats render as ``null``, matching how JSON encoders on other
platforms treat them; this is kept for compatibility.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from enum import Enum
import json
import math
from typing import TYPE_CHECKING, Any, Final

from pydantic import BaseModel

from oid4vc_core.errors import CapturedError, ResponseError, SerializationError

if TYPE_CHECKING:
    import httpx

__all__ = ["UNDEFINED", "response_to_error", "to_error", "to_message"]


class _Undefined:
    """Marker type for an absent value, distinct from ``None``."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def _exception_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc)


def _key(key: Any) -> str:
    """Render a mapping key the way JSON encoders coerce non-string keys."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, bool | int | float):
        return json.dumps(key)
    if isinstance(key, Enum):
        return _key(key.value)
    return str(key)


def _to_plain(value: Any, active: set[int]) -> Any:
    """Convert *value* into JSON-compatible primitives.

    *active* holds the ids of containers on the current path; meeting one of
    them again means the value refers back to itself.
    """
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, _Undefined):
        return None
    if isinstance(value, BaseException):
        return _exception_message(value)
    if isinstance(value, Enum):
        return _to_plain(value.value, active)

    marker = id(value)
    if marker in active:
        raise SerializationError(
            f"Cannot serialize {type(value).__name__}: circular reference detected",
            hint="Error values must not refer back to themselves.",
        )
    active.add(marker)
    try:
        if isinstance(value, BaseModel):
            return _to_plain(value.model_dump(), active)
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {
                f.name: _to_plain(getattr(value, f.name), active)
                for f in dataclasses.fields(value)
            }
        if isinstance(value, Mapping):
            return {_key(k): _to_plain(v, active) for k, v in value.items()}
        if isinstance(value, list | tuple | set | frozenset):
            return [_to_plain(v, active) for v in value]
        if hasattr(value, "__dict__") and not isinstance(value, type):
            return {k: _to_plain(v, active) for k, v in vars(value).items()}
        return str(value)
    finally:
        active.discard(marker)


def to_message(value: Any = UNDEFINED) -> str:
    """Return a human-readable message for any failure value.

    Examples:
        >>> to_message()
        'undefined'
        >>> to_message(None)
        'null'
        >>> to_message(ValueError("bad input"))
        'bad input'
        >>> to_message({"code": "ERR_INVALID_DATA"})
        '{"code":"ERR_INVALID_DATA"}'

    Raises:
        SerializationError: If *value* contains a reference cycle.
    """
    if isinstance(value, _Undefined):
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, BaseException):
        return _exception_message(value)
    return json.dumps(
        _to_plain(value, set()), separators=(",", ":"), ensure_ascii=False
    )


def to_error(value: Any = UNDEFINED) -> BaseException:
    """Return *value* itself if it is an exception, else wrap it.

    Examples:
        >>> err = KeyError("k")
        >>> to_error(err) is err
        True
        >>> to_error(404).message
        '404'
    """
    if isinstance(value, BaseException):
        return value
    return CapturedError(to_message(value), value=value)


def response_to_error(response: httpx.Response) -> ResponseError:
    """Describe an unexpected HTTP response as an error."""
    status = response.status_code
    message = f"Invalid response with status {status} {response.reason_phrase}"
    return ResponseError(message, status_code=status)
