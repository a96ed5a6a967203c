"""Exception hierarchy for oid4vc-core."""

from __future__ import annotations

from typing import Any


class Oid4vcError(Exception):
    """Base exception for all oid4vc-core errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    @property
    def message(self) -> str:
        """The message without the hint, for programmatic access."""
        return str(self.args[0]) if self.args else ""

    def __str__(self) -> str:
        """Return the full error message including the hint."""
        msg = self.message
        return f"{msg}. {self.hint}" if self.hint else msg


class CapturedError(Oid4vcError):
    """Canonical error for a failure value that was not an exception.

    The original value is kept on ``value`` for diagnostics; ``message`` is
    its normalized string form.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class SerializationError(Oid4vcError, ValueError):
    """A value could not be serialized into an error message (e.g. a cycle)."""


class ResultInvariantError(Oid4vcError, TypeError):
    """A Result was built with both a value and an error, or with neither.

    Signals a programming error, never a recoverable condition.
    """


class ConfigurationError(Oid4vcError):
    """Configuration validation or resolution failed."""


class ResponseError(Oid4vcError):
    """An HTTP response had an unexpected status."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code
