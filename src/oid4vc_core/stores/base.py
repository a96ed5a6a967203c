"""Key-value store protocol: the minimal interface callers depend on."""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class PutOptions:
    """Options for ``KeyValueStore.put``."""

    #: Seconds until the entry expires. *None* or 0 means no expiry.
    expiration_ttl: int | None = None

    def expires_at(self, now: float | None = None) -> int | None:
        """Return the absolute expiry as epoch seconds, or None."""
        if not self.expiration_ttl:
            return None
        current = time.time() if now is None else now
        return int(current) + self.expiration_ttl


@runtime_checkable
class KeyValueStore(Protocol):
    """Minimal store protocol: get, put, delete.

    Implementations raise on backend failure; wrap calls with
    ``run_async_catching`` to receive a ``Result`` instead.
    """

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when absent or expired."""
        ...

    async def put(
        self, key: str, value: str, options: PutOptions | None = None
    ) -> None:
        """Store *value* under *key*."""
        ...

    async def delete(self, key: str) -> None:
        """Remove *key*; deleting a missing key is not an error."""
        ...
