"""In-memory key-value store with expiry tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
import time

from .base import PutOptions


@dataclass
class MemoryStore:
    """Dict-backed store honoring per-entry expiry.

    Suited to tests and single-process deployments; entries are not shared.
    Expired entries are evicted when read and swept on every ``put``.
    """

    _entries: dict[str, tuple[str, int | None]] = field(default_factory=dict)

    async def get(self, key: str) -> str | None:
        """Get the value if present and not expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and time.time() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def put(
        self, key: str, value: str, options: PutOptions | None = None
    ) -> None:
        """Store the value with an optional expiration time."""
        self._purge_expired(time.time())
        expires_at = options.expires_at() if options is not None else None
        self._entries[key] = (value, expires_at)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def _purge_expired(self, now: float) -> None:
        expired = [
            k
            for k, (_, expires_at) in self._entries.items()
            if expires_at is not None and now >= expires_at
        ]
        for k in expired:
            del self._entries[k]

    def __len__(self) -> int:
        return len(self._entries)
