"""Cryptographic primitives facade.

Exposes only what protocol code needs: random bytes and a SHA-256 digest
rendered as lowercase hex. The digest is async so it can be routed through
``run_async_catching`` and computed off the event loop.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
import hashlib
import secrets
from typing import Protocol, runtime_checkable

__all__ = ["CryptoModule", "StandardCrypto", "standard_crypto"]


@runtime_checkable
class CryptoModule(Protocol):
    """Protocol for cryptographic functionality."""

    def get_random_bytes(self, size: int) -> bytes:
        """Return *size* cryptographically secure random bytes."""
        ...

    async def sha256_async(self, data: bytes) -> str:
        """Return the SHA-256 digest of *data* as lowercase hex."""
        ...


@dataclass(frozen=True, slots=True)
class StandardCrypto:
    """``CryptoModule`` backed by the platform CSPRNG and hashlib."""

    def get_random_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"size must be >= 0, got {size}")
        return secrets.token_bytes(size)

    async def sha256_async(self, data: bytes) -> str:
        return await asyncio.to_thread(_sha256_hex, data)


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


standard_crypto: CryptoModule = StandardCrypto()
