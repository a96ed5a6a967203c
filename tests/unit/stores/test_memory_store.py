from __future__ import annotations

import time

import pytest

from oid4vc_core.stores import KeyValueStore, MemoryStore, PutOptions

pytestmark = pytest.mark.unit


def test_memory_store_satisfies_protocol() -> None:
    assert isinstance(MemoryStore(), KeyValueStore)


@pytest.mark.asyncio
async def test_put_get_delete_roundtrip() -> None:
    store = MemoryStore()

    await store.put("k", "v")
    assert await store.get("k") == "v"

    await store.delete("k")
    assert await store.get("k") is None


@pytest.mark.asyncio
async def test_missing_key_reads_as_none_and_delete_is_idempotent() -> None:
    store = MemoryStore()

    assert await store.get("absent") is None
    await store.delete("absent")


@pytest.mark.asyncio
async def test_expired_entries_read_as_none_and_are_evicted(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    store = MemoryStore()
    now = time.time()
    monkeypatch.setattr(time, "time", lambda: now)

    await store.put("k", "v", PutOptions(expiration_ttl=10))
    assert await store.get("k") == "v"

    monkeypatch.setattr(time, "time", lambda: now + 11)
    assert await store.get("k") is None
    assert len(store) == 0


@pytest.mark.asyncio
async def test_zero_ttl_means_no_expiry(monkeypatch: pytest.MonkeyPatch) -> None:
    store = MemoryStore()
    now = time.time()
    monkeypatch.setattr(time, "time", lambda: now)

    await store.put("k", "v", PutOptions(expiration_ttl=0))
    monkeypatch.setattr(time, "time", lambda: now + 10_000)

    assert await store.get("k") == "v"


def test_put_options_expiry_is_absolute_epoch_seconds() -> None:
    assert PutOptions(expiration_ttl=60).expires_at(now=1000.7) == 1060
    assert PutOptions().expires_at(now=1000.0) is None


@pytest.mark.asyncio
async def test_put_sweeps_expired_entries_never_read_again(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    store = MemoryStore()
    now = time.time()
    monkeypatch.setattr(time, "time", lambda: now)

    await store.put("stale-1", "a", PutOptions(expiration_ttl=5))
    await store.put("stale-2", "b", PutOptions(expiration_ttl=5))
    await store.put("forever", "c")
    assert len(store) == 3

    monkeypatch.setattr(time, "time", lambda: now + 6)
    await store.put("fresh", "d", PutOptions(expiration_ttl=5))

    assert len(store) == 2
    assert await store.get("forever") == "c"
    assert await store.get("fresh") == "d"
