"""Pytest configuration and fixtures.

Provides environment isolation and collaborator test doubles. Fixtures
marked autouse apply to every test unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeDynamoDBClient:
    """Document-style DynamoDB client double backed by a dict.

    Records every call; set ``fail_with`` to make the next call raise.
    """

    items: dict[str, dict[str, Any]] = field(default_factory=dict)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    fail_with: BaseException | None = None

    def _record(self, op: str, **kwargs: Any) -> None:
        self.calls.append((op, kwargs))
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc

    async def get_item(self, *, TableName: str, Key: dict[str, Any]) -> dict[str, Any]:
        self._record("get_item", TableName=TableName, Key=Key)
        item = self.items.get(Key["key"])
        return {} if item is None else {"Item": dict(item)}

    async def put_item(self, *, TableName: str, Item: dict[str, Any]) -> dict[str, Any]:
        self._record("put_item", TableName=TableName, Item=Item)
        self.items[Item["key"]] = dict(Item)
        return {}

    async def delete_item(
        self, *, TableName: str, Key: dict[str, Any]
    ) -> dict[str, Any]:
        self._record("delete_item", TableName=TableName, Key=Key)
        self.items.pop(Key["key"], None)
        return {}


@pytest.fixture
def dynamodb_client() -> FakeDynamoDBClient:
    return FakeDynamoDBClient()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_store_env(request, monkeypatch):
    """Clear OID4VC_* env vars so configuration tests start clean.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("OID4VC_"):
            monkeypatch.delenv(key, raising=False)
