"""DynamoDB-backed key-value store.

The adapter does not own a client: pass any async, document-style client
whose ``get_item`` / ``put_item`` / ``delete_item`` accept ``TableName`` plus
plain-value ``Key`` / ``Item`` mappings. Table layout is one string partition
key ``key``, a string attribute ``value``, and an optional numeric
``expiresAt`` (epoch seconds) suitable as the table's TTL attribute.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, cast

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Mapping

    from oid4vc_core.config import StoreConfig

    from .base import PutOptions

logger = logging.getLogger(__name__)


class DynamoDBItem(BaseModel):
    """Stored item shape."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    key: str
    value: str | None = None
    expires_at: int | None = Field(default=None, alias="expiresAt")


class DynamoDBClient(Protocol):
    """Subset of a document-style DynamoDB client used by ``DynamoDBStore``."""

    async def get_item(
        self, *, TableName: str, Key: Mapping[str, Any]
    ) -> Mapping[str, Any]: ...

    async def put_item(self, *, TableName: str, Item: Mapping[str, Any]) -> Any: ...

    async def delete_item(self, *, TableName: str, Key: Mapping[str, Any]) -> Any: ...


class DynamoDBStore:
    """``KeyValueStore`` backed by a single DynamoDB table.

    Client failures are logged and re-raised unchanged.
    """

    def __init__(self, client: DynamoDBClient, table_name: str) -> None:
        self._client = client
        self._table_name = table_name

    @classmethod
    def from_config(cls, client: DynamoDBClient, config: StoreConfig) -> DynamoDBStore:
        """Build a store for the configured table."""
        # StoreConfig guarantees a non-empty table name.
        return cls(client, cast("str", config.table_name))

    @property
    def table_name(self) -> str:
        return self._table_name

    async def get(self, key: str) -> str | None:
        """Return the value for *key*, or None when missing or empty."""
        try:
            response = await self._client.get_item(
                TableName=self._table_name, Key={"key": key}
            )
            raw = response.get("Item")
            if raw is None:
                return None
            item = DynamoDBItem.model_validate(raw)
            return item.value or None
        except Exception as e:
            logger.error("Error in DynamoDB get: %s", e)
            raise

    async def put(
        self, key: str, value: str, options: PutOptions | None = None
    ) -> None:
        """Store *value*, stamping ``expiresAt`` when a TTL is given."""
        try:
            item = DynamoDBItem(
                key=key,
                value=value,
                expires_at=options.expires_at() if options is not None else None,
            )
            await self._client.put_item(
                TableName=self._table_name,
                Item=item.model_dump(by_alias=True, exclude_none=True),
            )
        except Exception as e:
            logger.error("Error in DynamoDB put: %s", e)
            raise

    async def delete(self, key: str) -> None:
        try:
            await self._client.delete_item(
                TableName=self._table_name, Key={"key": key}
            )
        except Exception as e:
            logger.error("Error in DynamoDB delete: %s", e)
            raise
