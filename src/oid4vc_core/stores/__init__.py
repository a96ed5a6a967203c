"""Key-value store collaborators."""

from __future__ import annotations

from .base import KeyValueStore, PutOptions
from .dynamodb import DynamoDBClient, DynamoDBItem, DynamoDBStore
from .memory import MemoryStore

__all__ = [
    "DynamoDBClient",
    "DynamoDBItem",
    "DynamoDBStore",
    "KeyValueStore",
    "MemoryStore",
    "PutOptions",
]
