"""Configuration: frozen store settings resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from oid4vc_core.errors import ConfigurationError
from oid4vc_core.stores.base import PutOptions

load_dotenv()

TABLE_NAME_ENV_VAR = "OID4VC_DYNAMODB_TABLE"
EXPIRATION_TTL_ENV_VAR = "OID4VC_EXPIRATION_TTL"


@dataclass(frozen=True)
class StoreConfig:
    """Immutable configuration for key-value store adapters.

    The table name is auto-resolved from ``OID4VC_DYNAMODB_TABLE`` and the
    default expiry from ``OID4VC_EXPIRATION_TTL`` when not passed.

    Example:
        config = StoreConfig(table_name="oid4vc-sessions", expiration_ttl=600)
        store = DynamoDBStore.from_config(client, config)
    """

    table_name: str | None = None
    #: Seconds until stored entries expire; *None* keeps them forever.
    expiration_ttl: int | None = None

    def __post_init__(self) -> None:
        """Auto-resolve missing fields and validate."""
        if self.table_name is None:
            object.__setattr__(self, "table_name", os.environ.get(TABLE_NAME_ENV_VAR))

        if self.expiration_ttl is None:
            raw = os.environ.get(EXPIRATION_TTL_ENV_VAR, "").strip()
            if raw:
                try:
                    ttl = int(raw)
                except ValueError:
                    raise ConfigurationError(
                        f"{EXPIRATION_TTL_ENV_VAR} must be an integer, got {raw!r}",
                        hint="Set it to a number of seconds, e.g. 600.",
                    ) from None
                object.__setattr__(self, "expiration_ttl", ttl)

        if not self.table_name or not self.table_name.strip():
            raise ConfigurationError(
                "DynamoDB table name required",
                hint=f"Set {TABLE_NAME_ENV_VAR} environment variable or pass table_name=...",
            )
        if self.expiration_ttl is not None and self.expiration_ttl < 0:
            raise ConfigurationError(
                f"Negative expiration_ttl {self.expiration_ttl} would store already-expired entries",
                hint="Use a positive number of seconds, or 0 / None to keep entries until deleted.",
            )

    def put_options(self) -> PutOptions:
        """Return the default put options for this configuration."""
        return PutOptions(expiration_ttl=self.expiration_ttl)
