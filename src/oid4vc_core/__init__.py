"""oid4vc-core: Result type and error normalization for OID4VC services.

Public API:
    - Result / Success / Failure: explicit outcome of a fallible operation
    - run_catching() / run_async_catching(): capture raised errors as data
    - to_message() / to_error(): normalize arbitrary failure values
    - stores / crypto: collaborator interfaces and thin adapters
"""

from __future__ import annotations

import logging

from oid4vc_core.config import StoreConfig
from oid4vc_core.crypto import CryptoModule, StandardCrypto, standard_crypto
from oid4vc_core.error_utils import UNDEFINED, response_to_error, to_error, to_message
from oid4vc_core.errors import (
    CapturedError,
    ConfigurationError,
    Oid4vcError,
    ResponseError,
    ResultInvariantError,
    SerializationError,
)
from oid4vc_core.result import (
    Failure,
    Result,
    Success,
    run_async_catching,
    run_catching,
)
from oid4vc_core.stores import (
    DynamoDBStore,
    KeyValueStore,
    MemoryStore,
    PutOptions,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("oid4vc-core")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("oid4vc_core").addHandler(logging.NullHandler())

__all__ = [
    "UNDEFINED",
    "CapturedError",
    "ConfigurationError",
    "CryptoModule",
    "DynamoDBStore",
    "Failure",
    "KeyValueStore",
    "MemoryStore",
    "Oid4vcError",
    "PutOptions",
    "ResponseError",
    "Result",
    "ResultInvariantError",
    "SerializationError",
    "StandardCrypto",
    "StoreConfig",
    "Success",
    "response_to_error",
    "run_async_catching",
    "run_catching",
    "standard_crypto",
    "to_error",
    "to_message",
]
