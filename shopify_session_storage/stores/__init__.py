"""Session storage backends."""

from shopify_session_storage.storage import SessionStorage
from shopify_session_storage.stores.inmemory import InMemorySessionStorage
from shopify_session_storage.stores.postgres import (
    PostgreSQLSessionStorage,
    PostgreSQLSessionStorageOptions,
)

__all__ = [
    "SessionStorage",
    "InMemorySessionStorage",
    "PostgreSQLSessionStorage",
    "PostgreSQLSessionStorageOptions",
]
