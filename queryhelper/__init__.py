"""Query helpers: parameterized insert/update and raw lookups over an asyncpg pool."""

from queryhelper.config import AppConfig
from queryhelper.db import (
    MAX_ATTEMPTS,
    QueryFailedError,
    close_pool,
    get_pool,
    get_value,
    has,
    init_pool,
    insert,
    update,
)

__all__ = [
    "AppConfig",
    "insert",
    "update",
    "has",
    "get_value",
    "MAX_ATTEMPTS",
    "QueryFailedError",
    "init_pool",
    "get_pool",
    "close_pool",
]
