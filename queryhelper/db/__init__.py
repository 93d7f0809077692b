"""Database layer: pooled asyncpg helpers with a single retry."""

from queryhelper.db.connection import close_pool, create_pool, get_pool, init_pool
from queryhelper.db.helpers import get_value, has, insert, update
from queryhelper.db.retry import MAX_ATTEMPTS, QueryFailedError, run_with_retry

__all__ = [
    "insert",
    "update",
    "has",
    "get_value",
    "run_with_retry",
    "MAX_ATTEMPTS",
    "QueryFailedError",
    "create_pool",
    "init_pool",
    "get_pool",
    "close_pool",
]
