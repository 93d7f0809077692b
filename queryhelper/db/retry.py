"""Single-retry execution of a statement on a pooled connection."""

from __future__ import annotations

import logging
from typing import Any, Sequence

logger = logging.getLogger(__name__)

# One initial attempt plus one immediate retry
MAX_ATTEMPTS = 2


class QueryFailedError(Exception):
    """Raised when a query still fails after the retry."""

    def __init__(self, query: str):
        super().__init__(f"Query has failed: {query}")
        self.query = query


async def run_with_retry(pool: Any, query: str, params: Sequence[Any] = ()) -> list[Any]:
    """Execute ``query`` on a connection leased from ``pool``.

    Every attempt leases its own connection, which is released before the
    next attempt starts or the error is raised. Only a failed ``fetch`` is
    retried; errors from acquiring or releasing the connection reach the
    caller unchanged. The retry is immediate and reuses the same text and
    params; there is no distinction between transient and permanent errors.

    Args:
        pool: An asyncpg-compatible pool whose ``acquire()`` is an async
            context manager.
        query: SQL text with ``$n`` placeholders.
        params: Positional parameters bound to the placeholders.

    Returns:
        The rows produced by ``conn.fetch``; empty for statements that return
        no rows.

    Raises:
        QueryFailedError: Both attempts failed. The last driver error is
            chained as ``__cause__``.
    """
    last_exc: Exception | None = None
    for attempt in range(1, MAX_ATTEMPTS + 1):
        async with pool.acquire() as conn:
            try:
                logger.debug("Executing (attempt %d/%d): %s", attempt, MAX_ATTEMPTS, query)
                return await conn.fetch(query, *params)
            except Exception as exc:
                last_exc = exc
        if attempt < MAX_ATTEMPTS:
            logger.warning(
                "Query failed (attempt %d/%d), retrying: %s",
                attempt,
                MAX_ATTEMPTS,
                last_exc,
            )
        else:
            logger.error(
                "Query failed after %d attempts: %s (%s)",
                MAX_ATTEMPTS,
                query,
                last_exc,
            )
    raise QueryFailedError(query) from last_exc
