"""Insert/update/existence/fetch helpers over an asyncpg pool.

Each helper leases one connection per attempt and retries a failed query
once (see ``run_with_retry``) before raising ``QueryFailedError``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from queryhelper.db.retry import run_with_retry
from queryhelper.db.statements import build_insert, build_update

logger = logging.getLogger(__name__)


async def insert(
    pool: Any,
    record: Mapping[str, Any],
    table_name: str,
    returning: Sequence[str] | None = None,
) -> list[Any] | None:
    """Insert the non-null fields of ``record`` into ``table_name``.

    Returns the rows of the RETURNING clause (an empty list without one), or
    None if the record had nothing to insert. The record is not modified.
    """
    statement = build_insert(record, table_name, returning)
    if statement is None:
        logger.debug("Nothing to insert into %s", table_name)
        return None
    return await run_with_retry(pool, statement.text, statement.params)


async def update(
    pool: Any,
    record: Mapping[str, Any],
    table_name: str,
    where: Iterable[Sequence[Any]],
) -> None:
    """Set the non-null fields of ``record`` on rows matching every ``(column, value)`` in ``where``."""
    statement = build_update(record, table_name, where)
    if statement is None:
        logger.debug("Nothing to update in %s", table_name)
        return
    await run_with_retry(pool, statement.text, statement.params)


async def has(pool: Any, query: str) -> bool:
    """Return True if ``query`` yields at least one row."""
    rows = await run_with_retry(pool, query)
    return len(rows) > 0


async def get_value(pool: Any, query: str) -> list[Any]:
    return await run_with_retry(pool, query)
