"""Shared fixtures: an in-memory stand-in for an asyncpg pool."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


class _Lease:
    """Async context manager returned by ``FakePool.acquire()``."""

    def __init__(self, pool: FakePool):
        self._pool = pool

    async def __aenter__(self):
        self._pool.events.append("acquire")
        return self._pool.conn

    async def __aexit__(self, exc_type, exc, tb):
        self._pool.events.append("release")
        await self._pool.release(self._pool.conn)
        return False


class FakePool:
    """Pool double exposing asyncpg's ``async with pool.acquire()`` lease.

    ``fetch_results`` is consumed one item per ``conn.fetch`` call; an
    exception instance is raised instead of returned. ``events`` records
    acquire/fetch/release in the order they happen.
    """

    def __init__(self, fetch_results: list[Any] | None = None):
        self.events: list[str] = []
        self._results = iter(fetch_results or [[]])
        self.conn = MagicMock()
        self.conn.fetch = AsyncMock(side_effect=self._fetch)
        self.acquire = MagicMock(side_effect=lambda: _Lease(self))
        self.release = AsyncMock()

    async def _fetch(self, query: str, *params: Any) -> Any:
        self.events.append("fetch")
        result = next(self._results)
        if isinstance(result, BaseException):
            raise result
        return result

    @property
    def queries(self) -> list[tuple[str, tuple[Any, ...]]]:
        """(text, params) for every fetch issued, in order."""
        return [(c.args[0], c.args[1:]) for c in self.conn.fetch.call_args_list]


@pytest.fixture
def make_pool():
    """Factory fixture: ``make_pool([rows, RuntimeError(), ...])``."""
    return FakePool
