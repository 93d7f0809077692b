"""Connection pool management: asyncpg pool built from AppConfig."""

from __future__ import annotations

import logging

import asyncpg

from queryhelper.config import AppConfig, DatabaseConfig

logger = logging.getLogger(__name__)


async def create_pool(config: DatabaseConfig) -> asyncpg.Pool:
    """Open an asyncpg pool from the database settings."""
    pool = await asyncpg.create_pool(
        config.dsn,
        min_size=config.min_size,
        max_size=config.max_size,
        command_timeout=config.command_timeout,
    )
    logger.info("Connection pool opened (min=%d, max=%d)", config.min_size, config.max_size)
    return pool


# Module-level singleton
_pool: asyncpg.Pool | None = None


def get_pool() -> asyncpg.Pool:
    """Get the global connection pool."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    return _pool


async def init_pool(config: AppConfig | None = None) -> asyncpg.Pool:
    """Configure logging and open the global connection pool."""
    global _pool
    if config is None:
        config = AppConfig.from_yaml()

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
    )

    _pool = await create_pool(config.database)
    return _pool


async def close_pool() -> None:
    """Close the global connection pool, if one is open."""
    global _pool
    if _pool is None:
        return
    await _pool.close()
    _pool = None
    logger.info("Connection pool closed")
