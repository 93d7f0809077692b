"""Application configuration: env vars, YAML files, defaults."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings


def _repo_root() -> Path:
    """Find the repository root (directory containing pyproject.toml)."""
    current = Path(__file__).resolve().parent.parent
    if (current / "pyproject.toml").exists():
        return current
    return Path.cwd()


REPO_ROOT = _repo_root()


class DatabaseConfig(BaseSettings):
    dsn: str = "postgresql://postgres@localhost:5432/postgres"
    min_size: int = 1
    max_size: int = 10
    command_timeout: float = 60.0

    model_config = {"env_prefix": "QH_DB_"}


class LoggingConfig(BaseSettings):
    level: str = "info"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = {"env_prefix": "QH_LOG_"}


class AppConfig(BaseSettings):
    """Top-level configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    environment: str = "development"

    model_config = {"env_prefix": "QH_"}

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> AppConfig:
        """Load config from YAML file, with env var overrides."""
        if path is None:
            path = REPO_ROOT / "config" / "app.yml"

        values: dict[str, Any] = {}
        if path.exists():
            with open(path) as f:
                values = yaml.safe_load(f) or {}

        return cls(**values)
