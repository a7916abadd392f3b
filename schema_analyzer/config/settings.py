"""
Configuration management for the schema analyzer.
Loads settings from environment variables and an optional .env file.
"""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from loguru import logger

# This file is at schema_analyzer/config/settings.py, so project root is 3 levels up
_project_root = Path(__file__).resolve().parent.parent.parent

PROJECT_ROOT = _project_root

_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(dotenv_path=_env_file, override=False)
    logger.debug(f"Loaded .env from: {_env_file}")
else:
    load_dotenv(override=False)


@dataclass
class DatabaseConfig:
    """Connection used to reflect a live schema"""
    url: str = field(default_factory=lambda: os.getenv("SCHEMA_ANALYZER_DATABASE_URL", "sqlite:///:memory:"))
    schema: Optional[str] = field(default_factory=lambda: os.getenv("SCHEMA_ANALYZER_DB_SCHEMA") or None)


class Settings(BaseSettings):
    """Analyzer settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SCHEMA_ANALYZER_",
        env_file=str(_project_root / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Edge weights
    weight_fk: float = Field(default=1.0)  # Plain foreign key join
    weight_inheritance_fk: float = Field(default=0.1)  # FK on the primary key (child extends parent)
    weight_junction_table: float = Field(default=1.5)  # Many-to-many through a junction table

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # Memoization of schema snapshots and shortest paths
    cache_enabled: bool = Field(default=True)


settings = Settings()
