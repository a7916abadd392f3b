"""
Database engine management for schema reflection.
"""

from typing import Optional

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from schema_analyzer.config.settings import DatabaseConfig


def get_engine(config: Optional[DatabaseConfig] = None, url: Optional[str] = None) -> Engine:
    """
    Create a SQLAlchemy engine for reflecting a schema.

    Args:
        config: Database configuration (defaults to env vars)
        url: Explicit database URL, takes precedence over config

    Returns:
        SQLAlchemy engine
    """
    config = config or DatabaseConfig()
    engine = create_engine(url or config.url, pool_pre_ping=True)
    logger.info(f"Connecting to {engine.url.render_as_string(hide_password=True)}")
    return engine
