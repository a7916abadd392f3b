"""
Configuration layer - Settings and constants
"""

from schema_analyzer.config.settings import settings, Settings, DatabaseConfig, PROJECT_ROOT
from schema_analyzer.config.constants import (
    WEIGHT_FK,
    WEIGHT_INHERITANCE_FK,
    WEIGHT_JUNCTION_TABLE,
    WEIGHT_IMPORTANT,
    WEIGHT_IRRELEVANT,
    WEIGHT_IGNORE,
)

__all__ = [
    "settings",
    "Settings",
    "DatabaseConfig",
    "PROJECT_ROOT",
    "WEIGHT_FK",
    "WEIGHT_INHERITANCE_FK",
    "WEIGHT_JUNCTION_TABLE",
    "WEIGHT_IMPORTANT",
    "WEIGHT_IRRELEVANT",
    "WEIGHT_IGNORE",
]
