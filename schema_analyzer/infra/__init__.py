"""
Infrastructure - caching and database engines
"""

from schema_analyzer.infra.cache import Cache, DictCache, VoidCache
from schema_analyzer.infra.database import get_engine

__all__ = [
    "Cache",
    "DictCache",
    "VoidCache",
    "get_engine",
]
