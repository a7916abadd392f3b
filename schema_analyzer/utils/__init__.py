"""
Utilities - errors, logging and string helpers
"""

from schema_analyzer.utils.errors import (
    SchemaAnalyzerError,
    CacheConfigurationError,
    TableNotFoundError,
    PathError,
    NegativeWeightError,
    NoPathError,
    AmbiguousPathError,
)
from schema_analyzer.utils.text import levenshtein_distance, closest_match

__all__ = [
    "SchemaAnalyzerError",
    "CacheConfigurationError",
    "TableNotFoundError",
    "PathError",
    "NegativeWeightError",
    "NoPathError",
    "AmbiguousPathError",
    "levenshtein_distance",
    "closest_match",
]
