"""
Custom error classes for the schema analyzer
"""

from typing import Any, List, Optional


class SchemaAnalyzerError(Exception):
    """Base exception for schema analyzer errors"""
    pass


class CacheConfigurationError(SchemaAnalyzerError):
    """A cache was configured without a key prefix"""
    pass


class TableNotFoundError(SchemaAnalyzerError):
    """A table name is absent from the schema snapshot"""

    def __init__(self, table_name: str, closest_match: Optional[str] = None):
        self.table_name = table_name
        self.closest_match = closest_match
        message = f"Could not find table '{table_name}'."
        if closest_match:
            message += f" Did you mean '{closest_match}'?"
        super().__init__(message)


class PathError(SchemaAnalyzerError):
    """Error during shortest path search or reconstruction"""
    pass


class NegativeWeightError(PathError):
    """An edge with a negative weight reached the graph or the search"""

    def __init__(self, edge: Any, weight: float):
        self.edge = edge
        self.weight = weight
        super().__init__(
            f"Shortest path search is not defined for negative weights "
            f"(edge {edge} has weight {weight})"
        )


class NoPathError(PathError):
    """The destination cannot be reached from the source"""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(
            f"No path found between table '{source}' and table '{destination}'"
        )


class AmbiguousPathError(PathError):
    """
    Several routes share the minimum cost.

    Raised by single-path reconstruction as soon as a tied vertex is met.
    Callers that enumerate the tied routes re-raise it with ``paths`` and a
    rendered ``description`` attached.
    """

    def __init__(
        self,
        source: str,
        destination: str,
        vertex: Optional[str] = None,
        paths: Optional[List[List[Any]]] = None,
        description: Optional[str] = None,
    ):
        self.source = source
        self.destination = destination
        self.vertex = vertex
        self.paths = paths or []
        self.description = description
        message = description or (
            f"There are many possible shortest paths to link table "
            f"'{source}' to table '{destination}'"
        )
        super().__init__(message)
