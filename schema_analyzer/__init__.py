"""
Schema analyzer - infer relationships in a relational schema and find
the cheapest join path between two tables.
"""

from schema_analyzer.analyzer import SchemaAnalyzer, PathResult, find_unique_path, edges_to_foreign_keys
from schema_analyzer.config.constants import WEIGHT_IMPORTANT, WEIGHT_IRRELEVANT, WEIGHT_IGNORE
from schema_analyzer.graph import (
    CostOverrides,
    EdgeWeights,
    Graph,
    build_schema_graph,
    find_shortest_paths,
    reconstruct_path,
    enumerate_all_paths,
    describe_path,
)
from schema_analyzer.schema import Column, ForeignKey, Table
from schema_analyzer.utils.errors import (
    SchemaAnalyzerError,
    TableNotFoundError,
    PathError,
    NegativeWeightError,
    NoPathError,
    AmbiguousPathError,
)

__version__ = "0.1.0"

__all__ = [
    "SchemaAnalyzer",
    "PathResult",
    "find_unique_path",
    "edges_to_foreign_keys",
    "WEIGHT_IMPORTANT",
    "WEIGHT_IRRELEVANT",
    "WEIGHT_IGNORE",
    "CostOverrides",
    "EdgeWeights",
    "Graph",
    "build_schema_graph",
    "find_shortest_paths",
    "reconstruct_path",
    "enumerate_all_paths",
    "describe_path",
    "Column",
    "ForeignKey",
    "Table",
    "SchemaAnalyzerError",
    "TableNotFoundError",
    "PathError",
    "NegativeWeightError",
    "NoPathError",
    "AmbiguousPathError",
]
