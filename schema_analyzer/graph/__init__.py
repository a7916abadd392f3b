"""
Relationship graph - model, builder, shortest path search and reporting
"""

from schema_analyzer.graph.model import Edge, EdgeKind, ForeignKeyEdge, JunctionEdge, Graph
from schema_analyzer.graph.builder import (
    CostOverrides,
    EdgeWeights,
    build_schema_graph,
    resolve_foreign_key_weight,
    resolve_junction_weight,
)
from schema_analyzer.graph.path_finder import PredecessorMap, find_shortest_paths, path_cost
from schema_analyzer.graph.reconstruction import reconstruct_path, enumerate_all_paths
from schema_analyzer.graph.formatter import describe_path, format_ambiguity_message

__all__ = [
    "Edge",
    "EdgeKind",
    "ForeignKeyEdge",
    "JunctionEdge",
    "Graph",
    "CostOverrides",
    "EdgeWeights",
    "build_schema_graph",
    "resolve_foreign_key_weight",
    "resolve_junction_weight",
    "PredecessorMap",
    "find_shortest_paths",
    "path_cost",
    "reconstruct_path",
    "enumerate_all_paths",
    "describe_path",
    "format_ambiguity_message",
]
