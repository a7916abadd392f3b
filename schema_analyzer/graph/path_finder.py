"""
Multi-path shortest route finder.

Dijkstra's algorithm modified to keep every predecessor edge that
reaches a vertex at its minimum cost. Instead of silently picking one of
several equally cheap routes, the search records all of them so that
reconstruction can report the tie.

Zero-weight edges can tie into a vertex that is already settled, so the
predecessor map may contain cycles. Reconstruction only follows simple
paths through it.
"""

import heapq
import itertools
import math
from typing import Dict, List, Set

from loguru import logger

from schema_analyzer.graph.model import Edge, Graph
from schema_analyzer.utils.errors import NegativeWeightError, NoPathError, TableNotFoundError

# vertex -> edges over which a cheapest route arrives at it
PredecessorMap = Dict[str, List[Edge]]


def find_shortest_paths(graph: Graph, source: str, destination: str) -> PredecessorMap:
    """
    Find all minimum cost predecessor edges between two vertices.

    The search keeps going after the destination is settled until the
    frontier only holds costlier entries, so ties arriving through
    zero-weight edges are recorded too.

    Args:
        graph: Relationship graph (not modified)
        source: Starting vertex
        destination: Target vertex

    Returns:
        Predecessor map covering every vertex reached by the search. A
        vertex with more than one predecessor edge is reached by several
        equally cheap routes.

    Raises:
        TableNotFoundError: if source or destination is not a vertex
        NegativeWeightError: as soon as a negative edge weight is met
        NoPathError: if the destination is never reached
    """
    for vertex in (source, destination):
        if vertex not in graph:
            raise TableNotFoundError(vertex)

    cost_to: Dict[str, float] = {source: 0}
    predecessors: PredecessorMap = {}
    finalized: Set[str] = set()

    # Priority queue: (cost, tie_breaker, vertex)
    # The counter keeps insertion order among equal costs
    counter = itertools.count()
    frontier = [(0, next(counter), source)]

    while frontier:
        cost, _, current = heapq.heappop(frontier)

        # Entries are popped in non-decreasing cost order: past the
        # destination's cost nothing can improve or tie it
        if destination in finalized and cost > cost_to[destination]:
            break

        # Stale entry: vertex already settled, or superseded by a cheaper push
        if current in finalized or cost > cost_to[current]:
            continue

        finalized.add(current)

        # A route leaving the destination cannot end there
        if current == destination:
            continue

        for edge in graph.incident_edges(current):
            weight = edge.weight
            if weight < 0:
                raise NegativeWeightError(edge, weight)
            if math.isinf(weight):
                continue

            neighbor = edge.other_end(current)
            if neighbor == current or neighbor == source:
                continue

            candidate = cost + weight
            known = cost_to.get(neighbor)

            if known is None or candidate < known:
                cost_to[neighbor] = candidate
                predecessors[neighbor] = [edge]
                heapq.heappush(frontier, (candidate, next(counter), neighbor))
            elif candidate == known:
                # Same cost: another route, kept for reconstruction.
                # Only a zero-weight edge can tie into a settled vertex.
                predecessors[neighbor].append(edge)

    if destination not in finalized:
        raise NoPathError(source, destination)

    logger.debug(
        f"Shortest path search {source} -> {destination}: cost {cost_to[destination]}, "
        f"{len(finalized)} vertices settled"
    )
    return predecessors


def path_cost(path: List[Edge]) -> float:
    """Summed weight of a sequence of edges"""
    return sum(edge.weight for edge in path)
