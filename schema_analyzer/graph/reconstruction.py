"""
Path reconstruction from a predecessor map.

Both modes walk backward from the destination to the source:
- reconstruct_path follows the unique predecessor edge at each vertex and
  fails on the first tie
- enumerate_all_paths expands every tied predecessor; it is only used to
  describe an ambiguity, never on the success path

Zero-weight edges may leave cycles in the map, so a walk never enters a
vertex it already went through.
"""

from typing import Iterator, List, Set, Tuple

from loguru import logger

from schema_analyzer.graph.model import Edge
from schema_analyzer.graph.path_finder import PredecessorMap
from schema_analyzer.utils.errors import AmbiguousPathError, NoPathError


def _reaches_source(vertex: str, source: str, predecessors: PredecessorMap, excluded: Set[str]) -> bool:
    """True if the predecessor map links ``vertex`` back to ``source`` avoiding ``excluded``"""
    seen = {vertex}
    stack = [vertex]
    while stack:
        current = stack.pop()
        if current == source:
            return True
        for edge in predecessors.get(current, []):
            previous = edge.other_end(current)
            if previous not in seen and previous not in excluded:
                seen.add(previous)
                stack.append(previous)
    return False


def reconstruct_path(source: str, destination: str, predecessors: PredecessorMap) -> List[Edge]:
    """
    Return the unique cheapest path as edges in source -> destination order.

    Raises:
        AmbiguousPathError: when a vertex on the way has several predecessors
        NoPathError: when the walk reaches a vertex with no predecessor
    """
    edges: List[Edge] = []
    visited = {destination}
    current = destination
    while current != source:
        predecessor_edges = predecessors.get(current)
        if not predecessor_edges:
            raise NoPathError(source, destination)

        if len(predecessor_edges) > 1:
            # Drop edges looping back into the walk
            predecessor_edges = [
                edge for edge in predecessor_edges
                if edge.other_end(current) not in visited
                and _reaches_source(edge.other_end(current), source, predecessors, visited)
            ]
            if not predecessor_edges:
                raise NoPathError(source, destination)
            if len(predecessor_edges) > 1:
                raise AmbiguousPathError(source, destination, vertex=current)

        edge = predecessor_edges[0]
        edges.append(edge)
        current = edge.other_end(current)
        visited.add(current)

    edges.reverse()
    return edges


def enumerate_all_paths(source: str, destination: str, predecessors: PredecessorMap) -> List[List[Edge]]:
    """
    Return every cheapest path, each in source -> destination order.

    For a vertex V with predecessor edges e1..ek leading to n1..nk, the
    paths to V are the paths to each ni extended by ei. The source reached
    from itself yields a single empty path.
    """
    def paths_to(vertex: str, visited: Set[str]) -> Iterator[Tuple[Edge, ...]]:
        if vertex == source:
            yield ()
            return
        for edge in predecessors.get(vertex, []):
            previous = edge.other_end(vertex)
            if previous in visited:
                continue
            for path in paths_to(previous, visited | {previous}):
                yield path + (edge,)

    paths = [list(path) for path in paths_to(destination, {destination})]
    logger.debug(f"Enumerated {len(paths)} cheapest paths between '{source}' and '{destination}'")
    return paths
