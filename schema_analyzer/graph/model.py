"""
Relationship graph model

Vertices are table names. Edges are undirected, weighted, and tagged with
the relationship they come from: a foreign key, or a junction table
linking the two tables its foreign keys reference.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Union

from schema_analyzer.schema.models import ForeignKey, Table
from schema_analyzer.utils.errors import TableNotFoundError


@dataclass(frozen=True)
class ForeignKeyEdge:
    """Edge created from a single foreign key"""
    fk: ForeignKey


@dataclass(frozen=True)
class JunctionEdge:
    """Synthetic edge bypassing a junction table (first FK stored first)"""
    table: Table
    fk_a: ForeignKey
    fk_b: ForeignKey


EdgeKind = Union[ForeignKeyEdge, JunctionEdge]


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected weighted edge.

    Edges compare by identity: two parallel edges with the same endpoints
    and weight are still distinct routes.
    """
    vertex_a: str
    vertex_b: str
    weight: float
    kind: EdgeKind

    def connects(self, vertex: str) -> bool:
        return vertex == self.vertex_a or vertex == self.vertex_b

    def other_end(self, vertex: str) -> str:
        """Return the endpoint opposite to ``vertex``."""
        if vertex == self.vertex_a:
            return self.vertex_b
        if vertex == self.vertex_b:
            return self.vertex_a
        raise ValueError(f"Vertex '{vertex}' is not an endpoint of {self}")

    def __repr__(self) -> str:
        return f"Edge({self.vertex_a} - {self.vertex_b}, weight={self.weight})"


class Graph:
    """
    Undirected multigraph keyed by table name.

    Incident edges are kept in insertion order so that searches are
    reproducible for a fixed table and foreign key enumeration order.
    """

    def __init__(self):
        self._adjacency: Dict[str, List[Edge]] = {}
        self._edges: List[Edge] = []

    def add_vertex(self, name: str) -> None:
        if name not in self._adjacency:
            self._adjacency[name] = []

    def has_vertex(self, name: str) -> bool:
        return name in self._adjacency

    def add_edge(self, vertex_a: str, vertex_b: str, weight: float, kind: EdgeKind) -> Edge:
        """
        Create an undirected edge between two existing vertices.

        Raises:
            TableNotFoundError: if either endpoint is not a vertex
        """
        for vertex in (vertex_a, vertex_b):
            if vertex not in self._adjacency:
                raise TableNotFoundError(vertex)

        edge = Edge(vertex_a, vertex_b, weight, kind)
        self._edges.append(edge)
        self._adjacency[vertex_a].append(edge)
        if vertex_b != vertex_a:
            self._adjacency[vertex_b].append(edge)
        return edge

    def incident_edges(self, vertex: str) -> List[Edge]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise TableNotFoundError(vertex) from None

    @property
    def vertices(self) -> List[str]:
        return list(self._adjacency)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __contains__(self, vertex: str) -> bool:
        return vertex in self._adjacency
