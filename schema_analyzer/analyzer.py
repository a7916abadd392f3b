"""
Schema analyzer

Entry point tying the pieces together:
- detect junction tables
- compute the shortest foreign key path between two tables
- look up inheritance (parent / children) relationships

Results are memoized in a key-derived cache; the graph core stays
cache-agnostic. Cached sequences are stored as tuples and handed out as
fresh lists.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from loguru import logger

from schema_analyzer.config.settings import settings
from schema_analyzer.graph.builder import CostOverrides, EdgeWeights, build_schema_graph
from schema_analyzer.graph.formatter import format_ambiguity_message
from schema_analyzer.graph.model import Edge, ForeignKeyEdge, Graph, JunctionEdge
from schema_analyzer.graph.path_finder import find_shortest_paths
from schema_analyzer.graph.reconstruction import enumerate_all_paths, reconstruct_path
from schema_analyzer.infra.cache import Cache, DictCache, VoidCache
from schema_analyzer.schema.junction import (
    detect_junction_tables,
    get_children_relationships,
    get_parent_relationship,
    is_junction_table,
)
from schema_analyzer.schema.models import ForeignKey, Table
from schema_analyzer.schema.provider import SchemaProvider, SchemaSnapshot
from schema_analyzer.utils.errors import (
    AmbiguousPathError,
    CacheConfigurationError,
    SchemaAnalyzerError,
)

DEFAULT_CACHE_KEY = "schema_analyzer"


@dataclass
class PathResult:
    """Outcome of a path lookup: either foreign keys or the error that prevented them"""
    source: str
    destination: str
    foreign_keys: Optional[List[ForeignKey]] = None
    error: Optional[SchemaAnalyzerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def find_unique_path(graph: Graph, source: str, destination: str) -> List[Edge]:
    """
    Shortest path between two vertices, failing on ties.

    Raises:
        AmbiguousPathError: with every tied path enumerated and described
        NoPathError, NegativeWeightError, TableNotFoundError
    """
    predecessors = find_shortest_paths(graph, source, destination)
    try:
        return reconstruct_path(source, destination, predecessors)
    except AmbiguousPathError as e:
        paths = enumerate_all_paths(source, destination, predecessors)
        description = format_ambiguity_message(paths, source, destination)
        logger.warning(f"Ambiguous path between '{source}' and '{destination}': {len(paths)} candidates")
        raise AmbiguousPathError(
            source,
            destination,
            vertex=e.vertex,
            paths=paths,
            description=description,
        ) from e


def edges_to_foreign_keys(edges: List[Edge], source: str) -> List[ForeignKey]:
    """
    Expand a path into the foreign keys to join, in traversal order.

    A junction edge expands into its two foreign keys, the one touching
    the current table first.
    """
    foreign_keys: List[ForeignKey] = []
    current = source

    for edge in edges:
        kind = edge.kind
        if isinstance(kind, ForeignKeyEdge):
            fk = kind.fk
            foreign_keys.append(fk)
            current = fk.local_table if fk.foreign_table == current else fk.foreign_table
        elif isinstance(kind, JunctionEdge):
            if kind.fk_a.foreign_table == current:
                foreign_keys.extend([kind.fk_a, kind.fk_b])
                current = kind.fk_b.foreign_table
            else:
                foreign_keys.extend([kind.fk_b, kind.fk_a])
                current = kind.fk_a.foreign_table
        else:
            raise SchemaAnalyzerError(f"Unexpected edge kind: {kind!r}")

    return foreign_keys


class SchemaAnalyzer:
    """
    Analyze a database model: junction tables, shortest join paths and
    inheritance relationships.
    """

    def __init__(
        self,
        provider: SchemaProvider,
        cache: Optional[Cache] = None,
        cache_key: Optional[str] = None,
        weights: Optional[EdgeWeights] = None,
    ):
        """
        Args:
            provider: Source of the schema metadata
            cache: Cache used to store results (optional)
            cache_key: Unique identifier of the schema, compulsory with a cache
            weights: Default edge weights (from settings when omitted)
        """
        if cache is not None and not cache_key:
            raise CacheConfigurationError(
                "You must provide a schema cache key if you configure SchemaAnalyzer with a cache."
            )

        if cache is None:
            cache = DictCache() if settings.cache_enabled else VoidCache()
            cache_key = cache_key or DEFAULT_CACHE_KEY

        self.provider = provider
        self.cache = cache
        self.cache_prefix = cache_key
        self.weights = weights or EdgeWeights()
        self._schema: Optional[SchemaSnapshot] = None
        self._graph: Optional[Graph] = None
        self._overrides = CostOverrides()

    # ------------------------------------------------------------------
    # Schema
    # ------------------------------------------------------------------

    def get_schema(self) -> SchemaSnapshot:
        """Return the schema snapshot (from the provider or the cache)"""
        if self._schema is None:
            self._schema = self.cache.get_or_compute(
                f"{self.cache_prefix}_schema", self.provider.get_snapshot
            )
        return self._schema

    def get_table(self, table_name: str) -> Table:
        return self.get_schema().get_table(table_name)

    # ------------------------------------------------------------------
    # Junction tables
    # ------------------------------------------------------------------

    def detect_junction_tables(self, ignore_referenced_tables: bool = False) -> List[Table]:
        """
        Detect all junction tables in the schema.

        If ignore_referenced_tables is True, junction tables that are pointed
        to by a foreign key of another table are ignored.
        """
        key = f"{self.cache_prefix}_junctiontables_{'true' if ignore_referenced_tables else 'false'}"
        junction_tables = self.cache.get_or_compute(
            key,
            lambda: tuple(detect_junction_tables(self.get_schema().tables, ignore_referenced_tables)),
        )
        return list(junction_tables)

    def is_junction_table(self, table_name: str, ignore_referenced_tables: bool = False) -> bool:
        schema = self.get_schema()
        return is_junction_table(schema.get_table(table_name), schema.tables, ignore_referenced_tables)

    # ------------------------------------------------------------------
    # Shortest path
    # ------------------------------------------------------------------

    def build_graph(self) -> Graph:
        """Relationship graph for the current schema and cost overrides"""
        if self._graph is None:
            self._graph = build_schema_graph(
                self.get_schema().tables,
                self.detect_junction_tables(),
                self._overrides,
                self.weights,
            )
        return self._graph

    def get_shortest_path(self, from_table: str, to_table: str) -> List[ForeignKey]:
        """
        Get the shortest path between 2 tables as the foreign keys to join.

        Raises:
            TableNotFoundError: if a table does not exist
            AmbiguousPathError: if several paths share the minimum cost
            NoPathError: if the tables are not connected
        """
        key = f"{self.cache_prefix}_shortest_{from_table}```{to_table}"
        if self._overrides.foreign_key_costs or self._overrides.table_cost_modifiers:
            key += f"|{self._overrides.signature()}"
        foreign_keys = self.cache.get_or_compute(
            key, lambda: tuple(self._get_shortest_path_without_cache(from_table, to_table))
        )
        return list(foreign_keys)

    def _get_shortest_path_without_cache(self, from_table: str, to_table: str) -> List[ForeignKey]:
        schema = self.get_schema()
        schema.get_table(from_table)
        schema.get_table(to_table)

        edges = find_unique_path(self.build_graph(), from_table, to_table)
        foreign_keys = edges_to_foreign_keys(edges, from_table)
        logger.info(f"Shortest path {from_table} -> {to_table}: {len(foreign_keys)} foreign keys")
        return foreign_keys

    def find_path(self, from_table: str, to_table: str) -> PathResult:
        """
        Same as get_shortest_path, but returns the failure instead of raising.
        """
        try:
            foreign_keys = self.get_shortest_path(from_table, to_table)
        except SchemaAnalyzerError as e:
            return PathResult(from_table, to_table, error=e)
        return PathResult(from_table, to_table, foreign_keys=foreign_keys)

    # ------------------------------------------------------------------
    # Cost overrides
    # ------------------------------------------------------------------

    def set_foreign_key_cost(self, table_name: str, columns: Union[str, List[str]], cost: float) -> "SchemaAnalyzer":
        """
        Sets the cost of a foreign key.

        Args:
            table_name: Table owning the foreign key
            columns: Local column name(s) of the foreign key
            cost: Absolute weight of the edge
        """
        column_key = columns if isinstance(columns, str) else ",".join(columns)
        self._overrides.foreign_key_costs.setdefault(table_name, {})[column_key] = cost
        self._graph = None
        return self

    def set_foreign_key_costs(self, fk_costs: Dict[str, Dict[str, float]]) -> "SchemaAnalyzer":
        """Sets the cost of all foreign keys at once (table -> columns -> cost)"""
        self._overrides.foreign_key_costs = {t: dict(c) for t, c in fk_costs.items()}
        self._graph = None
        return self

    def set_table_cost_modifier(self, table_name: str, modifier: float) -> "SchemaAnalyzer":
        """Sets the cost modifier of a table"""
        self._overrides.table_cost_modifiers[table_name] = modifier
        self._graph = None
        return self

    def set_table_cost_modifiers(self, table_costs: Dict[str, float]) -> "SchemaAnalyzer":
        """Sets the cost modifier of all tables at once"""
        self._overrides.table_cost_modifiers = dict(table_costs)
        self._graph = None
        return self

    # ------------------------------------------------------------------
    # Inheritance
    # ------------------------------------------------------------------

    def get_parent_relationship(self, table_name: str) -> Optional[ForeignKey]:
        """
        If this table's primary key is also a foreign key to a parent table,
        return that foreign key. None if there is no parent table.
        """
        return self.cache.get_or_compute(
            f"{self.cache_prefix}_parent_{table_name}",
            lambda: get_parent_relationship(self.get_table(table_name)),
        )

    def get_children_relationships(self, table_name: str) -> List[ForeignKey]:
        """
        Foreign keys of child tables whose primary key points at this table.
        Empty if there are no children tables.
        """
        def compute() -> Tuple[ForeignKey, ...]:
            schema = self.get_schema()
            schema.get_table(table_name)
            return tuple(get_children_relationships(table_name, schema.tables))

        return list(self.cache.get_or_compute(f"{self.cache_prefix}_children_{table_name}", compute))
