"""
Relationship graph builder

Turns schema metadata into a weighted relationship graph:
- one vertex per table, connected or not
- one edge per de-duplicated foreign key
- one synthetic edge per junction table, directly linking the two tables
  the junction references
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from loguru import logger

from schema_analyzer.config.settings import settings
from schema_analyzer.graph.model import ForeignKeyEdge, Graph, JunctionEdge
from schema_analyzer.schema.junction import is_inheritance_relationship, remove_duplicate_foreign_keys
from schema_analyzer.schema.models import ForeignKey, Table
from schema_analyzer.utils.errors import NegativeWeightError


@dataclass(frozen=True)
class EdgeWeights:
    """Default weights of the three kinds of relationships"""
    foreign_key: float = field(default_factory=lambda: settings.weight_fk)
    inheritance: float = field(default_factory=lambda: settings.weight_inheritance_fk)
    junction: float = field(default_factory=lambda: settings.weight_junction_table)


@dataclass
class CostOverrides:
    """
    Caller supplied weight adjustments.

    Attributes:
        foreign_key_costs: table name -> comma separated local columns -> absolute weight
        table_cost_modifiers: table name -> multiplier applied to every edge
            owned by the table (foreign keys) or standing for it (junctions)
    """
    foreign_key_costs: Dict[str, Dict[str, float]] = field(default_factory=dict)
    table_cost_modifiers: Dict[str, float] = field(default_factory=dict)

    def foreign_key_cost(self, fk: ForeignKey) -> Optional[float]:
        return self.foreign_key_costs.get(fk.local_table, {}).get(fk.column_key)

    def table_modifier(self, table_name: str) -> Optional[float]:
        return self.table_cost_modifiers.get(table_name)

    def signature(self) -> str:
        """Stable text form, used to key cached results"""
        fk_part = ";".join(
            f"{table}.{columns}={cost}"
            for table in sorted(self.foreign_key_costs)
            for columns, cost in sorted(self.foreign_key_costs[table].items())
        )
        table_part = ";".join(
            f"{table}={cost}" for table, cost in sorted(self.table_cost_modifiers.items())
        )
        return f"{fk_part}|{table_part}"


def resolve_foreign_key_weight(
    fk: ForeignKey,
    table: Table,
    overrides: CostOverrides,
    weights: EdgeWeights,
) -> float:
    """
    Weight of the edge created for ``fk`` (owned by ``table``).

    An explicit override wins, then the inheritance discount, then the
    default weight. The owning table's modifier multiplies the result,
    overrides included.
    """
    cost = overrides.foreign_key_cost(fk)
    if cost is None:
        if is_inheritance_relationship(fk, table):
            cost = weights.inheritance
        else:
            cost = weights.foreign_key

    modifier = overrides.table_modifier(table.name)
    if modifier is not None:
        cost *= modifier
    return cost


def resolve_junction_weight(
    junction_table: Table,
    overrides: CostOverrides,
    weights: EdgeWeights,
) -> float:
    cost = weights.junction
    modifier = overrides.table_modifier(junction_table.name)
    if modifier is not None:
        cost *= modifier
    return cost


def _check_weight(weight: float, description: str) -> None:
    if not math.isnan(weight) and weight < 0:
        raise NegativeWeightError(description, weight)


def build_schema_graph(
    tables: Sequence[Table],
    junction_tables: Sequence[Table] = (),
    cost_overrides: Optional[CostOverrides] = None,
    weights: Optional[EdgeWeights] = None,
) -> Graph:
    """
    Build the relationship graph of a schema.

    Args:
        tables: Every table of the schema, in enumeration order
        junction_tables: Tables classified as junction tables
        cost_overrides: Weight overrides and table modifiers
        weights: Default weights (from settings when omitted)

    Returns:
        Graph with one vertex per table

    Raises:
        NegativeWeightError: if an override resolves to a negative weight
    """
    overrides = cost_overrides or CostOverrides()
    weights = weights or EdgeWeights()
    graph = Graph()

    # First, all the vertices
    for table in tables:
        graph.add_vertex(table.name)

    # Then one edge per foreign key
    for table in tables:
        for fk in remove_duplicate_foreign_keys(table.foreign_keys):
            weight = resolve_foreign_key_weight(fk, table, overrides, weights)
            _check_weight(weight, str(fk))
            graph.add_edge(table.name, fk.foreign_table, weight, ForeignKeyEdge(fk))

    # Finally, virtual edges for the junction tables
    for junction_table in junction_tables:
        fk_a, fk_b = junction_table.foreign_keys[0], junction_table.foreign_keys[1]
        weight = resolve_junction_weight(junction_table, overrides, weights)
        _check_weight(weight, junction_table.name)
        graph.add_edge(
            fk_a.foreign_table,
            fk_b.foreign_table,
            weight,
            JunctionEdge(junction_table, fk_a, fk_b),
        )

    logger.debug(
        f"Built schema graph: {len(graph)} vertices, {len(graph.edges)} edges "
        f"({len(junction_tables)} junction tables)"
    )
    return graph
