"""
Shared fixtures: small schemas built from schema_analyzer models.
"""

import pytest
from loguru import logger

from schema_analyzer.graph.model import ForeignKeyEdge, Graph
from schema_analyzer.schema.models import Column, ForeignKey, Table
from schema_analyzer.schema.provider import StaticSchemaProvider


def make_table(name, columns, primary_key=None, foreign_keys=(), autoincrement=()):
    """
    Build a Table from plain names.

    foreign_keys items are (local_columns, foreign_table, foreign_columns)
    tuples, or (local_column, foreign_table) for the common single column
    case pointing at ``id``.
    """
    fks = []
    for fk_spec in foreign_keys:
        if len(fk_spec) == 2:
            local, foreign_table = fk_spec
            local_columns, foreign_columns = (local,), ("id",)
        else:
            local_columns, foreign_table, foreign_columns = fk_spec
        fks.append(ForeignKey(name, tuple(local_columns), foreign_table, tuple(foreign_columns)))

    return Table(
        name=name,
        columns=tuple(Column(c, autoincrement=c in autoincrement) for c in columns),
        primary_key=tuple(primary_key) if primary_key else None,
        foreign_keys=tuple(fks),
    )


def base_tables():
    """A role and a right table, no relationship"""
    return [
        make_table("role", ["id", "label"], primary_key=["id"]),
        make_table("right", ["id", "label"], primary_key=["id"]),
    ]


def role_right_table(name="role_right"):
    return make_table(
        name,
        ["role_id", "right_id"],
        primary_key=["role_id", "right_id"],
        foreign_keys=[("role_id", "role"), ("right_id", "right")],
    )


def graph_from_edges(vertices, edges):
    """
    Build a Graph from ``(a, b, weight)`` tuples.

    Each edge gets its own foreign key tag so edges stay distinguishable.
    """
    graph = Graph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for i, (a, b, weight) in enumerate(edges):
        fk = ForeignKey(a, (f"{b}_id_{i}",), b, ("id",))
        graph.add_edge(a, b, weight, ForeignKeyEdge(fk))
    return graph


@pytest.fixture
def role_right_schema():
    """role, right and the role_right junction table"""
    return base_tables() + [role_right_table()]


@pytest.fixture
def role_right_provider(role_right_schema):
    return StaticSchemaProvider(role_right_schema)


@pytest.fixture
def inheritance_schema():
    """user extends contact (user.id -> contact.id) and also has user.contact_id -> contact.id"""
    return [
        make_table("contact", ["id", "name"], primary_key=["id"]),
        make_table(
            "user",
            ["id", "contact_id", "login"],
            primary_key=["id"],
            foreign_keys=[("id", "contact"), ("contact_id", "contact")],
        ),
    ]


@pytest.fixture
def reset_logger():
    """Drop sinks added during the test (e.g. by the CLI)"""
    yield
    logger.remove()
