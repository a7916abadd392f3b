"""
Tests for schema providers and snapshots
"""

import pytest
from sqlalchemy import Column, ForeignKey, Integer, MetaData, String, Table, create_engine

from schema_analyzer.analyzer import SchemaAnalyzer
from schema_analyzer.schema.junction import detect_junction_tables
from schema_analyzer.schema.provider import (
    EngineSchemaProvider,
    MetadataSchemaProvider,
    SchemaSnapshot,
    StaticSchemaProvider,
    table_from_sqlalchemy,
)
from schema_analyzer.utils.errors import TableNotFoundError
from schema_analyzer.utils.text import closest_match, levenshtein_distance


def build_metadata():
    """role, permission, a role_permission junction and an employee table"""
    metadata = MetaData()
    Table(
        "role", metadata,
        Column("id", Integer, primary_key=True),
        Column("label", String(32)),
    )
    Table(
        "permission", metadata,
        Column("id", Integer, primary_key=True),
        Column("label", String(32)),
    )
    Table(
        "role_permission", metadata,
        Column("role_id", Integer, ForeignKey("role.id"), primary_key=True),
        Column("permission_id", Integer, ForeignKey("permission.id"), primary_key=True),
    )
    Table(
        "employee", metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(64)),
        Column("role_id", Integer, ForeignKey("role.id")),
        Column("manager_id", Integer, ForeignKey("employee.id")),
    )
    return metadata


class TestTableFromSqlalchemy:
    """Conversion of SQLAlchemy tables into snapshots"""

    def test_columns_and_primary_key(self):
        metadata = build_metadata()

        role = table_from_sqlalchemy(metadata.tables["role"])

        assert role.name == "role"
        assert role.column_names == ("id", "label")
        assert role.primary_key == ("id",)
        assert role.get_column("id").autoincrement
        assert not role.get_column("label").autoincrement
        assert role.foreign_keys == ()

    def test_composite_primary_key_is_not_autoincrement(self):
        metadata = build_metadata()

        junction = table_from_sqlalchemy(metadata.tables["role_permission"])

        assert junction.primary_key == ("role_id", "permission_id")
        assert not any(c.autoincrement for c in junction.columns)

    def test_foreign_keys_in_column_order(self):
        metadata = build_metadata()

        employee = table_from_sqlalchemy(metadata.tables["employee"])

        assert [(fk.local_columns, fk.foreign_table, fk.foreign_columns) for fk in employee.foreign_keys] == [
            (("role_id",), "role", ("id",)),
            (("manager_id",), "employee", ("id",)),
        ]
        assert all(fk.local_table == "employee" for fk in employee.foreign_keys)

    def test_no_primary_key(self):
        metadata = MetaData()
        Table("log", metadata, Column("message", String(100)))

        assert table_from_sqlalchemy(metadata.tables["log"]).primary_key is None

    def test_junction_with_surrogate_id(self):
        metadata = build_metadata()
        Table(
            "role_permission2", metadata,
            Column("id", Integer, primary_key=True),
            Column("role_id", Integer, ForeignKey("role.id")),
            Column("permission_id", Integer, ForeignKey("permission.id")),
        )

        tables = MetadataSchemaProvider(metadata).get_tables()

        assert [t.name for t in detect_junction_tables(tables)] == ["role_permission", "role_permission2"]


class TestEngineSchemaProvider:
    """Reflection of a live SQLite database"""

    @pytest.fixture
    def engine(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'schema.db'}")
        build_metadata().create_all(engine)
        yield engine
        engine.dispose()

    def test_reflect(self, engine):
        provider = EngineSchemaProvider(engine)

        tables = {t.name: t for t in provider.get_tables()}

        assert set(tables) == {"role", "permission", "role_permission", "employee"}
        assert tables["role_permission"].primary_key is not None
        assert {fk.foreign_table for fk in tables["role_permission"].foreign_keys} == {"role", "permission"}

    def test_reflection_is_cached(self, engine):
        provider = EngineSchemaProvider(engine)
        first = provider.get_tables()

        extra_metadata = MetaData()
        Table("extra", extra_metadata, Column("id", Integer, primary_key=True))
        extra_metadata.create_all(engine)

        assert [t.name for t in provider.get_tables()] == [t.name for t in first]

        provider.refresh()
        assert "extra" in {t.name for t in provider.get_tables()}

    def test_shortest_path_on_reflected_schema(self, engine):
        analyzer = SchemaAnalyzer(EngineSchemaProvider(engine))

        fks = analyzer.get_shortest_path("role", "permission")

        assert [(fk.local_table, fk.foreign_table) for fk in fks] == [
            ("role_permission", "role"),
            ("role_permission", "permission"),
        ]


class TestSchemaSnapshot:
    """Lookup and closest-name hints"""

    def test_get_table(self):
        snapshot = MetadataSchemaProvider(build_metadata()).get_snapshot()

        assert snapshot.get_table("employee").name == "employee"
        assert snapshot.has_table("role")
        assert len(snapshot) == 4

    def test_missing_table_hint(self):
        snapshot = MetadataSchemaProvider(build_metadata()).get_snapshot()

        with pytest.raises(TableNotFoundError) as exc_info:
            snapshot.get_table("employe")

        assert exc_info.value.table_name == "employe"
        assert exc_info.value.closest_match == "employee"

    def test_empty_snapshot(self):
        snapshot = StaticSchemaProvider([]).get_snapshot()

        with pytest.raises(TableNotFoundError) as exc_info:
            snapshot.get_table("anything")

        assert exc_info.value.closest_match is None
        assert "Did you mean" not in str(exc_info.value)

    def test_snapshot_keeps_order(self):
        snapshot = SchemaSnapshot(MetadataSchemaProvider(build_metadata()).get_tables())

        assert snapshot.table_names == ["role", "permission", "role_permission", "employee"]


def test_levenshtein_distance():
    assert levenshtein_distance("kitten", "sitting") == 3
    assert levenshtein_distance("", "abc") == 3
    assert levenshtein_distance("role", "role") == 0


def test_closest_match_prefers_first_on_tie():
    assert closest_match("rolx", ["role", "rola"]) == "role"
    assert closest_match("x", []) is None
