"""
Schema providers

Turn a schema source (a static list of tables, a SQLAlchemy MetaData, or
a live database reflected through SQLAlchemy) into an immutable
SchemaSnapshot.
"""

from typing import Dict, Iterable, List, Optional

from loguru import logger
from sqlalchemy import MetaData
from sqlalchemy import Table as SATable
from sqlalchemy.engine import Engine

from schema_analyzer.schema.models import Column, ForeignKey, Table
from schema_analyzer.utils.errors import TableNotFoundError
from schema_analyzer.utils.text import closest_match


class SchemaSnapshot:
    """
    Ordered, read-only view over the tables of a schema.

    Table order is the enumeration order of the source and drives the
    order in which graph edges are created.
    """

    def __init__(self, tables: Iterable[Table]):
        self._tables: List[Table] = list(tables)
        self._by_name: Dict[str, Table] = {t.name: t for t in self._tables}

    @property
    def tables(self) -> List[Table]:
        return list(self._tables)

    @property
    def table_names(self) -> List[str]:
        return [t.name for t in self._tables]

    def has_table(self, name: str) -> bool:
        return name in self._by_name

    def get_table(self, name: str) -> Table:
        """
        Get a table by name.

        Raises:
            TableNotFoundError: with the closest existing name as a hint
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise TableNotFoundError(name, closest_match(name, self.table_names)) from None

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self):
        return iter(self._tables)


class SchemaProvider:
    """Base class for schema sources"""

    def get_tables(self) -> List[Table]:
        raise NotImplementedError

    def get_snapshot(self) -> SchemaSnapshot:
        return SchemaSnapshot(self.get_tables())


class StaticSchemaProvider(SchemaProvider):
    """Serves a fixed list of tables"""

    def __init__(self, tables: Iterable[Table]):
        self._tables = list(tables)

    def get_tables(self) -> List[Table]:
        return list(self._tables)


def table_from_sqlalchemy(sa_table: SATable) -> Table:
    """
    Convert a SQLAlchemy Table into a Table snapshot.

    Foreign key constraints are ordered by the position of their first
    local column so the result does not depend on set iteration order.
    """
    positions = {c.name: i for i, c in enumerate(sa_table.columns)}
    autoincrement_column = sa_table.autoincrement_column

    columns = tuple(
        Column(name=c.name, autoincrement=c is autoincrement_column)
        for c in sa_table.columns
    )

    pk_columns = tuple(c.name for c in sa_table.primary_key.columns)

    constraints = sorted(
        sa_table.foreign_key_constraints,
        key=lambda fkc: (
            min(positions.get(c.name, len(positions)) for c in fkc.columns),
            fkc.referred_table.name,
        ),
    )
    foreign_keys = tuple(
        ForeignKey(
            local_table=sa_table.name,
            local_columns=tuple(c.name for c in fkc.columns),
            foreign_table=fkc.referred_table.name,
            foreign_columns=tuple(element.column.name for element in fkc.elements),
            name=fkc.name,
        )
        for fkc in constraints
    )

    return Table(
        name=sa_table.name,
        columns=columns,
        primary_key=pk_columns or None,
        foreign_keys=foreign_keys,
    )


class MetadataSchemaProvider(SchemaProvider):
    """Reads tables declared (or already reflected) in a SQLAlchemy MetaData"""

    def __init__(self, metadata: MetaData):
        self.metadata = metadata

    def get_tables(self) -> List[Table]:
        return [table_from_sqlalchemy(t) for t in self.metadata.tables.values()]


class EngineSchemaProvider(SchemaProvider):
    """
    Reflects a live database once and serves the resulting snapshot.

    Args:
        engine: SQLAlchemy engine to reflect
        schema: Optional database schema name
    """

    def __init__(self, engine: Engine, schema: Optional[str] = None):
        self.engine = engine
        self.schema = schema
        self._tables: Optional[List[Table]] = None

    def get_tables(self) -> List[Table]:
        if self._tables is None:
            metadata = MetaData()
            metadata.reflect(bind=self.engine, schema=self.schema)
            self._tables = MetadataSchemaProvider(metadata).get_tables()
            logger.info(f"Reflected {len(self._tables)} tables from {self.engine.url.render_as_string(hide_password=True)}")
        return list(self._tables)

    def refresh(self) -> None:
        """Drop the reflected snapshot so the next call reflects again"""
        self._tables = None
