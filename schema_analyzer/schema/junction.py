"""
Junction table classification and inheritance relationships

A junction table is a pure many-to-many link:
- it has exactly 2 foreign keys, each on its own single column
- it has only 2 columns, or 3 columns when the third one is an
  autoincremented primary key that no foreign key uses.

An inheritance relationship is a foreign key whose local columns are
exactly the owning table's primary key.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from loguru import logger

from schema_analyzer.schema.models import ForeignKey, Table


def remove_duplicate_foreign_keys(foreign_keys: Iterable[ForeignKey]) -> List[ForeignKey]:
    """
    Collapse foreign keys pointing to the same table on the same columns.

    The first occurrence is kept, in its original position.
    """
    unique: Dict[tuple, ForeignKey] = {}
    for fk in foreign_keys:
        key = (fk.foreign_table, fk.local_columns)
        if key not in unique:
            unique[key] = fk
    return list(unique.values())


def is_table_referenced(table: Table, tables: Iterable[Table]) -> bool:
    """Returns True if any foreign key in ``tables`` points at ``table``."""
    for other in tables:
        for fk in other.foreign_keys:
            if fk.foreign_table == table.name:
                return True
    return False


def is_junction_table(
    table: Table,
    tables: Optional[Sequence[Table]] = None,
    ignore_referenced_tables: bool = False,
) -> bool:
    """
    Returns True if ``table`` is a junction table.

    Args:
        table: Table to classify
        tables: Every table of the schema (needed with ignore_referenced_tables)
        ignore_referenced_tables: Reject junction tables that are themselves
            the target of another foreign key

    Returns:
        True if the table is a pure many-to-many association
    """
    foreign_keys = table.foreign_keys
    if len(foreign_keys) != 2:
        return False

    column_count = len(table.columns)
    if column_count < 2 or column_count > 3:
        return False

    pk_columns = table.primary_key_columns

    if len(pk_columns) == 1 and column_count == 2:
        return False

    if len(pk_columns) != 1 and column_count == 3:
        return False

    fk_column_names = set()
    for fk in foreign_keys:
        if len(fk.local_columns) != 1:
            return False
        fk_column_names.add(fk.local_columns[0])

    # Each foreign key needs its own column
    if len(fk_column_names) != 2:
        return False

    other_columns = set(table.column_names) - fk_column_names

    if column_count == 2 and other_columns:
        return False

    if column_count == 3:
        # The third column is the id, not a foreign key
        if other_columns != {pk_columns[0]}:
            return False

        pk_column = table.get_column(pk_columns[0])
        if pk_column is None or not pk_column.autoincrement:
            return False

    if ignore_referenced_tables and tables is not None and is_table_referenced(table, tables):
        return False

    return True


def detect_junction_tables(
    tables: Sequence[Table],
    ignore_referenced_tables: bool = False,
) -> List[Table]:
    """
    Detect all junction tables in the schema, in schema order.

    Args:
        tables: Every table of the schema
        ignore_referenced_tables: Skip junction tables pointed to by a foreign key

    Returns:
        List of junction tables
    """
    junction_tables = [
        table for table in tables
        if is_junction_table(table, tables, ignore_referenced_tables)
    ]
    logger.debug(
        f"Detected {len(junction_tables)} junction tables among {len(tables)} tables "
        f"(ignore_referenced_tables={ignore_referenced_tables})"
    )
    return junction_tables


def is_inheritance_relationship(fk: ForeignKey, table: Table) -> bool:
    """
    Returns True if ``fk`` (owned by ``table``) is based on the primary key.

    Column order does not matter.
    """
    if not table.has_primary_key:
        return False
    return sorted(fk.local_columns) == sorted(table.primary_key_columns)


def get_parent_relationship(table: Table) -> Optional[ForeignKey]:
    """
    If ``table``'s primary key is also a foreign key to another table,
    return that foreign key. Returns None when there is no parent table.
    """
    for fk in table.foreign_keys:
        if is_inheritance_relationship(fk, table):
            return fk
    return None


def get_children_relationships(table_name: str, tables: Iterable[Table]) -> List[ForeignKey]:
    """
    Return the inheritance foreign keys of other tables pointing at
    ``table_name``. Empty when the table has no children.
    """
    children = []
    for table in tables:
        if table.name == table_name:
            continue
        for fk in remove_duplicate_foreign_keys(table.foreign_keys):
            if fk.foreign_table == table_name and is_inheritance_relationship(fk, table):
                children.append(fk)
    return children
