"""
Schema metadata models

Immutable snapshots of tables, columns and foreign keys as read from a
schema source.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Column:
    """A table column"""
    name: str
    autoincrement: bool = False


@dataclass(frozen=True)
class ForeignKey:
    """
    A foreign key constraint.

    Attributes:
        local_table: Name of the table owning the constraint
        local_columns: Constrained columns, in declaration order
        foreign_table: Name of the referenced table
        foreign_columns: Referenced columns, aligned with local_columns
        name: Optional constraint name
    """
    local_table: str
    local_columns: Tuple[str, ...]
    foreign_table: str
    foreign_columns: Tuple[str, ...] = ()
    name: Optional[str] = field(default=None, compare=False)

    @property
    def column_key(self) -> str:
        """Comma separated local columns, as used by cost overrides"""
        return ",".join(self.local_columns)

    def __str__(self) -> str:
        return (
            f"{self.local_table}({self.column_key}) -> "
            f"{self.foreign_table}({','.join(self.foreign_columns)})"
        )


@dataclass(frozen=True)
class Table:
    """A table with its columns, primary key and foreign keys"""
    name: str
    columns: Tuple[Column, ...] = ()
    primary_key: Optional[Tuple[str, ...]] = None
    foreign_keys: Tuple[ForeignKey, ...] = ()

    @property
    def column_names(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self.columns)

    @property
    def has_primary_key(self) -> bool:
        return bool(self.primary_key)

    @property
    def primary_key_columns(self) -> Tuple[str, ...]:
        return tuple(self.primary_key or ())

    def get_column(self, name: str) -> Optional[Column]:
        for column in self.columns:
            if column.name == name:
                return column
        return None
