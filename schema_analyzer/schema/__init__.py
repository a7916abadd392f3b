"""
Schema metadata - models, providers and junction classification
"""

from schema_analyzer.schema.models import Column, ForeignKey, Table
from schema_analyzer.schema.junction import (
    detect_junction_tables,
    is_junction_table,
    is_table_referenced,
    is_inheritance_relationship,
    get_parent_relationship,
    get_children_relationships,
    remove_duplicate_foreign_keys,
)
from schema_analyzer.schema.provider import (
    SchemaSnapshot,
    SchemaProvider,
    StaticSchemaProvider,
    MetadataSchemaProvider,
    EngineSchemaProvider,
    table_from_sqlalchemy,
)

__all__ = [
    "Column",
    "ForeignKey",
    "Table",
    "detect_junction_tables",
    "is_junction_table",
    "is_table_referenced",
    "is_inheritance_relationship",
    "get_parent_relationship",
    "get_children_relationships",
    "remove_duplicate_foreign_keys",
    "SchemaSnapshot",
    "SchemaProvider",
    "StaticSchemaProvider",
    "MetadataSchemaProvider",
    "EngineSchemaProvider",
    "table_from_sqlalchemy",
]
