"""
Tests for junction table classification and inheritance relationships
"""

from conftest import base_tables, make_table, role_right_table

from schema_analyzer.schema.junction import (
    detect_junction_tables,
    get_children_relationships,
    get_parent_relationship,
    is_inheritance_relationship,
    is_junction_table,
    remove_duplicate_foreign_keys,
)
from schema_analyzer.schema.models import ForeignKey


class TestJunctionDetection:
    """Structural criteria of junction tables"""

    def test_two_columns_composite_primary_key(self):
        """2 columns, both foreign keys, PK on both"""
        tables = base_tables() + [role_right_table()]

        junctions = detect_junction_tables(tables)

        assert [t.name for t in junctions] == ["role_right"]

    def test_three_columns_without_autoincrement_id(self):
        """A third non-key column disqualifies the table"""
        role_right = make_table(
            "role_right",
            ["role_id", "right_id", "label"],
            primary_key=["role_id", "right_id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_three_columns_with_autoincrement_id(self):
        role_right = make_table(
            "role_right",
            ["id", "role_id", "right_id"],
            primary_key=["id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
            autoincrement=["id"],
        )

        junctions = detect_junction_tables(base_tables() + [role_right])

        assert [t.name for t in junctions] == ["role_right"]

    def test_three_columns_id_not_autoincremented(self):
        role_right = make_table(
            "role_right",
            ["id", "role_id", "right_id"],
            primary_key=["id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_four_columns(self):
        role_right = make_table(
            "role_right",
            ["id", "role_id", "right_id", "label"],
            primary_key=["id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
            autoincrement=["id"],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_two_columns_single_column_primary_key(self):
        role_right = make_table(
            "role_right",
            ["role_id", "right_id"],
            primary_key=["role_id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_multi_column_foreign_key(self):
        role_right = make_table(
            "role_right",
            ["role_id", "right_id"],
            primary_key=["role_id", "right_id"],
            foreign_keys=[
                (("role_id", "right_id"), "role", ("id", "right_id")),
                ("right_id", "right"),
            ],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_two_columns_no_primary_key(self):
        role_right = make_table(
            "role_right",
            ["role_id", "right_id"],
            foreign_keys=[("role_id", "role"), ("right_id", "right")],
        )

        assert len(detect_junction_tables(base_tables() + [role_right])) == 1

    def test_three_columns_primary_key_is_foreign_key(self):
        role_right = make_table(
            "role_right",
            ["id", "role_id", "right_id"],
            primary_key=["id"],
            foreign_keys=[("id", "role"), ("right_id", "right")],
            autoincrement=["id"],
        )

        assert detect_junction_tables(base_tables() + [role_right]) == []

    def test_one_foreign_key_only(self):
        table = make_table("role_note", ["role_id", "note"], foreign_keys=[("role_id", "role")])

        assert not is_junction_table(table)

    def test_both_foreign_keys_on_one_column(self):
        """Two foreign keys sharing a column leave the other column unlinked"""
        table = make_table(
            "role_note",
            ["role_id", "note"],
            primary_key=["role_id", "note"],
            foreign_keys=[("role_id", "role"), ("role_id", "right")],
        )

        assert not is_junction_table(table)
        assert detect_junction_tables(base_tables() + [table]) == []

    def test_three_columns_both_foreign_keys_on_one_column(self):
        table = make_table(
            "role_note",
            ["id", "role_id", "note"],
            primary_key=["id"],
            foreign_keys=[("role_id", "role"), ("role_id", "right")],
            autoincrement=["id"],
        )

        assert not is_junction_table(table)

    def test_ignore_referenced_tables(self):
        """A junction table targeted by another foreign key is skipped in referenced mode"""
        audit = make_table(
            "audit",
            ["id", "role_right_id"],
            primary_key=["id"],
            foreign_keys=[(("role_right_id",), "role_right", ("role_id",))],
        )
        tables = base_tables() + [role_right_table(), audit]

        assert [t.name for t in detect_junction_tables(tables)] == ["role_right"]
        assert detect_junction_tables(tables, ignore_referenced_tables=True) == []


class TestInheritance:
    """Foreign keys on the primary key"""

    def test_inheritance_relationship(self, inheritance_schema):
        contact, user = inheritance_schema
        by_id, by_contact_id = user.foreign_keys

        assert is_inheritance_relationship(by_id, user)
        assert not is_inheritance_relationship(by_contact_id, user)

    def test_column_order_is_ignored(self):
        table = make_table(
            "child",
            ["a", "b"],
            primary_key=["a", "b"],
            foreign_keys=[(("b", "a"), "parent", ("b", "a"))],
        )

        assert is_inheritance_relationship(table.foreign_keys[0], table)

    def test_no_primary_key(self):
        table = make_table("child", ["id"], foreign_keys=[("id", "parent")])

        assert not is_inheritance_relationship(table.foreign_keys[0], table)

    def test_parent_and_children(self, inheritance_schema):
        contact, user = inheritance_schema

        assert get_parent_relationship(user).foreign_table == "contact"
        assert get_parent_relationship(contact) is None

        children = get_children_relationships("contact", inheritance_schema)
        assert [fk.local_table for fk in children] == ["user"]
        assert get_children_relationships("user", inheritance_schema) == []


def test_remove_duplicate_foreign_keys():
    """Same target and same local columns collapse to the first occurrence"""
    first = ForeignKey("user", ("contact_id",), "contact", ("id",), name="fk_1")
    duplicate = ForeignKey("user", ("contact_id",), "contact", ("id",), name="fk_2")
    other = ForeignKey("user", ("backup_contact_id",), "contact", ("id",))

    result = remove_duplicate_foreign_keys([first, other, duplicate])

    assert result == [first, other]
    assert result[0].name == "fk_1"
