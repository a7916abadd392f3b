"""
Ambiguity reporting

Renders cheapest paths as text so a human can pick the intended route
(and then steer the search with cost overrides).

    role <--(role_id)-- right
    role <=(role_right)=> right
"""

from typing import List, Sequence

from schema_analyzer.graph.model import Edge, ForeignKeyEdge, JunctionEdge
from schema_analyzer.utils.errors import SchemaAnalyzerError


def describe_path(path: Sequence[Edge], source: str) -> str:
    """
    Textual representation of a path starting at ``source``.

    Foreign key hops point toward the referenced table; junction hops are
    shown with the junction table name.
    """
    current = source
    text = current

    for edge in path:
        kind = edge.kind
        if isinstance(kind, ForeignKeyEdge):
            fk = kind.fk
            if fk.foreign_table == current:
                current = fk.local_table
                is_forward = False
            else:
                current = fk.foreign_table
                is_forward = True

            arrow = f"--({fk.column_key})--"
            text += " " + ("" if is_forward else "<") + arrow + (">" if is_forward else "") + " "
            text += current
        elif isinstance(kind, JunctionEdge):
            if kind.fk_a.foreign_table == current:
                current = kind.fk_b.foreign_table
            else:
                current = kind.fk_a.foreign_table
            text += f" <=({kind.table.name})=> {current}"
        else:
            raise SchemaAnalyzerError(f"Unexpected edge kind: {kind!r}")

    return text


def format_ambiguity_message(paths: List[List[Edge]], source: str, destination: str) -> str:
    """Multi-line description of every tied path"""
    text_paths = [
        f"Path {i}: {describe_path(path, source)}"
        for i, path in enumerate(paths, start=1)
    ]
    message = (
        f"There are many possible shortest paths between table '{source}' "
        f"and table '{destination}'\n\n"
    )
    return message + "\n\n".join(text_paths)
