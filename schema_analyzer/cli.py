"""Command line entry point."""

from __future__ import annotations

import sys
from typing import Annotated, Dict, List, Optional, Tuple

import typer

from schema_analyzer.analyzer import SchemaAnalyzer
from schema_analyzer.config.settings import DatabaseConfig
from schema_analyzer.infra.database import get_engine
from schema_analyzer.schema.provider import EngineSchemaProvider
from schema_analyzer.utils.errors import SchemaAnalyzerError
from schema_analyzer.utils.logger import setup_logger

app = typer.Typer(
    name="schema-analyzer",
    help="Find junction tables and the shortest join path between two tables.",
    no_args_is_help=True,
)

UrlOption = Annotated[
    Optional[str],
    typer.Option("--url", help="Database URL (defaults to SCHEMA_ANALYZER_DATABASE_URL)"),
]
SchemaOption = Annotated[
    Optional[str],
    typer.Option("--schema", help="Database schema to reflect"),
]


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Console log level"),
    ] = None,
) -> None:
    setup_logger(level=log_level, sink=sys.stderr)


def _get_analyzer(url: Optional[str], schema: Optional[str]) -> SchemaAnalyzer:
    config = DatabaseConfig()
    engine = get_engine(config, url=url)
    return SchemaAnalyzer(EngineSchemaProvider(engine, schema or config.schema))


def _fail(error: SchemaAnalyzerError) -> None:
    typer.echo(str(error), err=True)
    raise typer.Exit(1)


def parse_fk_cost(value: str) -> Tuple[str, str, float]:
    """Parse ``table.col1,col2=cost``."""
    target, _, cost = value.rpartition("=")
    table, _, columns = target.partition(".")
    if not table or not columns or not cost:
        raise typer.BadParameter(f"Expected table.column=cost, got '{value}'")
    try:
        return table, columns, float(cost)
    except ValueError:
        raise typer.BadParameter(f"Invalid cost in '{value}'") from None


def parse_table_cost(value: str) -> Tuple[str, float]:
    """Parse ``table=modifier``."""
    table, _, modifier = value.rpartition("=")
    if not table or not modifier:
        raise typer.BadParameter(f"Expected table=modifier, got '{value}'")
    try:
        return table, float(modifier)
    except ValueError:
        raise typer.BadParameter(f"Invalid modifier in '{value}'") from None


@app.command()
def junctions(
    url: UrlOption = None,
    schema: SchemaOption = None,
    ignore_referenced: Annotated[
        bool,
        typer.Option("--ignore-referenced", help="Skip junction tables referenced by a foreign key"),
    ] = False,
) -> None:
    """List the junction (many-to-many) tables of the schema."""
    analyzer = _get_analyzer(url, schema)
    for table in analyzer.detect_junction_tables(ignore_referenced):
        typer.echo(table.name)


@app.command()
def path(
    from_table: Annotated[str, typer.Argument(help="Starting table")],
    to_table: Annotated[str, typer.Argument(help="Target table")],
    url: UrlOption = None,
    schema: SchemaOption = None,
    fk_cost: Annotated[
        Optional[List[str]],
        typer.Option("--fk-cost", help="Foreign key weight override: table.column=cost"),
    ] = None,
    table_cost: Annotated[
        Optional[List[str]],
        typer.Option("--table-cost", help="Table weight modifier: table=modifier"),
    ] = None,
) -> None:
    """Print the foreign keys joining FROM_TABLE to TO_TABLE."""
    analyzer = _get_analyzer(url, schema)

    for value in fk_cost or []:
        table, columns, cost = parse_fk_cost(value)
        analyzer.set_foreign_key_cost(table, columns, cost)

    modifiers: Dict[str, float] = dict(parse_table_cost(v) for v in table_cost or [])
    if modifiers:
        analyzer.set_table_cost_modifiers(modifiers)

    result = analyzer.find_path(from_table, to_table)
    if not result.ok:
        _fail(result.error)

    for fk in result.foreign_keys:
        typer.echo(str(fk))


@app.command()
def parent(
    table: Annotated[str, typer.Argument(help="Table name")],
    url: UrlOption = None,
    schema: SchemaOption = None,
) -> None:
    """Print the inheritance foreign key of TABLE, if any."""
    analyzer = _get_analyzer(url, schema)
    try:
        fk = analyzer.get_parent_relationship(table)
    except SchemaAnalyzerError as e:
        _fail(e)
    if fk is not None:
        typer.echo(str(fk))


@app.command()
def children(
    table: Annotated[str, typer.Argument(help="Table name")],
    url: UrlOption = None,
    schema: SchemaOption = None,
) -> None:
    """Print the inheritance foreign keys of tables extending TABLE."""
    analyzer = _get_analyzer(url, schema)
    try:
        fks = analyzer.get_children_relationships(table)
    except SchemaAnalyzerError as e:
        _fail(e)
    for fk in fks:
        typer.echo(str(fk))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
