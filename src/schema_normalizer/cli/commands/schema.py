"""Schema CLI commands.

Registered as a subcommand group: `schema-normalizer schema normalize FILE`.
The file holds a YAML or JSON list of object definitions (a single object is
accepted too).
"""

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
import yaml
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from schema_normalizer.cli.app import app
from schema_normalizer.schema import CanonicalObjectSchema, SchemaParseError, normalize_schema

console = Console()

schema_app = typer.Typer(help="Schema commands")
app.add_typer(schema_app, name="schema")


def load_definitions(path: Path) -> list[Any]:
    """Load object definitions from a YAML or JSON file.

    JSON is a subset of YAML, so one loader handles both.

    Raises:
        ValueError: If the file is not a list or mapping of definitions.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return [data]
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of object schemas")
    return data


def _print_table(schemas: list[CanonicalObjectSchema]) -> None:
    for schema in schemas:
        flags = []
        if schema.primary_key:
            flags.append(f"primary key: {schema.primary_key}")
        if schema.embedded:
            flags.append("embedded")
        if schema.asymmetric:
            flags.append("asymmetric")
        title = schema.name + (f" ({', '.join(flags)})" if flags else "")

        table = Table(title=title)
        table.add_column("Property", style="cyan")
        table.add_column("Type")
        table.add_column("Object Type")
        table.add_column("Optional", justify="center")
        table.add_column("Indexed", justify="center")
        table.add_column("Mapped To")

        for prop in schema.properties.values():
            table.add_row(
                prop.name,
                prop.type,
                prop.object_type or "",
                "[green]yes[/green]" if prop.optional else "no",
                "[green]yes[/green]" if prop.indexed else "no",
                prop.map_to,
            )

        console.print(table)


@schema_app.command()
def normalize(
    path: Annotated[
        Path,
        typer.Argument(help="YAML or JSON file with object schema definitions", exists=True),
    ],
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
    allow_values_arrays: Optional[bool] = typer.Option(
        None,
        "--allow-values-arrays/--no-allow-values-arrays",
        help="Accept the deprecated array-of-properties shape",
    ),
):
    """Validate object schemas and print their canonical form.

    Exits with code 1 and a message naming the offending object and property
    if any definition is invalid.
    """
    try:
        definitions = load_definitions(path)
        schemas = normalize_schema(definitions, allow_values_arrays=allow_values_arrays)
    except (SchemaParseError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Error normalizing {path}: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps([schema.to_dict() for schema in schemas], indent=2, default=str))
    else:
        _print_table(schemas)
