from typing import Optional

import typer

from schema_normalizer.config import get_config
from schema_normalizer.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import schema_normalizer

        typer.echo(f"schema-normalizer version: {schema_normalizer.__version__}")
        raise typer.Exit()


app = typer.Typer(name="schema-normalizer")


@app.callback()
def app_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (defaults to SCHEMA_NORMALIZER_LOG_LEVEL or INFO)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Schema normalizer - validate object schemas and print their canonical form."""
    setup_logging(log_level or get_config().log_level)
