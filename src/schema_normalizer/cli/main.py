"""Main CLI entry point for schema-normalizer."""  # pragma: no cover

from schema_normalizer.cli.app import app  # pragma: no cover

# Register commands
from schema_normalizer.cli.commands import schema  # noqa: F401  # pragma: no cover

if __name__ == "__main__":  # pragma: no cover
    app()
