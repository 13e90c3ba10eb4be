"""CLI commands for schema-normalizer."""

from schema_normalizer.cli.commands import schema

__all__ = ["schema"]
