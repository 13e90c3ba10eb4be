"""CLI tools for schema-normalizer."""
