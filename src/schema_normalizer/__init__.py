"""schema-normalizer - canonical object/property schemas from shorthand and object definitions."""

__version__ = "0.1.0"
