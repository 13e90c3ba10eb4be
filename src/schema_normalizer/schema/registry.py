"""Registry of canonical schemas keyed by object name.

The registry associates each canonical schema with the class it was read from,
so consumers can later look up which class to instantiate for an object type.
Classes are held by weak reference: the registry never keeps a class alive.
"""

import weakref
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import Any, Callable

from loguru import logger

from schema_normalizer.schema.errors import SchemaParseError
from schema_normalizer.schema.models import CanonicalObjectSchema
from schema_normalizer.schema.objects import ObjectDefinition, normalize_schema


@dataclass(frozen=True)
class RegisteredSchema:
    """A canonical schema and a weak reference to its originating class, if any."""

    schema: CanonicalObjectSchema
    _constructor_ref: Callable[[], type | None] | None = field(default=None, repr=False)

    @property
    def constructor(self) -> type | None:
        """The originating class, or None if there was none or it has been collected."""
        if self._constructor_ref is None:
            return None
        return self._constructor_ref()


class SchemaRegistry:
    """Lookup of canonical object schemas by name."""

    def __init__(self, schemas: Iterable[CanonicalObjectSchema] = ()):
        self._entries: dict[str, RegisteredSchema] = {}
        self.register(schemas)

    def register(self, schemas: Iterable[CanonicalObjectSchema]) -> None:
        """Add canonical schemas to the registry.

        Raises:
            SchemaParseError: If an object name is already registered.
        """
        for schema in schemas:
            if schema.name in self._entries:
                raise SchemaParseError(
                    f"Object schema '{schema.name}' is already registered."
                )
            # The stored schema drops its strong reference to the class
            self._entries[schema.name] = RegisteredSchema(
                schema=replace(schema, constructor=None),
                _constructor_ref=_weak_constructor(schema.constructor),
            )
            logger.debug(f"Registered object schema '{schema.name}'")

    def get(self, name: str) -> CanonicalObjectSchema | None:
        """Return the registered schema. Use constructor_for() for its class."""
        entry = self._entries.get(name)
        return entry.schema if entry else None

    def constructor_for(self, name: str) -> type | None:
        entry = self._entries.get(name)
        return entry.constructor if entry else None

    def names(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: Any) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CanonicalObjectSchema]:
        return (entry.schema for entry in self._entries.values())


def build_registry(
    definitions: Iterable[ObjectDefinition],
    *,
    allow_values_arrays: bool | None = None,
) -> SchemaRegistry:
    """Normalize object definitions and register the results."""
    return SchemaRegistry(normalize_schema(definitions, allow_values_arrays=allow_values_arrays))


def _weak_constructor(constructor: type | None) -> Callable[[], type | None] | None:
    if constructor is None:
        return None
    return weakref.ref(constructor)
