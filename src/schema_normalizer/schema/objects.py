"""Object and schema normalizer.

Accepts object definitions in any of the permitted input shapes:

  1. A class with a static `schema` attribute  -> unwrapped, class recorded
  2. An ObjectSchema model                     -> used as is
  3. A mapping (e.g. loaded from YAML/JSON)    -> validated into ObjectSchema

and produces CanonicalObjectSchema values. Object-level rules (name, primary
key, asymmetric/embedded) are checked before any property is normalized.
Normalization is fail-fast: the first violation raises.
"""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from loguru import logger
from pydantic import ValidationError

from schema_normalizer.config import get_config
from schema_normalizer.schema.errors import (
    ObjectSchemaParseError,
    SchemaParseError,
    describe_validation_error,
)
from schema_normalizer.schema.models import CanonicalObjectSchema, ObjectSchema
from schema_normalizer.schema.properties import normalize_property_schemas


# An object definition: a class exposing `schema`, an ObjectSchema, or a plain mapping.
ObjectDefinition = type | ObjectSchema | Mapping[str, Any]


def normalize_schema(
    definitions: Iterable[ObjectDefinition],
    *,
    allow_values_arrays: bool | None = None,
) -> list[CanonicalObjectSchema]:
    """Transform a sequence of object definitions into canonical schemas, keeping their order.

    Args:
        definitions: Object definitions in any accepted shape.
        allow_values_arrays: Accept the deprecated array-of-properties shape.
            None defers to SchemaNormalizerConfig.

    Raises:
        SchemaParseError: On the first definition that breaks a rule.
    """
    if allow_values_arrays is None:
        allow_values_arrays = get_config().allow_values_arrays

    return [
        normalize_object_schema(definition, allow_values_arrays=allow_values_arrays)
        for definition in definitions
    ]


def normalize_object_schema(
    definition: ObjectDefinition,
    *,
    allow_values_arrays: bool | None = None,
) -> CanonicalObjectSchema:
    """Transform a single object definition into its canonical form.

    Raises:
        SchemaParseError: If a class has no static schema, or the deprecated
            values-array shape is used while disabled.
        ObjectSchemaParseError: If an object-level rule is violated.
        PropertySchemaParseError: If any property definition is invalid.
    """
    if allow_values_arrays is None:
        allow_values_arrays = get_config().allow_values_arrays

    # --- Class-style input ---
    # Trigger: definition is a class carrying a static schema
    # Why: the class is only a holder; its schema is a plain definition
    # Outcome: normalize the schema, then record the class on the result
    if isinstance(definition, type):
        static_schema = getattr(definition, "schema", None)
        # pydantic models expose a `schema` classmethod, which is not a definition
        if not isinstance(static_schema, (ObjectSchema, Mapping)):
            raise SchemaParseError("A static schema must be specified on this class.")
        canonical = normalize_object_schema(
            static_schema, allow_values_arrays=allow_values_arrays
        )
        return replace(canonical, constructor=definition)

    schema = _coerce_object_schema(definition, allow_values_arrays)
    name = schema.name
    primary_key = schema.primary_key or None

    if not name:
        raise ObjectSchemaParseError("'name' must be specified.", "")
    if primary_key is not None and primary_key not in schema.properties:
        raise ObjectSchemaParseError(
            f"'{primary_key}' is set as the primary key field but was not found in 'properties'.",
            name,
        )
    if schema.asymmetric and schema.embedded:
        raise ObjectSchemaParseError("Cannot be both asymmetric and embedded.", name)

    logger.debug(f"Normalizing object schema '{name}' ({len(schema.properties)} properties)")

    return CanonicalObjectSchema(
        name=name,
        properties=normalize_property_schemas(name, schema.properties, primary_key),
        primary_key=primary_key,
        asymmetric=schema.asymmetric,
        embedded=schema.embedded,
    )


# --- Helper Functions ---


def _coerce_object_schema(
    definition: ObjectSchema | Mapping[str, Any],
    allow_values_arrays: bool,
) -> ObjectSchema:
    """Validate a mapping into an ObjectSchema, rewriting the values-array shape if allowed."""
    if isinstance(definition, ObjectSchema):
        return definition
    if not isinstance(definition, Mapping):
        raise SchemaParseError(
            f"Expected a class, an ObjectSchema or a mapping, got {type(definition).__name__}."
        )

    raw = dict(definition)
    properties = raw.get("properties")

    # --- Deprecated values-array shape ---
    # Trigger: 'properties' is a list of {name, ...} items
    # Why: older schemas listed properties instead of mapping them by name
    # Outcome: rewritten into a mapping when allowed, rejected otherwise
    if isinstance(properties, list):
        if not allow_values_arrays:
            raise SchemaParseError(
                "Array of properties are no longer supported. Use a mapping instead."
            )
        logger.warning(
            f"Object schema '{raw.get('name', '')}' uses a deprecated array of properties"
        )
        raw["properties"] = _properties_from_values_array(raw.get("name", ""), properties)

    try:
        return ObjectSchema.model_validate(raw)
    except ValidationError as e:
        problems = describe_validation_error(e)
        raise ObjectSchemaParseError(
            f"Malformed object schema ({problems}).", str(raw.get("name", ""))
        ) from e


def _properties_from_values_array(object_name: str, items: list[Any]) -> dict[str, Any]:
    """Build the properties mapping from a list of property objects carrying a 'name'."""
    properties: dict[str, Any] = {}
    for item in items:
        if not isinstance(item, Mapping) or not item.get("name"):
            raise ObjectSchemaParseError(
                "Every entry in an array of properties must be an object with a 'name'.",
                object_name,
            )
        rest = {key: value for key, value in item.items() if key != "name"}
        properties[item["name"]] = rest
    return properties
