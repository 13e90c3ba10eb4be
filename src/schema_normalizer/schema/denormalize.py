"""Convert canonical schemas back into raw definitions.

The raw form always uses the explicit property object form, so normalizing it
again yields the same canonical schema.
"""

from typing import Any

from schema_normalizer.schema.models import CanonicalObjectSchema, CanonicalPropertySchema


def to_raw_property_schema(prop: CanonicalPropertySchema) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "type": prop.type,
        "optional": prop.optional,
        "indexed": prop.indexed,
        "mapTo": prop.map_to,
    }
    if prop.object_type is not None:
        raw["objectType"] = prop.object_type
    if prop.linking_property is not None:
        raw["property"] = prop.linking_property
    if prop.default is not None:
        raw["default"] = prop.default
    return raw


def to_raw_object_schema(schema: CanonicalObjectSchema) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "name": schema.name,
        "asymmetric": schema.asymmetric,
        "embedded": schema.embedded,
        "properties": {
            name: to_raw_property_schema(prop) for name, prop in schema.properties.items()
        },
    }
    if schema.primary_key is not None:
        raw["primaryKey"] = schema.primary_key
    return raw
