"""Schema normalization for object/property schema definitions.

Accepts object schemas written with shorthand strings ("int?[]", "Person"),
explicit property objects, or classes carrying a static schema, validates
them, and produces one canonical representation.
"""

from schema_normalizer.schema.denormalize import to_raw_object_schema, to_raw_property_schema
from schema_normalizer.schema.errors import (
    ObjectSchemaParseError,
    PropertySchemaParseError,
    PropertySchemaSemanticError,
    PropertySchemaSyntaxError,
    SchemaParseError,
)
from schema_normalizer.schema.models import (
    CanonicalObjectSchema,
    CanonicalPropertySchema,
    ObjectSchema,
    PropertySchema,
    PropertySchemaInfo,
)
from schema_normalizer.schema.objects import normalize_object_schema, normalize_schema
from schema_normalizer.schema.properties import (
    normalize_property_schema,
    normalize_property_schemas,
)
from schema_normalizer.schema.registry import RegisteredSchema, SchemaRegistry, build_registry
from schema_normalizer.schema.shorthand import ShorthandType, parse_shorthand
from schema_normalizer.schema.types import (
    COLLECTION_TYPES,
    PRIMITIVE_TYPES,
    TypeCategory,
    classify_type,
    extract_generic,
    is_collection,
    is_implicitly_non_optional,
    is_implicitly_optional,
    is_primitive,
    is_user_defined,
)

__all__ = [
    # Models
    "CanonicalObjectSchema",
    "CanonicalPropertySchema",
    "ObjectSchema",
    "PropertySchema",
    "PropertySchemaInfo",
    # Errors
    "SchemaParseError",
    "ObjectSchemaParseError",
    "PropertySchemaParseError",
    "PropertySchemaSyntaxError",
    "PropertySchemaSemanticError",
    # Normalizers
    "normalize_schema",
    "normalize_object_schema",
    "normalize_property_schema",
    "normalize_property_schemas",
    # Shorthand
    "ShorthandType",
    "parse_shorthand",
    # Types
    "PRIMITIVE_TYPES",
    "COLLECTION_TYPES",
    "TypeCategory",
    "classify_type",
    "extract_generic",
    "is_primitive",
    "is_collection",
    "is_user_defined",
    "is_implicitly_optional",
    "is_implicitly_non_optional",
    # Registry
    "RegisteredSchema",
    "SchemaRegistry",
    "build_registry",
    # Denormalize
    "to_raw_object_schema",
    "to_raw_property_schema",
]
