"""Property normalizer.

Turns one property definition, in either shorthand or object form, into a
CanonicalPropertySchema. Object-form rules by type category:

  type              -> objectType must be
  -----------------------------------------------
  primitive         -> absent
  list/dictionary/set -> primitive or user-defined
  object            -> user-defined
  linkingObjects    -> user-defined, and 'property' is required
  user-defined      -> rejected (use 'object' or 'linkingObjects')

'property' is only allowed with linkingObjects. Optionality is forced where an
implicit rule applies, and primary keys are always indexed.
"""

from collections.abc import Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from schema_normalizer.schema.errors import (
    PropertySchemaSemanticError,
    PropertySchemaSyntaxError,
    describe_validation_error,
)
from schema_normalizer.schema.models import (
    CanonicalPropertySchema,
    PropertySchema,
    PropertySchemaInfo,
)
from schema_normalizer.schema.shorthand import normalize_property_shorthand
from schema_normalizer.schema.types import (
    COLLECTION_SUFFIX_LENGTH,
    LINKING_OBJECTS_TYPE,
    MIXED_TYPE,
    OBJECT_TYPE,
    OPTIONAL_MARKER,
    has_collection_suffix,
    is_collection,
    is_implicitly_non_optional,
    is_implicitly_optional,
    is_primitive,
    is_user_defined,
)


def normalize_property_schemas(
    object_name: str,
    properties: Mapping[str, Any],
    primary_key: str | None = None,
) -> dict[str, CanonicalPropertySchema]:
    """Normalize every property of an object, in declaration order."""
    return {
        property_name: normalize_property_schema(
            PropertySchemaInfo(
                object_name=object_name,
                property_name=property_name,
                property_schema=definition,
                is_primary_key=primary_key == property_name,
            )
        )
        for property_name, definition in properties.items()
    }


def normalize_property_schema(info: PropertySchemaInfo) -> CanonicalPropertySchema:
    """Transform a property definition into its canonical form.

    Strings are parsed as shorthand; PropertySchema instances and mappings are
    validated as the explicit object form.

    Raises:
        PropertySchemaParseError: If the definition breaks any property rule.
    """
    if isinstance(info.property_schema, str):
        return normalize_property_shorthand(info)
    return normalize_property_object(info)


def normalize_property_object(info: PropertySchemaInfo) -> CanonicalPropertySchema:
    """Transform a property declared with the explicit object form into its canonical form.

    Raises:
        PropertySchemaSyntaxError: If shorthand markers appear in 'type' or 'objectType'.
        PropertySchemaSemanticError: If the combination of fields breaks a category rule.
    """
    schema = _coerce_property_schema(info)
    type_name = schema.type
    object_type = schema.object_type
    linking_property = schema.linking_property
    optional = schema.optional
    indexed = schema.indexed

    if not type_name:
        raise _semantic_error(info, "'type' must be specified.")
    _assert_not_using_shorthand(type_name, info)
    _assert_not_using_shorthand(object_type, info)

    # --- Category rules ---
    # Trigger: 'type' falls into one of the five categories
    # Why: each category constrains what 'objectType' and 'property' may hold
    # Outcome: first violated rule raises, nothing is corrected silently
    if is_primitive(type_name):
        if object_type is not None:
            raise _semantic_error(
                info, f"'objectType' cannot be defined when 'type' is '{type_name}'."
            )
    elif is_collection(type_name):
        if not (is_primitive(object_type) or is_user_defined(object_type)):
            raise _semantic_error(
                info,
                f"A {type_name} must contain only primitive or user-defined types "
                "specified through 'objectType'.",
            )
    elif type_name == OBJECT_TYPE:
        if not is_user_defined(object_type):
            raise _semantic_error(
                info, "A user-defined type must be specified through 'objectType'."
            )
    elif type_name == LINKING_OBJECTS_TYPE:
        if not is_user_defined(object_type):
            raise _semantic_error(
                info, "A user-defined type must be specified through 'objectType'."
            )
        if not linking_property:
            raise _semantic_error(
                info, "The linking object's property name must be specified through 'property'."
            )
    else:
        raise _semantic_error(
            info,
            f"If you meant to define a relationship, use {{ type: 'object', objectType: "
            f"'{type_name}' }} or {{ type: 'linkingObjects', objectType: '{type_name}', "
            f"property: 'The {type_name} property' }}",
        )

    if type_name != LINKING_OBJECTS_TYPE and linking_property is not None:
        raise _semantic_error(
            info, "'property' can only be specified if 'type' is 'linkingObjects'."
        )

    # --- Implicit optionality ---
    if is_implicitly_optional(type_name, object_type):
        if optional is False:
            displayed = (
                "'mixed' types"
                if MIXED_TYPE in (type_name, object_type)
                else "User-defined types as standalone objects and in dictionaries"
            )
            raise _semantic_error(
                info, f"{displayed} are always optional and cannot be made non-optional."
            )
        optional = True
    elif is_implicitly_non_optional(type_name, object_type):
        if optional is True:
            raise _semantic_error(
                info,
                "User-defined types in lists and sets are always non-optional "
                "and cannot be made optional.",
            )
        optional = False

    # --- Primary key indexing ---
    if info.is_primary_key:
        if indexed is False:
            raise _semantic_error(info, "Primary keys must always be indexed.")
        indexed = True

    normalized = CanonicalPropertySchema(
        name=info.property_name,
        type=type_name,
        optional=bool(optional),
        indexed=bool(indexed),
        map_to=schema.map_to or info.property_name,
        object_type=object_type,
        linking_property=linking_property,
        default=schema.default,
    )
    logger.debug(f"Normalized property {info.object_name}.{info.property_name}: {normalized}")
    return normalized


# --- Helper Functions ---


def _coerce_property_schema(info: PropertySchemaInfo) -> PropertySchema:
    """Validate a mapping into a PropertySchema, reporting bad shapes against the property."""
    definition = info.property_schema
    if isinstance(definition, PropertySchema):
        return definition
    if not isinstance(definition, Mapping):
        raise _semantic_error(
            info,
            f"Expected a shorthand string or a property object, got {type(definition).__name__}.",
        )
    try:
        return PropertySchema.model_validate(dict(definition))
    except ValidationError as e:
        problems = describe_validation_error(e)
        raise PropertySchemaSemanticError(
            f"Malformed property object ({problems}).", info.object_name, info.property_name
        ) from e


def _assert_not_using_shorthand(type_name: str | None, info: PropertySchemaInfo) -> None:
    """Reject shorthand markers inside the explicit object form, naming each one found."""
    if not type_name:
        return

    shorthands: list[str] = []
    if has_collection_suffix(type_name):
        shorthands.append(type_name[-COLLECTION_SUFFIX_LENGTH:])
        type_name = type_name[:-COLLECTION_SUFFIX_LENGTH]
    if type_name.endswith(OPTIONAL_MARKER):
        shorthands.append(OPTIONAL_MARKER)

    if shorthands:
        joined = "' and '".join(shorthands)
        raise PropertySchemaSyntaxError(
            f"Cannot use shorthand '{joined}' in 'type' or 'objectType' "
            "when defining property objects.",
            info.object_name,
            info.property_name,
        )


def _semantic_error(info: PropertySchemaInfo, message: str) -> PropertySchemaSemanticError:
    return PropertySchemaSemanticError(message, info.object_name, info.property_name)
