"""Shorthand parser for property type strings.

The shorthand notation packs a type, a collection kind and element optionality
into one string, stripped right to left:

  shorthand := element [ "?" ] [ suffix ]
  suffix    := "[]" | "{}" | "<>"          # list | dictionary | set

Examples:
  "int"       -> int
  "int?"      -> optional int
  "int[]"     -> list of int
  "int?[]"    -> list of optional int
  "Person"    -> to-one relationship with Person (always optional)
  "Person<>"  -> set of Person

A collection itself is never optional ("int[]?" is rejected) and collections
cannot be nested ("int[][]" is rejected).
"""

from dataclasses import dataclass

from loguru import logger

from schema_normalizer.schema.errors import (
    PropertySchemaSemanticError,
    PropertySchemaSyntaxError,
)
from schema_normalizer.schema.models import CanonicalPropertySchema, PropertySchemaInfo
from schema_normalizer.schema.types import (
    COLLECTION_SHORTHAND_TO_NAME,
    COLLECTION_SUFFIX_LENGTH,
    LINKING_OBJECTS_TYPE,
    OBJECT_TYPE,
    OPTIONAL_MARKER,
    has_collection_suffix,
    is_collection,
    is_implicitly_non_optional,
    is_implicitly_optional,
    is_primitive,
)


class ShorthandSyntaxError(ValueError):
    """Raised when a shorthand string does not follow the grammar."""


class ShorthandOptionalityError(ValueError):
    """Raised when a shorthand marks optional a type that can never be optional."""


@dataclass(frozen=True)
class ShorthandType:
    """The pieces of a shorthand string, before classification."""

    element: str
    collection: str | None = None
    optional: bool = False


@dataclass(frozen=True)
class ResolvedShorthand:
    """A classified shorthand: the property type and, if any, its object type."""

    type: str
    object_type: str | None
    optional: bool


def parse_shorthand(text: str) -> ShorthandType:
    """Split a shorthand string into element type, collection kind and optionality.

    Raises:
        ShorthandSyntaxError: If the string is empty, nests collections, or marks
            a collection (rather than its elements) as optional.
    """
    if not text:
        raise ShorthandSyntaxError("The type must be specified.")

    remainder = text
    collection: str | None = None
    optional = False

    # --- Collection suffix ---
    # Trigger: string ends with '[]', '{}' or '<>'
    # Why: the suffix picks list, dictionary or set; only one level is allowed
    # Outcome: collection recorded, suffix stripped
    if has_collection_suffix(remainder):
        suffix = remainder[-COLLECTION_SUFFIX_LENGTH:]
        collection = COLLECTION_SHORTHAND_TO_NAME[suffix]
        remainder = remainder[:-COLLECTION_SUFFIX_LENGTH]
        if not remainder:
            raise ShorthandSyntaxError(
                f"The element type must be specified (Example: 'int{suffix}')"
            )
        if has_collection_suffix(remainder):
            raise ShorthandSyntaxError("Nested collections are not supported.")

    # --- Optionality marker ---
    # Trigger: remaining string ends with '?'
    # Why: '?' binds to the element type, so it must come before any collection suffix
    # Outcome: optional recorded, marker stripped
    if remainder.endswith(OPTIONAL_MARKER):
        optional = True
        remainder = remainder[: -len(OPTIONAL_MARKER)]
        if not remainder:
            raise ShorthandSyntaxError(
                "The type must be specified. (Examples: 'int?' and 'int?[]')"
            )
        if has_collection_suffix(remainder):
            raise ShorthandSyntaxError(
                "Collections cannot be optional. To allow elements of the collection "
                "to be optional, use '?' after the element type. "
                "(Examples: 'int?[]', 'int?{}', and 'int?<>')"
            )

    return ShorthandType(element=remainder, collection=collection, optional=optional)


def resolve_shorthand(parsed: ShorthandType) -> ResolvedShorthand:
    """Classify the element type and apply the implicit optionality rules.

    Raises:
        ShorthandSyntaxError: If the element is a reserved type keyword.
        ShorthandOptionalityError: If the element is marked optional where it can never be.
    """
    element = parsed.element
    type_name = parsed.collection
    object_type: str | None = None

    if is_primitive(element):
        if type_name is not None:
            object_type = element
        else:
            type_name = element
    elif is_collection(element):
        raise ShorthandSyntaxError(
            f"Cannot use the collection name {element}. "
            "(Examples: 'int[]' (list), 'int{}' (dictionary), and 'int<>' (set))"
        )
    elif element == OBJECT_TYPE:
        raise ShorthandSyntaxError(
            "To define a relationship, use either 'MyObjectType' or "
            "{ type: 'object', objectType: 'MyObjectType' }"
        )
    elif element == LINKING_OBJECTS_TYPE:
        raise ShorthandSyntaxError(
            "To define an inverse relationship, use { type: 'linkingObjects', "
            "objectType: 'MyObjectType', property: 'myObjectTypesProperty' }"
        )
    else:
        # User-defined type: a relationship target
        object_type = element
        if type_name is None:
            type_name = OBJECT_TYPE

    optional = parsed.optional
    if is_implicitly_optional(type_name, object_type):
        optional = True
    elif is_implicitly_non_optional(type_name, object_type):
        if optional:
            raise ShorthandOptionalityError(
                "User-defined types in lists and sets are always non-optional and "
                "cannot be made optional. Remove '?' or change the type."
            )
        optional = False

    return ResolvedShorthand(type=type_name, object_type=object_type, optional=optional)


def normalize_property_shorthand(info: PropertySchemaInfo) -> CanonicalPropertySchema:
    """Transform a property declared with shorthand notation into its canonical form.

    Raises:
        PropertySchemaSyntaxError: If the shorthand is malformed.
        PropertySchemaSemanticError: If '?' contradicts an implicit optionality rule.
    """
    text = str(info.property_schema)

    try:
        resolved = resolve_shorthand(parse_shorthand(text))
    except ShorthandSyntaxError as e:
        raise PropertySchemaSyntaxError(str(e), info.object_name, info.property_name) from e
    except ShorthandOptionalityError as e:
        raise PropertySchemaSemanticError(str(e), info.object_name, info.property_name) from e

    logger.debug(
        f"Resolved shorthand '{text}' for {info.object_name}.{info.property_name} "
        f"to type={resolved.type} objectType={resolved.object_type}"
    )

    return CanonicalPropertySchema(
        name=info.property_name,
        type=resolved.type,
        optional=resolved.optional,
        indexed=info.is_primary_key,
        map_to=info.property_name,
        object_type=resolved.object_type,
    )
