"""Type classifier for property type names.

Every non-empty type name falls into exactly one category:

  Category          -> Names
  -----------------------------------------------
  primitive         -> bool, int, float, double, decimal128, objectId,
                       string, data, date, mixed, uuid
  collection        -> list, dictionary, set
  object            -> object (to-one relationship)
  linking objects   -> linkingObjects (inverse relationship)
  user-defined      -> anything else (a relationship target)

Both the shorthand parser and the object-form validator branch on these
predicates, so the two paths always agree on what a name means.
"""

from enum import Enum


PRIMITIVE_TYPES = frozenset(
    {
        "bool",
        "int",
        "float",
        "double",
        "decimal128",
        "objectId",
        "string",
        "data",
        "date",
        "mixed",
        "uuid",
    }
)

COLLECTION_TYPES = frozenset({"list", "dictionary", "set"})

OBJECT_TYPE = "object"
LINKING_OBJECTS_TYPE = "linkingObjects"
MIXED_TYPE = "mixed"

COLLECTION_SHORTHAND_TO_NAME = {
    "[]": "list",
    "{}": "dictionary",
    "<>": "set",
}

COLLECTION_SUFFIX_LENGTH = 2
OPTIONAL_MARKER = "?"


class TypeCategory(str, Enum):
    """The closed set of categories a type name can belong to."""

    PRIMITIVE = "primitive"
    COLLECTION = "collection"
    OBJECT = "object"
    LINKING_OBJECTS = "linkingObjects"
    USER_DEFINED = "user-defined"


def is_primitive(type_name: str | None) -> bool:
    return type_name in PRIMITIVE_TYPES


def is_collection(type_name: str | None) -> bool:
    return type_name in COLLECTION_TYPES


def is_user_defined(type_name: str | None) -> bool:
    """A user-defined name is any non-empty name that is not a reserved type keyword."""
    if not type_name:
        return False
    return not (
        is_primitive(type_name)
        or is_collection(type_name)
        or type_name == OBJECT_TYPE
        or type_name == LINKING_OBJECTS_TYPE
    )


def classify_type(type_name: str | None) -> TypeCategory:
    """Classify a type name into its category.

    Raises:
        ValueError: If the type name is empty.
    """
    if not type_name:
        raise ValueError("Cannot classify an empty type name")
    if is_primitive(type_name):
        return TypeCategory.PRIMITIVE
    if is_collection(type_name):
        return TypeCategory.COLLECTION
    if type_name == OBJECT_TYPE:
        return TypeCategory.OBJECT
    if type_name == LINKING_OBJECTS_TYPE:
        return TypeCategory.LINKING_OBJECTS
    return TypeCategory.USER_DEFINED


def has_collection_suffix(text: str | None) -> bool:
    """Check whether a string ends with '[]', '{}' or '<>'."""
    if not text:
        return False
    return text[-COLLECTION_SUFFIX_LENGTH:] in COLLECTION_SHORTHAND_TO_NAME


# --- Implicit optionality ---


def is_implicitly_optional(type_name: str, object_type: str | None) -> bool:
    """Whether a property is always nullable regardless of what the caller asked for.

    'mixed' values, to-one relationships and dictionaries of objects can always hold null.
    """
    return (
        type_name == MIXED_TYPE
        or object_type == MIXED_TYPE
        or type_name == OBJECT_TYPE
        or (type_name == "dictionary" and is_user_defined(object_type))
    )


def is_implicitly_non_optional(type_name: str, object_type: str | None) -> bool:
    """Whether a property can never be nullable (lists, sets and inverse links of objects)."""
    return type_name in ("list", "set", LINKING_OBJECTS_TYPE) and is_user_defined(object_type)


def extract_generic(type_name: str) -> tuple[str, str | None]:
    """Split a generic notation into its base and type argument.

    Examples:
        "list<int>"  -> ("list", "int")
        "int"        -> ("int", None)
        "list<int"   -> ("list", "int")

    An unterminated "<" takes the rest of the string as the argument. It is
    never folded back into the base, so the result is not "list<".
    """
    bracket_start = type_name.find("<")
    if bracket_start == -1:
        return type_name, None
    bracket_end = type_name.find(">", bracket_start)
    if bracket_end == -1:
        return type_name[:bracket_start], type_name[bracket_start + 1 :]
    return type_name[:bracket_start], type_name[bracket_start + 1 : bracket_end]
