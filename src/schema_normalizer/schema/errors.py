"""Typed errors raised while normalizing object and property schemas.

Every error is raised at the point the violated rule is detected and names the
offending object (and property, where there is one) in its message.
"""

from pydantic import ValidationError


class SchemaParseError(ValueError):
    """Raised when a schema cannot be normalized."""


class ObjectSchemaParseError(SchemaParseError):
    """Raised when an object-level rule is violated (name, primary key, flags)."""

    def __init__(self, message: str, object_name: str):
        self.object_name = object_name
        self.detail = message
        super().__init__(f"Invalid object schema '{object_name}': {message}")


class PropertySchemaParseError(SchemaParseError):
    """Raised when a single property definition cannot be normalized."""

    def __init__(self, message: str, object_name: str, property_name: str):
        self.object_name = object_name
        self.property_name = property_name
        self.detail = message
        super().__init__(
            f"Invalid type declaration for property '{property_name}' on '{object_name}': {message}"
        )


class PropertySchemaSyntaxError(PropertySchemaParseError):
    """Raised for malformed shorthand or shorthand used where the object form is required."""


class PropertySchemaSemanticError(PropertySchemaParseError):
    """Raised when an object-form definition breaks a type category rule."""


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into "'field': message" pairs."""
    return "; ".join(
        f"'{'.'.join(str(loc) for loc in detail['loc'])}': {detail['msg']}"
        for detail in error.errors()
    )
