"""Data model for raw and canonical object schemas.

Raw definitions are what callers author. They are pydantic models so plain
dicts (e.g. loaded from YAML or JSON) validate into the same shape:

  ObjectSchema(name="Person", primaryKey="_id", properties={
      "_id": "objectId",
      "name": "string",
      "friends": "Person[]",
      "owner": {"type": "linkingObjects", "objectType": "Dog", "property": "owner"},
  })

Canonical schemas are what the normalizer produces. They are frozen dataclasses
with every implicit value resolved. Optional attributes (object type, linking
property, default) are None when absent and are left out of `to_dict()`.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# --- Raw Definitions ---


class PropertySchema(BaseModel):
    """Explicit object form of a property definition.

    No rules are enforced here beyond value shapes; the property normalizer
    validates the combination of fields. Validation is strict, so "no" or 1 is
    rejected where a bool is expected.
    """

    model_config = ConfigDict(
        populate_by_name=True, extra="forbid", frozen=True, strict=True
    )

    type: str = ""
    object_type: Optional[str] = Field(None, alias="objectType")
    linking_property: Optional[str] = Field(None, alias="property")
    optional: Optional[bool] = None
    indexed: Optional[bool] = None
    map_to: Optional[str] = Field(None, alias="mapTo")
    default: Any = None


# A property is declared either with a shorthand string ("int?[]") or the object form.
# Mappings are accepted and validated into PropertySchema by the property normalizer.
PropertyDefinition = Union[str, PropertySchema, dict[str, Any]]


class ObjectSchema(BaseModel):
    """A plain object definition as authored by the caller."""

    model_config = ConfigDict(
        populate_by_name=True, extra="forbid", frozen=True, strict=True
    )

    name: str = ""
    primary_key: Optional[str] = Field(None, alias="primaryKey")
    asymmetric: bool = False
    embedded: bool = False
    properties: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class PropertySchemaInfo:
    """A property definition together with the context needed to normalize it."""

    object_name: str
    property_name: str
    property_schema: PropertyDefinition
    is_primary_key: bool = False


# --- Canonical Schemas ---


@dataclass(frozen=True)
class CanonicalPropertySchema:
    """A fully resolved property: no shorthand, no implicit values."""

    name: str
    type: str
    optional: bool
    indexed: bool
    map_to: str
    object_type: str | None = None
    linking_property: str | None = None
    default: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the external key names, omitting absent attributes."""
        result: dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "optional": self.optional,
            "indexed": self.indexed,
            "mapTo": self.map_to,
        }
        if self.object_type is not None:
            result["objectType"] = self.object_type
        if self.linking_property is not None:
            result["property"] = self.linking_property
        if self.default is not None:
            result["default"] = self.default
        return result


@dataclass(frozen=True)
class CanonicalObjectSchema:
    """A fully resolved object schema.

    `constructor` is the class the definition was read from, if any. It is kept
    for later lookup only and never invoked; it takes no part in equality.

    `properties` is copied into a read-only mapping on construction.
    """

    name: str
    properties: Mapping[str, CanonicalPropertySchema]
    primary_key: str | None = None
    asymmetric: bool = False
    embedded: bool = False
    constructor: type | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def __hash__(self) -> int:
        return hash(
            (
                self.name,
                frozenset(self.properties.items()),
                self.primary_key,
                self.asymmetric,
                self.embedded,
            )
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"name": self.name}
        if self.primary_key is not None:
            result["primaryKey"] = self.primary_key
        result["asymmetric"] = self.asymmetric
        result["embedded"] = self.embedded
        result["properties"] = {
            name: prop.to_dict() for name, prop in self.properties.items()
        }
        return result
