"""Tests for schema_normalizer.schema.denormalize -- canonical schemas back to raw form."""

from schema_normalizer.schema.denormalize import to_raw_object_schema, to_raw_property_schema
from schema_normalizer.schema.objects import normalize_object_schema, normalize_schema
from schema_normalizer.schema.models import CanonicalPropertySchema


SCHEMAS = [
    {
        "name": "Person",
        "primaryKey": "_id",
        "properties": {
            "_id": "objectId",
            "name": {"type": "string", "mapTo": "full_name", "default": "anonymous"},
            "nicknames": "string?<>",
            "friends": "Person[]",
            "pets": "Dog{}",
            "best_friend": "Person",
            "extra": "mixed",
            "dogs": {"type": "linkingObjects", "objectType": "Dog", "property": "owner"},
        },
    },
    {"name": "Dog", "embedded": True, "properties": {"name": "string", "owner": "Person"}},
]


class TestToRaw:
    def test_property_uses_object_form(self):
        prop = CanonicalPropertySchema(
            name="tags", type="list", optional=True, indexed=False, map_to="tags", object_type="string"
        )
        assert to_raw_property_schema(prop) == {
            "type": "list",
            "objectType": "string",
            "optional": True,
            "indexed": False,
            "mapTo": "tags",
        }

    def test_object_omits_absent_primary_key(self):
        raw = to_raw_object_schema(normalize_object_schema(SCHEMAS[1]))
        assert "primaryKey" not in raw
        assert raw["embedded"] is True


class TestIdempotence:
    def test_normalizing_raw_form_is_identity(self):
        canonical = normalize_schema(SCHEMAS)
        renormalized = normalize_schema([to_raw_object_schema(schema) for schema in canonical])
        assert renormalized == canonical

    def test_serialized_forms_match(self):
        canonical = normalize_schema(SCHEMAS)
        renormalized = normalize_schema([to_raw_object_schema(schema) for schema in canonical])
        assert [s.to_dict() for s in renormalized] == [s.to_dict() for s in canonical]
