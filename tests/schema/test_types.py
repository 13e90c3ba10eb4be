"""Tests for schema_normalizer.schema.types -- type classification and implicit rules."""

import pytest

from schema_normalizer.schema.types import (
    COLLECTION_TYPES,
    PRIMITIVE_TYPES,
    TypeCategory,
    classify_type,
    extract_generic,
    has_collection_suffix,
    is_collection,
    is_implicitly_non_optional,
    is_implicitly_optional,
    is_primitive,
    is_user_defined,
)


# --- classify_type ---


class TestClassifyType:
    def test_primitives(self):
        for name in PRIMITIVE_TYPES:
            assert classify_type(name) is TypeCategory.PRIMITIVE

    def test_collections(self):
        for name in COLLECTION_TYPES:
            assert classify_type(name) is TypeCategory.COLLECTION

    def test_relationship_keywords(self):
        assert classify_type("object") is TypeCategory.OBJECT
        assert classify_type("linkingObjects") is TypeCategory.LINKING_OBJECTS

    def test_anything_else_is_user_defined(self):
        assert classify_type("Person") is TypeCategory.USER_DEFINED
        assert classify_type("custom") is TypeCategory.USER_DEFINED

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            classify_type("")
        with pytest.raises(ValueError):
            classify_type(None)

    def test_categories_are_disjoint(self):
        names = list(PRIMITIVE_TYPES) + list(COLLECTION_TYPES) + ["object", "linkingObjects", "Dog"]
        for name in names:
            matches = [
                is_primitive(name),
                is_collection(name),
                name == "object",
                name == "linkingObjects",
                is_user_defined(name),
            ]
            assert matches.count(True) == 1, name


class TestIsUserDefined:
    def test_none_and_empty(self):
        assert is_user_defined(None) is False
        assert is_user_defined("") is False

    def test_reserved_words(self):
        assert is_user_defined("object") is False
        assert is_user_defined("linkingObjects") is False
        assert is_user_defined("list") is False
        assert is_user_defined("int") is False

    def test_case_sensitive(self):
        # Type keywords are case sensitive; "Int" names a user type
        assert is_user_defined("Int") is True
        assert is_user_defined("ObjectId") is True


class TestHasCollectionSuffix:
    def test_suffixes(self):
        assert has_collection_suffix("int[]") is True
        assert has_collection_suffix("int{}") is True
        assert has_collection_suffix("int<>") is True

    def test_no_suffix(self):
        assert has_collection_suffix("int") is False
        assert has_collection_suffix("int?") is False
        assert has_collection_suffix("") is False
        assert has_collection_suffix(None) is False


# --- implicit optionality ---


class TestImplicitOptionality:
    def test_mixed_is_implicitly_optional(self):
        assert is_implicitly_optional("mixed", None) is True
        assert is_implicitly_optional("list", "mixed") is True
        assert is_implicitly_optional("dictionary", "mixed") is True

    def test_object_is_implicitly_optional(self):
        assert is_implicitly_optional("object", "Person") is True

    def test_dictionary_of_objects_is_implicitly_optional(self):
        assert is_implicitly_optional("dictionary", "Person") is True
        assert is_implicitly_optional("dictionary", "int") is False

    def test_lists_and_sets_of_objects_are_implicitly_non_optional(self):
        assert is_implicitly_non_optional("list", "Person") is True
        assert is_implicitly_non_optional("set", "Person") is True
        assert is_implicitly_non_optional("linkingObjects", "Person") is True

    def test_primitive_collections_are_neither(self):
        for collection in ("list", "set", "dictionary"):
            assert is_implicitly_optional(collection, "int") is False
            assert is_implicitly_non_optional(collection, "int") is False

    def test_at_most_one_rule_holds(self):
        types = list(PRIMITIVE_TYPES) + list(COLLECTION_TYPES) + ["object", "linkingObjects"]
        object_types = [None, "Person"] + list(PRIMITIVE_TYPES)
        for type_name in types:
            for object_type in object_types:
                both = is_implicitly_optional(type_name, object_type) and (
                    is_implicitly_non_optional(type_name, object_type)
                )
                assert not both, (type_name, object_type)


# --- extract_generic ---


class TestExtractGeneric:
    def test_generic(self):
        assert extract_generic("list<int>") == ("list", "int")

    def test_plain(self):
        assert extract_generic("int") == ("int", None)

    def test_unterminated(self):
        assert extract_generic("list<int") == ("list", "int")
