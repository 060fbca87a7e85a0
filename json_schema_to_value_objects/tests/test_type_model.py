#!/usr/bin/env python3
"""
Tests for the schema parser and the reference resolver.
"""

import pytest

from json_schema_to_value_objects.pipeline.errors import SchemaParseError
from json_schema_to_value_objects.pipeline.type_model import (
    ArrayType,
    IntegerType,
    ObjectType,
    ReferenceType,
    SchemaParser,
    StringType,
    TypeKind,
    parse_schema,
)

PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
        "status": {"enum": ["active", 1]},
        "nickname": {"type": ["string", "null"]},
        "address": {"$ref": "#/definitions/address"},
    },
    "required": ["name", "address"],
    "definitions": {
        "address": {"properties": {"city": {"type": "string"}}, "x-namespace": "shared"},
    },
}


class TestSchemaParser:
    """Tests for SchemaParser"""

    def test_root_object(self):
        """The root schema becomes an object named after the root type"""
        type_set = parse_schema(PERSON_SCHEMA, "person")

        assert len(type_set) == 1
        person = type_set.first()
        assert isinstance(person, ObjectType)
        assert person.name == "person"
        assert person.is_required
        assert list(person.properties) == ["name", "age", "status", "nickname", "address"]

    def test_required_properties(self):
        """Properties listed in "required" are marked as such"""
        properties = parse_schema(PERSON_SCHEMA, "person").first().properties

        assert properties["name"].first().is_required
        assert not properties["age"].first().is_required

    def test_scalar_types(self):
        """Scalar types carry their kind, enums are converted to strings"""
        properties = parse_schema(PERSON_SCHEMA, "person").first().properties

        assert isinstance(properties["name"].first(), StringType)
        assert isinstance(properties["age"].first(), IntegerType)
        status = properties["status"].first()
        assert status.kind == TypeKind.STRING
        assert status.enum == ["active", "1"]

    def test_null_alternative_is_nullable(self):
        """A "null" type makes the remaining types nullable"""
        nickname = parse_schema(PERSON_SCHEMA, "person").first().properties["nickname"]

        assert len(nickname) == 1
        assert nickname.first().is_nullable

    def test_null_alone_is_rejected(self):
        with pytest.raises(SchemaParseError):
            parse_schema({"type": "null"}, "nothing")

    def test_unknown_type_is_rejected(self):
        with pytest.raises(SchemaParseError, match='Unknown type "date"'):
            parse_schema({"type": "date"}, "day")

    def test_untyped_schema_is_rejected(self):
        with pytest.raises(SchemaParseError):
            parse_schema({"description": "anything"}, "anything")

    def test_several_types(self):
        """Each listed type becomes an alternative of the type set"""
        type_set = parse_schema({"type": ["integer", "string"]}, "value")

        assert [t.kind for t in type_set] == [TypeKind.INTEGER, TypeKind.STRING]

    def test_array_items_are_named_after_the_array(self):
        """Inline items are named "<array>_item" unless they carry a title"""
        tags = parse_schema({"type": "array", "items": {"type": "string"}}, "tags").first()
        assert isinstance(tags, ArrayType)
        assert tags.items[0].first().name == "tags_item"

        lines = parse_schema({"type": "array", "items": {"type": "object", "title": "line"}}, "lines").first()
        assert lines.items[0].first().name == "line"

    def test_tuple_items(self):
        """A list of item schemas gives one type set each"""
        pair = parse_schema({"type": "array", "items": [{"type": "string"}, {"type": "integer"}]}, "pair").first()

        assert [items.first().name for items in pair.items] == ["pair_item_0", "pair_item_1"]

    def test_custom_keys(self):
        """Unknown keys are custom metadata; x- prefixes are stripped"""
        schema = {"type": "string", "namespace": "shared", "x-format-hint": "email"}
        text = parse_schema(schema, "email").first()

        assert text.custom == {"namespace": "shared", "format-hint": "email"}
        assert text.custom_namespace() == "shared"

    def test_non_object_schema_is_rejected(self):
        with pytest.raises(SchemaParseError):
            SchemaParser().parse(["not", "a", "schema"], "list")


class TestReferenceResolver:
    """Tests for lazy $ref resolution"""

    def test_reference_is_lazy(self):
        """References are parsed into ReferenceType and resolved on demand"""
        address = parse_schema(PERSON_SCHEMA, "person").first().properties["address"].first()

        assert isinstance(address, ReferenceType)
        assert address.is_required
        assert address.extract_name_from_reference() == "address"

        resolved = address.resolved_type().first()
        assert isinstance(resolved, ObjectType)
        assert resolved.name == "address"
        assert resolved.custom_namespace() == "shared"

    def test_resolution_is_cached(self):
        """Resolving the same pointer twice returns the same type set"""
        parser = SchemaParser()
        parser.parse(PERSON_SCHEMA, "person")

        assert parser.resolver.resolve("#/definitions/address") is parser.resolver.resolve("#/definitions/address")

    def test_root_reference(self):
        """"#" resolves to the root schema under the root name"""
        parser = SchemaParser()
        parser.parse(PERSON_SCHEMA, "person")

        assert parser.resolver.resolve("#").first().name == "person"

    def test_unresolvable_references(self):
        """Missing and external pointers resolve to None"""
        parser = SchemaParser()
        parser.parse(PERSON_SCHEMA, "person")

        assert parser.resolver.resolve("#/definitions/missing") is None
        assert parser.resolver.resolve("other.json#/definitions/address") is None

    def test_escaped_pointer(self):
        """JSON pointer escapes are decoded"""
        schema = {"definitions": {"a/b": {"type": "string"}}, "$ref": "#/definitions/a~1b"}
        parser = SchemaParser()
        reference = parser.parse(schema, "root").first()

        assert reference.resolved_type().first().name == "a/b"


if __name__ == "__main__":
    pytest.main([__file__])
