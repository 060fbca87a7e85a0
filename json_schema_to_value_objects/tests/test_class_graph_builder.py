#!/usr/bin/env python3
"""
Tests for the class graph builder.
"""

import logging

import pytest

from json_schema_to_value_objects.pipeline import ClassGraphBuilder, ClassKind, parse_schema
from json_schema_to_value_objects.pipeline.errors import UnresolvedReferenceError

ORDER_SCHEMA = {
    "type": "object",
    "properties": {
        "lines": {"type": "array", "items": {"type": "object", "properties": {}}},
    },
}

ADDRESS_SCHEMA = {
    "type": "object",
    "properties": {
        "billing": {"$ref": "#/definitions/address"},
        "shipping": {"$ref": "#/definitions/address"},
    },
    "required": ["billing"],
    "definitions": {
        "address": {
            "type": "object",
            "properties": {"city": {"type": "string"}},
        }
    },
}

TREE_SCHEMA = {
    "type": "object",
    "properties": {
        "label": {"type": "string"},
        "children": {"type": "array", "items": {"$ref": "#"}},
    },
}


def build(schema, name="root", namespace="acme", **kwargs):
    return ClassGraphBuilder(**kwargs).build(parse_schema(schema, name), namespace, name)


class TestObjects:
    """Tests for object and property handling"""

    def test_array_of_objects_gives_one_class_each(self):
        """Outer object, list wrapper and item object are built exactly once"""
        collection = build(ORDER_SCHEMA, "order")

        assert sorted(d.fqcn for d in collection) == ["acme.Lines", "acme.LinesItem", "acme.Order"]
        assert collection.get("acme.Order").kind == ClassKind.ENTITY
        assert collection.get("acme.Lines").kind == ClassKind.VALUE_OBJECT
        assert collection.get("acme.LinesItem").kind == ClassKind.ENTITY

    def test_item_classes_are_built_before_the_list(self):
        """The list wrapper follows its item class in the collection"""
        names = [d.name for d in build(ORDER_SCHEMA, "order")]

        assert names.index("LinesItem") < names.index("Lines")

    def test_properties_are_typed_with_class_names(self):
        """Properties reference the generated classes"""
        order = build(ORDER_SCHEMA, "order").get("acme.Order")

        assert order.properties["lines"].type == "Lines"
        assert order.properties["lines"].type_hint == "Lines | None"

    def test_scalar_properties_become_value_objects(self):
        """Every scalar property gets a final value object"""
        schema = {
            "type": "object",
            "properties": {"firstName": {"type": "string"}, "age": {"type": "integer"}},
            "required": ["firstName"],
        }
        collection = build(schema, "person")

        first_name = collection.get("acme.FirstName")
        assert first_name.is_value_object
        assert first_name.is_final
        assert first_name.has_method("from_string")
        assert collection.get("acme.Age").has_method("from_int")

        person = collection.get("acme.Person")
        assert person.properties["first_name"].type_hint == "FirstName"
        assert person.properties["age"].type_hint == "Age | None"

    def test_constructor_is_keyword_only(self):
        """Entities get a keyword-only constructor with None defaults for optional properties"""
        person = build(ADDRESS_SCHEMA, "person").get("acme.Person")
        parameters = {p.name: p for p in person.methods["__init__"].parameters}

        assert all(p.is_keyword_only for p in parameters.values())
        assert parameters["billing"].default is None
        assert parameters["shipping"].default == "None"

    def test_nullable_type(self):
        """A "null" alternative makes the property nullable even when required"""
        schema = {
            "type": "object",
            "properties": {"nickname": {"type": ["string", "null"]}},
            "required": ["nickname"],
        }
        person = build(schema, "person").get("acme.Person")

        assert person.properties["nickname"].type_hint == "Nickname | None"


class TestReferences:
    """Tests for $ref handling"""

    def test_referenced_class_is_built_once(self):
        """Two references to one definition share its class"""
        collection = build(ADDRESS_SCHEMA, "person")

        assert [d.name for d in collection].count("Address") == 1
        person = collection.get("acme.Person")
        assert person.properties["billing"].type_hint == "Address"
        assert person.properties["shipping"].type_hint == "Address | None"

    def test_recursive_reference(self):
        """A reference to the class being built does not recurse"""
        collection = build(TREE_SCHEMA, "node")

        assert sorted(d.name for d in collection) == ["Children", "Label", "Node"]
        assert collection.get("acme.Children").properties["children"].type == "tuple[Node, ...]"

    def test_unresolved_reference_raises(self):
        """References that cannot be followed abort the build"""
        schema = {"type": "object", "properties": {"owner": {"$ref": "#/definitions/missing"}}}

        with pytest.raises(UnresolvedReferenceError) as exc_info:
            build(schema, "pet")

        assert exc_info.value.ref == "#/definitions/missing"


class TestNamespaces:
    """Tests for custom namespaces"""

    def test_custom_namespace_relocates_class(self):
        """A namespace annotation moves the class below the ambient namespace"""
        schema = {
            "type": "object",
            "properties": {
                "address": {
                    "type": "object",
                    "namespace": "shared",
                    "properties": {"city": {"type": "string"}},
                }
            },
        }
        collection = build(schema, "person")

        assert collection.contains("acme.shared.Address")
        assert collection.contains("acme.shared.City")
        assert collection.get("acme.Person").get_namespace_imports() == ["acme.shared.Address"]
        assert collection.get("acme.shared.Address").get_namespace_imports() == []

    def test_ns_alias_on_scalar(self):
        """The short "ns" key relocates value objects too"""
        schema = {"type": "object", "properties": {"code": {"type": "string", "x-ns": "codes"}}}
        collection = build(schema, "country")

        assert collection.contains("acme.codes.Code")
        assert collection.get("acme.Country").get_namespace_imports() == ["acme.codes.Code"]


class TestTypeSets:
    """Tests for type sets with several alternatives"""

    def test_first_type_wins_with_warning(self, caplog):
        """Only the first type is used and a warning is logged"""
        schema = {"type": "object", "properties": {"value": {"type": ["string", "integer"]}}}

        with caplog.at_level(logging.WARNING):
            collection = build(schema, "setting")

        assert collection.get("acme.Value").has_method("from_string")
        assert "holds 2 types" in caplog.text

    def test_warning_can_be_disabled(self, caplog):
        """warn_on_multiple_types=False keeps the log quiet"""
        schema = {"type": "object", "properties": {"value": {"type": ["string", "integer"]}}}

        with caplog.at_level(logging.WARNING):
            build(schema, "setting", warn_on_multiple_types=False)

        assert "holds 2 types" not in caplog.text

    def test_untyped_classes(self):
        """typed=False is carried by every class"""
        collection = build(ADDRESS_SCHEMA, "person", typed=False)

        assert all(not d.is_typed for d in collection)


if __name__ == "__main__":
    pytest.main([__file__])
