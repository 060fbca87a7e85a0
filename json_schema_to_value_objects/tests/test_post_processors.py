#!/usr/bin/env python3
"""
Tests for the getter and property constant passes.
"""

import pytest

from json_schema_to_value_objects.pipeline import ClassDescription, ClassDescriptionCollection, ClassKind
from json_schema_to_value_objects.pipeline.analyzer import MethodDef, PropertyDef, Visibility
from json_schema_to_value_objects.pipeline.builder import (
    add_class_constants_for_properties,
    add_getter_methods,
    is_value_object,
)


def person_collection():
    person = ClassDescription(name="Person", namespace="acme")
    person.add_property(
        PropertyDef(name="first_name", type="FirstName"),
        PropertyDef(name="billing_address", type="Address", nullable=True),
    )
    first_name = ClassDescription(name="FirstName", namespace="acme", kind=ClassKind.VALUE_OBJECT)
    first_name.add_property(PropertyDef(name="first_name", type="str"))
    return ClassDescriptionCollection(person, first_name)


class TestIsValueObject:
    def test_by_kind(self):
        assert is_value_object(ClassDescription(kind=ClassKind.VALUE_OBJECT))
        assert not is_value_object(ClassDescription(kind=ClassKind.ENTITY))

    def test_by_marker_method(self):
        """Classes built elsewhere are recognized by their conversion methods"""
        description = ClassDescription().add_method(MethodDef(name="to_string"))

        assert is_value_object(description)


class TestGetters:
    """Tests for add_getter_methods"""

    def test_one_getter_per_property(self):
        collection = add_getter_methods(person_collection())
        person = collection.get("acme.Person")

        assert person.methods["first_name"].body == "return self._first_name"
        assert person.methods["first_name"].return_type == "FirstName"
        assert person.methods["billing_address"].return_type == "Address | None"

    def test_value_objects_are_skipped(self):
        collection = add_getter_methods(person_collection())

        assert not collection.get("acme.FirstName").has_method("first_name")

    def test_existing_methods_are_kept(self):
        """Running the pass again changes nothing"""
        collection = person_collection()
        collection.get("acme.Person").add_method(MethodDef(name="first_name", body="return None"))

        add_getter_methods(collection)
        add_getter_methods(collection)

        person = collection.get("acme.Person")
        assert len(person.methods) == 2
        assert person.methods["first_name"].body == "return None"


class TestConstants:
    """Tests for add_class_constants_for_properties"""

    def test_public_constants(self):
        collection = add_class_constants_for_properties(person_collection())
        constants = collection.get("acme.Person").constants

        assert constants["FIRST_NAME"].value == "first_name"
        assert constants["BILLING_ADDRESS"].value == "billing_address"
        assert not collection.get("acme.FirstName").constants

    def test_private_constants(self):
        collection = add_class_constants_for_properties(person_collection(), visibility=Visibility.PRIVATE)
        constants = collection.get("acme.Person").constants

        assert list(constants) == ["_FIRST_NAME", "_BILLING_ADDRESS"]
        assert constants["_FIRST_NAME"].visibility == Visibility.PRIVATE

    def test_idempotent(self):
        collection = person_collection()

        add_class_constants_for_properties(collection)
        add_class_constants_for_properties(collection)

        assert len(collection.get("acme.Person").constants) == 2


if __name__ == "__main__":
    pytest.main([__file__])
