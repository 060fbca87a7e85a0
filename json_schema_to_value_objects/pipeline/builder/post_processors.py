"""
Optional passes enriching built classes with getters and constants.

Value objects are skipped: they already expose their value through their
conversion methods.
"""

from __future__ import annotations

import logging

from ..analyzer.ir_nodes import ClassDescription, ClassDescriptionCollection, ConstantDef, MethodDef, Visibility
from ..naming import NameFilters

logger = logging.getLogger(__name__)


def is_value_object(description: ClassDescription) -> bool:
    """Whether a class is a value object, by its kind or, for foreign classes, its marker methods."""
    return description.is_value_object or description.has_marker_method()


def add_getter_methods(collection: ClassDescriptionCollection, filters: NameFilters | None = None) -> ClassDescriptionCollection:
    """
    Add one accessor method per property to every non value object class.

    Methods that already exist are left untouched, so the pass can run
    any number of times.
    """
    filters = filters or NameFilters()

    for description in collection:
        if is_value_object(description):
            continue

        for prop in description.properties.values():
            method_name = filters.method_name(prop.name)
            if description.has_method(method_name):
                continue

            description.add_method(
                MethodDef(
                    name=method_name,
                    return_type=prop.type_hint,
                    body=f"return self.{prop.attribute}",
                )
            )
            logger.debug("Added getter %s.%s", description.fqcn, method_name)

    return collection


def add_class_constants_for_properties(
    collection: ClassDescriptionCollection,
    filters: NameFilters | None = None,
    visibility: Visibility = Visibility.PUBLIC,
) -> ClassDescriptionCollection:
    """
    Add one constant per property to every non value object class.

    The constant name and value both derive from the property name, e.g.
    property "billing_address" gives BILLING_ADDRESS = "billing_address".
    """
    filters = filters or NameFilters()

    for description in collection:
        if is_value_object(description):
            continue

        for prop in description.properties.values():
            constant_name = filters.const_name(prop.name)
            if visibility == Visibility.PRIVATE:
                constant_name = f"_{constant_name}"
            if description.has_constant(constant_name):
                continue

            description.add_constant(ConstantDef(constant_name, filters.const_value(prop.name), visibility))

    return collection
