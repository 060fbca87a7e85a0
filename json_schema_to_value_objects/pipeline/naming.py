"""
Naming filters.

The class graph builder and the value object factories never hardcode a
naming convention: every class, property, method and constant name passes
through one of these pluggable filters.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..utils import snake_to_pascal_case, to_screaming_snake_case, to_snake_case

NameFilter = Callable[[str], str]


@dataclass(frozen=True)
class NameFilters:
    """Set of pure string transforms used while generating code.

    Attributes:
        class_name: Converts a type name to a class name
        property_name: Converts a name to a property (attribute) name
        method_name: Converts a name to a method name
        const_name: Converts a name to a class constant name
        const_value: Converts a name to a class constant value
    """

    class_name: NameFilter = snake_to_pascal_case
    property_name: NameFilter = to_snake_case
    method_name: NameFilter = to_snake_case
    const_name: NameFilter = to_screaming_snake_case
    const_value: NameFilter = to_snake_case
