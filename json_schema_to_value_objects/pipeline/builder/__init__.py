"""
Builder module.

Walks the type model into class descriptions and enriches them with the
optional getter and constant passes.
"""

from __future__ import annotations

from .class_graph_builder import ClassGraphBuilder
from .post_processors import add_class_constants_for_properties, add_getter_methods, is_value_object

__all__ = [
    "ClassGraphBuilder",
    "add_getter_methods",
    "add_class_constants_for_properties",
    "is_value_object",
]
