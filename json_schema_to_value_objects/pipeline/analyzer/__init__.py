"""
Analyzer module.

Contains the class description model (IR) shared by the factories, the
class graph builder and the AST backend.
"""

from __future__ import annotations

from .ir_nodes import (
    VALUE_OBJECT_MARKER_METHODS,
    ClassDescription,
    ClassDescriptionCollection,
    ClassKind,
    ConstantDef,
    MethodDef,
    ParameterDef,
    PropertyDef,
    Visibility,
)

__all__ = [
    "VALUE_OBJECT_MARKER_METHODS",
    "ClassDescription",
    "ClassDescriptionCollection",
    "ClassKind",
    "ConstantDef",
    "MethodDef",
    "ParameterDef",
    "PropertyDef",
    "Visibility",
]
