"""
Pipeline - AST-based JSON Schema to value object generator.

This module provides a multi-phase architecture for generating immutable
value object classes from JSON schemas:

1. Phase 1 (Type model): Parse JSON Schema into a TypeSet
2. Phase 2 (Builder): Walk the type graph into class descriptions
3. Phase 3 (AST Backend): Generate Python AST from the class descriptions
4. Phase 4 (Formatter): Optional post-processing (ruff or black)
5. Phase 5 (Merger): Optional merge with existing files to preserve custom code
"""

from __future__ import annotations

from .analyzer import ClassDescription, ClassDescriptionCollection, ClassKind
from .ast_backends.python_ast_backend import PythonAstBackend
from .builder import ClassGraphBuilder, add_class_constants_for_properties, add_getter_methods
from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .errors import (
    AmbiguousTypeSetError,
    CodeGenerationError,
    SchemaParseError,
    UnresolvedReferenceError,
    UnsupportedTypeError,
)
from .factories import ExceptionCodeFactory, ValueObjectFactory
from .generator import PipelineGenerator
from .merger import AtomicWriter, CodeMergeError, PythonAstMerger
from .naming import NameFilters
from .type_model import parse_schema

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "NameFilters",
    "ClassDescription",
    "ClassDescriptionCollection",
    "ClassKind",
    "ClassGraphBuilder",
    "ValueObjectFactory",
    "ExceptionCodeFactory",
    "PythonAstBackend",
    "add_getter_methods",
    "add_class_constants_for_properties",
    "parse_schema",
    "CodeGenerationError",
    "SchemaParseError",
    "UnsupportedTypeError",
    "AmbiguousTypeSetError",
    "UnresolvedReferenceError",
    "CodeMergeError",
    "PythonAstMerger",
    "AtomicWriter",
]
