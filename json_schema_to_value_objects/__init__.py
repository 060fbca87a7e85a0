"""JSON Schema to Value Objects Generator

A Python package for generating immutable value object classes from JSON
Schema definitions, with AST-based rendering, code merging, and
configurable output options.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .pipeline import (
    AtomicWriter,
    CodeGenerationError,
    CodeGeneratorConfig,
    CodeMergeError,
    FormatterConfig,
    NameFilters,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    PythonAstMerger,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "NameFilters",
    "CodeGenerationError",
    "CodeMergeError",
    "PythonAstMerger",
    "AtomicWriter",
]
