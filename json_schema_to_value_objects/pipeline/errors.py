"""
Generation-time errors.

All of them abort the current generation call; the generator never catches
one to continue with a partial result.
"""

from __future__ import annotations


class CodeGenerationError(Exception):
    """Base class for errors raised while turning a schema into classes."""


class SchemaParseError(CodeGenerationError):
    """Raised when a JSON Schema document cannot be turned into a type model."""


class UnsupportedTypeError(CodeGenerationError):
    """Raised when a type definition kind/format combination is not implemented."""

    def __init__(self, type_name: str, context: str = ""):
        self.type_name = type_name
        message = f'Type "{type_name}" not supported'
        if context:
            message = f"{message} {context}"
        super().__init__(message)


class AmbiguousTypeSetError(CodeGenerationError):
    """Raised when exactly one type is required but the type set holds zero or several."""


class UnresolvedReferenceError(CodeGenerationError):
    """Raised when a $ref cannot be resolved to a type definition."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f'No resolved type available for reference "{ref}"')
