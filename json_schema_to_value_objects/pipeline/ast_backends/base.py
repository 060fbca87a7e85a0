"""
Base class for AST-based code generation backends.

Defines the interface that all language-specific AST backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from ..analyzer.ir_nodes import ClassDescriptionCollection
from ..config import CodeGeneratorConfig

# Returns the current contents of an output file, or None if there is none
ExistingCodeHook = Callable[[str], str | None]


class AstBackend(ABC):
    """Abstract base class for AST-based code generation backends."""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig, generation_comment: str = ""):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
            generation_comment: Comment line placed at the top of every file
        """
        self.config = config
        self.generation_comment = generation_comment

    @abstractmethod
    def render(self, collection: ClassDescriptionCollection, existing_code: ExistingCodeHook | None = None) -> dict[str, str]:
        """
        Render class descriptions to source files.

        Args:
            collection: All classes of one generation run
            existing_code: Hook returning the current contents of a file, used to
                preserve hand-written code; without it files are fully overwritten

        Returns:
            Mapping of relative file name to source code
        """
