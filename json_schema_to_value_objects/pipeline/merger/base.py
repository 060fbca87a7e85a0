"""
Interface of the mergers combining regenerated modules with edited ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CodeMergeError(Exception):
    """Raised when an existing module cannot be parsed or a merged module is not valid."""


class AstMerger(ABC):
    """Merges a regenerated module into the module already on disk.

    Generated classes, assignments and methods replace their counterparts
    by name; whatever exists only on disk (imports, helper classes, extra
    methods) is kept where it is.
    """

    @abstractmethod
    def parse(self, code: str) -> Any:
        """
        Parse a module.

        Raises:
            CodeMergeError: If the code cannot be parsed
        """

    @abstractmethod
    def merge_files(self, generated_code: str, existing_code: str) -> str:
        """
        Return the module on disk updated with the generated code.

        Raises:
            CodeMergeError: If either side cannot be parsed or the result is invalid
        """

    @abstractmethod
    def validate(self, code: str) -> None:
        """
        Check that a merged module is syntactically valid.

        Raises:
            CodeMergeError: If it is not
        """
