"""
Writer placing generated modules on disk.

A module is first written next to its target as a hidden temporary file,
checked, then renamed over the target, so a failed run never leaves a
half written module behind.
"""

from __future__ import annotations

import ast
import contextlib
import logging
import tempfile
from collections.abc import Callable
from pathlib import Path

from .base import CodeMergeError

logger = logging.getLogger(__name__)


class AtomicWriter:
    """Writes generated modules below an output directory."""

    def __init__(self, validate_python: Callable[[str], None] | None = None):
        """
        Args:
            validate_python: Check run on the module source before it replaces the target,
                a syntax check by default
        """
        self._validate_python = validate_python or self._default_validate_python

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """
        Replace `path` with `content`, creating missing package directories.

        Raises:
            CodeMergeError: If the source does not pass validation
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", text=True)
        temp_path = Path(temp_name)

        try:
            with open(fd, "w", encoding="utf-8") as f:
                f.write(content)
            if validate:
                self._validate_python(content)
            # rename() within one directory is atomic on POSIX
            temp_path.replace(path)
        except Exception:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            raise

        logger.debug("Wrote %s", path)

    def write_if_not_exists(self, path: Path, content: str, validate: bool = True) -> bool:
        """
        Write a module that must not exist yet.

        Raises:
            FileExistsError: If `path` exists
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite or merge mode to preserve custom code.")

        self.write(path, content, validate)
        return True

    def write_modules(self, output_dir: Path, files: dict[str, str], atomic: bool = True, validate: bool = True) -> list[Path]:
        """
        Write every module of a generation run.

        Args:
            output_dir: Directory the relative module file names are resolved against
            files: Mapping of relative file name to module source
            atomic: Go through a temporary file; plain writes otherwise
            validate: Check each module before it replaces its target

        Returns:
            Paths of the written modules, in the order of `files`
        """
        written = []
        for filename, code in files.items():
            path = output_dir / filename
            if atomic:
                self.write(path, code, validate)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(code, encoding="utf-8")
            written.append(path)
        return written

    @staticmethod
    def existing_modules(output_dir: Path, filenames: list[str]) -> list[Path]:
        """Paths among `filenames` that already exist below `output_dir`."""
        return [output_dir / filename for filename in filenames if (output_dir / filename).exists()]

    def _default_validate_python(self, content: str) -> None:
        try:
            ast.parse(content)
        except SyntaxError as e:
            raise CodeMergeError(f"Generated Python code is not valid: {e}") from e
