"""
Python AST merger implementation.

Uses Python's built-in ast module to merge generated code into existing
files, preserving hand-written imports, classes, constants and methods.
"""

from __future__ import annotations

import ast
import logging

from .base import AstMerger, CodeMergeError

logger = logging.getLogger(__name__)


class PythonAstMerger(AstMerger):
    """Merger for Python source files using the built-in ast module."""

    def parse(self, code: str) -> ast.Module:
        """Parse Python source code into an AST.

        Args:
            code: Python source code string

        Returns:
            ast.Module representing the parsed code

        Raises:
            CodeMergeError: If the code cannot be parsed
        """
        try:
            return ast.parse(code)
        except SyntaxError as e:
            raise CodeMergeError(f"Failed to parse Python code: {e}") from e

    def merge_files(self, generated_code: str, existing_code: str) -> str:
        """Merge generated code into existing file, preserving order.

        Walks the existing file structure and updates elements from generated code.
        New elements are added at the end.
        """
        existing_tree = self.parse(existing_code)
        generated_tree = self.parse(generated_code)

        # Build lookups for generated code
        gen_imports = self._get_imports_list(generated_tree)
        gen_classes = {n.name: n for n in generated_tree.body if isinstance(n, ast.ClassDef)}

        new_body = []
        seen_imports = set()

        # Walk existing tree in order
        for node in existing_tree.body:
            if isinstance(node, (ast.Import, ast.ImportFrom)):
                # Keep existing import
                new_body.append(node)
                seen_imports.add(ast.unparse(node))

            elif isinstance(node, ast.ClassDef):
                if node.name in gen_classes:
                    # Merge class: existing structure, updated content
                    merged = self._merge_class(node, gen_classes[node.name])
                    new_body.append(merged)
                    del gen_classes[node.name]
                else:
                    # Custom class, keep as-is
                    new_body.append(node)
                    logger.debug("Preserving custom class %s", node.name)

            else:
                # Other elements (docstrings, module constants, etc.)
                new_body.append(node)

        # Add new imports from generated (not already present)
        insert_idx = self._find_import_insert_index_in_list(new_body)
        for imp in gen_imports:
            if ast.unparse(imp) not in seen_imports:
                new_body.insert(insert_idx, imp)
                insert_idx += 1

        # Add new classes from generated at end
        for cls in gen_classes.values():
            new_body.append(cls)

        existing_tree.body = new_body
        ast.fix_missing_locations(existing_tree)
        merged_code = ast.unparse(existing_tree)
        self.validate(merged_code)
        return merged_code

    def _merge_class(self, existing: ast.ClassDef, generated: ast.ClassDef) -> ast.ClassDef:
        """Merge a class: preserve existing order, update content from generated."""
        # Build lookups for generated class
        gen_assignments = {}
        gen_methods = {}
        for item in generated.body:
            name = self._assignment_name(item)
            if name is not None:
                gen_assignments[name] = item
            elif isinstance(item, ast.FunctionDef):
                gen_methods[item.name] = item

        new_body = []
        seen_assignments = set()
        seen_methods = set()

        # Walk existing class body in order
        for item in existing.body:
            name = self._assignment_name(item)
            if name is not None:
                # Generated constants and __slots__ win
                new_body.append(gen_assignments.get(name, item))
                seen_assignments.add(name)

            elif isinstance(item, ast.FunctionDef):
                if item.name in gen_methods:
                    # Merge method: keep docstring, use generated body
                    new_body.append(self._merge_method(item, gen_methods[item.name]))
                else:
                    # Custom method, keep as-is
                    new_body.append(item)
                    logger.debug("Preserving custom method %s.%s", existing.name, item.name)
                seen_methods.add(item.name)

            elif isinstance(item, ast.Pass) and len(generated.body) > 0:
                # Placeholder body of an empty class
                continue

            else:
                # Docstring and other items
                new_body.append(item)

        # Add new assignments from generated (after the last one)
        insert_idx = self._find_assignment_insert_index(new_body)
        for name, assignment in gen_assignments.items():
            if name not in seen_assignments:
                new_body.insert(insert_idx, assignment)
                insert_idx += 1

        # Add new methods from generated at end
        for name, method in gen_methods.items():
            if name not in seen_methods:
                new_body.append(method)

        existing.body = new_body or [ast.Pass()]
        # Keep existing decorators and bases
        return existing

    def _merge_method(self, existing: ast.FunctionDef, generated: ast.FunctionDef) -> ast.FunctionDef:
        """Merge a method: keep existing docstring, use generated body."""
        existing_docstring = ast.get_docstring(existing)

        # Use generated method as base
        result = generated

        # Restore docstring if it existed
        if existing_docstring and ast.get_docstring(result) is None:
            result.body.insert(0, ast.Expr(value=ast.Constant(value=existing_docstring)))

        return result

    def _assignment_name(self, item: ast.stmt) -> str | None:
        """Name assigned by a single-target class level assignment."""
        if isinstance(item, ast.Assign) and len(item.targets) == 1 and isinstance(item.targets[0], ast.Name):
            return item.targets[0].id
        if isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name):
            return item.target.id
        return None

    def _get_imports_list(self, tree: ast.Module) -> list:
        """Get list of import nodes."""
        return [n for n in tree.body if isinstance(n, (ast.Import, ast.ImportFrom))]

    def _find_import_insert_index_in_list(self, body: list) -> int:
        """Find index after last import in a body list."""
        last_idx = 0
        for i, node in enumerate(body):
            if isinstance(node, (ast.Import, ast.ImportFrom)):
                last_idx = i + 1
        return last_idx

    def _find_assignment_insert_index(self, body: list) -> int:
        """Find index after last assignment (before first method)."""
        last_idx = 0
        for i, item in enumerate(body):
            if isinstance(item, (ast.AnnAssign, ast.Assign)):
                last_idx = i + 1
            elif isinstance(item, ast.Expr):
                # Docstring at start
                last_idx = i + 1
            elif isinstance(item, ast.FunctionDef):
                break
        return last_idx

    def validate(self, code: str) -> None:
        """Validate that merged Python code is syntactically correct.

        Args:
            code: The merged code to validate

        Raises:
            CodeMergeError: If validation fails
        """
        try:
            ast.parse(code)
        except SyntaxError as e:
            raise CodeMergeError(f"Merged code is not valid Python: {e}") from e
