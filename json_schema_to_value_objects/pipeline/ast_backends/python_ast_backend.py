"""
Python AST-based code generation backend.

Generates Python value object and entity classes from class descriptions
using the built-in ast module. All classes of one namespace are rendered
into one module.
"""

from __future__ import annotations

import ast
import collections
import logging
import sys
import textwrap

from ...utils import namespace_to_path
from ..analyzer.ir_nodes import ClassDescription, ClassDescriptionCollection, ConstantDef, MethodDef, PropertyDef
from ..config import CodeGeneratorConfig
from ..merger import PythonAstMerger
from .base import AstBackend, ExistingCodeHook

logger = logging.getLogger(__name__)


class PythonAstBackend(AstBackend):
    """Python code generation backend using AST."""

    FILE_EXTENSION = "py"

    def __init__(self, config: CodeGeneratorConfig, generation_comment: str = ""):
        super().__init__(config, generation_comment)
        self.merger = PythonAstMerger()
        self.python_imports: dict[str, set[str]] = collections.defaultdict(set)

    def render(self, collection: ClassDescriptionCollection, existing_code: ExistingCodeHook | None = None) -> dict[str, str]:
        """Render one module per namespace, merging with existing files when a hook is given."""
        namespaces = collection.namespaces()
        files = {}

        for namespace in namespaces:
            filename = self.filename_for(namespace, namespaces)
            descriptions = [d for d in collection if d.namespace == namespace]
            code = self.generate(descriptions, namespace, namespaces)

            existing = existing_code(filename) if existing_code is not None else None
            if existing:
                logger.debug("Merging %s with existing code", filename)
                code = self.merger.merge_files(code, existing)

            files[filename] = self._post_process_code(code)

        return files

    def filename_for(self, namespace: str, namespaces: list[str]) -> str:
        """Module file of a namespace: a package when another namespace is nested below it."""
        path = namespace_to_path(namespace)
        if not path:
            return "__init__.py"
        if any(other.startswith(namespace + ".") for other in namespaces):
            return f"{path}/__init__.py"
        return f"{path}.{self.FILE_EXTENSION}"

    def generate(self, descriptions: list[ClassDescription], namespace: str, namespaces: list[str]) -> str:
        """Generate the source of one namespace module."""
        self.python_imports = collections.defaultdict(set)

        if any(d.is_strict for d in descriptions):
            self.python_imports["__future__"].add("annotations")

        class_nodes = [self._generate_class(description, namespace) for description in descriptions]

        module = ast.Module(body=[*self._generate_imports(namespaces), *class_nodes], type_ignores=[])
        ast.fix_missing_locations(module)
        return ast.unparse(module)

    def _add_import(self, fqcn: str, namespace: str) -> str:
        """Register the import of a fully qualified name and return the local name."""
        module, _, name = fqcn.rpartition(".")
        if module and module != namespace:
            self.python_imports[module].add(name)
        return name

    def _generate_imports(self, namespaces: list[str]) -> list[ast.stmt]:
        """Generate import statements: __future__, standard library, third party, generated."""
        generated_roots = {ns.split(".")[0] for ns in namespaces}

        def group(module: str) -> int:
            root = module.split(".")[0]
            if module == "__future__":
                return 0
            if root in sys.stdlib_module_names:
                return 1
            if root in generated_roots:
                return 3
            return 2

        nodes: list[ast.stmt] = []
        for module in sorted(self.python_imports, key=lambda m: (group(m), m)):
            names = sorted(self.python_imports[module])
            nodes.append(
                ast.ImportFrom(
                    module=module,
                    names=[ast.alias(name=n, asname=None) for n in names],
                    level=0,
                )
            )
        return nodes

    def _generate_class(self, description: ClassDescription, namespace: str) -> ast.ClassDef:
        """Generate a class definition as AST node."""
        typed = description.is_typed

        for fqcn in description.get_namespace_imports():
            self._add_import(fqcn, namespace)

        decorators = []
        if description.is_final:
            decorators.append(ast.Name(id=self._add_import("typing.final", namespace), ctx=ast.Load()))

        bases = []
        if description.extends:
            bases.append(ast.Name(id=self._add_import(description.extends, namespace), ctx=ast.Load()))
        for capability in description.implemented_capabilities:
            bases.append(ast.Name(id=self._add_import(capability, namespace), ctx=ast.Load()))

        body: list[ast.stmt] = []
        if description.docstring:
            body.append(ast.Expr(value=ast.Constant(value=description.docstring)))

        body.append(self._generate_slots(description))
        if typed:
            body.extend(self._generate_property(prop) for prop in description.properties.values())
        body.extend(self._generate_constant(constant) for constant in description.constants.values())
        body.extend(self._generate_method(method, typed) for method in description.methods.values())

        return ast.ClassDef(
            name=description.name,
            bases=bases,
            keywords=[],
            body=body,
            decorator_list=decorators,
            type_params=[],
        )

    def _generate_slots(self, description: ClassDescription) -> ast.Assign:
        slots = [ast.Constant(value=prop.attribute) for prop in description.properties.values()]
        return ast.Assign(
            targets=[ast.Name(id="__slots__", ctx=ast.Store())],
            value=ast.Tuple(elts=slots, ctx=ast.Load()),
        )

    def _generate_property(self, prop: PropertyDef) -> ast.AnnAssign:
        """Annotation of the slot holding a property."""
        return ast.AnnAssign(
            target=ast.Name(id=prop.attribute, ctx=ast.Store()),
            annotation=self._parse_expr(prop.type_hint),
            value=None,
            simple=1,
        )

    def _generate_constant(self, constant: ConstantDef) -> ast.Assign:
        value = self._parse_expr(constant.value) if constant.is_expression else ast.Constant(value=constant.value)
        return ast.Assign(targets=[ast.Name(id=constant.name, ctx=ast.Store())], value=value)

    def _generate_method(self, method: MethodDef, typed: bool) -> ast.FunctionDef:
        """Generate a method definition as AST node."""

        def annotation(type_str: str | None) -> ast.expr | None:
            return self._parse_expr(type_str) if typed and type_str else None

        args = []
        if method.is_class_method:
            args.append(ast.arg(arg="cls", annotation=None))
        elif not method.is_static:
            args.append(ast.arg(arg="self", annotation=None))

        defaults = []
        vararg = None
        kwonlyargs = []
        kw_defaults = []
        for param in method.parameters:
            node = ast.arg(arg=param.name, annotation=annotation(param.type))
            default = self._parse_expr(param.default) if param.default is not None else None
            if param.is_variadic:
                vararg = node
            elif param.is_keyword_only or vararg is not None:
                kwonlyargs.append(node)
                kw_defaults.append(default)
            else:
                args.append(node)
                if default is not None:
                    defaults.append(default)

        decorators = []
        if method.is_class_method:
            decorators.append(ast.Name(id="classmethod", ctx=ast.Load()))
        elif method.is_static:
            decorators.append(ast.Name(id="staticmethod", ctx=ast.Load()))

        body: list[ast.stmt] = []
        if method.docstring:
            body.append(ast.Expr(value=ast.Constant(value=method.docstring)))
        body.extend(self._parse_body(method.body))

        return ast.FunctionDef(
            name=method.name,
            args=ast.arguments(
                posonlyargs=[],
                args=args,
                vararg=vararg,
                kwonlyargs=kwonlyargs,
                kw_defaults=kw_defaults,
                kwarg=None,
                defaults=defaults,
            ),
            body=body,
            decorator_list=decorators,
            returns=annotation(method.return_type),
            type_params=[],
        )

    def _parse_body(self, body: str) -> list[ast.stmt]:
        """Parse a method body; it is wrapped in a function so return and yield are legal."""
        wrapper = ast.parse("def _():\n" + textwrap.indent(body or "pass", "    "))
        return wrapper.body[0].body

    def _parse_expr(self, expr_str: str) -> ast.expr:
        """Parse an expression string into an AST expression."""
        return ast.parse(expr_str, mode="eval").body

    def _post_process_code(self, code: str) -> str:
        """Post-process the generated code for formatting."""
        lines = code.split("\n")
        result = []

        # Add generation comment at the top
        if self.config.add_generation_comment and self.generation_comment:
            result.append(f"# {self.generation_comment}")
            result.append("")

        for line in lines:
            previous = result[-1] if result else ""

            # Two blank lines before top level classes, one before methods
            if line.startswith(("@", "class ")) and not previous.startswith("@"):
                while result and result[-1] == "":
                    result.pop()
                if result:
                    result.extend(["", ""])
            elif line.startswith(("    def ", "    @")) and not previous.startswith(("    @", "class ", "@")):
                if previous.strip():
                    result.append("")

            result.append(line)

        # Ensure file ends with newline
        if result and result[-1] != "":
            result.append("")

        return "\n".join(result)
