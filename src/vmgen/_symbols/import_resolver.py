"""
Import and name resolution utilities.
Handles parsing imports and resolving dotted names to their full path.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .parso_utils import (
    get_assignment_target_name,
    get_children,
    get_dotted_name,
    get_value,
    walk_tree,
)

if TYPE_CHECKING:
    from parso.tree import NodeOrLeaf


class ImportResolver:
    """Handles import parsing and name resolution for one module."""

    def __init__(self):
        self.imports: dict[str, str] = {}
        self.module_names: set[str] = set()

    @classmethod
    def from_module(cls, module: NodeOrLeaf) -> ImportResolver:
        """Collect the imports and top-level definitions of a parsed module."""
        resolver = cls()
        for node in walk_tree(module):
            if node.type == "import_name":
                resolver.handle_import(node)
            elif node.type == "import_from":
                resolver.handle_import_from(node)

        for child in get_children(module):
            resolver.handle_definition(child)
        return resolver

    def handle_import(self, node: NodeOrLeaf) -> None:
        """Handle 'import' statements (parso node)."""
        for child in get_children(node):
            if child.type == "dotted_as_names":
                for part in get_children(child):
                    self._handle_dotted_as_name(part)
            else:
                self._handle_dotted_as_name(child)

    def _handle_dotted_as_name(self, node: NodeOrLeaf) -> None:
        if node.type == "dotted_as_name":
            # Handle "import module as alias"
            parts = [p for p in get_children(node) if p.type in ("name", "dotted_name")]
            if len(parts) == 2:
                module_name = get_dotted_name(parts[0])
                alias_name = get_value(parts[1])
                if module_name and alias_name:
                    self.imports[alias_name] = module_name
        elif node.type == "dotted_name":
            # Handle "import package.module", which binds "package"
            module_name = get_dotted_name(node)
            if module_name:
                root = module_name.split(".")[0]
                self.imports[root] = root
        elif node.type == "name" and get_value(node) not in ("import", "as"):
            # Simple case: "import module"
            module_name = get_value(node)
            if module_name:
                self.imports[module_name] = module_name

    def handle_import_from(self, node: NodeOrLeaf) -> None:
        """Handle 'from ... import ...' statements (parso node)."""
        module_name = None
        import_names: list[tuple[str, str | None]] = []

        # First pass: find module name and collect import names
        for child in get_children(node):
            if (
                child.type == "name"
                and module_name is None
                and get_value(child) not in ("from", "import")
            ) or (child.type == "dotted_name" and module_name is None):
                module_name = get_dotted_name(child)
            elif child.type == "import_as_names":
                for name_child in get_children(child):
                    self._collect_import_name(name_child, import_names)
            elif child.type == "import_as_name" or (
                child.type == "name"
                and get_value(child) not in ("from", "import")
                and module_name is not None
            ):
                self._collect_import_name(child, import_names)

        # Second pass: register all imports
        if module_name:
            for import_name, alias_name in import_names:
                self.imports[alias_name or import_name] = f"{module_name}.{import_name}"

    @staticmethod
    def _collect_import_name(node: NodeOrLeaf, import_names: list[tuple[str, str | None]]) -> None:
        if node.type == "import_as_name":
            # Handle "from module import name as alias"
            parts = [get_value(p) for p in get_children(node) if p.type == "name"]
            if parts and parts[0]:
                import_names.append((parts[0], parts[1] if len(parts) > 1 else None))
        elif node.type == "name":
            # Handle "from module import name"
            name_value = get_value(node)
            if name_value:
                import_names.append((name_value, None))

    def handle_definition(self, node: NodeOrLeaf) -> None:
        """Record a module-level class, function or assignment target."""
        if node.type == "decorated":
            node = get_children(node)[-1]
        if node.type == "async_stmt":
            node = get_children(node)[-1]
        if node.type in ("classdef", "funcdef"):
            name_node = get_children(node)[1]
            if name_node.type == "name" and get_value(name_node):
                self.module_names.add(get_value(name_node))
        elif node.type == "simple_stmt":
            for stmt_child in get_children(node):
                if stmt_child.type == "expr_stmt":
                    target_name = get_assignment_target_name(stmt_child)
                    if target_name:
                        self.module_names.add(target_name)

    def is_bound(self, name: str) -> bool:
        """Check whether the root of a dotted name is bound in the module."""
        root = name.split(".")[0]
        return root in self.imports or root in self.module_names

    def resolve_full_name(self, dotted_name: str) -> str:
        """Resolve the root of a dotted name through the module imports.

        ``vm.command`` with ``import vmgen as vm`` resolves to ``vmgen.command``.
        Names that are not imported are returned unchanged.
        """
        root, _, rest = dotted_name.partition(".")
        if root in self.imports:
            full_root = self.imports[root]
            return f"{full_root}.{rest}" if rest else full_root
        return dotted_name
