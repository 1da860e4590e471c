"""
Utilities for working with parso AST nodes.
Provides helper functions for common parso operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

    from parso.tree import BaseNode, NodeOrLeaf

STRING_PREFIX_CHARS = "rRbBuU"


def get_value(node: NodeOrLeaf) -> str | None:
    """Safely get value from node."""
    return getattr(node, "value", None)


def has_children(node: NodeOrLeaf) -> bool:
    """Check if node has children attribute."""
    return hasattr(node, "children")


def get_children(node: NodeOrLeaf) -> list[NodeOrLeaf]:
    """Safely get children from node."""
    return getattr(node, "children", [])


def get_code(node: NodeOrLeaf) -> str:
    """Get the source code of a node without surrounding whitespace."""
    return node.get_code(include_prefix=False).strip()


def is_operator(node: NodeOrLeaf, value: str) -> bool:
    """Check if node is the operator ``value``."""
    return node.type == "operator" and get_value(node) == value


def walk_tree(node: NodeOrLeaf) -> Generator[NodeOrLeaf, None, None]:
    """Walk a parso tree recursively, yielding all nodes."""
    yield node
    if has_children(node):
        for child in get_children(node):
            yield from walk_tree(child)


def get_class_name(class_node: BaseNode) -> str | None:
    """Extract class name from parso classdef node."""
    for child in get_children(class_node):
        if child.type == "name":
            return get_value(child)
    return None


def find_class_suites(class_node: BaseNode) -> Generator[NodeOrLeaf, None, None]:
    """Generator that yields class suite nodes from a class definition."""
    for child in get_children(class_node):
        if child.type == "suite":
            yield child


def iter_class_statements(class_node: BaseNode) -> Generator[NodeOrLeaf, None, None]:
    """Yield the statements of a class body in source order.

    Simple statements are unwrapped so that each yielded node is an
    ``expr_stmt``, ``funcdef``, ``async_stmt``, ``decorated`` or similar.
    """
    for suite_node in find_class_suites(class_node):
        for item in get_children(suite_node):
            if item.type == "simple_stmt":
                for stmt_child in get_children(item):
                    if stmt_child.type not in ("newline", "operator"):
                        yield stmt_child
            elif item.type not in ("newline", "indent", "dedent"):
                yield item
    # One-line class bodies ("class A: x = 1") have no suite
    for child in get_children(class_node):
        if child.type == "simple_stmt":
            for stmt_child in get_children(child):
                if stmt_child.type not in ("newline", "operator"):
                    yield stmt_child


def _dotted_name_from_children(children: list[NodeOrLeaf]) -> str | None:
    """Join a leading name and its ``.attr`` trailers, None if anything else appears."""
    if not children or children[0].type != "name":
        return None
    parts = [get_value(children[0])]
    for trailer in children[1:]:
        trailer_children = get_children(trailer)
        if (
            trailer.type == "trailer"
            and len(trailer_children) == 2
            and is_operator(trailer_children[0], ".")
            and trailer_children[1].type == "name"
        ):
            parts.append(get_value(trailer_children[1]))
        else:
            return None
    return ".".join(p for p in parts if p)


def get_dotted_name(node: NodeOrLeaf) -> str | None:
    """Return ``a.b.c`` for a name or attribute chain, None for anything else."""
    if node.type == "name":
        return get_value(node)
    if node.type == "dotted_name":
        return "".join(get_value(c) or "" for c in get_children(node))
    if node.type in ("atom_expr", "power"):
        return _dotted_name_from_children(get_children(node))
    return None


def _split_trailer(node: NodeOrLeaf, opening: str) -> tuple[str | None, NodeOrLeaf | None]:
    """Split ``name<opening>...`` into its dotted name and the final trailer."""
    if node.type not in ("atom_expr", "power"):
        return None, None
    children = get_children(node)
    last = children[-1]
    last_children = get_children(last)
    if last.type != "trailer" or not last_children or not is_operator(last_children[0], opening):
        return None, None
    return _dotted_name_from_children(children[:-1]), last


def split_call(node: NodeOrLeaf) -> tuple[str | None, list[NodeOrLeaf] | None]:
    """Split an expression into its dotted callee and call arguments.

    Returns ``(name, None)`` for a plain (dotted) name, ``(name, args)`` for a
    call ``name(args)`` and ``(None, None)`` for anything else.
    """
    dotted = get_dotted_name(node)
    if dotted is not None:
        return dotted, None
    callee, trailer = _split_trailer(node, "(")
    if callee is None or trailer is None:
        return None, None
    return callee, list(find_call_arguments(trailer))


def find_call_arguments(trailer_node: NodeOrLeaf) -> Generator[NodeOrLeaf, None, None]:
    """Yield the argument nodes of a ``(...)`` trailer, positional and keyword."""
    for trailer_child in get_children(trailer_node):
        if trailer_child.type == "arglist":
            for arg_child in get_children(trailer_child):
                if not is_operator(arg_child, ","):
                    yield arg_child
        elif trailer_child.type != "operator":
            yield trailer_child


def split_arguments(
    arguments: list[NodeOrLeaf],
) -> tuple[list[NodeOrLeaf], dict[str, NodeOrLeaf]]:
    """Split call arguments into positional nodes and keyword value nodes.

    Star arguments and generator arguments are skipped.
    """
    positional: list[NodeOrLeaf] = []
    keywords: dict[str, NodeOrLeaf] = {}
    for arg_node in arguments:
        if arg_node.type != "argument":
            positional.append(arg_node)
            continue
        children = get_children(arg_node)
        if (
            len(children) >= 3
            and children[0].type == "name"
            and is_operator(children[1], "=")
        ):
            name_value = get_value(children[0])
            if name_value:
                keywords[name_value] = children[2]
    return positional, keywords


def find_subscript_elements(node: NodeOrLeaf) -> tuple[str | None, list[NodeOrLeaf]]:
    """Split ``Name[a, b, ...]`` into its dotted name and subscript elements."""
    name, trailer = _split_trailer(node, "[")
    if name is None or trailer is None:
        return None, []

    elements = []
    for child in get_children(trailer)[1:-1]:
        if child.type == "subscriptlist":
            elements.extend(c for c in get_children(child) if not is_operator(c, ","))
        else:
            elements.append(child)
    return name, elements


def extract_string_value(node: NodeOrLeaf) -> str | None:
    """Extract string value from parso node."""
    if hasattr(node, "type") and node.type == "string":
        value = get_value(node)
        if value is None:
            return None
        value = value.lstrip(STRING_PREFIX_CHARS)
        # Handle triple quotes first
        if (value.startswith('"""') and value.endswith('"""')) or (
            value.startswith("'''") and value.endswith("'''")
        ):
            return value[3:-3]
        # Handle single/double quotes
        elif (value.startswith('"') and value.endswith('"')) or (
            value.startswith("'") and value.endswith("'")
        ):
            return value[1:-1]
        return value
    return None


def extract_boolean_value(node: NodeOrLeaf) -> bool | None:
    """Extract boolean value from parso node."""
    if hasattr(node, "type") and node.type in ("name", "keyword"):
        if get_value(node) == "True":
            return True
        elif get_value(node) == "False":
            return False
    return None


def extract_numeric_value(node: NodeOrLeaf) -> int | float | None:
    """Extract numeric value from parso node."""
    if hasattr(node, "type") and node.type == "number":
        value = get_value(node)
        if value is None:
            return None
        try:
            # Scientific notation (e.g., 1e3) should be parsed as float
            if "." in value or "e" in value.lower():
                return float(value)
            return int(value, 0)
        except ValueError:
            return None
    elif node.type == "factor" and len(get_children(node)) >= 2:
        # Handle unary operators like negative numbers: factor -> operator(-) + number
        operator_node, operand_node = get_children(node)[:2]
        if is_operator(operator_node, "-"):
            operand = extract_numeric_value(operand_node)
            return -operand if operand is not None else None
    return None


def get_assignment_target_name(node: NodeOrLeaf) -> str | None:
    """Get the target name from an assignment or annotated assignment statement."""
    children = get_children(node)
    if not children or children[0].type != "name":
        return None
    if len(children) >= 3 and is_operator(children[1], "="):
        return get_value(children[0])
    if len(children) == 2 and children[1].type == "annassign":
        return get_value(children[0])
    return None


def get_annotation_node(node: NodeOrLeaf) -> NodeOrLeaf | None:
    """Get the annotation expression of an annotated assignment (``x: T = ...``)."""
    for child in get_children(node):
        if child.type == "annassign":
            annassign_children = get_children(child)
            if len(annassign_children) >= 2:
                return annassign_children[1]
    return None
