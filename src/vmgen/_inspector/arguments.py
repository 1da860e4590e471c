"""
Marker argument resolution.

Two strategies are offered and the caller picks one:

* symbolic: use the value the symbol provider evaluated for the argument.
* source text: read the name out of the argument's source expression. This is
  required for references to properties that are generated by this very pass
  and therefore cannot be evaluated yet.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import parso

from vmgen._symbols.parso_utils import (
    extract_string_value,
    get_children,
    get_dotted_name,
    get_value,
    split_call,
)
from vmgen.constants import NAMEOF_FUNCTIONS

if TYPE_CHECKING:
    from parso.tree import NodeOrLeaf

    from vmgen.models import AnnotationInstance, AnnotationKind, MemberSymbol

logger = logging.getLogger(__name__)


def find_annotation(member: MemberSymbol, kind: AnnotationKind) -> AnnotationInstance | None:
    """Return the first annotation of ``kind`` on ``member``."""
    return next((a for a in member.annotations if a.kind is kind), None)


def find_annotations(member: MemberSymbol, kind: AnnotationKind) -> list[AnnotationInstance]:
    """Return all annotations of ``kind`` on ``member`` in declaration order."""
    return [a for a in member.annotations if a.kind is kind]


def _as_text(value: Any) -> str | None:
    return None if value is None else str(value)


def resolve_named(annotation: AnnotationInstance, name: str) -> str | None:
    """Return the named argument ``name`` as text, or None when absent."""
    return _as_text(annotation.kwargs.get(name))


def resolve_symbolic(annotation: AnnotationInstance, named: str | None = None) -> str | None:
    """Resolve the first positional value, overridden by the named argument ``named``.

    A named argument explicitly set to None clears the positional value.
    """
    value = annotation.args[0] if annotation.args else None
    if named is not None and named in annotation.kwargs:
        value = annotation.kwargs[named]
    return _as_text(value)


def resolve_source_text(annotation: AnnotationInstance) -> str | None:
    """Resolve the name referenced by the first positional argument's source text.

    Accepted forms are a string literal (``"FirstName"``), a bare or dotted
    identifier (``FirstName``, ``self.FirstName``) and a ``nameof(...)`` call
    wrapping either of those. Anything else yields None.
    """
    if not annotation.arg_sources:
        return None
    source = annotation.arg_sources[0].strip()
    if not source:
        return None

    node = _parse_expression(source)
    if node is None:
        logger.debug(f"Could not parse marker argument: {source!r}")
        return None
    return _name_from_node(node)


def _parse_expression(source: str) -> NodeOrLeaf | None:
    """Parse a single expression and return its node."""
    module = parso.parse(source, error_recovery=True)
    nodes = [c for c in get_children(module) if c.type != "endmarker"]
    if len(nodes) == 1 and nodes[0].type == "simple_stmt":
        nodes = [c for c in get_children(nodes[0]) if c.type != "newline"]
    if len(nodes) != 1 or nodes[0].type in ("error_node", "error_leaf"):
        return None
    return nodes[0]


def _name_from_node(node: NodeOrLeaf) -> str | None:
    if node.type == "string":
        return extract_string_value(node)
    if node.type == "name":
        return get_value(node)

    callee, arguments = split_call(node)
    if arguments is None:
        dotted = get_dotted_name(node)
        return dotted.rsplit(".", 1)[-1] if dotted else None

    if callee and callee.rsplit(".", 1)[-1] in NAMEOF_FUNCTIONS and len(arguments) == 1:
        inner = arguments[0]
        if inner.type == "argument":
            return None
        return _name_from_node(inner)
    return None
