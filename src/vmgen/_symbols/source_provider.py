"""
Static member provider.

Parses Python source with parso and builds the member view of a class
without importing it. Fields are marked through ``Annotated`` metadata and
methods through decorators; markers are recognized by their fully qualified
name, resolved through the module's imports.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import parso

from vmgen.constants import ANNOTATED_NAMES, POSITIONAL_PARAMETERS
from vmgen.models import AnnotationInstance, MemberKind, MemberSymbol
from vmgen.settings import InspectorSettings

from . import parso_utils
from .import_resolver import ImportResolver

if TYPE_CHECKING:
    from parso.tree import BaseNode, NodeOrLeaf

    from vmgen.models import AnnotationKind

logger = logging.getLogger(__name__)


class SourceSymbolProvider:
    """Builds ``MemberSymbol`` lists from Python source code."""

    def __init__(self, settings: InspectorSettings | None = None):
        self.settings = settings or InspectorSettings()
        self.marker_names = self.settings.qualified_marker_names()

    def get_class_members(self, source: str, class_name: str) -> list[MemberSymbol] | None:
        """Return the members of ``class_name`` in source order, None if not found."""
        parsed = self._parse(source)
        if parsed is None:
            return None
        module, resolver = parsed

        for class_node in self._iter_class_nodes(module):
            if parso_utils.get_class_name(class_node) == class_name:
                return _ClassScanner(class_node, resolver, self.marker_names).scan()

        logger.debug(f"Class {class_name!r} not found")
        return None

    def get_marked_classes(self, source: str) -> dict[str, list[MemberSymbol]]:
        """Return the members of every class carrying at least one marker."""
        parsed = self._parse(source)
        if parsed is None:
            return {}
        module, resolver = parsed

        marked_classes: dict[str, list[MemberSymbol]] = {}
        for class_node in self._iter_class_nodes(module):
            class_name = parso_utils.get_class_name(class_node)
            if not class_name or class_name in marked_classes:
                continue
            members = _ClassScanner(class_node, resolver, self.marker_names).scan()
            if any(member.annotations for member in members):
                marked_classes[class_name] = members
        return marked_classes

    def _parse(self, source: str) -> tuple[NodeOrLeaf, ImportResolver] | None:
        try:
            # Error recovery keeps partially written classes inspectable
            module = parso.parse(source, error_recovery=True)
            return module, ImportResolver.from_module(module)
        except Exception as e:
            logger.error(f"Failed to parse source: {e}")
            return None

    @staticmethod
    def _iter_class_nodes(module: NodeOrLeaf):
        for node in parso_utils.walk_tree(module):
            if node.type == "classdef":
                yield node


class _ClassScanner:
    """Scans the body of one class definition."""

    def __init__(
        self,
        class_node: BaseNode,
        resolver: ImportResolver,
        marker_names: dict[str, AnnotationKind],
    ):
        self.class_node = class_node
        self.resolver = resolver
        self.marker_names = marker_names
        self.class_names: set[str] = set()

    def scan(self) -> list[MemberSymbol]:
        statements = list(parso_utils.iter_class_statements(self.class_node))
        # Class-level names may be referenced before their definition
        for statement in statements:
            name = self._statement_name(statement)
            if name:
                self.class_names.add(name)

        members = []
        for statement in statements:
            member = self._build_member(statement)
            if member is not None:
                members.append(member)
        return members

    def _statement_name(self, statement: NodeOrLeaf) -> str | None:
        if statement.type == "expr_stmt":
            return parso_utils.get_assignment_target_name(statement)
        function_node, _ = _unwrap_function(statement)
        if function_node is not None:
            return parso_utils.get_value(parso_utils.get_children(function_node)[1])
        return None

    def _build_member(self, statement: NodeOrLeaf) -> MemberSymbol | None:
        if statement.type == "expr_stmt":
            return self._build_field(statement)

        function_node, decorators = _unwrap_function(statement)
        if function_node is None:
            return None
        name = parso_utils.get_value(parso_utils.get_children(function_node)[1])
        if not name:
            return None

        annotations = []
        for decorator in decorators:
            callee, arguments = _decorator_call(decorator)
            annotation = self._build_annotation(callee, arguments)
            if annotation is not None:
                annotations.append(annotation)

        return MemberSymbol(
            name=name,
            kind=MemberKind.METHOD,
            type=_return_annotation(function_node),
            annotations=tuple(annotations),
        )

    def _build_field(self, statement: NodeOrLeaf) -> MemberSymbol | None:
        name = parso_utils.get_assignment_target_name(statement)
        if not name:
            return None

        annotation_node = parso_utils.get_annotation_node(statement)
        if annotation_node is None:
            return MemberSymbol(name=name, kind=MemberKind.FIELD)

        field_type = parso_utils.get_code(annotation_node)
        annotations = []
        subscript_name, elements = parso_utils.find_subscript_elements(annotation_node)
        if subscript_name and self._is_annotated(subscript_name) and elements:
            field_type = parso_utils.get_code(elements[0])
            for element in elements[1:]:
                annotation = self._build_annotation(*parso_utils.split_call(element))
                if annotation is not None:
                    annotations.append(annotation)

        return MemberSymbol(
            name=name,
            kind=MemberKind.FIELD,
            type=field_type,
            annotations=tuple(annotations),
        )

    def _is_annotated(self, name: str) -> bool:
        return name in ANNOTATED_NAMES or self.resolver.resolve_full_name(name) in ANNOTATED_NAMES

    def _build_annotation(
        self, callee: str | None, arguments: list[NodeOrLeaf] | None
    ) -> AnnotationInstance | None:
        if callee is None:
            return None
        kind = self.marker_names.get(self.resolver.resolve_full_name(callee))
        if kind is None:
            return None

        positional, keywords = parso_utils.split_arguments(arguments or [])
        # None arguments count as omitted, like in the marker classes
        keywords = {key: node for key, node in keywords.items() if not _is_none(node)}
        if len(positional) == 1 and _is_none(positional[0]):
            positional = []
        first_parameter = keywords.pop(POSITIONAL_PARAMETERS[kind], None)
        if first_parameter is not None and not positional:
            positional = [first_parameter]

        return AnnotationInstance(
            kind=kind,
            args=tuple(self._evaluate(node) for node in positional),
            kwargs={key: self._evaluate(node) for key, node in keywords.items()},
            arg_sources=tuple(parso_utils.get_code(node) for node in positional),
        )

    def _evaluate(self, node: NodeOrLeaf) -> Any:
        """Evaluate an argument symbolically.

        Literals evaluate to their value and names bound in the module or the
        class to their dotted name. Anything else, notably names of members
        that are generated later, evaluates to None.
        """
        if node.type == "string":
            return parso_utils.extract_string_value(node)
        if node.type in ("number", "factor"):
            return parso_utils.extract_numeric_value(node)
        if node.type == "keyword":
            return parso_utils.extract_boolean_value(node)

        dotted = parso_utils.get_dotted_name(node)
        if dotted is None:
            return None
        root = dotted.split(".")[0]
        if root in self.class_names or self.resolver.is_bound(dotted):
            return dotted
        return None


def _unwrap_function(statement: NodeOrLeaf) -> tuple[NodeOrLeaf | None, list[NodeOrLeaf]]:
    """Return the funcdef of a (decorated, async) function statement and its decorators."""
    decorators: list[NodeOrLeaf] = []
    node = statement
    if node.type == "decorated":
        children = parso_utils.get_children(node)
        first = children[0]
        if first.type == "decorators":
            decorators = [d for d in parso_utils.get_children(first) if d.type == "decorator"]
        elif first.type == "decorator":
            decorators = [first]
        node = children[-1]
    if node.type in ("async_stmt", "async_funcdef"):
        node = parso_utils.get_children(node)[-1]
    if node.type != "funcdef":
        return None, []
    return node, decorators


def _decorator_call(decorator: NodeOrLeaf) -> tuple[str | None, list[NodeOrLeaf] | None]:
    """Split a decorator into its dotted name and call arguments."""
    children = [
        c
        for c in parso_utils.get_children(decorator)
        if c.type != "newline" and not parso_utils.is_operator(c, "@")
    ]
    if len(children) == 1:
        return parso_utils.split_call(children[0])

    # Older grammars: '@' dotted_name '(' [arglist] ')'
    if not children:
        return None, None
    callee = parso_utils.get_dotted_name(children[0])
    if len(children) < 3 or not parso_utils.is_operator(children[1], "("):
        return callee, None
    arguments = []
    for child in children[2:-1]:
        if child.type == "arglist":
            arguments.extend(
                c for c in parso_utils.get_children(child) if not parso_utils.is_operator(c, ",")
            )
        else:
            arguments.append(child)
    return callee, arguments


def _return_annotation(function_node: NodeOrLeaf) -> str | None:
    children = parso_utils.get_children(function_node)
    for index, child in enumerate(children):
        if parso_utils.is_operator(child, "->") and index + 1 < len(children):
            return parso_utils.get_code(children[index + 1])
    return None


def _is_none(node: NodeOrLeaf) -> bool:
    return node.type == "keyword" and parso_utils.get_value(node) == "None"
