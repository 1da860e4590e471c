"""
Command invalidation.

Built in two passes: ``index_invalidations`` records, per method, the
properties named by its command_invalidate markers while members are
scanned; ``resolve_invalidations`` then links every command to the
properties that must refresh its availability.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vmgen.models import AnnotationKind

from .arguments import find_annotations, resolve_source_text

if TYPE_CHECKING:
    from collections.abc import Iterable

    from vmgen.models import CommandToGenerate, InvalidationIndex, MemberSymbol

logger = logging.getLogger(__name__)


def index_invalidations(member: MemberSymbol, index: InvalidationIndex) -> None:
    """Add the properties invalidated by ``member`` to ``index``.

    The target property usually is a generated one, so names are read from
    the marker's source text. Empty or unresolvable targets are dropped.
    """
    for annotation in find_annotations(member, AnnotationKind.COMMAND_INVALIDATE):
        property_names = index.setdefault(member.name, [])
        property_name = resolve_source_text(annotation)
        if not property_name:
            logger.debug(f"Unresolved command_invalidate target on {member.name!r} dropped")
            continue
        if property_name not in property_names:
            property_names.append(property_name)


def affecting_properties(method_names: Iterable[str | None], index: InvalidationIndex) -> list[str]:
    """Union the index entries of ``method_names`` in first-seen order."""
    property_names: list[str] = []
    for method_name in method_names:
        if method_name is None:
            continue
        for property_name in index.get(method_name, []):
            if property_name not in property_names:
                property_names.append(property_name)
    return property_names


def resolve_invalidations(commands: Iterable[CommandToGenerate], index: InvalidationIndex) -> None:
    """Set the can-execute affecting properties of every command.

    The execute method's entry comes first, then the can-execute method's.
    """
    for command in commands:
        command.can_execute_affecting_properties = affecting_properties(
            (command.execute_method, command.can_execute_method), index
        )
