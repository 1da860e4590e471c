"""
View-model member inspection.

Builds the generation model of one type from its marked members: properties
from fields carrying the Property marker and commands from methods carrying
the command marker, linked through command_invalidate markers.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._inspector import (
    build_command,
    build_property,
    index_invalidations,
    resolve_invalidations,
)
from ._symbols import SourceSymbolProvider, get_runtime_members
from .models import InspectionResult
from .settings import InspectorSettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .models import InvalidationIndex, MemberSymbol

logger = logging.getLogger(__name__)


def inspect_members(
    members: Iterable[MemberSymbol], settings: InspectorSettings | None = None
) -> InspectionResult:
    """Inspect the members of one type and return its generation model.

    Members are scanned once: fields may yield a property, methods may yield a
    command and feed the invalidation index. Commands are linked to their
    affecting properties after all members have been seen, so a method may
    refer to a property or a can-execute method declared after it.
    """
    command_suffix = (settings or InspectorSettings()).command_suffix
    result = InspectionResult()
    invalidation_index: InvalidationIndex = {}

    for member in members:
        if member.is_field:
            property_to_generate = build_property(member)
            if property_to_generate is not None:
                result.properties_to_generate.append(property_to_generate)
        elif member.is_method:
            index_invalidations(member, invalidation_index)
            command_to_generate = build_command(member, command_suffix)
            if command_to_generate is not None:
                result.commands_to_generate.append(command_to_generate)

    resolve_invalidations(result.commands_to_generate, invalidation_index)

    logger.debug(
        f"Inspected {len(result.properties_to_generate)} properties and "
        f"{len(result.commands_to_generate)} commands"
    )
    return result


class ViewModelInspector:
    """Inspects view-model classes from source code or live class objects."""

    def __init__(self, settings: InspectorSettings | None = None):
        self.settings = settings or InspectorSettings()

    def inspect_source(self, source: str, class_name: str) -> InspectionResult | None:
        """Inspect class ``class_name`` defined in ``source``.

        Returns None when the class is not found.
        """
        members = SourceSymbolProvider(self.settings).get_class_members(source, class_name)
        if members is None:
            return None
        return inspect_members(members, self.settings)

    def inspect_module(self, source: str) -> dict[str, InspectionResult]:
        """Inspect every class in ``source`` that carries at least one marker."""
        provider = SourceSymbolProvider(self.settings)
        return {
            class_name: inspect_members(members, self.settings)
            for class_name, members in provider.get_marked_classes(source).items()
        }

    def inspect_class(self, cls: type) -> InspectionResult:
        """Inspect a live class declared with ``vmgen.markers``."""
        return inspect_members(get_runtime_members(cls), self.settings)
