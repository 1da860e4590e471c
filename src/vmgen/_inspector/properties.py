"""
Property model building.
Turns a field carrying the Property marker into a PropertyToGenerate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vmgen.constants import (
    EVENT_AGGREGATOR_MEMBER_NAME,
    EVENT_CONSTRUCTOR_ARGS,
    METHOD_ARGS,
    PROPERTY_NAME,
)
from vmgen.models import AnnotationKind, EventToPublish, MethodToCall, PropertyToGenerate

from .arguments import find_annotation, find_annotations, resolve_named, resolve_symbolic
from .naming import default_property_name

if TYPE_CHECKING:
    from vmgen.models import AnnotationInstance, MemberSymbol

logger = logging.getLogger(__name__)


def build_property(member: MemberSymbol) -> PropertyToGenerate | None:
    """Build the property generated for ``member``, None if it has no Property marker."""
    property_annotation = find_annotation(member, AnnotationKind.PROPERTY)
    if property_annotation is None:
        return None

    property_name = resolve_property_name(member.name, property_annotation)
    if not property_name:
        logger.debug(f"No property name resolved for field {member.name!r}")
        return None

    return PropertyToGenerate(
        name=property_name,
        type=member.type,
        backing_field_name=member.name,
        events_to_publish=collect_events(member),
        methods_to_call=collect_methods(member),
    )


def resolve_property_name(field_name: str, annotation: AnnotationInstance) -> str | None:
    """Resolve the property name: positional, then PropertyName, then convention.

    An empty positional name falls back to the convention. An explicit empty
    PropertyName is rejected and resolves to None.
    """
    property_name = resolve_symbolic(annotation) or None

    if PROPERTY_NAME in annotation.kwargs:
        override = resolve_named(annotation, PROPERTY_NAME)
        if override == "":
            logger.warning(f"Empty {PROPERTY_NAME} on field {field_name!r}, property skipped")
            return None
        property_name = override

    if property_name is None:
        property_name = default_property_name(field_name)
    return property_name


def collect_events(member: MemberSymbol) -> list[EventToPublish]:
    """Collect the events published when the property changes, in declaration order."""
    events_to_publish = []
    for annotation in find_annotations(member, AnnotationKind.ON_CHANGE_PUBLISH_EVENT):
        event_type = resolve_symbolic(annotation)
        if not event_type:
            logger.debug(f"Event without type on field {member.name!r} skipped")
            continue
        events_to_publish.append(
            EventToPublish(
                event_type=event_type,
                event_constructor_args=resolve_named(annotation, EVENT_CONSTRUCTOR_ARGS),
                event_aggregator_member_name=resolve_named(
                    annotation, EVENT_AGGREGATOR_MEMBER_NAME
                ),
            )
        )
    return events_to_publish


def collect_methods(member: MemberSymbol) -> list[MethodToCall]:
    """Collect the methods called when the property changes, in declaration order."""
    methods_to_call = []
    for annotation in find_annotations(member, AnnotationKind.ON_CHANGE_CALL_METHOD):
        method_name = resolve_symbolic(annotation)
        if not method_name:
            logger.debug(f"Method call without name on field {member.name!r} skipped")
            continue
        methods_to_call.append(
            MethodToCall(method_name=method_name, method_args=resolve_named(annotation, METHOD_ARGS))
        )
    return methods_to_call
