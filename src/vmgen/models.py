"""Data models for the vmgen member inspector."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any


class MemberKind(str, Enum):
    """Kind of a type member handed over by a symbol provider."""

    FIELD = "field"
    METHOD = "method"


class AnnotationKind(str, Enum):
    """Closed set of markers the inspector understands."""

    PROPERTY = "property"
    ON_CHANGE_PUBLISH_EVENT = "on-change-publish-event"
    ON_CHANGE_CALL_METHOD = "on-change-call-method"
    COMMAND = "command"
    COMMAND_INVALIDATE = "command-invalidate"


@dataclass(frozen=True)
class AnnotationInstance:
    """One marker applied to a member.

    ``args`` holds the positional values in order; an entry is ``None`` when
    the provider could not evaluate it (for example a reference to a property
    that is only generated later). ``arg_sources`` keeps the source text of
    each positional argument expression, parallel to ``args``, when the
    provider has it.
    """

    kind: AnnotationKind
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    arg_sources: tuple[str, ...] | None = None


@dataclass(frozen=True)
class MemberSymbol:
    """Read-only view of a field or method of the inspected type."""

    name: str
    kind: MemberKind
    type: str | None = None
    annotations: tuple[AnnotationInstance, ...] = ()

    @property
    def is_field(self) -> bool:
        return self.kind is MemberKind.FIELD

    @property
    def is_method(self) -> bool:
        return self.kind is MemberKind.METHOD


@dataclass
class EventToPublish:
    """Event published from a generated property setter."""

    event_type: str
    event_constructor_args: str | None = None
    event_aggregator_member_name: str | None = None


@dataclass
class MethodToCall:
    """Method called from a generated property setter."""

    method_name: str
    method_args: str | None = None


@dataclass
class PropertyToGenerate:
    """Property generated from an annotated backing field."""

    name: str
    type: str | None
    backing_field_name: str
    events_to_publish: list[EventToPublish] = field(default_factory=list)
    methods_to_call: list[MethodToCall] = field(default_factory=list)


@dataclass
class CommandToGenerate:
    """Command generated from an annotated execute method."""

    execute_method: str
    command_name: str
    can_execute_method: str | None = None
    can_execute_affecting_properties: list[str] = field(default_factory=list)


InvalidationIndex = dict[str, list[str]]


@dataclass
class InspectionResult:
    """Generation model for one inspected type."""

    properties_to_generate: list[PropertyToGenerate] = field(default_factory=list)
    commands_to_generate: list[CommandToGenerate] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check whether nothing is generated for the type."""
        return not self.properties_to_generate and not self.commands_to_generate

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dictionaries for JSON output."""
        return {
            "properties_to_generate": [asdict(p) for p in self.properties_to_generate],
            "commands_to_generate": [asdict(c) for c in self.commands_to_generate],
        }
