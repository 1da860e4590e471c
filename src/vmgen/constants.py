"""Constants shared by the vmgen inspector and symbol providers."""

from __future__ import annotations

from .models import AnnotationKind

# Marker names relative to a marker module (see InspectorSettings.marker_modules)
MARKER_KINDS: dict[str, AnnotationKind] = {
    "Property": AnnotationKind.PROPERTY,
    "OnChangePublishEvent": AnnotationKind.ON_CHANGE_PUBLISH_EVENT,
    "OnChangeCallMethod": AnnotationKind.ON_CHANGE_CALL_METHOD,
    "command": AnnotationKind.COMMAND,
    "command_invalidate": AnnotationKind.COMMAND_INVALIDATE,
}

DEFAULT_MARKER_MODULES = ("vmgen", "vmgen.markers")

DEFAULT_COMMAND_SUFFIX = "Command"

# Named arguments
PROPERTY_NAME = "PropertyName"
EVENT_CONSTRUCTOR_ARGS = "EventConstructorArgs"
EVENT_AGGREGATOR_MEMBER_NAME = "EventAggregatorMemberName"
METHOD_ARGS = "MethodArgs"
CAN_EXECUTE_METHOD = "CanExecuteMethod"
COMMAND_NAME = "CommandName"

# First parameter of each marker, also accepted as a keyword argument
POSITIONAL_PARAMETERS: dict[AnnotationKind, str] = {
    AnnotationKind.PROPERTY: "name",
    AnnotationKind.ON_CHANGE_PUBLISH_EVENT: "event_type",
    AnnotationKind.ON_CHANGE_CALL_METHOD: "method_name",
    AnnotationKind.COMMAND: "can_execute",
    AnnotationKind.COMMAND_INVALIDATE: "property_name",
}

# Field name prefixes stripped by the naming convention, in priority order
FIELD_PREFIXES = ("_", "m_")

# Call wrapping a forward reference, e.g. command_invalidate(nameof(FirstName))
NAMEOF_FUNCTIONS = frozenset({"nameof"})

ANNOTATED_NAMES = frozenset({"Annotated", "typing.Annotated", "typing_extensions.Annotated"})

EXCLUDED_DIRS = {".venv", ".pixi", "node_modules"}
