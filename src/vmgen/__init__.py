"""
vmgen: generation model for view-model code generation.

Declare view-models with the markers exported here and inspect them with
``ViewModelInspector`` (or ``inspect_members`` for a prepared member view).
"""

from __future__ import annotations

from .__version import __version__
from .inspector import ViewModelInspector, inspect_members
from .markers import (
    OnChangeCallMethod,
    OnChangePublishEvent,
    Property,
    command,
    command_invalidate,
)
from .models import (
    AnnotationInstance,
    AnnotationKind,
    CommandToGenerate,
    EventToPublish,
    InspectionResult,
    MemberKind,
    MemberSymbol,
    MethodToCall,
    PropertyToGenerate,
)
from .settings import InspectorSettings

__all__ = [
    "AnnotationInstance",
    "AnnotationKind",
    "CommandToGenerate",
    "EventToPublish",
    "InspectionResult",
    "InspectorSettings",
    "MemberKind",
    "MemberSymbol",
    "MethodToCall",
    "OnChangeCallMethod",
    "OnChangePublishEvent",
    "Property",
    "PropertyToGenerate",
    "ViewModelInspector",
    "__version__",
    "command",
    "command_invalidate",
    "inspect_members",
]
