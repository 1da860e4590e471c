"""
Runtime member provider.

Builds the member view of a live class declared with ``vmgen.markers``.
Annotated fields come first in annotation order, then methods in definition
order.
"""

from __future__ import annotations

import inspect
import logging
from typing import Annotated, Any, get_args, get_origin

from vmgen.markers import Marker, get_markers
from vmgen.models import AnnotationInstance, MemberKind, MemberSymbol

logger = logging.getLogger(__name__)


def get_runtime_members(cls: type) -> list[MemberSymbol]:
    """Return the members of ``cls`` carrying the markers of ``vmgen.markers``."""
    members = [
        MemberSymbol(
            name=name,
            kind=MemberKind.FIELD,
            type=_type_name(field_type),
            annotations=tuple(_annotation(m) for m in markers),
        )
        for name, field_type, markers in _iter_annotated_fields(cls)
    ]

    for name, value in vars(cls).items():
        if name.startswith("__") and name.endswith("__"):
            continue
        function = value.__func__ if isinstance(value, (staticmethod, classmethod)) else value
        if not inspect.isfunction(function):
            continue
        members.append(
            MemberSymbol(
                name=name,
                kind=MemberKind.METHOD,
                type=_return_type(function),
                annotations=tuple(_annotation(m) for m in get_markers(function)),
            )
        )
    return members


def _iter_annotated_fields(cls: type):
    try:
        annotations = inspect.get_annotations(cls, eval_str=True)
    except NameError as e:
        # Unresolvable string annotations carry no markers
        logger.warning(f"Could not evaluate annotations of {cls.__name__}: {e}")
        annotations = inspect.get_annotations(cls)
    for name, hint in annotations.items():
        if get_origin(hint) is Annotated:
            field_type, *metadata = get_args(hint)
            yield name, field_type, [m for m in metadata if isinstance(m, Marker)]
        else:
            yield name, hint, []


def _annotation(marker: Marker) -> AnnotationInstance:
    return AnnotationInstance(
        kind=marker.kind,
        args=tuple(_symbol_value(a) for a in marker.args),
        kwargs={key: _symbol_value(value) for key, value in marker.kwargs.items()},
        arg_sources=tuple(_source_text(a) for a in marker.args),
    )


def _symbol_value(value: Any) -> Any:
    """Types and callables stand for their name, anything else for itself."""
    if isinstance(value, type) or callable(value):
        return getattr(value, "__name__", None)
    return value


def _source_text(value: Any) -> str:
    if isinstance(value, str):
        return repr(value)
    name = getattr(value, "__name__", None)
    return name if name is not None else repr(value)


def _type_name(hint: Any) -> str | None:
    if hint is None or hint is inspect.Signature.empty:
        return None
    if isinstance(hint, str):
        return hint
    if isinstance(hint, type):
        return hint.__name__
    return repr(hint).replace("typing.", "")


def _return_type(function: Any) -> str | None:
    return _type_name(inspect.signature(function).return_annotation)
