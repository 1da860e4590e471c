"""
Markers declaring what gets generated for a view-model.

Fields are marked through ``typing.Annotated`` metadata, methods through
decorators::

    class EmployeeViewModel:
        _first_name: Annotated[str, Property(), OnChangePublishEvent(EmployeeSavedEvent)]

        @command(CanExecuteMethod="can_save")
        @command_invalidate("FirstName")
        def save(self): ...

Markers only record their arguments; the generation model is built by
``vmgen.inspector``.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .models import AnnotationKind

F = TypeVar("F", bound=Callable[..., Any])

MARKERS_ATTRIBUTE = "__vmgen_markers__"


class Marker:
    """Base class of all markers."""

    kind: AnnotationKind

    def __init__(self, *args: Any, **kwargs: Any):
        self.args = args
        self.kwargs = {key: value for key, value in kwargs.items() if value is not None}

    def __repr__(self) -> str:
        arguments = [repr(a) for a in self.args]
        arguments.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        return f"{type(self).__name__}({', '.join(arguments)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Marker):
            return NotImplemented
        return (self.kind, self.args, self.kwargs) == (other.kind, other.args, other.kwargs)

    __hash__ = None  # type: ignore[assignment]


class Property(Marker):
    """Generate a property for the marked backing field."""

    kind = AnnotationKind.PROPERTY

    def __init__(self, name: str | None = None, *, PropertyName: str | None = None):  # noqa: N803
        super().__init__(*(() if name is None else (name,)), PropertyName=PropertyName)


class OnChangePublishEvent(Marker):
    """Publish an event when the generated property changes."""

    kind = AnnotationKind.ON_CHANGE_PUBLISH_EVENT

    def __init__(
        self,
        event_type: type | str,
        *,
        EventConstructorArgs: str | None = None,  # noqa: N803
        EventAggregatorMemberName: str | None = None,  # noqa: N803
    ):
        super().__init__(
            event_type,
            EventConstructorArgs=EventConstructorArgs,
            EventAggregatorMemberName=EventAggregatorMemberName,
        )


class OnChangeCallMethod(Marker):
    """Call a method when the generated property changes."""

    kind = AnnotationKind.ON_CHANGE_CALL_METHOD

    def __init__(self, method_name: str, *, MethodArgs: str | None = None):  # noqa: N803
        super().__init__(method_name, MethodArgs=MethodArgs)


class Command(Marker):
    """Generate a command executing the marked method."""

    kind = AnnotationKind.COMMAND


class CommandInvalidate(Marker):
    """Refresh the command's availability when the named property changes."""

    kind = AnnotationKind.COMMAND_INVALIDATE


def _add_marker(func: F, marker: Marker) -> F:
    # Decorators apply bottom-up; prepend to keep top-down declaration order
    markers = list(getattr(func, MARKERS_ATTRIBUTE, ()))
    markers.insert(0, marker)
    setattr(func, MARKERS_ATTRIBUTE, tuple(markers))
    return func


def command(
    can_execute: Callable[..., Any] | str | None = None,
    *,
    CanExecuteMethod: Callable[..., Any] | str | None = None,  # noqa: N803
    CommandName: str | None = None,  # noqa: N803
):
    """Mark a method as the execute method of a generated command.

    Usable bare (``@command``) or called (``@command("can_save")``). A callable
    passed positionally is taken as the decorated method, so give the
    can-execute method by name or through ``CanExecuteMethod``.
    """
    if callable(can_execute) and CanExecuteMethod is None and CommandName is None:
        return _add_marker(can_execute, Command())

    args = () if can_execute is None else (can_execute,)
    marker = Command(*args, CanExecuteMethod=CanExecuteMethod, CommandName=CommandName)

    def decorator(func: F) -> F:
        return _add_marker(func, marker)

    return decorator


def command_invalidate(property_name: str) -> Callable[[F], F]:
    """Refresh the command of the marked method when ``property_name`` changes.

    Repeatable; put it on the execute or the can-execute method.
    """
    marker = CommandInvalidate(property_name)

    def decorator(func: F) -> F:
        return _add_marker(func, marker)

    return decorator


def get_markers(obj: Any) -> tuple[Marker, ...]:
    """Return the markers recorded on a decorated function."""
    return getattr(obj, MARKERS_ATTRIBUTE, ())
