"""Command model building."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vmgen.constants import CAN_EXECUTE_METHOD, COMMAND_NAME, DEFAULT_COMMAND_SUFFIX
from vmgen.models import AnnotationKind, CommandToGenerate

from .arguments import find_annotation, resolve_named, resolve_symbolic

if TYPE_CHECKING:
    from vmgen.models import MemberSymbol


def build_command(
    member: MemberSymbol, command_suffix: str = DEFAULT_COMMAND_SUFFIX
) -> CommandToGenerate | None:
    """Build the command generated for ``member``, None if it has no command marker.

    The command name defaults to the method name plus ``command_suffix`` and the
    can-execute method to the positional argument; ``CommandName`` and
    ``CanExecuteMethod`` override them independently.
    """
    command_annotation = find_annotation(member, AnnotationKind.COMMAND)
    if command_annotation is None:
        return None

    command_name = f"{member.name}{command_suffix}"
    if COMMAND_NAME in command_annotation.kwargs:
        command_name = resolve_named(command_annotation, COMMAND_NAME) or command_name
    can_execute_method = resolve_symbolic(command_annotation, named=CAN_EXECUTE_METHOD)

    return CommandToGenerate(
        execute_method=member.name,
        command_name=command_name,
        can_execute_method=can_execute_method or None,
    )
