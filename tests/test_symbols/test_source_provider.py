"""Tests for building the member view from Python source."""

from __future__ import annotations

import pytest

from vmgen._symbols.source_provider import SourceSymbolProvider
from vmgen.models import AnnotationKind, MemberKind
from vmgen.settings import InspectorSettings

EMPLOYEE_SOURCE = '''\
from typing import Annotated

from vmgen import OnChangeCallMethod, OnChangePublishEvent, Property, command, command_invalidate

from .events import EmployeeSavedEvent


class EmployeeViewModel:
    _first_name: Annotated[
        str,
        Property(),
        OnChangePublishEvent(EmployeeSavedEvent, EventConstructorArgs="self.id, self.first_name"),
        OnChangeCallMethod("update_title"),
    ] = ""
    m_last_name: Annotated[str, Property("LastName")] = ""
    _age: int = 0
    counter = 0

    @command(CanExecuteMethod=can_save)
    @command_invalidate(FirstName)
    @command_invalidate("LastName")
    def save(self) -> None:
        pass

    def can_save(self) -> bool:
        return bool(self._first_name)

    async def load(self):
        pass
'''


@pytest.fixture
def provider(settings):
    return SourceSymbolProvider(settings)


@pytest.fixture
def members(provider):
    return {m.name: m for m in provider.get_class_members(EMPLOYEE_SOURCE, "EmployeeViewModel")}


class TestClassMembers:
    def test_members_in_source_order(self, provider):
        """Members come in source order."""
        members = provider.get_class_members(EMPLOYEE_SOURCE, "EmployeeViewModel")
        assert [(m.name, m.kind) for m in members] == [
            ("_first_name", MemberKind.FIELD),
            ("m_last_name", MemberKind.FIELD),
            ("_age", MemberKind.FIELD),
            ("counter", MemberKind.FIELD),
            ("save", MemberKind.METHOD),
            ("can_save", MemberKind.METHOD),
            ("load", MemberKind.METHOD),
        ]

    def test_missing_class(self, provider):
        """A missing class gives None."""
        assert provider.get_class_members(EMPLOYEE_SOURCE, "Missing") is None

    def test_field_types(self, members):
        """Field types come from the Annotated base or the annotation."""
        assert members["_first_name"].type == "str"
        assert members["_age"].type == "int"
        assert members["counter"].type is None

    def test_method_return_types(self, members):
        """Method types come from the return annotation."""
        assert members["save"].type == "None"
        assert members["can_save"].type == "bool"
        assert members["load"].type is None

    def test_field_markers(self, members):
        """Annotated metadata becomes field annotations."""
        kinds = [a.kind for a in members["_first_name"].annotations]
        assert kinds == [
            AnnotationKind.PROPERTY,
            AnnotationKind.ON_CHANGE_PUBLISH_EVENT,
            AnnotationKind.ON_CHANGE_CALL_METHOD,
        ]
        assert members["_age"].annotations == ()

    def test_imported_name_resolves_symbolically(self, members):
        """Imported names evaluate to their name."""
        event = members["_first_name"].annotations[1]
        assert event.args == ("EmployeeSavedEvent",)
        assert event.kwargs == {"EventConstructorArgs": "self.id, self.first_name"}
        assert event.arg_sources == ("EmployeeSavedEvent",)

    def test_string_literal_argument(self, members):
        """String literals evaluate to their contents."""
        [prop] = members["m_last_name"].annotations
        assert prop.args == ("LastName",)
        assert prop.arg_sources == ('"LastName"',)

    def test_method_markers_in_declaration_order(self, members):
        """Decorator markers keep declaration order."""
        kinds = [a.kind for a in members["save"].annotations]
        assert kinds == [
            AnnotationKind.COMMAND,
            AnnotationKind.COMMAND_INVALIDATE,
            AnnotationKind.COMMAND_INVALIDATE,
        ]

    def test_class_member_resolves_symbolically(self, members):
        """Class members evaluate to their name."""
        command = members["save"].annotations[0]
        assert command.args == ()
        assert command.kwargs == {"CanExecuteMethod": "can_save"}

    def test_forward_reference_keeps_source_text(self, members):
        """Forward references keep their source text."""
        invalidate = members["save"].annotations[1]
        # FirstName is generated later, so it cannot be evaluated
        assert invalidate.args == (None,)
        assert invalidate.arg_sources == ("FirstName",)


class TestMarkerRecognition:
    def test_unknown_decorators_are_ignored(self, provider):
        """Decorators that are not markers are ignored."""
        source = """\
import functools

from vmgen import command


class ViewModel:
    @functools.cache
    @command
    def save(self):
        pass
"""
        [member] = provider.get_class_members(source, "ViewModel")
        [marker] = member.annotations
        assert marker.kind is AnnotationKind.COMMAND
        assert marker.args == ()

    def test_markers_require_import(self, provider):
        """Markers are only recognized when imported."""
        source = """\
class ViewModel:
    @command
    def save(self):
        pass
"""
        [member] = provider.get_class_members(source, "ViewModel")
        assert member.annotations == ()

    def test_module_alias(self, provider):
        """Markers are recognized through a module alias."""
        source = """\
import typing

import vmgen as vm


class ViewModel:
    _name: typing.Annotated[str, vm.Property()]

    @vm.command("can_save")
    def save(self):
        pass
"""
        field, method = provider.get_class_members(source, "ViewModel")
        assert [a.kind for a in field.annotations] == [AnnotationKind.PROPERTY]
        assert field.type == "str"
        assert method.annotations[0].args == ("can_save",)

    def test_markers_module(self, provider):
        """Markers are recognized from vmgen.markers."""
        source = """\
from typing import Annotated

from vmgen.markers import Property


class ViewModel:
    _name: Annotated[str, Property]
"""
        [field] = provider.get_class_members(source, "ViewModel")
        [marker] = field.annotations
        assert marker.kind is AnnotationKind.PROPERTY
        assert marker.args == ()

    def test_import_alias(self, provider):
        """Markers are recognized through an import alias."""
        source = """\
from typing import Annotated as A

from vmgen import Property as P


class ViewModel:
    _name: A[str, P(PropertyName="FullName")]
"""
        [field] = provider.get_class_members(source, "ViewModel")
        [marker] = field.annotations
        assert marker.kwargs == {"PropertyName": "FullName"}

    def test_custom_marker_module(self):
        """Marker modules are configurable."""
        source = """\
from typing import Annotated

from myapp.mvvm import Property


class ViewModel:
    _name: Annotated[str, Property()]
"""
        provider = SourceSymbolProvider(InspectorSettings(marker_modules=["myapp.mvvm"]))
        [field] = provider.get_class_members(source, "ViewModel")
        assert [a.kind for a in field.annotations] == [AnnotationKind.PROPERTY]

    def test_non_annotated_subscript_is_plain_type(self, provider):
        """Other subscripts are plain types."""
        source = """\
from vmgen import Property


class ViewModel:
    _names: list[Property]
"""
        [field] = provider.get_class_members(source, "ViewModel")
        assert field.type == "list[Property]"
        assert field.annotations == ()


class TestArgumentEvaluation:
    def test_literals(self, provider):
        """Literal arguments are evaluated."""
        source = """\
from typing import Annotated

from vmgen import OnChangeCallMethod, Property


class ViewModel:
    _value: Annotated[int, Property(None), OnChangeCallMethod('refresh', MethodArgs=-1)]
"""
        [field] = provider.get_class_members(source, "ViewModel")
        prop, call = field.annotations
        assert prop.args == ()
        assert call.args == ("refresh",)
        assert call.kwargs == {"MethodArgs": -1}

    def test_unbound_name_is_unresolved(self, provider):
        """Unbound names evaluate to None."""
        source = """\
from typing import Annotated

from vmgen import OnChangePublishEvent, Property


class ViewModel:
    _value: Annotated[int, Property(), OnChangePublishEvent(UnknownEvent)]
"""
        [field] = provider.get_class_members(source, "ViewModel")
        event = field.annotations[1]
        assert event.args == (None,)
        assert event.arg_sources == ("UnknownEvent",)

    def test_module_level_class_resolves(self, provider):
        """Module-level classes evaluate to their name."""
        source = """\
from typing import Annotated

from vmgen import OnChangePublishEvent, Property


class NameChanged:
    pass


class ViewModel:
    _value: Annotated[int, Property(), OnChangePublishEvent(NameChanged)]
"""
        members = provider.get_class_members(source, "ViewModel")
        assert members[0].annotations[1].args == ("NameChanged",)


class TestKeywordArguments:
    def test_command_invalidate_property_name_keyword(self, provider):
        """command_invalidate(property_name=...) keeps the source text for the target."""
        source = """\
from vmgen import command, command_invalidate


class ViewModel:
    @command
    @command_invalidate(property_name="FirstName")
    @command_invalidate(property_name=LastName)
    def save(self):
        pass
"""
        [save] = provider.get_class_members(source, "ViewModel")
        _, by_string, by_name = save.annotations
        assert by_string.args == ("FirstName",)
        assert by_string.arg_sources == ('"FirstName"',)
        assert by_string.kwargs == {}
        assert by_name.args == (None,)
        assert by_name.arg_sources == ("LastName",)

    def test_first_parameter_by_keyword(self, provider):
        """Marker first parameters given by keyword become the positional argument."""
        source = """\
from typing import Annotated

from vmgen import OnChangeCallMethod, Property, command


class ViewModel:
    _value: Annotated[int, Property(name="Total"), OnChangeCallMethod(method_name="refresh")]

    @command(can_execute="can_save")
    def save(self):
        pass
"""
        field, method = provider.get_class_members(source, "ViewModel")
        prop, call = field.annotations
        assert prop.args == ("Total",)
        assert prop.kwargs == {}
        assert call.args == ("refresh",)
        assert method.annotations[0].args == ("can_save",)

    def test_none_keywords_are_omitted(self, provider):
        """Keyword arguments set to None are left out, like in the marker classes."""
        source = """\
from typing import Annotated

from vmgen import Property, command


class ViewModel:
    first_name: Annotated[str, Property("Name", PropertyName=None)]

    @command(None, CanExecuteMethod=None, CommandName=None)
    def save(self):
        pass
"""
        field, method = provider.get_class_members(source, "ViewModel")
        assert field.annotations[0].args == ("Name",)
        assert field.annotations[0].kwargs == {}
        assert method.annotations[0].args == ()
        assert method.annotations[0].kwargs == {}


class TestMarkedClasses:
    def test_only_marked_classes(self, provider):
        """Only classes carrying markers are returned."""
        source = EMPLOYEE_SOURCE + """

class Plain:
    value = 1
"""
        classes = provider.get_marked_classes(source)
        assert list(classes) == ["EmployeeViewModel"]

    def test_incomplete_source(self, provider):
        """Incomplete source is still inspected."""
        source = """\
from vmgen import command


class ViewModel:
    @command
    def save(self):
        pass

    def broken(self
"""
        classes = provider.get_marked_classes(source)
        assert "ViewModel" in classes
        assert classes["ViewModel"][0].name == "save"

    def test_empty_source(self, provider):
        """Empty source has no classes."""
        assert provider.get_marked_classes("") == {}
