from __future__ import annotations

from vmgen.models import AnnotationInstance, AnnotationKind, MemberKind, MemberSymbol


def annotation(kind: AnnotationKind, *args, sources=None, **kwargs) -> AnnotationInstance:
    """Create an annotation; argument sources default to the repr of the args."""
    if sources is None:
        sources = tuple(repr(a) for a in args)
    return AnnotationInstance(kind=kind, args=args, kwargs=kwargs, arg_sources=sources)


def field(name: str, *annotations: AnnotationInstance, field_type: str = "str") -> MemberSymbol:
    return MemberSymbol(name=name, kind=MemberKind.FIELD, type=field_type, annotations=annotations)


def method(name: str, *annotations: AnnotationInstance) -> MemberSymbol:
    return MemberSymbol(name=name, kind=MemberKind.METHOD, annotations=annotations)
