"""Naming convention for generated property names."""

from __future__ import annotations

from vmgen.constants import FIELD_PREFIXES


def default_property_name(field_name: str) -> str | None:
    """Derive the default property name of a backing field.

    Exactly one leading ``_`` is stripped, otherwise exactly one leading ``m_``;
    the first remaining character is uppercased::

        _firstName -> FirstName
        m_firstName -> FirstName
        _f -> F

    Returns None when nothing is left after stripping the prefix.
    """
    name = field_name
    for prefix in FIELD_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break

    if not name:
        return None

    first_character = name[0].upper()
    return first_character + name[1:] if len(name) > 1 else first_character
