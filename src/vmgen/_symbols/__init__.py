"""
Symbol providers.

Produce the read-only member view consumed by ``vmgen.inspector``, either
statically from Python source (parso) or from a live class object.
"""

from __future__ import annotations

from .import_resolver import ImportResolver
from .runtime_provider import get_runtime_members
from .source_provider import SourceSymbolProvider

__all__ = [
    "ImportResolver",
    "SourceSymbolProvider",
    "get_runtime_members",
]
