"""
Inspector components.

Pure functions turning marked members into the generation model; the
orchestration lives in ``vmgen.inspector``.
"""

from __future__ import annotations

from .commands import build_command
from .invalidation import index_invalidations, resolve_invalidations
from .naming import default_property_name
from .properties import build_property

__all__ = [
    "build_command",
    "build_property",
    "default_property_name",
    "index_invalidations",
    "resolve_invalidations",
]
