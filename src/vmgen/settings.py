"""Configuration for the vmgen inspector."""

from __future__ import annotations

import logging
import os

import param

from .constants import DEFAULT_COMMAND_SUFFIX, DEFAULT_MARKER_MODULES, MARKER_KINDS
from .models import AnnotationKind

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InspectorSettings(param.Parameterized):
    """Settings shared by the symbol providers and the inspector."""

    command_suffix = param.String(
        default=DEFAULT_COMMAND_SUFFIX,
        allow_None=False,
        doc="Appended to the execute method name when no CommandName is given.",
    )

    marker_modules = param.List(
        default=list(DEFAULT_MARKER_MODULES),
        item_type=str,
        doc="Modules whose markers are recognized in parsed source.",
    )

    log_level = param.Selector(default="INFO", objects=LOG_LEVELS)

    @classmethod
    def from_environment(cls, **overrides) -> InspectorSettings:
        """Create settings from VMGEN_* environment variables.

        Keyword overrides take precedence over the environment.
        """
        values: dict = {}
        if suffix := os.environ.get("VMGEN_COMMAND_SUFFIX"):
            values["command_suffix"] = suffix
        if modules := os.environ.get("VMGEN_MARKER_MODULES"):
            values["marker_modules"] = [m.strip() for m in modules.split(",") if m.strip()]
        if level := os.environ.get("VMGEN_LOG_LEVEL"):
            values["log_level"] = level.upper()
        values.update(overrides)
        logger.debug(f"Inspector settings from environment: {values}")
        return cls(**values)

    def qualified_marker_names(self) -> dict[str, AnnotationKind]:
        """Map every fully qualified marker name to its annotation kind."""
        return {
            f"{module}.{name}": kind
            for module in self.marker_modules
            for name, kind in MARKER_KINDS.items()
        }
