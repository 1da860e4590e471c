from __future__ import annotations

import logging

import pytest

from vmgen.inspector import ViewModelInspector
from vmgen.settings import InspectorSettings


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from VMGEN_* variables of the calling environment."""
    for name in ("VMGEN_COMMAND_SUFFIX", "VMGEN_MARKER_MODULES", "VMGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return InspectorSettings()


@pytest.fixture
def inspector(settings):
    return ViewModelInspector(settings)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The command line reconfigures the root logger; undo it after each test."""
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
