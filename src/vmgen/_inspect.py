"""Inspect command implementation for dumping generation models."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import EXCLUDED_DIRS
from .inspector import ViewModelInspector

if TYPE_CHECKING:
    from .settings import InspectorSettings

logger = logging.getLogger(__name__)


def expand_paths(paths: list[str]) -> list[Path]:
    """
    Expand file/directory paths to a list of Python files.

    Directories are recursively searched for .py files, excluding
    directories defined in EXCLUDED_DIRS constant.

    Args:
        paths: List of file or directory paths to expand

    Returns:
        List of Path objects pointing to Python files
    """
    python_files: list[Path] = []

    for path_str in paths:
        path = Path(path_str)
        if not path.exists():
            print(f"Error: Path not found: {path_str}", file=sys.stderr)
            sys.exit(1)

        if path.is_file():
            if path.suffix == ".py":
                python_files.append(path)
            else:
                print(f"Error: Not a Python file: {path_str}", file=sys.stderr)
                sys.exit(1)
        elif path.is_dir():
            # Recursively find all .py files, excluding certain directories
            python_files.extend(
                sorted(
                    py_file
                    for py_file in path.rglob("*.py")
                    if not any(parent.name in EXCLUDED_DIRS for parent in py_file.parents)
                )
            )
        else:
            print(f"Error: Invalid path: {path_str}", file=sys.stderr)
            sys.exit(1)

    return python_files


def collect_models(
    python_files: list[Path],
    settings: InspectorSettings,
    class_name: str | None = None,
) -> dict[str, dict[str, Any]]:
    """Inspect the marked classes of every file, keyed by path and class name."""
    inspector = ViewModelInspector(settings)
    models: dict[str, dict[str, Any]] = {}

    for path in python_files:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading {path}: {e}", file=sys.stderr)
            sys.exit(1)

        results = inspector.inspect_module(content)
        if class_name is not None:
            results = {name: r for name, r in results.items() if name == class_name}
        if results:
            logger.debug(f"{path}: {len(results)} class(es) inspected")
            models[str(path)] = {name: result.to_dict() for name, result in results.items()}

    return models


def run_inspect(
    files: list[str],
    settings: InspectorSettings,
    class_name: str | None = None,
    indent: int | None = 2,
) -> None:
    """Run inspect command on the provided files."""
    python_files = expand_paths(files)

    if not python_files:
        print("No Python files found to inspect", file=sys.stderr)
        sys.exit(1)

    models = collect_models(python_files, settings, class_name)
    if not models:
        target = f"class {class_name!r}" if class_name else "marked classes"
        print(f"No {target} found in {len(python_files)} file(s)", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(models, indent=indent))
