from __future__ import annotations

import argparse
import logging

from .__version import __version__
from ._logging import setup_colored_logging
from .settings import LOG_LEVELS, InspectorSettings

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
vmgen: generation model for view-model code generation

Reads Python view-model classes declared with the vmgen markers and prints
what gets generated for them:
• Properties from fields marked with Property, with their change hooks
• Commands from methods marked with command
• The properties refreshing each command's availability (command_invalidate)"""


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the vmgen command line."""
    parser = argparse.ArgumentParser(
        description=_DESCRIPTION,
        prog="vmgen",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=LOG_LEVELS,
        help="Set the logging level (default: $VMGEN_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--command-suffix",
        type=str,
        help="Suffix of generated command names (default: $VMGEN_COMMAND_SUFFIX or Command)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Inspect subcommand
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print the generation model of marked classes as JSON",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    inspect_parser.add_argument(
        "files",
        nargs="+",
        type=str,
        help="Python files or directories to inspect (directories are searched recursively, excluding .venv, .pixi, and node_modules)",
    )
    inspect_parser.add_argument(
        "--class", dest="class_name", type=str, help="Only inspect the class with this name"
    )
    inspect_parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: %(default)s)"
    )

    args = parser.parse_args(argv)

    # Require explicit subcommand
    if args.command is None:
        parser.error(
            "A subcommand is required. Use 'vmgen inspect FILE' to inspect a file.\n"
            "See 'vmgen --help' for available commands."
        )

    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.command_suffix is not None:
        overrides["command_suffix"] = args.command_suffix
    try:
        settings = InspectorSettings.from_environment(**overrides)
    except ValueError as e:
        parser.error(f"Invalid configuration: {e}")

    # Configure colored logging
    setup_colored_logging(level=getattr(logging, settings.log_level))

    if args.command == "inspect":
        from ._inspect import run_inspect

        logger.debug(f"vmgen {__version__} inspecting {len(args.files)} path(s)")
        run_inspect(args.files, settings, class_name=args.class_name, indent=args.indent)


if __name__ == "__main__":
    main()
