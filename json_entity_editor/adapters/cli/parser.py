# json_entity_editor/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from json_entity_editor.infrastructure.config import DEFAULT_CONFIG_FILENAME

MAX_INDENT = 8


def create_argument_parser() -> ArgumentParser:
    """Create and configure argument parser with all CLI options"""
    parser = ArgumentParser(
        prog="json-entity-editor",
        description=(
            "Load JSON text into an editable entity tree, report duplicate keys "
            "and print the canonical JSON rendering"
        ),
    )

    parser.add_argument(
        "input", nargs="?", default="-", help="JSON file to read (default: '-' for stdin)"
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to editor configuration JSON (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"Spaces per nesting level, 0-{MAX_INDENT} (default: from configuration, 2)",
    )

    # Output modes
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Only validate; exit non-zero if duplicate keys prevent serialization",
    )
    mode.add_argument(
        "--dump-entity",
        action="store_true",
        help="Print the tagged entity snapshot instead of plain JSON",
    )

    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Console logging level (default: INFO, or DEBUG if enabled in configuration)",
    )
    parser.add_argument("--log-file", default=None, help="Also write a debug log to this file")
    parser.add_argument(
        "--log-to-file",
        action="store_true",
        help="Write a debug log to logs/json_entity_editor_[timestamp].log",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress console logging")

    return parser
