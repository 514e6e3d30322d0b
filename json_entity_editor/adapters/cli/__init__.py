# json_entity_editor/adapters/cli/__init__.py

"""CLI adapter for the JSON entity editor"""

# Local imports
from json_entity_editor.adapters.cli.main import format_path
from json_entity_editor.adapters.cli.main import main
from json_entity_editor.adapters.cli.main import read_input
from json_entity_editor.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "format_path", "main", "read_input"]
