# json_entity_editor/__init__.py

"""JSON Entity Editor Package

An editable, immutable tree of typed entities that mirrors a JSON document.
Entities can be built from native JSON or JSON text, restructured with pure
operations, and serialized back to canonical JSON once every object has
unique keys.
"""

# Local imports
# High-level API
from json_entity_editor.application.models import ExtractionResult
from json_entity_editor.application.services import EditSession

# Entity model
from json_entity_editor.core.domain import ArrayEntity
from json_entity_editor.core.domain import BooleanEntity
from json_entity_editor.core.domain import Entity
from json_entity_editor.core.domain import EntityKind
from json_entity_editor.core.domain import FloatEntity
from json_entity_editor.core.domain import IntegerEntity
from json_entity_editor.core.domain import ObjectEntity
from json_entity_editor.core.domain import StringEntity

# Operations
from json_entity_editor.core.domain import append_child
from json_entity_editor.core.domain import construct
from json_entity_editor.core.domain import detect_duplicate_keys
from json_entity_editor.core.domain import dump_entity
from json_entity_editor.core.domain import from_json
from json_entity_editor.core.domain import get_at_path
from json_entity_editor.core.domain import load_entity
from json_entity_editor.core.domain import parse_json_text
from json_entity_editor.core.domain import remove_child_at
from json_entity_editor.core.domain import rename_key_at
from json_entity_editor.core.domain import replace_child_at
from json_entity_editor.core.domain import retype
from json_entity_editor.core.domain import set_value
from json_entity_editor.core.domain import to_json
from json_entity_editor.core.domain import to_native
from json_entity_editor.core.domain import update_at_path

# Errors
from json_entity_editor.core.domain import EntityDocumentError
from json_entity_editor.core.domain import EntityError
from json_entity_editor.core.domain import IndexOutOfRange
from json_entity_editor.core.domain import InvalidTransition
from json_entity_editor.core.domain import JSONTextError
from json_entity_editor.core.domain import SerializationError

# Configuration
from json_entity_editor.infrastructure.config import ConfigLoader
from json_entity_editor.infrastructure.config import EditorConfig

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Primary API
    "EditSession",
    "ExtractionResult",
    # Entity model
    "ArrayEntity",
    "BooleanEntity",
    "Entity",
    "EntityKind",
    "FloatEntity",
    "IntegerEntity",
    "ObjectEntity",
    "StringEntity",
    # Operations
    "append_child",
    "construct",
    "detect_duplicate_keys",
    "dump_entity",
    "from_json",
    "get_at_path",
    "load_entity",
    "parse_json_text",
    "remove_child_at",
    "rename_key_at",
    "replace_child_at",
    "retype",
    "set_value",
    "to_json",
    "to_native",
    "update_at_path",
    # Errors
    "EntityDocumentError",
    "EntityError",
    "IndexOutOfRange",
    "InvalidTransition",
    "JSONTextError",
    "SerializationError",
    # Configuration
    "ConfigLoader",
    "EditorConfig",
    # Version
    "__version__",
]
