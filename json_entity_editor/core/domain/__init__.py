# json_entity_editor/core/domain/__init__.py

"""Core domain models and entity operations"""

# Local imports
from json_entity_editor.core.domain.conversion import dump_entity
from json_entity_editor.core.domain.conversion import from_json
from json_entity_editor.core.domain.conversion import load_entity
from json_entity_editor.core.domain.conversion import parse_json_text
from json_entity_editor.core.domain.conversion import to_json
from json_entity_editor.core.domain.conversion import to_native
from json_entity_editor.core.domain.entity import ArrayEntity
from json_entity_editor.core.domain.entity import BooleanEntity
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.entity import FloatEntity
from json_entity_editor.core.domain.entity import IntegerEntity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import StringEntity
from json_entity_editor.core.domain.entity import is_container
from json_entity_editor.core.domain.entity import is_entity
from json_entity_editor.core.domain.enums import EntityKind
from json_entity_editor.core.domain.errors import EntityDocumentError
from json_entity_editor.core.domain.errors import EntityError
from json_entity_editor.core.domain.errors import IndexOutOfRange
from json_entity_editor.core.domain.errors import InvalidTransition
from json_entity_editor.core.domain.errors import JSONTextError
from json_entity_editor.core.domain.errors import SerializationError
from json_entity_editor.core.domain.operations import append_child
from json_entity_editor.core.domain.operations import child_entity_at
from json_entity_editor.core.domain.operations import child_key_at
from json_entity_editor.core.domain.operations import construct
from json_entity_editor.core.domain.operations import detect_duplicate_keys
from json_entity_editor.core.domain.operations import remove_child_at
from json_entity_editor.core.domain.operations import rename_key_at
from json_entity_editor.core.domain.operations import replace_child_at
from json_entity_editor.core.domain.operations import retype
from json_entity_editor.core.domain.operations import set_value
from json_entity_editor.core.domain.paths import find_duplicate_keys
from json_entity_editor.core.domain.paths import get_at_path
from json_entity_editor.core.domain.paths import iter_entities
from json_entity_editor.core.domain.paths import update_at_path

__all__ = [
    # Models
    "ArrayEntity",
    "BooleanEntity",
    "Entity",
    "EntityKind",
    "FloatEntity",
    "IntegerEntity",
    "ObjectEntity",
    "StringEntity",
    "is_container",
    "is_entity",
    # Errors
    "EntityDocumentError",
    "EntityError",
    "IndexOutOfRange",
    "InvalidTransition",
    "JSONTextError",
    "SerializationError",
    # Operations
    "append_child",
    "child_entity_at",
    "child_key_at",
    "construct",
    "detect_duplicate_keys",
    "remove_child_at",
    "rename_key_at",
    "replace_child_at",
    "retype",
    "set_value",
    # Navigation
    "find_duplicate_keys",
    "get_at_path",
    "iter_entities",
    "update_at_path",
    # Conversion
    "dump_entity",
    "from_json",
    "load_entity",
    "parse_json_text",
    "to_json",
    "to_native",
]
