# json_entity_editor/core/types/__init__.py

"""Type definitions for the JSON entity editor

This package contains type aliases used throughout the codebase. These are
pure type definitions with no implementation logic.
"""

# Local imports
from json_entity_editor.core.types.json import EntityPath
from json_entity_editor.core.types.json import JSONDict
from json_entity_editor.core.types.json import JSONList
from json_entity_editor.core.types.json import JSONPrimitive
from json_entity_editor.core.types.json import JSONType
from json_entity_editor.core.types.json import NativeValue

__all__ = [
    "EntityPath",
    "JSONDict",
    "JSONList",
    "JSONPrimitive",
    "JSONType",
    "NativeValue",
]
