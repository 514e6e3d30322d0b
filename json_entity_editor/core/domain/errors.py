# json_entity_editor/core/domain/errors.py

"""Exceptions raised by the entity model

All of them are recoverable: callers are expected to report the failure and
keep editing. The model is never rolled back.
"""

# Local imports
from json_entity_editor.core.types.json import EntityPath


class EntityError(Exception):
    """Base class for every entity model failure"""


class InvalidTransition(EntityError):
    """An operation does not apply to the entity's current kind

    Raised when retyping a container that still has children, or when a
    mutation is made against an incompatible kind or payload type.
    """


class IndexOutOfRange(EntityError, IndexError):
    """A positional operation was given a stale or invalid index"""

    def __init__(self, index: int, length: int):
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for {length} children")


class SerializationError(EntityError):
    """An object in the tree has duplicate keys and cannot be serialized"""

    def __init__(self, duplicate_keys: list[str], path: EntityPath = ()):
        self.duplicate_keys = list(duplicate_keys)
        self.path = tuple(path)
        super().__init__(f"Duplicate keys found: {', '.join(self.duplicate_keys)}")


class JSONTextError(EntityError, ValueError):
    """JSON text could not be parsed"""

    def __init__(self, msg: str, line: int, column: int):
        self.msg = msg
        self.line = line
        self.column = column
        super().__init__(f"{msg} (line {line}, col {column})")


class EntityDocumentError(EntityError, ValueError):
    """A snapshot document does not describe a valid entity tree"""


__all__ = [
    "EntityError",
    "InvalidTransition",
    "IndexOutOfRange",
    "SerializationError",
    "JSONTextError",
    "EntityDocumentError",
]
