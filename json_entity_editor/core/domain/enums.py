# json_entity_editor/core/domain/enums.py

"""Domain enumerations for the JSON entity editor"""

# Standard library imports
from enum import Enum


class EntityKind(Enum):
    """Kind tag of an entity

    The values double as the ``kind`` discriminator stored on each entity
    model and in snapshot documents.
    """

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"

    @property
    def is_container(self) -> bool:
        """True for kinds that hold children instead of a scalar value"""
        return self in CONTAINER_KINDS


CONTAINER_KINDS = frozenset({EntityKind.OBJECT, EntityKind.ARRAY})
SCALAR_KINDS = frozenset(
    {EntityKind.STRING, EntityKind.INTEGER, EntityKind.FLOAT, EntityKind.BOOLEAN}
)
