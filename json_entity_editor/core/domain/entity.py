# json_entity_editor/core/domain/entity.py

"""Entity domain models

An entity is one JSON node in the editable tree. Each kind is its own frozen
Pydantic model tagged with a ``kind`` literal, and ``Entity`` is the
discriminated union of all six. Containers carry ``children``, scalars carry
``value``; no model has both.
"""

# Standard library imports
from typing import Annotated
from typing import Literal
from typing import Union

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import StrictBool
from pydantic import StrictInt
from pydantic import StrictStr
from pydantic import field_validator

# Local imports
from json_entity_editor.core.domain.enums import EntityKind

# Entities are values: frozen, hashable and closed to unknown fields
ENTITY_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    validate_default=True,
)


class ObjectEntity(BaseModel):
    """Ordered ``(key, value)`` pairs; keys may repeat while editing"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["object"] = "object"
    children: tuple[tuple[StrictStr, "Entity"], ...] = ()

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.OBJECT

    @property
    def keys(self) -> list[str]:
        """Keys in their current order, duplicates included"""
        return [key for key, _ in self.children]


class ArrayEntity(BaseModel):
    """Ordered sequence of entities"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["array"] = "array"
    children: tuple["Entity", ...] = ()

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.ARRAY


class StringEntity(BaseModel):
    """Text leaf"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["string"] = "string"
    value: StrictStr = ""

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.STRING


class IntegerEntity(BaseModel):
    """Whole-number leaf (booleans are rejected)"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["integer"] = "integer"
    value: StrictInt = 0

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.INTEGER


class FloatEntity(BaseModel):
    """Fractional numeric leaf, kept apart from integers so 3.0 never becomes 3"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["float"] = "float"
    value: Annotated[float, Field(strict=True, allow_inf_nan=False)] = 0.0

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.FLOAT

    @field_validator("value")
    @classmethod
    def widen_to_float(cls, v: float) -> float:
        """Store integral input as a float"""
        return float(v)


class BooleanEntity(BaseModel):
    """Boolean leaf"""

    model_config = ENTITY_MODEL_CONFIG

    kind: Literal["boolean"] = "boolean"
    value: StrictBool = False

    @property
    def entity_kind(self) -> EntityKind:
        return EntityKind.BOOLEAN


# Discriminated union over every entity kind
Entity = Annotated[
    Union[ObjectEntity, ArrayEntity, StringEntity, IntegerEntity, FloatEntity, BooleanEntity],
    Field(discriminator="kind"),
]

type ContainerEntity = ObjectEntity | ArrayEntity
type ScalarEntity = StringEntity | IntegerEntity | FloatEntity | BooleanEntity

ObjectEntity.model_rebuild()
ArrayEntity.model_rebuild()

ENTITY_TYPES: dict[EntityKind, type[BaseModel]] = {
    EntityKind.OBJECT: ObjectEntity,
    EntityKind.ARRAY: ArrayEntity,
    EntityKind.STRING: StringEntity,
    EntityKind.INTEGER: IntegerEntity,
    EntityKind.FLOAT: FloatEntity,
    EntityKind.BOOLEAN: BooleanEntity,
}

CONTAINER_TYPES = (ObjectEntity, ArrayEntity)
SCALAR_TYPES = (StringEntity, IntegerEntity, FloatEntity, BooleanEntity)


def is_container(entity: Entity) -> bool:
    """Whether the entity holds children"""
    return isinstance(entity, CONTAINER_TYPES)


def is_entity(value: object) -> bool:
    """Whether a value is an entity rather than native JSON"""
    return isinstance(value, CONTAINER_TYPES + SCALAR_TYPES)


__all__ = [
    "ArrayEntity",
    "BooleanEntity",
    "CONTAINER_TYPES",
    "ContainerEntity",
    "ENTITY_TYPES",
    "Entity",
    "FloatEntity",
    "IntegerEntity",
    "ObjectEntity",
    "SCALAR_TYPES",
    "ScalarEntity",
    "StringEntity",
    "is_container",
    "is_entity",
]
