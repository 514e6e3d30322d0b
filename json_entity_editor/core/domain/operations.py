# json_entity_editor/core/domain/operations.py

"""Pure structural operations on entities

Every function returns a new entity and leaves its input untouched. Unchanged
children are shared between the old and the new tree.
"""

# Standard library imports
from collections import Counter

# Third party imports
from pydantic import ValidationError

# Local imports
from json_entity_editor.core.domain.entity import ArrayEntity
from json_entity_editor.core.domain.entity import BooleanEntity
from json_entity_editor.core.domain.entity import ENTITY_TYPES
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.entity import FloatEntity
from json_entity_editor.core.domain.entity import IntegerEntity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import StringEntity
from json_entity_editor.core.domain.entity import is_container
from json_entity_editor.core.domain.enums import EntityKind
from json_entity_editor.core.domain.errors import IndexOutOfRange
from json_entity_editor.core.domain.errors import InvalidTransition

# Python payload types accepted by set_value, per scalar model
_PAYLOAD_TYPES: dict[type, tuple[type, ...]] = {
    StringEntity: (str,),
    IntegerEntity: (int,),
    FloatEntity: (float, int),
    BooleanEntity: (bool,),
}


def construct(kind: EntityKind | str) -> Entity:
    """Create an entity of ``kind`` holding that kind's zero value

    Args:
        kind: An EntityKind or its string value (e.g. ``"object"``)

    Returns:
        Empty container, or scalar holding ``""``, ``0``, ``0.0`` or ``False``
    """
    return ENTITY_TYPES[EntityKind(kind)]()


def retype(entity: Entity, new_kind: EntityKind | str, allow_non_empty: bool = False) -> Entity:
    """Replace an entity with a zero-valued entity of another kind

    The current value is discarded. Retyping a container that still has
    children would silently drop the whole subtree, so it is refused unless
    the caller explicitly allows it.

    Args:
        entity: Entity to retype
        new_kind: Target kind
        allow_non_empty: Permit retyping a container that has children

    Returns:
        Fresh entity of ``new_kind``

    Raises:
        InvalidTransition: If ``entity`` is a populated container and
            ``allow_non_empty`` is False
    """
    if is_container(entity) and entity.children and not allow_non_empty:
        raise InvalidTransition(
            f"Cannot change type of {entity.kind} while it has "
            f"{len(entity.children)} children; remove them first"
        )
    return construct(new_kind)


def set_value(entity: Entity, new_value: str | int | float | bool) -> Entity:
    """Replace the payload of a scalar entity

    Numeric text must already be parsed by the caller; this never converts
    strings. An ``int`` is accepted for float entities and stored as a float.

    Raises:
        InvalidTransition: On containers, or when the payload type does not
            belong to the entity's kind
    """
    if is_container(entity):
        raise InvalidTransition(f"Cannot set a scalar value on {entity.kind}")

    accepted = _PAYLOAD_TYPES[type(entity)]
    # bool is an int subclass; only boolean entities take it
    if isinstance(new_value, bool) and bool not in accepted:
        accepted = ()
    if not isinstance(new_value, accepted):
        raise InvalidTransition(
            f"Cannot store {type(new_value).__name__} in {entity.kind} entity"
        )
    try:
        return type(entity)(value=new_value)
    except ValidationError as e:
        raise InvalidTransition(f"Invalid {entity.kind} value {new_value!r}") from e


def append_child(entity: Entity, key: str | None = None, child: Entity | None = None) -> Entity:
    """Append a child at the end of a container

    Objects get ``(key, child)`` where the key defaults to ``""`` for the
    caller to rename. Arrays get ``child``. The child defaults to an empty
    string entity.

    Raises:
        InvalidTransition: On scalars, or when a key is given for an array
    """
    if child is None:
        child = StringEntity()

    if isinstance(entity, ObjectEntity):
        return ObjectEntity(children=entity.children + (("" if key is None else key, child),))
    if isinstance(entity, ArrayEntity):
        if key is not None:
            raise InvalidTransition("Array elements have no keys")
        return ArrayEntity(children=entity.children + (child,))
    raise InvalidTransition(f"Cannot append a child to {entity.kind}")


def remove_child_at(entity: Entity, index: int) -> Entity:
    """Remove the child at a position (not by key)

    Raises:
        InvalidTransition: On scalars
        IndexOutOfRange: If ``index`` is outside ``[0, len)``
    """
    children = _container_children(entity)
    _check_index(index, len(children))
    remaining = children[:index] + children[index + 1 :]
    return type(entity)(children=remaining)


def rename_key_at(entity: Entity, index: int, new_key: str) -> Entity:
    """Change the key at a position, keeping value and position

    Colliding keys are accepted; duplicates are only rejected at
    serialization time so an in-progress edit can pass through them.

    Raises:
        InvalidTransition: If ``entity`` is not an object
        IndexOutOfRange: If ``index`` is outside ``[0, len)``
    """
    if not isinstance(entity, ObjectEntity):
        raise InvalidTransition(f"Cannot rename keys of {entity.kind}")
    _check_index(index, len(entity.children))
    _, value = entity.children[index]
    return _replace_at(entity, index, (new_key, value))


def replace_child_at(entity: Entity, index: int, key: str | None, value: Entity) -> Entity:
    """Replace key and value at a position in one step

    This is how a nested edit is written back into its parent. For objects a
    ``None`` key keeps the current key; arrays take no key.

    Raises:
        InvalidTransition: On scalars, or when a key is given for an array
        IndexOutOfRange: If ``index`` is outside ``[0, len)``
    """
    if isinstance(entity, ObjectEntity):
        _check_index(index, len(entity.children))
        current_key, _ = entity.children[index]
        return _replace_at(entity, index, (current_key if key is None else key, value))
    if isinstance(entity, ArrayEntity):
        if key is not None:
            raise InvalidTransition("Array elements have no keys")
        _check_index(index, len(entity.children))
        return _replace_at(entity, index, value)
    raise InvalidTransition(f"Cannot replace children of {entity.kind}")


def detect_duplicate_keys(entity: Entity) -> list[str]:
    """Keys that occur more than once, each listed once in first-seen order

    Advisory only: non-object entities have no keys and yield ``[]``.
    """
    if not isinstance(entity, ObjectEntity):
        return []
    counts = Counter(entity.keys)
    return [key for key in counts if counts[key] > 1]


def child_key_at(entity: Entity, index: int) -> str:
    """Display label of a child: the key for objects, the position for arrays"""
    children = _container_children(entity)
    _check_index(index, len(children))
    if isinstance(entity, ObjectEntity):
        return entity.children[index][0]
    return str(index)


def child_entity_at(entity: Entity, index: int) -> Entity:
    """Child entity at a position

    Raises:
        InvalidTransition: On scalars
        IndexOutOfRange: If ``index`` is outside ``[0, len)``
    """
    children = _container_children(entity)
    _check_index(index, len(children))
    if isinstance(entity, ObjectEntity):
        return entity.children[index][1]
    return children[index]


def _container_children(entity: Entity) -> tuple:
    if not is_container(entity):
        raise InvalidTransition(f"{entity.kind} entity has no children")
    return entity.children


def _check_index(index: int, length: int) -> None:
    # Negative indices are stale positions here, not Python-style offsets
    if not 0 <= index < length:
        raise IndexOutOfRange(index, length)


def _replace_at(entity: ObjectEntity | ArrayEntity, index: int, item: object) -> Entity:
    children = entity.children
    return type(entity)(children=children[:index] + (item,) + children[index + 1 :])


__all__ = [
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
]
