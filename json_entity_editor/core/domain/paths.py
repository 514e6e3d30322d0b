# json_entity_editor/core/domain/paths.py

"""Positional navigation and nested updates

A path is a sequence of child positions from the root. Positions are used
instead of keys because object keys may repeat while a document is edited.
"""

# Standard library imports
from typing import Callable
from typing import Iterator

# Local imports
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import is_container
from json_entity_editor.core.domain.operations import child_entity_at
from json_entity_editor.core.domain.operations import detect_duplicate_keys
from json_entity_editor.core.domain.operations import replace_child_at
from json_entity_editor.core.types.json import EntityPath


def get_at_path(root: Entity, path: EntityPath) -> Entity:
    """Entity found by following ``path`` from ``root``

    Raises:
        IndexOutOfRange: If a position does not exist
        InvalidTransition: If the path descends into a scalar
    """
    entity = root
    for index in path:
        entity = child_entity_at(entity, index)
    return entity


def update_at_path(root: Entity, path: EntityPath, fn: Callable[[Entity], Entity]) -> Entity:
    """Return a new root with the entity at ``path`` replaced by ``fn(entity)``

    Each ancestor on the path is rebuilt around its updated child; every
    other subtree is shared with the old root. An empty path applies ``fn``
    to the root itself.

    Raises:
        IndexOutOfRange: If a position does not exist
        InvalidTransition: If the path descends into a scalar, or raised by ``fn``
    """
    if not path:
        return fn(root)
    index, rest = path[0], tuple(path[1:])
    child = child_entity_at(root, index)
    return replace_child_at(root, index, None, update_at_path(child, rest, fn))


def iter_entities(root: Entity, path: EntityPath = ()) -> Iterator[tuple[EntityPath, Entity]]:
    """Depth-first walk yielding ``(path, entity)``, parents before children"""
    yield path, root
    if isinstance(root, ObjectEntity):
        for index, (_, child) in enumerate(root.children):
            yield from iter_entities(child, path + (index,))
    elif is_container(root):
        for index, child in enumerate(root.children):
            yield from iter_entities(child, path + (index,))


def find_duplicate_keys(root: Entity) -> list[tuple[EntityPath, list[str]]]:
    """Every object in the tree with repeated keys, as ``(path, keys)``"""
    found = []
    for path, entity in iter_entities(root):
        duplicates = detect_duplicate_keys(entity)
        if duplicates:
            found.append((path, duplicates))
    return found


__all__ = ["find_duplicate_keys", "get_at_path", "iter_entities", "update_at_path"]
