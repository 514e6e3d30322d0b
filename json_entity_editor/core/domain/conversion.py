# json_entity_editor/core/domain/conversion.py

"""Conversion between entities, native JSON values and JSON text"""

# Standard library imports
from json import JSONDecodeError
from json import dumps
from json import loads
from math import isfinite
from re import compile

# Third party imports
from pydantic import TypeAdapter
from pydantic import ValidationError

# Local imports
from json_entity_editor.core.domain.entity import ArrayEntity
from json_entity_editor.core.domain.entity import BooleanEntity
from json_entity_editor.core.domain.entity import Entity
from json_entity_editor.core.domain.entity import FloatEntity
from json_entity_editor.core.domain.entity import IntegerEntity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import StringEntity
from json_entity_editor.core.domain.errors import EntityDocumentError
from json_entity_editor.core.domain.errors import JSONTextError
from json_entity_editor.core.domain.errors import SerializationError
from json_entity_editor.core.domain.operations import detect_duplicate_keys
from json_entity_editor.core.types.json import EntityPath
from json_entity_editor.core.types.json import JSONDict
from json_entity_editor.core.types.json import JSONType
from json_entity_editor.core.types.json import NativeValue

DEFAULT_INDENT = 2

_ENTITY_ADAPTER: TypeAdapter[Entity] = TypeAdapter(Entity)

# String literals are matched only to skip over them
_CONSTANT_SCAN = compile(r'"(?:\\.|[^"\\])*"|(-?Infinity|NaN)')


class _ObjectPairs(list):
    """Key/value pairs of a parsed JSON object, duplicates kept"""


# ============================================================================
# Native JSON -> Entity
# ============================================================================


def from_json(value: NativeValue) -> Entity:
    """Build an entity tree from a native JSON value

    Never fails. Lists and tuples become arrays, dicts become objects in
    iteration order, whole numbers become integers and other numbers floats.
    Anything else (``None``, NaN, infinities, arbitrary objects) becomes a
    string entity holding the value's JSON text, so ``None`` reads back as
    the string ``"null"``.

    Args:
        value: Any Python value, typically the output of ``json.loads``

    Returns:
        Entity tree mirroring ``value``
    """
    if isinstance(value, _ObjectPairs):
        return ObjectEntity(children=tuple((key, from_json(item)) for key, item in value))
    if isinstance(value, dict):
        return ObjectEntity(
            children=tuple((_coerce_key(key), from_json(item)) for key, item in value.items())
        )
    if isinstance(value, (list, tuple)):
        return ArrayEntity(children=tuple(from_json(item) for item in value))
    if isinstance(value, str):
        return StringEntity(value=value)
    # bool before int: True is an int
    if isinstance(value, bool):
        return BooleanEntity(value=value)
    if isinstance(value, int):
        return IntegerEntity(value=value)
    if isinstance(value, float) and isfinite(value):
        if value.is_integer():
            return IntegerEntity(value=int(value))
        return FloatEntity(value=value)
    return StringEntity(value=_fallback_text(value))


def parse_json_text(text: str) -> Entity:
    """Parse JSON text straight into entities

    Unlike ``from_json(json.loads(text))`` this keeps every repeated key of an
    object, so duplicates in the source text can be detected and fixed.

    Raises:
        JSONTextError: If ``text`` is not valid JSON, including the
            non-standard constants ``NaN``, ``Infinity`` and ``-Infinity``
    """

    def reject_constant(name: str) -> None:
        position = _constant_position(text, name)
        raise JSONDecodeError(f"Non-standard constant {name}", text, position)

    try:
        native = loads(text, object_pairs_hook=_ObjectPairs, parse_constant=reject_constant)
    except JSONDecodeError as e:
        raise JSONTextError(e.msg, e.lineno, e.colno) from e
    return from_json(native)


def _constant_position(text: str, name: str) -> int:
    # The decoder meets constants in text order, so the first one outside a
    # string literal is the one being rejected
    for match in _CONSTANT_SCAN.finditer(text):
        if match.group(1) == name:
            return match.start(1)
    return 0


def _coerce_key(key: object) -> str:
    # Same coercions the json module applies to non-string keys
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return dumps(key)
    return str(key)


def _fallback_text(value: object) -> str:
    return dumps(value, ensure_ascii=False, default=str)


# ============================================================================
# Entity -> native JSON / JSON text
# ============================================================================


def to_native(entity: Entity) -> JSONType:
    """Convert an entity tree to plain dicts, lists and scalars

    Raises:
        SerializationError: If any object in the tree has duplicate keys
    """
    return _to_native(entity, ())


def to_json(entity: Entity, indent: int | None = DEFAULT_INDENT) -> str:
    """Render an entity tree as canonical JSON text

    Key order follows entity order. Non-ASCII text is written as-is. Calling
    this repeatedly on the same entity yields identical text.

    Args:
        entity: Root of the tree
        indent: Spaces per nesting level, None for a single line

    Returns:
        JSON text

    Raises:
        SerializationError: If any object in the tree has duplicate keys; the
            error names the keys and the position path of that object
    """
    return dumps(to_native(entity), indent=indent, ensure_ascii=False)


def _to_native(entity: Entity, path: EntityPath) -> JSONType:
    match entity:
        case ObjectEntity():
            duplicates = detect_duplicate_keys(entity)
            if duplicates:
                raise SerializationError(duplicates, path)
            return {
                key: _to_native(child, path + (index,))
                for index, (key, child) in enumerate(entity.children)
            }
        case ArrayEntity():
            return [
                _to_native(child, path + (index,)) for index, child in enumerate(entity.children)
            ]
        case _:
            return entity.value


# ============================================================================
# Snapshot documents
# ============================================================================


def dump_entity(entity: Entity) -> JSONDict:
    """Tagged, JSON-compatible form of an entity tree

    Unlike ``to_native`` this keeps kinds and duplicate keys, so it can
    snapshot any in-memory state, including one that cannot be serialized.
    """
    return entity.model_dump(mode="json")


def load_entity(document: JSONDict) -> Entity:
    """Rebuild an entity tree from a snapshot document

    Raises:
        EntityDocumentError: If the document is not a valid entity tree
    """
    try:
        return _ENTITY_ADAPTER.validate_python(document)
    except ValidationError as e:
        raise EntityDocumentError(f"Invalid entity document: {e}") from e


__all__ = [
    "DEFAULT_INDENT",
    "dump_entity",
    "from_json",
    "load_entity",
    "parse_json_text",
    "to_json",
    "to_native",
]
