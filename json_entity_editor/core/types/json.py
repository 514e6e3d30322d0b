# json_entity_editor/core/types/json.py

"""JSON type definitions for type-safe JSON handling using Python 3.12 type aliases."""

# JSON Type Usage Guide:
# - JSONDict: When you KNOW it's a dict with string keys (e.g., snapshot documents, config files)
# - JSONList: When you KNOW it's a list
# - JSONType: When it could be anything a JSON parser produces
# - NativeValue: Input to from_json, which accepts values no JSON parser would produce

type JSONPrimitive = str | int | float | bool | None

# Recursive type definition
type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

# from_json accepts any Python value
type NativeValue = object

# Positions from the root down to an entity
type EntityPath = tuple[int, ...]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList", "NativeValue", "EntityPath"]
