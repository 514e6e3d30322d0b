# tests/unit/core/domain/test_operations.py

"""Tests for the pure entity operations"""

# Third party imports
import pytest

# Local imports
from json_entity_editor.core.domain.conversion import to_json
from json_entity_editor.core.domain.conversion import to_native
from json_entity_editor.core.domain.entity import ArrayEntity
from json_entity_editor.core.domain.entity import BooleanEntity
from json_entity_editor.core.domain.entity import FloatEntity
from json_entity_editor.core.domain.entity import IntegerEntity
from json_entity_editor.core.domain.entity import ObjectEntity
from json_entity_editor.core.domain.entity import StringEntity
from json_entity_editor.core.domain.enums import EntityKind
from json_entity_editor.core.domain.errors import IndexOutOfRange
from json_entity_editor.core.domain.errors import InvalidTransition
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


class TestConstruct:
    """Test construct()"""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (EntityKind.OBJECT, ObjectEntity()),
            (EntityKind.ARRAY, ArrayEntity()),
            (EntityKind.STRING, StringEntity(value="")),
            (EntityKind.INTEGER, IntegerEntity(value=0)),
            (EntityKind.FLOAT, FloatEntity(value=0.0)),
            (EntityKind.BOOLEAN, BooleanEntity(value=False)),
        ],
    )
    def test_zero_value_per_kind(self, kind, expected):
        assert construct(kind) == expected

    def test_accepts_kind_string(self):
        assert construct("array") == ArrayEntity()

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            construct("null")


class TestRetype:
    """Test the retype guard"""

    def test_populated_object_refused(self):
        """An object with one child cannot become a string"""
        entity = append_child(ObjectEntity(), "a")
        with pytest.raises(InvalidTransition):
            retype(entity, "string")

    def test_populated_array_refused(self):
        entity = append_child(ArrayEntity())
        with pytest.raises(InvalidTransition):
            retype(entity, EntityKind.OBJECT)

    def test_empty_object_becomes_empty_string(self):
        assert retype(ObjectEntity(), "string") == StringEntity(value="")

    def test_bypass_flag_discards_children(self):
        entity = append_child(ObjectEntity(), "a")
        assert retype(entity, "array", allow_non_empty=True) == ArrayEntity()

    def test_scalar_value_discarded(self):
        assert retype(StringEntity(value="42"), "integer") == IntegerEntity(value=0)

    def test_scalar_to_container(self):
        assert retype(BooleanEntity(value=True), EntityKind.OBJECT) == ObjectEntity()

    def test_input_untouched(self):
        entity = append_child(ObjectEntity(), "a")
        retype(entity, "array", allow_non_empty=True)
        assert entity.keys == ["a"]


class TestSetValue:
    """Test set_value()"""

    def test_replaces_payload(self):
        assert set_value(StringEntity(), "Ada") == StringEntity(value="Ada")
        assert set_value(IntegerEntity(), 7) == IntegerEntity(value=7)
        assert set_value(BooleanEntity(), True) == BooleanEntity(value=True)
        assert set_value(FloatEntity(), 2.5) == FloatEntity(value=2.5)

    def test_int_widened_for_float(self):
        entity = set_value(FloatEntity(), 3)
        assert isinstance(entity, FloatEntity)
        assert to_json(entity) == "3.0"

    def test_text_is_not_parsed(self):
        """Numeric text is the caller's job to parse"""
        with pytest.raises(InvalidTransition):
            set_value(IntegerEntity(), "12")

    def test_bool_not_accepted_as_number(self):
        with pytest.raises(InvalidTransition):
            set_value(IntegerEntity(), True)
        with pytest.raises(InvalidTransition):
            set_value(FloatEntity(), False)

    def test_non_finite_float_refused(self):
        with pytest.raises(InvalidTransition):
            set_value(FloatEntity(), float("nan"))

    @pytest.mark.parametrize("entity", [ObjectEntity(), ArrayEntity()])
    def test_containers_refused(self, entity):
        with pytest.raises(InvalidTransition):
            set_value(entity, "x")


class TestAppendChild:
    """Test append_child()"""

    def test_object_gets_blank_key_and_empty_string(self):
        entity = append_child(ObjectEntity())
        assert entity.children == (("", StringEntity(value="")),)

    def test_array_gets_empty_string(self):
        entity = append_child(ArrayEntity())
        assert entity.children == (StringEntity(value=""),)

    def test_custom_key_and_child(self):
        entity = append_child(ObjectEntity(), "n", IntegerEntity(value=1))
        assert to_native(entity) == {"n": 1}

    def test_appends_at_end(self):
        entity = ObjectEntity()
        for key in ("a", "b", "c"):
            entity = append_child(entity, key)
        assert entity.keys == ["a", "b", "c"]

    def test_array_key_refused(self):
        with pytest.raises(InvalidTransition):
            append_child(ArrayEntity(), "k")

    @pytest.mark.parametrize(
        "entity", [StringEntity(), IntegerEntity(), FloatEntity(), BooleanEntity()]
    )
    def test_scalars_refused(self, entity):
        with pytest.raises(InvalidTransition):
            append_child(entity)


class TestRemoveChildAt:
    """Test remove_child_at()"""

    def test_order_preserved(self):
        """Removing index 1 of a, b, c leaves a, c"""
        entity = ObjectEntity()
        for key in ("a", "b", "c"):
            entity = append_child(entity, key)
        entity = remove_child_at(entity, 1)
        assert entity.keys == ["a", "c"]
        assert list(to_native(entity)) == ["a", "c"]

    def test_removes_by_position_not_key(self, duplicate_key_entity):
        entity = remove_child_at(duplicate_key_entity, 2)
        assert to_native(entity) == {"x": 1, "y": 2}

    def test_array_element(self):
        entity = ArrayEntity(children=(IntegerEntity(value=1), IntegerEntity(value=2)))
        assert remove_child_at(entity, 0) == ArrayEntity(children=(IntegerEntity(value=2),))

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_out_of_range(self, duplicate_key_entity, index):
        with pytest.raises(IndexOutOfRange) as exc_info:
            remove_child_at(duplicate_key_entity, index)
        assert exc_info.value.index == index
        assert exc_info.value.length == 3

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            remove_child_at(ArrayEntity(), 0)

    def test_scalar_refused(self):
        with pytest.raises(InvalidTransition):
            remove_child_at(StringEntity(), 0)


class TestRenameKeyAt:
    """Test rename_key_at()"""

    def test_renames_in_place(self, person_entity):
        entity = rename_key_at(person_entity, 1, "year")
        assert entity.keys == ["name", "year", "tags"]
        assert child_entity_at(entity, 1) == IntegerEntity(value=1815)

    def test_collision_allowed(self, person_entity):
        """A colliding key is accepted while editing"""
        entity = rename_key_at(person_entity, 1, "name")
        assert detect_duplicate_keys(entity) == ["name"]

    def test_original_unchanged(self, person_entity):
        rename_key_at(person_entity, 0, "first")
        assert person_entity.keys[0] == "name"

    def test_array_refused(self):
        with pytest.raises(InvalidTransition):
            rename_key_at(append_child(ArrayEntity()), 0, "k")

    def test_out_of_range(self, person_entity):
        with pytest.raises(IndexOutOfRange):
            rename_key_at(person_entity, 3, "k")


class TestReplaceChildAt:
    """Test replace_child_at()"""

    def test_replaces_key_and_value(self, person_entity):
        entity = replace_child_at(person_entity, 0, "full_name", StringEntity(value="Ada L."))
        assert entity.keys[0] == "full_name"
        assert to_native(entity)["full_name"] == "Ada L."

    def test_none_keeps_key(self, person_entity):
        entity = replace_child_at(person_entity, 1, None, IntegerEntity(value=1816))
        assert entity.keys == person_entity.keys
        assert to_native(entity)["born"] == 1816

    def test_array_element(self):
        entity = ArrayEntity(children=(StringEntity(value="a"), StringEntity(value="b")))
        entity = replace_child_at(entity, 1, None, BooleanEntity(value=True))
        assert to_native(entity) == ["a", True]

    def test_array_key_refused(self):
        with pytest.raises(InvalidTransition):
            replace_child_at(append_child(ArrayEntity()), 0, "k", StringEntity())

    def test_out_of_range(self, person_entity):
        with pytest.raises(IndexOutOfRange):
            replace_child_at(person_entity, 5, None, StringEntity())

    def test_scalar_refused(self):
        with pytest.raises(InvalidTransition):
            replace_child_at(IntegerEntity(), 0, None, StringEntity())


class TestDetectDuplicateKeys:
    """Test detect_duplicate_keys()"""

    def test_single_duplicate(self, duplicate_key_entity):
        """Keys x, y, x report x once"""
        assert detect_duplicate_keys(duplicate_key_entity) == ["x"]

    def test_serialization_lists_duplicate(self, duplicate_key_entity):
        with pytest.raises(SerializationError) as exc_info:
            to_json(duplicate_key_entity)
        assert "x" in str(exc_info.value)
        assert exc_info.value.duplicate_keys == ["x"]

    def test_first_seen_order(self):
        entity = ObjectEntity()
        for key in ("b", "a", "b", "a", "a", "c"):
            entity = append_child(entity, key)
        assert detect_duplicate_keys(entity) == ["b", "a"]

    def test_no_duplicates(self, person_entity):
        assert detect_duplicate_keys(person_entity) == []

    def test_blank_keys_collide(self):
        entity = append_child(append_child(ObjectEntity()), None)
        assert detect_duplicate_keys(entity) == [""]

    def test_non_objects_have_none(self):
        assert detect_duplicate_keys(ArrayEntity()) == []
        assert detect_duplicate_keys(StringEntity(value="x")) == []


class TestChildAccessors:
    """Test child_key_at() and child_entity_at()"""

    def test_object_label_is_key(self, person_entity):
        assert child_key_at(person_entity, 2) == "tags"

    def test_array_label_is_position(self, person_entity):
        tags = child_entity_at(person_entity, 2)
        assert child_key_at(tags, 1) == "1"
        assert child_entity_at(tags, 1) == FloatEntity(value=1.5)

    def test_scalar_has_no_children(self):
        with pytest.raises(InvalidTransition):
            child_entity_at(StringEntity(), 0)
