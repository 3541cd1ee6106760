import pytest

from ldcommon.edit import (
    delete_at,
    delete_key,
    detach,
    detach_at,
    detach_key,
    insert,
    replace,
    replace_at,
    replace_key,
)
from ldcommon.node import JSONNode


def make_array(*values):
    array = JSONNode.array()
    for value in values:
        array.append(JSONNode.number(value))
    return array


def numbers(array):
    return [child.value_double for child in array]


def make_object(**members):
    obj = JSONNode.object()
    for key, value in members.items():
        obj.add(key, JSONNode.number(value))
    return obj


def test_detach_removes_and_returns_item():
    array = make_array(1, 2, 3)
    middle = array.item_at(1)
    assert detach(array, middle) is middle
    assert numbers(array) == [1.0, 3.0]


def test_detach_non_member_raises():
    array = make_array(1)
    with pytest.raises(ValueError):
        detach(array, JSONNode.null())


def test_detach_none_returns_none():
    assert detach(make_array(1), None) is None
    assert detach(None, JSONNode.null()) is None


def test_detach_at():
    array = make_array(1, 2, 3)
    first = array.item_at(0)
    assert detach_at(array, 0) is first
    assert numbers(array) == [2.0, 3.0]


def test_detach_at_out_of_range():
    array = make_array(1, 2)
    assert detach_at(array, -1) is None
    assert detach_at(array, 2) is None
    assert len(array) == 2


def test_detach_key_case_insensitive_by_default():
    obj = make_object(Alpha=1, beta=2)
    item = detach_key(obj, "alpha")
    assert item.key == "Alpha"
    assert [child.key for child in obj] == ["beta"]


def test_detach_key_case_sensitive_misses():
    obj = make_object(Alpha=1)
    assert detach_key(obj, "alpha", True) is None
    assert len(obj) == 1


def test_delete_at_and_key():
    array = make_array(1, 2, 3)
    delete_at(array, 2)
    assert numbers(array) == [1.0, 2.0]

    obj = make_object(a=1, b=2)
    delete_key(obj, "A")
    assert [child.key for child in obj] == ["b"]
    delete_key(obj, "B", True)
    assert [child.key for child in obj] == ["b"]


def test_insert_shifts_right():
    array = make_array(1, 3)
    insert(array, 1, JSONNode.number(2))
    assert numbers(array) == [1.0, 2.0, 3.0]
    insert(array, 0, JSONNode.number(0))
    assert numbers(array) == [0.0, 1.0, 2.0, 3.0]


def test_insert_past_end_appends_and_negative_ignored():
    array = make_array(1)
    insert(array, 10, JSONNode.number(2))
    assert numbers(array) == [1.0, 2.0]
    insert(array, -1, JSONNode.number(9))
    assert numbers(array) == [1.0, 2.0]


def test_replace():
    array = make_array(1, 2, 3)
    old = array.item_at(1)
    new = JSONNode.string("two")
    assert replace(array, old, new) is True
    assert array.item_at(1) is new
    assert len(array) == 3


def test_replace_same_item_and_failures():
    array = make_array(1)
    item = array.item_at(0)
    assert replace(array, item, item) is True
    assert replace(array, JSONNode.null(), JSONNode.true()) is False
    assert replace(array, item, None) is False
    assert array.item_at(0) is item


def test_replace_at():
    array = make_array(1, 2)
    new = JSONNode.null()
    assert replace_at(array, 0, new) is True
    assert array.item_at(0) is new
    assert replace_at(array, 5, JSONNode.null()) is False
    assert replace_at(array, -1, JSONNode.null()) is False


def test_replace_key_renames_replacement():
    obj = make_object(Name=1, other=2)
    new = JSONNode.string("value")
    assert replace_key(obj, "name", new) is True
    assert obj.item_at(0) is new
    assert new.key == "name"
    assert len(obj) == 2


def test_replace_key_case_sensitive_miss_keeps_members():
    obj = make_object(Name=1)
    original = obj.item_at(0)
    new = JSONNode.null()
    assert replace_key(obj, "name", new, True) is True
    assert obj.item_at(0) is original
    assert new.key == "name"


def test_replace_key_none_replacement():
    obj = make_object(a=1)
    assert replace_key(obj, "a", None) is False
    assert obj.item_at(0).value_double == 1.0