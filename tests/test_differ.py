"""
Unit tests for the jsondiffpatch-style delta adapter
"""

from jsondiffreport.classifier import stat_top_level_diff
from jsondiffreport.differ import compute_delta


def test_equal_documents_have_no_delta():
    doc = {"a": 1, "b": [1, 2, {"c": None}], "d": {"e": "f"}}

    assert compute_delta(doc, {"a": 1, "b": [1, 2, {"c": None}], "d": {"e": "f"}}) is None


def test_replaced_value():
    assert compute_delta({"a": 1}, {"a": 2}) == {"a": [1, 2]}


def test_added_key():
    assert compute_delta({"a": 1}, {"a": 1, "b": 2}) == {"b": [2]}


def test_removed_key():
    assert compute_delta({"a": 1, "b": 2}, {"a": 1}) == {"b": [2, 0, 0]}


def test_nested_object_change():
    delta = compute_delta({"a": {"x": 1, "y": 2}}, {"a": {"x": 1, "y": 3}})

    assert delta == {"a": {"y": [2, 3]}}


def test_type_change():
    assert compute_delta({"a": "1"}, {"a": 1}) == {"a": ["1", 1]}


def test_numeric_type_is_not_a_change():
    assert compute_delta({"a": 1}, {"a": 1.0}) is None


def test_array_append_uses_marker():
    delta = compute_delta({"l": [1, 2]}, {"l": [1, 2, 3]})

    assert delta == {"l": {"_t": "a", "2": [3]}}


def test_array_removal_uses_old_index():
    delta = compute_delta({"l": [1, 2, 3]}, {"l": [1, 2]})

    assert delta == {"l": {"_t": "a", "_2": [3, 0, 0]}}


def test_disjoint_objects_stay_key_level():
    delta = compute_delta({"a": 1}, {"b": 2})

    assert delta == {"a": [1, 0, 0], "b": [2]}


def test_root_scalar_change():
    assert compute_delta(1, 2) == [1, 2]


def test_key_order_follows_left_then_right():
    delta = compute_delta({"b": 1, "a": 1}, {"a": 2, "b": 2, "c": 3})

    assert list(delta) == ["b", "a", "c"]


def test_classification_of_mixed_changes():
    left = {"keep": 1, "change": 1, "gone": True, "sub": {"x": 1}}
    right = {"keep": 1, "change": 2, "sub": {"x": 2}, "new": []}

    stats = stat_top_level_diff(compute_delta(left, right))

    assert stats.added == ["new"]
    assert stats.removed == ["gone"]
    assert stats.updated == ["change", "sub"]


def test_boolean_to_integer_is_a_change():
    assert compute_delta({"a": True}, {"a": 1}) == {"a": [True, 1]}


def test_false_to_zero_is_a_change():
    assert compute_delta({"a": False}, {"a": 0}) == {"a": [False, 0]}


def test_boolean_to_integer_in_list():
    delta = compute_delta([True], [1])

    assert delta is not None
    assert delta["_t"] == "a"
    assert stat_top_level_diff({"l": delta}).updated == ["l"]


def test_boolean_to_string_is_a_change():
    assert compute_delta({"a": True}, {"a": "true"}) == {"a": [True, "true"]}


def test_boolean_flip():
    assert compute_delta({"a": True, "b": [False]}, {"a": False, "b": [False]}) == {"a": [True, False]}


def test_booleans_restored_in_added_values():
    delta = compute_delta({}, {"new": {"on": True, "flags": [False, 1]}})

    assert delta == {"new": [{"on": True, "flags": [False, 1]}]}
    assert delta["new"][0]["on"] is True
    assert delta["new"][0]["flags"][0] is False


def test_equal_booleans_have_no_delta():
    assert compute_delta({"a": [True, False, 1, 0]}, {"a": [True, False, 1.0, 0]}) is None
