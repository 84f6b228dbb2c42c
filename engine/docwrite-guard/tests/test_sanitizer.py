"""
Unit tests for the recursive sanitizer.

Purpose:
- Validates removal of forbidden values, dropping of invalid field names and depth truncation.
- Guards the output guarantees: no forbidden node, bounded depth, dense arrays, idempotence.
"""

from __future__ import annotations

import copy

import pytest

from docwrite_guard import UNDEFINED, ValidationOptions
from docwrite_guard.contracts.enums import CorrectionAction, ValueKind
from docwrite_guard.validation.classifier import classify
from docwrite_guard.validation.paths import is_valid_field_name
from docwrite_guard.validation.sanitizer import sanitize

from tree_helpers import MESSY_DOCS, iter_keys, iter_nodes, nest

TOKEN = "<max_depth_exceeded>"


def test_undefined_field_is_omitted():
    out = sanitize({"name": "ok", "bad": UNDEFINED})
    assert out.clean_value == {"name": "ok"}
    assert out.count(CorrectionAction.REMOVED_UNDEFINED) == 1
    assert out.corrections[0].path == "bad"


def test_undefined_written_as_none_when_allowed():
    out = sanitize({"a": UNDEFINED, "b": [UNDEFINED]}, ValidationOptions(allow_undefined=True))
    assert out.clean_value == {"a": None, "b": [None]}
    assert out.count(CorrectionAction.REMOVED_UNDEFINED) == 0
    assert out.count(CorrectionAction.REPLACED_UNDEFINED) == 2


def test_functions_always_removed():
    out = sanitize({"cb": lambda: 1, "n": 1}, ValidationOptions(allow_undefined=True))
    assert out.clean_value == {"n": 1}
    assert out.count(CorrectionAction.REMOVED_FUNCTION) == 1


def test_array_elements_removed_densely():
    out = sanitize([1, UNDEFINED, 2, print, 3, float("nan"), 4])
    assert out.clean_value == [1, 2, 3, 4]


def test_invalid_field_names_dropped():
    doc = {"a.b": 1, "c/d": 2, "": 3, "__id__": 4, 7: 5, "x" * 1501: 6, "ok": 7}
    out = sanitize(doc)
    assert out.clean_value == {"ok": 7}
    assert out.count(CorrectionAction.DROPPED_FIELD_NAME) == 6


def test_value_under_invalid_name_is_not_walked():
    out = sanitize({"a.b": {"deep": UNDEFINED}})
    assert out.count(CorrectionAction.REMOVED_UNDEFINED) == 0


def test_nulls_pass_through_even_when_disallowed():
    out = sanitize({"a": None}, ValidationOptions(allow_null_values=False))
    assert out.clean_value == {"a": None}


def test_tuples_become_lists():
    assert sanitize({"t": (1, (2, 3))}).clean_value == {"t": [1, [2, 3]]}


def test_truncates_container_at_max_depth():
    out = sanitize(nest(7), ValidationOptions(max_depth=6))
    assert out.count(CorrectionAction.TRUNCATED) == 1
    assert out.corrections[0].path == "l1.l2.l3.l4.l5.l6"
    node = out.clean_value
    for i in range(1, 6):
        node = node[f"l{i}"]
    assert node == {"l6": TOKEN}


def test_empty_container_at_max_depth_is_kept():
    out = sanitize({"a": {}, "b": []}, ValidationOptions(max_depth=1))
    assert out.clean_value == {"a": {}, "b": []}
    assert out.corrections == ()


def test_start_depth_counts_toward_limit():
    out = sanitize({"c": {"d": 1}}, ValidationOptions(max_depth=3), path_prefix="a.b", start_depth=2)
    assert out.clean_value == {"c": TOKEN}
    assert out.corrections[0].path == "a.b.c"


def test_circular_reference_removed():
    doc: dict = {"a": 1}
    doc["self"] = doc
    lst: list = [1]
    lst.append(lst)
    doc["list"] = lst

    out = sanitize(doc)
    assert out.clean_value == {"a": 1, "list": [1]}
    assert out.count(CorrectionAction.REMOVED_UNSUPPORTED) == 2


def test_shared_reference_is_not_circular():
    shared = {"x": 1}
    out = sanitize({"a": shared, "b": shared})
    assert out.clean_value == {"a": {"x": 1}, "b": {"x": 1}}
    assert out.corrections == ()


def test_forbidden_root_is_removed():
    out = sanitize(UNDEFINED)
    assert out.removed
    assert out.clean_value is None


def test_input_is_not_mutated():
    doc = {"a": [1, UNDEFINED], "b.c": 2, "d": {"e": print}}
    before = copy.deepcopy(doc)
    sanitize(doc)
    assert doc.keys() == before.keys()
    assert doc["a"] == before["a"]
    assert doc["b.c"] == 2
    assert "e" in doc["d"]


def test_nodes_visited_counts_walked_nodes():
    out = sanitize({"a": [1, 2], "b": "s"})
    # root, a, a[0], a[1], b
    assert out.nodes_visited == 5


@pytest.mark.parametrize("doc", MESSY_DOCS)
def test_idempotent(doc):
    first = sanitize(doc, ValidationOptions(max_depth=6))
    second = sanitize(first.clean_value, ValidationOptions(max_depth=6))
    assert second.clean_value == first.clean_value
    assert second.corrections == ()


@pytest.mark.parametrize("doc", MESSY_DOCS)
def test_output_has_no_forbidden_nodes_or_invalid_keys(doc):
    out = sanitize(doc)
    for node, _ in iter_nodes(out.clean_value):
        assert classify(node) != ValueKind.FORBIDDEN
    for key in iter_keys(out.clean_value):
        assert is_valid_field_name(key)


@pytest.mark.parametrize("max_depth", [1, 2, 3, 6, 10])
@pytest.mark.parametrize("doc", MESSY_DOCS)
def test_output_depth_bounded(doc, max_depth):
    out = sanitize(doc, ValidationOptions(max_depth=max_depth))
    assert all(depth <= max_depth for _, depth in iter_nodes(out.clean_value))


def test_arrays_never_contain_gaps():
    out = sanitize({"skills": ["x", UNDEFINED, "y", None]})
    assert out.clean_value["skills"] == ["x", "y", None]


def test_lone_surrogates_removed_without_raising():
    out = sanitize({"\ud800": 1, "lone": "\udc80", "items": ["a", "\ud83d"], "ok": "fine"})
    assert out.clean_value == {"items": ["a"], "ok": "fine"}
    assert out.count(CorrectionAction.DROPPED_FIELD_NAME) == 1
    assert out.count(CorrectionAction.REMOVED_UNSUPPORTED) == 2
    dropped = [c for c in out.corrections if c.action is CorrectionAction.DROPPED_FIELD_NAME]
    assert dropped[0].detail == "\\ud800"


def test_deep_input_at_depth_ceiling():
    out = sanitize(nest(900), ValidationOptions(max_depth=100))
    assert out.count(CorrectionAction.TRUNCATED) == 1
    assert max(depth for _, depth in iter_nodes(out.clean_value)) == 100
