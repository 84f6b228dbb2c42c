"""
Unit tests for value classification.

Purpose:
- Locks the kind assigned to every Python value family, including the forbidden ones.
- Guards the documented NaN/Infinity policy (FORBIDDEN, not passed through).
"""

from __future__ import annotations

import datetime as dt
from collections import OrderedDict
from decimal import Decimal

import pytest

from docwrite_guard import UNDEFINED
from docwrite_guard.contracts.enums import ForbiddenReason, ValueKind
from docwrite_guard.validation.classifier import classify, describe, forbidden_reason


def _fn():
    return 1


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOL),
        (False, ValueKind.BOOL),
        (0, ValueKind.NUMBER),
        (-12, ValueKind.NUMBER),
        (3.5, ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ("text", ValueKind.STRING),
        ([], ValueKind.ARRAY),
        ((1, 2), ValueKind.ARRAY),
        ({}, ValueKind.OBJECT),
        (OrderedDict(a=1), ValueKind.OBJECT),
    ],
)
def test_storable_kinds(value, expected):
    assert classify(value) == expected
    assert forbidden_reason(value) is None


@pytest.mark.parametrize(
    "value,reason",
    [
        (UNDEFINED, ForbiddenReason.UNDEFINED),
        (_fn, ForbiddenReason.FUNCTION),
        (lambda: None, ForbiddenReason.FUNCTION),
        (len, ForbiddenReason.FUNCTION),
        (float("nan"), ForbiddenReason.NON_FINITE),
        (float("inf"), ForbiddenReason.NON_FINITE),
        (float("-inf"), ForbiddenReason.NON_FINITE),
        ({"a"}, ForbiddenReason.UNSUPPORTED),
        (b"raw", ForbiddenReason.UNSUPPORTED),
        (dt.datetime(2024, 1, 1), ForbiddenReason.UNSUPPORTED),
        (Decimal("1.5"), ForbiddenReason.UNSUPPORTED),
        (object(), ForbiddenReason.UNSUPPORTED),
        ("\ud800", ForbiddenReason.UNSUPPORTED),
        ("ok \udc80", ForbiddenReason.UNSUPPORTED),
    ],
)
def test_forbidden_kinds(value, reason):
    assert classify(value) == ValueKind.FORBIDDEN
    assert forbidden_reason(value) == reason


def test_bool_is_not_a_number():
    assert classify(True) == ValueKind.BOOL


def test_only_containers_are_sanitizable():
    assert describe([1]).sanitizable
    assert describe({"a": 1}).sanitizable
    assert not describe("s").sanitizable
    assert not describe(UNDEFINED).sanitizable


def test_undefined_is_falsy_singleton():
    import copy

    assert not UNDEFINED
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"


def test_non_utf8_string_label():
    from docwrite_guard.validation.classifier import type_label

    assert type_label("\ud800", ForbiddenReason.UNSUPPORTED) == "non-UTF-8 string"
    assert classify("café \U0001f600") == ValueKind.STRING
