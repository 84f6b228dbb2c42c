"""
Tree helpers shared by docwrite-guard tests (nesting builders, node iteration, sample documents).
"""

from __future__ import annotations

from typing import Any, Iterator, Mapping

from docwrite_guard import UNDEFINED


def nest(levels: int, leaf: Any = "x") -> dict:
    """{"l1": {"l2": ... {"lN": leaf}}}: the leaf sits at depth ``levels``."""
    node: Any = leaf
    for i in range(levels, 0, -1):
        node = {f"l{i}": node}
    return node


def iter_nodes(value: Any, depth: int = 0) -> Iterator[tuple[Any, int]]:
    yield value, depth
    if isinstance(value, Mapping):
        for child in value.values():
            yield from iter_nodes(child, depth + 1)
    elif isinstance(value, (list, tuple)):
        for child in value:
            yield from iter_nodes(child, depth + 1)


def iter_keys(value: Any) -> Iterator[Any]:
    for node, _ in iter_nodes(value):
        if isinstance(node, Mapping):
            yield from node.keys()


def _callback() -> None:
    return None


MESSY_DOCS = [
    {"name": "ok", "bad": UNDEFINED},
    {"a.b": 1, "c/d": 2, "": 3, "__name__": 4, 5: "int key", "fine": True},
    {"skills": ["x", UNDEFINED, "y", _callback, float("nan"), {"s"}]},
    {"events": [{"title": "t", "meta": {"score": float("inf"), "on_click": _callback}}]},
    nest(12),
    {"list": [[[[[[[[1]]]]]]]]},
    {"tuple": (1, 2, (3, UNDEFINED))},
    {"nullable": None, "nested": {"also": None}},
    {"\ud800": 1, "lone": "\udc80", "ok": "fine"},
    {},
    [],
    "plain string",
]
