"""Copying and comparing node trees, and building arrays from Python sequences."""

from __future__ import annotations

import operator
import struct
from typing import Iterable

from .node import JSONNode, NodeType

_COMPARABLE = frozenset(
    {
        NodeType.FALSE,
        NodeType.TRUE,
        NodeType.NULL,
        NodeType.NUMBER,
        NodeType.STRING,
        NodeType.RAW,
        NodeType.ARRAY,
        NodeType.OBJECT,
    }
)


def duplicate(node: JSONNode, recurse: bool = True) -> JSONNode:
    """A new node with the same type, value and key as ``node``.

    With ``recurse`` the members are copied too; without it the copy is empty.
    """
    if node is None:
        raise TypeError("cannot duplicate None")
    copy = JSONNode(
        type=node.type,
        value_string=node.value_string,
        value_double=node.value_double,
        key=node.key,
    )
    if recurse:
        copy.children = [duplicate(child, True) for child in node.children]
    return copy


def equals(left: JSONNode, right: JSONNode, case_sensitive: bool = True) -> bool:
    """Whether two trees hold the same value.

    Object members are matched by key, in any order; ``case_sensitive``
    decides whether ASCII case matters in those keys. Missing or invalid
    nodes are never equal to anything.
    """
    if left is None or right is None:
        return False
    if left.type != right.type or left.type not in _COMPARABLE:
        return False
    if left is right:
        return True

    kind = left.type
    if kind in (NodeType.FALSE, NodeType.TRUE, NodeType.NULL):
        return True
    if kind is NodeType.NUMBER:
        return left.value_double == right.value_double
    if kind in (NodeType.STRING, NodeType.RAW):
        if left.value_string is None or right.value_string is None:
            return False
        return left.value_string == right.value_string
    if kind is NodeType.ARRAY:
        if len(left.children) != len(right.children):
            return False
        return all(
            equals(a, b, case_sensitive)
            for a, b in zip(left.children, right.children)
        )
    return _members_match(left, right, case_sensitive) and _members_match(
        right, left, case_sensitive
    )


def _members_match(source: JSONNode, target: JSONNode, case_sensitive: bool) -> bool:
    for member in source.children:
        counterpart = target.get(member.key, case_sensitive)
        if counterpart is None or not equals(member, counterpart, case_sensitive):
            return False
    return True


def _require(values: Iterable, what: str) -> list:
    if values is None:
        raise TypeError(f"{what} must not be None")
    return list(values)


def _build(values: Iterable[JSONNode]) -> JSONNode:
    array = JSONNode.array()
    array.children.extend(values)
    return array


def int_array(numbers: Iterable[int]) -> JSONNode:
    """An array node of number members, one for each integer."""
    items = _require(numbers, "numbers")
    return _build(JSONNode.number(operator.index(n)) for n in items)


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", float(value)))[0]


def float_array(numbers: Iterable[float]) -> JSONNode:
    """An array node of numbers stored at single precision, then widened."""
    items = _require(numbers, "numbers")
    return _build(JSONNode.number(_to_single(n)) for n in items)


def double_array(numbers: Iterable[float]) -> JSONNode:
    """An array node of number members at full double precision."""
    items = _require(numbers, "numbers")
    return _build(JSONNode.number(float(n)) for n in items)


def string_array(strings: Iterable[str]) -> JSONNode:
    """An array node of string members."""
    items = _require(strings, "strings")
    return _build(JSONNode.string(s) for s in items)