"""JSON tree nodes: the value types and the basic building and lookup operations."""

from __future__ import annotations

import math
import string as _string
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

# Arrays and objects nested deeper than this are rejected when parsing.
NESTING_LIMIT = 1000

_ASCII_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)


def _fold(text: str) -> str:
    """Lower-case ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)


def _saturate(value: float) -> int:
    """Convert a double to a 32-bit int, clamping at the limits."""
    if math.isnan(value):
        return 0
    if value >= INT_MAX:
        return INT_MAX
    if value <= INT_MIN:
        return INT_MIN
    return int(value)


class NodeType(IntEnum):
    """The kind of value a node holds."""

    INVALID = 0
    FALSE = 1 << 0
    TRUE = 1 << 1
    NULL = 1 << 2
    NUMBER = 1 << 3
    STRING = 1 << 4
    ARRAY = 1 << 5
    OBJECT = 1 << 6
    RAW = 1 << 7


@dataclass(eq=False)
class JSONNode:
    """One JSON value; arrays and objects hold their members in ``children``.

    ``key`` is the member name when the node lives inside an object.
    """

    type: NodeType = NodeType.INVALID
    value_string: str | None = None
    value_double: float = 0.0
    key: str | None = None
    children: list[JSONNode] = field(default_factory=list)

    @classmethod
    def null(cls) -> JSONNode:
        return cls(NodeType.NULL)

    @classmethod
    def true(cls) -> JSONNode:
        return cls(NodeType.TRUE)

    @classmethod
    def false(cls) -> JSONNode:
        return cls(NodeType.FALSE)

    @classmethod
    def boolean(cls, value: bool) -> JSONNode:
        return cls(NodeType.TRUE if value else NodeType.FALSE)

    @classmethod
    def number(cls, value: float) -> JSONNode:
        return cls(NodeType.NUMBER, value_double=float(value))

    @classmethod
    def string(cls, value: str) -> JSONNode:
        if not isinstance(value, str):
            raise TypeError("string node needs a str value")
        return cls(NodeType.STRING, value_string=value)

    @classmethod
    def raw(cls, value: str) -> JSONNode:
        """A node whose text is emitted verbatim when printed."""
        if not isinstance(value, str):
            raise TypeError("raw node needs a str value")
        return cls(NodeType.RAW, value_string=value)

    @classmethod
    def array(cls) -> JSONNode:
        return cls(NodeType.ARRAY)

    @classmethod
    def object(cls) -> JSONNode:
        return cls(NodeType.OBJECT)

    @property
    def value_int(self) -> int:
        """Integer view of the value: numbers truncated and clamped to 32 bits,
        1 for true, 0 for anything else."""
        if self.type is NodeType.NUMBER:
            return _saturate(self.value_double)
        if self.type is NodeType.TRUE:
            return 1
        return 0

    def set_number(self, value: float) -> float:
        """Store a new numeric value and return it."""
        self.value_double = float(value)
        return self.value_double

    def string_value(self) -> str | None:
        """The text of a string node, or None for any other kind."""
        if self.type is not NodeType.STRING:
            return None
        return self.value_string

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[JSONNode]:
        return iter(self.children)

    def item_at(self, index: int) -> JSONNode | None:
        """The member at ``index``, or None if the index is negative or past the end."""
        if index < 0 or index >= len(self.children):
            return None
        return self.children[index]

    def get(self, name: str, case_sensitive: bool = False) -> JSONNode | None:
        """The first member named ``name``; ASCII case is ignored unless asked."""
        if name is None:
            return None
        if case_sensitive:
            for child in self.children:
                if child.key is None:
                    return None
                if child.key == name:
                    return child
            return None
        folded = _fold(name)
        for child in self.children:
            if child.key is not None and _fold(child.key) == folded:
                return child
        return None

    def has(self, name: str) -> bool:
        """Whether a member with this name exists, ignoring ASCII case."""
        return self.get(name) is not None

    def append(self, item: JSONNode) -> None:
        """Add ``item`` to the end of the members."""
        if item is None:
            raise TypeError("cannot append None")
        self.children.append(item)

    def add(self, key: str, item: JSONNode) -> None:
        """Name ``item`` with ``key`` and add it to the end of the members."""
        if key is None:
            raise TypeError("object member needs a key")
        if item is None:
            raise TypeError("cannot add None")
        item.key = key
        self.children.append(item)