"""Removing, inserting and replacing members of array and object nodes."""

from __future__ import annotations

from .node import JSONNode


def _index_of(parent: JSONNode, item: JSONNode) -> int | None:
    for position, child in enumerate(parent.children):
        if child is item:
            return position
    return None


def detach(parent: JSONNode, item: JSONNode) -> JSONNode | None:
    """Remove ``item`` from ``parent`` and return it.

    Raises ValueError if ``item`` is not a member of ``parent``.
    """
    if parent is None or item is None:
        return None
    position = _index_of(parent, item)
    if position is None:
        raise ValueError("item is not a member of parent")
    del parent.children[position]
    return item


def detach_at(parent: JSONNode, index: int) -> JSONNode | None:
    """Remove and return the member at ``index``, or None if there is none."""
    if parent is None or index < 0:
        return None
    item = parent.item_at(index)
    if item is None:
        return None
    return detach(parent, item)


def detach_key(
    parent: JSONNode, name: str, case_sensitive: bool = False
) -> JSONNode | None:
    """Remove and return the first member named ``name``, or None."""
    if parent is None:
        return None
    item = parent.get(name, case_sensitive)
    if item is None:
        return None
    return detach(parent, item)


def delete_at(parent: JSONNode, index: int) -> None:
    """Drop the member at ``index`` if there is one."""
    detach_at(parent, index)


def delete_key(parent: JSONNode, name: str, case_sensitive: bool = False) -> None:
    """Drop the first member named ``name`` if there is one."""
    detach_key(parent, name, case_sensitive)


def insert(array: JSONNode, index: int, item: JSONNode) -> None:
    """Insert ``item`` before position ``index``; past the end it is appended.

    A negative index leaves the array unchanged.
    """
    if index < 0:
        return
    if index >= len(array.children):
        array.append(item)
        return
    if item is None:
        raise TypeError("cannot insert None")
    array.children.insert(index, item)


def replace(parent: JSONNode, item: JSONNode, replacement: JSONNode) -> bool:
    """Put ``replacement`` where ``item`` is; False if that cannot be done."""
    if parent is None or item is None or replacement is None:
        return False
    if replacement is item:
        return True
    position = _index_of(parent, item)
    if position is None:
        return False
    parent.children[position] = replacement
    return True


def replace_at(parent: JSONNode, index: int, replacement: JSONNode) -> bool:
    """Replace the member at ``index``; False if there is none."""
    if parent is None or index < 0:
        return False
    return replace(parent, parent.item_at(index), replacement)


def replace_key(
    parent: JSONNode,
    name: str,
    replacement: JSONNode,
    case_sensitive: bool = False,
) -> bool:
    """Name ``replacement`` with ``name`` and put it where that member is.

    The replacement is renamed even when no member with the name exists.
    """
    if replacement is None or name is None:
        return False
    replacement.key = name
    if parent is not None:
        replace(parent, parent.get(name, case_sensitive), replacement)
    return True