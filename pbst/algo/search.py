from __future__ import annotations

from typing import Any, Optional

from pbst.core.node import Node
from pbst.errors import EmptyTreeError


def search(root: Optional[Node], value: Any) -> Optional[Node]:
    """Return the node holding `value`, or `None` when it is absent."""

    current = root
    while current is not None:
        if value < current.data:
            current = current.left
        elif value > current.data:
            current = current.right
        else:
            return current
    return None


def find_min(node: Optional[Node]) -> Node:
    """Return the leftmost node of a non-empty tree."""

    if node is None:
        raise EmptyTreeError("find_min")
    while node.left is not None:
        node = node.left
    return node


def find_max(node: Optional[Node]) -> Node:
    if node is None:
        raise EmptyTreeError("find_max")
    while node.right is not None:
        node = node.right
    return node
