from __future__ import annotations

from typing import Any, List, Literal, Optional, Tuple

from pbst.core.node import Node

_UNCHANGED: Any = object()

Side = Literal["left", "right"]
SearchPath = List[Tuple[Node, Side]]


def clone_node(node: Node) -> Node:
    """Return a fresh node holding the same value and the same subtree references."""

    return node.replace()


def clone_node_with_updates(
    node: Node,
    *,
    data: Any = _UNCHANGED,
    left: Optional[Node] = _UNCHANGED,
    right: Optional[Node] = _UNCHANGED,
) -> Node:
    """Produce a new node with updates applied via copy-on-write semantics.

    Fields that are not supplied keep referencing the original node's value or
    subtree, so untouched branches stay shared between versions.
    """

    updates = {
        field: value
        for field, value in (("data", data), ("left", left), ("right", right))
        if value is not _UNCHANGED
    }
    return node.replace(**updates)


def rebuild_path(path: SearchPath, subtree: Optional[Node]) -> Optional[Node]:
    """Rebuild the ancestors recorded on `path` bottom-up around a new `subtree`.

    Each entry is an ancestor and the side the descent took from it; the
    sibling on the other side is shared with the previous version.
    """

    rebuilt = subtree
    for ancestor, side in reversed(path):
        if side == "left":
            rebuilt = clone_node_with_updates(ancestor, left=rebuilt)
        else:
            rebuilt = clone_node_with_updates(ancestor, right=rebuilt)
    return rebuilt
