from __future__ import annotations

from typing import Any, Iterable, Optional

from pbst.core.node import Node, new
from pbst.core.persistence import SearchPath, clone_node, rebuild_path
from pbst.logging import get_logger

LOGGER = get_logger("algo.insert")


def insert(root: Optional[Node], value: Any) -> Node:
    """Return a new tree containing `value`; equal values leave the shape as is.

    Nodes on the search path are rebuilt, every other subtree is shared with
    `root`.
    """

    path: SearchPath = []
    current = root
    while current is not None:
        if value < current.data:
            path.append((current, "left"))
            current = current.left
        elif value > current.data:
            path.append((current, "right"))
            current = current.right
        else:
            break
    leaf = new(value) if current is None else clone_node(current)
    return rebuild_path(path, leaf)  # type: ignore[return-value]


def insert_many(root: Optional[Node], values: Iterable[Any]) -> Optional[Node]:
    """Fold `insert` over `values` from left to right."""

    tree = root
    count = 0
    for value in values:
        tree = insert(tree, value)
        count += 1
    LOGGER.debug("Inserted batch of %d values.", count)
    return tree
