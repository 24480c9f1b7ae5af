from __future__ import annotations

from typing import Any, Iterable, Optional

from pbst.algo.search import find_min
from pbst.core.node import Node
from pbst.core.persistence import SearchPath, clone_node_with_updates, rebuild_path
from pbst.logging import get_logger

LOGGER = get_logger("algo.delete")


def _remove_matched(node: Node) -> Optional[Node]:
    if node.is_leaf():
        return None
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    # Two children: pull up the in-order successor and drop it from the right.
    # The successor has no left child, so the nested delete is a splice.
    successor = find_min(node.right)
    return clone_node_with_updates(
        node,
        data=successor.data,
        right=delete(node.right, successor.data),
    )


def delete(root: Optional[Node], value: Any) -> Optional[Node]:
    """Return a new tree without `value`.

    Ancestors on the search path are rebuilt even when `value` is absent;
    branches off the path are shared with `root`.
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
    replacement = None if current is None else _remove_matched(current)
    return rebuild_path(path, replacement)


def delete_many(root: Optional[Node], values: Iterable[Any]) -> Optional[Node]:
    """Fold `delete` over `values` from left to right."""

    tree = root
    count = 0
    for value in values:
        tree = delete(tree, value)
        count += 1
    LOGGER.debug("Deleted batch of %d values.", count)
    return tree
