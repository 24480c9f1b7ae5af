from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from pbst.algo.search import find_max, find_min
from pbst.algo.verify import verify
from pbst.core.node import Node


@dataclass(frozen=True)
class TreeStats:
    size: int
    height: int
    minimum: Any = None
    maximum: Any = None
    valid: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def size(root: Optional[Node]) -> int:
    count = 0
    pending: List[Optional[Node]] = [root]
    while pending:
        node = pending.pop()
        if node is None:
            continue
        count += 1
        pending.append(node.left)
        pending.append(node.right)
    return count


def height(root: Optional[Node]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""

    tallest = 0
    pending: List[Tuple[Optional[Node], int]] = [(root, 1)]
    while pending:
        node, depth = pending.pop()
        if node is None:
            continue
        tallest = max(tallest, depth)
        pending.append((node.left, depth + 1))
        pending.append((node.right, depth + 1))
    return tallest


def describe_tree(root: Optional[Node]) -> TreeStats:
    if root is None:
        return TreeStats(size=0, height=0)
    return TreeStats(
        size=size(root),
        height=height(root),
        minimum=find_min(root).data,
        maximum=find_max(root).data,
        valid=verify(root),
    )
