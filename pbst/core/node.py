from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Node:
    """Immutable tree node; `None` stands for an empty subtree."""

    data: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def replace(self, **kwargs: Any) -> "Node":
        """Return a new node with the provided fields swapped in."""

        return dataclasses.replace(self, **kwargs)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def new(data: Any, left: Optional[Node] = None, right: Optional[Node] = None) -> Node:
    """Build a node from a value and two subtrees without checking their ordering."""

    return Node(data=data, left=left, right=right)
