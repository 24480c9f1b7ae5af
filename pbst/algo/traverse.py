from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from pbst.core.node import Node
from pbst.errors import InvalidTraversalModeError

Callback = Callable[[Any], Any]


class TraversalMode(str, Enum):
    """Visit order of a node relative to its subtrees."""

    IN_ORDER = "in_order"
    PRE_ORDER = "pre_order"
    POST_ORDER = "post_order"
    REVERSE = "reverse"

    @classmethod
    def parse(cls, mode: Union["TraversalMode", str]) -> "TraversalMode":
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode)
            except ValueError:
                pass
        raise InvalidTraversalModeError(mode, tuple(member.value for member in cls))


_VISIT_ORDERS: Dict[TraversalMode, Tuple[str, str, str]] = {
    TraversalMode.IN_ORDER: ("left", "self", "right"),
    TraversalMode.PRE_ORDER: ("self", "left", "right"),
    TraversalMode.POST_ORDER: ("left", "right", "self"),
    TraversalMode.REVERSE: ("right", "self", "left"),
}


def _walk(root: Optional[Node], callback: Callback, order: Tuple[str, str, str]) -> None:
    # Entries flagged True are ready to be emitted; others still need expanding.
    pending: List[Tuple[Optional[Node], bool]] = [(root, False)]
    while pending:
        node, ready = pending.pop()
        if node is None:
            continue
        if ready:
            callback(node.data)
            continue
        for step in reversed(order):
            if step == "self":
                pending.append((node, True))
            elif step == "left":
                pending.append((node.left, False))
            else:
                pending.append((node.right, False))


def traverse(
    node: Optional[Node],
    callback: Callback,
    mode: Union[TraversalMode, str] = TraversalMode.IN_ORDER,
) -> None:
    """Invoke `callback` with each value of the tree, in the order given by `mode`.

    The mode and callback are checked before any node is visited, so a bad
    argument never produces a partial traversal.
    """

    order = _VISIT_ORDERS[TraversalMode.parse(mode)]
    if not callable(callback):
        raise TypeError(f"callback must be callable, got {type(callback).__name__}")
    _walk(node, callback, order)


def collect(
    node: Optional[Node],
    mode: Union[TraversalMode, str] = TraversalMode.IN_ORDER,
) -> List[Any]:
    """Return every value of the tree as a list, in traversal order."""

    values: List[Any] = []
    traverse(node, values.append, mode)
    return values
