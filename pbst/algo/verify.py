from __future__ import annotations

from typing import Any, List, Optional, Tuple

from pbst.core.node import Node
from pbst.logging import get_logger

LOGGER = get_logger("algo.verify")

_UNBOUNDED: Any = object()


def verify(root: Optional[Node]) -> bool:
    """Check the ordering invariant by narrowing an admissible range on descent.

    The root is unbounded; each left step caps the range at the parent value and
    each right step floors it there. The first out-of-range node stops the check.
    """

    pending: List[Tuple[Optional[Node], Any, Any]] = [(root, _UNBOUNDED, _UNBOUNDED)]
    while pending:
        node, lower, upper = pending.pop()
        if node is None:
            continue
        data = node.data
        if upper is not _UNBOUNDED and data > upper:
            LOGGER.debug("Value %r exceeds upper bound %r.", data, upper)
            return False
        if lower is not _UNBOUNDED and data < lower:
            LOGGER.debug("Value %r is below lower bound %r.", data, lower)
            return False
        # Right is pushed first so the left subtree is checked first.
        pending.append((node.right, data, upper))
        pending.append((node.left, lower, data))
    return True
