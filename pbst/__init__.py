"""pbst: persistent binary search tree over ordered values.

Quick Start
-----------
>>> import pbst
>>> tree = pbst.insert_many(pbst.new(3), [1, 2, 5])
>>> pbst.collect(tree)
[1, 2, 3, 5]
>>> pbst.collect(tree, "pre_order")
[3, 1, 2, 5]
>>> smaller = pbst.delete(tree, 3)
>>> pbst.collect(tree), pbst.collect(smaller)
([1, 2, 3, 5], [1, 2, 5])

Every update returns a new root and shares untouched subtrees with the
previous version, which stays valid.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("pbst")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.1.0"

from .core import Node, new
from .algo import (
    TraversalMode,
    TreeStats,
    collect,
    delete,
    delete_many,
    describe_tree,
    find_max,
    find_min,
    height,
    insert,
    insert_many,
    search,
    size,
    traverse,
    verify,
)
from .errors import EmptyTreeError, InvalidTraversalModeError, PBSTError

__all__ = [
    "__version__",
    "Node",
    "new",
    "insert",
    "insert_many",
    "delete",
    "delete_many",
    "search",
    "find_min",
    "find_max",
    "verify",
    "TraversalMode",
    "traverse",
    "collect",
    "TreeStats",
    "describe_tree",
    "height",
    "size",
    "PBSTError",
    "InvalidTraversalModeError",
    "EmptyTreeError",
]
