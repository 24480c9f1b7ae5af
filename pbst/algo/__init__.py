"""Tree algorithms: insertion, deletion, search, verification and traversal."""

from .insert import insert, insert_many
from .delete import delete, delete_many
from .search import find_max, find_min, search
from .verify import verify
from .traverse import TraversalMode, collect, traverse
from .stats import TreeStats, describe_tree, height, size

__all__ = [
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
]
