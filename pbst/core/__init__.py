"""Core data structures and persistence primitives for the tree."""

from .node import Node, new
from .persistence import clone_node, clone_node_with_updates, rebuild_path

__all__ = [
    "Node",
    "new",
    "clone_node",
    "clone_node_with_updates",
    "rebuild_path",
]
