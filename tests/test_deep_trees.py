"""Degenerate trees far deeper than the interpreter recursion limit."""

import sys

from pbst.algo import collect, delete, describe_tree, height, insert, insert_many, search, size, traverse, verify
from pbst.core import new

_DEPTH = 5_000


def _right_chain(count: int):
    tree = None
    for value in reversed(range(count)):
        tree = new(value, None, tree)
    return tree


def test_chain_is_deeper_than_recursion_limit():
    assert _DEPTH > sys.getrecursionlimit()


def test_sorted_insert_many_builds_a_path():
    count = 1_200
    tree = insert_many(None, range(count))
    assert height(tree) == count
    assert verify(tree)
    assert collect(tree) == list(range(count))


def test_deep_chain_queries():
    tree = _right_chain(_DEPTH)
    assert verify(tree)
    assert size(tree) == _DEPTH
    assert height(tree) == _DEPTH
    assert collect(tree) == list(range(_DEPTH))
    assert collect(tree, "reverse") == list(reversed(range(_DEPTH)))
    assert collect(tree, "pre_order") == list(range(_DEPTH))
    assert collect(tree, "post_order") == list(reversed(range(_DEPTH)))
    assert search(tree, _DEPTH - 1).data == _DEPTH - 1

    stats = describe_tree(tree)
    assert (stats.minimum, stats.maximum, stats.valid) == (0, _DEPTH - 1, True)


def test_deep_chain_updates():
    tree = _right_chain(_DEPTH)

    grown = insert(tree, _DEPTH)
    assert height(grown) == _DEPTH + 1
    assert search(grown, _DEPTH) is not None
    assert search(tree, _DEPTH) is None

    same = insert(tree, _DEPTH // 2)
    assert size(same) == _DEPTH

    shrunk = delete(tree, _DEPTH // 2)
    assert search(shrunk, _DEPTH // 2) is None
    assert size(shrunk) == _DEPTH - 1
    assert verify(shrunk)

    tail = delete(tree, _DEPTH - 1)
    assert height(tail) == _DEPTH - 1
    assert size(tree) == _DEPTH


def test_deep_chain_traverse_counts_every_node():
    seen = []
    traverse(_right_chain(_DEPTH), seen.append, "in_order")
    assert len(seen) == _DEPTH
