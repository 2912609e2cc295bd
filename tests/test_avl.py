from __future__ import annotations

import math

from hypothesis import given, strategies as st

from segment_sweep.algs.avl import AVLTree
from segment_sweep.algs.priority_queue import natural_order
from tests.test_utils import check_avl_invariants


def _build(values) -> AVLTree:
    tree: AVLTree[int] = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def test_empty_tree() -> None:
    tree: AVLTree[int] = AVLTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height == 0
    assert tree.min() is None
    assert tree.max() is None
    assert tree.find(1) is None
    assert tree.find_successor(1) is None
    assert tree.find_predecessor(1) is None
    assert not tree.remove(1)
    assert list(tree) == []


def test_insert_rejects_duplicates() -> None:
    tree = _build([5, 3, 8])
    assert not tree.insert(5)
    assert len(tree) == 3
    check_avl_invariants(tree)


def test_rotations_keep_balance() -> None:
    # ascending, descending and zig-zag inserts each force a different rotation
    for values in ([1, 2, 3], [3, 2, 1], [3, 1, 2], [1, 3, 2]):
        tree = _build(values)
        assert tree.root.value == 2
        assert tree.height == 2
        check_avl_invariants(tree)


def test_successor_and_predecessor() -> None:
    tree = _build([50, 30, 70, 20, 40, 60, 80, 35, 45])
    assert tree.find_successor(45) == 50
    assert tree.find_successor(30) == 35
    assert tree.find_successor(80) is None
    assert tree.find_predecessor(60) == 50
    assert tree.find_predecessor(35) == 30
    assert tree.find_predecessor(20) is None
    assert tree.find_successor(99) is None
    assert tree.min() == 20
    assert tree.max() == 80


def test_remove_node_with_two_children() -> None:
    tree = _build([50, 30, 70, 20, 40, 60, 80])
    assert tree.remove(50)
    assert 50 not in tree
    assert list(tree) == [20, 30, 40, 60, 70, 80]
    check_avl_invariants(tree)
    assert not tree.remove(50)


def test_iterator_protocol() -> None:
    tree = _build([4, 2, 6, 1, 3])
    it = tree.iterator()
    seen = []
    while it.has_next():
        seen.append(it.next())
    assert seen == [1, 2, 3, 4, 6]
    assert it.next() is None
    assert list(tree) == seen


def test_custom_comparator_descending() -> None:
    tree: AVLTree[int] = AVLTree(lambda a, b: b - a)
    for v in (1, 5, 3):
        tree.insert(v)
    assert list(tree) == [5, 3, 1]
    assert tree.find_successor(5) == 3


def test_clear() -> None:
    tree = _build(range(10))
    tree.clear()
    assert tree.is_empty()
    assert len(tree) == 0


def test_sequential_inserts_stay_logarithmic() -> None:
    n = 10_000
    tree = _build(range(n))
    assert len(tree) == n
    assert tree.height <= math.ceil(1.45 * math.log2(n + 2))
    assert check_avl_invariants(tree) == n


@given(st.lists(st.tuples(st.booleans(), st.integers(-40, 40)), max_size=120))
def test_matches_set_model(ops) -> None:
    tree: AVLTree[int] = AVLTree()
    model = set()
    for is_insert, value in ops:
        if is_insert:
            assert tree.insert(value) == (value not in model)
            model.add(value)
        else:
            assert tree.remove(value) == (value in model)
            model.discard(value)
        assert len(tree) == len(model)

    check_avl_invariants(tree)
    ordered = sorted(model)
    assert list(tree) == ordered
    for lo, hi in zip(ordered, ordered[1:]):
        assert tree.find_successor(lo) == hi
        assert tree.find_predecessor(hi) == lo
    if ordered:
        assert tree.min() == ordered[0]
        assert tree.max() == ordered[-1]
        assert tree.find_successor(ordered[-1]) is None
        assert tree.find_predecessor(ordered[0]) is None


def test_default_order_shared_with_queue() -> None:
    from segment_sweep.algs import avl, priority_queue

    assert avl.natural_order is priority_queue.natural_order
    assert natural_order(1, 2) < 0 < natural_order(2, 1)
    assert natural_order(3, 3) == 0
