"""AVL tree used as the sweep-line status structure.

All structural operations are iterative: ``insert`` and ``remove`` record the
root-to-leaf path on an explicit stack and rebalance it bottom-up, so deep
trees never hit the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

from segment_sweep.algs.priority_queue import Comparator, natural_order

T = TypeVar("T")


class AVLTreeNode(Generic[T]):
    __slots__ = ("value", "left", "right", "height")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[AVLTreeNode[T]] = None
        self.right: Optional[AVLTreeNode[T]] = None
        self.height = 1

    def __repr__(self) -> str:
        return f"AVLTreeNode({self.value!r}, h={self.height})"


def _height(node: Optional[AVLTreeNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: AVLTreeNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance_factor(node: Optional[AVLTreeNode]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLTreeNode) -> AVLTreeNode:
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    _update_height(node)
    _update_height(new_root)
    return new_root


def _rotate_left(node: AVLTreeNode) -> AVLTreeNode:
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    _update_height(node)
    _update_height(new_root)
    return new_root


def _rebalance(node: AVLTreeNode) -> AVLTreeNode:
    """Restore the AVL condition at ``node`` and return the subtree's new root."""
    _update_height(node)
    balance = _balance_factor(node)
    if balance > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _min_node(node: AVLTreeNode) -> AVLTreeNode:
    while node.left is not None:
        node = node.left
    return node


def _max_node(node: AVLTreeNode) -> AVLTreeNode:
    while node.right is not None:
        node = node.right
    return node


class AVLTreeIterator(Generic[T]):
    """In-order iterator driven by an explicit stack.  Not restartable."""

    def __init__(self, root: Optional[AVLTreeNode[T]]) -> None:
        self._stack: List[AVLTreeNode[T]] = []
        self._push_left(root)

    def _push_left(self, node: Optional[AVLTreeNode[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def next(self) -> Optional[T]:
        if not self._stack:
            return None
        current = self._stack.pop()
        self._push_left(current.right)
        return current.value

    def __iter__(self) -> "AVLTreeIterator[T]":
        return self

    def __next__(self) -> T:
        if not self._stack:
            raise StopIteration
        return self.next()


class AVLTree(Generic[T]):
    """Self-balancing BST ordered by ``compare(a, b)``.

    Values comparing equal to a stored value are never inserted twice.  The
    comparator is consulted at call time, so a value whose sort key changed
    after insertion has to be removed before the change and reinserted after.
    """

    def __init__(self, compare: Optional[Comparator] = None) -> None:
        self.root: Optional[AVLTreeNode[T]] = None
        self._compare: Comparator = compare if compare is not None else natural_order
        self._size = 0

    # ------------------------------------------------------------------ structure
    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    @property
    def height(self) -> int:
        return _height(self.root)

    def _replace_child(
        self,
        parent: Optional[AVLTreeNode[T]],
        old: AVLTreeNode[T],
        new: Optional[AVLTreeNode[T]],
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rebalance_path(self, path: List[AVLTreeNode[T]]) -> None:
        for i in range(len(path) - 1, -1, -1):
            node = path[i]
            new_root = _rebalance(node)
            if new_root is not node:
                self._replace_child(path[i - 1] if i > 0 else None, node, new_root)

    # ------------------------------------------------------------------ mutation
    def insert(self, value: T) -> bool:
        """Insert ``value``; return ``False`` if an equal value is already stored."""
        if self.root is None:
            self.root = AVLTreeNode(value)
            self._size = 1
            return True

        path: List[AVLTreeNode[T]] = []
        node = self.root
        cmp = 0
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return False
            path.append(node)
            node = node.left if cmp < 0 else node.right

        parent = path[-1]
        if cmp < 0:
            parent.left = AVLTreeNode(value)
        else:
            parent.right = AVLTreeNode(value)
        self._size += 1
        self._rebalance_path(path)
        return True

    def remove(self, value: T) -> bool:
        """Remove the node comparing equal to ``value``; ``False`` if none does."""
        path: List[AVLTreeNode[T]] = []
        node = self.root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                break
            path.append(node)
            node = node.left if cmp < 0 else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # copy the in-order successor up, then unlink the successor node
            path.append(node)
            successor = node.right
            while successor.left is not None:
                path.append(successor)
                successor = successor.left
            node.value = successor.value
            node = successor

        child = node.left if node.left is not None else node.right
        self._replace_child(path[-1] if path else None, node, child)
        self._size -= 1
        self._rebalance_path(path)
        return True

    def clear(self) -> None:
        self.root = None
        self._size = 0

    # ------------------------------------------------------------------ queries
    def _find_node(self, value: T) -> Optional[AVLTreeNode[T]]:
        node = self.root
        while node is not None:
            cmp = self._compare(value, node.value)
            if cmp == 0:
                return node
            node = node.left if cmp < 0 else node.right
        return None

    def __contains__(self, value: object) -> bool:
        return self._find_node(value) is not None

    def find(self, value: T) -> Optional[T]:
        node = self._find_node(value)
        return node.value if node is not None else None

    def find_successor(self, value: T) -> Optional[T]:
        node = self._find_node(value)
        if node is None:
            return None
        if node.right is not None:
            return _min_node(node.right).value

        successor: Optional[AVLTreeNode[T]] = None
        current = self.root
        while current is not None:
            cmp = self._compare(value, current.value)
            if cmp < 0:
                successor = current
                current = current.left
            elif cmp > 0:
                current = current.right
            else:
                break
        return successor.value if successor is not None else None

    def find_predecessor(self, value: T) -> Optional[T]:
        node = self._find_node(value)
        if node is None:
            return None
        if node.left is not None:
            return _max_node(node.left).value

        predecessor: Optional[AVLTreeNode[T]] = None
        current = self.root
        while current is not None:
            cmp = self._compare(value, current.value)
            if cmp > 0:
                predecessor = current
                current = current.right
            elif cmp < 0:
                current = current.left
            else:
                break
        return predecessor.value if predecessor is not None else None

    def min(self) -> Optional[T]:
        return _min_node(self.root).value if self.root is not None else None

    def max(self) -> Optional[T]:
        return _max_node(self.root).value if self.root is not None else None

    # ------------------------------------------------------------------ traversal
    def iterator(self) -> AVLTreeIterator[T]:
        return AVLTreeIterator(self.root)

    def __iter__(self) -> Iterator[T]:
        return AVLTreeIterator(self.root)


__all__ = ["AVLTree", "AVLTreeNode", "AVLTreeIterator", "Comparator"]
