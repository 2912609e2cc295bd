"""Plain-text rendering of an AVL tree's shape for debugging."""

from __future__ import annotations

from typing import Callable, List, Optional

from segment_sweep.algs.avl import AVLTreeNode


def render_tree(
    node: Optional[AVLTreeNode],
    fmt: Callable[[object], str] = str,
    *,
    show_height: bool = False,
) -> str:
    """Return one line per node, left child listed before right child.

    >>> from segment_sweep.algs.avl import AVLTree
    >>> tree = AVLTree()
    >>> for v in (2, 1, 3):
    ...     _ = tree.insert(v)
    >>> print(render_tree(tree.root))
    └─ 2
       ├─ 1
       └─ 3
    """
    lines: List[str] = []

    def _walk(current: Optional[AVLTreeNode], prefix: str, is_left: bool) -> None:
        if current is None:
            return
        marker = "├─ " if is_left else "└─ "
        label = fmt(current.value)
        if show_height:
            label = f"{label} (h={current.height})"
        lines.append(prefix + marker + label)
        child_prefix = prefix + ("│  " if is_left else "   ")
        _walk(current.left, child_prefix, True)
        _walk(current.right, child_prefix, False)

    _walk(node, "", False)
    return "\n".join(lines)


__all__ = ["render_tree"]
