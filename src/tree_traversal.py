"""
Stateless walks over binary tree node links.

Every helper takes the root of a subtree (or None) and never touches tree
bookkeeping, so the same functions serve the tree's queries and can be tested
against hand-linked nodes. All walks use an explicit stack, which keeps a
degenerate chain of any length inside the interpreter's recursion limit.
"""

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from binary_tree_node import BinaryTreeNode

Node = BinaryTreeNode
NodeAction = Callable[[BinaryTreeNode], None]

logger = logging.getLogger(__name__)


def iter_in_order(root: Optional[Node]) -> Iterator[Node]:
    """Left subtree, node, right subtree: ascending value order."""
    stack: List[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def iter_reverse_in_order(root: Optional[Node]) -> Iterator[Node]:
    """Right subtree, node, left subtree: descending value order."""
    stack: List[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        yield node
        node = node.left


def iter_pre_order(root: Optional[Node]) -> Iterator[Node]:
    if root is None:
        return
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def iter_post_order(root: Optional[Node]) -> Iterator[Node]:
    """Children before their parent.

    The full order is materialized before the first node is yielded, so the
    caller may unlink nodes as they arrive.
    """
    if root is None:
        return
    order: List[Node] = []
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    order.reverse()
    yield from order


def visit(nodes: Iterable[Node], action: NodeAction) -> int:
    visited = 0
    for node in nodes:
        action(node)
        visited += 1
    return visited


def depth(root: Optional[Node]) -> int:
    """Height in edges: 0 for an empty subtree and for a lone node."""
    if root is None:
        return 0
    deepest = 0
    stack: List[Tuple[Node, int]] = [(root, 0)]
    while stack:
        node, level = stack.pop()
        if level > deepest:
            deepest = level
        if node.left is not None:
            stack.append((node.left, level + 1))
        if node.right is not None:
            stack.append((node.right, level + 1))
    return deepest


def array_capacity(height: int) -> int:
    return 2 ** (height + 1) - 1


def fill_array(root: Optional[Node], size: int, fill=None) -> list:
    """Lay node values out by complete-binary-tree indexing.

    The root goes to index 0 and the children of index i to 2i+1 and 2i+2.
    Slots without a node keep ``fill``.
    """
    result = [fill] * size
    if root is None:
        return result
    stack: List[Tuple[Node, int]] = [(root, 0)]
    while stack:
        node, index = stack.pop()
        if index >= size:
            raise IndexError(f"fill_array: tree does not fit in {size} slots")
        result[index] = node.value
        if node.left is not None:
            stack.append((node.left, 2 * index + 1))
        if node.right is not None:
            stack.append((node.right, 2 * index + 2))
    logger.debug("filled %d array slots", size)
    return result
