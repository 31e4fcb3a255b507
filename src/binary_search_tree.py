import logging
from typing import TypeVar, Generic, Callable, List, Iterator, Optional, Tuple

import numpy as np

import tree_traversal
from binary_tree_node import BinaryTreeNode, NodeShape
from tree_errors import DuplicateValueError, InvalidValueError, NodeNotFoundError

T = TypeVar('T')

Node = BinaryTreeNode

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """Unbalanced binary search tree with unique values.

    Values go left when strictly less than a node's value and right otherwise;
    since equal values are rejected on insert, the right subtree only ever
    holds strictly greater values. ``None`` is never a valid value.
    """

    def __init__(self) -> None:
        self._root: Optional[Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    # search

    def get(self, value: T) -> Optional[Node]:
        found = self.get_with_parent(value)
        if found is None:
            return None
        return found[0]

    def get_with_parent(self, value: T) -> Optional[Tuple[Node, Optional[Node]]]:
        self._check_value(value)
        parent: Optional[Node] = None
        node = self._root
        while node is not None:
            if value < node.value:
                parent, node = node, node.left
            elif value > node.value:
                parent, node = node, node.right
            else:
                return node, parent
        return None

    def contains(self, value: T) -> bool:
        return self.get(value) is not None

    # insert

    def insert(self, value: T) -> Node:
        self._check_value(value)
        node = BinaryTreeNode(value)
        self._attach(node)
        return node

    def insert_node(self, node: Node) -> None:
        if node is None:
            raise InvalidValueError("cannot insert None")
        self._check_value(node.value)
        if node.left is not None or node.right is not None:
            raise ValueError("inserted node must not have children")
        self._attach(node)

    def _attach(self, new_node: Node) -> None:
        value = new_node.value
        if self.contains(value):
            raise DuplicateValueError(f"value already in tree: {value!r}")

        if self._root is None:
            self._root = new_node
        else:
            node = self._root
            while True:
                if value < node.value:
                    if node.left is None:
                        node.left = new_node
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new_node
                        break
                    node = node.right
        self._size += 1
        logger.debug("inserted %r, size=%d", value, self._size)

    # delete

    def delete(self, value: T) -> None:
        found = self.get_with_parent(value)
        if found is None:
            raise NodeNotFoundError(value)
        node, parent = found

        shape = node.shape()
        if shape is NodeShape.NO_CHILDREN:
            replacement = None
        elif shape is NodeShape.LEFT_ONLY:
            replacement = node.left
            node.left = None
        elif shape is NodeShape.RIGHT_ONLY:
            replacement = node.right
            node.right = None
        else:
            replacement = self._detach_predecessor(node)

        self._replace_child(parent, node, replacement)
        self._size -= 1
        logger.debug("deleted %r (%s), size=%d", value, shape.value, self._size)

    def _detach_predecessor(self, node: Node) -> Node:
        # Rightmost node of the left subtree takes over both of node's subtrees.
        assert node.left is not None and node.right is not None
        predecessor_parent = node
        predecessor = node.left
        while predecessor.right is not None:
            predecessor_parent = predecessor
            predecessor = predecessor.right

        if predecessor_parent is node:
            # predecessor is node.left: its own left subtree stays in place
            predecessor.right = node.right
        else:
            predecessor_parent.right = predecessor.left
            predecessor.left = node.left
            predecessor.right = node.right
        logger.debug(
            "predecessor %r replaces %r (direct child: %s)",
            predecessor.value, node.value, predecessor_parent is node,
        )
        node.left = None
        node.right = None
        return predecessor

    def _replace_child(self, parent: Optional[Node], child: Node,
                       replacement: Optional[Node]) -> None:
        if parent is None:
            assert self._root is child, "node claimed as root is not the root"
            self._root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            assert parent.right is child, "node is not linked under its parent"
            parent.right = replacement

    def clear(self) -> None:
        released = 0
        for node in tree_traversal.iter_post_order(self._root):
            node.left = None
            node.right = None
            released += 1
        self._root = None
        self._size = 0
        logger.debug("cleared %d nodes", released)

    # traversal

    def visit_in_order(self, action: Callable[[Node], None]) -> None:
        tree_traversal.visit(tree_traversal.iter_in_order(self._root), action)

    def visit_in_order_reverse(self, action: Callable[[Node], None]) -> None:
        tree_traversal.visit(tree_traversal.iter_reverse_in_order(self._root), action)

    def visit_pre_order(self, action: Callable[[Node], None]) -> None:
        tree_traversal.visit(tree_traversal.iter_pre_order(self._root), action)

    def visit_post_order(self, action: Callable[[Node], None]) -> None:
        tree_traversal.visit(tree_traversal.iter_post_order(self._root), action)

    def in_order(self) -> List[T]:
        return [node.value for node in tree_traversal.iter_in_order(self._root)]

    def reverse_in_order(self) -> List[T]:
        return [node.value for node in tree_traversal.iter_reverse_in_order(self._root)]

    def pre_order(self) -> List[T]:
        return [node.value for node in tree_traversal.iter_pre_order(self._root)]

    def post_order(self) -> List[T]:
        return [node.value for node in tree_traversal.iter_post_order(self._root)]

    # structural queries

    def leaf_count(self) -> int:
        return self._count_shapes(NodeShape.NO_CHILDREN)

    def single_child_count(self) -> int:
        return self._count_shapes(NodeShape.LEFT_ONLY, NodeShape.RIGHT_ONLY)

    def full_node_count(self) -> int:
        return self._count_shapes(NodeShape.BOTH)

    def _count_shapes(self, *shapes: NodeShape) -> int:
        tally = 0

        def count(node: Node) -> None:
            nonlocal tally
            if node.shape() in shapes:
                tally += 1

        self.visit_pre_order(count)
        return tally

    def height(self) -> int:
        return tree_traversal.depth(self._root)

    def get_absolute_path_to_node(self, value: T) -> List[T]:
        if not self.contains(value):
            raise NodeNotFoundError(value)
        path: List[T] = []
        node = self._root
        while node is not None:
            path.append(node.value)
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                break
        return path

    def to_array(self, fill: Optional[T] = None) -> list:
        """Snapshot the tree in complete-binary-tree layout.

        Slots without a node hold ``fill``. The default ``None`` cannot be a
        stored value, so the result is unambiguous; any other fill value is
        indistinguishable from a node holding an equal value.
        """
        if self._root is None:
            return []
        size = tree_traversal.array_capacity(self.height())
        return tree_traversal.fill_array(self._root, size, fill)

    def to_masked_array(self) -> np.ma.MaskedArray:
        """Same layout as ``to_array`` with empty slots masked out."""
        values = self.to_array()
        data = np.empty(len(values), dtype=object)
        for index, value in enumerate(values):
            data[index] = value
        mask = np.array([value is None for value in values], dtype=bool)
        return np.ma.MaskedArray(data, mask=mask)

    # conveniences

    def min(self) -> T:
        if self._root is None:
            raise NodeNotFoundError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise NodeNotFoundError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def copy(self) -> 'BinarySearchTree[T]':
        clone: BinarySearchTree[T] = BinarySearchTree()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _check_value(self, value: T) -> None:
        if value is None:
            raise InvalidValueError("value must not be None")

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
