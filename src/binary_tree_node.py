from enum import Enum
from typing import TypeVar, Generic, Optional

from tree_errors import InvalidValueError

T = TypeVar('T')


class NodeShape(Enum):
    NO_CHILDREN = "no_children"
    LEFT_ONLY = "left_only"
    RIGHT_ONLY = "right_only"
    BOTH = "both"


class BinaryTreeNode(Generic[T]):
    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: T) -> None:
        if value is None:
            raise InvalidValueError("node value must not be None")
        self.value: T = value
        self.left: Optional['BinaryTreeNode[T]'] = None
        self.right: Optional['BinaryTreeNode[T]'] = None

    def shape(self) -> NodeShape:
        if self.left is None:
            return NodeShape.NO_CHILDREN if self.right is None else NodeShape.RIGHT_ONLY
        return NodeShape.LEFT_ONLY if self.right is None else NodeShape.BOTH

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"
