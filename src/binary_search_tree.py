from typing import List, Optional

from binary_node import BinaryNode
from sorted_collection import SortedCollection, T


class InvalidArgumentError(ValueError):
    pass


class BinarySearchTree(SortedCollection[T]):
    """Unbalanced binary search tree that keeps duplicates.

    Values equal to a node go to its left subtree, so the left side holds
    ``<=`` and the right side holds ``>``. Shape depends only on insertion
    order; sorted input degrades into a single right-leaning chain.
    """

    def __init__(self) -> None:
        self._root: Optional[BinaryNode[T]] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        return self._root

    def insert(self, value: T) -> None:
        if value is None:
            raise InvalidArgumentError("cannot insert None into the tree")

        new_node = BinaryNode(value)
        if self._root is None:
            self._root = new_node
            self._size += 1
            return

        node = self._root
        while True:
            if value <= node.data:
                if node.left is None:
                    node.left = new_node
                    new_node.parent = node
                    self._size += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    new_node.parent = node
                    self._size += 1
                    return
                node = node.right

    def contains(self, value: T) -> bool:
        if value is None:
            raise InvalidArgumentError("cannot search for None in the tree")

        node = self._root
        while node is not None:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return True
        return False

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        if self._root is None:
            return 0
        levels = 0
        level: List[BinaryNode[T]] = [self._root]
        while level:
            levels += 1
            next_level: List[BinaryNode[T]] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return levels

    def in_order(self) -> List[T]:
        if self._root is None:
            return []
        return self._root.in_order()

    def to_in_order_string(self) -> str:
        if self._root is None:
            return "[ ]"
        return self._root.to_in_order_string()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
