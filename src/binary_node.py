import weakref
from typing import Generic, List, Optional

from sorted_collection import T


class BinaryNode(Generic[T]):
    """A single tree node.

    Children are owned through ``left`` and ``right``. ``parent`` is only a
    weak back-reference, so a detached subtree never keeps its ancestors alive.
    """

    def __init__(self, data: T) -> None:
        self._data: T = data
        self.left: Optional['BinaryNode[T]'] = None
        self.right: Optional['BinaryNode[T]'] = None
        self._parent: Optional['weakref.ReferenceType[BinaryNode[T]]'] = None

    @property
    def data(self) -> T:
        return self._data

    @property
    def parent(self) -> Optional['BinaryNode[T]']:
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['BinaryNode[T]']) -> None:
        self._parent = None if node is None else weakref.ref(node)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[BinaryNode[T]] = []
        node: Optional[BinaryNode[T]] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def to_in_order_string(self) -> str:
        return "[ " + ", ".join(str(value) for value in self.in_order()) + " ]"

    def __repr__(self) -> str:
        return f"BinaryNode({self._data!r})"
