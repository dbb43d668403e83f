from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar


class Comparable(Protocol):
    """Anything with a total order: the four rich comparisons must agree."""

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...

    def __eq__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=Comparable)


class SortedCollection(ABC, Generic[T]):
    @abstractmethod
    def insert(self, value: T) -> None: ...

    @abstractmethod
    def contains(self, value: T) -> bool: ...

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def clear(self) -> None: ...
