"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class SortedContainer(ABC):
    """
    Abstract base class for sorted key-value containers.

    Keys are unique and totally ordered. Putting an existing key replaces
    its value in place.

    Implementations:
    - OrderStatisticTree: unbalanced BST augmented with subtree sizes
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update. Must not be None.
            value: The value to associate with the key.

        Raises:
            ValueError: If key is None.
        """
        pass

    @abstractmethod
    def get(self, key: Any) -> Any | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.
        """
        pass

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.
        """
        pass

    @abstractmethod
    def has(self, key: Any) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Yield (key, value) pairs with start <= key < end, ascending.

        Args:
            start: Inclusive lower bound, or None for no bound.
            end: Exclusive upper bound, or None for no bound.
        """
        pass

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self.iterator()

    def batch_put(self, kvs: list[tuple[Any, Any]]) -> None:
        """
        Insert multiple key-value pairs in order.

        Args:
            kvs: List of (key, value) tuples.
        """
        for key, value in kvs:
            self.put(key, value)
