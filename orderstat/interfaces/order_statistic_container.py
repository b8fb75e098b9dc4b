"""
OrderStatisticContainer abstract base class for rank/select capable containers.
"""

from abc import abstractmethod
from collections.abc import Iterator
from typing import Any

from orderstat.interfaces.sorted_container import SortedContainer


class OrderStatisticContainer(SortedContainer):
    """
    Sorted container that also answers order-statistic and nearest-key queries.

    Every query that has no answer returns None.
    """

    @abstractmethod
    def min(self) -> Any | None:
        """Return the smallest key, or None if empty."""
        pass

    @abstractmethod
    def max(self) -> Any | None:
        """Return the largest key, or None if empty."""
        pass

    @abstractmethod
    def floor(self, key: Any) -> Any | None:
        """
        Return the largest key less than or equal to key.

        Args:
            key: The probe key. Need not be present.

        Returns:
            The floor key, or None if every key is greater than key.
        """
        pass

    @abstractmethod
    def ceil(self, key: Any) -> Any | None:
        """
        Return the smallest key greater than or equal to key.

        Args:
            key: The probe key. Need not be present.

        Returns:
            The ceiling key, or None if every key is less than key.
        """
        pass

    @abstractmethod
    def rank(self, key: Any) -> int | None:
        """
        Return the number of keys strictly less than key.

        Only defined for keys present in the container.

        Args:
            key: A key expected to be present.

        Returns:
            The 0-based rank, or None if key is absent.
        """
        pass

    @abstractmethod
    def select(self, i: int) -> Any | None:
        """
        Return the key with 1-based order statistic i.

        Args:
            i: Position in ascending key order, 1 <= i <= size().

        Returns:
            The i-th smallest key, or None if i is out of range.
        """
        pass

    @abstractmethod
    def level_order(self) -> Iterator[Any]:
        """Return a one-shot iterator over keys in breadth-first order."""
        pass

    def keys(self) -> Iterator[Any]:
        """Yield keys in ascending order, one select() per position."""
        for i in range(1, self.size() + 1):
            yield self.select(i)
