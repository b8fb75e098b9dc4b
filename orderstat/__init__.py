"""
Order-statistic key-value index.

This package provides an in-memory binary search tree augmented with
subtree sizes:
- put(key, value) / delete(key) - O(depth), no rebalancing
- rank(key) / select(i) - order-statistic queries in O(depth)
- floor(key) / ceil(key) - nearest-key lookups
- min() / max() / level_order() - structural reads

Misses are reported as None.
"""

from orderstat.models.exceptions import InvariantViolationError
from orderstat.models.sortedcontainers import OrderStatisticTree

__all__ = ["OrderStatisticTree", "InvariantViolationError"]
