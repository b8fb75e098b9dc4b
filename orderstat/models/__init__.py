"""
Data models for the ordered index.
"""

from orderstat.models.exceptions import InvariantViolationError
from orderstat.models.sortedcontainers import OrderStatisticTree

__all__ = [
    "InvariantViolationError",
    "OrderStatisticTree",
]
