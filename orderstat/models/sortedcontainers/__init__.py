"""
Sorted container implementations for the ordered index.
"""

from orderstat.models.sortedcontainers.order_statistic_tree import OrderStatisticTree

__all__ = ["OrderStatisticTree"]
