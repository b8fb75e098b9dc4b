"""
Abstract base classes for the ordered index.
"""

from orderstat.interfaces.order_statistic_container import OrderStatisticContainer
from orderstat.interfaces.sorted_container import SortedContainer

__all__ = ["OrderStatisticContainer", "SortedContainer"]
