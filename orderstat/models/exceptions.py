"""
Custom exceptions for the ordered index.
"""

from typing import Any


class InvariantViolationError(Exception):
    """
    Raised when a structural invariant of the tree does not hold.

    This is a fail-fast error indicating the node graph has been corrupted.
    """

    ORDER = "order"
    SIZE = "size"

    def __init__(self, key: Any, invariant: str, detail: str):
        """
        Initialize violation error.

        Args:
            key: Key of the node where the violation was detected.
            invariant: Which invariant failed (ORDER or SIZE).
            detail: Human readable description of the mismatch.
        """
        self.key = key
        self.invariant = invariant
        self.detail = detail
        super().__init__(
            f"{invariant} invariant violated at key {key!r}: {detail}"
        )
