"""
Order-Statistic Tree implementation for sorted key-value storage.

Unbalanced binary search tree where every node caches the size of its
subtree, so rank and select run in O(depth) without a full traversal.
"""

import logging
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from orderstat.interfaces.order_statistic_container import OrderStatisticContainer
from orderstat.models.exceptions import InvariantViolationError

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Node:
    """Node in the Order-Statistic Tree."""

    key: Any
    value: Any
    left: "Node | None" = None
    right: "Node | None" = None
    subtree_size: int = 1

    def resize(self) -> None:
        """Re-derive subtree_size from the children."""
        self.subtree_size = 1 + _size(self.left) + _size(self.right)


def _size(node: Node | None) -> int:
    return node.subtree_size if node else 0


class OrderStatisticTree(OrderStatisticContainer):
    """
    Order-Statistic Tree implementation of OrderStatisticContainer.

    Properties maintained after every mutating call:
    1. Keys in a node's left subtree are smaller, keys in its right subtree larger
    2. node.subtree_size == 1 + size(node.left) + size(node.right)
    3. Keys are unique; putting an existing key overwrites its value

    No rotations are performed, so depth is O(N) in the worst case. All
    descents are iterative and record their path, so degenerate trees never
    hit the interpreter recursion limit.

    Not safe for concurrent mutation. Callers sharing a tree across threads
    must guard it with their own lock.
    """

    def __init__(self, validate_on_write: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            validate_on_write: Run check_invariants() after every put/delete.
        """
        if not isinstance(validate_on_write, bool):
            raise ValueError(
                f"validate_on_write must be a bool, got {validate_on_write!r}"
            )

        self._root: Node | None = None
        self._validate_on_write = validate_on_write

    def put(self, key: Any, value: Any) -> None:
        """Insert or update a key-value pair. O(depth)"""
        if key is None:
            raise ValueError("key cannot be None")

        # Find insertion point
        path: list[Node] = []
        current = self._root

        while current is not None:
            if key < current.key:
                path.append(current)
                current = current.left
            elif key > current.key:
                path.append(current)
                current = current.right
            else:
                # Key exists, update value. Sizes are unchanged.
                current.value = value
                logger.debug(f"Overwrote value for key {key!r}")
                self._after_write()
                return

        new_node = Node(key=key, value=value)
        if not path:
            self._root = new_node
        elif key < path[-1].key:
            path[-1].left = new_node
        else:
            path[-1].right = new_node

        self._resize_path(path)
        logger.debug(f"Inserted key {key!r} at depth {len(path)}")
        self._after_write()

    def get(self, key: Any) -> Any | None:
        """Retrieve value by key. O(depth)"""
        node = self._find_node(key)
        return node.value if node else None

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def delete(self, key: Any) -> bool:
        """Remove a key-value pair. O(depth)"""
        if key is None:
            return False

        path: list[Node] = []
        current = self._root

        while current is not None and key != current.key:
            path.append(current)
            current = current.left if key < current.key else current.right

        if current is None:
            return False

        if current.left is None:
            replacement = current.right
            logger.debug(f"Deleting key {key!r}: replaced by right child")
        elif current.right is None:
            replacement = current.left
            logger.debug(f"Deleting key {key!r}: replaced by left child")
        else:
            # Two children: promote the in-order successor
            right, successor = self._detach_min(current.right)
            successor.left = current.left
            successor.right = right
            successor.resize()
            replacement = successor
            logger.debug(
                f"Deleting key {key!r}: promoted successor {successor.key!r}"
            )

        self._replace_child(path[-1] if path else None, current, replacement)
        current.left = None
        current.right = None

        self._resize_path(path)
        self._after_write()
        return True

    def delete_min(self) -> bool:
        """Remove the smallest key. Returns False if the tree is empty."""
        if self._root is None:
            return False

        self._root, removed = self._detach_min(self._root)
        logger.debug(f"Deleted minimum key {removed.key!r}")
        self._after_write()
        return True

    def delete_max(self) -> bool:
        """Remove the largest key. Returns False if the tree is empty."""
        if self._root is None:
            return False

        self._root, removed = self._detach_max(self._root)
        logger.debug(f"Deleted maximum key {removed.key!r}")
        self._after_write()
        return True

    def clear(self) -> None:
        """Drop every node."""
        released = self.size()
        self._root = None
        logger.debug(f"Cleared tree, released {released} nodes")

    def size(self) -> int:
        return _size(self._root)

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        height = 0
        level = [self._root] if self._root else []

        while level:
            height += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]

        return height

    def min(self) -> Any | None:
        node = self._root
        if node is None:
            return None

        while node.left is not None:
            node = node.left
        return node.key

    def max(self) -> Any | None:
        node = self._root
        if node is None:
            return None

        while node.right is not None:
            node = node.right
        return node.key

    def floor(self, key: Any) -> Any | None:
        """Largest key <= key. O(depth)"""
        if key is None:
            return None

        node = self._root
        floor = None

        while node is not None:
            if node.key == key:
                return node.key
            elif node.key > key:
                # Too large to be the floor, look for smaller keys
                node = node.left
            else:
                # Candidate, but the right subtree may hold a closer one
                floor = node.key
                node = node.right

        return floor

    def ceil(self, key: Any) -> Any | None:
        """Smallest key >= key. O(depth)"""
        if key is None:
            return None

        node = self._root
        ceil = None

        while node is not None:
            if node.key == key:
                return node.key
            elif node.key < key:
                node = node.right
            else:
                ceil = node.key
                node = node.left

        return ceil

    def rank(self, key: Any) -> int | None:
        """
        Count keys strictly less than key.

        Defined only for keys present in the tree; an absent key yields None
        even if it falls between present keys.
        """
        if key is None:
            return None

        rank = 0
        node = self._root

        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                rank += _size(node.left) + 1
                node = node.right
            else:
                return rank + _size(node.left)

        return None

    def select(self, i: int) -> Any | None:
        """Return the i-th smallest key, 1-indexed. O(depth)"""
        if i < 1 or i > self.size():
            return None

        node = self._root
        while node is not None:
            current_order = 1 + _size(node.left)

            if i == current_order:
                return node.key
            elif i < current_order:
                node = node.left
            else:
                i -= current_order
                node = node.right

        return None

    def level_order(self) -> Iterator[Any]:
        return _LevelOrderIterator(self._root)

    def iterator(
        self, start: Any | None = None, end: Any | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Yield (key, value) pairs with start <= key < end in ascending order.

        The pending stack starts as the ceil(start) search path restricted to
        keys >= start; each yielded node then adds the left spine of its
        right subtree. Mutating the tree mid-iteration is unsupported.
        """
        pending: list[Node] = []
        node = self._root
        while node is not None:
            if start is not None and node.key < start:
                node = node.right
            else:
                pending.append(node)
                node = node.left

        while pending:
            node = pending.pop()
            if end is not None and not node.key < end:
                return

            yield node.key, node.value

            node = node.right
            while node is not None:
                pending.append(node)
                node = node.left

    def check_invariants(self) -> None:
        """
        Verify ordering and size bookkeeping on every node.

        Uniqueness follows from strict ordering, so it needs no separate pass.

        Raises:
            InvariantViolationError: On the first node found to be inconsistent.
        """
        # (node, exclusive lower bound, exclusive upper bound)
        stack: list[tuple[Node, Any, Any]] = []
        if self._root is not None:
            stack.append((self._root, None, None))

        while stack:
            node, low, high = stack.pop()

            if (low is not None and not low < node.key) or (
                high is not None and not node.key < high
            ):
                self._raise_violation(
                    node.key,
                    InvariantViolationError.ORDER,
                    f"key outside of bounds ({low!r}, {high!r})",
                )

            expected = 1 + _size(node.left) + _size(node.right)
            if node.subtree_size != expected:
                self._raise_violation(
                    node.key,
                    InvariantViolationError.SIZE,
                    f"subtree_size is {node.subtree_size}, expected {expected}",
                )

            if node.left is not None:
                stack.append((node.left, low, node.key))
            if node.right is not None:
                stack.append((node.right, node.key, high))

    def _raise_violation(self, key: Any, invariant: str, detail: str) -> None:
        error = InvariantViolationError(key, invariant, detail)
        logger.error(str(error))
        raise error

    def _after_write(self) -> None:
        if self._validate_on_write:
            self.check_invariants()

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        if key is None:
            return None

        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif key > current.key:
                current = current.right
            else:
                return current
        return None

    def _replace_child(
        self, parent: Node | None, child: Node, replacement: Node | None
    ) -> None:
        """Put replacement in the slot parent holds child in."""
        if parent is None:
            self._root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def _detach_min(self, subtree: Node) -> tuple[Node | None, Node]:
        """
        Unlink the minimum node of subtree.

        The minimum has no left child, so it is replaced in its parent's slot
        by its right child. Sizes on the walked path are re-derived.

        Returns:
            (new subtree root, detached node)
        """
        path: list[Node] = []
        current = subtree
        while current.left is not None:
            path.append(current)
            current = current.left

        remainder = current.right
        current.right = None

        if not path:
            return remainder, current

        path[-1].left = remainder
        self._resize_path(path)
        return subtree, current

    def _detach_max(self, subtree: Node) -> tuple[Node | None, Node]:
        """Mirror of _detach_min."""
        path: list[Node] = []
        current = subtree
        while current.right is not None:
            path.append(current)
            current = current.right

        remainder = current.left
        current.left = None

        if not path:
            return remainder, current

        path[-1].right = remainder
        self._resize_path(path)
        return subtree, current

    @staticmethod
    def _resize_path(path: list[Node]) -> None:
        """Re-derive sizes bottom-up along a root-to-node path."""
        for node in reversed(path):
            node.resize()


class _LevelOrderIterator(Iterator[Any]):
    """
    Breadth-first key iterator.

    Absent children are queued like real ones and dropped when dequeued.
    """

    def __init__(self, root: Node | None) -> None:
        self._queue: deque[Node | None] = deque([root])

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        while self._queue:
            node = self._queue.popleft()
            if node is None:
                continue

            self._queue.append(node.left)
            self._queue.append(node.right)
            return node.key

        raise StopIteration
