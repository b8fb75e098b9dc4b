"""
Tests for invariant checking.
"""

import logging

import pytest

from orderstat import InvariantViolationError, OrderStatisticTree


class TestCheckInvariants:
    """Tests for check_invariants and validate_on_write."""

    def test_valid_trees(self, scenario_tree, tree):
        """Test well-formed trees pass."""
        tree.check_invariants()
        scenario_tree.check_invariants()

    def test_size_violation(self, scenario_tree):
        """Test a corrupted subtree size is reported."""
        # 8 is a leaf; its parent 7 no longer adds up
        scenario_tree._root.right.right.subtree_size = 2

        with pytest.raises(InvariantViolationError) as exc_info:
            scenario_tree.check_invariants()

        assert exc_info.value.key == 7
        assert exc_info.value.invariant == InvariantViolationError.SIZE

    def test_order_violation(self, scenario_tree):
        """Test a key outside its ancestors' bounds is reported."""
        # 4 sits in 5's left subtree; 9 is too large for it
        scenario_tree._root.left.right.key = 9

        with pytest.raises(InvariantViolationError) as exc_info:
            scenario_tree.check_invariants()

        assert exc_info.value.key == 9
        assert exc_info.value.invariant == InvariantViolationError.ORDER

    def test_violation_is_logged(self, scenario_tree, caplog):
        """Test violations are logged at ERROR before raising."""
        scenario_tree._root.subtree_size = 1

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InvariantViolationError):
                scenario_tree.check_invariants()

        assert "size invariant violated at key 5" in caplog.text

    def test_validate_on_write(self, scenario_tree):
        """Test validating trees check after every mutation."""
        # off the insertion path, so the write does not re-derive it
        scenario_tree._root.left.subtree_size = 10

        with pytest.raises(InvariantViolationError):
            scenario_tree.put(100, "x")

    def test_no_validation_by_default(self):
        """Test corruption goes unnoticed by writes unless enabled."""
        tree = OrderStatisticTree()
        tree.batch_put([(2, None), (1, None), (3, None)])
        tree._root.subtree_size = 10

        tree.put(2, "again")
        with pytest.raises(InvariantViolationError):
            tree.check_invariants()

    def test_mutations_logged_at_debug(self, tree, caplog):
        """Test mutations emit debug records."""
        with caplog.at_level(logging.DEBUG, logger="orderstat"):
            tree.put(1, "a")
            tree.put(1, "b")
            tree.delete(1)

        messages = [r.getMessage() for r in caplog.records]
        assert "Inserted key 1 at depth 0" in messages
        assert "Overwrote value for key 1" in messages
        assert "Deleting key 1: replaced by right child" in messages
