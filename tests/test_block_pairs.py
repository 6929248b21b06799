import unittest

from sidediff.core.block_pairs import is_modified_pair
from sidediff.core.diff_types import DiffOp, OpKind


def _op(kind, text, count=None):
    return DiffOp(text, kind, count if count is not None else text.count("\n") or 1)


class TestBlockPairs(unittest.TestCase):
    def test_removed_then_added_same_count(self):
        ops = [_op(OpKind.REMOVED, "b\n", 1), _op(OpKind.ADDED, "x\n", 1)]
        self.assertTrue(is_modified_pair(ops, 0))

    def test_counts_differ(self):
        ops = [_op(OpKind.REMOVED, "a\nb\n", 2), _op(OpKind.ADDED, "x\n", 1)]
        self.assertFalse(is_modified_pair(ops, 0))

    def test_zero_count_never_pairs(self):
        ops = [_op(OpKind.REMOVED, "", 0), _op(OpKind.ADDED, "", 0)]
        self.assertFalse(is_modified_pair(ops, 0))

    def test_order_matters(self):
        ops = [_op(OpKind.ADDED, "x\n", 1), _op(OpKind.REMOVED, "b\n", 1)]
        self.assertFalse(is_modified_pair(ops, 0))

    def test_common_neighbours(self):
        ops = [_op(OpKind.COMMON, "a\n", 1), _op(OpKind.ADDED, "x\n", 1)]
        self.assertFalse(is_modified_pair(ops, 0))

    def test_out_of_range_index(self):
        ops = [_op(OpKind.REMOVED, "b\n", 1)]
        self.assertFalse(is_modified_pair(ops, 0))
        self.assertFalse(is_modified_pair(ops, 5))
        self.assertFalse(is_modified_pair(ops, -1))
        self.assertFalse(is_modified_pair([], 0))


if __name__ == "__main__":
    unittest.main()
