import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_search_tree import BinarySearchTree
from tree_iterator import TreeIterator, ConstTreeIterator, ReverseIterator


def sample_tree():
    return BinarySearchTree([50, 30, 70, 20, 40, 60, 80])


class TestForwardIterator(unittest.TestCase):

    def test_begin_equals_end_on_empty_tree(self):
        bst = BinarySearchTree()
        self.assertEqual(bst.begin(), bst.end())
        self.assertTrue(bst.begin().at_end())

    def test_begin_lands_on_minimum(self):
        bst = sample_tree()
        self.assertEqual(bst.begin().value, 20)

    def test_reaches_end_after_size_steps(self):
        bst = sample_tree()
        it = bst.begin()
        values = []
        steps = 0
        while it != bst.end():
            values.append(it.value)
            it.advance()
            steps += 1
        self.assertEqual(steps, bst.size())
        self.assertEqual(values, [20, 30, 40, 50, 60, 70, 80])

    def test_end_is_stable(self):
        bst = BinarySearchTree([1])
        it = bst.begin().advance()
        self.assertTrue(it.at_end())
        it.advance()
        self.assertTrue(it.at_end())
        self.assertEqual(it, bst.end())

    def test_dereference_end_raises(self):
        with self.assertRaises(IndexError):
            BinarySearchTree().end().value

    def test_next_yields_then_steps(self):
        bst = sample_tree()
        it = bst.begin()
        self.assertEqual(next(it), 20)
        self.assertEqual(it.value, 30)

    def test_exhausted_iterator_is_not_restartable(self):
        bst = sample_tree()
        it = iter(bst)
        self.assertEqual(len(list(it)), 7)
        self.assertEqual(list(it), [])
        self.assertEqual(len(list(bst)), 7)

    def test_equality_by_position(self):
        bst = sample_tree()
        a = bst.begin()
        b = bst.begin()
        self.assertEqual(a, b)
        a.advance()
        self.assertNotEqual(a, b)
        b.advance()
        self.assertEqual(a, b)

    def test_iterators_of_different_trees_differ(self):
        self.assertNotEqual(BinarySearchTree([1]).begin(), BinarySearchTree([1]).begin())

    def test_value_can_be_overwritten(self):
        bst = BinarySearchTree([5, 3, 8])
        it = bst.begin()
        it.value = 2
        self.assertEqual(bst.in_order(), [2, 5, 8])
        self.assertTrue(bst.find(2))

    def test_default_iterator_is_end(self):
        self.assertTrue(TreeIterator().at_end())
        self.assertEqual(TreeIterator(), BinarySearchTree([1, 2]).end())

    def test_iterators_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(TreeIterator())

    def test_degenerate_chain_walk(self):
        bst = BinarySearchTree(range(100, 0, -1))
        self.assertEqual(list(bst), list(range(1, 101)))


class TestConstIterator(unittest.TestCase):

    def test_same_walk_as_forward(self):
        bst = sample_tree()
        self.assertEqual(list(bst.cbegin()), list(bst.begin()))

    def test_value_is_read_only(self):
        bst = sample_tree()
        it = bst.cbegin()
        with self.assertRaises(AttributeError):
            it.value = 1
        self.assertEqual(bst.min(), 20)

    def test_compares_with_forward_iterator(self):
        bst = sample_tree()
        self.assertEqual(bst.cbegin(), bst.begin())
        self.assertEqual(bst.cend(), bst.end())

    def test_iter_dunder_is_const(self):
        self.assertIsInstance(iter(sample_tree()), ConstTreeIterator)

    def test_repr(self):
        bst = BinarySearchTree([4])
        self.assertEqual(repr(bst.cbegin()), "ConstTreeIterator(4)")
        self.assertEqual(repr(bst.cend()), "ConstTreeIterator(end)")


class TestReverseIterator(unittest.TestCase):

    def test_rbegin_lands_on_maximum(self):
        bst = sample_tree()
        self.assertEqual(bst.rbegin().value, 80)

    def test_reverse_yields_descending(self):
        bst = sample_tree()
        self.assertEqual(list(bst.rbegin()), [80, 70, 60, 50, 40, 30, 20])
        self.assertEqual(list(bst.crbegin()), [80, 70, 60, 50, 40, 30, 20])

    def test_reverse_is_mirror_of_forward(self):
        bst = BinarySearchTree([3, 9, 22, 99, 3, 0, 11, 32])
        self.assertEqual(list(reversed(bst)), list(bst)[::-1])

    def test_rbegin_equals_rend_on_empty_tree(self):
        bst = BinarySearchTree()
        self.assertEqual(bst.rbegin(), bst.rend())
        self.assertEqual(bst.crbegin(), bst.crend())

    def test_reaches_rend_after_size_steps(self):
        bst = sample_tree()
        it = bst.rbegin()
        steps = 0
        while it != bst.rend():
            it.advance()
            steps += 1
        self.assertEqual(steps, bst.size())

    def test_mutable_reverse_writes_through(self):
        bst = BinarySearchTree([5, 3, 8])
        it = bst.rbegin()
        it.value = 9
        self.assertEqual(bst.max(), 9)

    def test_const_reverse_is_read_only(self):
        bst = BinarySearchTree([5, 3, 8])
        it = bst.crbegin()
        with self.assertRaises(AttributeError):
            it.value = 9
        self.assertEqual(bst.max(), 8)

    def test_base_kind(self):
        bst = sample_tree()
        self.assertIsInstance(bst.rbegin().base(), TreeIterator)
        self.assertIsInstance(bst.crbegin().base(), ConstTreeIterator)

    def test_over_builds_mirrored_walk(self):
        bst = BinarySearchTree([2, 1, 3])
        it = ReverseIterator.over(ConstTreeIterator, bst._root)
        self.assertEqual(list(it), [3, 2, 1])

    def test_not_equal_to_forward_iterator(self):
        bst = BinarySearchTree([1])
        self.assertNotEqual(bst.rbegin(), bst.begin())


if __name__ == "__main__":
    unittest.main()
