import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import tree_traversal
from binary_tree_node import BinaryTreeNode


def link(value, left=None, right=None):
    node = BinaryTreeNode(value)
    node.left = left
    node.right = right
    return node


def values(nodes):
    return [node.value for node in nodes]


class TestTraversalOrders(unittest.TestCase):

    def setUp(self):
        #        4
        #       / \
        #      2   6
        #     / \   \
        #    1   3   7
        self.root = link(4, link(2, link(1), link(3)), link(6, None, link(7)))

    def test_in_order(self):
        self.assertEqual(values(tree_traversal.iter_in_order(self.root)), [1, 2, 3, 4, 6, 7])

    def test_reverse_in_order(self):
        self.assertEqual(
            values(tree_traversal.iter_reverse_in_order(self.root)), [7, 6, 4, 3, 2, 1]
        )

    def test_pre_order(self):
        self.assertEqual(values(tree_traversal.iter_pre_order(self.root)), [4, 2, 1, 3, 6, 7])

    def test_post_order(self):
        self.assertEqual(values(tree_traversal.iter_post_order(self.root)), [1, 3, 2, 7, 6, 4])

    def test_empty_root_yields_nothing(self):
        for walk in (tree_traversal.iter_in_order, tree_traversal.iter_reverse_in_order,
                     tree_traversal.iter_pre_order, tree_traversal.iter_post_order):
            self.assertEqual(list(walk(None)), [])

    def test_post_order_tolerates_unlinking(self):
        seen = []
        for node in tree_traversal.iter_post_order(self.root):
            seen.append(node.value)
            node.left = None
            node.right = None
        self.assertEqual(seen, [1, 3, 2, 7, 6, 4])

    def test_visit_counts_invocations(self):
        seen = []
        count = tree_traversal.visit(tree_traversal.iter_pre_order(self.root), seen.append)
        self.assertEqual(count, 6)
        self.assertEqual(len(seen), 6)

    def test_deep_chain_does_not_recurse(self):
        root = BinaryTreeNode(0)
        node = root
        for value in range(1, 3000):
            node.right = BinaryTreeNode(value)
            node = node.right
        self.assertEqual(len(list(tree_traversal.iter_in_order(root))), 3000)
        self.assertEqual(len(list(tree_traversal.iter_post_order(root))), 3000)
        self.assertEqual(tree_traversal.depth(root), 2999)


class TestDepth(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(tree_traversal.depth(None), 0)

    def test_single_node(self):
        self.assertEqual(tree_traversal.depth(link(1)), 0)

    def test_uneven_subtrees(self):
        root = link(5, link(3, link(2, link(1))), link(8))
        self.assertEqual(tree_traversal.depth(root), 3)


class TestFillArray(unittest.TestCase):

    def test_capacity(self):
        self.assertEqual(tree_traversal.array_capacity(0), 1)
        self.assertEqual(tree_traversal.array_capacity(1), 3)
        self.assertEqual(tree_traversal.array_capacity(3), 15)

    def test_layout(self):
        root = link(4, link(2, None, link(3)), link(6))
        self.assertEqual(
            tree_traversal.fill_array(root, 7),
            [4, 2, 6, None, 3, None, None],
        )

    def test_custom_fill(self):
        root = link(4, None, link(6))
        self.assertEqual(tree_traversal.fill_array(root, 3, fill=-1), [4, -1, 6])

    def test_empty_root(self):
        self.assertEqual(tree_traversal.fill_array(None, 3), [None, None, None])

    def test_too_small_raises(self):
        root = link(4, link(2, link(1)))
        with self.assertRaises(IndexError):
            tree_traversal.fill_array(root, 3)


if __name__ == "__main__":
    unittest.main()
