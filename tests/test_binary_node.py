import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_node import BinaryNode


class TestBinaryNode(unittest.TestCase):

    def test_new_node_has_no_relations(self):
        node = BinaryNode(7)
        self.assertEqual(node.data, 7)
        self.assertIsNone(node.left)
        self.assertIsNone(node.right)
        self.assertIsNone(node.parent)
        self.assertTrue(node.is_leaf())

    def test_data_is_read_only(self):
        node = BinaryNode(7)
        with self.assertRaises(AttributeError):
            node.data = 8

    def test_parent_round_trip(self):
        parent = BinaryNode(10)
        child = BinaryNode(5)
        parent.left = child
        child.parent = parent
        self.assertIs(child.parent, parent)
        self.assertFalse(parent.is_leaf())

    def test_parent_can_be_reset(self):
        parent = BinaryNode(10)
        child = BinaryNode(5)
        child.parent = parent
        child.parent = None
        self.assertIsNone(child.parent)

    def test_parent_does_not_keep_node_alive(self):
        child = BinaryNode(5)
        parent = BinaryNode(10)
        parent.left = child
        child.parent = parent
        del parent
        self.assertIsNone(child.parent)

    def test_in_order_single(self):
        self.assertEqual(BinaryNode(1).in_order(), [1])
        self.assertEqual(BinaryNode(1).to_in_order_string(), "[ 1 ]")

    def test_in_order_covers_subtree_only(self):
        root = BinaryNode(10)
        left = BinaryNode(5)
        right = BinaryNode(15)
        left.left = BinaryNode(2)
        root.left = left
        root.right = right
        self.assertEqual(root.in_order(), [2, 5, 10, 15])
        self.assertEqual(left.in_order(), [2, 5])

    def test_in_order_string_uses_str(self):
        root = BinaryNode("Bucks")
        root.left = BinaryNode("Badgers")
        self.assertEqual(root.to_in_order_string(), "[ Badgers, Bucks ]")

    def test_repr(self):
        self.assertEqual(repr(BinaryNode(3)), "BinaryNode(3)")
        self.assertEqual(repr(BinaryNode("a")), "BinaryNode('a')")


if __name__ == "__main__":
    unittest.main()
