import unittest
from prefixcodec.models import Leaf, Node, WeightedEntry

class TestLeaf(unittest.TestCase):
    def test_equality_and_hash(self):
        l1 = Leaf('a')
        l2 = Leaf('a')
        l3 = Leaf('b')
        self.assertEqual(l1, l2)
        self.assertNotEqual(l1, l3)
        self.assertEqual(hash(l1), hash(l2))

    def test_invalid_char(self):
        with self.assertRaises(ValueError):
            Leaf('ab')
        with self.assertRaises(ValueError):
            Leaf(b'a')

    def test_depth_and_leaves(self):
        leaf = Leaf('x')
        self.assertEqual(leaf.depth(), 0)
        self.assertEqual(list(leaf.leaves()), ['x'])

    def test_char_is_read_only(self):
        leaf = Leaf('a')
        with self.assertRaises(AttributeError):
            leaf.char = 'b'

class TestNode(unittest.TestCase):
    def setUp(self):
        self.tree = Node(Leaf('a'), Node(Leaf('b'), Node(Leaf('c'), Leaf('d'))))

    def test_depth(self):
        self.assertEqual(self.tree.depth(), 3)
        self.assertEqual(Node(Leaf('a'), Leaf('b')).depth(), 1)

    def test_leaves_left_to_right(self):
        self.assertEqual(list(self.tree.leaves()), ['a', 'b', 'c', 'd'])

    def test_structural_equality(self):
        other = Node(Leaf('a'), Node(Leaf('b'), Node(Leaf('c'), Leaf('d'))))
        self.assertEqual(self.tree, other)
        self.assertNotEqual(self.tree, Node(Leaf('a'), Leaf('b')))

    def test_invalid_children(self):
        with self.assertRaises(ValueError):
            Node(Leaf('a'), 'b')
        leaf = Leaf('a')
        with self.assertRaises(ValueError):
            Node(leaf, leaf)

    def test_children_are_read_only(self):
        with self.assertRaises(AttributeError):
            self.tree.left = Leaf('z')

class TestWeightedEntry(unittest.TestCase):
    def test_str_and_repr(self):
        entry = WeightedEntry(Leaf('x'), 10)
        self.assertEqual(str(entry), "[Leaf('x'), 10]")
        self.assertEqual(repr(entry), "[Leaf('x'), 10]")

    def test_as_tuple(self):
        entry = WeightedEntry(Leaf('x'), 3)
        self.assertEqual(entry.as_tuple(), (Leaf('x'), 3))

    def test_invalid_weight(self):
        with self.assertRaises(ValueError):
            WeightedEntry(Leaf('x'), -1)
        with self.assertRaises(ValueError):
            WeightedEntry(Leaf('x'), 1.5)
        with self.assertRaises(ValueError):
            WeightedEntry('x', 1)

if __name__ == '__main__':
    unittest.main()
