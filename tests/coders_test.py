import random
import unittest
import numpy as np
from prefixcodec.coders import assign_codes, encode_text
from prefixcodec.forest import count_frequencies, build_forest, build_tree
from prefixcodec.models import Leaf, Node
from prefixcodec.exceptions import InternalInvariantViolation, CodeCapacityExceeded
from prefixcodec.logger import Logger

FIBONACCI = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]

def tree_of(text):
    return build_tree(build_forest(count_frequencies(text)))

def fibonacci_text(length):
    return "".join(char * count for char, count in zip("abcdefghij", FIBONACCI[:length]))

class TestAssignCodes(unittest.TestCase):
    def test_classic(self):
        codes = assign_codes(tree_of("aaababababa"))
        self.assertEqual(codes, {'a': 0b0000_0000, 'b': 0b0000_0001})

    def test_three_chars(self):
        codes = assign_codes(tree_of("aaababababaccc"))
        self.assertEqual(codes, {'a': 0b0000_0000, 'b': 0b0000_0001, 'c': 0b0000_0011})

    def test_five_chars(self):
        codes = assign_codes(tree_of("ababababacccdee"))
        self.assertEqual(codes['a'], 0b0000_0000)
        self.assertEqual(codes['b'], 0b0000_0010)
        self.assertEqual(codes['c'], 0b0000_0001)
        self.assertEqual(codes['d'], 0b0000_0111)
        self.assertEqual(codes['e'], 0b0000_0011)

    def test_empty(self):
        self.assertEqual(assign_codes(tree_of("")), {'\0': 0})

    def test_single_char(self):
        self.assertEqual(assign_codes(tree_of("aaaa")), {'a': 0})

    def test_distinct_codes(self):
        rng = random.Random(3)
        for _ in range(50):
            text = "".join(rng.choice("abcdefg") for _ in range(rng.randint(2, 300)))
            codes = assign_codes(tree_of(text))
            self.assertEqual(set(codes), set(text))
            if len(codes) > 1:
                self.assertEqual(len(set(codes.values())), len(codes))

    def test_deepest_tree_that_fits(self):
        tree = tree_of(fibonacci_text(9))
        self.assertEqual(tree.depth(), 8)
        codes = assign_codes(tree)
        self.assertEqual(len(set(codes.values())), 9)
        self.assertTrue(all(0 <= code <= 0xFF for code in codes.values()))

    def test_tree_too_deep(self):
        tree = tree_of(fibonacci_text(10))
        self.assertEqual(tree.depth(), 9)
        with self.assertRaises(CodeCapacityExceeded):
            assign_codes(tree)

    def test_narrow_code_width(self):
        tree = tree_of("ababababacccdee")
        with self.assertRaises(CodeCapacityExceeded):
            assign_codes(tree, code_width=2)
        self.assertEqual(assign_codes(tree, code_width=3)['d'], 0b111)

    def test_invalid_code_width(self):
        with self.assertRaises(ValueError):
            assign_codes(Leaf('a'), code_width=9)
        with self.assertRaises(ValueError):
            assign_codes(Leaf('a'), code_width=0)

    def test_duplicate_leaf(self):
        with self.assertRaises(InternalInvariantViolation):
            assign_codes(Node(Leaf('a'), Leaf('a')))

    def test_logs_every_code(self):
        logger = Logger()
        assign_codes(tree_of("ababababacccdee"), logger=logger)
        logs = logger.get_logs("Code_assigned_log")
        self.assertEqual({log.char: log.code for log in logs}, {'a': 0, 'b': 2, 'c': 1, 'd': 7, 'e': 3})

class TestEncodeText(unittest.TestCase):
    def test_classic(self):
        text = "aaababababa"
        encoded = encode_text(text, {'a': 0, 'b': 1})
        self.assertEqual(encoded.dtype, np.uint8)
        self.assertEqual(encoded.tolist(), [0, 0, 0, 1, 0, 1, 0, 1, 0, 1, 0])

    def test_empty(self):
        encoded = encode_text("", {'\0': 0})
        self.assertEqual(len(encoded), 0)
        self.assertEqual(encoded.tobytes(), b"")

    def test_missing_char(self):
        with self.assertRaises(InternalInvariantViolation):
            encode_text("abc", {'a': 0, 'b': 1})

    def test_code_out_of_range(self):
        with self.assertRaises(InternalInvariantViolation):
            encode_text("a", {'a': 256})

    def test_logs_sizes(self):
        logger = Logger()
        encode_text("abab", {'a': 0, 'b': 1}, logger)
        coding = logger.get_logs("Coding_log")
        self.assertEqual(coding[0].symbol_size, 4)
        self.assertEqual(coding[0].encoded_size, 4)
        self.assertEqual(logger.coding_progress_count, 4)

if __name__ == '__main__':
    unittest.main()
