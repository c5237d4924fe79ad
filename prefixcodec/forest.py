"""
forest.py

Frequency counting and weighted-merge construction of the code tree.
"""


from typing import Dict, Optional

from .logger import Logger, FrequencyLog, TreeConstructionLog, MergeProgressStep
from .models import Leaf, Node, Tree, WeightedEntry, Forest
from .settings import SENTINEL_CHAR
from .validators import validate_type


def count_frequencies(text: str, logger: Optional[Logger] = None) -> Dict[str, int]:
    """
    Count the occurrences of every character in the text.

    Args:
        text (str): The input text.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Dict[str, int]: Character counts, keyed in order of first occurrence.
    """
    validate_type(text, "Text", str)
    frequencies: Dict[str, int] = {}
    for char in text:
        frequencies[char] = frequencies.get(char, 0) + 1
    if logger is not None:
        logger.log(FrequencyLog(len(frequencies), len(text)))
    return frequencies


def get_sorted_index(forest: Forest, weight: int) -> int:
    """
    Find where an entry of the given weight belongs in a sorted forest.

    A probe that lands on an entry of equal weight returns that index at once,
    so among duplicates the result is whichever one the search meets first.
    Otherwise the insertion point is returned.

    Args:
        forest (Forest): Entries sorted ascending by weight.
        weight (int): The weight to place.

    Returns:
        int: The index to insert at.
    """
    size = len(forest)
    low = 0
    high = size
    while low < high:
        mid = low + size // 2
        probe = forest[mid].weight
        if probe < weight:
            low = mid + 1
        elif probe > weight:
            high = mid
        else:
            return mid
        size = high - low
    return low


def insert_sorted(forest: Forest, entry: WeightedEntry) -> int:
    """
    Insert an entry into the forest, keeping it sorted by weight.

    Returns:
        int: The index the entry was inserted at.
    """
    index = get_sorted_index(forest, entry.weight)
    forest.insert(index, entry)
    return index


def build_forest(frequencies: Dict[str, int]) -> Forest:
    """
    Convert character counts into a forest of single-leaf entries.

    Args:
        frequencies (Dict[str, int]): Character counts.

    Returns:
        Forest: One (Leaf, count) entry per character, sorted ascending by count.
    """
    validate_type(frequencies, "Frequencies", dict)
    forest: Forest = []
    for char, count in frequencies.items():
        insert_sorted(forest, WeightedEntry(Leaf(char), count))
    return forest


def build_tree(forest: Forest, logger: Optional[Logger] = None) -> Tree:
    """
    Reduce the forest to a single tree by repeatedly merging its two lightest entries.

    The entry taken first becomes the right child and the one taken second
    the left child. The forest is consumed.

    Args:
        forest (Forest): Entries sorted ascending by weight.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Tree: The code tree; a sentinel leaf for an empty forest.
    """
    validate_type(forest, "Forest", list)

    if len(forest) == 0:
        tree: Tree = Leaf(SENTINEL_CHAR)
    elif len(forest) == 1:
        tree = forest.pop().tree
    else:
        total_merges = len(forest) - 1
        while len(forest) > 2:
            right = forest.pop(0)
            left = forest.pop(0)
            merged = WeightedEntry(Node(left.tree, right.tree), left.weight + right.weight)
            insert_sorted(forest, merged)
            if logger is not None:
                logger.log(MergeProgressStep("Merging subtrees", total_merges))

        right = forest.pop(0)
        left = forest.pop(0)
        tree = Node(left.tree, right.tree)
        if logger is not None:
            logger.log(MergeProgressStep("Merging subtrees", total_merges))

    if logger is not None:
        logger.log(TreeConstructionLog(sum(1 for _ in tree.leaves()), tree.depth()))
    return tree
