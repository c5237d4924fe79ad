"""
models.py

The shared objects used in prefixcodec.

"""


from typing import Iterator, List, Tuple, Union


class Leaf:
    """
    A tree leaf holding a single character.
    """
    __slots__ = ("_char",)

    def __init__(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError("Leaf character must be a string of length 1")
        self._char: str = char

    @property
    def char(self) -> str:
        return self._char

    def depth(self) -> int:
        return 0

    def leaves(self) -> Iterator[str]:
        yield self._char

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Leaf):
            return self._char == other._char
        return False

    def __hash__(self) -> int:
        return hash(("Leaf", self._char))

    def __repr__(self) -> str:
        return f"Leaf({self._char!r})"


class Node:
    """
    An internal tree node owning exactly two subtrees.
    """
    __slots__ = ("_left", "_right")

    def __init__(self, left: "Tree", right: "Tree") -> None:
        if not isinstance(left, (Leaf, Node)) or not isinstance(right, (Leaf, Node)):
            raise ValueError("Node children must be Leaf or Node instances")
        if left is right:
            raise ValueError("Node children must be distinct subtrees")
        self._left: Tree = left
        self._right: Tree = right

    @property
    def left(self) -> "Tree":
        return self._left

    @property
    def right(self) -> "Tree":
        return self._right

    def depth(self) -> int:
        """
        Get the number of edges on the longest path from this node to a leaf.

        Returns:
            int: The depth of the subtree.
        """
        # Iterative walk so skewed trees never hit the recursion limit.
        deepest = 0
        stack = [(self, 0)]
        while stack:
            tree, level = stack.pop()
            if isinstance(tree, Node):
                stack.append((tree._left, level + 1))
                stack.append((tree._right, level + 1))
            elif level > deepest:
                deepest = level
        return deepest

    def leaves(self) -> Iterator[str]:
        """
        Yield the leaf characters from left to right.
        """
        stack = [self]
        while stack:
            tree = stack.pop()
            if isinstance(tree, Node):
                stack.append(tree._right)
                stack.append(tree._left)
            else:
                yield tree.char

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self._left == other._left and self._right == other._right
        return False

    def __hash__(self) -> int:
        return hash(("Node", self._left, self._right))

    def __repr__(self) -> str:
        return f"Node({self._left!r}, {self._right!r})"


Tree = Union[Leaf, Node]


class WeightedEntry:
    """
    Represents a subtree together with the summed count of its leaves.
    """
    __slots__ = ("tree", "weight")

    def __init__(self, tree: Tree, weight: int) -> None:
        if not isinstance(tree, (Leaf, Node)):
            raise ValueError("Tree must be a Leaf or Node instance")
        if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
            raise ValueError("Weight must be a non-negative integer")
        self.tree: Tree = tree
        self.weight: int = weight

    def as_tuple(self) -> Tuple[Tree, int]:
        return self.tree, self.weight

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WeightedEntry):
            return self.tree == other.tree and self.weight == other.weight
        return False

    def __str__(self) -> str:
        return f"[{self.tree}, {self.weight}]"

    def __repr__(self) -> str:
        return f"[{self.tree!r}, {self.weight}]"


Forest = List[WeightedEntry]
