"""
coders.py

Code assignment by tree traversal and per-character encoding.

"""


from typing import Dict, Optional

import numpy as np

from .exceptions import InternalInvariantViolation, CodeCapacityExceeded
from .logger import Logger, CodeAssignedLog, CodingLog, CodingProgressStep
from .models import Leaf, Node, Tree
from .settings import CODE_WIDTH
from .validators import validate_type, validate_code_width


def assign_codes(tree: Tree, code_width: int = CODE_WIDTH, logger: Optional[Logger] = None) -> Dict[str, int]:
    """
    Derive the code value of every leaf from its position in the tree.

    Walking down to the left keeps the current code, walking down to the right
    sets the bit of the node's level, so a leaf at depth d gets a code whose
    low d bits spell its path (bit 0 for the first step).

    Args:
        tree (Tree): The code tree.
        code_width (int): Number of bits available for one code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        Dict[str, int]: Code value of every leaf character.
    """
    validate_code_width(code_width)
    if not isinstance(tree, (Leaf, Node)):
        raise ValueError("Tree must be a Leaf or Node instance")

    codes: Dict[str, int] = {}
    last_cursor = 1 << (code_width - 1)

    def walk(node: Tree, code: int, cursor: int) -> None:
        if isinstance(node, Leaf):
            if node.char in codes:
                raise InternalInvariantViolation(f"Character {node.char!r} appears in more than one leaf")
            codes[node.char] = code
            return
        if cursor > last_cursor:
            raise CodeCapacityExceeded(code_width)
        walk(node.left, code, cursor << 1)
        code ^= cursor
        walk(node.right, code, cursor << 1)

    if isinstance(tree, Leaf):
        codes[tree.char] = 0
    else:
        walk(tree, 0, 1)

    if logger is not None:
        for char, code in codes.items():
            logger.log(CodeAssignedLog(char, code))
    return codes


def encode_text(text: str, code_table: Dict[str, int], logger: Optional[Logger] = None) -> np.ndarray:
    """
    Replace every character of the text with its code value.

    Args:
        text (str): The input text.
        code_table (Dict[str, int]): Code value of every character of the text.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        np.ndarray: One uint8 value per character, in text order.
    """
    validate_type(text, "Text", str)
    validate_type(code_table, "Code table", dict)

    encoded = np.empty(len(text), dtype=np.uint8)
    for index, char in enumerate(text):
        try:
            code = code_table[char]
        except KeyError:
            raise InternalInvariantViolation(f"No code assigned to character {char!r}") from None
        if not 0 <= code <= 0xFF:
            raise InternalInvariantViolation(f"Code {code} of character {char!r} does not fit in one byte")
        encoded[index] = code
        if logger is not None:
            logger.log(CodingProgressStep("Encoding characters", len(text)))

    if logger is not None:
        logger.log(CodingLog(len(text), encoded.nbytes))
    return encoded
