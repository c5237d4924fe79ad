"""
prefixcodec: A Python library that builds a prefix-free code for the characters of a text and encodes the text one code byte per character.
"""

from .models import (
    Leaf,
    Node,
    Tree,
    WeightedEntry,
    Forest,
)

from .forest import (
    count_frequencies,
    get_sorted_index,
    insert_sorted,
    build_forest,
    build_tree,
)

from .coders import (
    assign_codes,
    encode_text,
)

from .codecs import (
    EncodedText,
    PrefixCodec,
    PrefixCodecFile,
    encode,
    encode_bytes,
)

from .exceptions import (
    PrefixCodecError,
    SourceUnavailable,
    SinkUnavailable,
    InternalInvariantViolation,
    CodeCapacityExceeded,
)

from .settings import CODE_WIDTH, SENTINEL_CHAR

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyLog,
    TreeConstructionLog,
    CodeAssignedLog,
    CodingLog,
    MergeProgressStep,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "Leaf",
    "Node",
    "Tree",
    "WeightedEntry",
    "Forest",

    "count_frequencies",
    "get_sorted_index",
    "insert_sorted",
    "build_forest",
    "build_tree",

    "assign_codes",
    "encode_text",

    "EncodedText",
    "PrefixCodec",
    "PrefixCodecFile",
    "encode",
    "encode_bytes",

    "PrefixCodecError",
    "SourceUnavailable",
    "SinkUnavailable",
    "InternalInvariantViolation",
    "CodeCapacityExceeded",

    "CODE_WIDTH",
    "SENTINEL_CHAR",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyLog",
    "TreeConstructionLog",
    "CodeAssignedLog",
    "CodingLog",
    "MergeProgressStep",
    "CodingProgressStep",
]
