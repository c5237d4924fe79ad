"""
settings.py

Package-wide constants for prefixcodec.
"""

# Width of one code value in bits; every encoded character becomes one byte.
CODE_WIDTH = 8

# Character held by the leaf that represents an empty input.
SENTINEL_CHAR = "\0"

# Encoding used when the input source is a binary stream or a file path.
TEXT_ENCODING = "utf-8"

# Progress steps are printed every N steps.
MERGE_STEP_INTERVAL = 100
CODING_STEP_INTERVAL = 10000
