"""
exceptions.py

Errors raised by prefixcodec.
"""


class PrefixCodecError(Exception):
    """Base class for every error raised by the package."""


class SourceUnavailable(PrefixCodecError, OSError):
    """The input source could not be read."""


class SinkUnavailable(PrefixCodecError, OSError):
    """The output sink could not be written."""


class InternalInvariantViolation(PrefixCodecError, RuntimeError):
    """A defect in tree construction or code assignment was detected."""


class CodeCapacityExceeded(InternalInvariantViolation):
    """The code tree is deeper than the code width can hold."""

    def __init__(self, code_width: int) -> None:
        self.code_width = code_width
        super().__init__(f"Code tree needs more than {code_width} bits per code")
