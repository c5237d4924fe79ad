"""
validators.py

Shared codes for input validation in prefixcodec.
"""


import os
from typing import Any

from .exceptions import SourceUnavailable
from .settings import CODE_WIDTH


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_source_exists(file_path: str) -> None:
    """Validate that the given input file exists and is readable."""
    if not os.path.isfile(file_path):
        raise SourceUnavailable(f"File does not exist: {file_path}")
    if not os.access(file_path, os.R_OK):
        raise SourceUnavailable(f"File is not readable: {file_path}")


def validate_code_width(code_width: int) -> None:
    """Validate that code values of the given width fit in one output byte."""
    validate_type(code_width, "Code width", int)
    if isinstance(code_width, bool) or not 1 <= code_width <= CODE_WIDTH:
        raise ValueError(f"Code width must be between 1 and {CODE_WIDTH}")
