from typing import Dict, Optional

import numpy as np

from .coders import assign_codes, encode_text
from .file_handler import Source, Sink, read_source, write_sink
from .forest import count_frequencies, build_forest, build_tree
from .logger import Logger
from .settings import CODE_WIDTH, TEXT_ENCODING
from .validators import validate_type, validate_code_width


class EncodedText:
    """Represents an encoded text together with the table that produced it."""

    def __init__(self, code_table: Dict[str, int], data: bytes, symbol_count: int) -> None:
        validate_type(code_table, "Code table", dict)
        validate_type(data, "Data", bytes)
        validate_type(symbol_count, "Symbol count", int)
        if len(data) != symbol_count:
            raise ValueError("Encoded data must hold exactly one byte per symbol")
        self.code_table = code_table
        self.data = data
        self.symbol_count = symbol_count

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodedText):
            return False
        return self.code_table == other.code_table and self.data == other.data

    def __repr__(self) -> str:
        return f"EncodedText(symbols={self.symbol_count}, table={self.code_table})"


class PrefixCodec:
    def __init__(self, code_width: int = CODE_WIDTH, logger: Optional[Logger] = None) -> None:
        validate_code_width(code_width)
        if logger is not None and not isinstance(logger, Logger):
            raise ValueError("Logger must be an instance of Logger")
        self.code_width = code_width
        self.logger = logger

    def build_code_table(self, text: str) -> Dict[str, int]:
        """
        Build the code table of a text.

        Args:
            text (str): The text to build codes for.

        Returns:
            Dict[str, int]: Code value of every character; {"\\0": 0} for an empty text.
        """
        validate_type(text, "Text", str)
        frequencies = count_frequencies(text, self.logger)
        forest = build_forest(frequencies)
        tree = build_tree(forest, self.logger)
        return assign_codes(tree, self.code_width, self.logger)

    def encode(self, text: str) -> EncodedText:
        """
        Encode a text, one code byte per character.

        Args:
            text (str): The text to encode.

        Returns:
            EncodedText: The code table and the encoded bytes.
        """
        code_table = self.build_code_table(text)
        encoded: np.ndarray = encode_text(text, code_table, self.logger)
        return EncodedText(code_table, encoded.tobytes(), len(text))


class PrefixCodecFile(PrefixCodec):
    def __init__(
        self,
        code_width: int = CODE_WIDTH,
        logger: Optional[Logger] = None,
        encoding: str = TEXT_ENCODING,
    ) -> None:
        super().__init__(code_width, logger)
        validate_type(encoding, "Encoding", str)
        self.encoding = encoding

    def encode(self, input_source: Source, output_sink: Sink) -> EncodedText:
        """
        Encode the whole text of the input source and write the result to the output sink.

        Nothing is written when reading or encoding fails.

        Args:
            input_source: Path or readable stream holding the text.
            output_sink: Path or writable binary stream receiving the encoded bytes.

        Returns:
            EncodedText: The code table and the bytes that were written.
        """
        text = read_source(input_source, self.encoding)
        encoded = super().encode(text)
        write_sink(output_sink, encoded.data)
        return encoded


def encode_bytes(text: str, logger: Optional[Logger] = None) -> bytes:
    """Encode a text in memory and return the encoded bytes."""
    return PrefixCodec(logger=logger).encode(text).data


def encode(input_source: Source, output_sink: Sink, logger: Optional[Logger] = None) -> None:
    """
    Encode the text of the input source into the output sink.

    Raises:
        SourceUnavailable: The input cannot be read.
        SinkUnavailable: The output cannot be written.
        InternalInvariantViolation: The code tree is inconsistent.
    """
    PrefixCodecFile(logger=logger).encode(input_source, output_sink)
