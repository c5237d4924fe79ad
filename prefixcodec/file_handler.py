#file_handler.py
import os
from typing import IO, Union

from .exceptions import SourceUnavailable, SinkUnavailable
from .settings import TEXT_ENCODING
from .validators import validate_source_exists

Source = Union[str, os.PathLike, IO]
Sink = Union[str, os.PathLike, IO]


def read_source(source: Source, encoding: str = TEXT_ENCODING) -> str:
    """
    Read the whole text of a file path or a readable stream.

    Binary streams and files are decoded with the given encoding. Line endings
    are kept as they are.
    """
    try:
        if isinstance(source, (str, os.PathLike)):
            path = os.fspath(source)
            validate_source_exists(path)
            with open(path, 'r', encoding=encoding, newline='') as file:
                return file.read()
        if not hasattr(source, 'read'):
            raise SourceUnavailable(f"Source is neither a path nor a readable stream: {source!r}")
        data = source.read()
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode(encoding)
        if not isinstance(data, str):
            raise SourceUnavailable(f"Source returned {type(data).__name__} instead of text")
        return data
    except SourceUnavailable:
        raise
    except (OSError, ValueError) as error:
        raise SourceUnavailable(f"Cannot read source {source!r}: {error}") from error


def write_sink(sink: Sink, data: bytes) -> None:
    """
    Write the whole byte sequence to a file path or a writable binary stream.
    """
    try:
        if isinstance(sink, (str, os.PathLike)):
            with open(os.fspath(sink), 'wb') as file:
                file.write(data)
            return
        if not hasattr(sink, 'write'):
            raise SinkUnavailable(f"Sink is neither a path nor a writable stream: {sink!r}")
        sink.write(data)
    except SinkUnavailable:
        raise
    except (OSError, TypeError, ValueError) as error:
        raise SinkUnavailable(f"Cannot write sink {sink!r}: {error}") from error
