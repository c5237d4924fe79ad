#__main__.py
import argparse
import sys

from .codecs import PrefixCodecFile
from .exceptions import PrefixCodecError
from .logger import Logger


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="prefixcodec",
        description="Encode a text file one prefix-code byte per character.",
    )
    parser.add_argument("input", help="path of the text file to encode")
    parser.add_argument("output", help="path of the file receiving the encoded bytes")
    parser.add_argument("--log", dest="log_path", help="save the log records to this file")
    parser.add_argument("--verbose", action="store_true", help="print info records while encoding")
    args = parser.parse_args(argv)

    logger = Logger()
    logger.display_info = args.verbose

    try:
        encoded = PrefixCodecFile(logger=logger).encode(args.input, args.output)
    except PrefixCodecError as error:
        print(f"prefixcodec: {error}", file=sys.stderr)
        return 1
    finally:
        if args.log_path is not None:
            logger.save(args.log_path)

    if args.verbose:
        for char, code in sorted(encoded.code_table.items(), key=lambda item: item[1]):
            print(f"{char!r}\t{code:08b}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
