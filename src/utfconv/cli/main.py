"""Main CLI entry point for utfconv."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .. import __version__
from ..cli.report import inspect_file
from ..codec.units import Endian
from ..exceptions import UtfConvError
from ..transcoder import Encoding, TranscodeRequest, transcode

logger = logging.getLogger(__name__)

_ENDIANS = [e.value for e in Endian]


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the utfconv CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="utfconv: Unicode Transcoding Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  utfconv in.txt --from utf-16 -o out.txt          UTF-16 (with BOM) to UTF-8
  utfconv in.txt --from utf-32 --endian little     Unmarked UTF-32LE to UTF-8
  utfconv in.txt --to utf-32 --add-bom             UTF-8 to UTF-32BE with BOM
  utfconv --inspect in.txt                         Show what a file contains
  utfconv --version                                Show version
        """,
    )

    parser.add_argument("input", nargs="?", metavar="INPUT", help="File to convert ('-' for stdin)")
    parser.add_argument(
        "--from",
        dest="source",
        choices=[e.value for e in Encoding],
        help="Input encoding (default: utf-8, or read from the marker with --inspect)",
    )
    parser.add_argument(
        "--to",
        dest="target",
        choices=[Encoding.UTF8.value, Encoding.UTF32.value],
        default=Encoding.UTF8.value,
        help="Output encoding (default: utf-8)",
    )
    parser.add_argument(
        "--endian",
        choices=_ENDIANS,
        help="Byte order of an unmarked UTF-16/UTF-32 input (default: read the marker)",
    )
    parser.add_argument(
        "--target-endian",
        choices=_ENDIANS,
        default=Endian.BIG.value,
        help="Byte order of UTF-32 output (default: big)",
    )
    parser.add_argument("--add-bom", action="store_true", help="Start UTF-32 output with a BOM")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject overlong UTF-8, encoded surrogates and lone surrogates",
    )
    parser.add_argument("-o", "--output", metavar="FILE", help="Output file (default: stdout)")
    parser.add_argument(
        "--inspect",
        metavar="FILE",
        type=str,
        help="Show the marker, size and code point breakdown of a file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument(
        "--version",
        action="version",
        version=f"utfconv {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    # Handle --inspect
    if args.inspect:
        file_path = Path(args.inspect)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            inspect_file(
                file_path,
                Encoding(args.source) if args.source else None,
                Endian(args.endian) if args.endian else None,
            )
            return 0
        except (UtfConvError, ValueError, OSError) as e:
            print(f"Error inspecting file: {e}", file=sys.stderr)
            return 1

    # If no input specified, show help
    if args.input is None:
        parser.print_help()
        return 0

    try:
        request = TranscodeRequest(
            source=args.source or Encoding.UTF8.value,
            target=args.target,
            source_endian=args.endian,
            target_endian=args.target_endian,
            add_marker=args.add_bom,
            strict=args.strict,
        )
    except ValidationError as e:
        print(f"Error: invalid options: {e}", file=sys.stderr)
        return 1

    try:
        data = _read_input(args.input)
    except OSError as e:
        print(f"Error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    try:
        result = transcode(data, request)
    except UtfConvError as e:
        logger.debug("Conversion failed at offset %s", getattr(e, "position", None))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            Path(args.output).write_bytes(result)
        except OSError as e:
            print(f"Error: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.buffer.write(result)
        sys.stdout.buffer.flush()
    return 0


def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


if __name__ == "__main__":
    sys.exit(main())
