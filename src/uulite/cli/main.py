"""Main CLI entry point for uulite."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..codec import decode, encode
from ..exceptions import UuliteError
from ..framing import frame_file, unframe_file
from .analyze import analyze_file

logger = logging.getLogger(__name__)


def _octal(value: str) -> int:
    try:
        return int(value, 8)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid octal mode: {value!r}") from e


def _read_input(name: Optional[str]) -> bytes:
    if name is None or name == "-":
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def _write_output(data: bytes, name: Optional[str]) -> None:
    if name is None or name == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        Path(name).write_bytes(data)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uulite",
        description="uulite: uuencode/uudecode codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uulite encode photo.jpg -o photo.uu    Encode with a begin/end envelope
  uulite encode --raw photo.jpg          Encode the body only (like uuencode -r)
  uulite decode photo.uu -o photo.jpg    Decode a framed file
  uulite analyze photo.uu                Show line statistics
  uulite --version                       Show version
        """,
    )
    parser.add_argument("--version", action="version", version=f"uulite {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug)",
    )

    subparsers = parser.add_subparsers(dest="command")

    enc = subparsers.add_parser("encode", help="Encode binary data")
    enc.add_argument("file", nargs="?", help="Input file (default: stdin)")
    enc.add_argument("-o", "--output", metavar="OUT", help="Output file (default: stdout)")
    enc.add_argument("--raw", action="store_true", help="Omit the begin/end envelope")
    enc.add_argument("--name", help="File name for the begin line (default: input name)")
    enc.add_argument(
        "--mode", type=_octal, default=0o644, help="Octal file mode for the begin line"
    )

    dec = subparsers.add_parser("decode", help="Decode uuencoded text")
    dec.add_argument("file", nargs="?", help="Input file (default: stdin)")
    dec.add_argument("-o", "--output", metavar="OUT", help="Output file (default: stdout)")
    dec.add_argument("--raw", action="store_true", help="Input is a body without envelope")

    ana = subparsers.add_parser("analyze", help="Show line statistics of an encoded file")
    ana.add_argument("file", help="Encoded file to analyze")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the uulite CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "encode":
            data = _read_input(args.file)
            if args.raw:
                text = encode(data) + "\n" if data else ""
            else:
                name = args.name or (Path(args.file).name if args.file not in (None, "-") else "-")
                text = frame_file(data, name=name, mode=args.mode)
            logger.info("Encoded %d bytes", len(data))
            _write_output(text.encode("utf-8"), args.output)

        elif args.command == "decode":
            raw = _read_input(args.file)
            if args.raw:
                data = decode(raw)
            else:
                header, data = unframe_file(raw)
                logger.info("Decoded %r (mode %o)", header.name, header.mode)
            _write_output(data, args.output)

        elif args.command == "analyze":
            file_path = Path(args.file)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1
            analyze_file(file_path)

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        return 1
    except (UuliteError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
