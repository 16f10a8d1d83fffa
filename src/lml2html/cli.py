"""Command-line interface for lml2html.

Usage::

    lml2html input.lml                   # writes input.html
    lml2html input.lml -o output.html    # explicit output path
    lml2html - < input.lml               # stdin to stdout
    lml2html --list-boxes                # list built-in box types
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from lml2html import __version__
from lml2html.converter import Converter


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lml2html",
        description="Convert Lake Markup Language (LML) documents to HTML.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Path to the LML file to convert, or '-' for stdin.",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output HTML file path. Defaults to <input>.html (stdout for stdin).",
    )
    parser.add_argument(
        "-e", "--encoding",
        default="utf-8",
        help="Input file encoding (default: %(default)s).",
    )
    parser.add_argument(
        "--list-boxes",
        action="store_true",
        help="List built-in box types and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress information.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_boxes:
        print("Built-in box types:")
        for box_type in Converter.BOX_TYPES:
            print(f"  - {box_type}")
        return 0

    if not args.input:
        parser.error("the following argument is required: input")

    converter = Converter()

    if args.input == "-":
        html = converter.convert_text(sys.stdin.read())
        if args.output:
            Path(args.output).write_text(html, encoding="utf-8")
        else:
            sys.stdout.write(html)
        return 0

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: file not found: {input_path}", file=sys.stderr)
        return 1

    # Determine output path
    if args.output:
        output_path = Path(args.output)
    else:
        output_path = input_path.with_suffix(".html")

    if args.verbose:
        print(f"Input:  {input_path}")
        print(f"Output: {output_path}")

    try:
        converter.convert_file(input_path, output_path, encoding=args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Done. {output_path.stat().st_size} bytes written.")
    else:
        print(f"Converted: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
