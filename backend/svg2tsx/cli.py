"""Command-line entry point.

Usage:
  svg2tsx -input icon.svg                          # writes icon.tsx, component SvgIcon
  svg2tsx -input icon.svg -output Icon.tsx -name Icon
  svg2tsx -input icons/ -output components/        # batch convert a folder
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from svg2tsx.config import settings
from svg2tsx.converter import ConversionError, convert_directory, convert_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svg2tsx", description="Convert an SVG file to a React TSX component")
    parser.add_argument("-input", "--input", dest="input", help="Input SVG file path (or folder of SVGs)")
    parser.add_argument("-output", "--output", dest="output", help="Output TSX file path (or folder)")
    parser.add_argument(
        "-name", "--name",
        dest="name",
        default=settings.default_component_name,
        help="React component name",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        level=getattr(logging, settings.svg2tsx_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.input:
        print("Error: Please provide an input file with -input flag")
        parser.print_help()
        return 1

    try:
        if Path(args.input).is_dir():
            written = convert_directory(args.input, args.output, args.name)
            print(f"Successfully converted {len(written)} files from {args.input}")
        else:
            output = convert_file(args.input, args.output, args.name)
            print(f"Successfully converted {args.input} to {output}")
    except ConversionError as e:
        print(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
