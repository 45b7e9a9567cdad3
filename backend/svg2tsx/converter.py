"""File-level conversion: read SVG files, write TSX components."""

from __future__ import annotations

import logging
from pathlib import Path

from svg2tsx.config import settings
from svg2tsx.svg.serializer import svg_to_tsx

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Reading the SVG or writing the TSX file failed."""


def default_output_path(input_path: str | Path, extension: str | None = None) -> Path:
    """Input base name with its extension swapped, relative to the working directory.

    Everything from the last dot of the base name is the extension, so a
    dot-named file like `.svg` becomes `.tsx`.
    """
    base = Path(input_path).name
    dot = base.rfind(".")
    stem = base[:dot] if dot != -1 else base
    return Path(stem + (extension or settings.output_extension))


def convert_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
    component_name: str | None = None,
) -> Path:
    """Convert one SVG file and return the path of the written component.

    Bytes that are not valid UTF-8 (Latin-1 exports, stray binary data) are
    carried through to the output unchanged.
    """
    input_path = Path(input_path)
    output_path = Path(output_path) if output_path else default_output_path(input_path)
    name = component_name or settings.default_component_name

    try:
        svg_text = input_path.read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise ConversionError(f"Error reading input file: {e}") from e

    tsx = svg_to_tsx(svg_text, name)

    try:
        output_path.write_text(tsx, encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise ConversionError(f"Error writing output file: {e}") from e

    logger.info("Wrote %s (%s) from %s", output_path, name, input_path)
    return output_path


def convert_directory(
    input_dir: str | Path,
    output_dir: str | Path | None = None,
    component_name: str | None = None,
) -> list[Path]:
    """Convert every ``.svg`` file in a folder; returns the written paths."""
    input_dir = Path(input_dir)
    svg_files = sorted(p for p in input_dir.iterdir() if p.suffix.lower() == ".svg")
    if not svg_files:
        raise ConversionError(f"No .svg files found in {input_dir}")

    if output_dir:
        out_dir = Path(output_dir)
    else:
        resolved = input_dir.resolve()
        out_dir = resolved.with_name(resolved.name + "_tsx")
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConversionError(f"Error creating output folder: {e}") from e

    written = []
    for svg_path in svg_files:
        target = out_dir / default_output_path(svg_path)
        written.append(convert_file(svg_path, target, component_name))

    logger.info("Converted %d files into %s", len(written), out_dir)
    return written
