"""Write a React/TypeScript component from raw SVG markup."""

from __future__ import annotations

import logging
import re

from svg2tsx.models.tsx_document import TsxDocument
from svg2tsx.svg.attr_names import SVG_TO_REACT_ATTRS, kebab_to_camel
from svg2tsx.svg.parser import extract_body, extract_root_attr_text, parse_attributes

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

_INDENT = "    "

# Attribute names only match as whole tokens: at line start or after whitespace
_EXPLICIT_ATTR_RES = tuple(
    (re.compile(r"(?<!\S)" + re.escape(svg_name) + "="), react_name + "=")
    for svg_name, react_name in SVG_TO_REACT_ATTRS.items()
)
_KEBAB_ATTR_RE = re.compile(r"(?<!\S)([a-z]+-[a-z0-9-]+)=")


def root_attribute_lines(attrs: dict[str, str]) -> list[str]:
    """Lines that make up the opening ``<svg`` tag after its name."""
    lines = [f'{_INDENT}xmlns="{SVG_NAMESPACE}"']
    for name, value in attrs.items():
        if name != "xmlns":
            lines.append(f"{_INDENT}{name}={value}")
    lines.append(_INDENT + "{...props}")
    lines.append("  >")
    return lines


def emit_root_attributes(attr_text: str) -> list[str]:
    """Root tag lines for the raw attribute text of an ``<svg ...>`` tag."""
    return root_attribute_lines(parse_attributes(attr_text))


def convert_line_attributes(line: str) -> str:
    """Rename every SVG attribute on a single line of markup."""
    for pattern, replacement in _EXPLICIT_ATTR_RES:
        line = pattern.sub(replacement, line)
    return _KEBAB_ATTR_RE.sub(lambda m: kebab_to_camel(m.group(1)) + "=", line)


def transform_body_lines(body: str) -> list[str]:
    """Strip, drop blank lines and rename attributes in the root's inner markup."""
    return [
        convert_line_attributes(stripped)
        for stripped in (line.strip() for line in body.split("\n"))
        if stripped
    ]


def transform_body(body: str) -> str:
    return "\n".join(transform_body_lines(body))


def convert_svg(svg_text: str, component_name: str) -> TsxDocument:
    """Convert SVG markup into a memoized React function component.

    Malformed input never raises: a missing root tag yields no attributes and
    an empty body, so the component scaffolding is always produced.
    """
    root_attrs = parse_attributes(extract_root_attr_text(svg_text))
    body_lines = transform_body_lines(extract_body(svg_text))

    lines = [
        'import * as React from "react";',
        "",
        f"const {component_name}: React.FC<React.SVGProps<SVGElement>> = (props) => (",
        "  <svg",
    ]
    lines.extend(root_attribute_lines(root_attrs))
    lines.extend(_INDENT + line for line in body_lines)
    lines.extend([
        "  </svg>",
        ");",
        "",
        f"export default React.memo({component_name});",
    ])

    logger.debug(
        "Converted SVG to %s: %d root attributes, %d body lines",
        component_name,
        len(root_attrs),
        len(body_lines),
    )
    return TsxDocument(
        component_name=component_name,
        root_attributes=root_attrs,
        body_lines=body_lines,
        tsx="\n".join(lines) + "\n",
    )


def svg_to_tsx(svg_text: str, component_name: str) -> str:
    """Convert SVG markup to TSX source text."""
    return convert_svg(svg_text, component_name).tsx
