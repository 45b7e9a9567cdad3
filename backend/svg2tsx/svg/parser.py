"""SVG parser — regex extraction of the root tag, its attributes and its body.

This is deliberately not an XML parser: the first ``<svg ...>`` match wins and
the body is the shortest span up to ``</svg>``.
"""

from __future__ import annotations

import re

from svg2tsx.svg.attr_names import map_attribute_name

# Attribute text of the opening root tag
_ROOT_TAG_RE = re.compile(r"<svg([^>]*)>")
# Everything between the opening root tag and the first closing tag
_BODY_RE = re.compile(r"<svg[^>]*>([\s\S]*?)</svg>")
_ATTR_RE = re.compile(r"""([a-zA-Z0-9_:-]+)\s*=\s*("[^"]*"|'[^']*')""")


def extract_root_attr_text(svg_text: str) -> str:
    """Text between ``<svg`` and the closing ``>`` of the root tag, or ``""``."""
    match = _ROOT_TAG_RE.search(svg_text)
    return match.group(1) if match else ""


def extract_body(svg_text: str) -> str:
    """Inner markup of the root element, or ``""`` when it can't be located."""
    match = _BODY_RE.search(svg_text)
    return match.group(1) if match else ""


def parse_attributes(attr_text: str) -> dict[str, str]:
    """Parse ``name="value"`` pairs into ``{reactName: quotedValue}``.

    Values keep their original quote characters. When two source names map to
    the same React name, the later one wins.
    """
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(attr_text):
        attrs[map_attribute_name(m.group(1))] = m.group(2)
    return attrs
