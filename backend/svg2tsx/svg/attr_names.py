"""SVG → React attribute name mapping.

One table serves both the root <svg> tag and the body markup, so the same
source attribute always comes out under the same JSX name.
"""

from __future__ import annotations

from types import MappingProxyType

# Well-known multi-word SVG/XML/XLink attributes and their JSX spelling
SVG_TO_REACT_ATTRS: MappingProxyType[str, str] = MappingProxyType({
    "class": "className",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "fill-opacity": "fillOpacity",
    "fill-rule": "fillRule",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-opacity": "strokeOpacity",
    "stroke-width": "strokeWidth",
    "text-anchor": "textAnchor",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-weight": "fontWeight",
    "xlink:href": "xlinkHref",
    "xml:space": "xmlSpace",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "color-interpolation": "colorInterpolation",
    "color-rendering": "colorRendering",
    "enable-background": "enableBackground",
    "dominant-baseline": "dominantBaseline",
    "shape-rendering": "shapeRendering",
    "text-decoration": "textDecoration",
    "vector-effect": "vectorEffect",
})


def kebab_to_camel(name: str) -> str:
    """Convert ``data-foo-bar`` to ``dataFooBar``.

    Empty segments (``a--b``) are dropped; only the first character of each
    later segment is uppercased, the rest is kept as written.
    """
    first, *rest = name.split("-")
    return first + "".join(part[:1].upper() + part[1:] for part in rest if part)


def map_attribute_name(name: str) -> str:
    """Return the React spelling of an SVG attribute name."""
    mapped = SVG_TO_REACT_ATTRS.get(name)
    if mapped is not None:
        return mapped
    # viewBox is already camelCase
    if name != "viewBox" and "-" in name:
        return kebab_to_camel(name)
    return name
