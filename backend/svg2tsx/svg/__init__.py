"""SVG → TSX conversion core."""

from svg2tsx.svg.attr_names import SVG_TO_REACT_ATTRS, kebab_to_camel, map_attribute_name
from svg2tsx.svg.parser import parse_attributes
from svg2tsx.svg.serializer import convert_svg, svg_to_tsx, transform_body

__all__ = [
    "SVG_TO_REACT_ATTRS",
    "kebab_to_camel",
    "map_attribute_name",
    "parse_attributes",
    "convert_svg",
    "svg_to_tsx",
    "transform_body",
]
