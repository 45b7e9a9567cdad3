"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample SVGs

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>

  <circle cx="8" cy="9" r="1"/>

  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

MINIMAL_SVG = '<svg viewBox="0 0 24 24"><path stroke-width="2" fill-rule="evenodd"/></svg>'

# Inkscape-style export: XML prolog, xlink, class, single quotes, CRLF
GRADIENT_SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>\r\n'
    "<svg xmlns='http://www.w3.org/2000/svg' xmlns:xlink=\"http://www.w3.org/1999/xlink\""
    ' xml:space="preserve" class="icon" viewBox="0 0 32 32">\r\n'
    "  <defs>\r\n"
    '    <linearGradient id="g">\r\n'
    '      <stop offset="0" stop-color="#fff" stop-opacity="0.5"/>\r\n'
    "    </linearGradient>\r\n"
    "  </defs>\r\n"
    "\r\n"
    '  <use xlink:href="#shape" clip-path="url(#c)" data-custom-value="7"/>\r\n'
    "</svg>\r\n"
)


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def smiley_svg() -> str:
    return SMILEY_SVG


@pytest.fixture
def minimal_svg() -> str:
    return MINIMAL_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture
def svg_file(tmp_path, circle_svg):
    path = tmp_path / "circle.svg"
    path.write_text(circle_svg, encoding="utf-8")
    return path
