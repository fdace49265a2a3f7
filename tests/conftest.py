"""Shared test fixtures."""

from __future__ import annotations

import pytest


SQUARE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 10">
  <path d="M0,0 L10,0 L10,10 L0,10 Z"/>
</svg>'''

# Two absolute paths; combined extent x 10..50, y 20..60
TWO_PATHS_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64">
  <path id="roof" d="M10 20 L30 20 L30 60 Z"/>
  <path d="M20,30 L50,40"/>
</svg>'''

# Second path has one relative line; taints the whole document
RELATIVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0,0 L10,0 L10,10 Z"/>
  <path d="M2,2 l5,5 L3,8 Z"/>
</svg>'''

CURVE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0,0 L10,0 C12,2 12,8 10,10 Z"/>
</svg>'''

# All points share x = 5
DEGENERATE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M5,0 L5,10 Z"/>
</svg>'''

# Non-path elements are skipped; the nested path still counts
MIXED_ELEMENTS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <title>mixed</title>
  <rect x="1" y="1" width="5" height="5"/>
  <g transform="translate(2 2)">
    <circle cx="12" cy="12" r="3"/>
    <path d="M0 0 L25 0 L25 15 L0 15 Z"/>
  </g>
</svg>'''

NO_D_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path fill="red"/>
</svg>'''

NO_PATHS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <circle cx="12" cy="12" r="10"/>
</svg>'''


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def two_paths_svg() -> str:
    return TWO_PATHS_SVG


@pytest.fixture
def relative_svg() -> str:
    return RELATIVE_SVG


@pytest.fixture
def write_svg_file(tmp_path):
    """Write SVG text to a temp file and return its path."""

    def _write(text: str, name: str = "input.svg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
