"""pathfit — fit SVG move/line paths into a fixed, absolute coordinate frame."""

from pathfit.errors import (
    DegenerateGeometryError,
    GeometryError,
    InvalidGeometryError,
    IoError,
    MissingOperandError,
    ParseError,
    PathFitError,
    UnsupportedCommandError,
)
from pathfit.normalize import normalize_svg

__version__ = "0.1.0"

__all__ = [
    "normalize_svg",
    "PathFitError",
    "IoError",
    "ParseError",
    "MissingOperandError",
    "UnsupportedCommandError",
    "GeometryError",
    "InvalidGeometryError",
    "DegenerateGeometryError",
]
