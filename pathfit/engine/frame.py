"""Output frame (viewBox) derivation."""

from __future__ import annotations

import math

from pathfit.engine.mapper import CoordinateMapper


def round_half_away(value: float) -> int:
    """Nearest integer, ties away from zero (``round`` would pick the even one)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def derive_viewbox(
    mapper: CoordinateMapper,
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int, int, int]:
    """Caller dimensions verbatim when both are given, else the rounded target size."""
    if width is not None and height is not None:
        return (0, 0, int(width), int(height))
    return (
        0,
        0,
        round_half_away(mapper.target_x_length),
        round_half_away(mapper.target_y_length),
    )
