"""T4.01 — Output Bounds Verification.

Re-parse every emitted path with svgpathtools and check that the drawn
geometry stays inside the target frame. Records the combined bbox.
"""

from __future__ import annotations

import logging

import numpy as np
from svgpathtools import parse_path

from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, transform
from pathfit.errors import GeometryError
from pathfit.svg.path_data import MoveTo

logger = logging.getLogger(__name__)


@transform(
    id="T4.01",
    layer=Layer.VALIDATION,
    dependencies=["T3.01", "T3.02"],
    description="Verify emitted coordinates lie inside the target frame",
)
def output_bounds(ctx: NormalizeContext) -> None:
    if ctx.mapper is None:
        raise RuntimeError("T4.01 requires a finalized mapper")

    boxes: list[tuple[float, float, float, float]] = []
    for path in ctx.paths:
        if not any(isinstance(c, MoveTo) for c in path.rewritten or []):
            continue
        parsed = parse_path(path.output_data or "")
        if len(parsed) == 0:
            continue
        boxes.append(parsed.bbox())

    if not boxes:
        logger.debug("No drawn segments to verify")
        return

    arr = np.array(boxes)
    bbox = (
        float(arr[:, 0].min()),
        float(arr[:, 1].max()),
        float(arr[:, 2].min()),
        float(arr[:, 3].max()),
    )
    ctx.output_bbox = bbox

    # Rounding at serialization can move a coordinate by half a unit in the last place.
    tol = ctx.config.bounds_tolerance
    if ctx.config.precision is not None:
        tol = max(tol, 0.5 * 10 ** -ctx.config.precision)

    width, height = ctx.mapper.target_size
    xmin, xmax, ymin, ymax = bbox
    if xmin < -tol or ymin < -tol or xmax > width + tol or ymax > height + tol:
        raise GeometryError(
            f"emitted geometry {bbox} exceeds target frame {width} x {height}"
        )
    logger.debug("Output bbox %s within %s x %s", bbox, width, height)
