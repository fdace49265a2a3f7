"""T2.01 — Mapper Finalization.

Single transition from the accumulating extent to the frozen mapper.
Fails with a geometry error when the document cannot be sized.
"""

from __future__ import annotations

import logging

from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T2.01",
    layer=Layer.FINALIZE,
    dependencies=["T1.01"],
    description="Validate the extent and freeze it into a coordinate mapper",
)
def mapper_finalize(ctx: NormalizeContext) -> None:
    ctx.mapper = ctx.extent.finalize(ctx.config.target_width, ctx.config.target_height)
    sx, sy = ctx.mapper.scale
    logger.info(
        "Extent %.6g x %.6g -> target %.6g x %.6g (scale %.6g, %.6g)",
        ctx.mapper.x_length,
        ctx.mapper.y_length,
        ctx.mapper.target_x_length,
        ctx.mapper.target_y_length,
        sx,
        sy,
    )
