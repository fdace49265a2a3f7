"""T1.01 — Extent Accumulation.

Fold every command of every path into the one document-wide extent.
A relative command anywhere taints the whole document but does not stop the scan.
"""

from __future__ import annotations

import logging

from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T1.01",
    layer=Layer.EXTENT,
    dependencies=["T0.01"],
    description="Accumulate the bounding box of absolute endpoints",
)
def extent_accumulation(ctx: NormalizeContext) -> None:
    for path in ctx.paths:
        ctx.extent.observe_all(path.commands or [])
    logger.debug("Extent bounds %s, all absolute: %s", ctx.extent.bounds, ctx.extent.all_absolute)
