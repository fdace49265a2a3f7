"""T3.02 — Frame Derivation.

Output viewBox: caller dimensions when both are given, else the rounded target size.
"""

from __future__ import annotations

from pathfit.engine.context import NormalizeContext
from pathfit.engine.frame import derive_viewbox
from pathfit.engine.registry import Layer, transform


@transform(
    id="T3.02",
    layer=Layer.REWRITE,
    dependencies=["T2.01"],
    description="Derive the output viewBox",
)
def frame_derivation(ctx: NormalizeContext) -> None:
    if ctx.mapper is None:
        raise RuntimeError("T3.02 requires a finalized mapper")
    ctx.viewbox = derive_viewbox(ctx.mapper, ctx.config.target_width, ctx.config.target_height)
