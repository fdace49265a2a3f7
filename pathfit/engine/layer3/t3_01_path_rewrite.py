"""T3.01 — Path Rewrite.

Map every endpoint through the frozen mapper, force absolute positions and
close every path. The rewritten commands are serialized here too, so later
layers verify exactly the text that will be written.
"""

from __future__ import annotations

from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, transform
from pathfit.engine.rewriter import rewrite_commands
from pathfit.svg.path_data import format_path_data


@transform(
    id="T3.01",
    layer=Layer.REWRITE,
    dependencies=["T2.01"],
    description="Rescale commands into the target frame as absolute, closed paths",
)
def path_rewrite(ctx: NormalizeContext) -> None:
    if ctx.mapper is None:
        raise RuntimeError("T3.01 requires a finalized mapper")
    for path in ctx.paths:
        path.rewritten = rewrite_commands(path.commands or [], ctx.mapper)
        path.output_data = format_path_data(path.rewritten, ctx.config.precision)
