"""T0.01 — Command Stream.

Parse every path's ``d`` data exactly once. The parsed commands are cached
on the PathElement and traversed by both the extent and the rewrite passes,
so a malformed or unsupported command surfaces here and only here.
"""

from __future__ import annotations

import logging

from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, transform
from pathfit.svg.path_data import parse_path_data

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    layer=Layer.PARSING,
    description="Parse path data into typed move/line/close commands",
)
def command_stream(ctx: NormalizeContext) -> None:
    for path in ctx.paths:
        path.commands = parse_path_data(path.data)
        logger.debug("%s: %d command(s)", path.id, len(path.commands))
