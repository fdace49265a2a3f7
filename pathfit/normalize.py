"""High-level entry points: SVG text in, normalized SVG text out."""

from __future__ import annotations

from pathfit.engine.config import PipelineConfig
from pathfit.engine.context import NormalizeContext
from pathfit.engine.pipeline import create_pipeline
from pathfit.models.svg_document import SvgDocument, SvgElement
from pathfit.svg.parser import parse_svg
from pathfit.svg.serializer import serialize_svg

# Fixed fill style for every emitted path; part of the output format.
PATH_STYLE = "stroke:none;fill-rule:nonzero;fill:rgb(0, 0, 0);fill-opacity:1;"


def build_document(ctx: NormalizeContext) -> SvgDocument:
    """Assemble the output document from a fully processed context."""
    if ctx.viewbox is None:
        raise RuntimeError("context has no viewBox; run the pipeline first")
    elements = [
        SvgElement(tag="path", attributes={"d": path.output_data or "", "style": PATH_STYLE})
        for path in ctx.paths
    ]
    return SvgDocument(viewbox=ctx.viewbox, elements=elements)


def normalize_context(svg_text: str, config: PipelineConfig | None = None) -> NormalizeContext:
    """Parse and run the full pipeline, returning the processed context."""
    ctx = parse_svg(svg_text)
    return create_pipeline(config).run(ctx)


def normalize_svg(
    svg_text: str,
    width: int | None = None,
    height: int | None = None,
    precision: int | None = None,
) -> str:
    """Rescale every path of ``svg_text`` into a ``width`` x ``height`` frame.

    Raises a ``PathFitError`` subclass on any invalid input; nothing is
    returned for a partially processed document.
    """
    config = PipelineConfig(target_width=width, target_height=height, precision=precision)
    ctx = normalize_context(svg_text, config)
    return serialize_svg(build_document(ctx))
