"""SVG parser — document text → NormalizeContext with one PathElement per ``<path>``.

Only the root ``<svg>`` and ``<path>`` elements matter; every other element is
skipped. Path data itself is parsed later, by T0.01.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from pathfit.engine.context import NormalizeContext, PathElement
from pathfit.errors import ParseError

logger = logging.getLogger(__name__)


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def parse_svg(svg_text: str) -> NormalizeContext:
    """Parse raw SVG string into a NormalizeContext."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise ParseError(f"malformed SVG document: {e}") from e

    if strip_ns(root.tag) != "svg":
        raise ParseError(f"root element is <{strip_ns(root.tag)}>, expected <svg>")

    ctx = NormalizeContext()

    for element in root.iter():
        if element is root or not isinstance(element.tag, str):
            continue
        tag = strip_ns(element.tag)
        if tag != "path":
            ctx.skipped_tags.append(tag)
            continue

        number = len(ctx.paths) + 1
        data = element.get("d")
        if data is None:
            raise ParseError(f"path element #{number} has no 'd' attribute")

        ctx.paths.append(PathElement(id=element.get("id") or f"P{number}", data=data))

    if ctx.skipped_tags:
        logger.debug("Skipped %d non-path element(s): %s", len(ctx.skipped_tags), sorted(set(ctx.skipped_tags)))
    logger.info("Parsed SVG: %d path(s)", ctx.num_paths)
    return ctx
