"""Write SVG output from an assembled SvgDocument."""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from pathfit.models.svg_document import SvgDocument


def serialize_svg(document: SvgDocument) -> str:
    """Generate SVG markup for the document."""
    viewbox = " ".join(str(v) for v in document.viewbox)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{viewbox}" xmlns="http://www.w3.org/2000/svg">',
    ]

    for elem in document.elements:
        attr_str = " ".join(f"{k}={quoteattr(v)}" for k, v in elem.attributes.items())
        lines.append(f"  <{elem.tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines) + "\n"
