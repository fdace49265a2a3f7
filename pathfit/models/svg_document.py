"""Output SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str = "path"
    attributes: dict[str, str] = Field(default_factory=dict)


class SvgDocument(BaseModel):
    """The normalized document handed to the serializer."""

    viewbox: tuple[int, int, int, int] = (0, 0, 0, 0)
    elements: list[SvgElement] = Field(default_factory=list)
