"""NormalizeContext — the single mutable state object flowing through all transforms.

Per-path results → PathElement
Document-wide results → NormalizeContext.* (extent, mapper, viewbox, etc.)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pathfit.engine.config import PipelineConfig
from pathfit.engine.extent import Extent
from pathfit.engine.mapper import CoordinateMapper
from pathfit.svg.path_data import Command


@dataclass
class PathElement:
    """One ``<path>`` element extracted from the SVG."""

    id: str
    # Raw ``d`` attribute text
    data: str
    # Parsed once by T0.01, traversed by the extent and rewrite passes
    commands: list[Command] | None = None
    # Output of T3.01
    rewritten: list[Command] | None = None
    # Serialized ``rewritten``, as written to the output document
    output_data: str | None = None


@dataclass
class NormalizeContext:
    """Shared state flowing through the entire pipeline."""

    # Parsed path elements in document order
    paths: list[PathElement] = field(default_factory=list)
    # Tags of elements that are neither the root nor a path
    skipped_tags: list[str] = field(default_factory=list)

    # Run configuration, installed by Pipeline.run
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Geometry state ---
    extent: Extent = field(default_factory=Extent)
    mapper: CoordinateMapper | None = None

    # --- Output ---
    viewbox: tuple[int, int, int, int] | None = None
    # Combined (xmin, xmax, ymin, ymax) of the emitted paths
    output_bbox: tuple[float, float, float, float] | None = None

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)

    @property
    def num_paths(self) -> int:
        return len(self.paths)
