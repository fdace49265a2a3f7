"""pathfit normalization engine."""

from pathfit.engine.registry import transform, Layer, get_registry
from pathfit.engine.context import NormalizeContext, PathElement
from pathfit.engine.extent import Extent
from pathfit.engine.mapper import CoordinateMapper
from pathfit.engine.pipeline import Pipeline, create_pipeline

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "NormalizeContext",
    "PathElement",
    "Extent",
    "CoordinateMapper",
    "Pipeline",
    "create_pipeline",
]
