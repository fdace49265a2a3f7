"""Pipeline orchestrator — runs transforms in dependency order, failing fast."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from pathfit.engine.config import PipelineConfig
from pathfit.engine.context import NormalizeContext
from pathfit.engine.registry import Layer, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

_LAYER_PACKAGES = ["layer0", "layer1", "layer2", "layer3", "layer4"]


class Pipeline:
    """Orchestrates the normalization pipeline.

    Unlike an analysis pipeline, nothing here is best-effort: the first
    failing transform aborts the run and its exception propagates.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: NormalizeContext) -> NormalizeContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ctx.config = self.config

        logger.info("Pipeline: %d path(s)", ctx.num_paths)

        for layer in Layer:
            self.run_layer(ctx, layer)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d transforms in %.0fms",
            len(ctx.completed_transforms),
            total,
        )
        return ctx

    def run_layer(self, ctx: NormalizeContext, layer: Layer) -> NormalizeContext:
        """Run the transforms of one layer; phases run in Layer order."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_one(ctx, spec)
        return ctx

    def _run_one(self, ctx: NormalizeContext, spec) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            logger.debug("  %s FAILED: %s", spec.id, e)
            raise
        ctx.completed_transforms.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.1fms", spec.id, elapsed)


def register_transforms() -> None:
    """Import all transform modules so @transform decorators fire."""
    for layer_name in _LAYER_PACKAGES:
        package = importlib.import_module(f"pathfit.engine.{layer_name}")
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package.__name__}.{module_name}")


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline over the built-in transforms."""
    register_transforms()
    return Pipeline(config=config)
