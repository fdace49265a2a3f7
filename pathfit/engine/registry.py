"""Transform registry — each pipeline step is a function registered via decorator.

Usage:
    @transform(id="T1.01", layer=Layer.EXTENT, dependencies=["T0.01"])
    def extent_accumulation(ctx: NormalizeContext) -> None:
        for path in ctx.paths:
            ctx.extent.observe_all(path.commands)

Layers are strict phases: a transform may depend on transforms of its own
layer or of earlier layers, never on a later one.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from pathfit.engine.context import NormalizeContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    PARSING = 0
    EXTENT = 1
    FINALIZE = 2
    REWRITE = 3
    VALIDATION = 4


@dataclass
class TransformSpec:
    id: str
    layer: Layer
    fn: Callable[["NormalizeContext"], None]
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Transforms grouped by layer."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (%s)", spec.id, spec.layer.name)

    def get_layer(self, layer: Layer) -> list[TransformSpec]:
        """Transforms of one layer, each after its same-layer dependencies."""
        pending = {s.id: s for s in self._transforms.values() if s.layer == layer}
        for spec in pending.values():
            for dep in spec.dependencies:
                dep_spec = self._transforms.get(dep)
                if dep_spec is None:
                    raise ValueError(f"{spec.id} depends on unknown transform {dep}")
                if dep_spec.layer > layer:
                    raise ValueError(
                        f"{spec.id} ({layer.name}) depends on {dep} from later layer {dep_spec.layer.name}"
                    )

        ordered: list[TransformSpec] = []
        while pending:
            ready = sorted(
                tid for tid, spec in pending.items()
                if not any(d in pending for d in spec.dependencies)
            )
            if not ready:
                raise ValueError(f"Circular dependency detected among: {set(pending)}")
            for tid in ready:
                ordered.append(pending.pop(tid))
        return ordered


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["NormalizeContext"], None]):
        _registry.register(
            TransformSpec(
                id=id,
                layer=layer,
                fn=fn,
                dependencies=dependencies or [],
                description=description,
            )
        )
        return fn

    return decorator
