"""Extent — running bounding box over every command of every path in a document.

The extent is write-only: it has no mapping operation of its own.
``finalize`` validates it once and hands back a ``CoordinateMapper``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from pathfit.engine.mapper import CoordinateMapper
from pathfit.errors import DegenerateGeometryError, InvalidGeometryError
from pathfit.svg.path_data import ClosePath, Command, LineTo, MoveTo, Position

logger = logging.getLogger(__name__)


class Extent:
    """Accumulating bounding box of absolute move/line endpoints."""

    def __init__(self) -> None:
        self.x_min = float("inf")
        self.x_max = float("-inf")
        self.y_min = float("inf")
        self.y_max = float("-inf")
        self.all_absolute = True
        self.point_count = 0
        self.relative_count = 0
        self._sealed = False

    def __repr__(self) -> str:
        return (
            f"Extent(x=[{self.x_min}, {self.x_max}], y=[{self.y_min}, {self.y_max}], "
            f"points={self.point_count}, all_absolute={self.all_absolute})"
        )

    @property
    def is_empty(self) -> bool:
        return self.point_count == 0

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        """(xmin, ymin, xmax, ymax), or None before any point is observed."""
        if self.is_empty:
            return None
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    def observe(self, command: Command) -> None:
        if self._sealed:
            raise RuntimeError("extent is finalized; no further commands may be observed")

        if isinstance(command, (MoveTo, LineTo)):
            if command.position is Position.RELATIVE:
                # Relative points are not comparable to the absolute frame.
                self.all_absolute = False
                self.relative_count += 1
                return
            x, y = command.point
            self.x_min = min(self.x_min, x)
            self.x_max = max(self.x_max, x)
            self.y_min = min(self.y_min, y)
            self.y_max = max(self.y_max, y)
            self.point_count += 1
        elif isinstance(command, ClosePath):
            return

    def observe_all(self, commands: Iterable[Command]) -> None:
        for command in commands:
            self.observe(command)

    def finalize(
        self,
        target_width: float | None = None,
        target_height: float | None = None,
    ) -> CoordinateMapper:
        """Validate the extent and freeze it into a mapper.

        Target lengths default to the source lengths (identity scale).
        """
        if not self.all_absolute:
            raise InvalidGeometryError(
                f"cannot get size: {self.relative_count} relative command(s) in document"
            )
        if self.is_empty:
            raise InvalidGeometryError("cannot get size: no absolute point in document")

        x_length = self.x_max - self.x_min
        y_length = self.y_max - self.y_min
        if not (math.isfinite(x_length) and math.isfinite(y_length)):
            raise DegenerateGeometryError(
                f"cannot get size: extent is {x_length} x {y_length}, too large to scale"
            )
        if x_length == 0 or y_length == 0:
            raise DegenerateGeometryError(
                f"cannot get size: extent is {x_length} x {y_length}, scale is undefined"
            )

        for name, value in (("width", target_width), ("height", target_height)):
            if value is not None and value <= 0:
                raise ValueError(f"target {name} must be positive, got {value}")

        mapper = CoordinateMapper(
            x_min=self.x_min,
            y_min=self.y_min,
            x_length=x_length,
            y_length=y_length,
            target_x_length=float(target_width) if target_width is not None else x_length,
            target_y_length=float(target_height) if target_height is not None else y_length,
        )
        self._sealed = True
        logger.debug("Finalized %r -> %s", self, mapper)
        return mapper
