"""CoordinateMapper — the frozen affine map from source extent to target frame."""

from __future__ import annotations

from dataclasses import dataclass

from pathfit.svg.path_data import Point


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps source points into ``[0, target_x_length] x [0, target_y_length]``.

    Only built by ``Extent.finalize``, which guarantees both source lengths
    are positive.
    """

    x_min: float
    y_min: float
    x_length: float
    y_length: float
    target_x_length: float
    target_y_length: float

    @property
    def scale(self) -> tuple[float, float]:
        return (
            self.target_x_length / self.x_length,
            self.target_y_length / self.y_length,
        )

    @property
    def target_size(self) -> tuple[float, float]:
        return (self.target_x_length, self.target_y_length)

    def map(self, point: Point) -> Point:
        sx = point.x - self.x_min
        sy = point.y - self.y_min
        return Point(
            sx / self.x_length * self.target_x_length,
            sy / self.y_length * self.target_y_length,
        )
