"""Value types shared by every wrap stage. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Union

CircleId = Union[str, int]
Point = tuple[float, float]


@dataclass(frozen=True)
class Circle:
    """A disk in the plane. Identity is by ``id``."""

    id: CircleId
    center: Point
    radius: float

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in self.center):
            raise ValueError(f"Circle {self.id!r}: center must be finite, got {self.center!r}")
        if not (math.isfinite(self.radius) and self.radius >= 0):
            raise ValueError(
                f"Circle {self.id!r}: radius must be finite and >= 0, got {self.radius!r}"
            )

    @property
    def x(self) -> float:
        return self.center[0]

    @property
    def y(self) -> float:
        return self.center[1]


class TangentPoint(NamedTuple):
    """A tangency point on the boundary of circle ``circle_id``."""

    circle_id: CircleId
    x: float
    y: float

    @property
    def xy(self) -> Point:
        return (self.x, self.y)


class Tangent(NamedTuple):
    """One common tangent segment: ``a`` lies on circle A, ``b`` on circle B."""

    a: TangentPoint
    b: TangentPoint


def distance(p: Point, q: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(q[0] - p[0], q[1] - p[1])
