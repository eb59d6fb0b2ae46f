"""Circle-in-polygon check used to decide whether a circle joins a hull."""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import ArrayLike

from circlewrap.engine.primitives import Circle, Point
from circlewrap.utils.geometry import point_in_polygon, polygon_edges, segment_intersects_circle


@dataclass(frozen=True)
class ContainmentResult:
    contained: bool
    # First polygon edge that cuts into the circle, if any
    edge: tuple[Point, Point] | None = None


def check_containment(circle: Circle, polygon: ArrayLike) -> ContainmentResult:
    """A circle is contained when its center is inside and no edge cuts it."""
    for p, q in polygon_edges(polygon):
        if segment_intersects_circle(p, q, circle.center, circle.radius):
            return ContainmentResult(contained=False, edge=(p, q))
    return ContainmentResult(contained=point_in_polygon(circle.center, polygon))
