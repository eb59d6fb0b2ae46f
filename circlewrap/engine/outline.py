"""Smooth wrap outline built from the resolved hull.

The hull alone is a polygon of tangent points. Where two consecutive hull
vertices lie on the same circle, the real wrap follows that circle's arc
between them; between different circles it is the straight tangent.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from shapely.geometry import LineString, Polygon

from circlewrap.engine.primitives import Circle, CircleId, Point, TangentPoint
from circlewrap.utils.geometry import sample_arc, winding_direction

TWO_PI = 2.0 * math.pi


def circle_outline(circle: Circle, arc_resolution: int) -> list[Point]:
    """The full circle as a closed ring of ``arc_resolution`` points."""
    return sample_arc(circle.center, circle.radius, 0.0, TWO_PI, arc_resolution)[:-1]


def trace_outline(
    vertices: Sequence[TangentPoint],
    circles: Mapping[CircleId, Circle],
    arc_resolution: int = 128,
) -> list[Point]:
    """Walk the hull and replace same-circle edges with sampled arcs.

    Arcs sweep in the hull's own winding direction. Each vertex appears
    once; an arc contributes its interior samples after its start vertex.
    """
    if len(vertices) < 3:
        return [v.xy for v in vertices]

    direction = winding_direction([v.xy for v in vertices]) or 1
    outline: list[Point] = []

    for i, current in enumerate(vertices):
        nxt = vertices[(i + 1) % len(vertices)]
        outline.append(current.xy)
        if current.circle_id != nxt.circle_id:
            continue

        circle = circles[current.circle_id]
        start = math.atan2(current.y - circle.y, current.x - circle.x)
        end = math.atan2(nxt.y - circle.y, nxt.x - circle.x)
        sweep = direction * ((direction * (end - start)) % TWO_PI)
        arc = sample_arc(circle.center, circle.radius, start, sweep, arc_resolution)
        outline.extend(arc[1:-1])

    return outline


def outline_metrics(outline: Sequence[Point]) -> tuple[float, float]:
    """(area, perimeter) of the outline ring."""
    if len(outline) >= 3:
        poly = Polygon(outline)
        return float(poly.area), float(poly.length)
    if len(outline) == 2:
        return 0.0, float(LineString(outline).length)
    return 0.0, 0.0
