"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def as_points(points: ArrayLike) -> NDArray[np.float64]:
    """Coerce a point sequence into an Nx2 float array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def signed_area(points: ArrayLike) -> float:
    """Shoelace formula for signed area of a closed ring. Positive = CCW (y-up)."""
    pts = as_points(points)
    if len(pts) < 3:
        return 0.0
    x = pts[:, 0]
    y = pts[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: ArrayLike) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def point_in_polygon(point: tuple[float, float], polygon: ArrayLike) -> bool:
    """Even-odd ray casting: cast a ray towards +x and count edge crossings.

    The polygon is an implicitly closed ring (last vertex joins the first).
    """
    pts = as_points(polygon)
    n = len(pts)
    if n < 3:
        return False

    px, py = point
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = pts[i]
        xj, yj = pts[j]
        if (yi > py) != (yj > py):
            x_cross = (xj - xi) * (py - yi) / (yj - yi) + xi
            if px < x_cross:
                inside = not inside
        j = i
    return inside


def closest_point_on_segment(
    point: tuple[float, float],
    p: tuple[float, float],
    q: tuple[float, float],
) -> tuple[float, float]:
    """Closest point to ``point`` on segment pq."""
    px, py = p
    dx = q[0] - px
    dy = q[1] - py
    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return (px, py)
    t = ((point[0] - px) * dx + (point[1] - py) * dy) / length_sq
    t = min(1.0, max(0.0, t))
    return (px + t * dx, py + t * dy)


def segment_intersects_circle(
    p: tuple[float, float],
    q: tuple[float, float],
    center: tuple[float, float],
    radius: float,
) -> bool:
    """True if segment pq passes strictly inside the circle.

    A segment that only grazes the boundary does not count.
    """
    cx, cy = closest_point_on_segment(center, p, q)
    return (cx - center[0]) ** 2 + (cy - center[1]) ** 2 < radius * radius


def polygon_edges(
    polygon: ArrayLike,
) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """Edges of an implicitly closed ring as (start, end) pairs."""
    pts = as_points(polygon)
    n = len(pts)
    if n < 2:
        return []
    ring = [(float(x), float(y)) for x, y in pts]
    if n == 2:
        return [(ring[0], ring[1])]
    return [(ring[i], ring[(i + 1) % n]) for i in range(n)]


def sample_arc(
    center: tuple[float, float],
    radius: float,
    start_angle: float,
    sweep: float,
    samples: int,
) -> list[tuple[float, float]]:
    """``samples + 1`` points from ``start_angle`` through ``start_angle + sweep``."""
    angles = start_angle + sweep * np.linspace(0.0, 1.0, samples + 1)
    xs = center[0] + radius * np.cos(angles)
    ys = center[1] + radius * np.sin(angles)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]
