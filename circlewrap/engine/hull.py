"""Hull builder — convex hull of the tangent points, resolved to circles.

Qhull returns 2-D hull vertices counter-clockwise as indices into the
input array, so every vertex is an exact copy of an input coordinate and
can be looked up in the point registry without tolerance.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from scipy.spatial import ConvexHull, QhullError

from circlewrap.engine.collector import PointRegistry
from circlewrap.engine.errors import RegistryMismatchError
from circlewrap.engine.primitives import Point, TangentPoint

logger = logging.getLogger(__name__)


def build_hull(points: Sequence[Point]) -> list[Point]:
    """Convex hull vertices, counter-clockwise (y-up).

    Degenerate inputs give a degenerate polygon instead of an error: no
    points → ``[]``, one distinct point → ``[p]``, collinear points → the
    two extreme points.
    """
    distinct = list(dict.fromkeys((float(x), float(y)) for x, y in points))
    if len(distinct) < 3:
        return sorted(distinct)

    pts = np.asarray(distinct, dtype=np.float64)
    try:
        hull = ConvexHull(pts)
    except QhullError:
        # Flat input: collinear, or too thin for Qhull to build a simplex
        logger.debug("Qhull rejected %d points as flat, returning segment", len(distinct))
        ordered = sorted(distinct)
        return [ordered[0], ordered[-1]]

    return [distinct[i] for i in hull.vertices]


def resolve_hull(hull: Sequence[Point], registry: PointRegistry) -> list[TangentPoint]:
    """Map each hull vertex back to the TangentPoint that produced it.

    Raises RegistryMismatchError if a vertex is missing from the registry.
    """
    resolved: list[TangentPoint] = []
    for x, y in hull:
        tp = registry.get(x, y)
        if tp is None:
            raise RegistryMismatchError((x, y), registry.key(x, y))
        resolved.append(tp)
    return resolved
