"""Tangent point collection — pairwise tangents into a deduplicated registry.

Every unordered pair of circles is solved once. Both endpoints of each
tangent are registered under a coordinate key; endpoints that come out
with the same key collapse into one hull candidate, and the registry is
how a hull vertex finds its way back to the circle that produced it.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from circlewrap.engine.errors import DegeneratePairError
from circlewrap.engine.primitives import Circle, CircleId, Point, TangentPoint
from circlewrap.engine.tangents import tangents

logger = logging.getLogger(__name__)


def coordinate_key(x: float, y: float, precision: int | None = None) -> str:
    """Canonical registry key for a coordinate.

    ``precision=None`` keys on the exact float (shortest round-trip repr),
    so only bit-identical coordinates collide. An integer precision keys on
    fixed-point text with that many decimals instead. ``-0.0`` is folded
    into ``0.0`` either way.
    """
    x += 0.0
    y += 0.0
    if precision is None:
        return f"{x!r},{y!r}"
    return f"{x:.{precision}f},{y:.{precision}f}"


class PointRegistry:
    """Coordinate key → TangentPoint, at most one point per key.

    Inserting at an existing key silently replaces the stored point; the
    key keeps its original position in iteration order.
    """

    def __init__(self, precision: int | None = None) -> None:
        self.precision = precision
        self._points: dict[str, TangentPoint] = {}

    def key(self, x: float, y: float) -> str:
        return coordinate_key(x, y, self.precision)

    def insert(self, point: TangentPoint) -> None:
        self._points[self.key(point.x, point.y)] = point

    def get(self, x: float, y: float) -> TangentPoint | None:
        return self._points.get(self.key(x, y))

    def points(self) -> list[Point]:
        """Stored coordinates, one per key, in first-seen order."""
        return [p.xy for p in self._points.values()]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TangentPoint]:
        return iter(self._points.values())


@dataclass
class CollectedPoints:
    """Output of the collector."""

    points: list[Point]
    registry: PointRegistry
    # Pairs skipped because their centers coincide
    degenerate_pairs: list[tuple[CircleId, CircleId]] = field(default_factory=list)
    tangent_count: int = 0


def collect_tangent_points(
    circles: Sequence[Circle],
    precision: int | None = None,
) -> CollectedPoints:
    """Solve every unordered pair and register all tangent endpoints.

    Pairs are visited in ``itertools.combinations`` order over ``circles``,
    so when two endpoints share a key the one from the later pair wins.
    """
    registry = PointRegistry(precision)
    degenerate: list[tuple[CircleId, CircleId]] = []
    n_tangents = 0

    for a, b in itertools.combinations(circles, 2):
        try:
            slots = tangents(a, b)
        except DegeneratePairError as e:
            logger.warning("Skipping degenerate pair: %s", e)
            degenerate.append((a.id, b.id))
            continue

        for tangent in slots:
            if tangent is None:
                continue
            registry.insert(tangent.a)
            registry.insert(tangent.b)
            n_tangents += 1

    logger.debug(
        "Collected %d tangents from %d circles → %d distinct points",
        n_tangents,
        len(circles),
        len(registry),
    )
    return CollectedPoints(
        points=registry.points(),
        registry=registry,
        degenerate_pairs=degenerate,
        tangent_count=n_tangents,
    )
