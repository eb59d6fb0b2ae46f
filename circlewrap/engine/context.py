"""WrapContext — the per-call state produced by one pipeline run.

Nothing here outlives the call: circles in, resolved hull and outline out.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from circlewrap.engine.collector import PointRegistry
from circlewrap.engine.primitives import Circle, CircleId, Point, TangentPoint


@dataclass
class WrapContext:
    """Shared state flowing through the wrap stages."""

    circles: list[Circle] = field(default_factory=list)

    # --- Enclosure filter ---
    surviving: list[Circle] = field(default_factory=list)
    enclosed_ids: list[CircleId] = field(default_factory=list)

    # --- Tangent collection ---
    points: list[Point] = field(default_factory=list)
    registry: PointRegistry = field(default_factory=PointRegistry)
    degenerate_pairs: list[tuple[CircleId, CircleId]] = field(default_factory=list)
    tangent_count: int = 0

    # --- Hull ---
    hull: list[Point] = field(default_factory=list)
    vertices: list[TangentPoint] = field(default_factory=list)

    # --- Outline ---
    outline: list[Point] = field(default_factory=list)
    area: float = 0.0
    perimeter: float = 0.0

    # --- Pipeline metadata ---
    timings_ms: dict[str, float] = field(default_factory=dict)

    @property
    def circles_by_id(self) -> dict[CircleId, Circle]:
        return {c.id: c for c in self.circles}

    @property
    def is_degenerate(self) -> bool:
        """True when the hull is a point, a segment or empty."""
        return len(self.hull) < 3
