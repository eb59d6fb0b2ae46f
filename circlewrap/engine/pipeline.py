"""Pipeline orchestrator — enclosure filter → tangent collection → hull → outline."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

from circlewrap.engine.collector import collect_tangent_points
from circlewrap.engine.config import WrapConfig
from circlewrap.engine.context import WrapContext
from circlewrap.engine.enclosure import filter_non_enclosed
from circlewrap.engine.errors import CircleRecordError
from circlewrap.engine.hull import build_hull, resolve_hull
from circlewrap.engine.outline import circle_outline, outline_metrics, trace_outline
from circlewrap.engine.primitives import Circle, TangentPoint

logger = logging.getLogger(__name__)


class WrapPipeline:
    """Runs the wrap stages in order on one static circle set."""

    def __init__(self, config: WrapConfig | None = None) -> None:
        self.config = config or WrapConfig()

    def run(self, circles: Sequence[Circle]) -> WrapContext:
        """Wrap ``circles`` and return the populated context.

        Raises CircleRecordError on duplicate ids. RegistryMismatchError
        from hull resolution is never caught here.
        """
        _check_unique_ids(circles)

        start = time.perf_counter()
        ctx = WrapContext(circles=list(circles))

        stages: list[tuple[str, Callable[[WrapContext], None]]] = [
            ("enclosure", self._filter),
            ("tangents", self._collect),
            ("hull", self._hull),
            ("outline", self._outline),
        ]
        for name, stage in stages:
            t0 = time.perf_counter()
            stage(ctx)
            elapsed = (time.perf_counter() - t0) * 1000
            ctx.timings_ms[name] = elapsed
            logger.debug("  %s completed in %.1fms", name, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Wrap complete: %d circles (%d enclosed), %d points, %d hull vertices in %.1fms",
            len(ctx.circles),
            len(ctx.enclosed_ids),
            len(ctx.points),
            len(ctx.vertices),
            total,
        )
        return ctx

    def _filter(self, ctx: WrapContext) -> None:
        if self.config.filter_enclosed:
            ctx.surviving = filter_non_enclosed(ctx.circles)
        else:
            ctx.surviving = list(ctx.circles)
        kept = {c.id for c in ctx.surviving}
        ctx.enclosed_ids = [c.id for c in ctx.circles if c.id not in kept]

    def _collect(self, ctx: WrapContext) -> None:
        collected = collect_tangent_points(ctx.surviving, self.config.key_precision)
        ctx.points = collected.points
        ctx.registry = collected.registry
        ctx.degenerate_pairs = collected.degenerate_pairs
        ctx.tangent_count = collected.tangent_count

    def _hull(self, ctx: WrapContext) -> None:
        ctx.hull = build_hull(ctx.points)
        ctx.vertices = resolve_hull(ctx.hull, ctx.registry)

    def _outline(self, ctx: WrapContext) -> None:
        if len(ctx.surviving) == 1:
            ctx.outline = circle_outline(ctx.surviving[0], self.config.arc_resolution)
        else:
            ctx.outline = trace_outline(ctx.vertices, ctx.circles_by_id, self.config.arc_resolution)
        ctx.area, ctx.perimeter = outline_metrics(ctx.outline)


def _check_unique_ids(circles: Sequence[Circle]) -> None:
    seen: set = set()
    errors = []
    for i, circle in enumerate(circles):
        if circle.id in seen:
            errors.append({"loc": ("circles", i, "id"), "msg": f"Duplicate circle id {circle.id!r}"})
        seen.add(circle.id)
    if errors:
        raise CircleRecordError(errors)


def wrap_circles(
    circles: Sequence[Circle],
    config: WrapConfig | None = None,
) -> list[TangentPoint]:
    """Single-call entry point: the hull vertices, each tagged with its circle."""
    return WrapPipeline(config).run(circles).vertices
