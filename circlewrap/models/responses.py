"""API response models."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

from circlewrap.engine.context import WrapContext

CircleIdOut = Union[int, str]


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class HullVertex(BaseModel):
    circle_id: CircleIdOut
    x: float
    y: float


class WrapResponse(BaseModel):
    vertices: list[HullVertex] = Field(default_factory=list)
    outline: list[tuple[float, float]] = Field(default_factory=list)
    area: float = 0.0
    perimeter: float = 0.0
    circles_used: list[CircleIdOut] = Field(default_factory=list)
    circles_enclosed: list[CircleIdOut] = Field(default_factory=list)
    degenerate_pairs: list[tuple[CircleIdOut, CircleIdOut]] = Field(default_factory=list)
    processing_time_ms: float = 0.0

    @classmethod
    def from_context(cls, ctx: WrapContext, elapsed_ms: float = 0.0) -> WrapResponse:
        return cls(
            vertices=[HullVertex(circle_id=v.circle_id, x=v.x, y=v.y) for v in ctx.vertices],
            outline=ctx.outline,
            area=round(ctx.area, 4),
            perimeter=round(ctx.perimeter, 4),
            circles_used=[c.id for c in ctx.surviving],
            circles_enclosed=ctx.enclosed_ids,
            degenerate_pairs=ctx.degenerate_pairs,
            processing_time_ms=round(elapsed_ms, 1),
        )


class ContainmentResponse(BaseModel):
    contained: bool
    edge: tuple[tuple[float, float], tuple[float, float]] | None = None
