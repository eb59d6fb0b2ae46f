"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from circlewrap.engine.config import MAX_KEY_PRECISION
from circlewrap.models.circles import CircleRecord


class WrapOptions(BaseModel):
    filter_enclosed: bool | None = Field(
        default=None, description="Drop circles enclosed by another circle (default from settings)"
    )
    key_precision: int | None = Field(
        default=None,
        ge=0,
        le=MAX_KEY_PRECISION,
        description="Decimals for point dedup keys; omit for exact matching",
    )
    arc_resolution: int | None = Field(
        default=None, ge=1, le=4096, description="Samples per arc in the traced outline"
    )


class WrapRequest(BaseModel):
    circles: list[CircleRecord] = Field(..., description="Circles to wrap")
    options: WrapOptions = Field(default_factory=WrapOptions)


class SvgWrapRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code; every <circle> element is wrapped")
    options: WrapOptions = Field(default_factory=WrapOptions)


class ContainmentRequest(BaseModel):
    circle: CircleRecord
    polygon: list[tuple[float, float]] = Field(..., description="Polygon ring, implicitly closed")
