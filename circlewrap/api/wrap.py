"""POST /api/wrap — wrap a set of circles."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from circlewrap.config import Settings
from circlewrap.dependencies import get_settings
from circlewrap.engine.config import WrapConfig
from circlewrap.engine.context import WrapContext
from circlewrap.engine.pipeline import WrapPipeline
from circlewrap.engine.primitives import Circle
from circlewrap.models.circles import records_to_circles
from circlewrap.models.requests import SvgWrapRequest, WrapOptions, WrapRequest
from circlewrap.models.responses import WrapResponse
from circlewrap.svg.parser import parse_svg_circles
from circlewrap.svg.serializer import wrap_to_svg

router = APIRouter(prefix="/wrap")


def _config(options: WrapOptions, settings: Settings) -> WrapConfig:
    """Settings give the defaults; any option set on the request wins."""
    config = settings.wrap_config()
    if options.filter_enclosed is not None:
        config.filter_enclosed = options.filter_enclosed
    if options.key_precision is not None:
        config.key_precision = options.key_precision
    if options.arc_resolution is not None:
        config.arc_resolution = options.arc_resolution
    return config


def _run(circles: list[Circle], config: WrapConfig) -> tuple[WrapContext, float]:
    start = time.perf_counter()
    ctx = WrapPipeline(config).run(circles)
    return ctx, (time.perf_counter() - start) * 1000


@router.post("", response_model=WrapResponse)
async def wrap(req: WrapRequest, settings: Settings = Depends(get_settings)) -> WrapResponse:
    circles = records_to_circles(req.circles)
    ctx, elapsed = _run(circles, _config(req.options, settings))
    return WrapResponse.from_context(ctx, elapsed)


@router.post("/svg")
async def wrap_svg(req: WrapRequest, settings: Settings = Depends(get_settings)) -> Response:
    circles = records_to_circles(req.circles)
    ctx, _ = _run(circles, _config(req.options, settings))
    return Response(content=wrap_to_svg(ctx), media_type="image/svg+xml")


@router.post("/from-svg", response_model=WrapResponse)
async def wrap_from_svg(
    req: SvgWrapRequest, settings: Settings = Depends(get_settings)
) -> WrapResponse:
    circles = parse_svg_circles(req.svg)
    ctx, elapsed = _run(circles, _config(req.options, settings))
    return WrapResponse.from_context(ctx, elapsed)
