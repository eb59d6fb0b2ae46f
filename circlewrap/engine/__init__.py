"""circle-wrap geometry engine."""

from circlewrap.engine.config import WrapConfig
from circlewrap.engine.context import WrapContext
from circlewrap.engine.pipeline import WrapPipeline, wrap_circles
from circlewrap.engine.primitives import Circle, Tangent, TangentPoint
from circlewrap.engine.tangents import tangents

__all__ = [
    "Circle",
    "Tangent",
    "TangentPoint",
    "WrapConfig",
    "WrapContext",
    "WrapPipeline",
    "tangents",
    "wrap_circles",
]
