"""Write a wrap result out as standalone SVG."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from xml.sax.saxutils import quoteattr

from circlewrap.engine.context import WrapContext
from circlewrap.engine.primitives import Point

HULL_STYLE = {"fill": "rgba(255, 0, 0, 0.1)", "stroke": "rgba(255, 0, 0, 0.8)", "stroke-width": "2"}
CIRCLE_STYLE = {"fill": "rgba(0, 0, 0, 0.1)", "stroke": "black", "stroke-width": "2"}


def serialize_svg(
    elements: list[dict[str, Any]],
    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 24.0, 24.0),
    title: str = "",
) -> str:
    """Generate SVG markup from element definitions (``tag`` + attributes)."""
    x, y, w, h = viewbox
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="{_fmt(x)} {_fmt(y)} {_fmt(w)} {_fmt(h)}" xmlns="http://www.w3.org/2000/svg"'
        f' role="img">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f"{k}={quoteattr(str(v))}" for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)


def outline_path_d(outline: Sequence[Point]) -> str:
    """SVG path data for a closed ring."""
    if not outline:
        return ""
    head, *rest = outline
    parts = [f"M{_fmt(head[0])} {_fmt(head[1])}"]
    parts.extend(f"L{_fmt(px)} {_fmt(py)}" for px, py in rest)
    parts.append("Z")
    return " ".join(parts)


def wrap_to_svg(ctx: WrapContext, margin: float = 10.0, title: str = "") -> str:
    """Hull outline underneath the input circles, framed around the circles."""
    elements: list[dict[str, Any]] = []
    if ctx.outline:
        elements.append({"tag": "path", "id": "hull", "d": outline_path_d(ctx.outline), **HULL_STYLE})
    for circle in ctx.circles:
        elements.append(
            {
                "tag": "circle",
                "id": str(circle.id),
                "cx": _fmt(circle.x),
                "cy": _fmt(circle.y),
                "r": _fmt(circle.radius),
                **CIRCLE_STYLE,
            }
        )
    return serialize_svg(elements, viewbox=_bounds(ctx, margin), title=title)


def _bounds(ctx: WrapContext, margin: float) -> tuple[float, float, float, float]:
    if not ctx.circles:
        return (0.0, 0.0, 24.0, 24.0)
    xmin = min(c.x - c.radius for c in ctx.circles) - margin
    ymin = min(c.y - c.radius for c in ctx.circles) - margin
    xmax = max(c.x + c.radius for c in ctx.circles) + margin
    ymax = max(c.y + c.radius for c in ctx.circles) + margin
    return (xmin, ymin, xmax - xmin, ymax - ymin)


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")
