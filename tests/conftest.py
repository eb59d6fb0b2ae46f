"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from circlewrap.engine.primitives import Circle


# Three separated circles: every pair has four common tangents
TRIO = [
    Circle(id="a", center=(230.0, 280.0), radius=40.0),
    Circle(id="b", center=(120.0, 120.0), radius=30.0),
    Circle(id="c", center=(520.0, 120.0), radius=50.0),
]

TRIO_RECORDS = [{"id": c.id, "x": c.x, "y": c.y, "radius": c.radius} for c in TRIO]

TRIO_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 640 360">
  <circle id="a" cx="230" cy="280" r="40"/>
  <circle id="b" cx="120" cy="120" r="30"/>
  <circle id="c" cx="520" cy="120" r="50" data-kind="outer"/>
</svg>'''


def assert_not_inside(point: tuple[float, float], circles: list[Circle], eps: float = 1e-6) -> None:
    for circle in circles:
        d = math.hypot(point[0] - circle.x, point[1] - circle.y)
        assert d >= circle.radius - eps, f"{point} lies inside circle {circle.id!r}"


@pytest.fixture
def trio() -> list[Circle]:
    return list(TRIO)


@pytest.fixture
def trio_records() -> list[dict]:
    return [dict(r) for r in TRIO_RECORDS]


@pytest.fixture
def trio_svg() -> str:
    return TRIO_SVG
