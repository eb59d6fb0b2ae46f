"""End-to-end tests for the wrap pipeline."""

from __future__ import annotations

import pytest

from circlewrap.engine.config import WrapConfig
from circlewrap.engine.errors import CircleRecordError
from circlewrap.engine.pipeline import WrapPipeline, wrap_circles
from circlewrap.engine.primitives import Circle
from tests.conftest import assert_not_inside


def test_trio_hull(trio):
    vertices = wrap_circles(trio)
    assert len(vertices) > 3
    for v in vertices:
        assert_not_inside(v.xy, trio)
    # Every circle of a separated trio touches the wrap
    assert {v.circle_id for v in vertices} == {"a", "b", "c"}


def test_vertices_lie_on_their_circles(trio):
    by_id = {c.id: c for c in trio}
    for v in wrap_circles(trio):
        c = by_id[v.circle_id]
        assert abs(((v.x - c.x) ** 2 + (v.y - c.y) ** 2) ** 0.5 - c.radius) < 1e-9


def test_hull_round_trip(trio):
    ctx = WrapPipeline().run(trio)
    assert [v.xy for v in ctx.vertices] == ctx.hull
    for v in ctx.vertices:
        assert ctx.registry.get(v.x, v.y) == v


def test_enclosed_circle_is_reported(trio):
    inner = Circle(id="inner", center=(230.0, 280.0), radius=5.0)
    ctx = WrapPipeline().run([*trio, inner])
    assert ctx.enclosed_ids == ["inner"]
    assert [c.id for c in ctx.surviving] == ["a", "b", "c"]
    assert "inner" not in {v.circle_id for v in ctx.vertices}


def test_filter_can_be_disabled(trio):
    inner = Circle(id="inner", center=(230.0, 280.0), radius=5.0)
    with_filter = WrapPipeline().run([*trio, inner])
    without = WrapPipeline(WrapConfig(filter_enclosed=False)).run([*trio, inner])
    assert without.enclosed_ids == []
    assert len(without.surviving) == 4
    # The enclosed circle adds points but never moves the hull
    assert set(without.hull) == set(with_filter.hull)


def test_duplicate_ids_rejected():
    circles = [
        Circle(id=1, center=(0.0, 0.0), radius=1.0),
        Circle(id=1, center=(5.0, 0.0), radius=1.0),
    ]
    with pytest.raises(CircleRecordError):
        WrapPipeline().run(circles)


def test_coincident_circles_reported_not_propagated():
    circles = [
        Circle(id="a", center=(0.0, 0.0), radius=1.0),
        Circle(id="b", center=(0.0, 0.0), radius=1.0),
        Circle(id="c", center=(10.0, 0.0), radius=1.0),
        Circle(id="d", center=(5.0, 8.0), radius=1.0),
    ]
    ctx = WrapPipeline().run(circles)
    assert ctx.degenerate_pairs == [("a", "b")]
    assert len(ctx.vertices) >= 3


def test_empty_and_single_circle():
    assert WrapPipeline().run([]).vertices == []

    single = WrapPipeline(WrapConfig(arc_resolution=16)).run([Circle(id=0, center=(0.0, 0.0), radius=1.0)])
    assert single.vertices == []
    assert single.is_degenerate
    assert len(single.outline) == 16
    assert single.area == pytest.approx(3.06, abs=0.01)


def test_two_circles_give_stadium(trio):
    a, b = trio[0], trio[1]
    ctx = WrapPipeline(WrapConfig(arc_resolution=64)).run([a, b])
    # External tangent points of both circles form the hull
    assert len(ctx.vertices) == 4
    assert len(ctx.outline) > len(ctx.vertices)
    assert ctx.area > 0
    assert ctx.timings_ms.keys() == {"enclosure", "tangents", "hull", "outline"}


def test_config_bounds():
    assert WrapConfig(key_precision=17).key_precision == 17
    with pytest.raises(ValueError):
        WrapConfig(key_precision=18)
    with pytest.raises(ValueError):
        WrapConfig(key_precision=-1)
    with pytest.raises(ValueError):
        WrapConfig(arc_resolution=0)
