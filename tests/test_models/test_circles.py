"""Tests for circle record deserialization."""

from __future__ import annotations

import pytest

from circlewrap.engine.errors import CircleRecordError
from circlewrap.engine.primitives import Circle
from circlewrap.models.circles import CircleRecord, parse_circle_records


def test_parse_records(trio_records, trio):
    assert parse_circle_records(trio_records) == trio


def test_int_and_str_ids_kept_as_given():
    circles = parse_circle_records(
        [
            {"id": 7, "x": 0, "y": 0, "radius": 1},
            {"id": "7", "x": 5, "y": 0, "radius": 1},
        ]
    )
    assert [c.id for c in circles] == [7, "7"]


def test_kind_is_accepted():
    record = CircleRecord(id="o", x=1, y=2, radius=3, kind="outer")
    assert record.kind == "outer"
    assert record.to_circle() == Circle(id="o", center=(1.0, 2.0), radius=3.0)


def test_negative_radius_rejected():
    with pytest.raises(CircleRecordError) as exc:
        parse_circle_records([{"id": 1, "x": 0, "y": 0, "radius": -1}])
    assert exc.value.errors[0]["loc"] == (0, "radius")


def test_missing_field_rejected():
    with pytest.raises(CircleRecordError) as exc:
        parse_circle_records([{"id": 1, "x": 0, "radius": 1}])
    assert exc.value.errors[0]["loc"] == (0, "y")


def test_non_finite_rejected():
    with pytest.raises(CircleRecordError):
        parse_circle_records([{"id": 1, "x": float("nan"), "y": 0, "radius": 1}])


def test_unknown_kind_rejected():
    with pytest.raises(CircleRecordError):
        parse_circle_records([{"id": 1, "x": 0, "y": 0, "radius": 1, "kind": "middle"}])


def test_duplicate_ids_rejected():
    with pytest.raises(CircleRecordError) as exc:
        parse_circle_records(
            [
                {"id": "a", "x": 0, "y": 0, "radius": 1},
                {"id": "a", "x": 5, "y": 0, "radius": 1},
            ]
        )
    assert exc.value.errors == [{"loc": (1, "id"), "msg": "Duplicate circle id 'a'"}]
    assert "Duplicate circle id" in str(exc.value)


def test_records_validate_to_same_circles(trio):
    records = [CircleRecord(id=c.id, x=c.x, y=c.y, radius=c.radius) for c in trio]
    assert parse_circle_records(records) == trio
