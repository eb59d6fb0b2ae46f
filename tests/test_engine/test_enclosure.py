"""Tests for the enclosure filter."""

from __future__ import annotations

from circlewrap.engine.enclosure import filter_non_enclosed, is_enclosed
from circlewrap.engine.primitives import Circle


def test_concentric_smaller_circle_is_filtered():
    small = Circle(id="small", center=(0.0, 0.0), radius=1.0)
    big = Circle(id="big", center=(0.0, 0.0), radius=2.0)
    assert is_enclosed(small, big)
    assert not is_enclosed(big, small)
    assert filter_non_enclosed([small, big]) == [big]


def test_internally_touching_circle_counts_as_enclosed():
    # distance + inner radius == outer radius exactly
    inner = Circle(id=0, center=(1.0, 0.0), radius=1.0)
    outer = Circle(id=1, center=(0.0, 0.0), radius=2.0)
    assert is_enclosed(inner, outer)


def test_overlapping_circles_are_kept():
    a = Circle(id=0, center=(0.0, 0.0), radius=2.0)
    b = Circle(id=1, center=(1.5, 0.0), radius=1.0)
    assert not is_enclosed(b, a)
    assert filter_non_enclosed([a, b]) == [a, b]


def test_circle_never_encloses_itself():
    a = Circle(id=0, center=(0.0, 0.0), radius=1.0)
    assert is_enclosed(a, a)
    assert filter_non_enclosed([a]) == [a]


def test_identical_circles_with_different_ids_are_both_kept():
    # Each encloses the other under the inclusive test; neither may remove the other
    a = Circle(id="a", center=(3.0, 3.0), radius=1.0)
    b = Circle(id="b", center=(3.0, 3.0), radius=1.0)
    assert is_enclosed(a, b) and is_enclosed(b, a)
    assert filter_non_enclosed([a, b]) == [a, b]


def test_identical_circles_inside_a_larger_one_are_both_dropped():
    a = Circle(id="a", center=(0.0, 0.0), radius=1.0)
    b = Circle(id="b", center=(0.0, 0.0), radius=1.0)
    c = Circle(id="c", center=(0.5, 0.0), radius=5.0)
    assert filter_non_enclosed([a, b, c]) == [c]


def test_filter_preserves_input_order(trio):
    inner = Circle(id="inner", center=(230.0, 280.0), radius=10.0)
    circles = [trio[2], inner, trio[0], trio[1]]
    assert filter_non_enclosed(circles) == [trio[2], trio[0], trio[1]]
