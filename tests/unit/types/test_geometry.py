"""Tests for normalized geometry primitives.

Tests cover:
- Point and rectangle conversions
- Inclusive point containment
- Center-rule rectangle containment
- Intersection and union
"""

from __future__ import annotations

import pytest

from blockselect.types import NormalizedPoint, NormalizedRect


class TestConversions:
    """Test list conversions."""

    def test_point_from_list(self):
        """Test point creation from a coordinate list."""
        assert NormalizedPoint.from_list([0.1, 0.2]) == NormalizedPoint(0.1, 0.2)

    def test_point_from_short_list_raises(self):
        """Test that a single coordinate is rejected."""
        with pytest.raises(ValueError, match="2 coordinates"):
            NormalizedPoint.from_list([0.1])

    def test_rect_round_trip(self):
        """Test rect to_list/from_list."""
        rect = NormalizedRect(0.1, 0.2, 0.5, 0.8)
        assert NormalizedRect.from_list(rect.to_list()) == rect

    def test_rect_from_short_list_raises(self):
        """Test that fewer than four coordinates are rejected."""
        with pytest.raises(ValueError, match="4 coordinates"):
            NormalizedRect.from_list([0.1, 0.2, 0.5])


class TestProperties:
    """Test derived rectangle properties."""

    def test_center(self):
        rect = NormalizedRect(0.0, 0.0, 0.5, 1.0)
        assert rect.center == NormalizedPoint(0.25, 0.5)
        assert rect.vertical_center == 0.5

    def test_size(self):
        rect = NormalizedRect(0.0, 0.0, 0.5, 0.25)
        assert rect.width == 0.5
        assert rect.height == 0.25


class TestPointContainment:
    """Test point containment (inclusive on all edges)."""

    def test_inside_and_outside(self):
        """Test points clearly inside and outside a left-half block."""
        rect = NormalizedRect(0.0, 0.0, 0.45, 1.0)
        assert rect.contains(0.2, 0.5)
        assert not rect.contains(0.7, 0.5)

    def test_corners_are_inside(self):
        """Test that the top-left corner and bottom-right edge are contained."""
        rect = NormalizedRect(0.0, 0.0, 0.45, 1.0)
        assert rect.contains(0.0, 0.0)
        assert rect.contains(0.45, 1.0)

    @pytest.mark.parametrize(
        ("x", "y"),
        [(0.25, 0.5), (0.75, 0.5), (0.5, 0.25), (0.5, 0.75)],
    )
    def test_every_edge_is_inclusive(self, x: float, y: float):
        """Test points lying exactly on each of the four edges."""
        assert NormalizedRect(0.25, 0.25, 0.75, 0.75).contains(x, y)

    @pytest.mark.parametrize(("x", "y"), [(0.24, 0.5), (0.76, 0.5)])
    def test_just_outside(self, x: float, y: float):
        """Test points just outside the left and right edges."""
        assert not NormalizedRect(0.25, 0.25, 0.75, 0.75).contains(x, y)

    def test_contains_point(self):
        assert NormalizedRect(0.0, 0.0, 1.0, 1.0).contains_point(NormalizedPoint(0.5, 0.5))


class TestRectContainment:
    """Test the center rule for rectangle membership."""

    def test_center_inside(self):
        """Test rect with center (0.2, 0.5) inside the block."""
        block = NormalizedRect(0.0, 0.0, 0.5, 1.0)
        assert block.contains_rect(NormalizedRect(0.1, 0.3, 0.3, 0.7))

    def test_center_outside(self):
        """Test rect with center (0.75, 0.5) outside the block."""
        block = NormalizedRect(0.0, 0.0, 0.5, 1.0)
        assert not block.contains_rect(NormalizedRect(0.6, 0.3, 0.9, 0.7))

    def test_spanning_boundary(self):
        """Test rects crossing the block edge: only the center decides."""
        block = NormalizedRect(0.0, 0.0, 0.5, 1.0)
        assert block.contains_rect(NormalizedRect(0.3, 0.3, 0.6, 0.7))
        assert not block.contains_rect(NormalizedRect(0.4, 0.3, 0.8, 0.7))

    def test_center_on_edge(self):
        """Test rect whose center lies exactly on the block's right edge."""
        block = NormalizedRect(0.0, 0.0, 0.5, 1.0)
        assert block.contains_rect(NormalizedRect(0.4, 0.3, 0.6, 0.7))


class TestIntersection:
    """Test intersection and union."""

    def test_overlapping(self):
        assert NormalizedRect(0.0, 0.0, 0.5, 0.5).intersects(NormalizedRect(0.4, 0.4, 1.0, 1.0))

    def test_touching_counts(self):
        assert NormalizedRect(0.0, 0.0, 0.5, 0.5).intersects(NormalizedRect(0.5, 0.5, 1.0, 1.0))

    def test_disjoint(self):
        assert not NormalizedRect(0.0, 0.0, 0.4, 0.4).intersects(NormalizedRect(0.5, 0.5, 1.0, 1.0))

    def test_union(self):
        union = NormalizedRect(0.1, 0.2, 0.3, 0.4).union(NormalizedRect(0.2, 0.1, 0.5, 0.3))
        assert union == NormalizedRect(0.1, 0.1, 0.5, 0.4)
