"""Normalized geometry primitives.

Coordinates are page-size independent: both axes run from 0.0 (left/top)
to 1.0 (right/bottom). Origin is the top-left corner of the page.

NormalizedRect format: (left, top, right, bottom) - corners (xyxy)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class NormalizedPoint:
    """Point in normalized page coordinates."""

    x: float
    y: float

    @classmethod
    def from_list(cls, coords: Sequence[float]) -> NormalizedPoint:
        """Create from [x, y].

        Raises:
            ValueError: If fewer than two coordinates are given
        """
        if len(coords) < 2:  # noqa: PLR2004
            raise ValueError(f"Point needs 2 coordinates, got {len(coords)}")
        return cls(x=float(coords[0]), y=float(coords[1]))

    def to_list(self) -> list[float]:
        """Convert to [x, y]."""
        return [self.x, self.y]


@dataclass(frozen=True)
class NormalizedRect:
    """Axis-aligned rectangle in normalized page coordinates.

    ``left <= right`` and ``top <= bottom`` is an invariant kept by the
    producer of the rectangle; it is not re-validated here. An inverted
    rectangle simply yields containment results consistent with its
    coordinates.
    """

    left: float
    top: float
    right: float
    bottom: float

    # ==================== Conversions ====================

    @classmethod
    def from_list(cls, coords: Sequence[float]) -> NormalizedRect:
        """Create from [left, top, right, bottom].

        Args:
            coords: Coordinate list (at least 4 elements)

        Returns:
            NormalizedRect

        Raises:
            ValueError: If fewer than four coordinates are given

        Example:
            >>> NormalizedRect.from_list([0.1, 0.2, 0.5, 0.8])
            NormalizedRect(left=0.1, top=0.2, right=0.5, bottom=0.8)
        """
        if len(coords) < 4:  # noqa: PLR2004
            raise ValueError(f"Rect needs 4 coordinates, got {len(coords)}")
        return cls(
            left=float(coords[0]),
            top=float(coords[1]),
            right=float(coords[2]),
            bottom=float(coords[3]),
        )

    def to_list(self) -> list[float]:
        """Convert to [left, top, right, bottom].

        Example:
            >>> NormalizedRect(0.1, 0.2, 0.5, 0.8).to_list()
            [0.1, 0.2, 0.5, 0.8]
        """
        return [self.left, self.top, self.right, self.bottom]

    # ==================== Properties ====================

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> NormalizedPoint:
        """Get the geometric center.

        Example:
            >>> NormalizedRect(0.0, 0.0, 0.5, 1.0).center
            NormalizedPoint(x=0.25, y=0.5)
        """
        return NormalizedPoint((self.left + self.right) / 2.0, (self.top + self.bottom) / 2.0)

    @property
    def vertical_center(self) -> float:
        """Vertical center, the row coordinate of a text run."""
        return (self.top + self.bottom) / 2.0

    # ==================== Geometric Operations ====================

    def contains(self, x: float, y: float) -> bool:
        """Check if a point is inside the rectangle.

        All four edges are inclusive: a point lying exactly on the left,
        right, top or bottom edge is contained.

        Example:
            >>> rect = NormalizedRect(0.25, 0.25, 0.75, 0.75)
            >>> rect.contains(0.75, 0.5)
            True
            >>> rect.contains(0.76, 0.5)
            False
        """
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def contains_point(self, point: NormalizedPoint) -> bool:
        """Point containment, inclusive on all edges."""
        return self.contains(point.x, point.y)

    def contains_rect(self, other: NormalizedRect) -> bool:
        """Check whether another rectangle belongs to this one.

        The decision is made on the center of ``other`` alone, regardless of
        how much of its area lies outside. A rectangle straddling the
        boundary belongs to whichever side holds its center.

        Example:
            >>> block = NormalizedRect(0.0, 0.0, 0.5, 1.0)
            >>> block.contains_rect(NormalizedRect(0.3, 0.3, 0.6, 0.7))
            True
            >>> block.contains_rect(NormalizedRect(0.4, 0.3, 0.8, 0.7))
            False
        """
        center = other.center
        return self.contains(center.x, center.y)

    def intersects(self, other: NormalizedRect) -> bool:
        """Check whether two rectangles overlap (touching edges count).

        Example:
            >>> NormalizedRect(0.0, 0.0, 0.5, 0.5).intersects(NormalizedRect(0.5, 0.5, 1.0, 1.0))
            True
        """
        return not (
            other.right < self.left
            or other.left > self.right
            or other.bottom < self.top
            or other.top > self.bottom
        )

    def union(self, other: NormalizedRect) -> NormalizedRect:
        """Smallest rectangle covering both."""
        return NormalizedRect(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )
