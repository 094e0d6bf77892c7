"""RegularAreaRect - ordered set of rectangles covering a selection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .geometry import NormalizedPoint, NormalizedRect


@dataclass
class RegularAreaRect:
    """Visual extent of a resolved selection.

    Holds one rectangle per selected text entity, in selection output order.
    An empty instance is a valid result (nothing selected).
    """

    rects: list[NormalizedRect] = field(default_factory=list)

    @classmethod
    def from_rects(cls, rects: Iterable[NormalizedRect]) -> RegularAreaRect:
        return cls(rects=list(rects))

    def append(self, rect: NormalizedRect) -> None:
        self.rects.append(rect)

    def __iter__(self) -> Iterator[NormalizedRect]:
        return iter(self.rects)

    def __len__(self) -> int:
        return len(self.rects)

    def __bool__(self) -> bool:
        return bool(self.rects)

    @property
    def is_empty(self) -> bool:
        return not self.rects

    def contains(self, x: float, y: float) -> bool:
        """True if any member rectangle contains the point (inclusive edges)."""
        return any(rect.contains(x, y) for rect in self.rects)

    def contains_point(self, point: NormalizedPoint) -> bool:
        return self.contains(point.x, point.y)

    def intersects(self, rect: NormalizedRect) -> bool:
        """True if any member rectangle intersects ``rect``."""
        return any(member.intersects(rect) for member in self.rects)

    def bounding_rect(self) -> NormalizedRect | None:
        """Smallest rectangle covering every member, or None when empty."""
        if not self.rects:
            return None
        result = self.rects[0]
        for rect in self.rects[1:]:
            result = result.union(rect)
        return result

    def to_list(self) -> list[list[float]]:
        """Convert to a JSON-serializable list of [left, top, right, bottom]."""
        return [rect.to_list() for rect in self.rects]
