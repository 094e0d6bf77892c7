"""Geometry-only stream selectors.

These walk the page's text from one point to another without any knowledge
of layout blocks. They serve pages that carry no layout metadata and act as
the "point A to point B" primitive inside a single block.

Both selectors first put the gesture points into reading order, so a
backwards drag selects the same text as the forward one.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ROW_TOLERANCE
from .rows import ordered_points

if TYPE_CHECKING:
    from ..types import NormalizedPoint, NormalizedRect, TextEntity

logger = logging.getLogger(__name__)

__all__ = ["DocumentOrderStreamSelector", "GeometricStreamSelector", "is_at_or_after", "is_at_or_before"]


def _spans_row_of(area: NormalizedRect, point: NormalizedPoint) -> bool:
    return area.top <= point.y <= area.bottom


def is_at_or_after(area: NormalizedRect, point: NormalizedPoint) -> bool:
    """Check whether a text run reads at or after a point.

    True when the run contains the point, lies entirely below it, or shares
    its row and does not end left of it.
    """
    if area.contains(point.x, point.y) or area.top > point.y:
        return True
    return _spans_row_of(area, point) and area.right >= point.x


def is_at_or_before(area: NormalizedRect, point: NormalizedPoint) -> bool:
    """Check whether a text run reads at or before a point.

    True when the run contains the point, lies entirely above it, or shares
    its row and does not start right of it.
    """
    if area.contains(point.x, point.y) or area.bottom < point.y:
        return True
    return _spans_row_of(area, point) and area.left <= point.x


class GeometricStreamSelector:
    """Select every entity positioned between the two gesture points.

    Membership is decided per entity from its geometry alone, so the result
    does not depend on the order of the page's word list.
    """

    name = "geometric"

    def __init__(self, row_tolerance: float = ROW_TOLERANCE) -> None:
        self.row_tolerance = row_tolerance

    def select(
        self,
        words: Sequence[TextEntity],
        start: NormalizedPoint,
        end: NormalizedPoint,
    ) -> list[int]:
        """Select entities between two points.

        Args:
            words: Page entities in document order
            start: One end of the gesture
            end: The other end of the gesture

        Returns:
            Indices into ``words`` in document order; empty for a click
        """
        if start == end:
            return []

        first, last = ordered_points(start, end, self.row_tolerance)
        indices = [
            index
            for index, entity in enumerate(words)
            if is_at_or_after(entity.area, first) and is_at_or_before(entity.area, last)
        ]
        logger.debug("Geometric stream selection picked %d of %d entities", len(indices), len(words))
        return indices


class DocumentOrderStreamSelector:
    """Select the contiguous run of the word list between the two points.

    The first entity (in document order) reading at or after the leading
    point opens the range; the last entity reading at or before the trailing
    point closes it. Everything in between is selected, as in a classic
    single-stream text selection.
    """

    name = "document-order"

    def __init__(self, row_tolerance: float = ROW_TOLERANCE) -> None:
        self.row_tolerance = row_tolerance

    def select(
        self,
        words: Sequence[TextEntity],
        start: NormalizedPoint,
        end: NormalizedPoint,
    ) -> list[int]:
        if start == end or not words:
            return []

        first, last = ordered_points(start, end, self.row_tolerance)

        open_index = next(
            (index for index, entity in enumerate(words) if is_at_or_after(entity.area, first)),
            None,
        )
        close_index = next(
            (index for index in range(len(words) - 1, -1, -1) if is_at_or_before(words[index].area, last)),
            None,
        )
        if open_index is None or close_index is None or open_index > close_index:
            return []

        return list(range(open_index, close_index + 1))
