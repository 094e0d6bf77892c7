"""Row (line) grouping helpers.

Two text runs share a row when their vertical centers are at most
``tolerance`` apart. Within a row runs are ordered by their left edge.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import cmp_to_key
from typing import TYPE_CHECKING, TypeVar

from ..constants import ROW_TOLERANCE

if TYPE_CHECKING:
    from ..types import NormalizedPoint, NormalizedRect

T = TypeVar("T")


def same_row(center_a: float, center_b: float, tolerance: float = ROW_TOLERANCE) -> bool:
    """Check whether two vertical centers fall in the same row band."""
    return abs(center_a - center_b) <= tolerance


def compare_areas(a: NormalizedRect, b: NormalizedRect, tolerance: float = ROW_TOLERANCE) -> int:
    """Three-way comparison of two areas in reading position.

    Rows first (vertical center), then left edge when the rows merge.

    Returns:
        Negative if ``a`` reads before ``b``, positive if after, 0 if tied
    """
    a_center = a.vertical_center
    b_center = b.vertical_center
    if not same_row(a_center, b_center, tolerance):
        return -1 if a_center < b_center else 1
    if a.left != b.left:
        return -1 if a.left < b.left else 1
    return 0


def sort_by_rows(
    items: Sequence[T],
    area_of: Callable[[T], NormalizedRect],
    tolerance: float = ROW_TOLERANCE,
) -> list[T]:
    """Sort items top-to-bottom by row, then left-to-right.

    The sort is stable: items tied on both keys keep their input order.

    The row test is not transitive. Centers that chain within the tolerance
    (0.100, 0.108, 0.116) do not form one band, so for such inputs the
    result can depend on the input order.

    Args:
        items: Items to sort
        area_of: Returns the page area of an item
        tolerance: Row band height in normalized units

    Returns:
        New sorted list
    """
    key = cmp_to_key(lambda a, b: compare_areas(area_of(a), area_of(b), tolerance))
    return sorted(items, key=key)


def ordered_points(
    start: NormalizedPoint,
    end: NormalizedPoint,
    tolerance: float = ROW_TOLERANCE,
) -> tuple[NormalizedPoint, NormalizedPoint]:
    """Return the two gesture points in reading order.

    A point reads first when it is higher on the page by more than the row
    tolerance, or on the same band and further left.

    Example:
        >>> ordered_points(NormalizedPoint(0.5, 0.8), NormalizedPoint(0.1, 0.2))
        (NormalizedPoint(x=0.1, y=0.2), NormalizedPoint(x=0.5, y=0.8))
    """
    if same_row(start.y, end.y, tolerance):
        return (start, end) if start.x <= end.x else (end, start)
    return (start, end) if start.y < end.y else (end, start)
