"""Component interface definitions.

This module defines Protocol interfaces for pluggable collaborators:
- StreamSelector: geometry-only selection between two points
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .entity import TextEntity
    from .geometry import NormalizedPoint


@runtime_checkable
class StreamSelector(Protocol):
    """Geometry-only selection interface.

    Walks the page's text from one point to another with no knowledge of
    layout blocks. It is the complete behaviour for pages without blocks and
    the "point A to point B" primitive inside a single block.

    Attributes:
        name: Selector identifier (e.g., "geometric", "document-order")

    Methods:
        select: Indices of the entities between two points

    Example:
        >>> selector = GeometricStreamSelector()
        >>> selector.name
        'geometric'
        >>> indices = selector.select(words, start, end)
    """

    name: str

    def select(
        self,
        words: Sequence[TextEntity],
        start: NormalizedPoint,
        end: NormalizedPoint,
    ) -> list[int]:
        """Select entities between two points.

        Implementations must accept the points in either order and return
        an empty list when both points coincide.

        Args:
            words: Page entities in document order
            start: One end of the selection gesture
            end: The other end of the selection gesture

        Returns:
            Indices into ``words``, in document order
        """
        ...
