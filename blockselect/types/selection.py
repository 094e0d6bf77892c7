"""Selection gesture and selection result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .area import RegularAreaRect

if TYPE_CHECKING:
    from .entity import TextEntity
    from .geometry import NormalizedPoint


@dataclass(frozen=True)
class TextSelection:
    """Two points of a selection gesture (e.g. mouse-down and drag position).

    The points carry no ordering: ``start`` may lie geometrically after
    ``end`` when the user drags backwards.
    """

    start: NormalizedPoint
    end: NormalizedPoint

    @property
    def is_degenerate(self) -> bool:
        """True when both points coincide (a click rather than a drag)."""
        return self.start == self.end


class SelectionKind(Enum):
    """Which branch of the selection algorithm produced a result."""

    FALLBACK = "fallback"  # No blocks, or a point resolved to no block
    SAME_BLOCK = "same_block"
    CROSS_BLOCK = "cross_block"


@dataclass
class SelectionResult:
    """Resolved selection.

    - indices: Positions of the selected entities in ``TextPage.words``
    - entities: The selected entities, in output order (same order as indices)
    - area: One rectangle per selected entity, in output order
    - kind: Algorithm branch that produced the result
    """

    indices: list[int] = field(default_factory=list)
    entities: list[TextEntity] = field(default_factory=list)
    area: RegularAreaRect = field(default_factory=RegularAreaRect)
    kind: SelectionKind = SelectionKind.FALLBACK

    @classmethod
    def from_indices(cls, words: list[TextEntity], indices: list[int], kind: SelectionKind) -> SelectionResult:
        entities = [words[i] for i in indices]
        return cls(
            indices=list(indices),
            entities=entities,
            area=RegularAreaRect.from_rects(entity.area for entity in entities),
            kind=kind,
        )

    @property
    def is_empty(self) -> bool:
        return not self.indices

    @property
    def text(self) -> str:
        """Selected text in output order, runs concatenated without separators."""
        return "".join(entity.text for entity in self.entities)
