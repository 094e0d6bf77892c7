"""TextEntity - smallest selectable text run on a page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .geometry import NormalizedRect


@dataclass(frozen=True)
class TextEntity:
    """One atomic text run (a word or glyph cluster) and its page area."""

    text: str
    area: NormalizedRect

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "area": self.area.to_list()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TextEntity:
        """Create TextEntity from dict.

        Raises:
            ValueError: If "area" is missing or is not a 4-element list
        """
        if "area" not in data:
            raise ValueError("Entity dict must have 'area' field")

        area_value = data["area"]
        if not isinstance(area_value, (list, tuple)):
            raise ValueError(f"Invalid area type: {type(area_value)}")

        return cls(text=str(data.get("text", "")), area=NormalizedRect.from_list(area_value))
