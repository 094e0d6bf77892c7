"""Stream selector registry.

This module provides a centralized registry for geometry-only selectors,
so the fallback used by a TextPage can be chosen by name from configuration.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..exceptions import InvalidConfigError

if TYPE_CHECKING:
    from ..types import StreamSelector

logger = logging.getLogger(__name__)

__all__ = ["StreamSelectorRegistry", "stream_selector_registry"]


class StreamSelectorRegistry:
    """Registry for stream selector implementations.

    Provides:
    - Lazy loading of built-in selector classes
    - Dynamic registration of custom selectors
    - Unified access to all available selectors

    Example:
        >>> from blockselect.selection.registry import stream_selector_registry
        >>> selector = stream_selector_registry.create("geometric", row_tolerance=0.01)
        >>> stream_selector_registry.list_available()
        ['document-order', 'geometric']
    """

    # Built-in selector mappings (name -> (module_path, class_name))
    _BUILTIN_SELECTORS: dict[str, tuple[str, str]] = {
        "geometric": (
            "blockselect.selection.stream",
            "GeometricStreamSelector",
        ),
        "document-order": (
            "blockselect.selection.stream",
            "DocumentOrderStreamSelector",
        ),
    }

    def __init__(self) -> None:
        self._custom_selectors: dict[str, Callable[..., StreamSelector]] = {}
        self._loaded_classes: dict[str, type] = {}

    def register(self, name: str, selector_class: type | Callable[..., StreamSelector]) -> None:
        """Register a custom selector.

        Args:
            name: Selector name for lookup
            selector_class: Selector class or factory function
        """
        if name in self._BUILTIN_SELECTORS:
            logger.warning("Overriding built-in stream selector: %s", name)

        self._custom_selectors[name] = selector_class
        logger.debug("Registered stream selector: %s", name)

    def unregister(self, name: str) -> None:
        """Remove a custom selector (built-ins cannot be removed)."""
        self._custom_selectors.pop(name, None)

    def get_class(self, name: str) -> type[StreamSelector] | Callable[..., StreamSelector]:
        """Get selector class by name (lazy loading).

        Raises:
            InvalidConfigError: If the selector is unknown or cannot be loaded
        """
        if name in self._custom_selectors:
            return self._custom_selectors[name]

        if name in self._loaded_classes:
            return self._loaded_classes[name]

        if name not in self._BUILTIN_SELECTORS:
            available = ", ".join(self.list_available())
            raise InvalidConfigError(f"Unknown stream selector: {name}. Available: {available}")

        module_path, class_name = self._BUILTIN_SELECTORS[name]
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise InvalidConfigError(f"Failed to load stream selector '{name}': {e}") from e

        selector_class = getattr(module, class_name)
        self._loaded_classes[name] = selector_class
        return selector_class

    def create(self, name: str, **kwargs: Any) -> StreamSelector:
        """Create a selector instance.

        Args:
            name: Selector name
            **kwargs: Arguments passed to the selector constructor

        Returns:
            StreamSelector instance
        """
        selector_class = self.get_class(name)
        return selector_class(**kwargs)

    def list_available(self) -> list[str]:
        """List all available selector names."""
        names = set(self._BUILTIN_SELECTORS.keys())
        names.update(self._custom_selectors.keys())
        return sorted(names)

    def is_available(self, name: str) -> bool:
        try:
            self.get_class(name)
            return True
        except InvalidConfigError:
            return False


# Global singleton instance
stream_selector_registry = StreamSelectorRegistry()
