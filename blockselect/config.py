"""Selection configuration module.

This module provides:
- SelectionConfig: Dataclass for all selection configuration options
- YAML configuration file loading
- Validation of row tolerance and stream selector name
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_STREAM_SELECTOR, ROW_TOLERANCE
from .exceptions import InvalidConfigError, MissingConfigError

logger = logging.getLogger(__name__)


def _load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML configuration file with error handling.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dict, or empty dict if file not found or invalid
    """
    try:
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                logger.warning("Ignoring config file %s: top level is not a mapping", config_path)
                return {}
            return loaded
        logger.debug("Config file not found: %s", config_path)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse config file %s: %s", config_path, e)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read config file %s: %s", config_path, e)
        return {}


@dataclass
class SelectionConfig:
    """Selection configuration with validation.

    Configuration Sources (in order of precedence):
    1. Constructor arguments / overrides (highest priority)
    2. CLI arguments via from_cli()
    3. YAML configuration files via from_yaml()
    4. Default values (lowest priority)

    Example:
        >>> config = SelectionConfig(stream_selector="document-order")
        >>> config.validate()

        >>> config = SelectionConfig.from_yaml(Path("settings/config.yaml"))
    """

    # Vertical-center distance under which two text runs share a row
    row_tolerance: float = ROW_TOLERANCE

    # Geometry-only selector for pages without blocks and inside one block
    stream_selector: str = DEFAULT_STREAM_SELECTOR

    # Default matching mode when extracting text for a selection area
    use_intersects: bool = False

    _FIELDS = ("row_tolerance", "stream_selector", "use_intersects")

    @classmethod
    def from_yaml(cls, config_path: Path | str, strict: bool = False, **overrides: Any) -> SelectionConfig:
        """Load configuration from YAML file.

        Options are read from a top-level ``selection:`` mapping when present,
        otherwise from the top level itself. Unknown keys are ignored.

        Args:
            config_path: Path to YAML configuration file
            strict: Raise instead of falling back to defaults when the file
                does not exist
            **overrides: Values to override from file

        Returns:
            SelectionConfig instance

        Raises:
            MissingConfigError: If ``strict`` and the file does not exist
        """
        config_path = Path(config_path)
        if strict and not config_path.exists():
            raise MissingConfigError(f"Config file not found: {config_path}")

        yaml_config = _load_yaml_config(config_path)
        section = yaml_config.get("selection", yaml_config)
        if not isinstance(section, dict):
            logger.warning("Ignoring 'selection' section in %s: not a mapping", config_path)
            section = {}

        kwargs: dict[str, Any] = {key: section[key] for key in cls._FIELDS if key in section}
        kwargs.update(overrides)

        return cls(**kwargs)

    @classmethod
    def from_cli(cls, args: argparse.Namespace, base: SelectionConfig | None = None) -> SelectionConfig:
        """Create configuration from CLI arguments.

        Arguments that were not given (None) keep the value from ``base``
        (or the defaults when no base is supplied).

        Args:
            args: Parsed CLI arguments from argparse
            base: Configuration to layer the CLI values onto

        Returns:
            SelectionConfig instance
        """
        kwargs: dict[str, Any] = {}
        if base is not None:
            kwargs.update({key: getattr(base, key) for key in cls._FIELDS})

        # (cli_name, config_name)
        mappings = [
            ("row_tolerance", "row_tolerance"),
            ("selector", "stream_selector"),
        ]
        for cli_name, config_name in mappings:
            value = getattr(args, cli_name, None)
            if value is not None:
                kwargs[config_name] = value

        # Boolean flag can only switch intersection matching on
        if getattr(args, "intersects", False):
            kwargs["use_intersects"] = True

        return cls(**kwargs)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            InvalidConfigError: If the row tolerance is outside [0, 1) or the
                stream selector is not registered
        """
        from .selection.registry import stream_selector_registry

        try:
            tolerance = float(self.row_tolerance)
        except (TypeError, ValueError) as e:
            raise InvalidConfigError(f"row_tolerance must be a number, got {self.row_tolerance!r}") from e

        if not 0.0 <= tolerance < 1.0:
            raise InvalidConfigError(f"row_tolerance must be in [0, 1), got {tolerance}")
        self.row_tolerance = tolerance

        if not stream_selector_registry.is_available(self.stream_selector):
            available = ", ".join(stream_selector_registry.list_available())
            raise InvalidConfigError(f"Unknown stream selector: {self.stream_selector}. Available: {available}")

        logger.info(
            "Configuration validated: stream_selector=%s, row_tolerance=%s, use_intersects=%s",
            self.stream_selector,
            self.row_tolerance,
            self.use_intersects,
        )

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, key) for key in self._FIELDS}
