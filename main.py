#!/usr/bin/env python3
"""
Main entry point for blockselect
Provides command-line interface for running a block-aware selection against a JSON page dump
"""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import TYPE_CHECKING

# Note: blockselect imports are moved to function-level
# to improve CLI startup time (--help, argument validation, etc.)
if TYPE_CHECKING:
    from blockselect import NormalizedPoint, SelectionConfig, TextPage


def parse_point(point_str: str) -> NormalizedPoint | None:
    """Parse a point string like '0.1,0.25' into a NormalizedPoint.

    Examples:
        >>> parse_point("0.1,0.25")
        NormalizedPoint(x=0.1, y=0.25)
        >>> parse_point("0.1") is None
        True
    """
    from blockselect.types import NormalizedPoint  # noqa: PLC0415

    try:
        parts = point_str.split(",")
        if len(parts) != 2:  # noqa: PLR2004
            raise ValueError("Point must have exactly two comma-separated coordinates")
        return NormalizedPoint(x=float(parts[0].strip()), y=float(parts[1].strip()))
    except ValueError as exc:
        logging.getLogger(__name__).error("Invalid point format '%s': %s", point_str, exc)
        return None


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Setup logging configuration, optionally mirroring to a log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def main() -> int:
    """CLI entry point."""
    parser = _build_argument_parser()
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    return _execute_command(args, logger)


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="blockselect - Select text between two points of a page, following layout block reading order",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=textwrap.dedent(
            """
            Examples:
              # Select from the top of the left column to the middle of the right column
              python main.py page.json --start 0.1,0.1 --end 0.9,0.5

              # Show the block ids the selection spans
              python main.py page.json --start 0.1,0.4 --end 0.9,0.7 --show-blocks

              # Different fallback selector and intersection matching
              python main.py page.json --start 0.1,0.1 --end 0.4,0.3 \\
                  --selector document-order --intersects

              # Custom configuration file
              python main.py page.json --start 0.1,0.1 --end 0.9,0.9 --config my_config.yaml
            """
        ),
    )

    parser.add_argument("page", type=str, help="JSON page dump with 'words' and optional 'blocks'")
    parser.add_argument(
        "--start",
        type=str,
        required=True,
        help='Selection start point in normalized coordinates "x,y" (e.g., --start 0.1,0.25)',
    )
    parser.add_argument(
        "--end",
        type=str,
        required=True,
        help='Selection end point in normalized coordinates "x,y" (e.g., --end 0.9,0.6)',
    )
    parser.add_argument(
        "--config",
        type=str,
        help="YAML configuration file (default: settings/config.yaml when present)",
    )
    parser.add_argument(
        "--show-blocks",
        action="store_true",
        help="Also print the ids of the layout blocks the selection spans",
    )

    # Selection options (override configuration file values)
    selection_group = parser.add_argument_group("Selection")
    selection_group.add_argument(
        "--selector",
        type=str,
        help="Stream selector for pages without blocks and within one block (options: geometric, document-order)",
    )
    selection_group.add_argument(
        "--row-tolerance",
        type=float,
        help="Vertical-center distance under which text runs share a row (default: 0.01)",
    )
    selection_group.add_argument(
        "--intersects",
        action="store_true",
        help="Extract entities intersecting the selection area instead of entities centered in it",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log records to this file")

    return parser


def _load_config(args: argparse.Namespace, logger: logging.Logger) -> SelectionConfig | None:
    from blockselect.config import SelectionConfig  # noqa: PLC0415
    from blockselect.constants import DEFAULT_CONFIG_PATH  # noqa: PLC0415
    from blockselect.exceptions import ConfigurationError  # noqa: PLC0415

    try:
        if args.config:
            base = SelectionConfig.from_yaml(args.config, strict=True)
        else:
            base = SelectionConfig.from_yaml(DEFAULT_CONFIG_PATH)
        config = SelectionConfig.from_cli(args, base=base)
        config.validate()
    except ConfigurationError as exc:
        logger.error("Configuration error: %s", exc)
        return None
    return config


def _execute_command(args: argparse.Namespace, logger: logging.Logger) -> int:
    start = parse_point(args.start)
    end = parse_point(args.end)
    if start is None or end is None:
        return 1

    config = _load_config(args, logger)
    if config is None:
        return 1

    from blockselect.exceptions import FileError  # noqa: PLC0415
    from blockselect.io import load_text_page  # noqa: PLC0415

    try:
        page = load_text_page(args.page, config=config)
    except FileError as exc:
        logger.error("Failed to load page dump: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 1

    _run_selection(page, start, end, config, args.show_blocks, logger)
    return 0


def _run_selection(
    page: TextPage,
    start: NormalizedPoint,
    end: NormalizedPoint,
    config: SelectionConfig,
    show_blocks: bool,
    logger: logging.Logger,
) -> None:
    from blockselect.types import TextSelection  # noqa: PLC0415

    selection = TextSelection(start=start, end=end)
    logger.info(
        "Selecting from (%.3f, %.3f) to (%.3f, %.3f) with %s selector",
        start.x,
        start.y,
        end.x,
        end.y,
        config.stream_selector,
    )
    if not page.has_layout_blocks():
        logger.info("Page has no layout blocks, selection follows page geometry")

    area = page.text_area(selection)
    text = page.text(area, use_intersects=config.use_intersects) if area is not None else ""
    print(text)

    if show_blocks:
        block_ids = page.block_ids_for_selection(selection)
        print(f"Blocks: {', '.join(block_ids) if block_ids else '(none)'}")


if __name__ == "__main__":
    sys.exit(main())
