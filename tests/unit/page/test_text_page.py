"""Tests for TextPage.

Tests cover:
- Layout block management (set, clear, snapshot semantics)
- text_area / text on the selection scenarios of multi-column pages
- Fallback behaviour on pages without blocks
- Block helpers exposed on the page
"""

from __future__ import annotations

from unittest.mock import Mock

from blockselect.config import SelectionConfig
from blockselect.page import TextPage
from blockselect.selection.stream import DocumentOrderStreamSelector
from blockselect.types import NormalizedPoint, NormalizedRect, RegularAreaRect, SelectionKind, TextSelection
from tests.builders import make_block, make_words


def _selection(start: tuple[float, float], end: tuple[float, float]) -> TextSelection:
    return TextSelection(NormalizedPoint(*start), NormalizedPoint(*end))


def _selected_text(page: TextPage, start: tuple[float, float], end: tuple[float, float]) -> str:
    area = page.text_area(_selection(start, end))
    assert area is not None
    return page.text(area)


class TestLayoutBlocks:
    """Test layout block management."""

    def test_page_without_blocks(self):
        page = TextPage()
        page.append("Hello", NormalizedRect(0.1, 0.1, 0.2, 0.15))
        page.append("World", NormalizedRect(0.3, 0.1, 0.4, 0.15))

        assert not page.has_layout_blocks()
        assert [word.text for word in page.words] == ["Hello", "World"]

    def test_set_and_clear(self, two_column_blocks):
        page = TextPage()

        page.set_layout_blocks(two_column_blocks)
        assert page.has_layout_blocks()

        page.set_layout_blocks([])
        assert not page.has_layout_blocks()

    def test_blocks_are_snapshotted(self, two_column_blocks):
        """Test that later changes to the caller's list do not reach the page."""
        page = TextPage()
        page.set_layout_blocks(two_column_blocks)

        two_column_blocks.clear()

        assert isinstance(page.layout_blocks, tuple)
        assert len(page.layout_blocks) == 2

    def test_replacement_is_whole(self, two_column_blocks):
        page = TextPage()
        page.set_layout_blocks(two_column_blocks)
        snapshot = page.layout_blocks

        page.set_layout_blocks([make_block("only", (0.0, 0.0, 1.0, 1.0), 0)])

        assert len(snapshot) == 2
        assert [block.id for block in page.layout_blocks] == ["only"]

    def test_find_block_containing(self, two_column_page):
        assert two_column_page.find_block_containing(NormalizedPoint(0.2, 0.5)).id == "left"
        assert two_column_page.find_block_containing(NormalizedRect(0.6, 0.1, 0.7, 0.2)).id == "right"
        assert two_column_page.find_block_containing(NormalizedPoint(0.5, 0.5)) is None

    def test_neighbours(self, two_column_page):
        left, right = two_column_page.layout_blocks

        assert two_column_page.get_next_block(left) is right
        assert two_column_page.get_previous_block(right) is left
        assert two_column_page.get_next_block(None) is None


class TestEntityHelpers:
    """Test should_include_entity and is_last_entity_in_block."""

    def test_should_include_entity(self, two_column_page):
        left, right = two_column_page.layout_blocks
        entity = two_column_page.words[0]

        assert two_column_page.should_include_entity(entity, left)
        assert not two_column_page.should_include_entity(entity, right)
        assert two_column_page.should_include_entity(entity, None)

    def test_is_last_entity_in_block(self, two_column_page):
        left, right = two_column_page.layout_blocks

        assert two_column_page.is_last_entity_in_block(2, left)
        assert not two_column_page.is_last_entity_in_block(1, left)
        assert two_column_page.is_last_entity_in_block(5, right)
        assert not two_column_page.is_last_entity_in_block(2, right)

    def test_is_last_entity_out_of_range(self, two_column_page):
        left = two_column_page.layout_blocks[0]

        assert not two_column_page.is_last_entity_in_block(-1, left)
        assert not two_column_page.is_last_entity_in_block(6, left)


class TestTwoColumnSelection:
    """Test selection on a two-column page."""

    def test_within_left_column(self, two_column_page):
        text = _selected_text(two_column_page, (0.1, 0.1), (0.25, 0.25))

        assert "Left" in text
        assert "Column" in text
        assert "Right" not in text
        assert text == "LeftColumn"

    def test_spanning_both_columns(self, two_column_page):
        text = _selected_text(two_column_page, (0.1, 0.1), (0.75, 0.35))

        assert text == "LeftColumnTextRightColumnContent"

    def test_block_ids(self, two_column_page):
        assert two_column_page.block_ids_for_selection(_selection((0.1, 0.1), (0.75, 0.35))) == ["left", "right"]


class TestFullWidthSelection:
    """Test selection around full-width header and footer blocks."""

    def test_left_bottom_to_footer(self, full_width_page):
        text = _selected_text(full_width_page, (0.1, 0.35), (0.9, 0.65))

        assert text == "LeftBotRightTopRightBotFooter"
        assert "Header" not in text
        assert "LeftTop" not in text

    def test_block_ids(self, full_width_page):
        ids = full_width_page.block_ids_for_selection(_selection((0.1, 0.35), (0.9, 0.65)))
        assert ids == ["left_bot", "right_top", "right_bot", "footer"]


class TestColumnJumpSelection:
    """Test selection jumping from a column bottom to the footer."""

    def test_left_bottom_to_footer(self, column_jump_page):
        text = _selected_text(column_jump_page, (0.1, 0.4), (0.9, 0.7))

        assert "L1" not in text
        assert "L2" not in text
        assert text == "L3R1R2R3Footer"

    def test_within_left_column(self, column_jump_page):
        assert _selected_text(column_jump_page, (0.1, 0.1), (0.35, 0.5)) == "L1L2L3"

    def test_select_reports_kind(self, column_jump_page):
        assert column_jump_page.select(_selection((0.1, 0.4), (0.9, 0.7))).kind is SelectionKind.CROSS_BLOCK
        assert column_jump_page.select(_selection((0.1, 0.1), (0.35, 0.5))).kind is SelectionKind.SAME_BLOCK


class TestLinePrecision:
    """Test that closely spaced lines are not merged."""

    def test_previous_line_not_pulled_in(self, tight_lines_page):
        text = _selected_text(tight_lines_page, (0.10, 0.124), (0.65, 0.155))

        assert "L1" not in text
        assert text == "L2R1"


class TestFallbackSelection:
    """Test pages without blocks."""

    def test_geometric_selection(self):
        page = TextPage(words=make_words(("Hello", (0.1, 0.1, 0.2, 0.15)), ("World", (0.3, 0.1, 0.4, 0.15))))

        assert _selected_text(page, (0.1, 0.12), (0.4, 0.12)) == "HelloWorld"

    def test_empty_fallback_returns_none(self):
        page = TextPage(words=make_words(("Hello", (0.1, 0.1, 0.2, 0.15))))

        assert page.text_area(_selection((0.15, 0.12), (0.15, 0.12))) is None

    def test_empty_block_selection_returns_area(self, two_column_blocks):
        """Test that a block-constrained selection with no text still yields an area."""
        page = TextPage()
        page.set_layout_blocks(two_column_blocks)

        area = page.text_area(_selection((0.1, 0.1), (0.3, 0.3)))

        assert isinstance(area, RegularAreaRect)
        assert area.is_empty

    def test_configured_selector(self):
        page = TextPage(config=SelectionConfig(stream_selector="document-order"))
        assert page.select(_selection((0.1, 0.1), (0.2, 0.2))).is_empty
        assert isinstance(page._selector.stream_selector, DocumentOrderStreamSelector)

    def test_injected_selector(self):
        stream = Mock()
        stream.name = "mock"
        stream.select.return_value = [0]
        page = TextPage(words=make_words(("Only", (0.1, 0.1, 0.2, 0.15))), stream_selector=stream)

        result = page.select(_selection((0.0, 0.0), (1.0, 1.0)))

        assert result.indices == [0]
        stream.select.assert_called_once()


class TestTextExtraction:
    """Test TextPage.text."""

    def test_whole_page_in_reading_order(self, column_jump_page):
        assert column_jump_page.text() == "L1L2L3R1R2R3Footer"

    def test_intersects(self):
        page = TextPage(words=make_words(("In", (0.1, 0.1, 0.2, 0.2)), ("Edge", (0.25, 0.1, 0.45, 0.2))))
        area = NormalizedRect(0.0, 0.0, 0.3, 0.3)

        assert page.text(area) == "In"
        assert page.text(area, use_intersects=True) == "InEdge"
