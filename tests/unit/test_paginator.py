"""
Unit tests for pagination and cursor navigation.
"""

import math
import random

import pytest

from polyglot_reader.exceptions import InvalidPageSizeError
from polyglot_reader.paginator import (
    DEFAULT_LINES_PER_PAGE,
    Page,
    PageCursor,
    advance,
    page_count,
    paginate,
    split_lines,
    validate_page_size,
)


def sample_texts():
    rng = random.Random(7)
    texts = ["", "one line", "trailing\n", "\n", "\n\n\n", "a\r\nb\r\nc", "\n".join("x" * 85)]
    for _ in range(8):
        n = rng.randint(0, 120)
        texts.append("\n".join(rng.choice(["", "word", "two words", "\r", "中文"]) for _ in range(n)))
    return texts


# =============================================================================
# Line splitting
# =============================================================================


class TestSplitLines:
    """Splitting happens on "\\n" only."""

    def test_empty_is_one_line(self):
        assert split_lines("") == [""]

    def test_trailing_newline(self):
        assert split_lines("a\nb\n") == ["a", "b", ""]

    def test_carriage_return_preserved(self):
        assert split_lines("a\r\nb") == ["a\r", "b"]

    def test_other_line_breaks_not_split(self):
        """Unicode line separators are not page breaks."""
        assert split_lines("a\u2028b\x0bc") == ["a\u2028b\x0bc"]


# =============================================================================
# Pagination
# =============================================================================


class TestPaginate:
    """Tests for page partitioning."""

    def test_85_lines_at_40(self, numbered_text):
        pages = paginate(numbered_text(85), 40)

        assert [p.line_count for p in pages] == [40, 40, 5]
        assert [p.index for p in pages] == [0, 1, 2]
        assert pages[0].content.startswith("line 0\n")
        assert pages[2].content.endswith("line 84")

    def test_empty_text_single_empty_page(self):
        for size in (1, 40, 1000):
            assert paginate("", size) == (Page(index=0, content=""),)

    def test_exact_multiple(self, numbered_text):
        pages = paginate(numbered_text(80), 40)
        assert [p.line_count for p in pages] == [40, 40]

    def test_one_line_per_page(self):
        pages = paginate("a\nb\nc", 1)
        assert [p.content for p in pages] == ["a", "b", "c"]

    def test_page_larger_than_text(self):
        pages = paginate("a\nb", 40)
        assert pages == (Page(index=0, content="a\nb"),)

    def test_default_page_size(self, numbered_text):
        assert DEFAULT_LINES_PER_PAGE == 40
        assert len(paginate(numbered_text(41))) == 2

    def test_returns_immutable_pages(self):
        pages = paginate("a\nb", 1)
        assert isinstance(pages, tuple)
        with pytest.raises(AttributeError):
            pages[0].content = "changed"  # type: ignore[misc]

    @pytest.mark.parametrize("size", [1, 2, 3, 7, 40])
    @pytest.mark.parametrize("text", sample_texts())
    def test_lines_round_trip(self, text, size):
        """Concatenated page lines reproduce the original lines."""
        pages = paginate(text, size)

        rebuilt = [line for page in pages for line in split_lines(page.content)]

        assert rebuilt == split_lines(text)
        assert "\n".join(page.content for page in pages) == text

    @pytest.mark.parametrize("size", [1, 3, 40])
    @pytest.mark.parametrize("text", sample_texts())
    def test_page_count_law(self, text, size):
        expected = max(1, math.ceil(len(split_lines(text)) / size))

        assert len(paginate(text, size)) == expected
        assert page_count(text, size) == expected

    def test_only_last_page_short(self, numbered_text):
        pages = paginate(numbered_text(101), 10)
        assert all(p.line_count == 10 for p in pages[:-1])
        assert pages[-1].line_count == 1


class TestValidatePageSize:
    """Boundary validation of lines-per-page."""

    def test_valid_returned(self):
        assert validate_page_size(1) == 1
        assert validate_page_size(500) == 500

    @pytest.mark.parametrize("value", [0, -1, -40])
    def test_below_one_rejected(self, value):
        with pytest.raises(InvalidPageSizeError, match=">= 1"):
            validate_page_size(value)

    @pytest.mark.parametrize("value", [2.5, "40", None, True])
    def test_non_integer_rejected(self, value):
        with pytest.raises(InvalidPageSizeError, match="integer"):
            validate_page_size(value)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_page_size(0)


# =============================================================================
# Cursor
# =============================================================================


class TestPageCursor:
    """Cursor invariants and labels."""

    def test_defaults(self):
        cursor = PageCursor()

        assert cursor.current_index == 0
        assert cursor.page_count == 1
        assert cursor.is_first and cursor.is_last

    def test_for_pages(self, numbered_text):
        cursor = PageCursor.for_pages(paginate(numbered_text(85), 40))
        assert cursor == PageCursor(current_index=0, page_count=3)

    def test_for_no_pages(self):
        assert PageCursor.for_pages(()).page_count == 1

    def test_label(self):
        assert PageCursor(current_index=1, page_count=3).label == "Page 2 / 3"

    def test_zero_pages_rejected(self):
        with pytest.raises(ValueError, match="page_count"):
            PageCursor(current_index=0, page_count=0)

    @pytest.mark.parametrize("index", [-1, 3])
    def test_index_out_of_bounds_rejected(self, index):
        with pytest.raises(ValueError, match="current_index"):
            PageCursor(current_index=index, page_count=3)


class TestAdvance:
    """Clamped forward/back navigation."""

    def test_forward_and_back(self):
        cursor = PageCursor(current_index=0, page_count=3)

        cursor = advance(cursor, +1)
        assert cursor.current_index == 1
        cursor = advance(cursor, +1)
        assert cursor.current_index == 2
        cursor = advance(cursor, -1)
        assert cursor.current_index == 1

    def test_clamped_at_end(self):
        last = PageCursor(current_index=2, page_count=3)
        assert advance(last, +1) is last

    def test_clamped_at_start(self):
        first = PageCursor(current_index=0, page_count=3)
        assert advance(first, -1) is first

    def test_single_page_never_moves(self):
        cursor = PageCursor()
        assert advance(advance(cursor, +1), -1) == cursor

    def test_no_wraparound(self):
        cursor = PageCursor(current_index=0, page_count=2)
        for _ in range(5):
            cursor = advance(cursor, +1)
        assert cursor.current_index == 1

    @pytest.mark.parametrize("step", [0, 2, -2])
    def test_invalid_step(self, step):
        with pytest.raises(ValueError, match="step"):
            advance(PageCursor(), step)
