"""
Line-aligned pagination of decoded text.

Text is split on "\\n" only, grouped into runs of `lines_per_page`
lines, and each run is rejoined with "\\n". Pages are rebuilt from
scratch whenever the text or the page size changes; nothing here
mutates a page or patches a page sequence.

Navigation is a frozen PageCursor moved by advance(), which clamps at
both ends instead of wrapping.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from polyglot_reader.exceptions import InvalidPageSizeError

logger = logging.getLogger(__name__)

DEFAULT_LINES_PER_PAGE = 40


@dataclass(frozen=True)
class Page:
    """A contiguous run of original lines."""

    index: int  # 0-based position in the page sequence
    content: str  # Lines joined with "\n"

    @property
    def line_count(self) -> int:
        """Number of lines on this page (an empty page has one empty line)."""
        return self.content.count("\n") + 1


@dataclass(frozen=True)
class PageCursor:
    """
    Position within a page sequence.

    Invariants: page_count >= 1 and 0 <= current_index < page_count.
    """

    current_index: int = 0
    page_count: int = 1

    def __post_init__(self):
        """Validate cursor bounds."""
        if self.page_count < 1:
            raise ValueError(f"page_count must be >= 1, got {self.page_count}")
        if not 0 <= self.current_index < self.page_count:
            raise ValueError(
                f"current_index must be in [0, {self.page_count}), got {self.current_index}"
            )

    @classmethod
    def for_pages(cls, pages: Sequence[Page]) -> PageCursor:
        """Cursor on the first of `pages`."""
        return cls(current_index=0, page_count=max(1, len(pages)))

    @property
    def is_first(self) -> bool:
        return self.current_index == 0

    @property
    def is_last(self) -> bool:
        return self.current_index == self.page_count - 1

    @property
    def label(self) -> str:
        """Pager label, e.g. "Page 2 / 3"."""
        return f"Page {self.current_index + 1} / {self.page_count}"


def validate_page_size(lines_per_page: int) -> int:
    """
    Boundary check for a lines-per-page value.

    Args:
        lines_per_page: Requested page size.

    Returns:
        The value unchanged, so it can be used inline.

    Raises:
        InvalidPageSizeError: If the value is not an integer >= 1.
    """
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(lines_per_page, bool) or not isinstance(lines_per_page, int):
        raise InvalidPageSizeError(
            f"lines_per_page must be an integer, got {lines_per_page!r}"
        )
    if lines_per_page < 1:
        raise InvalidPageSizeError(f"lines_per_page must be >= 1, got {lines_per_page}")
    return lines_per_page


def split_lines(text: str) -> list[str]:
    """
    Split on the newline character only.

    "\\r" is left inside the lines. The empty string is a single empty
    line, and a trailing newline produces a trailing empty line.
    """
    return text.split("\n")


def page_count(text: str, lines_per_page: int) -> int:
    """Number of pages paginate() would produce, without building them."""
    lines = len(split_lines(text))
    return max(1, -(-lines // lines_per_page))


def paginate(text: str, lines_per_page: int = DEFAULT_LINES_PER_PAGE) -> tuple[Page, ...]:
    """
    Partition text into pages of `lines_per_page` lines.

    The last page may be shorter. Empty text yields exactly one empty
    page. The caller is responsible for passing a valid page size
    (see validate_page_size).

    Args:
        text: Decoded document text.
        lines_per_page: Lines per page, >= 1.

    Returns:
        Pages in order, indexed from 0.

    Example:
        >>> [p.line_count for p in paginate("\\n".join("x" * 85), 40)]
        [40, 40, 5]
    """
    lines = split_lines(text)
    pages = tuple(
        Page(index=i, content="\n".join(lines[start : start + lines_per_page]))
        for i, start in enumerate(range(0, len(lines), lines_per_page))
    )
    if not pages:
        pages = (Page(index=0, content=""),)
    logger.debug("Paginated %d lines into %d pages", len(lines), len(pages))
    return pages


def advance(cursor: PageCursor, step: int) -> PageCursor:
    """
    Move one page forward (+1) or back (-1).

    Moving past either end returns the cursor unchanged.

    Raises:
        ValueError: If step is not +1 or -1.
    """
    if step not in (1, -1):
        raise ValueError(f"step must be +1 or -1, got {step}")
    target = cursor.current_index + step
    if not 0 <= target < cursor.page_count:
        return cursor
    return PageCursor(current_index=target, page_count=cursor.page_count)
