"""
Reader session state and the transitions a reader UI drives.

ReaderState bundles the config, the library, the open document and
its pages and cursor into one immutable value. Each operation takes a
state and returns a new one; a failed operation raises and the state
the caller holds stays as it was. Persisting the config and library
is explicit (save_state), so the transitions themselves touch the
file system only to read the document being opened.

Example:
    >>> state = ReaderState.initial()
    >>> state = open_document(state, "novel.txt")
    >>> state.cursor.label
    'Page 1 / 12'
    >>> state = next_page(state)
    >>> window_title(state)
    'Polyglot Reader - novel.txt [GB18030]'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from polyglot_reader.codec_table import CODEC_TABLE, entry_at
from polyglot_reader.config import ReaderConfig, load_config, save_config
from polyglot_reader.decoder import DecodedDocument, decode, read_source
from polyglot_reader.exceptions import UnreadableSourceError
from polyglot_reader.library import Library
from polyglot_reader.paginator import (
    Page,
    PageCursor,
    advance,
    paginate,
    validate_page_size,
)

logger = logging.getLogger(__name__)

APP_TITLE = "Polyglot Reader"

_EMPTY_PAGES: tuple[Page, ...] = (Page(index=0, content=""),)


@dataclass(frozen=True)
class ReaderState:
    """
    Everything a reader window shows, as one value.

    Each state holds its own copy of the library, taken on construction
    (including every dataclasses.replace), so editing one state's
    `library` in place never reaches an earlier or later state. Prefer
    add_to_library / remove_from_library, which return a new state.
    """

    config: ReaderConfig = field(default_factory=ReaderConfig)
    library: Library = field(default_factory=Library)
    path: Path | None = None
    document: DecodedDocument | None = None
    pages: tuple[Page, ...] = _EMPTY_PAGES
    cursor: PageCursor = field(default_factory=PageCursor)

    def __post_init__(self):
        """Take a private copy of the library."""
        object.__setattr__(self, "library", self.library.copy())

    @classmethod
    def initial(
        cls,
        config: ReaderConfig | None = None,
        library: Library | None = None,
    ) -> ReaderState:
        """Starting state with no document open."""
        return cls(
            config=config or ReaderConfig(),
            library=library if library is not None else Library(),
        )

    @classmethod
    def restore(cls) -> ReaderState:
        """Starting state from the persisted config and library."""
        return cls.initial(load_config(), Library.load())

    @property
    def has_document(self) -> bool:
        return self.document is not None


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _with_document(state: ReaderState, path: Path, document: DecodedDocument) -> ReaderState:
    """Install a freshly decoded document, re-paginated, cursor at page 0."""
    pages = paginate(document.text, state.config.lines_per_page)
    return replace(
        state,
        path=path,
        document=document,
        pages=pages,
        cursor=PageCursor.for_pages(pages),
    )


def _read(path: Path) -> bytes:
    data = read_source(path)
    if data is None:
        raise UnreadableSourceError(path)
    return data


# =============================================================================
# DOCUMENT TRANSITIONS
# =============================================================================


def open_document(state: ReaderState, path: str | Path) -> ReaderState:
    """
    Open a file with codec auto-detection.

    The path is appended to the library if it is not already there.

    Raises:
        UnreadableSourceError: If the file cannot be read.
    """
    path = Path(path)
    document = decode(_read(path))
    logger.info("Opened %s as %s", path, document.codec_name)

    library = state.library.copy()
    library.add(path)

    return _with_document(replace(state, library=library), path, document)


def open_library_entry(state: ReaderState, index: int) -> ReaderState:
    """
    Open the library entry at `index`.

    Raises:
        IndexError: If index is outside the library.
        UnreadableSourceError: If the file cannot be read.
    """
    if not 0 <= index < len(state.library):
        raise IndexError(f"library index {index} out of range (0..{len(state.library) - 1})")
    return open_document(state, state.library[index])


def select_codec(state: ReaderState, index: int) -> ReaderState:
    """
    Re-read the open file with codec table entry `index`.

    A no-op when no file is open. The requested codec's name is kept
    even if the bytes had to fall back to lossy UTF-8; check
    `state.document.degraded` to tell the two apart.

    Raises:
        IndexError: If index is outside the codec table.
        UnreadableSourceError: If the file can no longer be read.
    """
    entry = entry_at(index, CODEC_TABLE)
    if state.path is None:
        return state
    document = decode(_read(state.path), entry.codec)
    return _with_document(state, state.path, document)


def close_document(state: ReaderState) -> ReaderState:
    """Drop the open document and return to a single empty page."""
    return replace(state, path=None, document=None, pages=_EMPTY_PAGES, cursor=PageCursor())


# =============================================================================
# PAGINATION TRANSITIONS
# =============================================================================


def set_lines_per_page(state: ReaderState, lines_per_page: int) -> ReaderState:
    """
    Change the page size, re-paginate from scratch and go to page 0.

    Raises:
        InvalidPageSizeError: If lines_per_page < 1.
    """
    validate_page_size(lines_per_page)
    config = state.config.with_lines_per_page(lines_per_page)
    text = state.document.text if state.document is not None else ""
    pages = paginate(text, lines_per_page)
    return replace(state, config=config, pages=pages, cursor=PageCursor.for_pages(pages))


def next_page(state: ReaderState) -> ReaderState:
    cursor = advance(state.cursor, +1)
    if cursor is state.cursor:
        return state
    return replace(state, cursor=cursor)


def prev_page(state: ReaderState) -> ReaderState:
    cursor = advance(state.cursor, -1)
    if cursor is state.cursor:
        return state
    return replace(state, cursor=cursor)


def current_page(state: ReaderState) -> Page:
    return state.pages[state.cursor.current_index]


# =============================================================================
# CONFIG & LIBRARY TRANSITIONS
# =============================================================================


def set_config(state: ReaderState, config: ReaderConfig) -> ReaderState:
    """
    Replace the config, re-paginating only if the page size changed.
    """
    if config.lines_per_page != state.config.lines_per_page:
        state = set_lines_per_page(state, config.lines_per_page)
    return replace(state, config=config)


def add_to_library(state: ReaderState, paths: Iterable[str | Path]) -> ReaderState:
    """Add dropped files or folders to the library."""
    library = state.library.copy()
    added = sum(library.add_path(path) for path in paths)
    if not added:
        return state
    return replace(state, library=library)


def remove_from_library(state: ReaderState, indices: Iterable[int]) -> ReaderState:
    """Remove library entries; the open document stays open."""
    library = state.library.copy()
    if not library.remove(indices):
        return state
    return replace(state, library=library)


def clear_library(state: ReaderState) -> ReaderState:
    """Empty the library and close the open document."""
    return close_document(replace(state, library=Library()))


def save_state(state: ReaderState) -> bool:
    """Persist the config and library. Returns True if both were written."""
    config_saved = save_config(state.config)
    library_saved = state.library.save()
    return config_saved and library_saved


# =============================================================================
# DISPLAY
# =============================================================================


def window_title(state: ReaderState) -> str:
    """Title bar text: app name, file name and codec display name."""
    if state.path is None or state.document is None:
        return APP_TITLE
    return f"{APP_TITLE} - {state.path.name} [{state.document.codec_name}]"
