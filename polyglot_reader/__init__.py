"""
Polyglot Reader: decode text files in unknown legacy encodings and page through them.

The engine turns an arbitrary byte buffer into displayable text (with
the codec that produced it) and slices that text into fixed-size,
line-aligned pages with clamped navigation. Session helpers hold the
state a reader window needs: config, library, open document, cursor.

Example:
    >>> import polyglot_reader
    >>> doc = polyglot_reader.decode(open("notes.txt", "rb").read())
    >>> doc.codec_name
    'Shift_JIS'
    >>> pages = polyglot_reader.paginate(doc.text, lines_per_page=40)
    >>> cursor = polyglot_reader.PageCursor.for_pages(pages)
    >>> cursor = polyglot_reader.advance(cursor, +1)
    >>> cursor.label
    'Page 2 / 3'
"""

from polyglot_reader.codec_table import (
    CODEC_TABLE,
    UTF8,
    CodecEntry,
    codec_names,
    entry_at,
    find_entry,
)
from polyglot_reader.config import ReaderConfig, load_config, save_config
from polyglot_reader.decoder import (
    DecodedDocument,
    decode,
    decode_file,
    detect_codec,
    read_source,
)
from polyglot_reader.exceptions import (
    ConfigurationError,
    InvalidPageSizeError,
    PolyglotReaderError,
    UnreadableSourceError,
)
from polyglot_reader.library import TEXT_EXTENSIONS, Library, is_text_file, scan_directory
from polyglot_reader.paginator import (
    Page,
    PageCursor,
    advance,
    page_count,
    paginate,
    split_lines,
    validate_page_size,
)
from polyglot_reader.session import (
    ReaderState,
    add_to_library,
    clear_library,
    close_document,
    current_page,
    next_page,
    open_document,
    open_library_entry,
    prev_page,
    remove_from_library,
    save_state,
    select_codec,
    set_config,
    set_lines_per_page,
    window_title,
)

__version__ = "0.1.0"
__all__ = [
    # Codec table
    "CodecEntry",
    "CODEC_TABLE",
    "UTF8",
    "codec_names",
    "find_entry",
    "entry_at",
    # Decoding
    "DecodedDocument",
    "decode",
    "decode_file",
    "detect_codec",
    "read_source",
    # Pagination
    "Page",
    "PageCursor",
    "split_lines",
    "paginate",
    "page_count",
    "advance",
    "validate_page_size",
    # Configuration
    "ReaderConfig",
    "load_config",
    "save_config",
    # Library
    "Library",
    "TEXT_EXTENSIONS",
    "is_text_file",
    "scan_directory",
    # Session
    "ReaderState",
    "open_document",
    "open_library_entry",
    "select_codec",
    "close_document",
    "set_lines_per_page",
    "set_config",
    "next_page",
    "prev_page",
    "current_page",
    "add_to_library",
    "remove_from_library",
    "clear_library",
    "save_state",
    "window_title",
    # Exceptions
    "PolyglotReaderError",
    "ConfigurationError",
    "InvalidPageSizeError",
    "UnreadableSourceError",
]
