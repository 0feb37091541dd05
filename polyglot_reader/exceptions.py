"""
Exception classes for Polyglot Reader.

All Polyglot Reader exceptions inherit from PolyglotReaderError,
making it easy to catch all library errors. Decoding itself never
raises: there is no "decoding failed" error.

Example:
    >>> try:
    ...     state = polyglot_reader.open_document(state, "missing.txt")
    ... except polyglot_reader.UnreadableSourceError as e:
    ...     print(f"File could not be opened: {e.path}")
    ... except polyglot_reader.PolyglotReaderError as e:
    ...     print(f"Reader error: {e}")
"""

from __future__ import annotations

from pathlib import Path


class PolyglotReaderError(Exception):
    """
    Base exception for all Polyglot Reader errors.

    Catch this to handle any Polyglot Reader-specific error.
    """

    pass


class ConfigurationError(PolyglotReaderError, ValueError):
    """
    Raised for invalid configuration values.

    Example:
        >>> ReaderConfig(font_size=200)
        ConfigurationError: font_size must be between 8 and 72, got 200
    """

    pass


class InvalidPageSizeError(ConfigurationError):
    """
    Raised when a lines-per-page value is below 1.

    Rejected at the call boundary, before pagination runs.
    """

    pass


class UnreadableSourceError(PolyglotReaderError):
    """
    Raised when a document's bytes cannot be obtained.

    The reader state that was current before the failed open is
    left unchanged.
    """

    def __init__(self, path: str | Path, reason: str = "file could not be opened"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
