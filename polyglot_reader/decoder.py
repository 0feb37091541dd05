"""
Byte-to-text decoding with codec auto-detection.

Detection is deliberately simple: strict UTF-8 first, then each legacy
codec from the codec table in order, accepting the first whose decode
contains no U+FFFD replacement character. If nothing validates, the
bytes are decoded as lossy UTF-8. There is no statistical scoring and
no BOM sniffing.

decode() is total. Every byte buffer, including b"", produces a
DecodedDocument. File access lives in read_source(), which reports an
unreadable file as None instead of bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from polyglot_reader.codec_table import (
    CODEC_TABLE,
    UNKNOWN_CODEC_NAME,
    UTF8,
    CodecEntry,
    find_entry,
)

logger = logging.getLogger(__name__)

REPLACEMENT_CHARACTER = "\ufffd"


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class DecodedDocument:
    """
    Decoded text plus the codec that produced it.

    Attributes:
        text: The decoded text.
        codec: Python codec identifier that was resolved or requested.
        codec_name: Display name from the codec table.
        degraded: True when the text came from the lossy UTF-8 fallback.
            An explicit codec that failed keeps its own codec and name,
            so this flag is the only sign that the text is not what the
            label says.
    """

    text: str
    codec: str
    codec_name: str
    degraded: bool = False

    @property
    def has_replacements(self) -> bool:
        """Whether the text contains U+FFFD replacement characters."""
        return REPLACEMENT_CHARACTER in self.text


# =============================================================================
# DECODING PRIMITIVES
# =============================================================================


def _decode_strict(data: bytes, codec: str) -> str | None:
    """Decode or return None; unknown or unusable codecs count as failures."""
    try:
        return data.decode(codec)
    except (ValueError, LookupError):
        return None


def _decode_candidate(data: bytes, codec: str) -> str | None:
    """
    Decode with substitution and apply the replacement-character gate.

    Returns the text if it contains no U+FFFD, otherwise None.
    """
    try:
        text = data.decode(codec, errors="replace")
    except (ValueError, LookupError) as e:
        logger.debug("Skipping codec %r: %s", codec, e)
        return None
    if REPLACEMENT_CHARACTER in text:
        return None
    return text


def _decode_lossy(data: bytes) -> str:
    return data.decode(UTF8.codec, errors="replace")


def _is_utf8(entry: CodecEntry) -> bool:
    return entry.canonical == UTF8.canonical


# =============================================================================
# DETECTION
# =============================================================================


def _detect(data: bytes, table: Sequence[CodecEntry]) -> tuple[CodecEntry, str, bool]:
    """Run detection and return (entry, text, degraded)."""
    text = _decode_strict(data, UTF8.codec)
    if text is not None:
        return UTF8, text, False

    for entry in table:
        if _is_utf8(entry):
            continue
        text = _decode_candidate(data, entry.codec)
        if text is not None:
            logger.debug("Detected %s for %d bytes", entry.name, len(data))
            return entry, text, False
        logger.debug("Rejected %s", entry.name)

    logger.debug("No codec validated %d bytes, using lossy UTF-8", len(data))
    return UTF8, _decode_lossy(data), True


def detect_codec(data: bytes, table: Sequence[CodecEntry] = CODEC_TABLE) -> CodecEntry:
    """
    Pick the codec that decode() would use for `data`.

    Args:
        data: Raw bytes.
        table: Ordered codec table; earlier entries win ties.

    Returns:
        The winning table entry, or the UTF-8 entry when no candidate
        validates and the lossy fallback applies.
    """
    entry, _, _ = _detect(data, table)
    return entry


def decode(
    data: bytes,
    codec: str | None = None,
    table: Sequence[CodecEntry] = CODEC_TABLE,
) -> DecodedDocument:
    """
    Decode raw bytes into a DecodedDocument. Never raises.

    Without `codec`, runs auto-detection:
    1. Strict UTF-8, regardless of where UTF-8 sits in the table.
    2. Each remaining table entry in order; the first decode free of
       replacement characters is accepted.
    3. Lossy UTF-8, flagged as degraded.

    With `codec`, decodes strictly with that codec. If that fails the
    text falls back to lossy UTF-8, but the requested codec and its
    display name are still reported, with degraded=True.

    Args:
        data: Raw bytes, already read by the caller.
        codec: Explicit codec override, typically from the codec selector.
        table: Ordered codec table used for detection and display names.

    Returns:
        The decoded document.

    Example:
        >>> decode("héllo".encode("utf-8")).codec_name
        'UTF-8'
        >>> decode("中文".encode("gbk")).codec_name
        'GB18030'
    """
    if codec is None:
        entry, text, degraded = _detect(data, table)
        return DecodedDocument(
            text=text, codec=entry.codec, codec_name=entry.name, degraded=degraded
        )

    entry = find_entry(codec, table)
    name = entry.name if entry is not None else UNKNOWN_CODEC_NAME
    resolved = entry.codec if entry is not None else codec

    text = _decode_strict(data, resolved)
    if text is not None:
        return DecodedDocument(text=text, codec=resolved, codec_name=name)

    logger.warning("Bytes are not valid %s; showing lossy UTF-8 instead", name)
    return DecodedDocument(
        text=_decode_lossy(data), codec=resolved, codec_name=name, degraded=True
    )


# =============================================================================
# FILE ACCESS
# =============================================================================


def read_source(path: str | Path) -> bytes | None:
    """
    Read a whole file into memory.

    The handle is closed before returning. Unreadable sources are
    reported as None (and logged), never as bytes.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            return f.read()
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def decode_file(
    path: str | Path,
    codec: str | None = None,
    table: Sequence[CodecEntry] = CODEC_TABLE,
) -> DecodedDocument | None:
    """Read and decode a file; None if the file cannot be read."""
    data = read_source(path)
    if data is None:
        return None
    return decode(data, codec, table)
