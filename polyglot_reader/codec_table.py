"""
The ordered table of codecs offered for detection and selection.

Order is load-bearing: auto-detection tries entries front to back and
the first one that validates wins. The table is a tuple, never a set
or mapping, so iteration order cannot drift.
"""

from __future__ import annotations

import codecs
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class CodecEntry:
    """A display name paired with a Python codec identifier."""

    name: str  # Shown in the codec selector, e.g. "Shift_JIS"
    codec: str  # Anything codecs.lookup() accepts, e.g. "shift_jis"

    @property
    def canonical(self) -> str:
        """Normalized codec name used for comparisons."""
        return canonical_codec(self.codec)


UTF8 = CodecEntry("UTF-8", "utf-8")

CODEC_TABLE: tuple[CodecEntry, ...] = (
    UTF8,
    CodecEntry("GB18030", "gb18030"),
    CodecEntry("GBK", "gbk"),
    CodecEntry("Shift_JIS", "shift_jis"),
    CodecEntry("EUC-JP", "euc_jp"),
    CodecEntry("EUC-KR", "euc_kr"),
    CodecEntry("Big5", "big5"),
    CodecEntry("ISO-8859-1", "latin-1"),
    CodecEntry("Windows-1252", "cp1252"),
)

UNKNOWN_CODEC_NAME = "Unknown"


def canonical_codec(codec: str) -> str:
    """
    Return Python's canonical name for a codec.

    "UTF8", "utf_8" and "utf-8" all map to "utf-8". Names Python does
    not recognize, or rejects outright (e.g. an embedded NUL), are
    returned lowercased so they still compare consistently.
    """
    try:
        return codecs.lookup(codec).name
    except (LookupError, ValueError):
        return codec.lower()


def codec_names(table: Sequence[CodecEntry] = CODEC_TABLE) -> list[str]:
    """Display names in table order, for populating a selection control."""
    return [entry.name for entry in table]


def find_entry(
    codec: str,
    table: Sequence[CodecEntry] = CODEC_TABLE,
) -> CodecEntry | None:
    """
    Find the first table entry whose codec matches.

    Args:
        codec: Codec identifier in any spelling Python accepts.
        table: Ordered codec table to search.

    Returns:
        The matching entry, or None if the codec is not in the table.
    """
    wanted = canonical_codec(codec)
    for entry in table:
        if entry.canonical == wanted:
            return entry
    return None


def entry_at(index: int, table: Sequence[CodecEntry] = CODEC_TABLE) -> CodecEntry:
    """
    Entry for row `index` of a selection control.

    Raises:
        IndexError: If index is outside the table.
    """
    if not 0 <= index < len(table):
        raise IndexError(f"codec index {index} out of range (0..{len(table) - 1})")
    return table[index]
