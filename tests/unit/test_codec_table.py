"""
Unit tests for the codec table.
"""

import codecs

import pytest

from polyglot_reader.codec_table import (
    CODEC_TABLE,
    UNKNOWN_CODEC_NAME,
    UTF8,
    CodecEntry,
    canonical_codec,
    codec_names,
    entry_at,
    find_entry,
)


class TestCodecTable:
    """Tests for the fixed table contents."""

    def test_order(self):
        """Display names follow detection priority."""
        assert codec_names() == [
            "UTF-8",
            "GB18030",
            "GBK",
            "Shift_JIS",
            "EUC-JP",
            "EUC-KR",
            "Big5",
            "ISO-8859-1",
            "Windows-1252",
        ]

    def test_is_ordered_sequence(self):
        """The table is a tuple, not a set or mapping."""
        assert isinstance(CODEC_TABLE, tuple)

    def test_utf8_first(self):
        assert CODEC_TABLE[0] is UTF8

    def test_every_codec_known_to_python(self):
        """Every entry names a codec Python can look up."""
        for entry in CODEC_TABLE:
            codecs.lookup(entry.codec)

    def test_entries_immutable(self):
        with pytest.raises(AttributeError):
            UTF8.name = "other"  # type: ignore[misc]


class TestFindEntry:
    """Tests for codec lookup by identifier."""

    @pytest.mark.parametrize("spelling", ["utf-8", "UTF8", "utf_8", "U8"])
    def test_utf8_aliases(self, spelling):
        assert find_entry(spelling) is UTF8

    def test_shift_jis_alias(self):
        assert find_entry("sjis").name == "Shift_JIS"

    def test_latin1_aliases(self):
        assert find_entry("iso-8859-1").name == "ISO-8859-1"
        assert find_entry("latin1").name == "ISO-8859-1"

    def test_not_in_table(self):
        """A real codec absent from the table is not found."""
        assert find_entry("koi8_r") is None

    def test_codec_name_with_nul(self):
        """Names codecs.lookup rejects with ValueError are simply not found."""
        assert find_entry("utf-8\x00") is None

    def test_unknown_codec(self):
        """An unknown codec name returns None instead of raising."""
        assert find_entry("no-such-codec") is None

    def test_custom_table(self):
        table = (CodecEntry("Cyrillic", "koi8_r"),)
        assert find_entry("koi8-r", table).name == "Cyrillic"

    def test_canonical_unknown_lowercased(self):
        assert canonical_codec("No-Such-Codec") == "no-such-codec"

    def test_unknown_name_constant(self):
        assert UNKNOWN_CODEC_NAME == "Unknown"


class TestEntryAt:
    """Tests for selection by row index."""

    def test_first_and_last(self):
        assert entry_at(0) is UTF8
        assert entry_at(len(CODEC_TABLE) - 1).name == "Windows-1252"

    @pytest.mark.parametrize("index", [-1, len(CODEC_TABLE)])
    def test_out_of_range(self, index):
        with pytest.raises(IndexError, match="out of range"):
            entry_at(index)
