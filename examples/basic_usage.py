#!/usr/bin/env python3
"""
Basic Polyglot Reader Usage Example

This example demonstrates the core workflow:
1. Decode a file with codec auto-detection
2. Override the codec explicitly
3. Paginate and navigate
4. Drive a full reader session and persist it
"""

import sys
from pathlib import Path

from polyglot_reader import (
    PageCursor,
    ReaderState,
    advance,
    codec_names,
    decode_file,
    next_page,
    open_document,
    paginate,
    save_state,
    select_codec,
    set_lines_per_page,
    window_title,
)


def main(path: Path) -> None:
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Auto-detection
    # ─────────────────────────────────────────────────────────────────────────

    doc = decode_file(path)
    if doc is None:
        print(f"Could not open {path}")
        return

    print(f"Decoded {path.name} as {doc.codec_name}")
    print(f"  Characters: {len(doc.text):,}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Explicit codec
    # ─────────────────────────────────────────────────────────────────────────

    print(f"Available codecs: {', '.join(codec_names())}")

    forced = decode_file(path, "shift_jis")
    if forced.degraded:
        print("  Not valid Shift_JIS; showing lossy UTF-8 under the Shift_JIS label")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Pages and cursor
    # ─────────────────────────────────────────────────────────────────────────

    pages = paginate(doc.text, lines_per_page=40)
    cursor = PageCursor.for_pages(pages)
    cursor = advance(cursor, +1)
    print(f"{cursor.label}: {pages[cursor.current_index].line_count} lines")

    # ─────────────────────────────────────────────────────────────────────────
    # 4. Reader session
    # ─────────────────────────────────────────────────────────────────────────

    state = ReaderState.restore()
    state = open_document(state, path)
    state = set_lines_per_page(state, 60)
    state = next_page(state)
    state = select_codec(state, 0)  # UTF-8
    print(window_title(state), "-", state.cursor.label)

    save_state(state)


if __name__ == "__main__":
    main(Path(sys.argv[1]))
