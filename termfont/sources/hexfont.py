"""
Unifont .hex Loader
===================
Reads GNU Unifont / unscii style .hex fonts:

    CODEPOINT:BITMAP

where BITMAP is the glyph rows in hex, one row per byte for glyphs up to
8 pixels wide (16 hex digits for 8x8, 32 for 8x16). Glyphs of any other
size are skipped.
"""

import sys
from pathlib import Path
from typing import List

from ..codec.glyph import glyph_size
from ..errors import MalformedInputError
from .table import read_lines


def load_hex_font(path, width: int = 8, height: int = 8,
                  count: int = 256) -> List[bytes]:
    """
    Load a .hex font into a table of `count` glyphs.

    Args:
        path: .hex file
        width: Cell width in pixels
        height: Cell height in pixels
        count: Table length; codepoints at or beyond it are ignored

    Returns:
        Glyph bitmaps indexed by codepoint; missing glyphs are blank

    Raises:
        MalformedInputError: If the file is not ASCII text, a line is not
            CODEPOINT:BITMAP, or a codepoint is negative
        OSError: If the file cannot be read
    """
    path = Path(path)
    size = glyph_size(width, height)
    digits = size * 2
    table = [bytes(size)] * count
    skipped = 0

    for lineno, line in enumerate(read_lines(path, "ascii"), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split(":")
        if len(parts) != 2:
            raise MalformedInputError(
                f"{path}:{lineno}: expected CODEPOINT:BITMAP", path=path)
        cp_str, bmp_str = parts
        try:
            cp = int(cp_str, 16)
            data = bytes.fromhex(bmp_str)
        except ValueError:
            raise MalformedInputError(
                f"{path}:{lineno}: invalid hex in {line!r}", path=path) from None
        if cp < 0:
            raise MalformedInputError(
                f"{path}:{lineno}: negative codepoint {cp_str!r}", path=path)

        if cp >= count:
            continue
        if len(bmp_str) != digits:
            skipped += 1
            continue
        table[cp] = data

    if skipped:
        print(f"Warning: skipped {skipped} glyphs that are not {width}x{height} "
              f"in {path}", file=sys.stderr)

    return table
