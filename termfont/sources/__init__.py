"""
Font table sources - loaders for authored glyph and translation data.

Modules:
    table: Text files of byte literals (glyph tables, translation tables)
    hexfont: GNU Unifont / unscii .hex fonts
    bdf: BDF fonts (via bdflib)
"""
from pathlib import Path
from typing import List, Sequence

from ..codec.glyph import glyph_size
from .bdf import load_bdf_font
from .hexfont import load_hex_font
from .table import load_font_table, load_table

__all__ = [
    "load_font",
    "load_bdf_font",
    "load_hex_font",
    "load_font_table",
    "load_table",
]


def load_font(path, width: int = 8, height: int = 16,
              count: int = 256) -> List[Sequence[int]]:
    """
    Load a font table, choosing the loader from the file extension.

    .bdf and .hex files are read as fonts and cut to `count` glyphs; any
    other file is read as a byte table and used as-is.
    """
    suffix = Path(path).suffix.lower()
    if suffix == ".bdf":
        return load_bdf_font(path, width, height, count)
    if suffix == ".hex":
        return load_hex_font(path, width, height, count)
    return load_font_table(path, glyph_size(width, height))
