"""
Font codec - glyph bitmaps and raw font binaries.

Modules:
    glyph: Byte packing and 8x8 glyph rotation
    fontfile: Sequential reader for headerless .fnt files
"""
from .glyph import (
    GLYPH_HEIGHT,
    GLYPH_SIZE,
    GLYPH_WIDTH,
    glyph_size,
    pack_bytes,
    pack_glyph,
    rotate,
    rotate_table,
)
from .fontfile import GlyphReader, read_font

__all__ = [
    "GLYPH_WIDTH",
    "GLYPH_HEIGHT",
    "GLYPH_SIZE",
    "glyph_size",
    "pack_bytes",
    "pack_glyph",
    "rotate",
    "rotate_table",
    "GlyphReader",
    "read_font",
]
