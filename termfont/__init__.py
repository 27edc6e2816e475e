"""
termfont
========
Build-time tools that turn authored terminal fonts into the raw binaries
the display firmware loads.

Architecture
------------
Two independent single-pass pipelines share one glyph representation
(row-major bitmap bytes, MSB = leftmost pixel):

    sources         Authored data (.bdf, .hex, byte tables)
       │
       └── serializer    font<W>x<H>.fnt + xlat<W>x<H>.bin

    8x8.fnt
       │
       └── rotator       8x8r.fnt (each glyph rotated 90 degrees)

Both pipelines build on codec (glyph packing, rotation, .fnt reading).

Quick Start
-----------
    from termfont import write_font_table, rotate_file, identity_xlat

    write_font_table(glyphs, identity_xlat(), width=8, height=8)
    rotate_file("font8x8.fnt", "font8x8r.fnt")

Module Structure
----------------
    termfont/
    ├── cli.py               Command line entry point
    ├── errors.py            Exception hierarchy
    ├── serializer.py        Font and translation table writer
    ├── rotator.py           8x8 font rotation
    ├── codec/
    │   ├── glyph.py         Byte packing and glyph rotation
    │   └── fontfile.py      Raw .fnt reader
    └── sources/
        ├── table.py         Byte literal tables
        ├── hexfont.py       Unifont .hex fonts
        └── bdf.py           BDF fonts
"""

from .errors import EncodingError, FontError, MalformedInputError
from .codec import GLYPH_SIZE, GlyphReader, read_font, rotate, rotate_table
from .serializer import FontConfig, identity_xlat, write_font_table
from .rotator import rotate_file

__all__ = [
    "FontError",
    "EncodingError",
    "MalformedInputError",
    "GLYPH_SIZE",
    "GlyphReader",
    "read_font",
    "rotate",
    "rotate_table",
    "FontConfig",
    "identity_xlat",
    "write_font_table",
    "rotate_file",
]

__version__ = "1.0.0"
