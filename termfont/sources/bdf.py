"""
BDF Loader
==========
Places BDF glyphs into fixed-size character cells using bdflib.

Each glyph is positioned on the font baseline (FONT_ASCENT rows from the
top of the cell) at its bounding-box offset. Pixels falling outside the
cell are clipped.
"""

from math import ceil
from pathlib import Path
from typing import List

from bdflib import reader

from ..codec.glyph import glyph_size
from ..errors import MalformedInputError


def load_bdf_font(path, width: int = 8, height: int = 16,
                  count: int = 256) -> List[bytes]:
    """
    Load a BDF font into a table of `count` glyphs.

    Args:
        path: Path to BDF file
        width: Cell width in pixels
        height: Cell height in pixels
        count: Table length; codepoints at or beyond it are ignored

    Returns:
        Glyph bitmaps indexed by codepoint; missing glyphs are blank
        (height * ceil(width / 8) bytes each, row-major, MSB first)

    Raises:
        MalformedInputError: If the file is not a valid BDF font
        OSError: If the file cannot be read
    """
    path = Path(path)
    with open(path, "rb") as f:
        try:
            font = reader.read_bdf(f)
        except (reader.ParseError, ValueError) as e:
            raise MalformedInputError(f"{path}: invalid BDF font: {e}", path=path) from e

    props = font.properties
    font_ascent = props.get(b"FONT_ASCENT", height)

    bytes_per_row = ceil(width / 8)
    row_bits = bytes_per_row * 8
    # Keep only the columns inside the cell
    cell_mask = ((1 << width) - 1) << (row_bits - width)

    table = [bytes(glyph_size(width, height))] * count

    for glyph in font.glyphs:
        if glyph.codepoint is None or not 0 <= glyph.codepoint < count:
            continue

        # BDF data is stored bottom-to-top, reverse it
        glyph_data = list(reversed(glyph.data))

        # Position glyph in output grid
        baseline_row = font_ascent - 1
        glyph_bottom = baseline_row - glyph.bbY
        glyph_top = glyph_bottom - glyph.bbH + 1

        shift = row_bits - glyph.bbW
        rows = []
        for y in range(height):
            row = 0
            src_row = y - glyph_top

            if 0 <= src_row < len(glyph_data):
                src_bits = glyph_data[src_row]
                if shift > glyph.bbX:
                    row = src_bits << (shift - glyph.bbX)
                else:
                    row = src_bits >> (glyph.bbX - shift)
                row &= cell_mask

            rows.append(row.to_bytes(bytes_per_row, "big"))

        table[glyph.codepoint] = b"".join(rows)

    return table
