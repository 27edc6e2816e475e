"""
Glyph Bitmaps
=============
Byte packing and the 90-degree rotation for 8x8 glyphs.

A glyph bitmap is stored row-major, one byte per row for fonts up to
8 pixels wide. Bit 7 of a row byte is the leftmost pixel, bit 0 the
rightmost.

Rotation:
    Output row i collects column (7 - i) of every input row j, placing
    the pixel of row j at bit j. The top row of the source therefore
    becomes bit 0 of every output byte:

        [0xFF, 0, 0, 0, 0, 0, 0, 0]  ->  [0x01] * 8

    This is the orientation the rotated display is wired for; rotating
    twice does not give back the source glyph.
"""

from math import ceil
from typing import Iterable, List, Optional, Sequence

from ..errors import EncodingError

# =============================================================================
# Constants
# =============================================================================

GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8
GLYPH_SIZE = 8  # bytes per 8x8 glyph

_BITS_PER_BYTE = 8
_BYTE_MAX = 0xFF

# Column masks, leftmost pixel first
_COLUMN_MASKS = tuple(1 << (7 - i) for i in range(_BITS_PER_BYTE))
# Output bit for each source row
_ROW_BITS = tuple(1 << j for j in range(_BITS_PER_BYTE))


def glyph_size(width: int, height: int) -> int:
    """Bytes occupied by one glyph of the given cell size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid glyph dimensions {width}x{height}")
    return height * ceil(width / _BITS_PER_BYTE)


# =============================================================================
# Byte Packing
# =============================================================================

def pack_bytes(values: Iterable[int], name: str = "table") -> bytes:
    """
    Convert a sequence of integers to raw bytes.

    Args:
        values: Unsigned byte values
        name: Table name used in error messages

    Returns:
        The values as an immutable byte string

    Raises:
        EncodingError: If a value is not an integer in 0-255
    """
    if isinstance(values, (bytes, bytearray)):
        return bytes(values)

    out = bytearray()
    for pos, value in enumerate(values):
        if isinstance(value, bool) or not isinstance(value, int):
            raise EncodingError(
                f"byte value out of range: {name}[{pos}] = {value!r} is not an integer")
        if not 0 <= value <= _BYTE_MAX:
            raise EncodingError(
                f"byte value out of range: {name}[{pos}] = {value}")
        out.append(value)
    return bytes(out)


def pack_glyph(values: Iterable[int], size: int = GLYPH_SIZE,
               index: Optional[int] = None) -> bytes:
    """
    Pack one glyph bitmap and check its length.

    Raises:
        EncodingError: If a row value is out of range or the glyph is not
            exactly `size` bytes
    """
    name = "glyph" if index is None else f"glyph {index}"
    data = pack_bytes(values, name)
    if len(data) != size:
        raise EncodingError(f"{name} has {len(data)} bytes, expected {size}")
    return data


# =============================================================================
# Rotation
# =============================================================================

def rotate(glyph: Sequence[int]) -> bytes:
    """
    Rotate an 8x8 glyph bitmap by 90 degrees.

    Args:
        glyph: 8 row bytes, MSB = leftmost pixel

    Returns:
        8 new row bytes; the input is left untouched

    Raises:
        EncodingError: If the glyph is not 8 valid bytes
    """
    ary = pack_glyph(glyph)
    res = bytearray(GLYPH_SIZE)

    for i, mi in enumerate(_COLUMN_MASKS):
        row = 0
        for j, mj in enumerate(_ROW_BITS):
            if ary[j] & mi:
                row |= mj
        res[i] = row

    return bytes(res)


def rotate_table(glyphs: Iterable[Sequence[int]]) -> List[bytes]:
    """Rotate every glyph of a font table, keeping table order."""
    return [rotate(glyph) for glyph in glyphs]
