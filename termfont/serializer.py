"""
Font Table Serializer
=====================
Writes an authored font table and its character translation table as the
two flat binaries the terminal firmware loads.

Output files:
    font<W>x<H>.fnt: Glyph bitmaps concatenated in table order
                     (glyph_count * H * ceil(W / 8) bytes, no header)
    xlat<W>x<H>.bin: Translation table bytes (one per character code)

The font file is written first. If it fails the translation file is not
attempted; if the translation file fails the font file is kept.
"""

import os
from pathlib import Path
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from .codec.fontfile import discard_file
from .codec.glyph import glyph_size, pack_bytes, pack_glyph

DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 16
XLAT_SIZE = 0x100


class FontConfig(NamedTuple):
    """
    Immutable options shared by the pack and rotate commands.

    Attributes:
        width: Glyph width in pixels
        height: Glyph height in pixels
        input_path: Source file (font table source or .fnt to rotate)
        output_path: Destination file or directory
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None

    @property
    def glyph_size(self) -> int:
        return glyph_size(self.width, self.height)

    @property
    def font_filename(self) -> str:
        return font_filename(self.width, self.height)

    @property
    def xlat_filename(self) -> str:
        return xlat_filename(self.width, self.height)


def font_filename(width: int, height: int) -> str:
    return f"font{width}x{height}.fnt"


def xlat_filename(width: int, height: int) -> str:
    return f"xlat{width}x{height}.bin"


def identity_xlat(count: int = XLAT_SIZE) -> bytes:
    """Translation table mapping every character code to the glyph of the same index."""
    return pack_bytes(range(count), "xlat")


# =============================================================================
# Writers
# =============================================================================

def write_binary(path, data: bytes) -> int:
    """
    Write a whole byte string to a file.

    A file left incomplete by a failed write is removed before the error
    propagates.

    Returns:
        Number of bytes written

    Raises:
        OSError: If the file cannot be opened or written
    """
    path = Path(path)
    fo = open(path, "wb")
    try:
        with fo:
            fo.write(data)
    except OSError:
        discard_file(path)
        raise
    return len(data)


def encode_font_table(font: Iterable[Sequence[int]], size: int) -> bytes:
    """
    Concatenate glyph bitmaps into the .fnt layout.

    Raises:
        EncodingError: If a glyph is not `size` bytes or holds a value
            outside 0-255
    """
    out = bytearray()
    for index, glyph in enumerate(font):
        out += pack_glyph(glyph, size, index)
    return bytes(out)


def write_font_table(font: Iterable[Sequence[int]], xlat: Iterable[int],
                     width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                     directory=".") -> Tuple[Path, Path]:
    """
    Write font<W>x<H>.fnt and xlat<W>x<H>.bin.

    Both tables are encoded before anything is written, so an encoding
    error leaves the output directory untouched.

    Args:
        font: Glyph bitmaps, each H * ceil(W / 8) bytes
        xlat: Translation table bytes
        width: Glyph width, used for the file names and glyph size
        height: Glyph height, used for the file names and glyph size
        directory: Directory receiving both files

    Returns:
        (font_path, xlat_path)

    Raises:
        EncodingError: If a table value is out of range or a glyph has
            the wrong size
        OSError: If either file cannot be written
    """
    font_data = encode_font_table(font, glyph_size(width, height))
    xlat_data = pack_bytes(xlat, "xlat")

    directory = Path(directory)
    font_path = directory / font_filename(width, height)
    xlat_path = directory / xlat_filename(width, height)

    write_binary(font_path, font_data)
    write_binary(xlat_path, xlat_data)

    return font_path, xlat_path


def write_config(config: FontConfig, font: Iterable[Sequence[int]],
                 xlat: Iterable[int]) -> Tuple[Path, Path]:
    """write_font_table() driven by a FontConfig; output_path is the target directory."""
    directory = config.output_path if config.output_path is not None else Path(os.curdir)
    return write_font_table(font, xlat, config.width, config.height, directory)
