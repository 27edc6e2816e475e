"""
Raw Font File Reader
====================
Sequential reader for headerless font binaries (.fnt).

File layout:
    [Glyph 0: glyph_size bytes]
    [Glyph 1: glyph_size bytes]
    ...

There is no header, index or padding, so the glyph count is the file size
divided by the glyph size. A file whose size is not a multiple of the glyph
size is rejected rather than read with a truncated last glyph.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional

from ..errors import MalformedInputError
from .glyph import GLYPH_SIZE


class GlyphReader:
    """
    Reads glyph bitmaps one at a time from a .fnt file.

    Use close() or context manager to release the file handle.

    Attributes:
        path: File being read
        glyph_size: Bytes per glyph
        size: File size in bytes
    """

    def __init__(self, path, glyph_size: int = GLYPH_SIZE):
        """
        Open a font binary for reading.

        Args:
            path: File system path to the .fnt file
            glyph_size: Bytes per glyph (8 for 8x8 fonts)

        Raises:
            OSError: If the file cannot be opened
        """
        if glyph_size <= 0:
            raise ValueError("glyph_size must be positive")

        self.path = path
        self.glyph_size = glyph_size
        self.file = open(path, "rb")
        self.size = os.fstat(self.file.fileno()).st_size

    @property
    def count(self) -> int:
        """Number of whole glyphs in the file."""
        return self.size // self.glyph_size

    def validate(self):
        """
        Check that the file holds only whole glyphs.

        Raises:
            MalformedInputError: If the size is not a multiple of glyph_size
        """
        if self.size % self.glyph_size:
            raise MalformedInputError(
                f"{self.path}: size {self.size} is not a multiple of "
                f"{self.glyph_size} bytes",
                path=self.path, size=self.size)

    def read_glyph(self) -> Optional[bytes]:
        """
        Read the next glyph.

        Returns:
            glyph_size bytes, or None when the file is exhausted

        Raises:
            MalformedInputError: If fewer than glyph_size bytes remain
        """
        data = self.file.read(self.glyph_size)
        if not data:
            return None
        if len(data) < self.glyph_size:
            raise MalformedInputError(
                f"{self.path}: truncated glyph at offset "
                f"{self.file.tell() - len(data)} ({len(data)} of "
                f"{self.glyph_size} bytes)",
                path=self.path, size=self.size)
        return data

    def __iter__(self) -> Iterator[bytes]:
        while True:
            glyph = self.read_glyph()
            if glyph is None:
                return
            yield glyph

    def close(self):
        """Close the font file handle."""
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
        return False


def read_font(path, glyph_size: int = GLYPH_SIZE) -> List[bytes]:
    """Read every glyph of a font binary into a list."""
    with GlyphReader(path, glyph_size) as reader:
        reader.validate()
        return list(reader)


def discard_file(path):
    """Remove an incomplete output file if it exists."""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        pass
