"""
Glyph Rotator
=============
Produces the 90-degree-rotated variant of an 8x8 font binary.

Glyphs are streamed one at a time: read 8 bytes, rotate, write 8 bytes.
The input length is checked before the output is created, so malformed
input never produces an output file. An error after the output was opened
removes the incomplete output. The output may not be the input file itself.
"""

import os
from pathlib import Path

from .codec.fontfile import GlyphReader, discard_file
from .codec.glyph import GLYPH_SIZE, rotate
from .errors import FontError

DEFAULT_INPUT = "8x8.fnt"
DEFAULT_OUTPUT = "8x8r.fnt"


def rotate_file(input_path=DEFAULT_INPUT, output_path=DEFAULT_OUTPUT) -> int:
    """
    Rotate every glyph of an 8x8 font binary.

    Args:
        input_path: Source .fnt file (8 bytes per glyph)
        output_path: Destination .fnt file, created or overwritten

    Returns:
        Number of glyphs written

    Raises:
        OSError: If either file cannot be opened, read or written
        MalformedInputError: If the input size is not a multiple of 8;
            no output file is created
        FontError: If output_path is the input file; nothing is written
    """
    output_path = Path(output_path)
    count = 0

    with GlyphReader(input_path, GLYPH_SIZE) as reader:
        reader.validate()

        if output_path.exists() and os.path.samefile(input_path, output_path):
            raise FontError(f"{output_path}: output would overwrite the input file")

        fo = open(output_path, "wb")
        try:
            with fo:
                for glyph in reader:
                    fo.write(rotate(glyph))
                    count += 1
        except Exception:
            discard_file(output_path)
            raise

    return count
