"""
Byte Table Files
================
Hand-authored tables written as lists of byte literals.

Accepted syntax:
    # comment lines and trailing comments
    [ 0x00, 0x18, 0x3C,     (brackets are optional)
      0b01111110, 255 ]     (decimal, 0x hex and 0b binary literals)

Values are returned unchecked; range checking happens when the table is
packed.
"""

import re
from pathlib import Path
from typing import List

from ..errors import MalformedInputError

_SEPARATORS = re.compile(r"[\s,\[\]{}]+")


def read_lines(path, encoding: str = "utf-8") -> List[str]:
    """
    Read a text source file.

    Raises:
        MalformedInputError: If the file is not valid text in `encoding`
        OSError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.readlines()
    except UnicodeDecodeError as e:
        raise MalformedInputError(
            f"{path}: not {encoding} text (byte 0x{e.object[e.start]:02x} "
            f"at offset {e.start})",
            path=path) from e


def load_table(path) -> List[int]:
    """
    Load a byte table from a text file.

    Raises:
        MalformedInputError: If the file is not text or a token is not an
            integer literal
        OSError: If the file cannot be read
    """
    path = Path(path)
    values = []
    for lineno, line in enumerate(read_lines(path), 1):
        line = line.split("#", 1)[0]
        for token in _SEPARATORS.split(line):
            if not token:
                continue
            try:
                values.append(int(token, 0))
            except ValueError:
                raise MalformedInputError(
                    f"{path}:{lineno}: not a byte literal: {token!r}",
                    path=path) from None
    return values


def load_font_table(path, glyph_size: int) -> List[List[int]]:
    """
    Load a flat byte table and split it into glyphs.

    Raises:
        MalformedInputError: If the value count is not a multiple of
            glyph_size
    """
    values = load_table(path)
    if len(values) % glyph_size:
        raise MalformedInputError(
            f"{path}: {len(values)} values is not a multiple of the "
            f"{glyph_size}-byte glyph size",
            path=path, size=len(values))
    return [values[i:i + glyph_size] for i in range(0, len(values), glyph_size)]
