"""
Font Tool Errors
================
Exceptions raised while packing and rotating font binaries.

I/O failures are not wrapped: they surface as the built-in OSError so the
failing filename and reason stay attached.
"""

from pathlib import Path
from typing import Optional


class FontError(Exception):
    """Base class for font packing and rotation errors."""


class EncodingError(FontError, ValueError):
    """A table entry cannot be stored as an unsigned byte, or a glyph has the wrong size."""


class MalformedInputError(FontError, ValueError):
    """
    An input file does not have the expected layout.

    Attributes:
        path: File that was being read
        size: Offending length in bytes (None for parse errors)
    """

    def __init__(self, message: str, path: Optional[Path] = None,
                 size: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.size = size
