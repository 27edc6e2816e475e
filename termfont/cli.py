"""
Command Line Interface
======================
Build-time entry points for preparing terminal font assets.

Usage:
    # Pack an 8x16 font and identity translation table
    termfont pack spleen-8x16.bdf

    # Pack with an authored translation table into a build directory
    termfont pack font8x16.txt --xlat xlat.txt --output-dir build/

    # Rotate 8x8.fnt into 8x8r.fnt
    termfont rotate

    # Rotate explicit files
    termfont rotate build/font8x8.fnt build/font8x8r.fnt
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .errors import FontError
from .rotator import DEFAULT_INPUT, DEFAULT_OUTPUT, rotate_file
from .serializer import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    XLAT_SIZE,
    FontConfig,
    identity_xlat,
    write_config,
)
from .sources import load_font, load_table


# =============================================================================
# Commands
# =============================================================================

def cmd_pack(args) -> None:
    config = FontConfig(args.width, args.height, args.source, args.output_dir)

    print(f"Loading font: {config.input_path}")
    font = load_font(config.input_path, config.width, config.height, args.count)

    if args.xlat:
        print(f"Loading translation table: {args.xlat}")
        xlat = load_table(args.xlat)
    else:
        xlat = identity_xlat(XLAT_SIZE)

    print(f"Writing {len(font)} glyphs, {config.width}x{config.height} "
          f"({config.glyph_size} bytes each)")
    config.output_path.mkdir(parents=True, exist_ok=True)

    for path in write_config(config, font, xlat):
        print(f"Created: {path} ({path.stat().st_size} bytes)")


def cmd_rotate(args) -> None:
    print(f"Rotating: {args.input} -> {args.output}")
    count = rotate_file(args.input, args.output)
    print(f"Created: {args.output} ({count} glyphs)")


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termfont",
        description="Pack and rotate terminal font binaries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # BDF font to font8x16.fnt + xlat8x16.bin
  termfont pack spleen-8x16.bdf

  # 8x8 .hex font with an authored translation table
  termfont pack unscii-8.hex --width 8 --height 8 --xlat xlat.txt

  # Rotate 8x8.fnt into 8x8r.fnt
  termfont rotate

Font sources: .bdf, .hex, or a text table of byte literals
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    pack = subparsers.add_parser("pack", help="Write font and translation binaries")
    pack.add_argument("source", type=Path,
                      help="Font table source (.bdf, .hex or byte table)")
    pack.add_argument("--xlat", "-x", type=Path,
                      help="Translation table file (default: identity table)")
    pack.add_argument("--width", "-W", type=int, default=DEFAULT_WIDTH,
                      help=f"Glyph width in pixels (default: {DEFAULT_WIDTH})")
    pack.add_argument("--height", "-H", type=int, default=DEFAULT_HEIGHT,
                      help=f"Glyph height in pixels (default: {DEFAULT_HEIGHT})")
    pack.add_argument("--count", "-n", type=int, default=256,
                      help="Glyphs taken from .bdf/.hex fonts (default: 256)")
    pack.add_argument("--output-dir", "-o", type=Path, default=Path("."),
                      help="Directory for the output files (default: .)")
    pack.set_defaults(func=cmd_pack)

    rotate = subparsers.add_parser("rotate", help="Rotate an 8x8 font binary by 90 degrees")
    rotate.add_argument("input", type=Path, nargs="?", default=Path(DEFAULT_INPUT),
                        help=f"Input font binary (default: {DEFAULT_INPUT})")
    rotate.add_argument("output", type=Path, nargs="?", default=Path(DEFAULT_OUTPUT),
                        help=f"Output font binary (default: {DEFAULT_OUTPUT})")
    rotate.set_defaults(func=cmd_rotate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "pack" and (args.width <= 0 or args.height <= 0):
        parser.error("--width and --height must be positive")

    try:
        args.func(args)
    except OSError as e:
        if e.filename is not None:
            print(f"Error: {e.filename}: {e.strerror or e}", file=sys.stderr)
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1
    except FontError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
