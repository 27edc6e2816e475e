import os
import tempfile
import unittest
from pathlib import Path

from termfont.errors import EncodingError
from termfont.serializer import (
    FontConfig,
    font_filename,
    identity_xlat,
    write_binary,
    write_config,
    write_font_table,
    xlat_filename,
)

FONT_8X8 = [
    [0x18, 0x24, 0x42, 0x7E, 0x42, 0x42, 0x42, 0x00],
    [0x7C, 0x42, 0x42, 0x7C, 0x42, 0x42, 0x7C, 0x00],
    [0x00] * 8,
]
XLAT = [2, 0, 1, 1, 0]


class TestFileNames(unittest.TestCase):

    def test_names(self):
        self.assertEqual(font_filename(8, 16), "font8x16.fnt")
        self.assertEqual(xlat_filename(8, 16), "xlat8x16.bin")

    def test_config_defaults(self):
        config = FontConfig()
        self.assertEqual((config.width, config.height), (8, 16))
        self.assertEqual(config.glyph_size, 16)
        self.assertEqual(config.font_filename, "font8x16.fnt")
        self.assertEqual(config.xlat_filename, "xlat8x16.bin")

    def test_config_is_immutable(self):
        config = FontConfig()
        with self.assertRaises(AttributeError):
            config.width = 6

    def test_identity_xlat(self):
        xlat = identity_xlat()
        self.assertEqual(len(xlat), 256)
        self.assertEqual(xlat[0], 0)
        self.assertEqual(xlat[0x41], 0x41)
        self.assertEqual(xlat[255], 255)


class TestWriteFontTable(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_sizes_and_contents(self):
        font_path, xlat_path = write_font_table(FONT_8X8, XLAT, 8, 8, self.dir)
        self.assertEqual(font_path, self.dir / "font8x8.fnt")
        self.assertEqual(xlat_path, self.dir / "xlat8x8.bin")

        font_data = font_path.read_bytes()
        self.assertEqual(len(font_data), 8 * len(FONT_8X8))
        self.assertEqual(font_data, b"".join(bytes(g) for g in FONT_8X8))

        xlat_data = xlat_path.read_bytes()
        self.assertEqual(len(xlat_data), len(XLAT))
        self.assertEqual(list(xlat_data), XLAT)

    def test_default_dimensions(self):
        font = [[i] * 16 for i in range(4)]
        font_path, xlat_path = write_font_table(font, identity_xlat(), directory=self.dir)
        self.assertEqual(font_path.name, "font8x16.fnt")
        self.assertEqual(font_path.stat().st_size, 64)
        self.assertEqual(xlat_path.stat().st_size, 256)

    def test_idempotent(self):
        font_path, xlat_path = write_font_table(FONT_8X8, XLAT, 8, 8, self.dir)
        first = (font_path.read_bytes(), xlat_path.read_bytes())
        write_font_table(FONT_8X8, XLAT, 8, 8, self.dir)
        self.assertEqual((font_path.read_bytes(), xlat_path.read_bytes()), first)

    def test_overwrites_existing(self):
        (self.dir / "font8x8.fnt").write_bytes(bytes(100))
        font_path, _ = write_font_table(FONT_8X8, XLAT, 8, 8, self.dir)
        self.assertEqual(font_path.stat().st_size, 24)

    def test_empty_tables(self):
        font_path, xlat_path = write_font_table([], [], 8, 8, self.dir)
        self.assertEqual(font_path.read_bytes(), b"")
        self.assertEqual(xlat_path.read_bytes(), b"")

    def test_out_of_range_writes_nothing(self):
        font = [list(g) for g in FONT_8X8]
        font[1][3] = 0x100
        with self.assertRaises(EncodingError) as ctx:
            write_font_table(font, XLAT, 8, 8, self.dir)
        self.assertTrue(str(ctx.exception).startswith("byte value out of range"))
        self.assertEqual(os.listdir(self.dir), [])

    def test_xlat_out_of_range_writes_nothing(self):
        self.assertRaises(EncodingError, write_font_table, FONT_8X8, [0, -1], 8, 8, self.dir)
        self.assertEqual(os.listdir(self.dir), [])

    def test_wrong_glyph_size(self):
        self.assertRaises(EncodingError, write_font_table, FONT_8X8, XLAT, 8, 16, self.dir)
        self.assertEqual(os.listdir(self.dir), [])

    def test_missing_directory(self):
        self.assertRaises(OSError, write_font_table, FONT_8X8, XLAT, 8, 8,
                          self.dir / "missing")

    def test_second_file_failure_keeps_first(self):
        (self.dir / "xlat8x8.bin").mkdir()
        with self.assertRaises(OSError):
            write_font_table(FONT_8X8, XLAT, 8, 8, self.dir)
        self.assertEqual((self.dir / "font8x8.fnt").stat().st_size, 24)

    def test_write_config(self):
        config = FontConfig(8, 8, output_path=self.dir)
        font_path, xlat_path = write_config(config, FONT_8X8, XLAT)
        self.assertEqual(font_path, self.dir / config.font_filename)
        self.assertEqual(xlat_path, self.dir / config.xlat_filename)


class TestWriteBinary(unittest.TestCase):

    def test_returns_length(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "out.bin"
            self.assertEqual(write_binary(path, b"\x01\x02\x03"), 3)
            self.assertEqual(path.read_bytes(), b"\x01\x02\x03")


if __name__ == "__main__":
    unittest.main()
