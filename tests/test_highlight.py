"""Targeted tests for preview sanitization and Pygments highlighting.

Ensures control bytes are escaped while standard whitespace is preserved, and
that previews are cut to the requested line count.
"""

import re
import tempfile
import unittest
from pathlib import Path

from lazytree.sources.highlight import colorize_source, highlighted_head, read_head, sanitize_terminal_text

ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


class HighlightSanitizationTests(unittest.TestCase):
    def test_sanitize_terminal_text_escapes_control_bytes_but_keeps_common_whitespace(self) -> None:
        source = "a\tb\nc\rd\x07e\x1bf"
        sanitized = sanitize_terminal_text(source)

        self.assertEqual(sanitized, "a\tb\nc\rd\\x07e\\x1bf")
        self.assertNotIn("\x07", sanitized)
        self.assertNotIn("\x1b", sanitized)

    def test_unknown_extension_keeps_text(self) -> None:
        source = "Permission  is  hereby granted, free of charge:\n"

        rendered = colorize_source(source, Path("LICENSE.unknownext"))

        self.assertEqual(ANSI_RE.sub("", rendered), source)


class HighlightedHeadTests(unittest.TestCase):
    def test_head_is_limited_and_highlighted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "mod.py"
            path.write_text("import os\nx = 1\ny = 2\nz = 3\n", encoding="utf-8")

            lines = highlighted_head(path, 2)

        self.assertEqual([ANSI_RE.sub("", line) for line in lines], ["import os", "x = 1"])
        self.assertIn("\x1b[", lines[0])

    def test_binary_data_is_not_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "data.bin"
            path.write_bytes(b"abc\x00def")

            self.assertIsNone(read_head(path))
            self.assertIsNone(highlighted_head(path, 5))


if __name__ == "__main__":
    unittest.main()
