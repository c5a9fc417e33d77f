"""Regression tests for raw-key decoding.

Covers ESC timing, CSI/SS3 sequences, control-key tokens, and UTF-8 text.
These tests protect interactive input handling in raw terminal mode.
"""

import os
import time
import unittest

from lazytree.input import reader as input_mod


def _read_all(data: bytes, count: int) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, data)
        return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(_read_all(b"\x1ba", 2), ["ESC", "a"])

    def test_cursor_keys_in_csi_and_ss3_form(self) -> None:
        self.assertEqual(
            _read_all(b"\x1b[A\x1b[B\x1bOC\x1bOD\x1b[1;5C", 5),
            ["UP", "DOWN", "RIGHT", "LEFT", "RIGHT"],
        )

    def test_tilde_sequences(self) -> None:
        self.assertEqual(
            _read_all(b"\x1b[5~\x1b[6~\x1b[3~\x1b[1~\x1b[4~\x1b[H\x1b[F", 7),
            ["PAGE_UP", "PAGE_DOWN", "DELETE", "HOME", "END", "HOME", "END"],
        )

    def test_control_bytes_map_to_named_tokens(self) -> None:
        self.assertEqual(
            _read_all(b"\r\n\t\x7f\x08\x0e\x15\x04\x01", 9),
            ["ENTER", "ENTER", "TAB", "BACKSPACE", "BACKSPACE", "CTRL_N", "CTRL_U", "CTRL_D", "CTRL_A"],
        )

    def test_multibyte_text_is_decoded_as_one_key(self) -> None:
        self.assertEqual(_read_all("é日".encode("utf-8"), 2), ["é", "日"])

    def test_timeout_and_eof_return_empty_token(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=10), "")
            os.close(write_fd)
            write_fd = -1
            self.assertEqual(input_mod.read_key(read_fd, timeout_ms=10), "")
        finally:
            os.close(read_fd)
            if write_fd >= 0:
                os.close(write_fd)


if __name__ == "__main__":
    unittest.main()
