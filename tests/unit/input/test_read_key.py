"""Tests for raw byte decoding into key tokens."""

from __future__ import annotations

import os
import unittest

from lazycd import input as key_input


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        key_input._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        os.close(self.read_fd)
        os.close(self.write_fd)
        key_input._PENDING_BYTES.clear()

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [key_input.read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_plain_and_control_keys(self) -> None:
        self.assertEqual(self._keys(b"j\r\x7f\x03", 4), ["j", "ENTER", "BACKSPACE", "CTRL_C"])

    def test_arrow_and_home_end_sequences(self) -> None:
        self.assertEqual(
            self._keys(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[H\x1b[4~", 6),
            ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END"],
        )

    def test_unbound_escape_sequences_are_consumed_whole(self) -> None:
        self.assertEqual(
            self._keys(b"\x1bOP\x1b[2~\x1b[1;5A\x1b[15~j", 5),
            [key_input.UNKNOWN_KEY] * 4 + ["j"],
        )

    def test_ss3_arrows_and_page_keys(self) -> None:
        self.assertEqual(self._keys(b"\x1bOA\x1bOD\x1b[5~\x1b[6~", 4), ["UP", "LEFT", "PAGE_UP", "PAGE_DOWN"])

    def test_lone_escape_times_out_to_esc(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_escape_followed_by_letter_keeps_letter(self) -> None:
        self.assertEqual(self._keys(b"\x1bq", 2), ["ESC", "q"])

    def test_multibyte_utf8_character(self) -> None:
        self.assertEqual(self._keys("é".encode("utf-8"), 1), ["é"])

    def test_timeout_without_input_returns_empty(self) -> None:
        self.assertEqual(key_input.read_key(self.read_fd, timeout_ms=1), "")


if __name__ == "__main__":
    unittest.main()
