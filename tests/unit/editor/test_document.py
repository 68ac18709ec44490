"""Tests for ``TextDocument`` word lookup and text slicing."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from gtagsnav.editor.document import TextDocument
from gtagsnav.editor.types import Position, Range


class WordRangeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.document = TextDocument("src/nfs.c", text="struct nfs_fh *fh;\nx = -1.5 + y2;\n")

    def test_word_inside_identifier(self) -> None:
        word_range = self.document.get_word_range_at_position(Position(0, 9))

        self.assertEqual(word_range, Range(Position(0, 7), Position(0, 13)))
        self.assertEqual(self.document.get_text(word_range), "nfs_fh")

    def test_cursor_right_after_word_selects_it(self) -> None:
        word_range = self.document.get_word_range_at_position(Position(0, 6))

        self.assertEqual(self.document.get_text(word_range), "struct")

    def test_punctuation_and_whitespace_are_boundaries(self) -> None:
        word_range = self.document.get_word_range_at_position(Position(0, 15))

        self.assertEqual(self.document.get_text(word_range), "fh")

    def test_decimal_literal_is_one_word(self) -> None:
        word_range = self.document.get_word_range_at_position(Position(1, 5))

        self.assertEqual(self.document.get_text(word_range), "-1.5")

    def test_no_word_returns_none(self) -> None:
        self.assertIsNone(self.document.get_word_range_at_position(Position(1, 10)))
        self.assertIsNone(self.document.get_word_range_at_position(Position(7, 0)))


class TextDocumentTests(unittest.TestCase):
    def test_reads_file_when_text_not_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "main.c"
            path.write_text("int main(void)\n{\n}\n", encoding="utf-8")

            document = TextDocument(path)

            self.assertEqual(document.line_count, 4)
            self.assertEqual(document.line_at(3), "")
            self.assertEqual(document.line_at(0), "int main(void)")
            self.assertEqual(document.directory, tmp)
            self.assertEqual(document.uri, path.absolute())

    @unittest.skipIf(os.name == "nt", "POSIX path layout")
    def test_relative_file_name_is_made_absolute(self) -> None:
        with mock.patch("os.getcwd", return_value="/work/project"):
            document = TextDocument("src/main.c", text="")

        self.assertEqual(document.file_name, "/work/project/src/main.c")
        self.assertEqual(document.directory, "/work/project/src")
        self.assertEqual(document.uri, Path("/work/project/src/main.c"))

    def test_form_feed_does_not_start_a_new_line(self) -> None:
        document = TextDocument("/src/a.c", text="int a;\x0c\nint foo;\x0b x;\r\nbar\u2028baz\n")

        self.assertEqual(document.line_count, 4)
        self.assertEqual(document.line_at(0), "int a;\x0c")
        word_range = document.get_word_range_at_position(Position(1, 5))
        self.assertEqual(word_range, Range(Position(1, 4), Position(1, 7)))
        self.assertEqual(document.get_text(word_range), "foo")
        self.assertEqual(document.get_text(Range(Position(2, 0), Position(2, 99))), "bar\u2028baz")

    def test_get_text_without_range_returns_everything(self) -> None:
        document = TextDocument("a.c", text="one\ntwo\n")

        self.assertEqual(document.get_text(), "one\ntwo\n")

    def test_get_text_across_lines_and_clamped_columns(self) -> None:
        document = TextDocument("a.c", text="one\r\ntwo\nthree")

        text = document.get_text(Range(Position(0, 1), Position(2, 99)))

        self.assertEqual(text, "ne\r\ntwo\nthree")


if __name__ == "__main__":
    unittest.main()
