"""File-backed text documents with editor-style word lookup.

Word boundaries follow the editor's default word pattern: runs of characters
that are not punctuation or whitespace, plus decimal literals such as ``-1.5``.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from .types import Position, Range

DEFAULT_WORD_PATTERN = re.compile(
    r"(-?\d*\.\d\w*)|([^`~!@#$%^&*()\-=+\[{\]}\\|;:'\",.<>/?\s]+)"
)
# Only CR, LF and CRLF end a line; form feeds and other separators stay inline.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


class TextDocument:
    """An open source file as seen by navigation providers.

    ``text`` may be given for unsaved buffers; otherwise the file is read once
    at construction. Relative file names are made absolute against the
    current directory, and a trailing newline starts one last empty line.
    """

    def __init__(self, file_name: str | Path, text: str | None = None) -> None:
        self.file_name = os.path.abspath(os.fspath(file_name))
        self.text = read_text(Path(self.file_name)) if text is None else text
        self._lines = _LINE_BREAK_RE.split(self.text)
        self._line_starts = [0, *(match.end() for match in _LINE_BREAK_RE.finditer(self.text))]

    @property
    def uri(self) -> Path:
        """Resource identifier used for scoped configuration lookups."""
        return Path(self.file_name)

    @property
    def directory(self) -> str:
        """Directory containing the file."""
        return os.path.dirname(self.file_name)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, line: int) -> str:
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return ""

    def offset_at(self, position: Position) -> int:
        """Map a position to a text offset, clamping to existing lines and columns."""
        if position.line < 0:
            return 0
        line = min(position.line, len(self._lines) - 1)
        character = max(0, min(position.character, len(self._lines[line])))
        return self._line_starts[line] + character

    def get_text(self, text_range: Range | None = None) -> str:
        """Return the whole text, or the text covered by ``text_range``."""
        if text_range is None:
            return self.text
        return self.text[self.offset_at(text_range.start) : self.offset_at(text_range.end)]

    def get_word_range_at_position(
        self,
        position: Position,
        pattern: re.Pattern[str] = DEFAULT_WORD_PATTERN,
    ) -> Range | None:
        """Return the range of the word touching ``position``.

        A cursor placed directly after the last character of a word still
        selects that word. Returns ``None`` when no word touches the cursor.
        """
        text = self.line_at(position.line)
        for match in pattern.finditer(text):
            if match.start() <= position.character <= match.end():
                return Range(
                    Position(position.line, match.start()),
                    Position(position.line, match.end()),
                )
            if match.start() > position.character:
                break
        return None
