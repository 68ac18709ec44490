"""Query adapter around the GNU Global command-line tool.

Each provider call resolves the word under the cursor, runs ``global`` once
in the document's directory, and converts its stdout line by line. Lines that
fail to parse are logged and dropped; a process that cannot be started raises
the ``OSError`` from ``subprocess`` unchanged.
"""

from __future__ import annotations

import re
import subprocess
from typing import Callable, Mapping, TypeVar

import structlog

from ..editor.document import TextDocument
from ..editor.types import CompletionItem, Location, Position, SymbolInformation
from ..errors import LineParseError
from .cxref import XFormat, parse_xformat, xformat_to_location, xformat_to_symbol

logger = structlog.get_logger(__name__)

DEFAULT_EXECUTABLE = "global"
# Argument pair telling global to write spaces (and quotes) in paths as %XX.
ENCODE_PATH_ARGS = ("--encode-path", '" "')
_NEWLINE_RE = re.compile(r"\r?\n")

T = TypeVar("T")


def convert_xformat_lines(lines: list[str], convert: Callable[[XFormat], T]) -> list[T]:
    """Parse cxref ``lines`` and map each record through ``convert``.

    Empty lines are skipped. Lines that fail to parse, and records whose
    conversion raises anything, are logged and left out of the result.
    """
    ret: list[T] = []
    for line in lines:
        if not line:
            continue
        try:
            record = parse_xformat(line)
        except LineParseError as exc:
            logger.warning("cxref_line_skipped", line=line, error=str(exc))
            continue
        try:
            ret.append(convert(record))
        except Exception as exc:
            logger.warning("cxref_line_skipped", line=line, error=str(exc))
    return ret


class Global:
    """Runs ``global`` queries for editor navigation requests."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE) -> None:
        self.executable = executable

    def get_version(self) -> str:
        return self.execute(["--version"])[0]

    def provide_definition(self, document: TextDocument, position: Position) -> list[Location]:
        symbol = self._symbol_at(document, position)
        if not symbol:
            return []
        lines = self.execute([*ENCODE_PATH_ARGS, "-xa", symbol], document.directory)
        return convert_xformat_lines(lines, xformat_to_location)

    def provide_references(self, document: TextDocument, position: Position) -> list[Location]:
        symbol = self._symbol_at(document, position)
        if not symbol:
            return []
        lines = self.execute([*ENCODE_PATH_ARGS, "-xra", symbol], document.directory)
        return convert_xformat_lines(lines, xformat_to_location)

    def provide_completion_items(
        self,
        document: TextDocument,
        position: Position,
    ) -> list[CompletionItem]:
        """Return one completion item per candidate printed by ``global -c``."""
        symbol = self._symbol_at(document, position)
        if not symbol:
            return []
        lines = self.execute(["-c", symbol], document.directory)
        return [CompletionItem(line) for line in lines if line]

    def provide_document_symbols(self, document: TextDocument) -> list[SymbolInformation]:
        lines = self.execute([*ENCODE_PATH_ARGS, "-xaf", document.file_name], document.directory)
        return convert_xformat_lines(lines, xformat_to_symbol)

    def _symbol_at(self, document: TextDocument, position: Position) -> str:
        """Return the word under the cursor, or ``""`` when there is none."""
        word_range = document.get_word_range_at_position(position)
        if word_range is None:
            return ""
        return document.get_text(word_range)

    def execute(
        self,
        args: list[str],
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> list[str]:
        """Run ``global args`` to completion and return stdout split into lines.

        The exit status is not checked; whatever was printed is returned.
        """
        cmd = [self.executable, *args]
        logger.debug("global_spawn", cmd=cmd, cwd=cwd)
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            env=env,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
        stdout = proc.stdout.decode("utf-8", errors="replace")
        return _NEWLINE_RE.split(stdout)
