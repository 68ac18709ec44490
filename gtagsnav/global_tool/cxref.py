"""Parsing for ``global -x`` (ctags cxref) output.

Each output line looks like::

    nfs_fh 19 /home/user/linux/include/linux/nfs.h struct nfs_fh {

i.e. symbol, one-based line number, path, then the source line as context.
With ``--encode-path '" "'`` spaces inside the path are written as ``%20``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..editor.types import Location, Position, Range, SymbolInformation, SymbolKind
from ..errors import LineParseError, LocationDerivationError

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")
ENCODED_SPACE = "%20"


@dataclass(frozen=True)
class XFormat:
    """One parsed cxref line. ``line`` is zero-based."""

    symbol: str
    line: int
    path: str
    info: str


def _zero_based_line(token: str) -> int:
    """Convert the tool's one-based line token; unparseable tokens map to line 0."""
    match = _LEADING_INT_RE.match(token)
    if match is None:
        return 0
    return int(match.group(0)) - 1


def parse_xformat(line: str) -> XFormat:
    """Parse one non-empty cxref line.

    Raises ``LineParseError`` when the symbol, path or context text is missing.
    """
    tokens = _WHITESPACE_RE.split(line)
    symbol = tokens[0] if tokens else ""
    line_no = tokens[1] if len(tokens) > 1 else ""
    path = tokens[2] if len(tokens) > 2 else ""
    info = " ".join(tokens[3:])

    if not (symbol and line and path and info):
        raise LineParseError(line)
    return XFormat(
        symbol=symbol,
        line=_zero_based_line(line_no),
        # only the first escaped space is restored
        path=path.replace(ENCODED_SPACE, " ", 1),
        info=info,
    )


def parse_symbol_kind(ref: XFormat) -> SymbolKind:
    """Guess a symbol kind from its context line.

    Global does not report symbol kinds, so this is an approximation. The
    first matching rule wins.
    """
    info = ref.info
    if "(" in info:
        return SymbolKind.FUNCTION
    if info.startswith("class "):
        return SymbolKind.CLASS
    if info.startswith("struct "):
        return SymbolKind.CLASS
    if info.startswith("enum "):
        return SymbolKind.ENUM
    return SymbolKind.VARIABLE


def xformat_to_location(ref: XFormat) -> Location:
    """Locate ``ref.symbol`` inside its context line.

    When the symbol does not occur in ``info`` the start column is -1 and the
    range is returned unchanged.
    """
    try:
        col_start = ref.info.find(ref.symbol)
        col_end = col_start + len(ref.symbol)
        start = Position(ref.line, col_start)
        end = Position(ref.line, col_end)
        return Location(Path(ref.path), Range(start, end))
    except Exception as exc:
        raise LocationDerivationError(f"Cannot derive location for {ref!r}: {exc}") from exc


def xformat_to_symbol(ref: XFormat) -> SymbolInformation:
    """Build an outline entry; container names are not supported."""
    return SymbolInformation(
        name=ref.symbol,
        kind=parse_symbol_kind(ref),
        container_name="",
        location=xformat_to_location(ref),
    )
