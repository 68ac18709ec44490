"""GNU Global query adapter and cxref output parsing."""

from __future__ import annotations

from .cxref import XFormat, parse_symbol_kind, parse_xformat, xformat_to_location, xformat_to_symbol
from .runner import DEFAULT_EXECUTABLE, Global, convert_xformat_lines

__all__ = [
    "DEFAULT_EXECUTABLE",
    "Global",
    "XFormat",
    "convert_xformat_lines",
    "parse_symbol_kind",
    "parse_xformat",
    "xformat_to_location",
    "xformat_to_symbol",
]
