"""Editor-facing primitives: documents, positions, and result values."""

from __future__ import annotations

from .document import TextDocument
from .types import (
    CompletionItem,
    Location,
    Position,
    Range,
    SymbolInformation,
    SymbolKind,
)

__all__ = [
    "CompletionItem",
    "Location",
    "Position",
    "Range",
    "SymbolInformation",
    "SymbolKind",
    "TextDocument",
]
