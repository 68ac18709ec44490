"""Editor value types returned by navigation providers.

Positions and ranges are plain zero-based coordinates. They are never
validated or reordered, so a range derived from a record whose symbol is
missing from its context text keeps its negative start column.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path


@dataclass(frozen=True)
class Position:
    """Zero-based line/character coordinate in a text document."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass(frozen=True)
class Location:
    """A range inside a file on disk."""

    path: Path
    range: Range


class SymbolKind(IntEnum):
    """Outline symbol kinds, numbered like the editor's symbol-kind enum."""

    CLASS = 4
    ENUM = 9
    FUNCTION = 11
    VARIABLE = 12


@dataclass(frozen=True)
class SymbolInformation:
    name: str
    kind: SymbolKind
    container_name: str
    location: Location


@dataclass(frozen=True)
class CompletionItem:
    label: str
