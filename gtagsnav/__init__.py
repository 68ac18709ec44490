"""Public package surface for gtagsnav.

Editor navigation (definitions, references, completion, outline) backed by
the GNU Global source tagging tool.
"""

from __future__ import annotations

from .configuration import BoolDefault, BoolOption, ConfigurationStore, GlobalConfiguration
from .editor import (
    CompletionItem,
    Location,
    Position,
    Range,
    SymbolInformation,
    SymbolKind,
    TextDocument,
)
from .errors import GtagsNavError, LineParseError, LocationDerivationError
from .global_tool import Global
from .providers import NavigationProviders

__all__ = [
    "BoolDefault",
    "BoolOption",
    "CompletionItem",
    "ConfigurationStore",
    "Global",
    "GlobalConfiguration",
    "GtagsNavError",
    "LineParseError",
    "Location",
    "LocationDerivationError",
    "NavigationProviders",
    "Position",
    "Range",
    "SymbolInformation",
    "SymbolKind",
    "TextDocument",
]
