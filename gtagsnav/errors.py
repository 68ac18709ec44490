"""Exception types raised while querying GNU Global.

Per-line errors are recovered inside the query adapter and only logged.
Process spawn failures are left as the ``OSError`` raised by ``subprocess``.
"""

from __future__ import annotations


class GtagsNavError(Exception):
    """Base class for gtagsnav errors."""


class LineParseError(GtagsNavError, ValueError):
    """A ``global -x`` output line does not match the cxref field layout."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Parse cxref output failed: {line}")
        self.line = line


class LocationDerivationError(GtagsNavError):
    """Computing the editor range for a parsed cxref record failed."""
