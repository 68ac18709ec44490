"""Settings storage and typed accessors."""

from __future__ import annotations

from .settings import BoolDefault, BoolOption, GlobalConfiguration
from .store import ConfigurationStore, WorkspaceConfiguration

__all__ = [
    "BoolDefault",
    "BoolOption",
    "ConfigurationStore",
    "GlobalConfiguration",
    "WorkspaceConfiguration",
]
