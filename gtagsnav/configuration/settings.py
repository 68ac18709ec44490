"""Typed accessors for ``gnuGlobal`` settings.

Resource-scoped settings are read from the store on every call. Settings that
apply to the whole window are pushed out by registered setter callbacks,
re-run whenever configuration changes.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable

import structlog

from ..global_tool.runner import DEFAULT_EXECUTABLE
from .store import ConfigurationStore, WorkspaceConfiguration

logger = structlog.get_logger(__name__)

SECTION = "gnuGlobal"

Resource = str | os.PathLike[str]


class BoolDefault(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"
    DEFAULT = "Default"


class BoolOption(Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


class GlobalConfiguration:
    """Settings accessor for the GNU Global integration."""

    def __init__(self, store: ConfigurationStore | None = None) -> None:
        self.store = store if store is not None else ConfigurationStore()
        self.window_scope_setters: list[Callable[[], None]] = []

    def register_window_scope_setter(self, setter: Callable[[], None]) -> None:
        self.window_scope_setters.append(setter)

    def apply_window_scope_configs(self) -> None:
        """Run every window-scope setter in registration order.

        A failing setter is logged and does not stop the others.
        """
        for setter in self.window_scope_setters:
            try:
                setter()
            except Exception:
                logger.exception("window_scope_setter_failed", setter=repr(setter))

    def get_configuration(self, resource: Resource | None = None) -> WorkspaceConfiguration:
        return self.store.get_configuration(SECTION, resource)

    # window scope

    def get_executable(self) -> str:
        value = self.get_configuration().get("executable", DEFAULT_EXECUTABLE)
        if not isinstance(value, str) or not value.strip():
            return DEFAULT_EXECUTABLE
        return value.strip()

    # resource scope

    def get_auto_update_mode(self, path: Resource) -> BoolDefault:
        """Return the auto-update mode for ``path``; unknown values read as ``DEFAULT``."""
        value = self.get_configuration(path).get("autoUpdate", BoolDefault.DEFAULT.value)
        if isinstance(value, BoolDefault):
            return value
        try:
            return BoolDefault(value)
        except ValueError:
            return BoolDefault.DEFAULT

    def get_completion_mode(self, path: Resource) -> BoolOption:
        """Return the completion mode for ``path``, falling back to ``ENABLED``."""
        value = self.get_configuration(path).get("completion", BoolOption.ENABLED.value)
        if isinstance(value, BoolOption):
            return value
        try:
            return BoolOption(value)
        except ValueError:
            return BoolOption.ENABLED
