"""Editor-facing providers combining settings with the Global query adapter.

Mirrors how an editor extension registers its definition, reference,
completion and document-symbol providers against one shared ``Global``.
"""

from __future__ import annotations

from .configuration import BoolDefault, BoolOption, GlobalConfiguration
from .editor import CompletionItem, Location, Position, SymbolInformation, TextDocument
from .global_tool import Global


class NavigationProviders:
    def __init__(
        self,
        configuration: GlobalConfiguration | None = None,
        global_tool: Global | None = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else GlobalConfiguration()
        self.global_tool = global_tool if global_tool is not None else Global()
        self.configuration.register_window_scope_setter(self._apply_executable)
        self.configuration.apply_window_scope_configs()

    def _apply_executable(self) -> None:
        self.global_tool.executable = self.configuration.get_executable()

    def on_configuration_changed(self) -> None:
        """Re-apply window-scoped settings after the settings store changed."""
        self.configuration.apply_window_scope_configs()

    def auto_update_mode(self, document: TextDocument) -> BoolDefault:
        return self.configuration.get_auto_update_mode(document.uri)

    def provide_definition(self, document: TextDocument, position: Position) -> list[Location]:
        return self.global_tool.provide_definition(document, position)

    def provide_references(self, document: TextDocument, position: Position) -> list[Location]:
        return self.global_tool.provide_references(document, position)

    def provide_completion_items(
        self,
        document: TextDocument,
        position: Position,
    ) -> list[CompletionItem]:
        """Return completions unless completion is disabled for this file."""
        if self.configuration.get_completion_mode(document.uri) is BoolOption.DISABLED:
            return []
        return self.global_tool.provide_completion_items(document, position)

    def provide_document_symbols(self, document: TextDocument) -> list[SymbolInformation]:
        return self.global_tool.provide_document_symbols(document)
