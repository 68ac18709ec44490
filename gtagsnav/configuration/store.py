"""Read-through JSON settings store with folder-scoped overrides.

Settings live in a JSON object. Keys may be written flat
(``"gnuGlobal.completion"``) or nested (``{"gnuGlobal": {"completion": ...}}``).
Entries under ``"folders"`` override top-level values for files inside the
named directory; the deepest matching folder wins.

Nothing is cached: every ``get`` re-reads the backing file, and malformed or
missing files read as an empty object.
"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

import structlog
from platformdirs import user_config_dir

logger = structlog.get_logger(__name__)

APP_NAME = "gtagsnav"
CONFIG_FILENAME = "settings.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
FOLDERS_KEY = "folders"

_MISSING = object()


def load_config(path: Path) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(path: Path, data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("config_write_failed", path=str(path), error=str(exc))


def _lookup(scope: dict[str, object], key: str) -> object:
    """Resolve ``key`` as a flat dotted key first, then as a nested path."""
    if key in scope:
        return scope[key]
    node: object = scope
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return _MISSING
        node = node[part]
    return node


def _normalize_dir(path: str | os.PathLike[str]) -> Path:
    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def _folder_scopes(data: dict[str, object], resource: str | os.PathLike[str] | None) -> list[dict[str, object]]:
    """Return folder setting blocks containing ``resource``, deepest first."""
    folders = data.get(FOLDERS_KEY)
    if resource is None or not isinstance(folders, dict):
        return []

    target = _normalize_dir(resource)
    matches: list[tuple[int, dict[str, object]]] = []
    for folder, settings in folders.items():
        if not isinstance(folder, str) or not isinstance(settings, dict):
            continue
        root = _normalize_dir(folder)
        if target == root or target.is_relative_to(root):
            matches.append((len(root.parts), settings))
    matches.sort(key=lambda item: item[0], reverse=True)
    return [settings for _depth, settings in matches]


class WorkspaceConfiguration:
    """One settings section viewed from an optional file resource."""

    def __init__(
        self,
        store: ConfigurationStore,
        section: str = "",
        resource: str | os.PathLike[str] | None = None,
    ) -> None:
        self._store = store
        self.section = section
        self.resource = resource

    def _full_key(self, key: str) -> str:
        return f"{self.section}.{key}" if self.section else key

    def _resolve(self, key: str) -> object:
        data = self._store.read()
        full_key = self._full_key(key)
        for scope in (*_folder_scopes(data, self.resource), data):
            value = _lookup(scope, full_key)
            if value is not _MISSING:
                return value
        return _MISSING

    def get(self, key: str, default: Any = None) -> Any:
        value = self._resolve(key)
        return default if value is _MISSING else value

    def has(self, key: str) -> bool:
        return self._resolve(key) is not _MISSING

    def update(self, key: str, value: object) -> None:
        """Write ``key`` at top level; folder overrides are left untouched."""
        self._store.update(self._full_key(key), value)


class ConfigurationStore:
    """JSON settings backed by a file, or by an in-memory dict when ``data`` is given."""

    def __init__(self, path: Path | None = None, data: dict[str, object] | None = None) -> None:
        self.path = DEFAULT_CONFIG_PATH if path is None else path
        self._data = data

    def read(self) -> dict[str, object]:
        if self._data is not None:
            return self._data
        return load_config(self.path)

    def get_configuration(
        self,
        section: str = "",
        resource: str | os.PathLike[str] | None = None,
    ) -> WorkspaceConfiguration:
        return WorkspaceConfiguration(self, section, resource)

    def update(self, key: str, value: object) -> None:
        """Set a dotted key at top level, stored as nested objects."""
        data = copy.deepcopy(self.read())
        data.pop(key, None)
        node = data
        parts = key.split(".")
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value

        if self._data is not None:
            self._data.clear()
            self._data.update(data)
            return
        save_config(self.path, data)
