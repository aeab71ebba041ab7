"""Mini README: File-backed key-value store mirroring browser local storage.

Structure:
    * StorageError - raised when the backing file cannot be read or parsed.
    * LocalStorage - string key/value API persisted as a single JSON object.

Values are always strings, exactly like ``window.localStorage``: callers
serialise structured data themselves. Every write rewrites the whole file
through a temporary sibling that is moved into place, so a crash never leaves
a half-written document behind.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class StorageError(ValueError):
    """The local storage file exists but does not hold a valid document."""


class LocalStorage:
    """Persist string values under string keys in a JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError, RecursionError) as error:
            raise StorageError(f"Local storage file {self._path} is unreadable") from error
        if not isinstance(document, dict):
            raise StorageError(f"Local storage file {self._path} must contain a JSON object")
        return {str(key): str(value) for key, value in document.items()}

    def _write(self, document: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_name(self._path.name + ".tmp")
        temp_path.write_text(json.dumps(document, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(temp_path, self._path)

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string for ``key`` or ``None`` when absent."""

        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

        if not isinstance(value, str):
            raise TypeError("Local storage values must be strings")
        try:
            document = self._read()
        except StorageError:
            LOGGER.warning("Overwriting unreadable local storage file %s", self._path)
            document = {}
        document[key] = value
        self._write(document)
        LOGGER.debug("Stored %s characters under key '%s'", len(value), key)

    def remove_item(self, key: str) -> None:
        document = self._read()
        if document.pop(key, None) is not None:
            self._write(document)

    def clear(self) -> None:
        self._write({})

    def keys(self) -> List[str]:
        return list(self._read().keys())
