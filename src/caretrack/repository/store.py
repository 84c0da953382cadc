# SPDX-License-Identifier: MIT

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, Protocol

from caretrack.const import LOGGER


class KeyValueStore(Protocol):
    def read(self, key: str, default: Any) -> Any: ...

    def write(self, key: str, value: Any) -> None: ...


class JsonFileStore:
    """Key-value store keeping each value in its own ``<key>.json`` file.

    Reads never fail: a missing or unparsable file yields a copy of the
    default. Writes are best-effort and failures are logged and dropped,
    the in-memory state of the running session stays authoritative.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def __path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str, default: Any) -> Any:
        file_path = self.__path(key)
        if not file_path.is_file():
            return deepcopy(default)
        try:
            return json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            LOGGER.warning("Falling back to default for '%s': %s", key, e)
            return deepcopy(default)

    def write(self, key: str, value: Any) -> None:
        try:
            serialized = json.dumps(value, ensure_ascii=False)
            self.directory.mkdir(parents=True, exist_ok=True)
            self.__path(key).write_text(serialized, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            LOGGER.warning("Could not persist '%s': %s", key, e)


class MemoryStore:
    """In-process store with the same JSON contract as JsonFileStore."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str, default: Any) -> Any:
        if key not in self._values:
            return deepcopy(default)
        try:
            return json.loads(self._values[key])
        except ValueError as e:
            LOGGER.warning("Falling back to default for '%s': %s", key, e)
            return deepcopy(default)

    def write(self, key: str, value: Any) -> None:
        try:
            self._values[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            LOGGER.warning("Could not persist '%s': %s", key, e)

    def raw(self, key: str) -> Optional[str]:
        return self._values.get(key)
