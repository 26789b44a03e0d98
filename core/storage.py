"""Key-value blob stores for persisted state.

Each blob is a JSON-serializable value saved whole (no partial updates).
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def load(self, key: str) -> Optional[Any]:
        """Stored value, or None if the key was never saved."""

    def save(self, key: str, value: Any) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryBlobStore:
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def save(self, key: str, value: Any) -> None:
        # Round-trip through JSON so unserializable state fails here too
        self._data[key] = json.loads(json.dumps(value))

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileBlobStore:
    """One ``<key>.json`` file per blob under ``directory``."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Corrupt blob %s, ignoring it: %s", path, e)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}-", suffix=".tmp", dir=self.directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def delete(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
