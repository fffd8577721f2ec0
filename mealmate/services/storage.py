import json
import os
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from mealmate.core.logging_config import get_logger

logger = get_logger(__name__)


class KeyValueStore(ABC):
    """Opaque load/save of JSON-compatible values by key."""

    @abstractmethod
    def load(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent."""
        pass

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        pass


class InMemoryStore(KeyValueStore):
    def __init__(self):
        self._data: Dict[str, str] = {}

    def load(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def save(self, key: str, value: Any) -> None:
        # Serialized so callers never share mutable state with the store
        self._data[key] = json.dumps(value)


class JsonFileStore(KeyValueStore):
    """One JSON file per key under a directory."""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        safe_key = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return os.path.join(self.directory, f"{safe_key}.json")

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as exc:
            logger.error(f"Error decoding {path}: {exc}")
            return None

    def save(self, key: str, value: Any) -> None:
        os.makedirs(self.directory, exist_ok=True)
        path = self._path(key)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(value, f, indent=2)
        os.replace(tmp_path, path)
