"""
Client-side key storage.

Holds the single raw API key string the gate remembers between runs.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from .interfaces import IKeyStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "admin_api_key"


class MemoryKeyStore(IKeyStore):
    """Non-durable store, for embedding the gate in a single process."""

    def __init__(self, key: Optional[str] = None):
        self._key = key

    def get(self) -> Optional[str]:
        return self._key

    def set(self, key: str) -> None:
        self._key = key

    def clear(self) -> None:
        self._key = None


class FileKeyStore(IKeyStore):
    """
    JSON file store, readable only by the current user.

    The file may hold other entries; only STORAGE_KEY is touched.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> Optional[str]:
        value = self._read().get(STORAGE_KEY)
        return value if isinstance(value, str) and value else None

    def set(self, key: str) -> None:
        data = self._read()
        data[STORAGE_KEY] = key
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if STORAGE_KEY not in data:
            return
        del data[STORAGE_KEY]
        if data:
            self._write(data)
        else:
            self._path.unlink(missing_ok=True)

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable key store {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f)
