from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from .base import KeyValueStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(KeyValueStorage):
    """All keys kept in one JSON document on disk.

    Every call re-reads the file so separate processes see each other's writes.
    Writes go through a temp file + rename so a crash never leaves half a document.
    """

    def __init__(self, path: str | os.PathLike):
        self._path = Path(path)

    def _load(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}

        try:
            data = json.loads(text) if text.strip() else {}
        except ValueError:
            logger.warning("Storage file %s is corrupt, treating it as empty", self._path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, treating it as empty", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, items: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except Exception:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)
