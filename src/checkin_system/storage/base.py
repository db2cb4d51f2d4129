from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """String key-value medium the repositories persist into.

    Note (DIP): repositories depend on this interface, never on a concrete medium.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


def read_json(storage: KeyValueStorage, key: str, default: Any, *, expected: type = object) -> Any:
    """Decode the JSON value under `key`.

    Missing, undecodable or wrongly-shaped values read as `default`.
    """

    raw = storage.get(key)
    if not raw:
        return default
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning("Discarding corrupt value stored under %r", key)
        return default
    if not isinstance(value, expected):
        logger.warning("Discarding value of unexpected type %s under %r", type(value).__name__, key)
        return default
    return value


def write_json(storage: KeyValueStorage, key: str, value: Any) -> None:
    storage.set(key, json.dumps(value))
