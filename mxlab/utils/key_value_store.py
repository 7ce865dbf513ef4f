"""String key-value stores backing the persisted sidebar state."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, MutableMapping, Optional, Protocol

from mxlab.utils.json_store import load_json, save_json


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MappingKeyValueStore:
    """Adapt any mutable mapping (a dict, the Flask session) to a store."""

    def __init__(self, mapping: Optional[MutableMapping[str, str]] = None) -> None:
        self._mapping: MutableMapping[str, str] = {} if mapping is None else mapping

    def get(self, key: str) -> Optional[str]:
        value = self._mapping.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        self._mapping[key] = value


class JsonFileKeyValueStore:
    """Keep string values in a single JSON object file.

    The file is read on every ``get`` and rewritten on every ``set`` so
    that several processes sharing a client id see the last write.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        data = load_json(self.path, {})
        if not isinstance(data, dict):
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        save_json(self.path, data)
