"""Key-value persistence for the latest result and dated snapshots.

Writes are last-write-wins: two overlapping scrapes both write `latest` and the
same `snapshot:<date>` key, and whichever finishes second is kept.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

LATEST_KEY = "latest"
LATEST_RAW_KEY = "latest_raw"


def snapshot_key(date_key: str) -> str:
    return f"snapshot:{date_key}"


def raw_snapshot_key(date_key: str) -> str:
    return f"snapshot_raw:{date_key}"


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]:
        ...

    def put(self, key: str, value: Any) -> None:
        ...


class MemoryStore:
    """Process-local store; values are kept serialized so callers cannot mutate them."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._items.get(key)
        return None if raw is None else json.loads(raw)

    def put(self, key: str, value: Any) -> None:
        self._items[key] = json.dumps(value, ensure_ascii=False)

    def keys(self):
        return sorted(self._items)


class JsonFileStore:
    """One JSON file per key under `base_dir` (':' in keys becomes '__' in file names)."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        safe = key.replace(":", "__").replace("/", "_")
        return self.base_dir / f"{safe}.json"

    def get(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def put(self, key: str, value: Any) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.base_dir, prefix=f".{path.stem}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(value, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
