# storage.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "snakeHighScore"


class MemoryStore:
    """Key/value store that lives only as long as the process."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(data or {})

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(MemoryStore):
    """
    Key/value store backed by a small JSON object on disk.

    A missing or unreadable file reads as empty. Write failures are logged
    and the value is still kept in memory for the rest of the session.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self._read())

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def set(self, key: str, value: str) -> None:
        super().set(key, value)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write {self.path}: {e}")


def load_high_score(store, key: str = HIGHSCORE_KEY) -> int:
    raw = store.get(key)
    if raw is None:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning(f"Ignoring malformed high score {raw!r}")
        return 0

def save_high_score(store, score: int, key: str = HIGHSCORE_KEY) -> None:
    store.set(key, str(int(score)))
    logger.info(f"High score saved: {score}")
