"""Best-score persistence.

The store is a tiny key/value map of non-negative integers. Losing it is not
fatal: unreadable data reads as absent and failed writes are logged and
dropped.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Protocol

from .config import DEFAULT_SCORES_PATH, SCORES_ENV_VAR, STORAGE_KEY

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get(self, key: str) -> int | None: ...

    def set(self, key: str, value: int) -> None: ...


def _as_score(value: object) -> int | None:
    # bool is an int subclass; a stored true/false is not a score
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        score = int(value)
    except (ValueError, OverflowError):
        return None
    return score if score >= 0 else None


class MemoryScoreStore:
    """In-process store that records every write."""

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self.data: dict[str, int] = dict(initial or {})
        self.writes: list[tuple[str, int]] = []

    def get(self, key: str) -> int | None:
        return _as_score(self.data.get(key))

    def set(self, key: str, value: int) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class JsonScoreStore:
    """Scores kept as one JSON object in a file, created on first write."""

    def __init__(self, path: str) -> None:
        self.path = os.path.expanduser(path)

    def _load(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Could not read scores from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring scores file %s: expected a JSON object", self.path)
            return {}
        return data

    def get(self, key: str) -> int | None:
        raw = self._load().get(key)
        score = _as_score(raw)
        if raw is not None and score is None:
            logger.warning("Ignoring invalid stored value for %r: %r", key, raw)
        return score

    def set(self, key: str, value: int) -> None:
        data = self._load()
        data[key] = int(value)
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as exc:
            logger.warning("Could not save scores to %s: %s", self.path, exc)


def default_scores_path() -> str:
    return os.environ.get(SCORES_ENV_VAR) or DEFAULT_SCORES_PATH


def load_best_score(store: ScoreStore, key: str = STORAGE_KEY) -> int:
    """Stored best score, or 0 when there is none."""
    best = store.get(key)
    return best if best is not None else 0
