"""Best-score persistence.

The stored value is a single non-negative integer kept under one namespaced
key. Loading falls back to 0 on any problem and saving never raises.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from typing import Protocol

from .config import HIGHSCORE_FILE, HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


def coerce_score(raw: object) -> int:
    """Return raw as a non-negative int, or 0 if it is not one."""
    # bool is an int subclass, but a stored True is not a score.
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(0, raw)
    if isinstance(raw, str):
        try:
            return max(0, int(raw.strip()))
        except ValueError:
            return 0
    return 0


class MemoryScoreStore:
    """In-process store. Records every save for inspection."""

    def __init__(self, initial: int = 0) -> None:
        self.value = initial
        self.saves: list[int] = []

    def load(self) -> int:
        return coerce_score(self.value)

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves.append(self.value)


class JsonScoreStore:
    """Keeps the best score in a JSON object on disk under ``key``."""

    def __init__(self, path: str = HIGHSCORE_FILE, key: str = HIGHSCORE_KEY) -> None:
        self.path = path
        self.key = key

    def _read(self) -> dict:
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object in {self.path}")
        return data

    def load(self) -> int:
        try:
            data = self._read()
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, exc)
            return 0
        return coerce_score(data.get(self.key, 0))

    def save(self, value: int) -> None:
        try:
            score = max(0, int(value))
        except (TypeError, ValueError) as exc:
            logger.warning("Refusing to save non-integer best score %r: %s", value, exc)
            return
        try:
            data = self._read()
        except (OSError, ValueError):
            data = {}
        data[self.key] = score

        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            # A failed write must leave the existing file intact.
            fd, tmp_path = tempfile.mkstemp(prefix=".highscore-", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as exc:
            logger.warning("Could not save best score to %s: %s", self.path, exc)
        finally:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp_path)
