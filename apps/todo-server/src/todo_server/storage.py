from __future__ import annotations
import json
import logging
import os
import tempfile
import threading
from typing import List, Optional

from .models import Todo

logger = logging.getLogger(__name__)


class JsonStore:
    """Whole-list JSON file persistence for todo records.

    Every ``load`` reads the full file and every ``save`` rewrites it; nothing
    is cached between calls. Callers hold ``lock`` across a load-mutate-save
    cycle so concurrent writers in one process do not lose updates.
    """

    def __init__(self, data_file: str):
        self.data_file = data_file
        self.lock = threading.RLock()

    # ---------- Persistence ----------
    def _atomic_write(self, path: str, content: str):
        d = os.path.dirname(path) or "."
        os.makedirs(d, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=d, prefix=".tmp_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, path)
        finally:
            if os.path.exists(tmp):
                os.remove(tmp)

    def load(self) -> List[Todo]:
        """Return every stored todo, or an empty list if the file is unusable."""
        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.warning("Data file %s not found, starting with an empty list", self.data_file)
            return []
        except (OSError, ValueError) as e:
            logger.warning("Could not read data file %s: %s", self.data_file, e)
            return []

        if not isinstance(raw, list):
            logger.warning("Data file %s does not hold a JSON array, ignoring it", self.data_file)
            return []
        todos = []
        for item in raw:
            if not isinstance(item, dict) or "id" not in item:
                logger.warning("Skipping malformed record in %s: %r", self.data_file, item)
                continue
            todos.append(Todo.from_dict(item))
        return todos

    def save(self, todos: List[Todo]) -> bool:
        """Overwrite the data file with ``todos``; returns False on failure."""
        try:
            content = json.dumps([t.to_dict() for t in todos], ensure_ascii=False, indent=2)
            self._atomic_write(self.data_file, content)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to write data file %s", self.data_file)
            return False
        logger.debug("Saved %d todo(s) to %s", len(todos), self.data_file)
        return True

    # ---------- Lookup ----------
    @staticmethod
    def find(todos: List[Todo], tid: str) -> Optional[Todo]:
        return next((t for t in todos if t.id == tid), None)
