"""Flat-file JSON log of lesson submissions.

Each record is appended to a single JSON array. Appends from one process are
serialized and the file is swapped in atomically, but separate processes
doing read-modify-write on the same file can still drop each other's entries.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from lesson_quiz.models import SubmissionRecord

_log = logging.getLogger("lesson_quiz.db")


class SubmissionLog:
    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_entries(self) -> list:
        """Existing entries; a missing, unreadable or malformed file counts as empty."""
        try:
            raw = self.path.read_text(encoding="utf-8")
            entries = json.loads(raw or "[]")
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            _log.warning("Ignoring unreadable submissions file %s: %s", self.path, e)
            return []
        if not isinstance(entries, list):
            _log.warning("Ignoring non-array submissions file %s", self.path)
            return []
        return entries

    def _write_entries(self, entries: list) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entries, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def append(self, record: SubmissionRecord) -> int:
        """Append *record*; returns the number of entries now in the log.

        Raises ``OSError`` when the file cannot be written.
        """
        with self._lock:
            entries = self._read_entries()
            entries.append(record.to_dict())
            self._write_entries(entries)
        _log.debug("Saved submission %s (%d total)", record.id, len(entries))
        return len(entries)
