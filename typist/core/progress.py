from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

logger = logging.getLogger(__name__)


class ProgressError(ValueError):
    """The progress file exists but does not hold a valid record."""


@dataclass
class Progress:
    chars: int = 0


class ProgressStore:
    """Stores how far into one story the reader has typed.

    One JSON file per story, ``{"chars": N}``. A missing file is created with
    ``chars = 0``; an existing file that cannot be read as a progress record
    raises ``ProgressError`` instead of being reset."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> Progress:
        if not self._file_path.exists():
            progress = Progress()
            self.save(progress)
            logger.info("Created progress file %s", self._file_path)
            return progress

        text = self._file_path.read_text(encoding="utf-8")
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProgressError(f"{self._file_path}: not valid JSON ({e})") from e
        if not isinstance(payload, dict) or "chars" not in payload:
            raise ProgressError(f"{self._file_path}: expected an object with 'chars'")
        chars = payload["chars"]
        # bool is an int subclass; reject it explicitly
        if isinstance(chars, bool) or not isinstance(chars, int):
            raise ProgressError(f"{self._file_path}: 'chars' must be an integer")
        if chars < 0:
            raise ProgressError(f"{self._file_path}: 'chars' must not be negative")

        logger.info("Loaded progress from %s: %d characters", self._file_path, chars)
        return Progress(chars=chars)

    def save(self, progress: Progress) -> None:
        """Overwrite the file with ``progress``. I/O errors propagate."""
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text(json.dumps(asdict(progress), indent=2), encoding="utf-8")
        logger.info("Saved progress to %s: %d characters", self._file_path, progress.chars)
