from __future__ import annotations

import logging
import time
from typing import Optional

from typist.core.story import RETURN_GLYPH

logger = logging.getLogger(__name__)


def next_char(story: str, cursor: int) -> Optional[str]:
    """Character at ``cursor``, or None once the whole story has been typed."""
    if 0 <= cursor < len(story):
        return story[cursor]
    return None


class TypingSession:
    """Tracks the read cursor through a story and the keystrokes graded so far.

    The cursor counts correctly typed characters and only moves forward:
    a graded keystroke advances it when it matches the expected character,
    and ``skip`` advances it unconditionally. Speed metrics:
      * **CPM** – correct characters per minute.
      * **WPM** – CPM / 5.
    """

    def __init__(self, story: str, cursor: int = 0) -> None:
        """Start a session on ``story`` at ``cursor``, clamped into the story."""
        clamped = max(0, min(cursor, len(story)))
        if clamped != cursor:
            logger.warning(
                "Progress %d is outside the story (%d characters); using %d",
                cursor,
                len(story),
                clamped,
            )
        self._story = story
        self._cursor = clamped
        self._start_time = time.time()
        self._keystrokes = 0
        self._correct = 0
        self._skipped = 0

    @property
    def story(self) -> str:
        return self._story

    @property
    def cursor(self) -> int:
        """Number of story characters already typed."""
        return self._cursor

    @property
    def length(self) -> int:
        return len(self._story)

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def keystrokes(self) -> int:
        """Graded keystrokes (skips are not graded)."""
        return self._keystrokes

    @property
    def correct(self) -> int:
        return self._correct

    @property
    def errors(self) -> int:
        return self._keystrokes - self._correct

    @property
    def skipped(self) -> int:
        return self._skipped

    def next(self) -> Optional[str]:
        return next_char(self._story, self._cursor)

    def is_complete(self) -> bool:
        return self._cursor >= len(self._story)

    def advance(self) -> int:
        """Move the cursor one character forward; a no-op at the end of the story."""
        if not self.is_complete():
            self._cursor += 1
        return self._cursor

    def type_char(self, char: str) -> bool:
        """Grade a typed character. Returns True if the cursor advanced."""
        expected = self.next()
        if expected is None:
            return False
        self._keystrokes += 1
        if char != expected:
            return False
        self._correct += 1
        self.advance()
        return True

    def press_return(self) -> bool:
        """Grade the Enter key against the return glyph."""
        return self.type_char(RETURN_GLYPH)

    def skip(self) -> bool:
        """Advance past the expected character without grading it."""
        if self.is_complete():
            return False
        self._skipped += 1
        self.advance()
        return True

    def accuracy(self) -> float:
        """Correct keystrokes as a percentage of graded ones (100 before any)."""
        if not self._keystrokes:
            return 100.0
        return (self._correct / self._keystrokes) * 100.0

    def cpm(self) -> float:
        elapsed_minutes = max((time.time() - self._start_time) / 60.0, 1e-6)
        return self._correct / elapsed_minutes

    def wpm(self) -> float:
        return self.cpm() / 5.0
