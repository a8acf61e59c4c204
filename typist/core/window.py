from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Window:
    """Visible slice of the story: typed tail, current character, upcoming text."""

    prefix: str
    current: str
    suffix: str

    def __len__(self) -> int:
        return len(self.prefix) + len(self.current) + len(self.suffix)


def window(story: str, cursor: int, width: int) -> Window:
    """Slice ``story`` around ``cursor`` to fit ``width`` columns.

    The prefix gets at most a third of the width. The suffix takes every
    column the prefix and the current character leave over, so near the
    start of the story the window stays ``width`` wide.
    """
    width = max(width, 0)
    cursor = max(0, min(cursor, len(story)))
    prefix = story[max(0, cursor - width // 3):cursor]
    current = story[cursor:cursor + 1] if width else ""
    suffix_len = max(0, width - len(prefix) - len(current))
    start = cursor + len(current)
    suffix = story[start:start + suffix_len]
    return Window(prefix=prefix, current=current, suffix=suffix)
