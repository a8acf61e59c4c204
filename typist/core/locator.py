from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Set

from typist.core.layouts import EMPTY, Layout, shift
from typist.core.story import RETURN_GLYPH


class Modifier(enum.Enum):
    """Modifier indicator that must be held; the value is its on-screen label."""

    SHIFT = "shift"
    SYMBOL = "sym"
    NUMERIC = "cur"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    row: int
    col: int
    modifier: Optional[Modifier] = None


# Characters with their own indicator below the grid instead of a grid key.
INDICATOR_CHARS = frozenset({" ", RETURN_GLYPH})


def locate(layout: Layout, char: str) -> Optional[Location]:
    """Find the key (and modifier) that types ``char`` on ``layout``.

    Lookup order is fixed and the first match wins: the base layer as is,
    the symbol layer, the numeric layer (shifted right by the layout's
    numeric offset), then the base layer with Shift applied. A character
    found on the symbol layer therefore never resolves to a shifted key.
    Returns ``None`` when no key produces ``char``.
    """
    if char == EMPTY:
        return None
    for row, col, cell in layout.cells(layout.base):
        if cell == char:
            return Location(row, col)
    for row, col, cell in layout.cells(layout.symbol):
        if cell == char:
            return Location(row, col, Modifier.SYMBOL)
    for row, col, cell in layout.cells(layout.numeric):
        if cell == char:
            return Location(row, col + layout.numeric_offset, Modifier.NUMERIC)
    for row, col, cell in layout.cells(layout.base):
        if cell != EMPTY and shift(cell) == char:
            return Location(row, col, Modifier.SHIFT)
    return None


def unreachable(layout: Layout, text: Iterable[str]) -> Set[str]:
    """Distinct characters of ``text`` that no key or indicator of ``layout`` types."""
    return {
        char
        for char in set(text)
        if char not in INDICATOR_CHARS and locate(layout, char) is None
    }
