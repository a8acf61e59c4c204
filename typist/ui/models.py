"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from typist.core.locator import Location, Modifier
from typist.core.story import RETURN_GLYPH


@dataclass(frozen=True)
class KeyCap:
    """One grid key: its position and the label painted on it."""

    row: int
    col: int
    label: str


@dataclass(frozen=True)
class IndicatorCap:
    """A button below the grid: a modifier, or a key with no grid cell."""

    label: str
    modifier: Optional[Modifier] = None
    char: Optional[str] = None


INDICATORS = (
    IndicatorCap(Modifier.NUMERIC.label, modifier=Modifier.NUMERIC),
    IndicatorCap(Modifier.SYMBOL.label, modifier=Modifier.SYMBOL),
    IndicatorCap(Modifier.SHIFT.label, modifier=Modifier.SHIFT),
    IndicatorCap("space", char=" "),
    IndicatorCap("enter", char=RETURN_GLYPH),
)


@dataclass(frozen=True)
class Highlight:
    """Which caps to hint for one expected character."""

    expected: Optional[str] = None
    location: Optional[Location] = None

    def is_key_hinted(self, cap: KeyCap) -> bool:
        loc = self.location
        return loc is not None and (loc.row, loc.col) == (cap.row, cap.col)

    def is_indicator_hinted(self, cap: IndicatorCap) -> bool:
        if cap.modifier is not None:
            return self.location is not None and self.location.modifier is cap.modifier
        return self.expected is not None and self.expected == cap.char
