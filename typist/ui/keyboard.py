"""On-screen keyboard: key caps, per-frame hints and painting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from rich.text import Text
from textual.widget import Widget

from typist.core.layouts import EMPTY, Layout, LayoutKind
from typist.core.locator import locate
from typist.ui.canvas import Canvas
from typist.ui.colors import KEY_HINT, KEY_NORMAL, Theme
from typist.ui.models import INDICATORS, Highlight, IndicatorCap, KeyCap

logger = logging.getLogger(__name__)


def highlight_for(layout: Layout, expected: Optional[str]) -> Highlight:
    """Recompute the hints for ``expected`` from scratch; nothing is carried over."""
    if expected is None:
        return Highlight()
    return Highlight(expected=expected, location=locate(layout, expected))


def odd_floor(n: int) -> int:
    """Largest odd number <= ``n`` (0 for ``n <= 0``)."""
    if n <= 0:
        return 0
    return n if n % 2 else n - 1


@dataclass(frozen=True)
class GridMetrics:
    row_height: int
    col_width: int
    left: int
    top: int


class Keyboard:
    """Key caps for one layout. Switching layouts builds a new Keyboard."""

    def __init__(self, kind: LayoutKind) -> None:
        self.kind = kind
        self.layout = kind.layout
        self.keys: List[List[KeyCap]] = [
            [
                KeyCap(row=row_i, col=col_i, label="" if char == EMPTY else char)
                for col_i, char in enumerate(row)
            ]
            for row_i, row in enumerate(self.layout.base)
        ]
        self.indicators = INDICATORS

    @property
    def name(self) -> str:
        return self.layout.name

    def next_layout(self) -> "Keyboard":
        keyboard = Keyboard(self.kind.next())
        logger.info("Switched layout %s -> %s", self.name, keyboard.name)
        return keyboard

    def metrics(self, width: int, height: int) -> GridMetrics:
        """Uniform odd-sized cells, centered, leaving one line for the indicators."""
        rows = max(self.layout.rows, 1)
        cols = max(self.layout.cols, 1)
        row_height = odd_floor((height - 1) // rows)
        col_width = odd_floor(width // cols)
        grid_height = row_height * rows + 1
        return GridMetrics(
            row_height=row_height,
            col_width=col_width,
            left=max(0, (width - col_width * cols) // 2),
            top=max(0, (height - grid_height) // 2),
        )

    def paint(self, width: int, height: int, expected: Optional[str]) -> Canvas:
        canvas = Canvas(width, height)
        highlight = highlight_for(self.layout, expected)
        m = self.metrics(width, height)

        for row in self.keys:
            for cap in row:
                theme = KEY_HINT if highlight.is_key_hinted(cap) else KEY_NORMAL
                _paint_cap(
                    canvas,
                    m.left + cap.col * m.col_width,
                    m.top + cap.row * m.row_height,
                    m.col_width,
                    m.row_height,
                    cap.label,
                    theme,
                )

        indicator_y = m.top + self.layout.rows * m.row_height
        widths = [len(cap.label) + 2 for cap in self.indicators]
        x = max(0, (width - sum(widths)) // 2)
        for cap, cap_width in zip(self.indicators, widths):
            theme = KEY_HINT if highlight.is_indicator_hinted(cap) else KEY_NORMAL
            _paint_cap(canvas, x, indicator_y, cap_width, 1, cap.label, theme)
            x += cap_width
        return canvas


def _paint_cap(
    canvas: Canvas, x: int, y: int, width: int, height: int, label: str, theme: Theme
) -> None:
    if width <= 0 or height <= 0:
        return
    canvas.fill(x, y, width, height, theme.face)
    if height > 2:
        canvas.write(x, y, "▔" * width, theme.bevel)
    if height > 1:
        canvas.write(x, y + height - 1, "▁" * width, theme.edge)
    label = label[:width]
    margin_x = (width - len(label)) // 2
    margin_y = (height - 1) // 2
    canvas.write(x + margin_x, y + margin_y, label, theme.label)


class KeyboardView(Widget):
    """Bottom panel showing the active layout with the next key hinted."""

    def __init__(self, keyboard: Keyboard, expected: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._keyboard = keyboard
        self._expected = expected
        self.border_subtitle = " Toggle Hints <C-k>  Next Layout <C-n> "
        self._update_title()

    @property
    def keyboard(self) -> Keyboard:
        return self._keyboard

    def show(self, keyboard: Keyboard, expected: Optional[str]) -> None:
        """Display ``keyboard`` hinting ``expected`` and schedule a repaint."""
        self._keyboard = keyboard
        self._expected = expected
        self._update_title()
        self.refresh()

    def _update_title(self) -> None:
        self.border_title = f" Layout - {self._keyboard.name} "

    def render(self) -> Text:
        size = self.content_size
        return self._keyboard.paint(size.width, size.height, self._expected).to_text()
