"""Character-cell canvas rendered to rich ``Text``."""

from __future__ import annotations

from typing import List, Optional, Tuple

from rich.style import Style
from rich.text import Text

Cell = Tuple[str, Optional[Style]]


class Canvas:
    """Fixed-size grid of styled cells. Writes outside the grid are clipped."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self._cells: List[List[Cell]] = [
            [(" ", None)] * self.width for _ in range(self.height)
        ]

    def fill(self, x: int, y: int, width: int, height: int, style: Style) -> None:
        for row in range(max(y, 0), min(y + height, self.height)):
            for col in range(max(x, 0), min(x + width, self.width)):
                self._cells[row][col] = (" ", style)

    def write(self, x: int, y: int, text: str, style: Style) -> None:
        if not 0 <= y < self.height:
            return
        for i, char in enumerate(text):
            col = x + i
            if 0 <= col < self.width:
                self._cells[y][col] = (char, style)

    def char_at(self, x: int, y: int) -> str:
        return self._cells[y][x][0]

    def style_at(self, x: int, y: int) -> Optional[Style]:
        return self._cells[y][x][1]

    def to_text(self) -> Text:
        """Join rows into one ``Text``, merging runs of equally styled cells."""
        text = Text(no_wrap=True, overflow="crop")
        for y, row in enumerate(self._cells):
            if y:
                text.append("\n")
            run = ""
            run_style: Optional[Style] = None
            for char, style in row:
                if style != run_style and run:
                    text.append(run, run_style)
                    run = ""
                run_style = style
                run += char
            if run:
                text.append(run, run_style)
        return text
