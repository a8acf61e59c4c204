"""Theme colors for key caps and the story panel."""

from __future__ import annotations

from dataclasses import dataclass

from rich.style import Style


@dataclass(frozen=True)
class Theme:
    """Palette of one key cap state."""

    text: str
    background: str
    highlight: str
    shadow: str

    @property
    def face(self) -> Style:
        return Style(color=self.text, bgcolor=self.background)

    @property
    def bevel(self) -> Style:
        return Style(color=self.highlight, bgcolor=self.background)

    @property
    def edge(self) -> Style:
        return Style(color=self.shadow, bgcolor=self.background)

    @property
    def label(self) -> Style:
        return Style(color="white", bgcolor=self.background, bold=True)


KEY_NORMAL = Theme(
    text="#101830",
    background="#304890",
    highlight="#4060C0",
    shadow="#203060",
)

KEY_HINT = Theme(
    text="#103010",
    background="#309030",
    highlight="#40C040",
    shadow="#206020",
)


class StoryColors:
    """Styles of the three parts of the story window."""

    TYPED = Style(color="bright_black")
    CURRENT = Style(color="white", bold=True, underline=True)
    UPCOMING = Style(color="grey70")
