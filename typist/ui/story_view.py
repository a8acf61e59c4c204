"""Story panel: the text window around the cursor."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from typist.core.session import TypingSession
from typist.core.window import window
from typist.ui.colors import StoryColors


def story_line(session: TypingSession, width: int) -> Text:
    """Typed prefix, current character and upcoming text, styled for display."""
    win = window(session.story, session.cursor, width)
    return Text.assemble(
        (win.prefix, StoryColors.TYPED),
        (win.current, StoryColors.CURRENT),
        (win.suffix, StoryColors.UPCOMING),
        no_wrap=True,
        overflow="crop",
    )


def status_line(session: TypingSession) -> str:
    if session.is_complete():
        return f" Done {session.cursor}/{session.length}  Exit <Esc> "
    return (
        f" {session.cursor}/{session.length}"
        f"  {session.accuracy():.0f}%"
        f"  {session.wpm():.0f} wpm"
        "  Exit <Esc> "
    )


class StoryView(Widget):
    """Upper panel with the story window centered in it."""

    def __init__(self, session: TypingSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self._session = session
        self.border_title = " Story "
        self.border_subtitle = status_line(session)

    def update_status(self) -> None:
        self.border_subtitle = status_line(self._session)
        self.refresh()

    def render(self) -> Text:
        return story_line(self._session, self.content_size.width)
