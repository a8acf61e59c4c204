"""Main application screen: story panel over keyboard panel."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding

from typist.core.session import TypingSession
from typist.ui.keyboard import Keyboard, KeyboardView
from typist.ui.story_view import StoryView

logger = logging.getLogger(__name__)


class TypistApp(App[bool]):
    """Typing loop: each key press is graded against the story, then both panels repaint.

    The app returns True when the reader leaves with Escape, which is the
    only exit after which progress should be saved.
    """

    CSS = """
    Screen {
        layout: vertical;
    }
    StoryView {
        height: 2fr;
        border: round grey;
        border-title-align: center;
        border-subtitle-align: center;
        content-align: center middle;
    }
    KeyboardView {
        height: 1fr;
        border: round grey;
        border-title-align: center;
        border-subtitle-align: center;
    }
    """

    BINDINGS = [
        Binding("escape", "quit_session", "Exit", priority=True),
        Binding("tab", "skip", "Skip", priority=True),
        Binding("ctrl+n", "next_layout", "Next Layout", priority=True),
        Binding("ctrl+k", "toggle_keyboard", "Toggle Hints", priority=True),
    ]

    def __init__(self, session: TypingSession, keyboard: Keyboard, show_keyboard: bool = True) -> None:
        super().__init__()
        self.session = session
        self.keyboard = keyboard
        self._show_keyboard = show_keyboard

    def compose(self) -> ComposeResult:
        yield StoryView(self.session)
        keyboard_view = KeyboardView(self.keyboard, self.session.next())
        keyboard_view.display = self._show_keyboard
        yield keyboard_view

    @property
    def keyboard_visible(self) -> bool:
        return self.query_one(KeyboardView).display

    def on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            self.session.press_return()
        elif event.is_printable and event.character:
            self.session.type_char(event.character)
        else:
            return
        event.stop()
        self._refresh_panels()

    def action_skip(self) -> None:
        self.session.skip()
        self._refresh_panels()

    def action_next_layout(self) -> None:
        self.keyboard = self.keyboard.next_layout()
        self._refresh_panels()

    def action_toggle_keyboard(self) -> None:
        view = self.query_one(KeyboardView)
        view.display = not view.display

    def action_quit_session(self) -> None:
        logger.info("Session ended at %d/%d characters", self.session.cursor, self.session.length)
        self.exit(True)

    def _refresh_panels(self) -> None:
        self.query_one(StoryView).update_status()
        self.query_one(KeyboardView).show(self.keyboard, self.session.next())
