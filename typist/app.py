"""Application entry point and setup for the typist typing tutor."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from typist.core.config import Settings, load_settings
from typist.core.layouts import LayoutKind, get_layout
from typist.core.locator import unreachable
from typist.core.progress import Progress, ProgressStore
from typist.core.session import TypingSession
from typist.core.story import default_progress_path, load_story
from typist.ui.keyboard import Keyboard
from typist.ui.main_window import TypistApp

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Send application logs to the log file; the terminal belongs to the UI."""
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(settings.log_file),
        level=settings.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _layout_arg(value: str) -> LayoutKind:
    try:
        return get_layout(value)
    except KeyError:
        choices = ", ".join(kind.layout.name for kind in LayoutKind)
        raise argparse.ArgumentTypeError(f"unknown layout {value!r} (choose from {choices})")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="typist",
        description="Practice typing by retyping a story, with the next key shown on screen.",
    )
    parser.add_argument("story", type=Path, help="plain-text story file")
    parser.add_argument(
        "--progress",
        type=Path,
        help="progress file (default: <story>.progress.json next to the story)",
    )
    parser.add_argument("--layout", type=_layout_arg, help="initial keyboard layout")
    parser.add_argument(
        "--no-keyboard",
        dest="show_keyboard",
        action="store_false",
        default=None,
        help="start with the keyboard panel hidden",
    )
    parser.add_argument("--config", type=Path, help="settings file (default: ~/.typist/config.yaml)")
    return parser.parse_args(argv)


class Startup:
    """Everything loaded before the UI starts."""

    def __init__(self, args: argparse.Namespace, settings: Settings) -> None:
        self.story_path: Path = args.story
        self.store = ProgressStore(args.progress or default_progress_path(args.story))
        self.layout: LayoutKind = args.layout or settings.layout
        self.show_keyboard: bool = (
            settings.show_keyboard if args.show_keyboard is None else args.show_keyboard
        )

    def build_app(self) -> TypistApp:
        story = load_story(self.story_path)
        progress = self.store.load()
        keyboard = Keyboard(self.layout)
        missing = unreachable(keyboard.layout, story)
        if missing:
            logger.warning(
                "No %s key types these story characters: %s",
                keyboard.name,
                " ".join(sorted(repr(c) for c in missing)),
            )
        session = TypingSession(story, progress.chars)
        return TypistApp(session, keyboard, show_keyboard=self.show_keyboard)


def run(argv: Optional[List[str]] = None) -> None:
    """Load the story and progress, run the typing UI, save progress on Escape."""
    args = parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as e:
        sys.exit(f"typist: {e}")
    configure_logging(settings)

    startup = Startup(args, settings)
    try:
        app = startup.build_app()
    except (OSError, ValueError) as e:
        logger.error("Startup failed: %s", e)
        sys.exit(f"typist: {e}")

    finished = app.run()
    if finished:
        startup.store.save(Progress(chars=app.session.cursor))
