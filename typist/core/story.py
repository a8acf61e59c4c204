from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

RETURN_GLYPH = "↩"

# Typographic punctuation folded to what the layouts can type.
_FOLDS = {
    "—": "-",  # em dash
    "–": "-",  # en dash
    "‘": "'",
    "’": "'",
    "“": '"',
    "”": '"',
}


def normalize(text: str) -> str:
    """Map line breaks to the return glyph and fold typographic punctuation."""
    text = text.replace("\r\n", "\n").replace("\n", RETURN_GLYPH)
    for src, dst in _FOLDS.items():
        text = text.replace(src, dst)
    return text


def load_story(path: Path) -> str:
    """Read and normalize a UTF-8 story file. I/O errors propagate."""
    story = normalize(path.read_text(encoding="utf-8"))
    logger.info("Loaded story %s (%d characters)", path, len(story))
    return story


def default_progress_path(story_path: Path) -> Path:
    """``stories/tale.txt`` -> ``stories/tale.progress.json``."""
    return story_path.with_name(f"{story_path.stem}.progress.json")
