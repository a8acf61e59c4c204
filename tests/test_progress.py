"""Tests for typist.core.progress – progress persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from typist.core.progress import Progress, ProgressError, ProgressStore


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def progress_file(tmp_path: Path) -> Path:
    return tmp_path / "story.progress.json"


@pytest.fixture()
def store(progress_file: Path) -> ProgressStore:
    """ProgressStore backed by a temp file."""
    return ProgressStore(progress_file)


# ---------------------------------------------------------------------------
# Progress dataclass
# ---------------------------------------------------------------------------

class TestProgress:
    def test_defaults(self):
        assert Progress().chars == 0

    def test_custom_value(self):
        assert Progress(chars=12).chars == 12


# ---------------------------------------------------------------------------
# ProgressStore – fresh state
# ---------------------------------------------------------------------------

class TestProgressStoreFresh:
    def test_no_file_returns_zero(self, store: ProgressStore):
        assert store.load() == Progress(chars=0)

    def test_no_file_creates_it(self, store: ProgressStore, progress_file: Path):
        store.load()
        assert json.loads(progress_file.read_text(encoding="utf-8")) == {"chars": 0}

    def test_file_path(self, store: ProgressStore, progress_file: Path):
        assert store.file_path == progress_file


# ---------------------------------------------------------------------------
# ProgressStore – save / load
# ---------------------------------------------------------------------------

class TestSaveLoad:
    def test_round_trip(self, store: ProgressStore):
        store.save(Progress(chars=137))
        assert store.load().chars == 137

    def test_round_trip_through_new_store(self, store: ProgressStore, progress_file: Path):
        store.save(Progress(chars=5))
        assert ProgressStore(progress_file).load() == Progress(chars=5)

    def test_overwrites(self, store: ProgressStore, progress_file: Path):
        store.save(Progress(chars=100))
        store.save(Progress(chars=3))
        assert json.loads(progress_file.read_text(encoding="utf-8")) == {"chars": 3}

    def test_creates_parent_dirs(self, tmp_path: Path):
        nested = ProgressStore(tmp_path / "a" / "b" / "p.json")
        nested.save(Progress(chars=1))
        assert nested.load().chars == 1

    def test_extra_keys_ignored(self, store: ProgressStore, progress_file: Path):
        progress_file.write_text(json.dumps({"chars": 4, "note": "x"}), encoding="utf-8")
        assert store.load().chars == 4


# ---------------------------------------------------------------------------
# ProgressStore – malformed files are fatal
# ---------------------------------------------------------------------------

class TestLoadErrors:
    @pytest.mark.parametrize(
        "content",
        [
            "NOT VALID JSON",
            "",
            json.dumps([1, 2]),
            json.dumps({}),
            json.dumps({"chars": "12"}),
            json.dumps({"chars": 1.5}),
            json.dumps({"chars": True}),
            json.dumps({"chars": -1}),
            json.dumps({"chars": None}),
        ],
    )
    def test_malformed_raises(self, store: ProgressStore, progress_file: Path, content: str):
        progress_file.write_text(content, encoding="utf-8")
        with pytest.raises(ProgressError):
            store.load()

    def test_malformed_file_left_untouched(self, store: ProgressStore, progress_file: Path):
        progress_file.write_text("garbage", encoding="utf-8")
        with pytest.raises(ProgressError):
            store.load()
        assert progress_file.read_text(encoding="utf-8") == "garbage"

    def test_is_value_error(self):
        assert issubclass(ProgressError, ValueError)

    def test_unreadable_path_raises_os_error(self, tmp_path: Path):
        directory = tmp_path / "dir.progress.json"
        directory.mkdir()
        with pytest.raises(OSError):
            ProgressStore(directory).load()
