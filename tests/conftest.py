"""Shared fixtures: habits files and logs on disk."""

import pytest

from habitctl.core.config import Settings
from habitctl.models.habit import Entry, Habit
from habitctl.services.habits.repository import build_index
from habitctl.services.habits.scoring import ScoringEngine
from habitctl.services.habits.session import HabitSession


HABITS_TEXT = """\
# every_days range name
1 1 Meditated
7 1 Cleaned the apartment

0 1 Had a headache
1 5 Glasses of water
"""


@pytest.fixture
def write_files(tmp_path):
    """Write a habits file and a log, return their paths."""

    def _write(habits_text=HABITS_TEXT, log_text=""):
        habits_file = tmp_path / "habits"
        log_file = tmp_path / "log"
        habits_file.write_text(habits_text, encoding="utf-8")
        log_file.write_text(log_text, encoding="utf-8")
        return habits_file, log_file

    return _write


@pytest.fixture
def make_session(write_files):
    """Load a session from the given file contents."""

    def _make(habits_text=HABITS_TEXT, log_text=""):
        habits_file, log_file = write_files(habits_text, log_text)
        return HabitSession(habits_file, log_file).reload()

    return _make


@pytest.fixture
def make_engine():
    """Build a scoring engine from habits and (date, habit, value) tuples."""

    def _make(habits, rows=()):
        entries = [Entry(date=d, habit=h, value=v) for d, h, v in rows]
        return ScoringEngine(habits, build_index(entries))

    return _make


@pytest.fixture
def meditated():
    return Habit(every_days=1, range=1, name="Meditated")


@pytest.fixture
def weekly():
    return Habit(every_days=7, range=1, name="Cleaned the apartment")


@pytest.fixture
def settings(tmp_path, monkeypatch):
    """Settings pointing at a fresh data directory."""
    monkeypatch.setenv("HABITCTL_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("HABITCTL_TIMEZONE", raising=False)
    monkeypatch.delenv("HABITCTL_EDITOR", raising=False)
    return Settings()

