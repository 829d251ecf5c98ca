"""
Habit Session - The registry, log and index loaded for one command
Replaces module-level state with an object that is reloaded explicitly
"""
from datetime import date
from pathlib import Path
from typing import List, Optional, Union
import logging

from habitctl.core.exceptions import NoEntriesError, NoHabitsError
from habitctl.models.habit import Entry, Habit
from . import repository
from .scoring import ScoringEngine

logger = logging.getLogger(__name__)

NO_HABITS_MESSAGE = (
    "You don't have any habits set up!\n"
    "Run `habitctl edith` to modify the habit list using your default $EDITOR.\n"
    "Then, run `habitctl`! Happy tracking!"
)
NO_ENTRIES_MESSAGE = "Please run `habitctl`! Happy tracking!"


class HabitSession:
    """
    Holds habits, entries and the derived log index

    Nothing here refreshes itself: call reload() after writing to see the
    new entries in the index and in the scoring engine.
    """

    def __init__(self, habits_file: Union[str, Path], log_file: Union[str, Path]):
        self.habits_file = Path(habits_file)
        self.log_file = Path(log_file)
        self.habits: List[Habit] = []
        self.entries: List[Entry] = []
        self.index: repository.LogIndex = {}
        self.engine = ScoringEngine([], {})
        self._last_date: Optional[date] = None

    def reload(self) -> "HabitSession":
        """
        Re-read the habits file and the log from disk

        Raises:
            ParseError: If either file is malformed
            StorageError: If either file can't be read
        """
        self.habits = repository.load_habits(self.habits_file)
        self.entries = repository.read_entries(self.log_file)
        self.index = repository.build_index(self.entries)
        self.engine = ScoringEngine(self.habits, self.index)
        self._last_date = repository.last_date(self.entries)
        logger.debug(f"Session loaded: {len(self.habits)} habits, {len(self.entries)} entries")
        return self

    @property
    def first_date(self) -> Optional[date]:
        return repository.first_date(self.entries)

    def append(self, entry: Entry) -> None:
        """Append an entry to the log (visible to queries only after reload())"""
        repository.append_entry(self.log_file, entry, self._last_date)
        self._last_date = entry.date

    def assert_habits(self) -> None:
        if not self.habits:
            raise NoHabitsError(NO_HABITS_MESSAGE)

    def assert_entries(self) -> None:
        if not self.entries:
            raise NoEntriesError(NO_ENTRIES_MESSAGE)

    def default_lookback(self, today: date) -> int:
        """Days to backfill when none are given: up to a week, since the first entry"""
        first = self.first_date
        if first is None:
            return 1
        return max(0, min(7, (today - first).days))
