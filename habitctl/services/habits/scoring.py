"""
Scoring Engine - Rolling and aggregate completion scores
Pure computations over the habit registry and the log index
"""
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from habitctl.core.exceptions import NoHabitsError
from habitctl.models.habit import Habit

MAX_PERCENTAGE = 100.0


class ScoringEngine:
    """
    Computes per-habit and aggregate scores

    Args:
        habits: Habit registry, in display order
        index: Log index (habit name -> (date, value) pairs in file order)
    """

    def __init__(self, habits: Sequence[Habit], index: Dict[str, List[Tuple[date, int]]]):
        self.habits = list(habits)
        self.index = index

    def entry_value(self, habit: Habit, day: date) -> Optional[int]:
        """Value of the first logged entry for this habit on this day, if any"""
        for entry_date, value in self.index.get(habit.name, ()):
            if entry_date == day:
                return value
        return None

    def day_score(self, habit: Habit, day: date) -> float:
        """
        Score of a single day in [0, 1]

        A missing entry scores 0. Habits with range 0 have no numeric score
        and always score 0.
        """
        value = self.entry_value(habit, day)
        if value is None or habit.range == 0:
            return 0.0
        return value / habit.range

    def rolling_habit_score(self, habit: Habit, upto: date) -> Optional[float]:
        """
        Sum of values in the habit's window ending on `upto`, as a percentage of range

        The window is (upto - every_days, upto]. The result is not capped.

        Returns:
            Percentage, or None for tracking-only habits (every_days 0) and
            habits without a numeric range
        """
        if not habit.is_scored:
            return None

        # compared as day offsets, every_days may exceed the date range
        total = sum(
            value
            for entry_date, value in self.index.get(habit.name, ())
            if 0 <= (upto - entry_date).days < habit.every_days
        )
        return total / habit.range * 100

    def capped_habit_score(self, habit: Habit, upto: date) -> float:
        score = self.rolling_habit_score(habit, upto)
        if score is None:
            return 0.0
        return min(MAX_PERCENTAGE, score)

    def aggregate_day_score(self, day: date) -> float:
        """
        Mean of every habit's rolling score capped at 100%

        Habits without a rolling score count as 0.

        Raises:
            NoHabitsError: If the registry is empty
        """
        if not self.habits:
            raise NoHabitsError("No habits to score")
        scores = [self.capped_habit_score(habit, day) for habit in self.habits]
        return sum(scores) / len(scores)
