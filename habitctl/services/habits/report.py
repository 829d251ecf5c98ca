"""
Report Renderer - Sparkline history grid and scores as text
"""
from datetime import date
from typing import List, Sequence
import math

from habitctl.models.habit import Habit
from habitctl.utils.dates import days_before, iter_days
from .scoring import ScoringEngine, MAX_PERCENTAGE

SPARKS = (" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
LABEL_WIDTH = 25
PERCENT_WIDTH = 6
DEFAULT_HISTORY_DAYS = 100


def spark(score: float) -> str:
    """Map a score in [0, 1] to one of the intensity glyphs"""
    bucket = min(len(SPARKS) - 1, math.floor(max(score, 0.0) * len(SPARKS)))
    return SPARKS[bucket]


def format_label(name: str) -> str:
    return f"{name[:LABEL_WIDTH]:>{LABEL_WIDTH}} "


def matches_filters(habit: Habit, filters: Sequence[str]) -> bool:
    if not filters:
        return True
    name = habit.name.lower()
    return any(f.lower() in name for f in filters)


class ReportRenderer:
    """Renders rows of the history grid from a scoring engine"""

    def __init__(self, engine: ScoringEngine):
        self.engine = engine

    def habit_row(self, habit: Habit, start: date, end: date) -> str:
        """
        Render one habit: label, a glyph per day, then its rolling percentage

        The percentage is taken on the day before `end`, since `end` is
        usually today and still incomplete.
        """
        sparks = "".join(spark(self.engine.day_score(habit, day)) for day in iter_days(start, end))
        score = self.engine.rolling_habit_score(habit, days_before(end, 1))
        if score is None:
            suffix = " " * (PERCENT_WIDTH + 1)
        else:
            suffix = f"{score:>{PERCENT_WIDTH}.1f}% "
        return format_label(habit.name) + sparks + suffix

    def aggregate_row(self, start: date, end: date) -> str:
        sparks = "".join(
            spark(self.engine.aggregate_day_score(day) / MAX_PERCENTAGE)
            for day in iter_days(start, end)
        )
        return format_label("") + sparks

    def total_line(self, today: date) -> str:
        score = self.engine.aggregate_day_score(days_before(today, 1))
        return f"Total score: {score:.1f}%"

    def render(self, today: date, filters: Sequence[str] = (),
               days: int = DEFAULT_HISTORY_DAYS) -> str:
        """
        Render the full report ending on `today`

        Args:
            today: Last day shown
            filters: Case-insensitive substrings; habits matching any are shown
            days: How many days before `today` to show

        Returns:
            The report text, one line per row
        """
        if not self.engine.habits:
            return ""

        start = days_before(today, days)
        lines: List[str] = [self.aggregate_row(start, today)]
        for habit in self.engine.habits:
            if matches_filters(habit, filters):
                lines.append(self.habit_row(habit, start, today))
        lines.append(self.total_line(today))
        return "\n".join(lines)
