"""
Interactive Backfill - Walks a range of days and asks for missing entries
"""
from datetime import date
from typing import Callable, List, Optional
import logging
import re

import typer

from habitctl.models.habit import Entry, Habit
from habitctl.utils.dates import days_before, iter_days
from .report import ReportRenderer
from .session import HabitSession
from . import todo

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_DAYS = 60
_ANSWER_RE = re.compile(r"[+-]?[0-9]+")


def range_hint(habit: Habit) -> str:
    return f"[0 - {habit.range}/⏎] "


def parse_answer(answer: str, habit: Habit) -> Optional[int]:
    """
    Validate an answer against the habit's range

    Returns:
        The value, or None if the answer isn't an integer in [0, range]
    """
    answer = answer.strip()
    if not _ANSWER_RE.fullmatch(answer):
        return None
    value = int(answer)
    if 0 <= value <= habit.range:
        return value
    return None


class BackfillLoop:
    """
    Prompts for every habit without an entry, day by day

    Args:
        session: Loaded session; reloaded after each day
        prompt: Reads one line of input given a prompt string
        echo: Writes output, typer.echo compatible (accepts nl=)
        context_days: Days of history shown next to each question
    """

    def __init__(self, session: HabitSession,
                 prompt: Callable[[str], str] = input,
                 echo: Callable[..., None] = typer.echo,
                 context_days: int = DEFAULT_CONTEXT_DAYS):
        self.session = session
        self.prompt = prompt
        self.echo = echo
        self.context_days = context_days

    def ask_value(self, habit: Habit) -> Optional[int]:
        """Prompt until the answer is empty (None) or a valid value"""
        hint = range_hint(habit)
        while True:
            answer = self.prompt(hint)
            if answer.strip() == "":
                return None
            value = parse_answer(answer, habit)
            if value is not None:
                return value
            logger.debug(f"Rejected answer {answer!r} for {habit.name}")

    def run_day(self, day: date, today: Optional[date] = None) -> List[Entry]:
        """Ask for every pending habit of one day; returns the entries written"""
        pending = todo.pending(day, self.session.habits, self.session.index)
        if not pending:
            return []

        self.echo(f"{day.isoformat()}:")
        renderer = ReportRenderer(self.session.engine)
        context_start = days_before(today or day, self.context_days)

        written = []
        for habit in pending:
            self.echo(renderer.habit_row(habit, context_start, day), nl=False)
            value = self.ask_value(habit)
            if value is None:
                continue
            entry = Entry(date=day, habit=habit.name, value=value)
            self.session.append(entry)
            written.append(entry)

        return written

    def run(self, start: date, end: date) -> List[Entry]:
        """
        Backfill every day from start to end, both inclusive

        The session is reloaded after each day so later days score against
        the entries just written.

        Returns:
            All entries written, in order
        """
        written = []
        for day in iter_days(start, end):
            written.extend(self.run_day(day, today=end))
            self.session.reload()

        logger.debug(f"Backfill {start} to {end} wrote {len(written)} entries")
        return written
