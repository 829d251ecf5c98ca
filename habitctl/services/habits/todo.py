"""
Todo Resolver - Which habits still lack an entry for a day
"""
from datetime import date
from typing import Dict, List, Sequence, Tuple

from habitctl.models.habit import Habit


def has_entry(habit: Habit, day: date, index: Dict[str, List[Tuple[date, int]]]) -> bool:
    return any(entry_date == day for entry_date, _ in index.get(habit.name, ()))


def pending(day: date, habits: Sequence[Habit],
            index: Dict[str, List[Tuple[date, int]]]) -> List[Habit]:
    """
    Get habits with no logged entry on the given day, in registry order

    Periodicity and range are ignored: any entry, even a 0, resolves the day.
    """
    return [habit for habit in habits if not has_entry(habit, day, index)]


def due_today(day: date, habits: Sequence[Habit],
              index: Dict[str, List[Tuple[date, int]]]) -> List[Habit]:
    """Pending habits that have a target; tracking-only habits are never due"""
    return [habit for habit in pending(day, habits, index) if habit.every_days > 0]
