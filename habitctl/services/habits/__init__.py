"""
Habits module - Core habit tracking functionality
"""
from . import repository
from . import scoring
from . import todo
from . import session
from . import report
from . import backfill

# Export commonly used names for convenience
from .repository import (
    load_habits,
    read_entries,
    append_entry,
    build_index,
    first_date,
    last_date
)

from .scoring import ScoringEngine
from .session import HabitSession
from .todo import pending, due_today
from .report import ReportRenderer, spark
from .backfill import BackfillLoop

__all__ = [
    # Modules
    'repository',
    'scoring',
    'todo',
    'session',
    'report',
    'backfill',

    # Repository functions
    'load_habits',
    'read_entries',
    'append_entry',
    'build_index',
    'first_date',
    'last_date',

    # Engine and session
    'ScoringEngine',
    'HabitSession',

    # Todo functions
    'pending',
    'due_today',

    # Rendering and prompting
    'ReportRenderer',
    'spark',
    'BackfillLoop'
]
