"""
Pydantic models for the application
"""
from habitctl.models.habit import (
    DATE_FORMAT,
    Habit,
    Entry
)

__all__ = [
    "DATE_FORMAT",
    "Habit",
    "Entry"
]
