"""
Custom Exceptions - Application-specific error types
"""
from pathlib import Path
from typing import Optional, Union


class HabitCtlException(Exception):
    """Base exception for all habitctl errors"""
    pass


class ConfigError(HabitCtlException):
    """Raised when an environment setting has an invalid value"""
    pass


class ParseError(HabitCtlException):
    """Raised when a line of the habits file or the log cannot be parsed"""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None,
                 line_number: Optional[int] = None):
        self.path = path
        self.line_number = line_number
        location = ""
        if path is not None:
            location = f"{path}:{line_number}: " if line_number else f"{path}: "
        super().__init__(f"{location}{message}")


class MissingPreconditionError(HabitCtlException):
    """Raised when a command needs data that hasn't been set up yet"""
    pass


class NoHabitsError(MissingPreconditionError):
    """Raised when the habit registry is empty"""
    pass


class NoEntriesError(MissingPreconditionError):
    """Raised when the log has no entries yet"""
    pass


class StorageError(HabitCtlException):
    """Raised when the habits or log file can't be created, read or written"""
    pass


class EditorError(HabitCtlException):
    """Raised when the external editor can't be launched"""
    pass
