"""
Habits Repository - Centralized file access layer
Parsing of the habits file and the append-only entry log
"""
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union
import logging

from pydantic import ValidationError

from habitctl.core.exceptions import ParseError, StorageError
from habitctl.models.habit import Entry, Habit

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
LogIndex = Dict[str, List[Tuple[date, int]]]


def _read_lines(path: PathLike) -> List[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except OSError as e:
        logger.error(f"Error reading {path}: {e}")
        raise StorageError(f"Failed to read {path}: {e}")


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"{field}: {first.get('msg')}" if field else first.get("msg", str(error))


# ============================================================================
# HABITS FILE
# ============================================================================

def parse_habit_line(line: str, path: Optional[PathLike] = None,
                     line_number: Optional[int] = None) -> Habit:
    """
    Parse one "<every_days> <range> <name>" line

    Raises:
        ParseError: If the line has fewer than 3 fields or a bad number
    """
    parts = line.strip().split(" ", 2)
    if len(parts) < 3 or not parts[2].strip():
        raise ParseError(
            f"Expected '<every_days> <range> <name>', got '{line.strip()}'",
            path, line_number
        )

    every_days, value_range, name = parts
    for label, raw in (("every_days", every_days), ("range", value_range)):
        if not (raw.isascii() and raw.isdigit()):
            raise ParseError(f"Couldn't parse {label} '{raw}' as a non-negative integer",
                             path, line_number)

    try:
        return Habit(every_days=int(every_days), range=int(value_range), name=name)
    except ValidationError as e:
        raise ParseError(_describe(e), path, line_number)


def load_habits(path: PathLike) -> List[Habit]:
    """
    Load all habits from the habits file, in file order

    Args:
        path: Path to the habits file

    Returns:
        List of habits

    Raises:
        ParseError: If a line is malformed
        StorageError: If the file can't be read
    """
    habits = []
    for line_number, line in enumerate(_read_lines(path), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        habits.append(parse_habit_line(line, path, line_number))

    logger.debug(f"Loaded {len(habits)} habits from {path}")
    return habits


# ============================================================================
# LOG FILE
# ============================================================================

def parse_entry_line(line: str, path: Optional[PathLike] = None,
                     line_number: Optional[int] = None) -> Entry:
    """
    Parse one "<date>\\t<habit>\\t<value>" line

    Raises:
        ParseError: If the line doesn't have three fields or a field is invalid
    """
    parts = line.split("\t")
    if len(parts) != 3:
        raise ParseError(
            f"Expected 3 tab-separated fields, got {len(parts)}", path, line_number
        )

    raw_date, habit, raw_value = parts
    try:
        return Entry(date=raw_date, habit=habit, value=int(raw_value.strip()))
    except ValueError as e:
        # ValidationError is a ValueError too
        message = _describe(e) if isinstance(e, ValidationError) else f"Invalid value '{raw_value}'"
        raise ParseError(message, path, line_number)


def read_entries(path: PathLike) -> List[Entry]:
    """
    Read every entry of the log, in file order

    Blank lines only separate days visually and are skipped.

    Raises:
        ParseError: If any line is malformed
        StorageError: If the file can't be read
    """
    entries = []
    for line_number, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        entries.append(parse_entry_line(line, path, line_number))

    logger.debug(f"Read {len(entries)} entries from {path}")
    return entries


def append_entry(path: PathLike, entry: Entry, last_date: Optional[date] = None) -> None:
    """
    Append an entry to the log

    A blank line is written first when the previous entry belongs to another
    day. Writes are not locked; only one process may append at a time.

    Args:
        path: Path to the log file
        entry: Entry to append
        last_date: Date of the last entry currently in the log, if any

    Raises:
        StorageError: If the file can't be opened or written
    """
    try:
        with open(path, "a", encoding="utf-8") as f:
            if last_date is not None and last_date != entry.date:
                f.write("\n")
            f.write(entry.to_line() + "\n")
    except OSError as e:
        logger.error(f"Error appending to {path}: {e}")
        raise StorageError(f"Failed to write entry to {path}: {e}")

    logger.debug(f"Appended {entry.habit}={entry.value} for {entry.date}")


def build_index(entries: Sequence[Entry]) -> LogIndex:
    """
    Group entries by habit name

    Returns:
        Mapping of habit name to its (date, value) pairs, in file order
    """
    index: LogIndex = {}
    for entry in entries:
        index.setdefault(entry.habit, []).append((entry.date, entry.value))
    return index


def first_date(entries: Sequence[Entry]) -> Optional[date]:
    return entries[0].date if entries else None


def last_date(entries: Sequence[Entry]) -> Optional[date]:
    return entries[-1].date if entries else None
