"""
Pydantic models for habits and log entries
"""
import datetime as dt
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Habit(BaseModel):
    """A tracked habit, as declared in the habits file"""
    model_config = ConfigDict(frozen=True)

    every_days: int = Field(..., ge=0, description="Periodicity window in days, 0 for tracking only")
    range: int = Field(..., ge=0, description="Maximum value per entry, 0 for boolean tracking")
    name: str = Field(..., min_length=1, description="Unique, case-sensitive habit name")

    @property
    def is_scored(self) -> bool:
        """Whether a rolling percentage can be computed for this habit"""
        return self.every_days > 0 and self.range > 0


class Entry(BaseModel):
    """One dated value for a habit, as stored in the log"""
    model_config = ConfigDict(frozen=True)

    date: dt.date
    habit: str = Field(..., min_length=1)
    value: int

    @field_validator('date', mode='before')
    @classmethod
    def validate_date_format(cls, v):
        """Only accept YYYY-MM-DD when parsing from text"""
        if isinstance(v, str):
            if not _DATE_RE.match(v):
                raise ValueError(f"Invalid date format '{v}'. Use YYYY-MM-DD")
            try:
                return dt.datetime.strptime(v, DATE_FORMAT).date()
            except ValueError:
                raise ValueError(f"Invalid date '{v}'")
        return v

    def to_line(self) -> str:
        """Serialize as a tab-separated log line (without newline)"""
        return f"{self.date.isoformat()}\t{self.habit}\t{self.value}"

