from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from enum import Enum
import re

import click

from .recovery import InvalidPriorityError

class Priority(Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def color(self) -> str:
        return _PRIORITY_COLORS[self]

_PRIORITY_COLORS = {
    Priority.CRITICAL: "bright_red",
    Priority.HIGH: "bright_yellow",
    Priority.NORMAL: "bright_green",
    Priority.LOW: "bright_blue",
}

class Urgency(Enum):
    OVERDUE = "O"
    DUE_TODAY = "T"
    UPCOMING = "I"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def color(self) -> str:
        return _URGENCY_COLORS[self]

_URGENCY_COLORS = {
    Urgency.OVERDUE: "bright_red",
    Urgency.DUE_TODAY: "bright_yellow",
    Urgency.UPCOMING: "bright_green",
}

# Older task files stored the rendered colour block instead of the letter.
# Tasks created by "add" had the escape sequence upper-cased, hence the lower() lookup.
LEGACY_PRIORITY_TOKENS = {
    click.style(" ", bg=priority.color).lower(): priority for priority in Priority
}

DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$', re.ASCII)
TIME_PATTERN = re.compile(r'^\d{2}:\d{2}$', re.ASCII)

def classify_priority(code: str) -> Priority:
    """Map a one-letter priority code (any case) to its Priority."""
    try:
        return Priority(code.strip().upper())
    except ValueError:
        raise InvalidPriorityError(code) from None

class Task(BaseModel):
    """One to-do entry. Its position in the store is its only identity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str = Field(description="Task text, one line per entry line")
    due_date: str = Field(alias="dueDate", description="Canonical YYYY-MM-DD due date")
    due_time: str = Field(alias="dueTime", description="Canonical HH:MM due time")
    priority: Priority = Field(description="One-letter priority code")

    @field_validator('due_date')
    @classmethod
    def validate_due_date(cls, v):
        if not DATE_PATTERN.match(v):
            raise ValueError(f"Invalid due date format: {v}")
        datetime.strptime(v, "%Y-%m-%d")
        return v

    @field_validator('due_time')
    @classmethod
    def validate_due_time(cls, v):
        if not TIME_PATTERN.match(v):
            raise ValueError(f"Invalid due time format: {v}")
        datetime.strptime(v, "%H:%M")
        return v

    @field_validator('priority', mode='before')
    @classmethod
    def accept_legacy_priority(cls, v):
        if isinstance(v, str):
            legacy = LEGACY_PRIORITY_TOKENS.get(v.lower())
            if legacy is not None:
                return legacy
            return v.strip().upper()
        return v

    def replace(self, **changes) -> 'Task':
        """Return a validated copy of this task with the given fields changed."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def to_json(self) -> dict:
        """Serialize using the persisted key names (dueDate, dueTime)."""
        return self.model_dump(mode="json", by_alias=True)
