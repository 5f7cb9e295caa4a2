"""
Tasklist - a single-user task list for the terminal.

Tasks have a description, a due date and time, and a priority. They are
kept in a JSON file between runs and shown as a fixed-width table.
"""

from .version import VERSION
from .models import Priority, Urgency, Task, classify_priority
from .dates import normalize_date, normalize_time, classify_urgency
from .store import TaskStore
from .render import render_table
from .commands import CommandLoop
from .data import TaskFile

__version__ = VERSION

__all__ = [
    "VERSION",
    "Priority",
    "Urgency",
    "Task",
    "classify_priority",
    "normalize_date",
    "normalize_time",
    "classify_urgency",
    "TaskStore",
    "render_table",
    "CommandLoop",
    "TaskFile",
]
