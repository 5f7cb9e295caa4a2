"""
Fixed-width table rendering for the task list.

The layout, column widths and the 44-character description column match the
table earlier versions printed, so existing users see the same output.
"""
from datetime import datetime
from typing import Iterable, List, Optional

import click

from .dates import classify_urgency
from .models import Priority, Task, Urgency

SEPARATOR = "+----+------------+-------+---+---+--------------------------------------------+"
HEADER    = "| N  |    Date    | Time  | P | D |                   Task                     |"
TASK_LIMIT = 44

NO_TASKS = "No tasks have been input"

CONTINUATION_PREFIX = "|" + " " * 4 + "|" + " " * 12 + "|" + " " * 7 + "|" + " " * 3 + "|" + " " * 3 + "|"

def _cell(tag: str, bg: str, color: bool) -> str:
    if color:
        return click.style(" ", bg=bg)
    return tag

def priority_cell(priority: Priority, color: bool = False) -> str:
    """One character wide: a coloured block, or the bare letter without colour."""
    return _cell(priority.tag, priority.color, color)

def urgency_cell(urgency: Urgency, color: bool = False) -> str:
    return _cell(urgency.tag, urgency.color, color)

def wrap_description(description: str) -> List[str]:
    """
    Split a description into table-width chunks.

    Embedded newlines start a new chunk; each line is then cut every
    TASK_LIMIT characters and the chunks are space-padded to TASK_LIMIT.
    Empty lines produce no chunk.
    """
    chunks = []
    for line in description.strip().split("\n"):
        for start in range(0, len(line), TASK_LIMIT):
            chunks.append(line[start:start + TASK_LIMIT].ljust(TASK_LIMIT))
    return chunks

def render_task(number: int, task: Task, now: Optional[datetime] = None, color: bool = False) -> List[str]:
    """Rows for a single task, without the trailing separator."""
    padding = " " if number > 9 else "  "
    urgency = classify_urgency(task.due_date, task.due_time, now)
    lead = (f"| {number}{padding}| {task.due_date} | {task.due_time} | "
            f"{priority_cell(task.priority, color)} | {urgency_cell(urgency, color)} |")

    chunks = wrap_description(task.description) or [" " * TASK_LIMIT]
    rows = [f"{lead}{chunks[0]}|"]
    rows.extend(f"{CONTINUATION_PREFIX}{chunk}|" for chunk in chunks[1:])
    return rows

def render_table(tasks: Iterable[Task], now: Optional[datetime] = None, color: bool = False) -> List[str]:
    """
    Render tasks as display lines.

    Args:
        tasks: Tasks in store order; they are numbered from 1
        now: Reference time for the urgency column, current UTC time by default
        color: Draw priority/urgency as coloured blocks instead of letters

    Returns:
        The table lines, or a single "No tasks have been input" line
    """
    tasks = list(tasks)
    if not tasks:
        return [NO_TASKS]

    lines = [SEPARATOR, HEADER, SEPARATOR]
    for number, task in enumerate(tasks, start=1):
        lines.extend(render_task(number, task, now, color))
        lines.append(SEPARATOR)
    return lines
