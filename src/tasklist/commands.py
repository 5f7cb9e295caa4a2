"""
Interactive command loop.

Parsing is done by small functions that raise an ``InputError`` subclass;
``CommandLoop._ask`` is the only place that loops, asking again until the
parser accepts the answer.
"""
import re
from typing import Callable, Dict, List, Optional

import click

from .dates import Clock, normalize_date, normalize_time, utc_now
from .models import Priority, Task, classify_priority
from .recovery import (
    EmptyDescriptionError,
    InputError,
    InvalidCommandError,
    InvalidFieldError,
    InvalidSelectionError,
)
from .render import NO_TASKS, render_table
from .store import TaskStore
from .logs import get_logger

log = get_logger("commands")

COMMANDS = ("add", "print", "edit", "delete", "end")
FIELDS = ("priority", "date", "time", "task")

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
DESCRIPTION_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"

TASK_CHANGED = "The task is changed"
TASK_DELETED = "The task is deleted"
EXITING = "Tasklist exiting!"

NUMBER_PATTERN = re.compile(r'[+-]?[0-9]+')

def clean_input(raw: str) -> str:
    """Drop a leading "> " prompt decoration and surrounding whitespace."""
    if raw.startswith("> "):
        raw = raw[2:]
    return raw.strip()

def parse_command(raw: str) -> str:
    command = raw.lower()
    if command not in COMMANDS:
        raise InvalidCommandError(raw)
    return command

def parse_selection(raw: str, size: int) -> int:
    """Turn a 1-based task number into a 0-based store index."""
    if not NUMBER_PATTERN.fullmatch(raw):
        raise InvalidSelectionError(raw)
    number = int(raw)
    if not 1 <= number <= size:
        raise InvalidSelectionError(raw)
    return number - 1

def parse_field(raw: str) -> str:
    field = raw.lower()
    if field not in FIELDS:
        raise InvalidFieldError(raw)
    return field

def new_task(description: str, due_date: str, due_time: str, priority: Priority) -> Task:
    """Build a task for the add command; blank descriptions are refused."""
    description = description.strip()
    if not description:
        raise EmptyDescriptionError(description)
    return Task(description=description, due_date=due_date, due_time=due_time, priority=priority)

def _prompt_line() -> str:
    try:
        return input()
    except (EOFError, KeyboardInterrupt):
        raise click.Abort() from None

class CommandLoop:
    """
    Drives one interactive session over a TaskStore.

    Input and output go through ``read_line`` and ``echo`` so the loop can be
    driven from tests. ``on_end`` receives the final task list when the user
    types "end"; it is the only point where the session is persisted.
    """

    def __init__(self,
                 store: TaskStore,
                 read_line: Optional[Callable[[], str]] = None,
                 echo: Optional[Callable[[str], None]] = None,
                 color: bool = False,
                 clock: Optional[Clock] = None,
                 on_end: Optional[Callable[[List[Task]], object]] = None):
        self.store = store
        self.read_line = read_line or _prompt_line
        self.echo = echo or self._echo
        self.color = color
        self.clock = clock or utc_now
        self.on_end = on_end
        self.handlers: Dict[str, Callable[[], bool]] = {
            "add": self.add,
            "print": self.print_tasks,
            "edit": self.edit,
            "delete": self.delete,
            "end": self.end,
        }

    def _echo(self, line: str):
        click.echo(line, color=True if self.color else None)

    def _read(self) -> str:
        return clean_input(self.read_line())

    def _ask(self, question: str, parse: Callable[[str], object]):
        while True:
            self.echo(question)
            raw = self._read()
            try:
                return parse(raw)
            except InputError as e:
                log.debug(f"Rejected input for {question!r}: {e}")
                if e.message:
                    self.echo(e.message)

    def run(self):
        """Read and dispatch commands until "end"."""
        running = True
        while running:
            self.echo(ACTION_PROMPT)
            try:
                command = parse_command(self._read())
            except InvalidCommandError as e:
                self.echo(e.message)
                continue
            log.debug(f"Command: {command}")
            running = self.handlers[command]()

    def ask_priority(self) -> Priority:
        return self._ask(PRIORITY_PROMPT, classify_priority)

    def ask_due_date(self) -> str:
        return self._ask(DATE_PROMPT, normalize_date)

    def ask_due_time(self) -> str:
        return self._ask(TIME_PROMPT, normalize_time)

    def ask_description(self) -> str:
        """Read lines until a blank one and join them with newlines."""
        self.echo(DESCRIPTION_PROMPT)
        lines = []
        line = self._read()
        while line:
            lines.append(line)
            line = self._read()
        return "\n".join(lines)

    def add(self) -> bool:
        priority = self.ask_priority()
        due_date = self.ask_due_date()
        due_time = self.ask_due_time()
        description = self.ask_description()
        try:
            self.store.add(new_task(description, due_date, due_time, priority))
        except EmptyDescriptionError as e:
            self.echo(e.message)
        return True

    def print_tasks(self) -> bool:
        for line in render_table(self.store, now=self.clock(), color=self.color):
            self.echo(line)
        return True

    def _select(self, action: Callable[[int], None]):
        """Show the table, ask for a task number and run ``action`` on its index."""
        if not self.store:
            self.echo(NO_TASKS)
            return
        self.print_tasks()
        size = self.store.size()
        index = self._ask(f"Input the task number (1-{size}):", lambda raw: parse_selection(raw, size))
        action(index)

    def edit(self) -> bool:
        self._select(self._edit_at)
        return True

    def _edit_at(self, index: int):
        task = self.store.get(index)
        field = self._ask(FIELD_PROMPT, parse_field)
        if field == "priority":
            changed = task.replace(priority=self.ask_priority())
        elif field == "date":
            changed = task.replace(due_date=self.ask_due_date())
        elif field == "time":
            changed = task.replace(due_time=self.ask_due_time())
        else:
            changed = task.replace(description=self.ask_description())
        self.store.replace_at(index, changed)
        self.echo(TASK_CHANGED)

    def delete(self) -> bool:
        self._select(self._delete_at)
        return True

    def _delete_at(self, index: int):
        self.store.remove_at(index)
        self.echo(TASK_DELETED)

    def end(self) -> bool:
        if self.on_end is not None:
            self.on_end(self.store.all())
        self.echo(EXITING)
        return False
