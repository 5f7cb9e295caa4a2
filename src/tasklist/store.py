from typing import Iterable, Iterator, List, Optional

from .models import Task
from .recovery import IndexOutOfRangeError
from .logs import get_logger

log = get_logger("store")

class TaskStore:
    """
    Ordered, in-memory list of tasks for one session.

    Positions are 0-based here; the command loop converts the 1-based numbers
    the user sees. A task has no identity beyond its current position, so any
    removal shifts the tasks after it.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    def _check_index(self, index: int):
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRangeError(f"Task index {index} out of range for {len(self._tasks)} task(s)")

    def add(self, task: Task):
        self._tasks.append(task)
        log.debug(f"Added task #{len(self._tasks)}")

    def replace_at(self, index: int, task: Task):
        """Replace the task at ``index`` in place, keeping its position."""
        self._check_index(index)
        self._tasks[index] = task
        log.debug(f"Replaced task at index {index}")

    def remove_at(self, index: int) -> Task:
        self._check_index(index)
        log.debug(f"Removing task at index {index}")
        return self._tasks.pop(index)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def size(self) -> int:
        return len(self._tasks)

    def all(self) -> List[Task]:
        """A copy of the tasks in order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __bool__(self) -> bool:
        return bool(self._tasks)
