"""
TaskFile - load and save the task list.

The file is read once when the session starts and written once when the
user ends it; nothing in between touches the disk.
"""
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from tasklist.models import Task
from tasklist.recovery import CorruptionError
from tasklist.logs import get_logger
from .io import atomic_write, load_json_file
from .validate import validate_document

log = get_logger("data")

DEFAULT_FILE = Path("tasklist.json")

class TaskFile:
    """A JSON task list on disk."""

    def __init__(self, path: Union[Path, str] = DEFAULT_FILE):
        self.path = Path(path)

    def load(self) -> List[Task]:
        """
        Read the tasks stored in the file.

        A missing or empty file, ``null`` and ``[]`` all give an empty list.
        ``null`` entries inside the array are skipped.

        Raises:
            CorruptionError: If the file is not valid JSON or holds entries that are
                not tasks
            FileOperationError: If the file cannot be read
        """
        data = load_json_file(self.path)
        if data is None or data == []:
            log.info(f"Starting with an empty task list ({self.path})")
            return []

        validate_document(data, str(self.path))

        tasks = []
        for position, entry in enumerate(data, start=1):
            if entry is None:
                log.debug(f"Skipping null entry #{position} in {self.path}")
                continue
            try:
                tasks.append(Task.model_validate(entry))
            except ValidationError as e:
                raise CorruptionError(f"Entry #{position} in {self.path} is not a valid task: {e}") from e

        log.info(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Write the tasks to the file atomically."""
        payload = [task.to_json() for task in tasks]
        atomic_write(self.path, payload)
        log.info(f"Saved {len(payload)} task(s) to {self.path}")
        return True
