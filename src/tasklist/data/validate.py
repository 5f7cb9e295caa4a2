from typing import Any
from jsonschema import validate, ValidationError
from tasklist.recovery import CorruptionError
from tasklist.logs import get_logger

log = get_logger("data.validate")

TASK_KEYS = ("description", "dueDate", "dueTime", "priority")

# Shape of tasklist.json: an array of task objects, nulls tolerated
TASKLIST_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Tasklist",
    "type": "array",
    "items": {
        "anyOf": [
            {"type": "null"},
            {
                "type": "object",
                "required": list(TASK_KEYS),
                "properties": {key: {"type": "string"} for key in TASK_KEYS},
            },
        ]
    },
}

def validate_document(data: Any, source: str = "task file") -> bool:
    """
    Validate a parsed task file against TASKLIST_SCHEMA.

    Raises:
        CorruptionError: If the document does not have the task file shape
    """
    try:
        validate(instance=data, schema=TASKLIST_SCHEMA)
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        log.error(f"{source} FAILED validation at {location}: {e.message}")
        raise CorruptionError(f"{source} is not a valid task list (at {location}): {e.message}") from e

    log.debug(f"{source} is VALID")
    return True
