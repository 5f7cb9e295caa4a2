"""
Data submodule handling the task file on disk.
"""

from .core import TaskFile, DEFAULT_FILE
from .io import atomic_write, load_json_file
from .validate import validate_document, TASKLIST_SCHEMA

__all__ = [
    'TaskFile',
    'DEFAULT_FILE',
    'atomic_write',
    'load_json_file',
    'validate_document',
    'TASKLIST_SCHEMA',
]
