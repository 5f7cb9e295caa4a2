import tempfile, json, os
from typing import Any, Union
from pathlib import Path
from tasklist.recovery import FileOperationError, FatalError, CorruptionError
from tasklist.logs import get_logger

log = get_logger("data.io")

def _cleanup(temp_path):
    if temp_path is not None and os.path.exists(temp_path):
        try:
            os.unlink(temp_path)
            log.debug(f"Cleaned up temporary file: {temp_path}")
        except OSError as cleanup_error:
            log.warning(f"Could not clean up temp file {temp_path}: {cleanup_error}")

def _create_dirs(file_path : Path):
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
    except (OSError, PermissionError) as e:
        error_msg = f"Cannot create directory {file_path.parent}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def atomic_write(file_path : Union[Path, str], data : Any, create_dirs : bool = False):
    """
    Serialize and save data to a JSON file using atomic updates.

    The data is written to a temporary file next to the target and moved over
    it with ``os.replace``, so the target is either the old or the new content.
    """
    file_path = Path(file_path)
    temp_path = None

    try:
        if create_dirs:
            _create_dirs(file_path)

        # Temporary file in the same directory as target for atomicity
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', dir=file_path.parent,
                                         prefix=f".{file_path.name}.", suffix='.tmp', delete=False) as temp_file:
            temp_path = temp_file.name
            json.dump(data, temp_file, indent=2, ensure_ascii=False)
            temp_file.write("\n")
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_path, file_path)
        log.debug(f"Successfully saved JSON file: {file_path}")
        return True

    except (TypeError, ValueError) as e:
        _cleanup(temp_path)
        # Data cannot be serialized
        error_msg = (f"Data serialization failed for {file_path}. "
                    f"In-memory data may contain non-serializable types: {e}")
        log.critical(error_msg)
        raise FatalError(error_msg) from e

    except OSError as e:
        _cleanup(temp_path)
        error_msg = f"I/O error saving {file_path}: {e}"
        log.error(error_msg)
        raise FileOperationError(error_msg) from e

def load_json_file(file_path : Union[Path, str]) -> Any:
    """
    Load and parse a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Parsed data, or None if the file doesn't exist or is empty

    Raises:
        CorruptionError: If the file is not valid JSON
        FileOperationError: If the file cannot be read
    """
    file_path = Path(file_path)
    if not file_path.exists():
        log.debug(f"No file at {file_path}")
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}") from e

    if not text.strip():
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptionError(f"JSON syntax error in {file_path}: {e}") from e
