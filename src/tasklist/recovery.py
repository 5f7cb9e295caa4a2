class TasklistError(Exception):
    """Base exception for all tasklist errors."""
    pass

class RecoverableError(TasklistError):
    """An error that can be recovered from without data loss."""
    pass

class FatalError(TasklistError):
    """An error that requires application termination."""
    pass

class CorruptionError(FatalError):
    """Corrupted task file - from JSON syntax errors to entries of the wrong shape"""
    pass

class FileOperationError(RecoverableError):
    """File operation failed but can be retried."""
    pass

class IndexOutOfRangeError(TasklistError, IndexError):
    """A task position outside of the current store."""
    pass

class InputError(RecoverableError):
    """
    User input that could not be parsed.

    ``message`` is what the interactive prompt prints before asking again;
    an empty message means the question is simply repeated.
    """
    message = ""

    def __init__(self, raw: str = ""):
        super().__init__(f"{self.message or type(self).__name__}: {raw!r}")
        self.raw = raw

class InvalidFormatError(InputError):
    """Date or time text that does not match its pattern or calendar."""

    def __init__(self, raw: str = "", message: str = ""):
        if message:
            self.message = message
        super().__init__(raw)

class InvalidSelectionError(InputError):
    message = "Invalid task number"

class InvalidFieldError(InputError):
    message = "Invalid field"

class InvalidCommandError(InputError):
    message = "The input action is invalid"

class InvalidPriorityError(InputError):
    pass

class EmptyDescriptionError(InputError):
    message = "The task is blank"
