"""
Due date and time handling.

User input is zero-padded into canonical ``YYYY-MM-DD`` / ``HH:MM`` strings and
checked by composing a real UTC instant, so values like month 13 or hour 25
are rejected instead of stored. Urgency counts the whole days elapsed since
the due instant.
"""
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .models import Urgency
from .recovery import InvalidFormatError
from .logs import get_logger

log = get_logger("dates")

DATE_INPUT_PATTERN = re.compile(r'\d{1,4}-\d{1,2}-\d{1,2}', re.ASCII)
TIME_INPUT_PATTERN = re.compile(r'\d{1,2}:\d{1,2}', re.ASCII)

INVALID_DATE = "The input date is invalid"
INVALID_TIME = "The input time is invalid"

Clock = Callable[[], datetime]

DAY = timedelta(days=1)

def _parse_instant(text: str) -> datetime:
    return datetime.strptime(text, "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)

def normalize_date(raw: str) -> str:
    """
    Normalize a user-entered date.

    Args:
        raw: Text such as ``2024-3-5``

    Returns:
        The canonical ``YYYY-MM-DD`` form

    Raises:
        InvalidFormatError: If the text does not match the pattern or names a day
            that does not exist
    """
    if not DATE_INPUT_PATTERN.fullmatch(raw):
        raise InvalidFormatError(raw, INVALID_DATE)

    year, month, day = raw.split("-")
    canonical = f"{year.zfill(4)}-{month.zfill(2)}-{day.zfill(2)}"
    try:
        _parse_instant(f"{canonical}T00:00:00Z")
    except ValueError as e:
        log.debug(f"Rejected date {raw!r}: {e}")
        raise InvalidFormatError(raw, INVALID_DATE) from e
    return canonical

def normalize_time(raw: str) -> str:
    """Normalize a user-entered ``H:M`` time to ``HH:MM``, raising InvalidFormatError."""
    if not TIME_INPUT_PATTERN.fullmatch(raw):
        raise InvalidFormatError(raw, INVALID_TIME)

    hour, minute = raw.split(":")
    canonical = f"{hour.zfill(2)}:{minute.zfill(2)}"
    try:
        _parse_instant(f"2021-01-01T{canonical}:00Z")
    except ValueError as e:
        log.debug(f"Rejected time {raw!r}: {e}")
        raise InvalidFormatError(raw, INVALID_TIME) from e
    return canonical

def due_instant(due_date: str, due_time: str) -> datetime:
    """The UTC instant a task is due."""
    return _parse_instant(f"{due_date}T{due_time}:00Z")

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def classify_urgency(due_date: str, due_time: str, now: Optional[datetime] = None) -> Urgency:
    """
    Bucket a due date relative to ``now``.

    Only whole elapsed days (24 hour blocks, UTC) count and any part-day is
    dropped, so a task due less than a day before or after ``now`` is
    DUE_TODAY.
    """
    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    elapsed = now - due_instant(due_date, due_time)
    # Truncated toward zero
    if elapsed >= timedelta(0):
        days_past_due = elapsed // DAY
    else:
        days_past_due = -(-elapsed // DAY)

    if days_past_due > 0:
        return Urgency.OVERDUE
    if days_past_due < 0:
        return Urgency.UPCOMING
    return Urgency.DUE_TODAY
