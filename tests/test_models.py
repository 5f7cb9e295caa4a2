"""Unit tests for the Task model and priority classification."""

import pytest
from pydantic import ValidationError

from tasklist.models import Priority, Task, Urgency, classify_priority
from tasklist.recovery import InvalidPriorityError


class TestClassifyPriority:
    """Test one-letter priority codes."""

    def test_codes(self):
        """Test every accepted code maps to its priority."""
        assert classify_priority("C") is Priority.CRITICAL
        assert classify_priority("H") is Priority.HIGH
        assert classify_priority("N") is Priority.NORMAL
        assert classify_priority("L") is Priority.LOW

    def test_case_insensitive(self):
        """Test lower-case codes and surrounding spaces."""
        assert classify_priority("c") is Priority.CRITICAL
        assert classify_priority(" l ") is Priority.LOW

    @pytest.mark.parametrize("code", ["", "X", "critical", "CH", "1"])
    def test_rejects_unknown(self, code):
        """Test anything else is refused."""
        with pytest.raises(InvalidPriorityError):
            classify_priority(code)

    def test_labels_and_tags(self):
        """Test display metadata is distinct per priority."""
        assert Priority.CRITICAL.label == "Critical"
        assert Priority.LOW.tag == "L"
        assert len({p.color for p in Priority}) == 4
        assert len({u.color for u in Urgency}) == 3


class TestTask:
    """Test Task model."""

    def test_valid_task(self, sample_task):
        """Test creating a valid task."""
        assert sample_task.description == "Buy milk"
        assert sample_task.due_date == "2024-01-10"
        assert sample_task.due_time == "09:05"
        assert sample_task.priority is Priority.NORMAL

    def test_aliases(self):
        """Test the persisted key names are accepted and produced."""
        task = Task.model_validate(
            {"description": "x", "dueDate": "2024-03-05", "dueTime": "23:59", "priority": "H"}
        )
        assert task.due_date == "2024-03-05"
        assert task.to_json() == {
            "description": "x",
            "dueDate": "2024-03-05",
            "dueTime": "23:59",
            "priority": "H",
        }

    def test_frozen(self, sample_task):
        """Test tasks cannot be modified in place."""
        with pytest.raises(ValidationError):
            sample_task.description = "changed"

    def test_replace_changes_one_field(self, sample_task):
        """Test replace returns a copy with just the given field changed."""
        changed = sample_task.replace(description="Buy bread")
        assert changed.description == "Buy bread"
        assert changed.due_date == sample_task.due_date
        assert changed.due_time == sample_task.due_time
        assert changed.priority == sample_task.priority
        assert sample_task.description == "Buy milk"

    def test_replace_validates(self, sample_task):
        """Test replace refuses non-canonical values."""
        with pytest.raises(ValidationError, match="Invalid due date format"):
            sample_task.replace(due_date="2024-1-1")

    @pytest.mark.parametrize("due_date", ["2024-3-5", "24-03-05", "2024-13-01", "2024-02-30"])
    def test_invalid_dates(self, due_date):
        """Test non-canonical or impossible dates."""
        with pytest.raises(ValidationError):
            Task(description="x", due_date=due_date, due_time="10:00", priority=Priority.LOW)

    @pytest.mark.parametrize("due_time", ["9:05", "25:00", "12:60", "1200"])
    def test_invalid_times(self, due_time):
        """Test non-canonical or impossible times."""
        with pytest.raises(ValidationError):
            Task(description="x", due_date="2024-01-01", due_time=due_time, priority=Priority.LOW)

    def test_legacy_priority_tokens(self):
        """Test colour blocks written by older versions load as codes."""
        upper = Task.model_validate(
            {"description": "x", "dueDate": "2024-01-01", "dueTime": "10:00",
             "priority": "\u001B[101M \u001B[0M"}
        )
        lower = Task.model_validate(
            {"description": "x", "dueDate": "2024-01-01", "dueTime": "10:00",
             "priority": "\u001b[104m \u001b[0m"}
        )
        assert upper.priority is Priority.CRITICAL
        assert lower.priority is Priority.LOW

    def test_lowercase_priority_code(self):
        """Test lower-case codes in a file are accepted."""
        task = Task.model_validate(
            {"description": "x", "dueDate": "2024-01-01", "dueTime": "10:00", "priority": "h"}
        )
        assert task.priority is Priority.HIGH

    def test_unknown_priority(self):
        """Test unknown priorities are rejected."""
        with pytest.raises(ValidationError):
            Task.model_validate(
                {"description": "x", "dueDate": "2024-01-01", "dueTime": "10:00", "priority": "Z"}
            )
