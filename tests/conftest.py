import logging

import pytest

from tasklist.models import Priority, Task


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep log files and task files inside the test's temp directory."""
    monkeypatch.setenv("TASKLIST_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("TASKLIST_FILE", raising=False)
    monkeypatch.delenv("TASKLIST_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_task():
    return Task(
        description="Buy milk",
        due_date="2024-01-10",
        due_time="09:05",
        priority=Priority.NORMAL,
    )


@pytest.fixture
def sample_tasks(sample_task):
    return [
        sample_task,
        Task(description="Write report\nSend it to the team", due_date="2024-01-09",
             due_time="18:00", priority=Priority.CRITICAL),
        Task(description="Plan trip", due_date="2024-02-01", due_time="00:00", priority=Priority.LOW),
    ]


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installed so later tests don't log to closed streams."""
    yield
    logger = logging.getLogger("tasklist")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
