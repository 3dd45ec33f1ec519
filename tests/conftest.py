"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from workload.model.interval import TaskInterval  # noqa: E402
from workload.model.task import TaskRecord  # noqa: E402
from workload.service.engine import clear_cache  # noqa: E402
from workload.service.interval import build_interval  # noqa: E402


def make_task(
    key: str,
    created: Optional[str],
    due: Optional[str] = None,
    assignee: str = "Ann",
    duration: Any = "",
    **extra: Any,
) -> TaskRecord:
    task: dict[str, Any] = {
        "key": key,
        "assignee": assignee,
        "status": "Open",
        "priority": "Medium",
        "summary": f"Task {key}",
        "created": created,
        "due": due,
        "duration": duration,
    }
    task.update(extra)
    return task  # type: ignore[return-value]


def make_interval(
    key: str, start: str, end: Optional[str] = None, index: int = 0, assignee: str = "Ann"
) -> TaskInterval:
    interval = build_interval(make_task(key, start, end, assignee=assignee), index, "UTC")
    assert interval is not None
    return interval


@pytest.fixture
def task_factory() -> Callable[..., TaskRecord]:
    return make_task


@pytest.fixture
def interval_factory() -> Callable[..., TaskInterval]:
    return make_interval


@pytest.fixture
def ann_tasks() -> list[TaskRecord]:
    """Two non-overlapping tasks with a six day gap between them."""
    return [
        make_task("A", "2024-01-01", "2024-01-03", duration=3),
        make_task("B", "2024-01-10", "2024-01-12", duration=3),
    ]


@pytest.fixture
def now() -> pendulum.DateTime:
    return pendulum.datetime(2024, 1, 10, 12, tz="UTC")


@pytest.fixture(autouse=True)
def fresh_engine_cache():
    clear_cache()
    yield
    clear_cache()
