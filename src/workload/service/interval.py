# SPDX-License-Identifier: MIT

import logging
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from workload.model.interval import TaskInterval
from workload.model.task import UNASSIGNED, TaskRecord
from workload.time import normalize_date

logger = logging.getLogger(__name__)


def build_interval(
    task: TaskRecord, index: int, tz: str = "local"
) -> Optional[TaskInterval]:
    """
    Derive the calendar interval a task occupies.

    The interval starts on the creation date and ends on the due date. A task
    with only one resolvable date occupies that single day. A due date earlier
    than the creation date is clamped to the start and the interval is marked
    inconsistent.

    Returns None when neither date can be resolved.
    """
    created = normalize_date(task.get("created"), tz)
    due = normalize_date(task.get("due"), tz)

    if created is None and due is None:
        return None

    start = created if created is not None else due
    end = due if due is not None else start
    assert start is not None
    assert end is not None

    inconsistent = False
    if end < start:
        logger.warning(
            "Task %s is due %s before it was created %s, clamping to one day",
            task.get("key"),
            end,
            start,
        )
        end = start
        inconsistent = True

    return {
        "task": task,
        "index": index,
        "start": start,
        "end": end,
        "created": created,
        "due": due,
        "anchor": due if due is not None else start,
        "inconsistent": inconsistent,
    }


def build_intervals(
    tasks: Sequence[TaskRecord], tz: str = "local"
) -> tuple[list[TaskInterval], list[TaskRecord]]:
    """
    Build intervals for every task, in input order.

    Returns the intervals together with the records that were excluded
    because none of their dates could be resolved.
    """
    ensure_task_list(tasks)

    intervals: list[TaskInterval] = []
    excluded: list[TaskRecord] = []
    for index, task in enumerate(tasks):
        interval = build_interval(task, index, tz)
        if interval is None:
            logger.debug("Task %s has no usable dates, excluding", task.get("key"))
            excluded.append(task)
            continue
        intervals.append(interval)

    return intervals, excluded


def assignee_of(task: TaskRecord) -> str:
    return task.get("assignee") or UNASSIGNED


def group_by_assignee(
    intervals: Sequence[TaskInterval],
) -> dict[str, list[TaskInterval]]:
    grouped: dict[str, list[TaskInterval]] = {}
    for interval in intervals:
        grouped.setdefault(assignee_of(interval["task"]), []).append(interval)
    return {name: grouped[name] for name in sorted(grouped)}


def ensure_task_list(tasks: Any) -> None:
    if not isinstance(tasks, (list, tuple)):
        raise TypeError(
            f"tasks must be a list of task records, got {type(tasks).__name__}"
        )
    for position, task in enumerate(tasks):
        if not isinstance(task, Mapping):
            raise TypeError(
                f"task at position {position} must be a mapping, got {type(task).__name__}"
            )
