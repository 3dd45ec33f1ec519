# SPDX-License-Identifier: MIT

import datetime
import math
from typing import Any, Mapping, Optional, Sequence

from workload.model.gap import GapRecord
from workload.model.stats import AssigneeStats, WorkloadStats
from workload.model.task import TaskRecord
from workload.service.gap import idle_days
from workload.service.interval import assignee_of
from workload.time import parse_instant


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def parse_duration(value: Any) -> float:
    """Numeric duration in days, 0 for anything missing or non-numeric."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        duration = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(duration):
        return 0.0
    return duration


def average_duration(tasks: Sequence[TaskRecord]) -> int:
    total = sum(parse_duration(task.get("duration")) for task in tasks)
    return int(round_half_up(total / max(1, len(tasks))))


def is_overdue(
    task: TaskRecord, now: datetime.datetime, tz: str = "local"
) -> bool:
    due = parse_instant(task.get("due"), tz)
    if due is None:
        return False
    reference = parse_instant(now, tz)
    return reference is not None and due < reference


def aggregate(
    tasks: Sequence[TaskRecord],
    gaps_by_assignee: Mapping[str, Sequence[GapRecord]],
    now: datetime.datetime,
    tz: str = "local",
) -> WorkloadStats:
    """
    Summarize workload per assignee and across the whole task list.

    Assignees are enumerated alphabetically and then ordered by task count,
    highest first; equal counts keep their alphabetical order. Overdue means
    the due instant lies strictly before ``now``.

    Args:
        tasks: Task records, including ones without usable dates
        gaps_by_assignee: Gap records per assignee (see compute_gaps_by_assignee)
        now: Reference instant for overdue checks
        tz: Calendar used to read naive due dates

    Returns:
        Per-assignee stats and totals
    """
    by_assignee: dict[str, list[TaskRecord]] = {}
    for task in tasks:
        by_assignee.setdefault(assignee_of(task), []).append(task)

    per_assignee: list[AssigneeStats] = []
    for name in sorted(by_assignee):
        items = by_assignee[name]
        per_assignee.append(
            {
                "name": name,
                "count": len(items),
                "avg_duration": average_duration(items),
                "overdue": sum(1 for item in items if is_overdue(item, now, tz)),
                "idle_days": idle_days(gaps_by_assignee.get(name, [])),
            }
        )
    per_assignee.sort(key=lambda stats: stats["count"], reverse=True)

    total_idle_days = sum(stats["idle_days"] for stats in per_assignee)
    max_idle_days = max((stats["idle_days"] for stats in per_assignee), default=0)
    max_idle_assignee: Optional[str] = next(
        (
            stats["name"]
            for stats in per_assignee
            if stats["idle_days"] == max_idle_days
        ),
        None,
    )

    return {
        "per_assignee": per_assignee,
        "total_tasks": len(tasks),
        "total_assignees": len(per_assignee),
        "avg_duration": average_duration(tasks),
        "total_idle_days": total_idle_days,
        "avg_idle_days_per_assignee": round_half_up(
            total_idle_days / max(1, len(per_assignee)), 1
        ),
        "max_idle_days": max_idle_days,
        "max_idle_assignee": max_idle_assignee,
    }
