# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from functools import lru_cache
from typing import Any, Optional, Sequence

import pendulum

from workload.model.gap import WorkingPeriod
from workload.model.granularity_type import GranularityType
from workload.model.report import WorkloadReport
from workload.model.task import TaskRecord
from workload.service.bucket import bucket_tasks, weekly_workload
from workload.service.gap import compute_gaps_by_assignee
from workload.service.interval import build_intervals, ensure_task_list
from workload.service.lane import pack_lanes_by_assignee
from workload.service.stats import aggregate
from workload.time import ensure_timezone

logger = logging.getLogger(__name__)

# Values carry their type name so that equal values of different types (True
# and 1) never share a cache entry.
FrozenTasks = tuple[tuple[tuple[str, str, Any], ...], ...]
FrozenPeriods = tuple[tuple[str, WorkingPeriod], ...]


def compute_workload(
    tasks: Sequence[TaskRecord],
    granularity: GranularityType,
    now: datetime.datetime,
    range_start: Optional[pendulum.Date] = None,
    range_end: Optional[pendulum.Date] = None,
    tz: str = "local",
    include_edge_idle: bool = False,
    working_periods: Optional[dict[str, WorkingPeriod]] = None,
) -> WorkloadReport:
    """
    Run the whole layout and analytics pipeline over a task list.

    The result depends only on the arguments. Identical inputs are served from
    a small cache; every caller gets its own deep copy, so results can be
    modified freely.

    Args:
        tasks: Task records with assignee already defaulted
        granularity: Bucketing unit, "day", "week", or "month"
        now: Reference instant for overdue checks
        range_start: First day of the bucket axis (defaults to earliest task)
        range_end: Last day of the bucket axis (defaults to latest task)
        tz: Calendar used to normalize dates
        include_edge_idle: Count idle days before the first and after the last
            task of an assignee within their working period
        working_periods: Inclusive (start, end) window per assignee

    Raises:
        TypeError: tasks is not a list of mappings
        ValueError: unknown granularity or timezone, or inverted range
    """
    ensure_task_list(tasks)
    ensure_timezone(tz)

    frozen_tasks = _freeze_tasks(tasks)
    frozen_periods = tuple(sorted((working_periods or {}).items()))
    if frozen_tasks is None:
        logger.debug("Task records are not hashable, skipping the cache")
        return deepcopy(
            _compute(
                list(tasks),
                granularity,
                now,
                range_start,
                range_end,
                tz,
                include_edge_idle,
                dict(frozen_periods),
            )
        )

    return deepcopy(
        _compute_cached(
            frozen_tasks,
            granularity,
            now,
            range_start,
            range_end,
            tz,
            include_edge_idle,
            frozen_periods,
        )
    )


def clear_cache() -> None:
    _compute_cached.cache_clear()


@lru_cache(maxsize=16)
def _compute_cached(
    frozen_tasks: FrozenTasks,
    granularity: GranularityType,
    now: datetime.datetime,
    range_start: Optional[pendulum.Date],
    range_end: Optional[pendulum.Date],
    tz: str,
    include_edge_idle: bool,
    frozen_periods: FrozenPeriods,
) -> WorkloadReport:
    tasks: list[TaskRecord] = [
        {key: value for key, _, value in items}  # type: ignore[misc]
        for items in frozen_tasks
    ]
    return _compute(
        tasks,
        granularity,
        now,
        range_start,
        range_end,
        tz,
        include_edge_idle,
        dict(frozen_periods),
    )


def _compute(
    tasks: list[TaskRecord],
    granularity: GranularityType,
    now: datetime.datetime,
    range_start: Optional[pendulum.Date],
    range_end: Optional[pendulum.Date],
    tz: str,
    include_edge_idle: bool,
    working_periods: dict[str, WorkingPeriod],
) -> WorkloadReport:
    intervals, excluded = build_intervals(tasks, tz)
    logger.debug(
        "Computing workload for %d tasks (%d excluded) at %s granularity",
        len(tasks),
        len(excluded),
        granularity,
    )

    gaps = compute_gaps_by_assignee(intervals, working_periods, include_edge_idle)

    return {
        "granularity": granularity,
        "buckets": bucket_tasks(intervals, granularity, range_start, range_end),
        "lanes": pack_lanes_by_assignee(intervals),
        "gaps": gaps,
        "stats": aggregate(tasks, gaps, now, tz),
        "weekly": weekly_workload(intervals),
        "excluded": [str(task.get("key")) for task in excluded],
        "flagged": [
            str(interval["task"].get("key"))
            for interval in intervals
            if interval["inconsistent"]
        ],
    }


def _freeze_tasks(tasks: Sequence[TaskRecord]) -> Optional[FrozenTasks]:
    frozen = tuple(
        tuple(
            sorted(
                (key, type(value).__qualname__, value) for key, value in task.items()
            )
        )
        for task in tasks
    )
    try:
        hash(frozen)
    except TypeError:
        return None
    return frozen
