# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

import pendulum

from workload.model.bucket import Bucket, WeeklyWorkload
from workload.model.granularity_type import GRANULARITIES, GranularityType
from workload.model.interval import TaskInterval
from workload.service.interval import group_by_assignee
from workload.service.stats import round_half_up
from workload.time import (
    as_date,
    date_to_key,
    days_between,
    inclusive_days,
    iso_week_number,
    month_index,
    month_start,
    week_key,
    week_start,
)

logger = logging.getLogger(__name__)


def get_slot_start(
    date: pendulum.Date, granularity: GranularityType
) -> pendulum.Date:
    """
    Truncate a date to the start of the slot containing it.

    Weeks start on Sunday, months on the first.
    """
    if granularity == "day":
        return as_date(date)
    elif granularity == "week":
        return week_start(date)
    else:  # granularity == "month"
        return month_start(date)


def get_slot_boundaries(
    slot: pendulum.Date,
    granularity: GranularityType,
) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Get the first and last day of a time slot based on granularity.

    Args:
        slot: The start of the time slot
        granularity: "day", "week", or "month"

    Returns:
        Tuple of (start, end), both inclusive
    """
    start = get_slot_start(slot, granularity)

    if granularity == "day":
        end = start
    elif granularity == "week":
        end = start.add(days=6)
    else:  # granularity == "month"
        end = start.add(months=1).subtract(days=1)

    return start, end


def generate_time_slots(
    start: pendulum.Date, end: pendulum.Date, granularity: GranularityType
) -> list[pendulum.Date]:
    """
    Generate the slot starts covering start to end based on granularity.

    The first slot is aligned to the slot containing ``start``, so the slots
    always cover the whole range without gaps.

    Args:
        start: First date of the range
        end: Last date of the range (inclusive)
        granularity: "day", "week", or "month"

    Returns:
        List of dates representing the start of each time slot
    """
    _ensure_granularity(granularity)

    slots = []
    current = get_slot_start(start, granularity)

    while current <= end:
        slots.append(current)
        if granularity == "day":
            current = current.add(days=1)
        elif granularity == "week":
            current = current.add(weeks=1)
        elif granularity == "month":
            current = current.add(months=1)

    return slots


def bucket_tasks(
    intervals: Sequence[TaskInterval],
    granularity: GranularityType,
    range_start: Optional[pendulum.Date] = None,
    range_end: Optional[pendulum.Date] = None,
) -> list[Bucket]:
    """
    Group tasks into ordered, gapless buckets.

    Every slot between range_start and range_end gets a bucket, including
    empty ones. A task lands in the bucket holding its anchor date (due date,
    else creation date); tasks whose anchor falls outside the range are left
    out.

    Args:
        intervals: Task intervals (see build_intervals)
        granularity: "day", "week", or "month"
        range_start: First date of the axis (defaults to the earliest anchor)
        range_end: Last date of the axis (defaults to the latest anchor)

    Returns:
        Buckets in ascending order of their start date
    """
    _ensure_granularity(granularity)

    anchors = [interval["anchor"] for interval in intervals]
    if range_start is None:
        if not anchors:
            return []
        range_start = min(anchors)
    if range_end is None:
        if not anchors:
            return []
        range_end = max(anchors)
    if range_end < range_start:
        raise ValueError(f"Range end {range_end} is before range start {range_start}")

    buckets: dict[str, Bucket] = {}
    for slot in generate_time_slots(range_start, range_end, granularity):
        slot_start, slot_end = get_slot_boundaries(slot, granularity)
        buckets[date_to_key(slot_start)] = {
            "key": date_to_key(slot_start),
            "start": slot_start,
            "end": slot_end,
            "week_number": iso_week_number(slot_start),
            "tasks": [],
        }

    for interval in sorted(intervals, key=lambda i: i["index"]):
        key = date_to_key(get_slot_start(interval["anchor"], granularity))
        bucket = buckets.get(key)
        if bucket is None:
            logger.debug(
                "Task %s anchored on %s is outside the timeline range",
                interval["task"].get("key"),
                interval["anchor"],
            )
            continue
        bucket["tasks"].append(interval["task"])

    return [buckets[key] for key in sorted(buckets)]


def timeline_range(
    intervals: Sequence[TaskInterval],
    today: pendulum.Date,
    trailing_months: int = 6,
) -> tuple[pendulum.Date, pendulum.Date]:
    """
    Axis range for a gantt chart: the earliest task start up to the latest
    task end plus a number of trailing months. Falls back to today when there
    are no tasks.
    """
    if intervals:
        start = min(interval["start"] for interval in intervals)
        end = max(interval["end"] for interval in intervals)
    else:
        start = end = as_date(today)
    return start, end.add(months=trailing_months)


def bar_placement(
    start: pendulum.Date,
    end: pendulum.Date,
    axis_start: pendulum.Date,
    granularity: GranularityType,
) -> tuple[int, int]:
    """
    Column offset and column span of a task bar on a timeline axis.

    Day columns are exact. Week columns round half up on the day offset and
    the duration. Month columns count whole calendar months between month
    starts. Spans are never less than one column.
    """
    _ensure_granularity(granularity)

    if granularity == "day":
        return days_between(axis_start, start), inclusive_days(start, end)
    elif granularity == "week":
        start_col = int(round_half_up(days_between(axis_start, start) / 7))
        span_cols = max(1, int(round_half_up(days_between(start, end) / 7)) + 1)
        return start_col, span_cols
    else:  # granularity == "month"
        start_col = month_index(start) - month_index(axis_start)
        span_cols = max(1, month_index(end) - month_index(start) + 1)
        return start_col, span_cols


def weekly_workload(intervals: Sequence[TaskInterval]) -> WeeklyWorkload:
    """
    Count tasks per Sunday-based week for every assignee.

    Tasks are counted in the week of their anchor date. Only weeks that hold
    at least one task are listed.
    """
    weeks: set[str] = set()
    counts: dict[str, dict[str, int]] = {}

    for assignee, assignee_intervals in group_by_assignee(intervals).items():
        per_week: dict[str, int] = {}
        for interval in assignee_intervals:
            key = week_key(interval["anchor"])
            weeks.add(key)
            per_week[key] = per_week.get(key, 0) + 1
        counts[assignee] = {key: per_week[key] for key in sorted(per_week)}

    return {"weeks": sorted(weeks), "counts": counts}


def _ensure_granularity(granularity: str) -> None:
    if granularity not in GRANULARITIES:
        raise ValueError(
            f"Unknown granularity {granularity!r}, expected one of {', '.join(GRANULARITIES)}"
        )
