# SPDX-License-Identifier: MIT

import logging
from typing import Optional, Sequence

from workload.model.gap import GapRecord, WorkingPeriod
from workload.model.interval import TaskInterval
from workload.service.interval import group_by_assignee
from workload.service.lane import sort_intervals
from workload.time import days_between, inclusive_days

logger = logging.getLogger(__name__)


def compute_gaps(
    intervals: Sequence[TaskInterval],
    working_period: Optional[WorkingPeriod] = None,
    include_edges: bool = False,
) -> list[GapRecord]:
    """
    Compute the idle periods of a single assignee.

    Tasks are sorted by start date and every adjacent pair is compared. The
    end day of the earlier task and the start day of the later one are both
    occupied, so a pair one day apart has no gap and a pair eight days apart
    leaves six idle days. Only positive gaps are reported.

    When include_edges is set and a working period is given, the idle days
    from the period start up to the first task and from the last task end up
    to the period end are reported too.

    Args:
        intervals: Intervals belonging to one assignee
        working_period: Inclusive (start, end) window used for edge gaps
        include_edges: Whether to report idle time before and after the tasks

    Returns:
        Gap records in chronological order
    """
    ordered = sort_intervals(intervals)
    gaps: list[GapRecord] = []

    for current, following in zip(ordered, ordered[1:]):
        gap_days = days_between(current["end"], following["start"]) - 1
        if gap_days <= 0:
            continue
        gaps.append(
            {
                "start": current["end"].add(days=1),
                "end": following["start"].subtract(days=1),
                "days": gap_days,
                "kind": "between",
            }
        )

    if not include_edges or working_period is None:
        return gaps

    period_start, period_end = working_period
    if not ordered:
        days = inclusive_days(period_start, period_end)
        if days > 0:
            gaps.append(
                {"start": period_start, "end": period_end, "days": days, "kind": "before"}
            )
        return gaps

    first_start = ordered[0]["start"]
    before_days = days_between(period_start, first_start)
    if before_days > 0:
        gaps.insert(
            0,
            {
                "start": period_start,
                "end": first_start.subtract(days=1),
                "days": before_days,
                "kind": "before",
            },
        )

    last_end = max(interval["end"] for interval in ordered)
    after_days = days_between(last_end, period_end)
    if after_days > 0:
        gaps.append(
            {
                "start": last_end.add(days=1),
                "end": period_end,
                "days": after_days,
                "kind": "after",
            }
        )

    return gaps


def idle_days(gaps: Sequence[GapRecord]) -> int:
    return sum(gap["days"] for gap in gaps)


def span_idle_days(intervals: Sequence[TaskInterval]) -> int:
    """
    Idle days as the covered span minus the days spent on tasks.

    The span runs from the first task start to the end of the last task in
    start order, both inclusive. Agrees with the gap total whenever no two
    tasks overlap.
    """
    if len(intervals) < 2:
        return 0

    ordered = sort_intervals(intervals)
    span = max(1, inclusive_days(ordered[0]["start"], ordered[-1]["end"]))
    busy = sum(
        max(1, inclusive_days(interval["start"], interval["end"]))
        for interval in ordered
    )
    return max(0, span - busy)


def compute_gaps_by_assignee(
    intervals: Sequence[TaskInterval],
    working_periods: Optional[dict[str, WorkingPeriod]] = None,
    include_edges: bool = False,
) -> dict[str, list[GapRecord]]:
    gaps_by_assignee: dict[str, list[GapRecord]] = {}

    for assignee, assignee_intervals in group_by_assignee(intervals).items():
        working_period = (working_periods or {}).get(assignee)
        gaps = compute_gaps(assignee_intervals, working_period, include_edges)
        gaps_by_assignee[assignee] = gaps

        between_total = idle_days([gap for gap in gaps if gap["kind"] == "between"])
        span_total = span_idle_days(assignee_intervals)
        if between_total != span_total:
            logger.debug(
                "Idle days for %s disagree: %d from gaps, %d from span (overlapping tasks?)",
                assignee,
                between_total,
                span_total,
            )

    return gaps_by_assignee
