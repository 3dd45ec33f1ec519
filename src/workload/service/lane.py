# SPDX-License-Identifier: MIT

from typing import Sequence

import pendulum

from workload.model.interval import TaskInterval
from workload.model.lane import LaneAssignment, LaneLayout
from workload.service.interval import group_by_assignee


def sort_intervals(intervals: Sequence[TaskInterval]) -> list[TaskInterval]:
    """Sort by start date, ties broken by input order."""
    return sorted(intervals, key=lambda i: (i["start"], i["index"]))


def pack_lanes(intervals: Sequence[TaskInterval]) -> LaneLayout:
    """
    Assign each task to the first row it fits in without overlapping.

    Tasks are visited by start date. A task fits in a row when the last task
    placed there ended strictly before the task starts; intervals are whole
    days, so a task ending on the day another starts still overlaps it. When no
    row fits a new one is opened. Visiting in start order makes the row count
    equal to the largest number of tasks active on any single day.

    Args:
        intervals: Intervals belonging to one assignee

    Returns:
        Assignments in placement order and the number of rows used
    """
    row_ends: list[pendulum.Date] = []
    assignments: list[LaneAssignment] = []

    for interval in sort_intervals(intervals):
        row_index = len(row_ends)
        for index, row_end in enumerate(row_ends):
            if row_end < interval["start"]:
                row_index = index
                break

        if row_index == len(row_ends):
            row_ends.append(interval["end"])
        else:
            row_ends[row_index] = interval["end"]

        assignments.append(
            {
                "task": interval["task"],
                "row_index": row_index,
                "start": interval["start"],
                "end": interval["end"],
            }
        )

    return {"assignments": assignments, "row_count": len(row_ends)}


def pack_lanes_by_assignee(
    intervals: Sequence[TaskInterval],
) -> dict[str, LaneLayout]:
    return {
        assignee: pack_lanes(assignee_intervals)
        for assignee, assignee_intervals in group_by_assignee(intervals).items()
    }


def max_overlap(intervals: Sequence[TaskInterval]) -> int:
    """Largest number of tasks active on the same day."""
    events: list[tuple[pendulum.Date, int]] = []
    for interval in intervals:
        events.append((interval["start"], 1))
        # A task frees its slot the day after it ends; departures sort first.
        events.append((interval["end"].add(days=1), -1))

    active = 0
    peak = 0
    for _, delta in sorted(events):
        active += delta
        peak = max(peak, active)
    return peak
