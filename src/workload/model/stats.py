# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class AssigneeStats(TypedDict):
    name: str
    count: int
    avg_duration: int
    overdue: int
    idle_days: int


class WorkloadStats(TypedDict):
    per_assignee: list[AssigneeStats]
    total_tasks: int
    total_assignees: int
    avg_duration: int
    total_idle_days: int
    avg_idle_days_per_assignee: float
    max_idle_days: int
    max_idle_assignee: Optional[str]
