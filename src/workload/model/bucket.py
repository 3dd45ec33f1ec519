# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from workload.model.task import TaskRecord


class Bucket(TypedDict):
    key: str
    start: pendulum.Date
    end: pendulum.Date
    week_number: int
    tasks: list[TaskRecord]


class WeeklyWorkload(TypedDict):
    weeks: list[str]
    counts: dict[str, dict[str, int]]
