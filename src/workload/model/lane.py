# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from workload.model.task import TaskRecord


class LaneAssignment(TypedDict):
    task: TaskRecord
    row_index: int
    start: pendulum.Date
    end: pendulum.Date


class LaneLayout(TypedDict):
    assignments: list[LaneAssignment]
    row_count: int
