# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from workload.model.task import TaskRecord


class TaskInterval(TypedDict):
    task: TaskRecord
    index: int
    start: pendulum.Date
    end: pendulum.Date
    created: Optional[pendulum.Date]
    due: Optional[pendulum.Date]
    anchor: pendulum.Date
    inconsistent: bool
