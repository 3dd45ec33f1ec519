# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

GapKind = Literal["before", "between", "after"]


class GapRecord(TypedDict):
    start: pendulum.Date
    end: pendulum.Date
    days: int
    kind: GapKind


WorkingPeriod = tuple[pendulum.Date, pendulum.Date]
