# SPDX-License-Identifier: MIT

import datetime
from typing import NotRequired, Optional, TypedDict, Union


class TaskRecord(TypedDict):
    key: str
    assignee: str
    status: str
    priority: str
    summary: NotRequired[str]
    created: Optional[Union[str, datetime.date]]
    due: Optional[Union[str, datetime.date]]
    duration: NotRequired[Optional[Union[int, float, str]]]


UNASSIGNED = "Unassigned"
