# SPDX-License-Identifier: MIT

from typing import TypedDict

from workload.model.bucket import Bucket, WeeklyWorkload
from workload.model.gap import GapRecord
from workload.model.granularity_type import GranularityType
from workload.model.lane import LaneLayout
from workload.model.stats import WorkloadStats


class WorkloadReport(TypedDict):
    granularity: GranularityType
    buckets: list[Bucket]
    lanes: dict[str, LaneLayout]
    gaps: dict[str, list[GapRecord]]
    stats: WorkloadStats
    weekly: WeeklyWorkload
    excluded: list[str]
    flagged: list[str]
