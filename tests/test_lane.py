"""Tests for greedy lane packing."""

import random

import pendulum

from workload.service.interval import build_intervals
from workload.service.lane import max_overlap, pack_lanes, pack_lanes_by_assignee
from workload.time import date_to_key

from conftest import make_interval, make_task


def _rows(layout):
    return {a["task"]["key"]: a["row_index"] for a in layout["assignments"]}


def _random_intervals(seed: int, count: int):
    rng = random.Random(seed)
    base = pendulum.date(2024, 1, 1)
    intervals = []
    for index in range(count):
        start = base.add(days=rng.randint(0, 60))
        end = start.add(days=rng.randint(0, 12))
        intervals.append(
            make_interval(f"T{index}", date_to_key(start), date_to_key(end), index=index)
        )
    return intervals


class TestPackLanes:
    def test_disjoint_tasks_share_a_row(self, ann_tasks):
        intervals, _ = build_intervals(ann_tasks, "UTC")
        layout = pack_lanes(intervals)
        assert _rows(layout) == {"A": 0, "B": 0}
        assert layout["row_count"] == 1

    def test_overlapping_tasks_get_separate_rows(self):
        layout = pack_lanes(
            [
                make_interval("A", "2024-01-01", "2024-01-10", index=0),
                make_interval("B", "2024-01-05", "2024-01-08", index=1),
            ]
        )
        assert _rows(layout) == {"A": 0, "B": 1}
        assert layout["row_count"] == 2

    def test_task_starting_on_end_day_overlaps(self):
        layout = pack_lanes(
            [
                make_interval("A", "2024-01-01", "2024-01-03", index=0),
                make_interval("B", "2024-01-03", "2024-01-05", index=1),
                make_interval("C", "2024-01-04", "2024-01-04", index=2),
            ]
        )
        assert _rows(layout) == {"A": 0, "B": 1, "C": 0}
        assert layout["row_count"] == 2

    def test_first_free_row_is_reused(self):
        layout = pack_lanes(
            [
                make_interval("A", "2024-01-01", "2024-01-02", index=0),
                make_interval("B", "2024-01-01", "2024-01-10", index=1),
                make_interval("C", "2024-01-01", "2024-01-03", index=2),
                make_interval("D", "2024-01-04", "2024-01-05", index=3),
            ]
        )
        assert _rows(layout) == {"A": 0, "B": 1, "C": 2, "D": 0}

    def test_equal_starts_keep_input_order(self):
        layout = pack_lanes(
            [
                make_interval("Y", "2024-01-05", "2024-01-06", index=0),
                make_interval("X", "2024-01-05", "2024-01-09", index=1),
                make_interval("W", "2024-01-01", "2024-01-01", index=2),
            ]
        )
        assert [a["task"]["key"] for a in layout["assignments"]] == ["W", "Y", "X"]
        assert _rows(layout) == {"W": 0, "Y": 0, "X": 1}

    def test_single_day_task(self):
        layout = pack_lanes([make_interval("A", "2024-01-01", "2024-01-01")])
        assert layout["row_count"] == 1
        assignment = layout["assignments"][0]
        assert assignment["row_index"] == 0
        assert assignment["start"] == assignment["end"]

    def test_empty(self):
        assert pack_lanes([]) == {"assignments": [], "row_count": 0}

    def test_rows_never_overlap_and_are_minimal(self):
        for seed in range(5):
            intervals = _random_intervals(seed, 40)
            layout = pack_lanes(intervals)

            by_row: dict[int, list] = {}
            for assignment in layout["assignments"]:
                by_row.setdefault(assignment["row_index"], []).append(assignment)
            for assignments in by_row.values():
                for a in assignments:
                    for b in assignments:
                        if a is b:
                            continue
                        assert a["end"] < b["start"] or b["end"] < a["start"]

            assert layout["row_count"] == max_overlap(intervals)

    def test_is_deterministic(self):
        intervals = _random_intervals(7, 30)
        assert pack_lanes(intervals) == pack_lanes(list(intervals))


class TestMaxOverlap:
    def test_touching_days_count_as_overlap(self):
        intervals = [
            make_interval("A", "2024-01-01", "2024-01-03"),
            make_interval("B", "2024-01-03", "2024-01-04"),
        ]
        assert max_overlap(intervals) == 2

    def test_adjacent_days_do_not_overlap(self):
        intervals = [
            make_interval("A", "2024-01-01", "2024-01-03"),
            make_interval("B", "2024-01-04", "2024-01-04"),
        ]
        assert max_overlap(intervals) == 1


class TestPackLanesByAssignee:
    def test_each_assignee_gets_own_rows(self):
        intervals, _ = build_intervals(
            [
                make_task("A", "2024-01-01", "2024-01-10", assignee="Zoe"),
                make_task("B", "2024-01-05", "2024-01-08", assignee="Ann"),
                make_task("C", "2024-01-05", "2024-01-08", assignee="Zoe"),
            ],
            "UTC",
        )
        lanes = pack_lanes_by_assignee(intervals)
        assert list(lanes) == ["Ann", "Zoe"]
        assert lanes["Ann"]["row_count"] == 1
        assert lanes["Zoe"]["row_count"] == 2
