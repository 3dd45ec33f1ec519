"""Tests for date normalization and week keys."""

import datetime

import pendulum
import pytest

from workload.time import (
    date_from_key,
    date_to_key,
    days_between,
    ensure_timezone,
    inclusive_days,
    iso_week_number,
    month_index,
    month_start,
    normalize_date,
    parse_instant,
    week_key,
    week_start,
)


class TestNormalizeDate:
    def test_date_string(self):
        assert normalize_date("2024-01-03") == pendulum.date(2024, 1, 3)

    def test_time_of_day_is_dropped(self):
        assert normalize_date("2024-01-03T15:30:00", tz="UTC") == pendulum.date(2024, 1, 3)

    def test_offset_is_converted_to_calendar_timezone(self):
        normalized = normalize_date("2024-01-04T02:00:00+00:00", tz="America/New_York")
        assert normalized == pendulum.date(2024, 1, 3)

    def test_plain_date_object(self):
        normalized = normalize_date(datetime.date(2024, 1, 3))
        assert normalized == pendulum.date(2024, 1, 3)
        assert isinstance(normalized, pendulum.Date)

    def test_naive_datetime_object(self):
        normalized = normalize_date(datetime.datetime(2024, 1, 3, 18, 45), tz="UTC")
        assert normalized == pendulum.date(2024, 1, 3)

    @pytest.mark.parametrize(
        "value", [None, "", "   ", "not a date", "2024-13-45", "P1D", 12345]
    )
    def test_unusable_values_are_absent(self, value):
        assert normalize_date(value) is None

    def test_parse_instant_keeps_time(self):
        instant = parse_instant("2024-01-03T15:30:00", tz="UTC")
        assert instant == pendulum.datetime(2024, 1, 3, 15, 30, tz="UTC")

    def test_parse_instant_of_date_is_midnight(self):
        instant = parse_instant(datetime.date(2024, 1, 3), tz="UTC")
        assert instant == pendulum.datetime(2024, 1, 3, tz="UTC")


class TestEnsureTimezone:
    @pytest.mark.parametrize("tz", ["local", "UTC", "Europe/Brussels"])
    def test_known_zones(self, tz):
        assert ensure_timezone(tz) == tz

    @pytest.mark.parametrize("tz", ["Bogus/Zone", ""])
    def test_unknown_zones(self, tz):
        with pytest.raises(ValueError, match="Unknown timezone"):
            ensure_timezone(tz)


class TestDayArithmetic:
    def test_days_between(self):
        assert days_between(pendulum.date(2024, 1, 3), pendulum.date(2024, 1, 10)) == 7
        assert days_between(pendulum.date(2024, 1, 10), pendulum.date(2024, 1, 3)) == -7

    def test_days_between_across_leap_day(self):
        assert days_between(pendulum.date(2024, 2, 28), pendulum.date(2024, 3, 1)) == 2

    def test_inclusive_days_of_single_day(self):
        day = pendulum.date(2024, 1, 3)
        assert inclusive_days(day, day) == 1

    def test_key_round_trip(self):
        assert date_to_key(pendulum.date(2024, 3, 5)) == "2024-03-05"
        assert date_from_key("2024-03-05") == pendulum.date(2024, 3, 5)


class TestWeekKeys:
    def test_thursday_buckets_under_previous_sunday(self):
        assert week_start(pendulum.date(2024, 3, 14)) == pendulum.date(2024, 3, 10)
        assert week_key(pendulum.date(2024, 3, 14)) == "2024-03-10"

    def test_sunday_is_its_own_week_start(self):
        assert week_start(pendulum.date(2024, 3, 10)) == pendulum.date(2024, 3, 10)

    def test_saturday_belongs_to_the_same_week(self):
        assert week_start(pendulum.date(2024, 3, 16)) == pendulum.date(2024, 3, 10)

    def test_week_start_crosses_year(self):
        assert week_key(datetime.date(2024, 1, 3)) == "2023-12-31"

    @pytest.mark.parametrize(
        "date,expected",
        [
            (datetime.date(2024, 3, 14), 11),
            (datetime.date(2024, 1, 1), 1),
            (datetime.date(2021, 1, 1), 53),
            (datetime.date(2024, 12, 30), 1),
            (datetime.date(2026, 1, 1), 1),
        ],
    )
    def test_iso_week_number(self, date, expected):
        assert iso_week_number(date) == expected

    def test_iso_number_and_bucket_start_differ_on_sunday(self):
        # Sunday closes ISO week 10 but opens the bucket of the next week
        sunday = pendulum.date(2024, 3, 10)
        assert iso_week_number(sunday) == 10
        assert iso_week_number(sunday.add(days=1)) == 11
        assert week_start(sunday.add(days=1)) == sunday


class TestMonths:
    def test_month_start(self):
        assert month_start(pendulum.date(2024, 2, 29)) == pendulum.date(2024, 2, 1)

    def test_month_index_difference(self):
        start = pendulum.date(2023, 11, 15)
        end = pendulum.date(2024, 2, 3)
        assert month_index(end) - month_index(start) + 1 == 4
