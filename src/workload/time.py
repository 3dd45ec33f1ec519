# SPDX-License-Identifier: MIT

import datetime
import logging
from typing import Optional, Union

import pendulum

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime.date, datetime.datetime, None]


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def as_date(value: datetime.date) -> pendulum.Date:
    return pendulum.date(value.year, value.month, value.day)


def ensure_timezone(tz: str) -> str:
    """
    Check that ``tz`` names a timezone pendulum can load.

    Raises:
        ValueError: the timezone is unknown
    """
    if tz == "local":
        return tz
    try:
        pendulum.timezone(tz)
    except (ValueError, KeyError) as e:
        raise ValueError(f"Unknown timezone {tz!r}") from e
    return tz


def parse_instant(value: DateLike, tz: str = "local") -> Optional[pendulum.DateTime]:
    """
    Parse a date-like value into an instant.

    Naive values are read in ``tz``. Anything that cannot be read as a point in
    time (None, empty strings, garbage, durations) yields None.
    """
    if value is None:
        return None

    if isinstance(value, datetime.datetime):
        return pendulum.instance(value, tz=tz)

    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)

    if not isinstance(value, str) or not value.strip():
        return None

    try:
        parsed = pendulum.parse(value.strip(), tz=tz)
    except (ValueError, TypeError, OverflowError):
        logger.debug("Unparsable date value %r", value)
        return None

    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=tz)

    logger.debug("Date value %r is not a point in time", value)
    return None


def normalize_date(value: DateLike, tz: str = "local") -> Optional[pendulum.Date]:
    """
    Canonicalize a date-like value to a calendar date in ``tz``.

    The time of day never participates in later arithmetic, so instants are
    converted to ``tz`` first and then truncated. Plain dates pass through
    untouched.
    """
    if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
        return as_date(value)

    instant = parse_instant(value, tz)
    if instant is None:
        return None
    return as_date(instant.in_tz(tz))


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative when end is earlier)."""
    return end.toordinal() - start.toordinal()


def inclusive_days(start: datetime.date, end: datetime.date) -> int:
    return days_between(start, end) + 1


def date_to_key(date: datetime.date) -> str:
    return as_date(date).format("YYYY-MM-DD")


def date_from_key(key: str) -> pendulum.Date:
    return as_date(datetime.date.fromisoformat(key))


def iso_week_number(date: datetime.date) -> int:
    """ISO-8601 week number: weeks run Monday to Sunday, week 1 holds the first Thursday."""
    return date.isocalendar()[1]


def week_start(date: datetime.date) -> pendulum.Date:
    """The most recent Sunday on or before ``date``."""
    return as_date(date).subtract(days=date.isoweekday() % 7)


def week_key(date: datetime.date) -> str:
    return date_to_key(week_start(date))


def month_start(date: datetime.date) -> pendulum.Date:
    return pendulum.date(date.year, date.month, 1)


def month_index(date: datetime.date) -> int:
    return date.year * 12 + date.month


def date_to_display_str(date: datetime.date) -> str:
    return as_date(date).format("YYYY-MM-DD ddd")
