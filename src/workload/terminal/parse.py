# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from workload.model.granularity_type import GranularityType, granularity_from_str
from workload.time import normalize_date, parse_instant


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", date):
        parsed = normalize_date(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date {date}")
        return parsed

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()
    raise typer.BadParameter("Incorrect date format")


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = datetime_param.strip()

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")

    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        parsed = parse_instant(datetime)
        if parsed is None:
            raise typer.BadParameter(f"Invalid datetime {datetime}")
        return parsed

    raise typer.BadParameter("Incorrect datetime format")


def parse_granularity(granularity_param: str) -> GranularityType:
    try:
        return granularity_from_str(granularity_param)
    except ValueError as e:
        raise typer.BadParameter(str(e))
