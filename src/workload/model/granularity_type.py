# SPDX-License-Identifier: MIT

from typing import Literal, cast, get_args

GranularityType = Literal["day", "week", "month"]

GRANULARITIES: tuple[str, ...] = get_args(GranularityType)


def granularity_from_str(value: str) -> GranularityType:
    normalized = value.strip().lower()
    if normalized not in GRANULARITIES:
        raise ValueError(
            f"Unknown granularity {value!r}, expected one of {', '.join(GRANULARITIES)}"
        )
    return cast(GranularityType, normalized)
