from __future__ import annotations

import json
import logging
from typing import Any

from spaceslots.domain import DaySchedule, Space, SpaceConfigError, Time

logger = logging.getLogger(__name__)

_WEEKDAYS = {"1", "2", "3", "4", "5", "6", "7"}


def _parse_int(value: Any, *, name: str, low: int, high: int | None = None) -> int:
    # bool is an int subclass; true/false in JSON is a typo, not a number.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SpaceConfigError(f"{name} must be an integer, got {value!r}")
    if value < low or (high is not None and value > high):
        bounds = f">= {low}" if high is None else f"between {low} and {high}"
        raise SpaceConfigError(f"{name} must be {bounds}, got {value}")
    return value


def _parse_time(raw: Any, *, name: str) -> Time | None:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise SpaceConfigError(f"{name} must be an object with hour and minute, got {raw!r}")
    return Time(
        hour=_parse_int(raw.get("hour"), name=f"{name}.hour", low=0, high=23),
        minute=_parse_int(raw.get("minute"), name=f"{name}.minute", low=0, high=59),
    )


def space_from_dict(raw: Any) -> Space:
    if not isinstance(raw, dict):
        raise SpaceConfigError("Space definition must be a JSON object")

    time_zone = raw.get("timeZone")
    if not isinstance(time_zone, str) or not time_zone.strip():
        raise SpaceConfigError("timeZone is required (IANA identifier, e.g. Europe/London)")

    minimum_notice_raw = raw.get("minimumNotice")
    minimum_notice = 0 if minimum_notice_raw is None else _parse_int(minimum_notice_raw, name="minimumNotice", low=0)

    opening_times_raw = raw.get("openingTimes")
    if opening_times_raw is None:
        opening_times_raw = {}
    if not isinstance(opening_times_raw, dict):
        raise SpaceConfigError("openingTimes must be an object keyed by ISO weekday (1-7)")

    opening_times: dict[str, DaySchedule] = {}
    for weekday, entry in opening_times_raw.items():
        if weekday not in _WEEKDAYS:
            raise SpaceConfigError(f"Invalid openingTimes key {weekday!r}. Expected ISO weekday 1-7.")
        if entry is None:
            continue
        if not isinstance(entry, dict):
            raise SpaceConfigError(f"openingTimes[{weekday}] must be an object, got {entry!r}")
        opening_times[weekday] = DaySchedule(
            open=_parse_time(entry.get("open"), name=f"openingTimes[{weekday}].open"),
            close=_parse_time(entry.get("close"), name=f"openingTimes[{weekday}].close"),
        )

    return Space(time_zone=time_zone, opening_times=opening_times, minimum_notice=minimum_notice)


def load_space(path: str) -> Space:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise SpaceConfigError(f"Cannot read space file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SpaceConfigError(f"Space file {path} is not valid JSON: {e}") from e

    space = space_from_dict(raw)
    logger.info(
        "Loaded space from %s (tz=%s, open days=%d, minimum_notice=%d)",
        path,
        space.time_zone,
        sum(1 for d in space.opening_times.values() if d.is_open),
        space.minimum_notice,
    )
    return space
