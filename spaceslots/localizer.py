from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from spaceslots.domain import LocalizationError, LocalParts


def _zone(time_zone: str) -> ZoneInfo:
    if not isinstance(time_zone, str) or not time_zone.strip():
        raise LocalizationError(f"Invalid time zone: {time_zone!r}")
    try:
        return ZoneInfo(time_zone)
    # Malformed keys raise ValueError; directory names can surface as OSError.
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise LocalizationError(f"Unknown time zone: {time_zone!r}") from e


def _require_aware(instant: dt.datetime) -> None:
    if instant.tzinfo is None or instant.utcoffset() is None:
        raise ValueError(f"Expected a timezone-aware datetime, got naive {instant.isoformat()}")


def localize(instant: dt.datetime, time_zone: str) -> LocalParts:
    """Break an instant down into calendar parts as seen in time_zone."""
    _require_aware(instant)
    local = instant.astimezone(_zone(time_zone))

    return LocalParts(
        year=str(local.year),
        month=str(local.month),
        day=str(local.day),
        weekday=str(local.isoweekday()),
        hour=local.hour,
        minute=local.minute,
    )


def add_days(instant: dt.datetime, days: int, time_zone: str) -> dt.datetime:
    """Move an instant by whole calendar days in time_zone.

    Arithmetic on a ZoneInfo-aware datetime is wall-clock arithmetic, so a day
    that is 23 or 25 hours long still advances the date by exactly one.
    """
    _require_aware(instant)
    local = instant.astimezone(_zone(time_zone))
    return local + dt.timedelta(days=days)
