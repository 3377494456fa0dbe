from __future__ import annotations

import dataclasses
import datetime as dt
import logging

from spaceslots.domain import OpeningTimes, Space
from spaceslots.engine import find_first_slot
from spaceslots.localizer import add_days, localize

logger = logging.getLogger(__name__)

SLOT_LENGTH = 15  # minutes


def fetch_availability(space: Space, number_of_days: int, now: dt.datetime) -> dict[str, OpeningTimes]:
    """First available slot for each of the next number_of_days days, starting today.

    Keys are local dates of the space ("2020-9-7"), in day order. A day with
    no availability maps to an empty OpeningTimes. A bad time zone raises
    LocalizationError for the whole query.
    """
    availability: dict[str, OpeningTimes] = {}

    for offset in range(number_of_days):
        parts = localize(add_days(now, offset, space.time_zone), space.time_zone)

        # Only today is limited by the current time; later days count notice from midnight.
        if offset != 0:
            parts = dataclasses.replace(parts, hour=0, minute=0)

        times = find_first_slot(space, parts, SLOT_LENGTH)
        logger.debug("Day %s (weekday=%s): %s", parts.date_key, parts.weekday, times.as_dict() or "unavailable")
        availability[parts.date_key] = times

    logger.info(
        "Availability: days=%d available=%d tz=%s",
        len(availability),
        sum(1 for t in availability.values() if t.is_available),
        space.time_zone,
    )
    return availability
