from __future__ import annotations

from spaceslots.domain import LocalParts, OpeningTimes, Space, Time


def find_first_slot(space: Space, parts: LocalParts, slot_interval_minutes: int) -> OpeningTimes:
    """Earliest slot start on the day described by parts.

    Slots start on a grid anchored at the day's opening time and must begin
    before close. A slot qualifies when it starts at or after
    parts.hour:parts.minute plus the space's minimum notice. Returns an empty
    OpeningTimes when the day is closed or nothing qualifies.
    """
    if slot_interval_minutes <= 0:
        raise ValueError(f"slot_interval_minutes must be positive, got {slot_interval_minutes}")

    day = space.opening_times.get(parts.weekday)
    if day is None or not day.is_open:
        return OpeningTimes()

    # Everything is minutes since local midnight of the same day.
    close = day.close.minutes
    minimum_start = Time(parts.hour, parts.minute).minutes + (space.minimum_notice or 0)

    for start in range(day.open.minutes, close, slot_interval_minutes):
        if start >= minimum_start:
            return OpeningTimes(open=Time.from_minutes(start), close=day.close)

    return OpeningTimes()
