from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True, order=True)
class Time:
    """Wall-clock time of day, with no timezone attached."""

    hour: int
    minute: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute

    @classmethod
    def from_minutes(cls, minutes: int) -> Time:
        return cls(hour=minutes // 60, minute=minutes % 60)

    def as_dict(self) -> dict[str, int]:
        return {"hour": self.hour, "minute": self.minute}


@dataclass(frozen=True)
class DaySchedule:
    open: Time | None = None
    close: Time | None = None

    @property
    def is_open(self) -> bool:
        return self.open is not None and self.close is not None


@dataclass(frozen=True)
class Space:
    """A bookable space.

    opening_times is keyed by ISO weekday code: "1" (Monday) .. "7" (Sunday).
    A missing key means the space is closed that day.
    """

    time_zone: str
    opening_times: Mapping[str, DaySchedule] = field(default_factory=dict)
    minimum_notice: int = 0  # minutes


@dataclass(frozen=True)
class LocalParts:
    year: str
    month: str
    day: str
    weekday: str  # ISO code, "1" (Monday) .. "7" (Sunday)
    hour: int
    minute: int

    @property
    def date_key(self) -> str:
        # Not zero-padded: 2020-9-7
        return f"{self.year}-{self.month}-{self.day}"


@dataclass(frozen=True)
class OpeningTimes:
    """First bookable slot start and the day's close, or empty when unavailable."""

    open: Time | None = None
    close: Time | None = None

    @property
    def is_available(self) -> bool:
        return self.open is not None and self.close is not None

    def as_dict(self) -> dict[str, dict[str, int]]:
        if not self.is_available:
            return {}
        return {"open": self.open.as_dict(), "close": self.close.as_dict()}


def availability_to_dict(availability: Mapping[str, OpeningTimes]) -> dict[str, dict]:
    return {key: times.as_dict() for key, times in availability.items()}


class LocalizationError(RuntimeError):
    """Timezone data could not produce local date/time parts for an instant.

    Usually an unknown or misspelled IANA identifier. The whole query fails;
    there are no partial results.
    """


class SpaceConfigError(RuntimeError):
    """Space definition could not be read or is structurally invalid."""
