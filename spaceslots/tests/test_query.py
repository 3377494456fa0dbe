from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from spaceslots.domain import DaySchedule, LocalizationError, OpeningTimes, Space, Time, availability_to_dict
from spaceslots.query import fetch_availability
from spaceslots.space_file import load_space

UTC = dt.timezone.utc
_REPO_ROOT = Path(__file__).resolve().parents[2]

# Monday 7 September 2020, 15:22 UTC: 16:22 in London, 11:22 in New York.
NOW = dt.datetime(2020, 9, 7, 15, 22, tzinfo=UTC)

_OPEN_ALL_DAY_TUESDAY = {"open": {"hour": 9, "minute": 0}, "close": {"hour": 17, "minute": 0}}


def _fixture(name: str) -> Space:
    return load_space(str(_REPO_ROOT / "fixtures" / name))


def test_london_today_after_opening() -> None:
    availability = fetch_availability(_fixture("space-london.json"), 1, NOW)
    assert availability_to_dict(availability) == {
        "2020-9-7": {"open": {"hour": 16, "minute": 30}, "close": {"hour": 17, "minute": 0}},
    }


def test_london_second_day_counts_from_midnight() -> None:
    availability = fetch_availability(_fixture("space-london.json"), 2, NOW)
    assert availability_to_dict(availability) == {
        "2020-9-7": {"open": {"hour": 16, "minute": 30}, "close": {"hour": 17, "minute": 0}},
        "2020-9-8": _OPEN_ALL_DAY_TUESDAY,
    }


@pytest.mark.parametrize(
    "fixture_name, expected_today",
    [
        ("space-with-no-advance-notice.json", {"hour": 11, "minute": 30}),
        ("space-with-30-minutes-advance-notice.json", {"hour": 12, "minute": 0}),
    ],
)
def test_new_york_fixtures_for_two_days(fixture_name: str, expected_today: dict) -> None:
    availability = fetch_availability(_fixture(fixture_name), 2, NOW)
    assert availability_to_dict(availability) == {
        "2020-9-7": {"open": expected_today, "close": {"hour": 17, "minute": 0}},
        "2020-9-8": _OPEN_ALL_DAY_TUESDAY,
    }


def test_notice_longer_than_remaining_day_leaves_today_empty() -> None:
    space = Space(
        time_zone="America/New_York",
        opening_times={"1": DaySchedule(Time(9, 0), Time(17, 0)), "2": DaySchedule(Time(9, 0), Time(17, 0))},
        minimum_notice=600,
    )
    availability = fetch_availability(space, 2, NOW)
    assert availability["2020-9-7"] == OpeningTimes()
    # From midnight, 10 hours of notice lands at 10:00.
    assert availability["2020-9-8"] == OpeningTimes(open=Time(10, 0), close=Time(17, 0))


def test_week_has_one_entry_per_day_in_order() -> None:
    availability = fetch_availability(_fixture("space-london.json"), 7, NOW)
    assert list(availability) == [f"2020-9-{d}" for d in range(7, 14)]
    # Saturday has no close, Sunday is null.
    assert availability["2020-9-12"].as_dict() == {}
    assert availability["2020-9-13"].as_dict() == {}
    assert all(availability[f"2020-9-{d}"].is_available for d in range(8, 12))


def test_keys_follow_local_date_not_utc_date() -> None:
    # 02:00 UTC on the 8th is still 22:00 on the 7th in New York.
    now = dt.datetime(2020, 9, 8, 2, 0, tzinfo=UTC)
    availability = fetch_availability(_fixture("space-with-no-advance-notice.json"), 2, now)
    assert list(availability) == ["2020-9-7", "2020-9-8"]
    assert availability["2020-9-7"] == OpeningTimes()


def test_days_are_consecutive_across_clock_change() -> None:
    now = dt.datetime(2020, 10, 24, 23, 30, tzinfo=UTC)  # 00:30 BST, Sunday 25th
    availability = fetch_availability(_fixture("space-london.json"), 3, now)
    assert list(availability) == ["2020-10-25", "2020-10-26", "2020-10-27"]
    assert availability["2020-10-26"] == OpeningTimes(open=Time(9, 0), close=Time(17, 0))


@pytest.mark.parametrize("number_of_days", [0, -1, -30])
def test_non_positive_day_count_gives_empty_result(number_of_days: int) -> None:
    assert fetch_availability(_fixture("space-london.json"), number_of_days, NOW) == {}


def test_no_days_requested_does_not_touch_time_zone() -> None:
    assert fetch_availability(Space(time_zone="Not/AZone"), 0, NOW) == {}


def test_unknown_time_zone_fails_whole_query() -> None:
    space = Space(time_zone="Not/AZone", opening_times={"1": DaySchedule(Time(9, 0), Time(17, 0))})
    with pytest.raises(LocalizationError):
        fetch_availability(space, 3, NOW)


def test_future_days_ignore_wall_clock_of_query() -> None:
    space = _fixture("space-with-30-minutes-advance-notice.json")
    early = fetch_availability(space, 5, dt.datetime(2020, 9, 7, 4, 1, tzinfo=UTC))  # 00:01 local
    late = fetch_availability(space, 5, dt.datetime(2020, 9, 7, 20, 59, tzinfo=UTC))  # 16:59 local

    assert list(early) == list(late)
    assert list(early.values())[1:] == list(late.values())[1:]
    assert early["2020-9-7"] != late["2020-9-7"]


def test_query_is_idempotent() -> None:
    space = _fixture("space-with-30-minutes-advance-notice.json")
    assert fetch_availability(space, 7, NOW) == fetch_availability(space, 7, NOW)
