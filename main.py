import argparse
import datetime as dt
import json
import logging

from spaceslots.config import load_settings
from spaceslots.domain import availability_to_dict
from spaceslots.query import fetch_availability
from spaceslots.space_file import load_space


def _setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _parse_now(raw: str | None) -> dt.datetime:
    if raw is None:
        return dt.datetime.now(dt.timezone.utc)

    text = raw.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        now = dt.datetime.fromisoformat(text)
    except ValueError as e:
        raise RuntimeError(f"Invalid --now value: {raw!r}. Expected ISO-8601, e.g. 2020-09-07T15:22Z") from e

    if now.tzinfo is None:
        raise RuntimeError(f"--now must include a UTC offset, got {raw!r}")
    return now


def main() -> int:
    parser = argparse.ArgumentParser(description="Spaceslots: first available slot per day for a space")
    parser.add_argument("--space", help="Path to space JSON file (default: SPACE_FILE)")
    parser.add_argument("--days", type=int, help="Number of days starting today (default: AVAILABILITY_DAYS)")
    parser.add_argument("--now", help="Reference instant, ISO-8601 with offset (default: current time)")
    args = parser.parse_args()

    _setup_logging()
    logger = logging.getLogger(__name__)

    settings = load_settings()
    logging.getLogger().setLevel(settings.log_level)

    space_file = args.space or settings.space_file
    number_of_days = settings.number_of_days if args.days is None else args.days

    try:
        now = _parse_now(args.now)
        space = load_space(space_file)
        availability = fetch_availability(space, number_of_days, now)
    except Exception as e:
        logger.error("Availability query failed (%s: %s)", type(e).__name__, e)
        raise

    print(json.dumps(availability_to_dict(availability), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
