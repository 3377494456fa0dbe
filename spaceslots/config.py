from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    # JSON file describing the space (timeZone, minimumNotice, openingTimes)
    space_file: str = "space.json"

    # How many days, starting today, to report availability for
    number_of_days: int = 7

    log_level: str = "INFO"


def _parse_number_of_days(raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as e:
        raise RuntimeError(f"Invalid AVAILABILITY_DAYS value: {raw!r}. Expected integer.") from e

    if value < 0:
        raise RuntimeError("AVAILABILITY_DAYS must be >= 0")
    return value


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"Invalid LOG_LEVEL value: {raw!r}")
    return level


def load_settings(dotenv_path: str | None = None) -> Settings:
    # Prefer .env in repo root; dotenv_path allows overriding in tests.
    load_dotenv(dotenv_path=dotenv_path, override=False)

    return Settings(
        space_file=os.getenv("SPACE_FILE", "space.json"),
        number_of_days=_parse_number_of_days(os.getenv("AVAILABILITY_DAYS", "7")),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL", "INFO")),
    )
