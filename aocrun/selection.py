from __future__ import annotations

import logging
from datetime import datetime
from datetime import timezone

from .config import RunConfig
from .day import Registry
from .exceptions import CannotInferDayError
from .exceptions import DayOutOfRangeError
from .exceptions import UnknownDayError
from .types import Clock
from .utils import AOC_TZ


log: logging.Logger = logging.getLogger(__name__)


def valid_days(year: int) -> range:
    """
    Puzzle days for the year. Advent of Code ran 25 days a year until 2025, when
    it was shortened to 12.
    """
    if year >= 2025:
        return range(1, 13)
    return range(1, 26)


def aoc_today(today: datetime | None = None, clock: Clock | None = None) -> datetime:
    """
    The current date and time on the AoC server's clock (UTC-5). A naive `today`
    is taken to be UTC already.
    """
    if today is None:
        today = clock() if clock is not None else datetime.now(tz=AOC_TZ)
    if today.tzinfo is None:
        today = today.replace(tzinfo=timezone.utc)
    return today.astimezone(AOC_TZ)


def resolve_days(
    config: RunConfig,
    year: int,
    registry: Registry,
    today: datetime | None = None,
    clock: Clock | None = None,
) -> list[int]:
    """
    Work out which days to run, in ascending order.

    An explicit day always wins, then "all", otherwise today's date is used, which
    only works during the advent of the configured year. Inference never falls
    back to some other day, a SelectionError is raised instead.
    """
    days = valid_days(year)
    if config.day is not None:
        day = config.day
        if day not in days:
            msg = f"day {day} is out of range for {year} (valid: {days[0]}-{days[-1]})"
            raise DayOutOfRangeError(msg)
        if day not in registry:
            raise UnknownDayError(f"no implementation registered for day {day}")
        return [day]
    if config.all:
        result = registry.day_numbers
        log.info("running all %d registered days", len(result))
        return result
    now = aoc_today(today, clock)
    log.debug("inferring day from %s", now.isoformat())
    if now.year != year or now.month != 12 or now.day not in days:
        msg = f"can not infer a day for {year} from the date {now:%Y-%m-%d} (UTC-5)"
        raise CannotInferDayError(msg)
    if now.day not in registry:
        raise UnknownDayError(f"no implementation registered for today (day {now.day})")
    log.info("inferred day=%s", now.day)
    return [now.day]


def most_recent_year(today: datetime | None = None) -> int:
    """
    This year, if it's December.
    The most recent year, otherwise.
    """
    now = aoc_today(today)
    year = now.year
    if now.month < 12:
        year -= 1
    return year
