#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Calendar arithmetic which moves a recurring task to its next occurrence."""

import datetime
import logging

from nextdate.constants import (
    LAST_DAY,
    MONTHLY_SCAN_DAYS,
    SECOND_TO_LAST_DAY,
    WEEKLY_SCAN_DAYS,
)
from nextdate.exceptions import NoMatchFoundError
from nextdate.rules import Daily, Monthly, RecurrenceRule, Weekly, Yearly
from nextdate.time_utils import (
    ONE_DAY,
    add_days,
    add_years,
    is_last_day_of_month,
    is_leap,
    is_second_to_last_day_of_month,
    is_strictly_after,
    iso_weekday,
    to_civil_date,
)

logger = logging.getLogger(__name__)


def _advance_daily(rule: Daily, start: datetime.date, now: datetime.date):
    # smallest k >= 1 such that start + k * interval > now
    elapsed = (now - start).days
    steps = max(1, elapsed // rule.interval_days + 1)
    return add_days(start, steps * rule.interval_days)


def _yearly_candidate(start: datetime.date, years: int) -> datetime.date:
    if start.year + years > datetime.MAXYEAR:
        raise OverflowError(f"year {start.year + years} is out of range")
    if start.month == 2 and start.day == 29:
        year = start.year + years
        if is_leap(year):
            return datetime.date(year, 2, 29)
        return datetime.date(year, 3, 1)
    return add_years(start, years)


def _advance_yearly(rule: Yearly, start: datetime.date, now: datetime.date):
    # candidates in years before `now.year` can never be after `now`
    years = max(1, now.year - start.year)
    candidate = _yearly_candidate(start, years)
    while not is_strictly_after(candidate, now):
        years += 1
        candidate = _yearly_candidate(start, years)
    return candidate


def _advance_weekly(rule: Weekly, start: datetime.date, now: datetime.date):
    current = start
    for _ in range(WEEKLY_SCAN_DAYS):
        if iso_weekday(current) in rule.weekdays and is_strictly_after(current, now):
            return current
        current += ONE_DAY
    raise NoMatchFoundError(
        f"no date matching weekdays {sorted(rule.weekdays)} found within "
        f"{WEEKLY_SCAN_DAYS} days of {start.isoformat()}"
    )


def month_day_matches(rule: Monthly, date: datetime.date) -> bool:
    """Check whether the day of month of `date` is one of `rule.days`, taking
    the last (-1) and second-to-last (-2) days into account."""
    return (
        date.day in rule.days
        or (LAST_DAY in rule.days and is_last_day_of_month(date))
        or (SECOND_TO_LAST_DAY in rule.days and is_second_to_last_day_of_month(date))
    )


def _advance_monthly(rule: Monthly, start: datetime.date, now: datetime.date):
    current = start
    for _ in range(MONTHLY_SCAN_DAYS):
        current += ONE_DAY
        if (
            month_day_matches(rule, current)
            and rule.allows_month(current.month)
            and is_strictly_after(current, now)
        ):
            return current
    raise NoMatchFoundError(
        f"no date matching {rule.to_text()!r} found within "
        f"{MONTHLY_SCAN_DAYS} days of {start.isoformat()}"
    )


def advance(
    rule: RecurrenceRule,
    start: datetime.date | datetime.datetime,
    now: datetime.date | datetime.datetime,
) -> datetime.date:
    """Compute the first occurrence of `rule` strictly after `now`.

    Parameters
    ----------
    rule
        The parsed recurrence rule.
    start
        The date the task was originally scheduled for.
    now
        The reference date. Only its calendar day is significant.

    Raises
    ------
    NoMatchFoundError
        If a weekly or monthly rule has no occurrence within the bounded
        scan window, or the next occurrence is past the last representable
        date.
    """
    start, now = to_civil_date(start), to_civil_date(now)
    try:
        match rule:
            case Daily():
                next_date = _advance_daily(rule, start, now)
            case Yearly():
                next_date = _advance_yearly(rule, start, now)
            case Weekly():
                next_date = _advance_weekly(rule, start, now)
            case Monthly():
                next_date = _advance_monthly(rule, start, now)
            case _:
                raise TypeError(f"Unsupported recurrence rule: {rule!r}")
    except OverflowError:
        # date arithmetic past datetime.MAXYEAR
        raise NoMatchFoundError("next date is out of the supported date range")
    logger.debug(
        f"Advanced {rule.to_text()!r} from {start.isoformat()} past "
        f"{now.isoformat()} to {next_date.isoformat()}"
    )
    return next_date
