#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""A light wrapper around the `datetime` library, containing utilities
for parsing and formatting civil dates and the calendar arithmetic
needed to advance recurring tasks. Time of day is never significant."""

import datetime
import re

from dateutil.relativedelta import relativedelta

from nextdate.aliases import DateLike, DateStr
from nextdate.constants import DATE_FORMAT, DATE_STR_LENGTH
from nextdate.exceptions import InvalidDateError

_DATE_STR_PATTERN = re.compile(rf"[0-9]{{{DATE_STR_LENGTH}}}")

ONE_DAY = datetime.timedelta(days=1)


def to_civil_date(value: datetime.date | datetime.datetime) -> datetime.date:
    """Strip the time of day (if any) from `value`."""
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def parse_date(date_str: DateStr, date_format: str = DATE_FORMAT) -> datetime.date:
    """Parse an 8-digit date string such as "20240229".

    Raises
    ------
    InvalidDateError
        If `date_str` is not exactly eight digits or does not name a real
        calendar day (eg "20230229").
    """
    if not isinstance(date_str, str):
        raise InvalidDateError()
    if date_format == DATE_FORMAT and not _DATE_STR_PATTERN.fullmatch(date_str):
        raise InvalidDateError()
    try:
        return datetime.datetime.strptime(date_str, date_format).date()
    except ValueError:
        raise InvalidDateError()


def format_date(date: datetime.date, date_format: str = DATE_FORMAT) -> DateStr:
    if date_format == DATE_FORMAT:
        # strftime does not zero-pad years before 1000 on every platform
        return f"{date.year:04d}{date.month:02d}{date.day:02d}"
    return date.strftime(date_format)


def coerce_date(value: DateLike, date_format: str = DATE_FORMAT) -> datetime.date:
    """Accept a date, a datetime or a date string and return the civil date."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return to_civil_date(value)
    return parse_date(value, date_format)


def today() -> datetime.date:
    """Return the current date on the user's device."""
    return datetime.date.today()


def is_leap(year: int) -> bool:
    return year % 400 == 0 or (year % 100 != 0 and year % 4 == 0)


def last_day_of_month(date: datetime.date) -> int:
    """The number of the last day in the month `date` falls in."""
    if date.month == 12:
        return 31
    # day 0 of the following month
    first_of_next = date.replace(day=1) + relativedelta(months=1)
    return (first_of_next - ONE_DAY).day


def is_last_day_of_month(date: datetime.date) -> bool:
    return date.day == last_day_of_month(date)


def is_second_to_last_day_of_month(date: datetime.date) -> bool:
    return date.day == last_day_of_month(date) - 1


def iso_weekday(date: datetime.date) -> int:
    """Weekday of `date` in the range [1, 7], Monday is 1 and Sunday is 7."""
    return date.isoweekday()


def is_strictly_after(
    candidate: datetime.date | datetime.datetime,
    now: datetime.date | datetime.datetime,
) -> bool:
    """Check whether the calendar day of `candidate` is later than that of `now`.
    Time of day, if present, is ignored."""
    return to_civil_date(candidate) > to_civil_date(now)


def add_days(date: datetime.date, days: int) -> datetime.date:
    return date + datetime.timedelta(days=days)


def add_years(date: datetime.date, years: int) -> datetime.date:
    """Offset `date` by a whole number of years.

    Notes
    -----
    February 29 is clamped to February 28 in non-leap years. Callers
    which need a different leap day policy must handle it themselves.
    """
    return date + relativedelta(years=years)
