#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Typed descriptions of the four supported recurrence rules."""

from dataclasses import dataclass, field
from enum import StrEnum

from nextdate.constants import (
    MAX_DAY_INTERVAL,
    MAX_MONTH_DAY,
    MIN_DAY_INTERVAL,
    MIN_MONTH_DAY,
    RULE_LIST_SEPARATOR,
    RULE_TOKEN_SEPARATOR,
)
from nextdate.exceptions import (
    InvalidDayIntervalError,
    InvalidMonthDayError,
    InvalidMonthError,
    InvalidWeekdayError,
)


class RuleKind(StrEnum):
    DAILY = "d"
    YEARLY = "y"
    WEEKLY = "w"
    MONTHLY = "m"


def _join(values) -> str:
    return RULE_LIST_SEPARATOR.join(str(v) for v in sorted(values))


def check_month_days(days) -> None:
    if not days or any(
        d == 0 or not MIN_MONTH_DAY <= d <= MAX_MONTH_DAY for d in days
    ):
        raise InvalidMonthDayError()


def check_months(months) -> None:
    if any(not 1 <= m <= 12 for m in months):
        raise InvalidMonthError()


@dataclass(frozen=True)
class Daily:
    """Repeats every `interval_days` days.

    Parameters
    ----------
    interval_days
        Number of days between occurrences, in [1, 400].
    """

    interval_days: int
    kind: RuleKind = field(default=RuleKind.DAILY, init=False)

    def __post_init__(self):
        if not MIN_DAY_INTERVAL <= self.interval_days <= MAX_DAY_INTERVAL:
            raise InvalidDayIntervalError()

    def to_text(self) -> str:
        return f"{self.kind}{RULE_TOKEN_SEPARATOR}{self.interval_days}"


@dataclass(frozen=True)
class Yearly:
    """Repeats on the same month and day every year.

    Notes
    -----
    A task started on February 29 falls on February 29 in leap years
    and on March 1 otherwise.
    """

    kind: RuleKind = field(default=RuleKind.YEARLY, init=False)

    def to_text(self) -> str:
        return str(self.kind)


@dataclass(frozen=True)
class Weekly:
    """Repeats on the given days of the week.

    Parameters
    ----------
    weekdays
        Days of the week, 1 for Monday through 7 for Sunday.
    """

    weekdays: frozenset[int]
    kind: RuleKind = field(default=RuleKind.WEEKLY, init=False)

    def __post_init__(self):
        object.__setattr__(self, "weekdays", frozenset(self.weekdays))
        if not self.weekdays or any(not 1 <= d <= 7 for d in self.weekdays):
            raise InvalidWeekdayError()

    def to_text(self) -> str:
        return f"{self.kind}{RULE_TOKEN_SEPARATOR}{_join(self.weekdays)}"


@dataclass(frozen=True)
class Monthly:
    """Repeats on given days of the month, optionally restricted to some months.

    Parameters
    ----------
    days
        Days of the month (1-indexed). -1 stands for the last day of the
        month and -2 for the day before it.
    months
        Months of the year (1 for January, 12 for December) the task recurs
        in. Empty means every month.
    """

    days: tuple[int, ...]
    months: frozenset[int] = frozenset()
    kind: RuleKind = field(default=RuleKind.MONTHLY, init=False)

    def __post_init__(self):
        object.__setattr__(self, "days", tuple(sorted(set(self.days))))
        object.__setattr__(self, "months", frozenset(self.months))
        check_month_days(self.days)
        check_months(self.months)

    def allows_month(self, month: int) -> bool:
        return not self.months or month in self.months

    def to_text(self) -> str:
        text = f"{self.kind}{RULE_TOKEN_SEPARATOR}{_join(self.days)}"
        if self.months:
            text += f"{RULE_TOKEN_SEPARATOR}{_join(self.months)}"
        return text


RecurrenceRule = Daily | Yearly | Weekly | Monthly
