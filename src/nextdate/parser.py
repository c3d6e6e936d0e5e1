#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Parsing of compact recurrence rules.

The grammar is a space separated list of tokens whose first token is the
rule kind:

    d <interval>                  every <interval> days, 1 <= interval <= 400
    y                             every year
    w <weekdays>                  on the listed weekdays (1=Monday..7=Sunday)
    m <days> [<months>]           on the listed days of the listed months;
                                  -1 is the last day and -2 the day before it
"""

import logging
import re

from nextdate.aliases import RuleStr
from nextdate.constants import RULE_LIST_SEPARATOR, RULE_TOKEN_SEPARATOR
from nextdate.exceptions import (
    EmptyRuleError,
    InvalidDayIntervalError,
    InvalidMonthDayError,
    InvalidMonthError,
    InvalidRuleError,
    InvalidWeekdayError,
    RuleParseError,
    UnsupportedRuleKindError,
)
from nextdate.rules import (
    Daily,
    Monthly,
    RecurrenceRule,
    RuleKind,
    Weekly,
    Yearly,
    check_month_days,
)

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def _parse_int(token: str) -> int | None:
    if not _INT_PATTERN.fullmatch(token):
        return None
    return int(token)


def _parse_int_list(
    token: str, error: type[RuleParseError], strip: bool = False
) -> list[int]:
    values = []
    for item in token.split(RULE_LIST_SEPARATOR):
        value = _parse_int(item.strip() if strip else item)
        if value is None:
            raise error()
        values.append(value)
    return values


def _parse_daily(tokens: list[str]) -> Daily:
    if len(tokens) != 2:
        raise InvalidDayIntervalError()
    interval = _parse_int(tokens[1])
    if interval is None:
        raise InvalidDayIntervalError()
    return Daily(interval_days=interval)


def _parse_yearly(tokens: list[str], strict: bool) -> Yearly:
    if strict and len(tokens) > 1:
        raise InvalidRuleError("yearly rule takes no parameters")
    return Yearly()


def _parse_weekly(tokens: list[str]) -> Weekly:
    if len(tokens) != 2:
        raise InvalidWeekdayError()
    weekdays = _parse_int_list(tokens[1], InvalidWeekdayError)
    return Weekly(weekdays=frozenset(weekdays))


def _parse_monthly(tokens: list[str], strict: bool) -> Monthly:
    if len(tokens) < 2:
        raise InvalidMonthDayError()
    if strict and len(tokens) > 3:
        raise InvalidRuleError("monthly rule takes at most a day and a month list")
    days = _parse_int_list(tokens[1], InvalidMonthDayError, strip=True)
    # days are checked before the month token is read
    check_month_days(days)
    months: list[int] = []
    if len(tokens) >= 3:
        months = _parse_int_list(tokens[2], InvalidMonthError, strip=True)
    return Monthly(days=tuple(days), months=frozenset(months))


def parse(rule_text: RuleStr, strict: bool = False) -> RecurrenceRule:
    """Parse `rule_text` into a typed recurrence rule.

    Parameters
    ----------
    rule_text
        The rule, eg "d 7", "y", "w 1,3" or "m -1,15 1,6".
    strict
        If True, surplus tokens after a "y" rule or after the month list of an
        "m" rule are rejected instead of being ignored.

    Raises
    ------
    RuleParseError
        The subclass raised classifies the failure (`EmptyRuleError`,
        `UnsupportedRuleKindError`, `InvalidDayIntervalError`, ...).
    """
    if not rule_text:
        raise EmptyRuleError()
    tokens = rule_text.split(RULE_TOKEN_SEPARATOR)
    try:
        kind = RuleKind(tokens[0])
    except ValueError:
        raise UnsupportedRuleKindError()

    match kind:
        case RuleKind.DAILY:
            rule = _parse_daily(tokens)
        case RuleKind.YEARLY:
            rule = _parse_yearly(tokens, strict)
        case RuleKind.WEEKLY:
            rule = _parse_weekly(tokens)
        case RuleKind.MONTHLY:
            rule = _parse_monthly(tokens, strict)
    logger.debug(f"Parsed rule {rule_text!r} as {rule}")
    return rule
