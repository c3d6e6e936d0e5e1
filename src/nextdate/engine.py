#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""The call contract used by the task service: given the current date, the
date a task was scheduled for and its recurrence rule, return the date the
task should be moved to."""

import datetime
import logging

from nextdate.advancer import advance
from nextdate.aliases import DateLike, DateStr, RuleStr
from nextdate.constants import DATE_FORMAT, MAX_UPCOMING_OCCURRENCES
from nextdate.exceptions import EmptyRuleError, NoMatchFoundError, RecurrenceError
from nextdate.parser import parse
from nextdate.schema import NextDateCase, NextDateResult
from nextdate.time_utils import coerce_date, format_date, parse_date, today

logger = logging.getLogger(__name__)


class RecurrenceEngine:
    """Computes next occurrences of recurring tasks.

    Parameters
    ----------
    strict
        Reject surplus tokens in yearly and monthly rules instead of
        ignoring them.
    date_format
        The `strftime` format of date strings exchanged with callers.
    """

    def __init__(self, strict: bool = False, date_format: str = DATE_FORMAT):
        self.strict = strict
        self.date_format = date_format

    def next_occurrence(
        self, now: DateLike, date: DateStr, repeat: RuleStr
    ) -> datetime.date:
        if not repeat:
            raise EmptyRuleError()
        start = parse_date(date, self.date_format)
        now = coerce_date(now, self.date_format)
        rule = parse(repeat, strict=self.strict)
        return advance(rule, start, now)

    def next_date(self, now: DateLike, date: DateStr, repeat: RuleStr) -> DateStr:
        """Return the first date strictly after `now` on which the task recurs.

        Raises
        ------
        RecurrenceError
            If the rule or either date is invalid, or no occurrence exists
            within the search window.
        """
        next_ = self.next_occurrence(now, date, repeat)
        return format_date(next_, self.date_format)

    def upcoming(
        self, now: DateLike, date: DateStr, repeat: RuleStr, count: int
    ) -> list[DateStr]:
        """Return up to `count` consecutive occurrences after `now`.

        Notes
        -----
        1. At most `MAX_UPCOMING_OCCURRENCES` dates are returned.
        2. Weekly and monthly rules only search a bounded window after `date`,
        so fewer than `count` dates may be returned.
        """
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        if count > MAX_UPCOMING_OCCURRENCES:
            logger.warning(
                f"Requested {count} occurrences, returning at most "
                f"{MAX_UPCOMING_OCCURRENCES}."
            )
            count = MAX_UPCOMING_OCCURRENCES
        if not repeat:
            raise EmptyRuleError()
        start = parse_date(date, self.date_format)
        reference = coerce_date(now, self.date_format)
        rule = parse(repeat, strict=self.strict)
        occurrences = []
        for _ in range(count):
            try:
                reference = advance(rule, start, reference)
            except NoMatchFoundError:
                if not occurrences:
                    raise
                logger.info(
                    f"Search window for {repeat!r} exhausted after "
                    f"{len(occurrences)} occurrences."
                )
                break
            occurrences.append(format_date(reference, self.date_format))
        return occurrences

    def evaluate(self, case: NextDateCase) -> NextDateResult:
        """Compute the next date for `case`, recording failures in the result
        rather than raising."""
        now = case.now if case.now else today()
        try:
            next_ = self.next_date(now, case.date, case.repeat)
        except RecurrenceError as e:
            logger.warning(f"Case {case.case_id} failed: {e.kind}: {e}")
            return NextDateResult(case=case, error=e.message, error_kind=e.kind)
        return NextDateResult(case=case, next_date=next_)


def next_date(
    now: DateLike, date: DateStr, repeat: RuleStr, strict: bool = False
) -> DateStr:
    """Return the first date strictly after `now` on which a task scheduled for
    `date` and repeating according to `repeat` recurs, formatted as YYYYMMDD.

    Example
    -------
        next_date("20240101", "20240101", "w 1,3") -> "20240103"
    """
    return RecurrenceEngine(strict=strict).next_date(now, date, repeat)


def upcoming(
    now: DateLike, date: DateStr, repeat: RuleStr, count: int, strict: bool = False
) -> list[DateStr]:
    return RecurrenceEngine(strict=strict).upcoming(now, date, repeat, count)
