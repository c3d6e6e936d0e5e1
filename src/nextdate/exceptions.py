#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class RecurrenceError(Exception):
    """Base class for all failures raised while computing the next date.

    Each subclass has a stable `kind` which callers can map to a status code
    and a default, human-readable message.
    """

    kind: str = "RecurrenceError"
    default_message: str = "recurrence error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class RuleParseError(RecurrenceError):
    kind = "RuleParseError"
    default_message = "invalid repeat rule"


class EmptyRuleError(RuleParseError):
    kind = "EmptyRule"
    default_message = "invalid repeat rule"


class UnsupportedRuleKindError(RuleParseError):
    kind = "UnsupportedRuleKind"
    default_message = "unsupported repeat rule"


class InvalidRuleError(RuleParseError):
    kind = "InvalidRule"
    default_message = "invalid repeat rule"


class InvalidDayIntervalError(RuleParseError):
    kind = "InvalidDayInterval"
    default_message = "invalid day interval: must be positive integer between 1-400"


class InvalidWeekdayError(RuleParseError):
    kind = "InvalidWeekday"
    default_message = "invalid day value"


class InvalidMonthDayError(RuleParseError):
    kind = "InvalidMonthDay"
    default_message = "invalid day value"


class InvalidMonthError(RuleParseError):
    kind = "InvalidMonth"
    default_message = "invalid month value"


class InvalidDateError(RecurrenceError):
    kind = "InvalidDate"
    default_message = "invalid date format"


class NoMatchFoundError(RecurrenceError):
    kind = "NoMatchFound"
    default_message = "no matching date found"
