#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

import pytest

from nextdate.engine import RecurrenceEngine, next_date, upcoming
from nextdate.exceptions import (
    EmptyRuleError,
    InvalidDateError,
    InvalidDayIntervalError,
    InvalidRuleError,
    NoMatchFoundError,
    RecurrenceError,
    UnsupportedRuleKindError,
)
from nextdate.schema import NextDateCase
from nextdate.time_utils import parse_date


@pytest.mark.parametrize(
    "now,date,repeat,expected",
    [
        ("20240101", "20240101", "d 7", "20240108"),
        ("20240101", "20240101", "w 1,3", "20240103"),
        ("20240201", "20240201", "m -1", "20240229"),
        ("20240126", "20240125", "d 1", "20240127"),
        ("20240126", "20240126", "y", "20250126"),
        ("20240126", "20200229", "y", "20240229"),
        ("20240126", "20240125", "w 7", "20240128"),
        ("20240126", "20240125", "m 25", "20240225"),
        ("20240126", "20240125", "m -2 12", "20241230"),
        ("20240126", "20240125", "d 400", "20250228"),
    ],
)
def test_next_date(now: str, date: str, repeat: str, expected: str):
    assert next_date(now, date, repeat) == expected


def test_next_date_accepts_date_objects():
    now = datetime.datetime(2024, 1, 1, 18, 45)
    assert next_date(now, "20240101", "d 7") == "20240108"
    assert next_date(now.date(), "20240101", "d 7") == "20240108"


def test_result_round_trips(engine: RecurrenceEngine):
    result = engine.next_date("20240301", "20240101", "m 31 1,3,5")
    assert result == "20240331"
    assert parse_date(result).strftime("%Y%m%d") == result


def test_empty_rule_checked_before_date():
    with pytest.raises(EmptyRuleError):
        next_date("20240101", "not a date", "")


def test_invalid_start_date():
    with pytest.raises(InvalidDateError):
        next_date("20240101", "2024-01-01", "d 1")


def test_invalid_now():
    with pytest.raises(InvalidDateError):
        next_date("01/01/2024", "20240101", "d 1")


def test_invalid_date_checked_before_rule_kind():
    with pytest.raises(InvalidDateError):
        next_date("20240101", "", "x 5")


@pytest.mark.parametrize(
    "repeat,error",
    [
        ("x 5", UnsupportedRuleKindError),
        ("d 401", InvalidDayIntervalError),
        ("d 0", InvalidDayIntervalError),
        ("d -1", InvalidDayIntervalError),
    ],
)
def test_rule_errors(
    engine: RecurrenceEngine, repeat: str, error: type[RecurrenceError]
):
    with pytest.raises(error):
        engine.next_date("20240101", "20240101", repeat)


def test_error_messages_are_human_readable():
    with pytest.raises(RecurrenceError) as exc_info:
        next_date("20240101", "20240101", "d 401")
    assert exc_info.value.kind == "InvalidDayInterval"
    assert str(exc_info.value) == (
        "invalid day interval: must be positive integer between 1-400"
    )


def test_strict_engine(strict_engine: RecurrenceEngine, engine: RecurrenceEngine):
    assert engine.next_date("20240101", "20240101", "y extra") == "20250101"
    with pytest.raises(InvalidRuleError):
        strict_engine.next_date("20240101", "20240101", "y extra")


def test_upcoming_weekly():
    assert upcoming("20240101", "20240101", "w 1,3", 4) == [
        "20240103",
        "20240108",
        "20240110",
        "20240115",
    ]


def test_upcoming_leap_day():
    assert upcoming("20200229", "20200229", "y", 4) == [
        "20210301",
        "20220301",
        "20230301",
        "20240229",
    ]


def test_upcoming_is_capped():
    assert len(upcoming("20240101", "20240101", "d 1", 100)) == 23


def test_upcoming_stops_when_window_exhausted():
    # the only February 29 within 1000 days of the start is in 2024
    assert upcoming("20240101", "20240101", "m 29 2", 5) == ["20240229"]


def test_upcoming_raises_without_any_occurrence():
    with pytest.raises(NoMatchFoundError):
        upcoming("20240101", "20240101", "m 30 2", 3)


def test_upcoming_rejects_non_positive_count():
    with pytest.raises(ValueError):
        upcoming("20240101", "20240101", "d 1", 0)


def test_evaluate_success(engine: RecurrenceEngine):
    case = NextDateCase(case_id=1, now="20240101", date="20240101", repeat="d 7")
    result = engine.evaluate(case)
    assert result.ok
    assert result.case.case_id == "1"
    assert result.next_date == "20240108"
    assert result.format_outcome() == "20240108"


def test_evaluate_failure(engine: RecurrenceEngine):
    case = NextDateCase(case_id="x", now="20240101", date="20240101", repeat="x 5")
    result = engine.evaluate(case)
    assert not result.ok
    assert result.next_date is None
    assert result.error_kind == "UnsupportedRuleKind"
    assert result.format_outcome() == "UnsupportedRuleKind: unsupported repeat rule"


def test_evaluate_defaults_now_to_today(engine: RecurrenceEngine):
    case = NextDateCase(case_id="today", date="20000101", repeat="d 1")
    result = engine.evaluate(case)
    tomorrow = datetime.date.today() + datetime.timedelta(days=1)
    assert result.next_date == tomorrow.strftime("%Y%m%d")
