#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime
import json
from pathlib import Path

import pytest

from nextdate.engine import RecurrenceEngine


@pytest.fixture
def engine() -> RecurrenceEngine:
    return RecurrenceEngine()


@pytest.fixture
def strict_engine() -> RecurrenceEngine:
    return RecurrenceEngine(strict=True)


@pytest.fixture
def new_year_2024() -> datetime.date:
    # a Monday
    return datetime.date(2024, 1, 1)


@pytest.fixture
def cases() -> list[dict]:
    return [
        {"case_id": "weekly", "now": "20240101", "date": "20240101", "repeat": "w 1,3"},
        {"case_id": "daily", "now": "20240101", "date": "20240101", "repeat": "d 7"},
        {"case_id": "empty", "now": "20240101", "date": "20240101", "repeat": ""},
        {"case_id": "unknown", "now": "20240101", "date": "20240101", "repeat": "x 5"},
        {"case_id": "bad_date", "now": "20240101", "date": "2024-01-01", "repeat": "y"},
    ]


@pytest.fixture
def cases_file(tmp_path: Path, cases: list[dict]) -> Path:
    path = tmp_path / "cases.jsonl"
    with open(path, "w") as f:
        for case in cases:
            f.write(f"{json.dumps(case)}\n")
    return path
