#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Structured types used by the batch runner."""

from pydantic import BaseModel, field_validator

from nextdate.aliases import CaseId, DateStr, RuleStr


class NextDateCase(BaseModel):
    """A single next-date computation request.

    Parameters
    ----------
    case_id
        Identifies the case in the output.
    date
        The date the task was scheduled for, as YYYYMMDD.
    repeat
        The recurrence rule.
    now
        The reference date, as YYYYMMDD. If not set, the current date is used.
    """

    case_id: CaseId
    date: DateStr
    repeat: RuleStr
    now: DateStr | None = None

    @field_validator("case_id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        # ids in hand-written case files are often integers
        return str(value)


class NextDateResult(BaseModel):
    case: NextDateCase
    next_date: DateStr | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def format_outcome(self) -> str:
        if self.ok:
            return self.next_date
        return f"{self.error_kind}: {self.error}"
