#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import json
import logging
from pathlib import Path
from typing import Any

import nestedtext as nt

from nextdate.schema import NextDateCase

logger = logging.getLogger(__name__)


class UnsupportedCaseFileError(Exception):
    pass


def load_json(path: str | Path) -> Any:
    return json.loads(Path(path).read_text())


def load_jsonl(path: str | Path) -> list[dict]:
    records = []
    with open(path, "r") as f:
        for line in f:
            if line.strip():
                records.append(json.loads(line))
    return records


def load_nestedtext(path: str | Path) -> Any:
    """Read a NestedText case file, a list of cases or a mapping keyed by id.

    All leaf values come back as strings, which is what the case fields are.
    """
    try:
        return nt.load(Path(path), top="any")
    except nt.NestedTextError as e:
        raise UnsupportedCaseFileError(f"Cannot parse {path}: {e}")


_LOADER_MAP = {"json": load_json, "jsonl": load_jsonl, "nt": load_nestedtext}


def _as_records(data: Any, path: Path) -> list[dict]:
    # a mapping keyed by case id, as is natural in NestedText files
    if isinstance(data, dict):
        records = []
        for key, value in data.items():
            if not isinstance(value, dict):
                raise UnsupportedCaseFileError(
                    f"Case {key!r} in {path} is not a mapping of case fields"
                )
            records.append({"case_id": key, **value})
        return records
    if not isinstance(data, list):
        raise UnsupportedCaseFileError(
            f"{path} must contain a list of cases or a mapping from case id to case"
        )
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise UnsupportedCaseFileError(
                f"Case {i} in {path} is not a mapping of case fields"
            )
    return data


def load_cases(path: str | Path) -> list[NextDateCase]:
    """Load next-date cases from a JSON, JSON lines or NestedText file.

    The file contains either a list of cases or a mapping from case id to
    case fields. Case ids default to the position of the case in the file.
    """
    path = Path(path)
    extension = path.suffix.lstrip(".")
    try:
        loader = _LOADER_MAP[extension]
    except KeyError:
        raise UnsupportedCaseFileError(
            f"Cannot load cases from {path}, supported extensions are "
            f"{', '.join(_LOADER_MAP)}"
        )
    cases = []
    for i, record in enumerate(_as_records(loader(path), path)):
        record.setdefault("case_id", str(i))
        cases.append(NextDateCase(**record))
    logger.info(f"Loaded {len(cases)} cases from {path}")
    return cases
