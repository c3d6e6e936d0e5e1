#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import json
import logging
from pathlib import Path
from typing import Any

import nestedtext as nt
from inform import fatal, os_error
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def save_json(data: Any, path: str | Path, indent: int = 4):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=indent))
    logger.debug(f"Saved {path}")


def save_jsonl(records: list[BaseModel], path: str | Path):
    """Write one JSON document per record, in the order given."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for record in records:
            f.write(f"{record.model_dump_json()}\n")
    logger.debug(f"Saved {len(records)} records to {path}")


def save_nestedtext(data: dict[str, Any], path: str | Path):
    """Save a mapping in the NestedText case-file format.

    Dates are written as plain strings so that the file can be loaded back
    with `nextdate.readers.load_cases`. Failures to serialise or write the
    file terminate the program with an error message.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(nt.dumps(data, default=str) + "\n")
    except nt.NestedTextError as e:
        e.terminate()
    except OSError as e:
        fatal(os_error(e))
    logger.debug(f"Saved {len(data)} entries to {path}")
