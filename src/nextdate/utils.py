#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from collections import Counter

from nextdate.schema import NextDateResult

logger = logging.getLogger(__name__)


def summarise_results(results: list[NextDateResult]) -> dict:
    """Count successful cases and failures per error kind."""
    error_kinds = Counter(r.error_kind for r in results if not r.ok)
    return {
        "total": len(results),
        "computed": sum(r.ok for r in results),
        "failed": sum(error_kinds.values()),
        "errors": dict(sorted(error_kinds.items())),
    }
