#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
DATE_FORMAT = "%Y%m%d"
"""The 8-digit civil date format (YYYYMMDD) used on the wire."""
DATE_STR_LENGTH = 8
MIN_DAY_INTERVAL = 1
MAX_DAY_INTERVAL = 400
MIN_MONTH_DAY = -2
MAX_MONTH_DAY = 31
LAST_DAY = -1
SECOND_TO_LAST_DAY = -2
WEEKLY_SCAN_DAYS = 730
"""Upper bound on the number of days scanned when resolving a weekly rule."""
MONTHLY_SCAN_DAYS = 1000
"""Upper bound on the number of days scanned when resolving a monthly rule."""
MAX_UPCOMING_OCCURRENCES = 23
RULE_TOKEN_SEPARATOR = " "
RULE_LIST_SEPARATOR = ","
RESULTS_FILE_NAME = "results.jsonl"
METRICS_FILE_NAME = "metrics.json"
CONFIG_FILE_NAME = "config.yaml"
