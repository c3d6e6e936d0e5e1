#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import datetime

# a civil date in the 8-digit YYYYMMDD format, eg "20240229"
DateStr = str
# a compact recurrence rule such as "d 7", "y", "w 1,3" or "m -1 2,8"
RuleStr = str
# anything the engine accepts as a reference date: a date, a datetime
# (whose time of day is ignored) or a DateStr
DateLike = datetime.date | datetime.datetime | DateStr
# the identifier of one row of a batch of cases
CaseId = str
