"""Case number generation for environmental reports."""

from datetime import datetime
from dateutil.relativedelta import relativedelta

CASE_NUMBER_PREFIX = "ENV"


def next_case_number(year: int, month: int, reports_this_month: int) -> str:
    """Build the next case number for a month.

    The sequence is the number of reports already created in that month plus
    one. Two callers that read the same count get the same number; the
    report store enforces uniqueness and the report service retries.

    Args:
        year: Four digit year
        month: Month number (1-12)
        reports_this_month: Reports already created in year/month

    Returns:
        Case number such as ``ENV-202501-0006``
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    sequence = reports_this_month + 1
    return f"{CASE_NUMBER_PREFIX}-{year:04d}{month:02d}-{sequence:04d}"


def month_bounds(moment: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) datetimes of the calendar month containing moment."""
    start = moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    return start, start + relativedelta(months=1)
