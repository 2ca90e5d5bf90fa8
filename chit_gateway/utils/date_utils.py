"""Date manipulation utilities"""

from datetime import date
from typing import List

from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to month end (Jan 31 + 1 -> Feb 28/29)"""
    return from_date + relativedelta(months=months)


def generate_monthly_dates(start: date, count: int) -> List[date]:
    """Generate `count` monthly dates starting at `start` (inclusive)"""
    # Offsets are taken from start, not chained, so a 31st never drifts to the 28th
    return [add_months(start, i) for i in range(count)]
