"""Date range helpers for the summary queries."""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Tuple

from ..errors import ValidationError

DAYS_PER_WEEK = 7


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of ``month`` in ``year``, leap years included."""

    if not 1 <= month <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    try:
        _, days_in_month = calendar.monthrange(year, month)
        return date(year, month, 1), date(year, month, days_in_month)
    except ValueError as error:
        raise ValidationError(f"Unsupported year {year}") from error


def week_bounds(start: date) -> Tuple[date, date]:
    """Seven consecutive days beginning at ``start``."""

    return start, start + timedelta(days=DAYS_PER_WEEK - 1)
