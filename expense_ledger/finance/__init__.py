"""Mini README: Ledger and summary queries for personal expenses.

This package holds the in-memory ``Ledger`` that assigns expense ids,
persists through ``ExpenseStore`` on every addition and answers inclusive
date-range summaries for a day, a week or a calendar month.
"""

from .ledger import Ledger, Summary
from .periods import month_bounds, week_bounds

__all__ = ["Ledger", "Summary", "month_bounds", "week_bounds"]
