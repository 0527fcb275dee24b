"""Mini README: In-memory expense ledger backed by a flat file store.

Structure:
    * Summary - dataclass holding the expenses inside a date range and their total.
    * Ledger - owns the record list, assigns identifiers and answers summaries.

The ledger keeps records in insertion order and never edits or removes them.
Every ``add`` rewrites the whole backing file through ``ExpenseStore.save``.
If that write fails the new record stays in memory, so memory and disk
disagree until the next successful save; the returned ``Outcome`` carries
both the record and the storage error so callers can warn about it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Iterator, List, Optional, Tuple

from ..configuration import LedgerSettings, get_settings
from ..errors import LedgerError, Outcome
from ..logging_utils import configure_root_logger, get_logger
from ..records import Expense, format_amount
from ..records.model import AmountInput, DateInput, coerce_amount, coerce_date, coerce_text
from ..storage import ExpenseStore
from .periods import month_bounds, week_bounds

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Summary:
    """Expenses falling inside ``start..end`` (inclusive) and their total."""

    period: str
    start: date
    end: date
    expenses: Tuple[Expense, ...]
    total: Decimal

    @property
    def count(self) -> int:
        return len(self.expenses)

    @property
    def is_empty(self) -> bool:
        return not self.expenses

    def describe(self) -> List[str]:
        """Render the summary as display lines, one per expense plus the total."""

        if self.is_empty:
            return [f"No expenses found for the {self.period}."]
        lines = [str(expense) for expense in self.expenses]
        lines.append(f"Total Expenses for the {self.period}: {format_amount(self.total)}")
        return lines


class Ledger:
    """Authoritative expense list plus the id assignment policy."""

    def __init__(self, store: ExpenseStore, expenses: Iterable[Expense] = ()) -> None:
        self._store = store
        self._expenses: List[Expense] = list(expenses)
        self._next_id = max((expense.id for expense in self._expenses), default=0) + 1
        LOGGER.debug(
            "Ledger initialised with %s expenses, next id %s", len(self._expenses), self._next_id
        )

    @classmethod
    def open(cls, store: ExpenseStore) -> Outcome["Ledger"]:
        """Load the store's history and build a ledger over it."""

        loaded = store.load()
        if not loaded.ok:
            return Outcome.failure(loaded.error)  # type: ignore[arg-type]
        return Outcome.success(cls(store, loaded.value or []))

    @classmethod
    def from_settings(cls, settings: Optional[LedgerSettings] = None) -> Outcome["Ledger"]:
        """Open the ledger described by ``settings`` (environment defaults when omitted).

        The configured ``log_level`` is applied to the root logger first.
        """

        settings = settings or get_settings()
        configure_root_logger(settings.log_level)
        store = ExpenseStore(
            settings.data_file,
            encoding=settings.encoding,
            skip_malformed_lines=settings.skip_malformed_lines,
        )
        return cls.open(store)

    @property
    def store(self) -> ExpenseStore:
        return self._store

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(tuple(self._expenses))

    def add(
        self,
        date: DateInput,
        amount: AmountInput,
        category: str,
        description: str,
    ) -> Outcome[Expense]:
        """Record a new expense and persist the full list.

        Invalid dates, amounts, or text containing line breaks fail with ``ValidationError`` before anything
        changes. A failed save leaves the expense appended in memory.
        """

        try:
            occurred_on = coerce_date(date)
            value = coerce_amount(amount)
            category_text = coerce_text(category, "category")
            description_text = coerce_text(description, "description")
        except LedgerError as error:
            LOGGER.warning("Rejected expense input: %s", error)
            return Outcome.failure(error)

        expense = Expense(
            id=self._next_id,
            date=occurred_on,
            amount=value,
            category=category_text,
            description=description_text,
        )
        self._next_id += 1
        self._expenses.append(expense)

        saved = self._store.save(self._expenses)
        if not saved.ok:
            LOGGER.error("Expense %s kept in memory but not persisted: %s", expense.id, saved.error)
            return Outcome.failure(saved.error, value=expense)  # type: ignore[arg-type]
        LOGGER.info("Expense %s added and saved", expense.id)
        return Outcome.success(expense)

    def summarize(self, start: date, end: date, period: str = "range") -> Summary:
        """Collect expenses dated within ``start..end`` inclusive, in insertion order.

        A reversed range (``start > end``) matches nothing. ``period`` is a
        display label only.
        """

        matches = tuple(expense for expense in self._expenses if start <= expense.date <= end)
        total = sum((expense.amount for expense in matches), Decimal("0"))
        LOGGER.debug("Summary for %s %s..%s matched %s expenses", period, start, end, len(matches))
        return Summary(period=period, start=start, end=end, expenses=matches, total=total)

    def daily_summary(self, day: date) -> Summary:
        return self.summarize(day, day, "day")

    def weekly_summary(self, start: date, end: Optional[date] = None) -> Summary:
        """Summarise ``start..end``; without ``end`` the seven days from ``start``."""

        if end is None:
            start, end = week_bounds(start)
        return self.summarize(start, end, "week")

    def monthly_summary(self, year: int, month: int) -> Summary:
        """Summarise a calendar month; raises ``ValidationError`` for a bad month."""

        first_day, last_day = month_bounds(year, month)
        return self.summarize(first_day, last_day, "month")
