"""Mini README: Tests covering the expense ledger and its summaries.

Structure:
    * id assignment - sequencing within a lifetime and after reloads.
    * persistence - adds rewrite the file, failed saves keep memory state.
    * summaries - inclusive ranges, reversed ranges, day/week/month helpers.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from expense_ledger import Ledger, ParseError, StorageError, ValidationError
from expense_ledger.configuration import LedgerSettings
from expense_ledger.finance import month_bounds, week_bounds
from expense_ledger.records import Expense
from expense_ledger.storage import ExpenseStore


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "expenses.txt"


@pytest.fixture()
def ledger(data_file: Path) -> Ledger:
    return Ledger.open(ExpenseStore(data_file)).unwrap()


def test_worked_example(data_file: Path, ledger: Ledger) -> None:
    """Two additions, three summaries and a reload behave as documented."""

    first = ledger.add(date(2024, 3, 1), Decimal("12.50"), "food", "lunch").unwrap()
    assert first.id == 1
    assert data_file.read_text(encoding="utf-8").splitlines() == ["1,2024-03-01,12.5,food,lunch"]

    second = ledger.add(date(2024, 3, 2), Decimal("7.00"), "transport", "bus").unwrap()
    assert second.id == 2

    single_day = ledger.summarize(date(2024, 3, 1), date(2024, 3, 1))
    assert [expense.id for expense in single_day.expenses] == [1]
    assert single_day.total == Decimal("12.50")

    both_days = ledger.summarize(date(2024, 3, 1), date(2024, 3, 2))
    assert [expense.id for expense in both_days.expenses] == [1, 2]
    assert both_days.total == Decimal("19.50")

    reloaded = Ledger.open(ExpenseStore(data_file)).unwrap()
    assert reloaded.next_id == 3
    assert reloaded.expenses == ledger.expenses


def test_ids_increase_by_one_per_add(ledger: Ledger) -> None:
    ids = [
        ledger.add(date(2024, 1, day), Decimal(day), "misc", f"item {day}").unwrap().id
        for day in range(1, 6)
    ]
    assert ids == [1, 2, 3, 4, 5]
    assert ledger.next_id == 6


def test_next_id_follows_highest_stored_id(data_file: Path) -> None:
    """Ids continue after the largest one on disk, even when lines are out of order."""

    data_file.write_text(
        "7,2024-01-01,1.0,a,x\n3,2024-01-02,2.0,b,y\n", encoding="utf-8"
    )
    ledger = Ledger.open(ExpenseStore(data_file)).unwrap()

    assert ledger.next_id == 8
    assert ledger.add(date(2024, 1, 3), "3", "c", "z").unwrap().id == 8
    assert [expense.id for expense in ledger] == [7, 3, 8]


def test_open_surfaces_corrupt_history(data_file: Path) -> None:
    data_file.write_text("1,2024-01-01,abc,food,lunch\n", encoding="utf-8")

    outcome = Ledger.open(ExpenseStore(data_file))

    assert not outcome.ok
    assert isinstance(outcome.error, ParseError)


def test_add_accepts_zero_and_negative_amounts(ledger: Ledger) -> None:
    refund = ledger.add("2024-05-01", "-20.00", "refund", "returned shoes").unwrap()
    free = ledger.add("2024-05-01", 0, "gift", "sample").unwrap()

    assert refund.amount == Decimal("-20.00")
    assert free.amount == Decimal("0")
    assert ledger.daily_summary(date(2024, 5, 1)).total == Decimal("-20.00")


def test_add_rejects_invalid_input_without_changes(data_file: Path, ledger: Ledger) -> None:
    outcome = ledger.add("2024-13-01", "5", "food", "lunch")

    assert not outcome.ok
    assert isinstance(outcome.error, ValidationError)
    assert len(ledger) == 0
    assert ledger.next_id == 1
    assert not data_file.exists()


def test_failed_save_keeps_expense_in_memory(tmp_path: Path) -> None:
    """A write failure is reported but the new record is not rolled back."""

    ledger = Ledger(ExpenseStore(tmp_path))

    outcome = ledger.add(date(2024, 3, 1), Decimal("1.50"), "food", "tea")

    assert not outcome.ok
    assert isinstance(outcome.error, StorageError)
    assert outcome.value is not None
    assert outcome.value.id == 1
    assert ledger.expenses == (outcome.value,)
    assert ledger.next_id == 2
    with pytest.raises(StorageError):
        outcome.unwrap()


def test_summarize_is_inclusive_and_keeps_insertion_order(ledger: Ledger) -> None:
    ledger.add(date(2024, 3, 10), Decimal("3"), "a", "late")
    ledger.add(date(2024, 3, 1), Decimal("1"), "a", "start")
    ledger.add(date(2024, 2, 29), Decimal("100"), "a", "outside")
    ledger.add(date(2024, 3, 5), Decimal("2"), "a", "middle")

    summary = ledger.summarize(date(2024, 3, 1), date(2024, 3, 10), "fortnight")

    assert [expense.description for expense in summary.expenses] == ["late", "start", "middle"]
    assert summary.total == Decimal("6")
    assert summary.count == 3
    assert summary.period == "fortnight"


def test_reversed_range_is_empty(ledger: Ledger) -> None:
    ledger.add(date(2024, 3, 1), Decimal("12.50"), "food", "lunch")

    summary = ledger.summarize(date(2024, 3, 2), date(2024, 3, 1))

    assert summary.is_empty
    assert summary.total == Decimal("0")


def test_daily_summary_matches_only_that_day(ledger: Ledger) -> None:
    ledger.add(date(2024, 3, 1), Decimal("2.25"), "food", "coffee")
    ledger.add(date(2024, 3, 2), Decimal("9"), "food", "dinner")
    ledger.add(date(2024, 3, 1), Decimal("0.75"), "food", "biscuit")

    summary = ledger.daily_summary(date(2024, 3, 1))

    assert [expense.id for expense in summary.expenses] == [1, 3]
    assert summary.total == Decimal("3.00")


def test_weekly_summary_defaults_to_seven_days(ledger: Ledger) -> None:
    ledger.add(date(2024, 3, 4), Decimal("1"), "a", "monday")
    ledger.add(date(2024, 3, 10), Decimal("2"), "a", "sunday")
    ledger.add(date(2024, 3, 11), Decimal("4"), "a", "next monday")

    assert ledger.weekly_summary(date(2024, 3, 4)).total == Decimal("3")
    assert ledger.weekly_summary(date(2024, 3, 4), date(2024, 3, 11)).total == Decimal("7")


def test_monthly_summary_respects_leap_years(ledger: Ledger) -> None:
    ledger.add(date(2024, 2, 29), Decimal("5"), "a", "leap day")
    ledger.add(date(2023, 2, 28), Decimal("1"), "a", "last of feb")
    ledger.add(date(2023, 3, 1), Decimal("10"), "a", "march")

    leap = ledger.monthly_summary(2024, 2)
    common = ledger.monthly_summary(2023, 2)

    assert (leap.start, leap.end) == (date(2024, 2, 1), date(2024, 2, 29))
    assert (common.start, common.end) == (date(2023, 2, 1), date(2023, 2, 28))
    assert leap.total == Decimal("5")
    assert common.total == Decimal("1")


def test_monthly_summary_rejects_invalid_month(ledger: Ledger) -> None:
    with pytest.raises(ValidationError):
        ledger.monthly_summary(2024, 13)


def test_period_helpers() -> None:
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2024, 12, 31))
    assert week_bounds(date(2024, 12, 28)) == (date(2024, 12, 28), date(2025, 1, 3))


def test_summary_describe_lines(ledger: Ledger) -> None:
    assert ledger.daily_summary(date(2024, 3, 1)).describe() == ["No expenses found for the day."]

    ledger.add(date(2024, 3, 1), Decimal("12.50"), "food", "lunch")
    lines = ledger.daily_summary(date(2024, 3, 1)).describe()

    assert lines == [
        "ID: 1, Date: 2024-03-01, Amount: 12.5, Category: food, Description: lunch",
        "Total Expenses for the day: 12.5",
    ]


def test_ledger_can_be_built_from_preloaded_records(tmp_path: Path) -> None:
    records = [Expense(4, date(2024, 1, 1), Decimal("1"), "a", "b")]
    ledger = Ledger(ExpenseStore(tmp_path / "unused.txt"), records)

    assert ledger.next_id == 5
    assert len(ledger) == 1


def test_from_settings_uses_configured_file(tmp_path: Path) -> None:
    data_file = tmp_path / "nested" / "ledger.txt"
    settings = LedgerSettings(data_file=data_file)

    ledger = Ledger.from_settings(settings).unwrap()
    ledger.add(date(2024, 6, 1), "4.20", "books", "paperback")

    assert ledger.store.path == data_file
    assert data_file.read_text(encoding="utf-8").strip() == "1,2024-06-01,4.2,books,paperback"


@pytest.mark.parametrize(
    ("category", "description"),
    [("food", "lunch\nwith team"), ("food", "lunch\r"), ("eating\nout", "lunch")],
)
def test_add_rejects_line_breaks_in_text(
    data_file: Path, ledger: Ledger, category: str, description: str
) -> None:
    """Text that would split a stored line is refused and history stays loadable."""

    ledger.add(date(2024, 3, 1), Decimal("2"), "food", "coffee").unwrap()

    outcome = ledger.add(date(2024, 3, 1), Decimal("1"), category, description)

    assert not outcome.ok
    assert isinstance(outcome.error, ValidationError)
    assert len(ledger) == 1
    assert ledger.next_id == 2
    reloaded = Ledger.open(ExpenseStore(data_file)).unwrap()
    assert reloaded.expenses == ledger.expenses


@pytest.fixture()
def restore_root_level():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield root_logger
    root_logger.setLevel(level)


def test_from_settings_applies_log_level(tmp_path: Path, restore_root_level: logging.Logger) -> None:
    settings = LedgerSettings(data_file=tmp_path / "ledger.txt", log_level="DEBUG")

    Ledger.from_settings(settings).unwrap()
    assert restore_root_level.level == logging.DEBUG

    Ledger.from_settings(settings.model_copy(update={"log_level": "WARNING"})).unwrap()
    assert restore_root_level.level == logging.WARNING
