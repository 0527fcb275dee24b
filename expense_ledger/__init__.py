"""Mini README: Personal expense ledger backed by a flat text file.

The package is the data layer of a single-user expense logger: the record
model and codec (``records``), the flat-file store (``storage``) and the
in-memory ledger with its summaries (``finance``). Interactive shells build
a ``Ledger`` and call it directly; nothing here prompts or prints.
"""

from .errors import LedgerError, Outcome, ParseError, StorageError, ValidationError
from .finance import Ledger, Summary
from .logging_utils import get_logger
from .records import Expense
from .storage import ExpenseStore

__all__ = [
    "Expense",
    "ExpenseStore",
    "Ledger",
    "LedgerError",
    "Outcome",
    "ParseError",
    "StorageError",
    "Summary",
    "ValidationError",
    "get_logger",
]
