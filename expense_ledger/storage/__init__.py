"""Mini README: Persistence boundary for the expense ledger.

``ExpenseStore`` is the only component that touches the disk: ``load`` is the
single read and ``save`` the single write, each opening and closing the
backing file within the call.
"""

from .flat_file import ExpenseStore

__all__ = ["ExpenseStore"]
