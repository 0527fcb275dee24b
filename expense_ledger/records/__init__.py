"""Mini README: Record model for the expense ledger.

This package defines the immutable ``Expense`` value and the one-line text
codec the store uses for each record. It has no dependency on the store or
the ledger so it can be reused by import/export tooling on its own.
"""

from .model import (
    DELIMITER,
    Expense,
    coerce_amount,
    coerce_date,
    coerce_text,
    decode,
    encode,
    format_amount,
)

__all__ = [
    "DELIMITER",
    "Expense",
    "coerce_amount",
    "coerce_date",
    "coerce_text",
    "decode",
    "encode",
    "format_amount",
]
