"""Mini README: Error kinds and result values shared by the ledger layers.

Structure:
    * LedgerError - base class for every failure raised by this package.
    * ParseError - a persisted line could not be decoded.
    * StorageError - the backing file could not be read or rewritten.
    * ValidationError - a caller supplied a malformed date, amount or month.
    * Outcome - explicit success/failure value returned by I/O operations.

Store and ledger operations that touch the disk return an ``Outcome`` rather
than raising, so the embedding shell decides whether a failure is fatal.
``Outcome.unwrap`` converts back to exception style when that is preferred.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LedgerError(Exception):
    """Base class for expense ledger failures."""


class ParseError(LedgerError, ValueError):
    """Raised when a stored line does not hold a valid expense record."""

    def __init__(
        self,
        message: str,
        *,
        line: Optional[str] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class StorageError(LedgerError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class ValidationError(LedgerError, ValueError):
    """Raised when caller input cannot be turned into an expense field."""


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of an operation that may fail without raising.

    A failed outcome can still carry a value: ``Ledger.add`` keeps the newly
    created expense in memory when persisting it fails, and reports it here
    alongside the storage error.
    """

    value: Optional[T] = None
    error: Optional[LedgerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value, error=error)

    def unwrap(self) -> T:
        """Return the value, raising the recorded error on failure."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
