"""Mini README: Flat text persistence for the expense ledger.

Structure:
    * ExpenseStore - loads every record from a text file and rewrites the
      whole file on save.

Each record occupies one line produced by ``records.encode``. ``save`` always
replaces the full file rather than appending, and nothing is written to a
temporary file first, so a crash mid-write can leave a truncated file.
Failures come back as ``Outcome`` values; a missing file on load simply
means there is no history yet.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Union

from ..errors import Outcome, ParseError, StorageError
from ..logging_utils import get_logger
from ..records import Expense, decode, encode

LOGGER = get_logger(__name__)


class ExpenseStore:
    """Map the full expense list to and from one text file."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        encoding: str = "utf-8",
        skip_malformed_lines: bool = False,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.skip_malformed_lines = skip_malformed_lines

    def __repr__(self) -> str:
        return f"ExpenseStore(path={str(self.path)!r})"

    def load(self) -> Outcome[List[Expense]]:
        """Read every non-blank line in file order.

        A malformed line fails the whole load unless the store was built with
        ``skip_malformed_lines=True``, in which case it is logged and ignored.
        """

        expenses: List[Expense] = []
        try:
            with self.path.open("r", encoding=self.encoding) as handle:
                for line_number, line in enumerate(handle, start=1):
                    if not line.strip():
                        continue
                    try:
                        expenses.append(decode(line))
                    except ParseError as error:
                        if not self.skip_malformed_lines:
                            LOGGER.error("Corrupt record in %s at line %s: %s", self.path, line_number, error)
                            located = ParseError(str(error), line=error.line, line_number=line_number)
                            located.__cause__ = error.__cause__
                            return Outcome.failure(located)
                        LOGGER.warning("Skipping line %s of %s: %s", line_number, self.path, error)
        except FileNotFoundError:
            LOGGER.info("No previous expense records found at %s. Starting fresh.", self.path)
            return Outcome.success([])
        except (OSError, UnicodeError) as error:
            LOGGER.error("Error reading expenses from %s: %s", self.path, error)
            storage_error = StorageError(f"Could not read {self.path}: {error}", path=self.path)
            storage_error.__cause__ = error
            return Outcome.failure(storage_error)

        LOGGER.debug("Loaded %s expenses from %s", len(expenses), self.path)
        return Outcome.success(expenses)

    def save(self, expenses: Iterable[Expense]) -> Outcome[int]:
        """Overwrite the file with one line per expense; report the count written."""

        written = 0
        try:
            with self.path.open("w", encoding=self.encoding) as handle:
                for expense in expenses:
                    handle.write(encode(expense))
                    handle.write("\n")
                    written += 1
        except (OSError, UnicodeError) as error:
            LOGGER.error("Error saving expenses to %s: %s", self.path, error)
            storage_error = StorageError(f"Could not write {self.path}: {error}", path=self.path)
            storage_error.__cause__ = error
            return Outcome.failure(storage_error)

        LOGGER.debug("Saved %s expenses to %s", written, self.path)
        return Outcome.success(written)
