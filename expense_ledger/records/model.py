"""Mini README: Expense record definition and its one-line text codec.

Structure:
    * Expense - immutable dataclass describing one dated transaction.
    * encode / decode - convert a record to and from a comma separated line.
    * format_amount - canonical decimal text used in the stored line.
    * coerce_date / coerce_amount / coerce_text - normalise caller input before a record is built.

Stored lines hold five comma separated fields in a fixed order:
``id,YYYY-MM-DD,amount,category,description``. Nothing is quoted or escaped,
so a comma inside the category or description is read back as a field
boundary and everything after the fifth field is dropped. Line breaks are
refused by ``coerce_text`` because they would split a record in two.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Union

from ..errors import ParseError, ValidationError

DELIMITER = ","
FIELD_COUNT = 5
LINE_BREAKS = ("\n", "\r")

_ID_PATTERN = re.compile(r"[0-9]+")
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

AmountInput = Union[Decimal, int, float, str]
DateInput = Union[date, datetime, str]


@dataclass(frozen=True, slots=True)
class Expense:
    """One expense entry; ids are assigned by the ledger."""

    id: int
    date: date
    amount: Decimal
    category: str
    description: str

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Date: {self.date.isoformat()}, "
            f"Amount: {format_amount(self.amount)}, Category: {self.category}, "
            f"Description: {self.description}"
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "amount": format_amount(self.amount),
            "category": self.category,
            "description": self.description,
        }


def format_amount(amount: Decimal) -> str:
    """Render ``amount`` as plain decimal text with at least one fractional digit.

    ``Decimal("12.50")`` becomes ``"12.5"`` and ``Decimal("7")`` becomes
    ``"7.0"``, which is the layout existing data files already use.
    """

    text = format(amount, "f")
    if "." not in text:
        return text + ".0"
    text = text.rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def encode(expense: Expense) -> str:
    """Return the stored line for ``expense`` without a line terminator."""

    return DELIMITER.join(
        (
            str(expense.id),
            expense.date.isoformat(),
            format_amount(expense.amount),
            expense.category,
            expense.description,
        )
    )


def decode(line: str) -> Expense:
    """Parse a stored line back into an ``Expense``.

    Raises ``ParseError`` when fewer than five fields are present or when the
    id, date or amount field does not parse.
    """

    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) < FIELD_COUNT:
        raise ParseError(
            f"expected {FIELD_COUNT} fields, found {len(parts)}",
            line=line,
        )

    raw_id, raw_date, raw_amount, category, description = parts[:FIELD_COUNT]
    try:
        expense_id = _parse_id(raw_id)
    except ValueError as error:
        raise ParseError(f"invalid id {raw_id!r}", line=line) from error
    try:
        occurred_on = _parse_date(raw_date)
    except ValueError as error:
        raise ParseError(f"invalid date {raw_date!r}", line=line) from error
    try:
        amount = _to_decimal(raw_amount)
    except ValueError as error:
        raise ParseError(f"invalid amount {raw_amount!r}", line=line) from error

    return Expense(
        id=expense_id,
        date=occurred_on,
        amount=amount,
        category=category,
        description=description,
    )


def _parse_id(text: str) -> int:
    if not _ID_PATTERN.fullmatch(text) or int(text) < 1:
        raise ValueError(f"ids must be positive integers: {text!r}")
    return int(text)


def _parse_date(text: str) -> date:
    # fromisoformat also takes basic and week forms on newer interpreters
    if not _DATE_PATTERN.fullmatch(text):
        raise ValueError(f"dates must use YYYY-MM-DD: {text!r}")
    return date.fromisoformat(text)


def _to_decimal(text: str) -> Decimal:
    try:
        value = Decimal(text.strip())
    except InvalidOperation as error:
        raise ValueError(f"not a decimal number: {text!r}") from error
    if not value.is_finite():
        raise ValueError(f"not a finite amount: {text!r}")
    return value


def coerce_date(value: DateInput) -> date:
    """Accept date objects, datetimes or ISO text and return a plain date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return _parse_date(value.strip())
        except ValueError as error:
            raise ValidationError(f"Dates must use YYYY-MM-DD, got {value!r}") from error
    raise ValidationError("Dates must be provided as ISO strings or date/datetime instances.")


def coerce_text(value: object, field_name: str) -> str:
    """Return ``value`` as text that fits on a single stored line."""

    text = str(value)
    if any(mark in text for mark in LINE_BREAKS):
        raise ValidationError(f"The {field_name} must not contain line breaks: {text!r}")
    return text


def coerce_amount(value: AmountInput) -> Decimal:
    """Convert numeric input to ``Decimal`` without judging its sign."""

    if isinstance(value, bool):
        raise ValidationError("Amounts must be numeric, not booleans.")
    if isinstance(value, Decimal):
        candidate = str(value)
    elif isinstance(value, (int, float, str)):
        # repr of a float is its shortest round-tripping text, so 0.1 stays 0.1
        candidate = repr(value) if isinstance(value, float) else str(value)
    else:
        raise ValidationError(f"Unsupported amount type: {type(value).__name__}")
    try:
        return _to_decimal(candidate)
    except ValueError as error:
        raise ValidationError(f"Amount is not a finite number: {value!r}") from error
