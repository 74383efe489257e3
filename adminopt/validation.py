import re
from datetime import date
from decimal import Decimal, InvalidOperation

__all__ = ['InputError', 'InvalidAmountError', 'InvalidDueDateError', 'parse_amount', 'parse_due_date']

CENT = Decimal("0.01")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InputError(ValueError):
    """A field typed at the prompt could not be parsed."""

    message = "Invalid input. Please try again."


class InvalidAmountError(InputError):
    message = "Invalid Amount. Please try again."


class InvalidDueDateError(InputError):
    message = "Invalid Due Date. Please try again."


def parse_amount(text: str) -> Decimal:
    """Parse a currency amount such as ``1500`` or ``1500.00``.

    NaN and infinities parse as Decimals but are not real amounts, so they
    are rejected along with anything non-numeric. So is any amount too large
    to be rounded to cents, e.g. ``1e999999999999``.
    """
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise InvalidAmountError(f"not a number: {text!r}") from None
    if not amount.is_finite():
        raise InvalidAmountError(f"not a finite amount: {text!r}")
    try:
        amount.quantize(CENT)
    except InvalidOperation:
        raise InvalidAmountError(f"amount out of range: {text!r}") from None
    return amount


def parse_due_date(text: str) -> date:
    """Parse a strict ISO ``YYYY-MM-DD`` date."""
    value = text.strip()
    if not _ISO_DATE.match(value):
        raise InvalidDueDateError(f"expected YYYY-MM-DD, got {text!r}")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidDueDateError(f"no such date: {text!r}") from None
