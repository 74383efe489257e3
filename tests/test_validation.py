from datetime import date
from decimal import Decimal

import pytest

from adminopt.validation import (
    InputError, InvalidAmountError, InvalidDueDateError, parse_amount, parse_due_date,
)


@pytest.mark.parametrize("text, expected", [
    ("1500", Decimal("1500")),
    ("1500.00", Decimal("1500.00")),
    (" 42.5\n", Decimal("42.5")),
    ("-10", Decimal("-10")),
    ("1e3", Decimal("1000")),
])
def test_parse_amount_accepts_numbers(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["not-a-number", "", "12,50", "NaN", "Infinity", "R100", "1e999999999999", "9e40"])
def test_parse_amount_rejects(text):
    with pytest.raises(InvalidAmountError):
        parse_amount(text)


def test_parse_due_date_iso():
    assert parse_due_date("2024-03-01") == date(2024, 3, 1)
    assert parse_due_date(" 2024-12-31 ") == date(2024, 12, 31)


@pytest.mark.parametrize("text", ["03/01/2024", "2024-3-1", "20240301", "2024-02-30", "tomorrow", ""])
def test_parse_due_date_rejects(text):
    with pytest.raises(InvalidDueDateError):
        parse_due_date(text)


def test_error_hierarchy_and_messages():
    assert issubclass(InvalidAmountError, InputError)
    assert issubclass(InvalidDueDateError, InputError)
    assert issubclass(InputError, ValueError)
    assert InvalidAmountError.message == "Invalid Amount. Please try again."
    assert InvalidDueDateError.message == "Invalid Due Date. Please try again."


def test_parse_amount_accepts_large_but_renderable():
    amount = parse_amount("1e20")
    assert f"{amount:.2f}" == "100000000000000000000.00"
