from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Union

DEFAULT_CURRENCY = "R"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DUE_DATE_FORMAT = "%Y-%m-%d"


def _money(amount: Decimal, currency: str) -> str:
    return f"{currency}{amount:.2f}"


@dataclass(frozen=True)
class Activity:
    id: int
    description: str
    date: datetime   # when it was tracked

    def describe(self, currency: str = DEFAULT_CURRENCY) -> str:
        return (
            f"Activity ID: {self.id}, "
            f"Description: {self.description}, "
            f"Date: {self.date.strftime(TIMESTAMP_FORMAT)}"
        )


@dataclass(frozen=True)
class Expense:
    id: int
    name: str
    description: str
    amount: Decimal
    date: datetime      # creation time
    due_date: date      # supplied by the user

    def describe(self, currency: str = DEFAULT_CURRENCY) -> str:
        return (
            f"Expense ID: {self.id}, "
            f"Name: {self.name}, "
            f"Description: {self.description}, "
            f"Amount: {_money(self.amount, currency)}, "
            f"Date: {self.date.strftime(TIMESTAMP_FORMAT)}, "
            f"Due Date: {self.due_date.strftime(DUE_DATE_FORMAT)}"
        )


# An invoice carries no creation date
@dataclass(frozen=True)
class Invoice:
    id: int
    client: str
    description: str
    amount: Decimal
    due_date: date

    def describe(self, currency: str = DEFAULT_CURRENCY) -> str:
        return (
            f"Invoice ID: {self.id}, "
            f"Client: {self.client}, "
            f"Description: {self.description}, "
            f"Amount: {_money(self.amount, currency)}, "
            f"Due Date: {self.due_date.strftime(DUE_DATE_FORMAT)}"
        )


Record = Union[Activity, Expense, Invoice]
