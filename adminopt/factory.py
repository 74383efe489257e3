from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Optional

from adminopt.domain import Activity, Expense, Invoice


class IdSequence:
    """Monotonic identifier source for one record type, starting at 1."""

    def __init__(self, start: int = 1):
        self._next = start

    @property
    def peek(self) -> int:
        return self._next

    def next_id(self) -> int:
        value = self._next
        self._next += 1
        return value


class RecordFactory:
    """Builds records, drawing identifiers from one sequence per record type.

    clock: zero-argument callable returning the creation timestamp (defaults to datetime.now)
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now
        self.activity_ids = IdSequence()
        self.expense_ids = IdSequence()
        self.invoice_ids = IdSequence()

    def activity(self, description: str, when: Optional[datetime] = None) -> Activity:
        return Activity(
            id=self.activity_ids.next_id(),
            description=description,
            date=when if when is not None else self.clock(),
        )

    def expense(self, name: str, description: str, amount: Decimal, due_date: date) -> Expense:
        return Expense(
            id=self.expense_ids.next_id(),
            name=name,
            description=description,
            amount=amount,
            date=self.clock(),
            due_date=due_date,
        )

    def invoice(self, client: str, description: str, amount: Decimal, due_date: date) -> Invoice:
        return Invoice(
            id=self.invoice_ids.next_id(),
            client=client,
            description=description,
            amount=amount,
            due_date=due_date,
        )
