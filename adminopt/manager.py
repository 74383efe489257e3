import asyncio
from typing import List, Optional, Set, Tuple

from adminopt.async_reports import Snapshot, delayed_report, render_report
from adminopt.console import ConsolePrinter
from adminopt.domain import DEFAULT_CURRENCY, Activity, Expense, Invoice
from adminopt.events import ACTIVITY_TRACKED, EXPENSE_ADDED, INVOICE_CREATED, EventBus
from adminopt.factory import RecordFactory
from adminopt.logging_config import get_logger

logger = get_logger(__name__)


class AdministrationManager:
    """Owns the activity, expense and invoice collections.

    Each add appends the record, publishes it on ``events`` and then prints a
    confirmation, so listener output always precedes the confirmation line.
    Collections are only touched from the event-loop thread; the background
    report reads them in a single synchronous snapshot.
    """

    def __init__(self, printer: Optional[ConsolePrinter] = None, events: Optional[EventBus] = None,
                 factory: Optional[RecordFactory] = None, report_delay: float = 2.0,
                 currency: str = DEFAULT_CURRENCY):
        self.printer = printer or ConsolePrinter()
        self.events = events or EventBus()
        self.factory = factory or RecordFactory()
        self.report_delay = report_delay
        self.currency = currency
        self._activities: List[Activity] = []
        self._expenses: List[Expense] = []
        self._invoices: List[Invoice] = []
        self._pending: Set[asyncio.Task] = set()

    @property
    def activities(self) -> Tuple[Activity, ...]:
        return tuple(self._activities)

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def invoices(self) -> Tuple[Invoice, ...]:
        return tuple(self._invoices)

    def track_activity(self, activity: Activity) -> None:
        self._activities.append(activity)
        logger.info("record_added", kind=ACTIVITY_TRACKED, id=activity.id)
        self.events.publish(ACTIVITY_TRACKED, activity)
        self.printer.line("Activity has been tracked successfully.")

    def add_expense(self, expense: Expense) -> None:
        self._expenses.append(expense)
        logger.info("record_added", kind=EXPENSE_ADDED, id=expense.id)
        self.events.publish(EXPENSE_ADDED, expense)
        self.printer.line("Expense added successfully.")

    def create_invoice(self, invoice: Invoice) -> None:
        self._invoices.append(invoice)
        logger.info("record_added", kind=INVOICE_CREATED, id=invoice.id)
        self.events.publish(INVOICE_CREATED, invoice)
        self.printer.line("Invoice created successfully.")

    def snapshot(self) -> Snapshot:
        return self.activities, self.expenses, self.invoices

    def render_report(self) -> List[str]:
        return render_report(*self.snapshot(), currency=self.currency)

    def generate_reports(self) -> "asyncio.Task[List[str]]":
        """Schedule the report on the running loop and return immediately.

        Must be called from inside a running event loop.
        """
        loop = asyncio.get_running_loop()
        self.printer.line("Generating reports...")
        task = loop.create_task(delayed_report(self.snapshot, self.printer, self.report_delay, self.currency))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.info("report_scheduled", delay=self.report_delay)
        return task

    @property
    def pending_reports(self) -> Set[asyncio.Task]:
        return set(self._pending)

    async def drain_reports(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending))
