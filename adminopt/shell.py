"""Interactive menu for the administration tool.

The shell shows the menu, reads a selection and then either collects the
fields for a new record, schedules a report or exits. Input lines are read
in a worker thread so that a scheduled report can print while the shell is
waiting on the user.
"""

import asyncio
import sys
from typing import Awaitable, Callable, Dict, Optional, TextIO

from pydantic import ValidationError

from adminopt.config import Settings, get_settings
from adminopt.console import ConsolePrinter
from adminopt.domain import Record
from adminopt.events import ACTIVITY_TRACKED, EXPENSE_ADDED, INVOICE_CREATED
from adminopt.logging_config import configure_logging, get_logger
from adminopt.manager import AdministrationManager
from adminopt.validation import InputError, parse_amount, parse_due_date

logger = get_logger(__name__)

MENU_TITLE = "--- Administration Optimization ---"
MENU_OPTIONS = (
    "1. Track Activity",
    "2. Add Expense",
    "3. Create Invoice",
    "4. Generate Reports",
    "5. Exit",
)

ECHO_LABELS = {
    ACTIVITY_TRACKED: "Activity tracked",
    EXPENSE_ADDED: "Expense added",
    INVOICE_CREATED: "Invoice created",
}


class EndOfInput(Exception):
    pass


def echo_listener(printer: ConsolePrinter, label: str, currency: str) -> Callable[[Record], None]:
    def echo(record: Record) -> None:
        printer.line(f"Event: {label} - {record.describe(currency)}")
    return echo


class Shell:
    def __init__(self, manager: AdministrationManager, stdin: Optional[TextIO] = None,
                 printer: Optional[ConsolePrinter] = None, echo: bool = True):
        self.manager = manager
        self.printer = printer or manager.printer
        self._stdin = stdin
        self._actions: Dict[str, Callable[[], Awaitable[bool]]] = {
            "1": self.track_activity,
            "2": self.add_expense,
            "3": self.create_invoice,
            "4": self.generate_reports,
            "5": self.exit,
        }
        if echo:
            for kind, label in ECHO_LABELS.items():
                manager.events.subscribe(kind, echo_listener(self.printer, label, manager.currency))

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    async def ask(self, prompt: str) -> str:
        self.printer.prompt(prompt)
        line = await asyncio.to_thread(self.stdin.readline)
        if line == "":
            raise EndOfInput()
        return line.rstrip("\r\n")

    def show_menu(self) -> None:
        self.printer.line()
        self.printer.line(MENU_TITLE)
        self.printer.lines(MENU_OPTIONS)

    async def run(self) -> int:
        logger.info("shell_started")
        running = True
        while running:
            self.show_menu()
            try:
                choice = (await self.ask("Select an option: ")).strip()
                action = self._actions.get(choice)
                if action is None:
                    self.printer.error("Invalid option. Please try again.", choice=choice)
                    continue
                running = await action()
            except EndOfInput:
                self.printer.line()
                running = await self.exit()

        await self.manager.drain_reports()
        logger.info("shell_stopped")
        return 0

    async def track_activity(self) -> bool:
        description = await self.ask("Enter Description: ")
        self.manager.track_activity(self.manager.factory.activity(description))
        return True

    async def add_expense(self) -> bool:
        name = await self.ask("Enter Name: ")
        description = await self.ask("Enter Description: ")
        try:
            amount = parse_amount(await self.ask("Enter Amount: "))
            due_date = parse_due_date(await self.ask("Enter Due Date (yyyy-mm-dd): "))
        except InputError as e:
            self.printer.error(e.message, reason=str(e))
            return True
        self.manager.add_expense(self.manager.factory.expense(name, description, amount, due_date))
        return True

    async def create_invoice(self) -> bool:
        client = await self.ask("Enter Client Name: ")
        description = await self.ask("Enter Description: ")
        try:
            amount = parse_amount(await self.ask("Enter Amount: "))
            due_date = parse_due_date(await self.ask("Enter Due Date (yyyy-mm-dd): "))
        except InputError as e:
            self.printer.error(e.message, reason=str(e))
            return True
        self.manager.create_invoice(self.manager.factory.invoice(client, description, amount, due_date))
        return True

    async def generate_reports(self) -> bool:
        self.manager.generate_reports()
        return True

    async def exit(self) -> bool:
        self.printer.line("Exiting program...")
        return False


def main() -> int:
    rejected = None
    try:
        settings = get_settings()
    except ValidationError as e:
        # bad overrides never stop the tool; run on the built-in defaults
        settings, rejected = Settings.model_construct(), e
    configure_logging(settings.log_level, settings.log_json)
    if rejected is not None:
        logger.warning("settings_rejected", error=str(rejected))

    manager = AdministrationManager(
        report_delay=settings.report_delay_seconds,
        currency=settings.currency_symbol,
    )
    return asyncio.run(Shell(manager).run())
