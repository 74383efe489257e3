import asyncio
from typing import Callable, List, Sequence, Tuple

from adminopt.console import ConsolePrinter
from adminopt.domain import DEFAULT_CURRENCY, Activity, Expense, Invoice, Record
from adminopt.logging_config import get_logger

logger = get_logger(__name__)

REPORT_SECTIONS = ("Activities", "Expenses", "Invoices")

Snapshot = Tuple[Sequence[Activity], Sequence[Expense], Sequence[Invoice]]


def section_lines(title: str, records: Sequence[Record], currency: str = DEFAULT_CURRENCY) -> List[str]:
    """A blank separator, the section header, then one line per record in insertion order."""
    return ["", f"{title} Report:"] + [r.describe(currency) for r in records]


def render_report(activities: Sequence[Activity], expenses: Sequence[Expense],
                  invoices: Sequence[Invoice], currency: str = DEFAULT_CURRENCY) -> List[str]:
    lines: List[str] = []
    for title, records in zip(REPORT_SECTIONS, (activities, expenses, invoices)):
        lines.extend(section_lines(title, records, currency))
    return lines


async def delayed_report(snapshot: Callable[[], Snapshot], printer: ConsolePrinter,
                         delay: float, currency: str = DEFAULT_CURRENCY) -> List[str]:
    """Wait ``delay`` seconds, then print the three report sections.

    The collections are snapshotted once, after the delay, so the report
    reflects every record added before it fires. The sections are built
    concurrently from that snapshot and printed in fixed order.
    """
    await asyncio.sleep(delay)
    collections = snapshot()

    async def build(title: str, records: Sequence[Record]) -> List[str]:
        await asyncio.sleep(0)  # cooperate
        return section_lines(title, records, currency)

    sections = await asyncio.gather(*(build(t, r) for t, r in zip(REPORT_SECTIONS, collections)))
    lines = [line for section in sections for line in section]
    printer.lines(lines)

    logger.info(
        "report_printed",
        activities=len(collections[0]),
        expenses=len(collections[1]),
        invoices=len(collections[2]),
    )
    return lines
