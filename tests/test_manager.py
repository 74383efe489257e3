from datetime import date, datetime
from decimal import Decimal

import pytest

from adminopt.events import ACTIVITY_TRACKED, EXPENSE_ADDED, INVOICE_CREATED
from adminopt.factory import RecordFactory
from adminopt.manager import AdministrationManager

NOW = datetime(2024, 2, 10, 9, 30, 0)


def make_manager(**kwargs):
    return AdministrationManager(factory=RecordFactory(clock=lambda: NOW), **kwargs)


def test_track_activity_appends_and_confirms(capsys):
    m = make_manager()
    for i in range(4):
        m.track_activity(m.factory.activity(f"job {i}"))

    assert len(m.activities) == 4
    assert [a.id for a in m.activities] == [1, 2, 3, 4]
    out = capsys.readouterr().out.splitlines()
    assert out == ["Activity has been tracked successfully."] * 4


def test_add_expense_and_create_invoice_confirmations(capsys):
    m = make_manager()
    m.add_expense(m.factory.expense("Rent", "Office", Decimal("1500"), date(2024, 3, 1)))
    m.create_invoice(m.factory.invoice("Acme", "Consulting", Decimal("99"), date(2024, 4, 1)))

    assert capsys.readouterr().out.splitlines() == [
        "Expense added successfully.",
        "Invoice created successfully.",
    ]
    assert len(m.expenses) == 1
    assert len(m.invoices) == 1
    assert m.activities == ()


def test_collections_are_read_only_snapshots():
    m = make_manager()
    m.track_activity(m.factory.activity("a"))
    snapshot = m.activities
    m.track_activity(m.factory.activity("b"))
    assert len(snapshot) == 1
    assert isinstance(m.activities, tuple)


def test_listener_runs_before_confirmation(capsys):
    m = make_manager()
    m.events.subscribe(EXPENSE_ADDED, lambda r: print(f"listener saw {r.id}"))

    m.add_expense(m.factory.expense("Rent", "Office", Decimal("1500"), date(2024, 3, 1)))

    assert capsys.readouterr().out.splitlines() == [
        "listener saw 1",
        "Expense added successfully.",
    ]


def test_listener_sees_record_already_stored():
    m = make_manager()
    seen = []
    m.events.subscribe(INVOICE_CREATED, lambda r: seen.append(len(m.invoices)))
    m.create_invoice(m.factory.invoice("Acme", "Consulting", Decimal("1"), date(2024, 4, 1)))
    assert seen == [1]


def test_each_add_publishes_its_own_kind():
    m = make_manager()
    kinds = []
    for kind in (ACTIVITY_TRACKED, EXPENSE_ADDED, INVOICE_CREATED):
        m.events.subscribe(kind, lambda r, kind=kind: kinds.append(kind))

    m.create_invoice(m.factory.invoice("Acme", "x", Decimal("1"), date(2024, 4, 1)))
    m.track_activity(m.factory.activity("y"))
    m.add_expense(m.factory.expense("n", "d", Decimal("2"), date(2024, 4, 2)))

    assert kinds == [INVOICE_CREATED, ACTIVITY_TRACKED, EXPENSE_ADDED]


def test_failing_listener_propagates(capsys):
    m = make_manager()

    def boom(record):
        raise RuntimeError("nope")

    m.events.subscribe(ACTIVITY_TRACKED, boom)
    with pytest.raises(RuntimeError):
        m.track_activity(m.factory.activity("x"))
    assert len(m.activities) == 1
    assert "tracked successfully" not in capsys.readouterr().out


def test_render_report_sections_and_counts():
    m = make_manager()
    m.track_activity(m.factory.activity("Meeting"))
    m.add_expense(m.factory.expense("Rent", "Office", Decimal("1500"), date(2024, 3, 1)))
    m.add_expense(m.factory.expense("Power", "Electricity", Decimal("320.75"), date(2024, 3, 5)))

    lines = m.render_report()

    headers = [i for i, line in enumerate(lines) if line.endswith("Report:")]
    assert [lines[i] for i in headers] == ["Activities Report:", "Expenses Report:", "Invoices Report:"]

    activity_lines = lines[headers[0] + 1:headers[1]]
    expense_lines = lines[headers[1] + 1:headers[2]]
    invoice_lines = lines[headers[2] + 1:]

    assert [line for line in activity_lines if line] == [m.activities[0].describe()]
    assert [line for line in expense_lines if line] == [e.describe() for e in m.expenses]
    assert [line for line in invoice_lines if line] == []


def test_render_report_uses_manager_currency():
    m = make_manager(currency="$")
    m.create_invoice(m.factory.invoice("Acme", "x", Decimal("5"), date(2024, 4, 1)))
    assert any("Amount: $5.00" in line for line in m.render_report())


def test_generate_reports_requires_running_loop():
    with pytest.raises(RuntimeError):
        make_manager().generate_reports()
