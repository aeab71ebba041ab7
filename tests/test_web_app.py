"""Mini README: Tests for the FastAPI control panel.

Exercises the JSON API for adding, listing, and deleting transactions, the
summary and chart endpoints, both exports, and the dashboard's toast for
unreadable saved data.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from expensetracker.configuration import TrackerSettings
from expensetracker.interface import create_application
from expensetracker.storage import LocalStorage
from expensetracker.transactions import (
    INVALID_INPUT_MESSAGE,
    LOAD_ERROR_MESSAGE,
    TransactionStore,
)


@pytest.fixture
def settings(tmp_path: Path) -> TrackerSettings:
    return TrackerSettings(data_directory=tmp_path, currency_symbol="₦")


@pytest.fixture
def client(settings: TrackerSettings) -> TestClient:
    store = TransactionStore(
        LocalStorage(settings.storage_path),
        clock=lambda: datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc),
    )
    return TestClient(create_application(settings=settings, store=store))


def _add(client: TestClient, description: str, amount: str, transaction_type: str, category: str = "Food"):
    return client.post(
        "/api/transactions",
        data={
            "description": description,
            "amount": amount,
            "category": category,
            "transaction_type": transaction_type,
        },
    )


def test_add_expense_returns_negative_amount_and_toast(client: TestClient) -> None:
    response = _add(client, "Groceries", "50", "expense")

    assert response.status_code == 201
    payload = response.json()
    assert payload["transaction"]["amount"] == pytest.approx(-50.0)
    assert payload["transaction"]["type"] == "expense"
    assert payload["toast"] == "Expense added successfully!"


def test_invalid_submission_is_rejected_with_toast(client: TestClient) -> None:
    response = _add(client, "", "abc", "expense")

    assert response.status_code == 400
    assert response.json()["detail"] == INVALID_INPUT_MESSAGE
    assert client.get("/api/transactions").json()["transactions"] == []


def test_list_filters_and_sorts(client: TestClient) -> None:
    _add(client, "Salary", "900", "income", category="General")
    _add(client, "Rent", "1200", "expense", category="Bills")
    _add(client, "Bonus", "50", "income", category="General")

    income = client.get("/api/transactions", params={"type_filter": "income"}).json()
    by_amount = client.get("/api/transactions", params={"sort_by": "amount"}).json()

    assert [entry["description"] for entry in income["transactions"]] == ["Bonus", "Salary"]
    assert [entry["description"] for entry in by_amount["transactions"]] == [
        "Rent",
        "Salary",
        "Bonus",
    ]
    assert client.get("/api/transactions", params={"sort_by": "size"}).status_code == 422


def test_delete_requires_confirmation(client: TestClient) -> None:
    kept = _add(client, "Coffee", "3", "expense").json()["transaction"]
    doomed = _add(client, "Taxi", "12", "expense").json()["transaction"]

    unconfirmed = client.post(f"/api/transactions/{doomed['id']}/delete")
    assert unconfirmed.status_code == 409

    confirmed = client.post(f"/api/transactions/{doomed['id']}/delete", data={"confirm": "true"})
    assert confirmed.status_code == 200
    assert confirmed.json() == {"deleted": doomed["id"], "toast": "Transaction deleted"}

    remaining = client.get("/api/transactions").json()["transactions"]
    assert [entry["id"] for entry in remaining] == [kept["id"]]

    missing = client.post(f"/api/transactions/{doomed['id']}/delete", data={"confirm": "true"})
    assert missing.status_code == 404


def test_summary_and_chart(client: TestClient) -> None:
    _add(client, "Salary", "1000", "income", category="General")
    _add(client, "Lunch", "20", "expense", category="Food")
    _add(client, "Bus", "5", "expense", category="Transport")

    summary = client.get("/api/summary").json()
    chart = client.get("/api/chart").json()

    assert summary["income"] == pytest.approx(1000.0)
    assert summary["expenses"] == pytest.approx(-25.0)
    assert summary["balance"] == pytest.approx(975.0)
    assert summary["categories"] == {"Transport": 5.0, "Food": 20.0}
    assert chart["labels"] == ["Transport", "Food"]
    assert len(chart["colours"]) == 2


def test_exports(client: TestClient) -> None:
    _add(client, "Lunch", "20", "expense")

    csv_response = client.get("/export/csv")
    report_response = client.get("/export/report")

    assert csv_response.status_code == 200
    assert csv_response.headers["content-type"].startswith("text/csv")
    assert 'filename="transactions.csv"' in csv_response.headers["content-disposition"]
    assert csv_response.text.startswith("Description,Amount,Category,Type,Date\nLunch,20,Food,Expense,")
    assert "Expense Tracker Report" in report_response.text
    assert "window.print()" in report_response.text


def test_dashboard_renders_transactions(client: TestClient) -> None:
    _add(client, "Cinema tickets", "18", "expense", category="Entertainment")

    response = client.get("/", params={"type_filter": "expenses", "date_range": "all"})

    assert response.status_code == 200
    assert "Cinema tickets" in response.text
    assert "Expenses by Category" in response.text


def test_dashboard_reports_load_error_once(settings: TrackerSettings) -> None:
    LocalStorage(settings.storage_path).set_item("transactions", "[broken")
    client = TestClient(create_application(settings=settings))

    first = client.get("/")
    second = client.get("/")

    assert LOAD_ERROR_MESSAGE in first.text
    assert LOAD_ERROR_MESSAGE not in second.text
    assert "No transactions found." in first.text
