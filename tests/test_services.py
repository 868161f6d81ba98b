# tests/test_services.py
from __future__ import annotations

import pytest
import requests

from fakes import FakeClient
from models.transaction import TransactionRequest
from services.dashboard_service import DashboardService
from services.transaction_service import TransactionService


# ----------------------- TransactionService -----------------------


def test_get_categories_projects_names():
    client = FakeClient({
        ("GET", "/api/spending/categories"): [{"id": 1, "name": "Food"}, {"id": 2, "name": "Transport"}],
    })
    assert TransactionService(client).get_categories() == ["Food", "Transport"]


def test_add_transaction_posts_camel_case_body_and_returns_transaction():
    client = FakeClient({
        ("POST", "/api/spending/transactions"): {
            "id": 1, "amount": 50.00, "categoryName": "Food",
            "note": None, "createdAt": "2024-01-15T10:00:00Z",
        },
    })
    svc = TransactionService(client)

    tx = svc.add_transaction(TransactionRequest(amount=50.0, category_name="Food"))

    assert client.calls == [
        ("POST", "/api/spending/transactions", {"amount": 50.0, "categoryName": "Food"})
    ]
    assert tx.id == 1
    assert tx.amount == 50.0
    assert tx.category_name == "Food"
    assert tx.note is None
    assert tx.created_at == "2024-01-15T10:00:00Z"


def test_current_week_parses_every_row():
    client = FakeClient({
        ("GET", "/api/spending/current-week"): [
            {"id": 2, "amount": 10, "categoryName": "Food", "createdAt": "2024-01-16T08:00:00"},
            {"id": 1, "amount": "7.5", "categoryName": "Bus", "note": "fare", "createdAt": "2024-01-15"},
        ],
    })
    txs = TransactionService(client).get_current_week_transactions()
    assert [t.id for t in txs] == [2, 1]
    assert txs[1].amount == 7.5
    assert txs[1].note == "fare"


def test_bare_prefix_uses_root_paths():
    client = FakeClient({("GET", "/current-week"): []})
    assert TransactionService(client, prefix="").get_current_week_transactions() == []
    assert client.calls == [("GET", "/current-week", None)]


def test_transport_errors_propagate():
    err = requests.ConnectionError("down")
    client = FakeClient({("GET", "/api/spending/categories"): err})
    with pytest.raises(requests.ConnectionError) as exc_info:
        TransactionService(client).get_categories()
    assert exc_info.value is err


# ----------------------- DashboardService -----------------------


def test_dashboard_summary_maps_nested_fields():
    client = FakeClient({
        ("GET", "/api/dashboard/summary"): {
            "totalSpent": 4200,
            "trendData": {"direction": "down", "percentage": 8.3},
            "weeklyStats": {"spent": 1500, "transactions": 9, "categories": 4, "dailyAverage": 214.29},
        },
    })
    summary = DashboardService(client).get_dashboard_summary()

    assert summary.total_spent == 4200.0
    assert summary.trend_data.direction == "down"
    assert summary.trend_data.percentage == 8.3
    assert summary.weekly_stats.transactions == 9
    assert summary.weekly_stats.daily_average == 214.29


def test_weekly_trend_defaults_missing_fields():
    client = FakeClient({
        ("GET", "/api/dashboard/weekly-trend"): [
            {"weekStart": "Jan 1, 2024", "totalSpent": 900, "transactionCount": 6},
        ],
    })
    [week] = DashboardService(client).get_weekly_trend()
    assert week.week_start == "Jan 1, 2024"
    assert week.total_spent == 900.0
    assert week.week_end == ""
    assert week.average_daily == 0.0


def test_secondary_dashboard_endpoints():
    client = FakeClient({
        ("GET", "/dash/today"): {"todayTotal": 300, "todayTransactions": 2, "todayCategories": 1},
        ("GET", "/dash/current-week"): {
            "weekTotal": 1000,
            "dailyBreakdown": [{"date": "2024-01-15", "dayName": "Monday", "amount": 400, "transactionCount": 2}],
            "categoryBreakdown": [{"categoryName": "Food", "amount": 600, "percentage": 60}],
        },
        ("GET", "/dash/comparison"): {
            "thisWeekVsLast": {"current": 1000, "previous": 800, "percentageChange": 25, "trend": "up"},
            "thisMonthVsLast": {"current": 3000, "previous": 3500, "percentageChange": -14.3, "trend": "down"},
        },
    })
    svc = DashboardService(client, prefix="/dash/")

    today = svc.get_today_stats()
    week = svc.get_current_week_breakdown()
    comparison = svc.get_spending_comparison()

    assert (today.today_total, today.today_transactions, today.today_categories) == (300.0, 2, 1)
    assert week.week_total == 1000.0
    assert week.daily_breakdown[0].day_name == "Monday"
    assert week.category_breakdown[0].category_name == "Food"
    assert week.category_breakdown[0].transaction_count == 0
    assert comparison.this_week_vs_last.trend == "up"
    assert comparison.this_month_vs_last.percentage_change == -14.3
    assert [c[1] for c in client.calls] == ["/dash/today", "/dash/current-week", "/dash/comparison"]
