"""
Tests for the monthly report built with pandas.
"""

from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from app.core.budget_config import USD_TO_PHP
from app.services.implementation.report_service import (
    ReportService,
    build_monthly_report,
)


def at(year, month, day=15):
    return datetime(year, month, day, tzinfo=timezone.utc)


@pytest.fixture
def snapshot(make_tx):
    return [
        make_tx(1000, type="income", category="Income", date=at(2024, 4)),
        make_tx(100, category="Food & Dining", date=at(2024, 4)),
        make_tx(1000, type="income", category="Income", date=at(2024, 5)),
        make_tx(-50, category="Travel", date=at(2024, 5)),
        make_tx(200, category="Food & Dining", date=at(2024, 5)),
    ]


class TestMonthlyReport:
    """Totals, breakdown and history in display currency."""

    def test_whole_snapshot_totals(self, snapshot):
        report = build_monthly_report("user-1", snapshot)

        assert report.currency == "₱"
        assert report.total_income == pytest.approx(2000 * USD_TO_PHP)
        assert report.total_expenses == pytest.approx(350 * USD_TO_PHP)
        assert report.net == pytest.approx(1650 * USD_TO_PHP)

    def test_category_breakdown_sorted_descending(self, snapshot):
        report = build_monthly_report("user-1", snapshot)

        assert [c.category for c in report.categories] == ["Food & Dining", "Travel"]
        assert report.categories[0].amount == pytest.approx(300 * USD_TO_PHP)

    def test_month_filter(self, snapshot):
        report = build_monthly_report("user-1", snapshot, month="2024-04")

        assert report.month == "2024-04"
        assert report.total_expenses == pytest.approx(100 * USD_TO_PHP)
        assert [c.category for c in report.categories] == ["Food & Dining"]
        # history is not filtered
        assert [m.month for m in report.history] == ["2024-04", "2024-05"]

    def test_history_keeps_latest_months(self, make_tx):
        transactions = [
            make_tx(10, category="Other", date=at(2024, m)) for m in range(1, 10)
        ]

        report = build_monthly_report("user-1", transactions, history_months=6)

        assert [m.month for m in report.history] == [
            "2024-04",
            "2024-05",
            "2024-06",
            "2024-07",
            "2024-08",
            "2024-09",
        ]
        assert all(m.income == 0 for m in report.history)
        assert report.history[0].expenses == pytest.approx(10 * USD_TO_PHP)

    def test_empty_snapshot(self):
        report = build_monthly_report("user-1", [])

        assert report.total_income == 0
        assert report.categories == []
        assert report.history == []


class TestReportService:
    """Service wiring and input validation."""

    def test_reads_user_snapshot(self, repository, snapshot, make_tx):
        repository.transactions = snapshot + [
            make_tx(999, category="Travel", user_id="someone-else", date=at(2024, 5))
        ]

        report = ReportService(repository).get_monthly_report("user-1", "2024-05")

        assert report.total_expenses == pytest.approx(250 * USD_TO_PHP)

    @pytest.mark.parametrize("month", ["2024-13", "2024", "May 2024", "2024-5"])
    def test_rejects_bad_month(self, repository, month):
        with pytest.raises(HTTPException) as exc_info:
            ReportService(repository).get_monthly_report("user-1", month)

        assert exc_info.value.status_code == 400
