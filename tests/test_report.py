"""
Unit tests for the console report.

Run with: pytest tests/test_report.py -v
"""

import sys
from pathlib import Path
from datetime import date
from decimal import Decimal

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import ReportSettings
from txn_analytics.models import Transaction
from txn_analytics.report import NO_MONTH, NOT_FOUND, build_report, format_report
from txn_analytics.transaction_analyzer import TransactionAnalyzer


@pytest.fixture
def analyzer():
    return TransactionAnalyzer([
        Transaction(id="1", date=date(2019, 1, 1), amount=Decimal("100"), type="debit",
                    description="Groceries", merchant="SuperMart", card_type="Visa"),
        Transaction(id="2", date=date(2019, 1, 2), amount=Decimal("50"), type="credit",
                    description="Refund", merchant="OnlineShop", card_type="MasterCard"),
        Transaction(id="3", date=date(2018, 12, 30), amount=Decimal("30"), type="debit",
                    description="Coffee", merchant="Cafe", card_type="Visa"),
    ])


class TestBuildReport:
    """Tests for build_report."""

    def test_entries_in_display_order(self, analyzer):
        entries = build_report(analyzer, ReportSettings())
        labels = [label for label, _ in entries]

        assert len(entries) == 13
        assert labels[0] == "Unique transaction types"
        assert labels[2] == "Total amount for 01/2019"
        assert labels[-1] == "Transaction descriptions"

    def test_values(self, analyzer):
        results = dict(build_report(analyzer, ReportSettings()))

        assert results["Unique transaction types"] == ["debit", "credit"]
        assert results["Total amount"] == Decimal("180")
        assert results["Total amount for 01/2019"] == Decimal("150")
        assert [t.id for t in results["Debit transactions"]] == ["1", "3"]
        assert [t.id for t in results["Transactions from 2019-01-01 to 2019-01-02"]] == ["1", "2"]
        assert results["Average transaction amount"] == Decimal("60")
        assert results["Total debit amount"] == Decimal("130")
        assert results["Month with most transactions"] == 1
        assert results["Month with most debit transactions"] == 1
        assert results["Most common transaction type"] == "debit"
        assert [t.id for t in results["Transactions before 2019-01-01"]] == ["3"]
        assert results["Transaction with ID 2"].merchant == "OnlineShop"
        assert results["Transaction descriptions"] == ["Groceries", "Refund", "Coffee"]

    def test_uses_report_settings(self, analyzer):
        settings = ReportSettings(year=2018, month=12, lookup_id="99")
        results = dict(build_report(analyzer, settings))

        assert results["Total amount for 12/2018"] == Decimal("30")
        assert results["Transaction with ID 99"] is None

    def test_empty_analyzer(self):
        results = dict(build_report(TransactionAnalyzer(), ReportSettings()))

        assert results["Total amount"] == Decimal("0")
        assert results["Average transaction amount"] == Decimal("0")
        assert results["Month with most transactions"] == NO_MONTH
        assert results["Month with most debit transactions"] == NO_MONTH
        assert results["Most common transaction type"] == "equal"


class TestFormatReport:
    """Tests for format_report."""

    def test_scalar_line(self):
        assert format_report([("Total amount", Decimal("150"))]) == "Total amount: 150"

    def test_missing_month_renders_none(self):
        """Test that an empty busiest-month result does not read as a failed lookup."""
        entries = build_report(TransactionAnalyzer(), ReportSettings())
        text = format_report(entries)

        assert "Month with most transactions: (none)" in text
        assert "Month with most debit transactions: (none)" in text
        assert "Month with most transactions: not found" not in text

    def test_none_renders_not_found(self):
        assert format_report([("Transaction with ID 9", None)]) == f"Transaction with ID 9: {NOT_FOUND}"

    def test_empty_list(self):
        assert format_report([("Debit transactions", [])]) == "Debit transactions: (none)"

    def test_list_items_on_own_lines(self):
        text = format_report([("Types", ["debit", "credit"])])
        assert text == "Types: \n  - debit\n  - credit"

    def test_transaction_renders_as_json(self, analyzer):
        tx = analyzer.find_transaction_by_id("1")
        text = format_report([("Transaction", tx)])
        assert text == f"Transaction: {tx.to_json()}"
        assert '"merchant_name": "SuperMart"' in text
