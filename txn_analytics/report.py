"""
Console report over a TransactionAnalyzer.

Runs the standard set of queries and renders the results as
"label: value" lines for manual inspection.
"""

import logging
from typing import Any, List, Optional, Tuple, Union

from config.settings import ReportSettings
from txn_analytics.models import Transaction
from txn_analytics.transaction_analyzer import TransactionAnalyzer

logger = logging.getLogger(__name__)

ReportEntry = Tuple[str, Any]

NOT_FOUND = "not found"
NO_MONTH = "(none)"


def build_report(analyzer: TransactionAnalyzer, settings: ReportSettings) -> List[ReportEntry]:
    """
    Run every report query against the analyzer.

    Args:
        analyzer: Analyzer holding the loaded transactions
        settings: Dates, month and id used by the parameterized queries

    Returns:
        List of (label, result) tuples in display order
    """
    logger.debug(f"Building report over {len(analyzer)} transaction(s)")

    return [
        ("Unique transaction types", analyzer.get_unique_transaction_types()),
        ("Total amount", analyzer.calculate_total_amount()),
        (
            f"Total amount for {settings.month:02d}/{settings.year}",
            analyzer.calculate_total_amount_by_date(settings.year, settings.month),
        ),
        ("Debit transactions", analyzer.get_transactions_by_type('debit')),
        (
            f"Transactions from {settings.range_start} to {settings.range_end}",
            analyzer.get_transactions_in_date_range(settings.range_start, settings.range_end),
        ),
        ("Average transaction amount", analyzer.calculate_average_transaction_amount()),
        ("Total debit amount", analyzer.calculate_total_debit_amount()),
        ("Month with most transactions", _month_or_none(analyzer.find_most_transactions_month())),
        ("Month with most debit transactions", _month_or_none(analyzer.find_most_debit_transactions_month())),
        ("Most common transaction type", analyzer.most_transaction_types()),
        (
            f"Transactions before {settings.before_date}",
            analyzer.get_transactions_before_date(settings.before_date),
        ),
        (
            f"Transaction with ID {settings.lookup_id}",
            analyzer.find_transaction_by_id(settings.lookup_id),
        ),
        ("Transaction descriptions", analyzer.map_transaction_descriptions()),
    ]


def _month_or_none(month: Optional[int]) -> Union[int, str]:
    return NO_MONTH if month is None else month


def _format_value(value: Any) -> str:
    if value is None:
        return NOT_FOUND
    if isinstance(value, Transaction):
        return value.to_json()
    if isinstance(value, list):
        if not value:
            return "(none)"
        return "".join(f"\n  - {_format_value(item)}" for item in value)
    return str(value)


def format_report(entries: List[ReportEntry]) -> str:
    """Render report entries as one "label: value" line each."""
    return "\n".join(f"{label}: {_format_value(value)}" for label, value in entries)
