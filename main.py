"""
Transaction Analytics - Console Report

This script:
1. Loads settings (config/settings.yaml, overridden by environment)
2. Reads the transactions JSON file
3. Builds an in-memory TransactionAnalyzer
4. Prints the standard report to stdout

Usage:
    python main.py [path/to/transactions.json]
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file if it exists (TRANSACTIONS_FILE, LOG_LEVEL)
load_dotenv()

from config.settings import load_settings
from txn_analytics.report import build_report, format_report
from txn_analytics.transaction_analyzer import TransactionAnalyzer
from txn_analytics.transaction_loader import TransactionLoadError, load_transactions

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stdout at the given level name."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a report over a transactions JSON file.")
    parser.add_argument(
        'path',
        nargs='?',
        help="Transactions JSON file (defaults to the TRANSACTIONS_FILE setting)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the console report.

    Returns:
        Process exit code: 0 on success, 1 on configuration or load errors
    """
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        configure_logging('INFO')
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(settings.log_level)

    path = args.path or settings.transactions_file
    logger.info(f"Reading transactions from {path}")

    try:
        transactions = load_transactions(path)
    except TransactionLoadError as e:
        logger.error(f"Failed to load transactions: {e}")
        return 1

    analyzer = TransactionAnalyzer(transactions)
    print(format_report(build_report(analyzer, settings.report)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
