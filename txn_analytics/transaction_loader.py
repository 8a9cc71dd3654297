"""
Loader for the transactions JSON file.

This module reads a JSON array of transaction objects from disk and
turns it into Transaction records. Reading is all-or-nothing: any
malformed record fails the whole load.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Union

from txn_analytics.models import Transaction

logger = logging.getLogger(__name__)


class TransactionLoadError(Exception):
    """Error raised when the transactions file cannot be loaded."""
    pass


def load_transaction_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read the raw transaction objects from a JSON file.

    Numbers with a fractional part are parsed straight to Decimal.

    Args:
        path: Path to a file holding a JSON array of objects

    Returns:
        List of dictionaries keyed by the JSON field names

    Raises:
        TransactionLoadError: If the file is missing, is not valid JSON,
            or is not an array of objects
    """
    file_path = Path(path)

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f, parse_float=Decimal)
    except FileNotFoundError as e:
        raise TransactionLoadError(f"Transactions file not found: {file_path}") from e
    except json.JSONDecodeError as e:
        raise TransactionLoadError(f"Invalid JSON in {file_path.name}: {e}") from e

    if not isinstance(data, list):
        raise TransactionLoadError(
            f"Expected a JSON array in {file_path.name}, got {type(data).__name__}"
        )

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise TransactionLoadError(
                f"Record {index} in {file_path.name} is not an object"
            )

    logger.debug(f"Read {len(data)} raw records from {file_path}")
    return data


def load_transactions(path: Union[str, Path]) -> List[Transaction]:
    """
    Load and parse every transaction in a JSON file.

    Args:
        path: Path to the transactions JSON file

    Returns:
        Transactions in file order

    Raises:
        TransactionLoadError: If the file cannot be read or any record
            is missing fields or has an unparseable date or amount
    """
    file_path = Path(path)
    records = load_transaction_records(file_path)

    transactions = []
    for index, record in enumerate(records):
        try:
            transactions.append(Transaction.from_dict(record))
        except ValueError as e:
            raise TransactionLoadError(
                f"Invalid record {index} in {file_path.name}: {e}"
            ) from e

    logger.info(f"Loaded {len(transactions)} transaction(s) from {file_path.name}")
    return transactions
