"""
Transaction dataclass for card transaction data.

This module provides a typed, immutable record for a single transaction
as it appears in the transactions JSON file.

Field mapping (JSON key -> attribute):
- transaction_id          -> id
- transaction_date        -> date
- transaction_amount      -> amount
- transaction_type        -> type
- transaction_description -> description
- merchant_name           -> merchant
- card_type               -> card_type
"""

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

DateLike = Union[date, str]

REQUIRED_FIELDS = (
    'transaction_id',
    'transaction_date',
    'transaction_amount',
    'transaction_type',
)


def parse_date(value: DateLike) -> date:
    """
    Convert an ISO date string (or date/datetime) into a date.

    Accepts "YYYY-MM-DD" and ISO date-time strings such as
    "2019-01-01T10:15:00"; the time part is dropped.

    Raises:
        ValueError: If the string is not an ISO date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if len(text) > 10:
        return datetime.fromisoformat(text).date()
    return date.fromisoformat(text)


def parse_amount(value: Any) -> Decimal:
    """
    Convert a JSON amount into a Decimal.

    Floats go through str() so 0.1 stays Decimal('0.1').

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")

    # NaN and Infinity cannot be ordered or written as JSON numbers
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return result


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single card transaction.

    Attributes:
        id: Transaction identifier (always a string)
        date: Calendar date of the transaction
        amount: Signed amount, no currency tracked
        type: "debit", "credit" or any other tag from the source data
        description: Free-text description
        merchant: Merchant name
        card_type: Card brand, carried through but not queried

    Example:
        >>> tx = Transaction.from_dict({
        ...     "transaction_id": "1",
        ...     "transaction_date": "2019-01-01",
        ...     "transaction_amount": 100,
        ...     "transaction_type": "debit",
        ...     "transaction_description": "Groceries",
        ...     "merchant_name": "SuperMart",
        ...     "card_type": "Visa",
        ... })
        >>> tx.month
        1
        >>> tx.amount
        Decimal('100')
    """

    id: str
    date: date
    amount: Decimal
    type: str
    description: str = ""
    merchant: str = ""
    card_type: str = ""

    # ============================================================
    # Computed Properties
    # ============================================================

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        """Calendar month of the transaction, 1-12."""
        return self.date.month

    @property
    def is_debit(self) -> bool:
        return self.type == "debit"

    @property
    def is_credit(self) -> bool:
        return self.type == "credit"

    # ============================================================
    # Conversion Methods
    # ============================================================

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert back to the JSON input shape.

        The date is written as an ISO string; the amount stays a Decimal.
        """
        return {
            "transaction_id": self.id,
            "transaction_date": self.date.isoformat(),
            "transaction_amount": self.amount,
            "transaction_type": self.type,
            "transaction_description": self.description,
            "merchant_name": self.merchant,
            "card_type": self.card_type,
        }

    def to_json(self) -> str:
        """Serialize to a JSON object string, amount as a JSON number."""
        data = self.to_dict()
        data["transaction_amount"] = _decimal_to_number(self.amount)
        return json.dumps(data, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        """
        Create a Transaction from one JSON input object.

        Numeric ids are coerced to strings. Description, merchant and
        card type default to "" when absent.

        Args:
            data: Dictionary keyed by the JSON field names

        Returns:
            Transaction instance

        Raises:
            ValueError: If required fields are missing, or the date or
                amount cannot be parsed
        """
        missing = [f for f in REQUIRED_FIELDS if data.get(f) is None]

        if missing:
            raise ValueError(f"Missing required fields: {missing}")

        return cls(
            id=str(data['transaction_id']),
            date=parse_date(data['transaction_date']),
            amount=parse_amount(data['transaction_amount']),
            type=data['transaction_type'],
            description=data.get('transaction_description', ''),
            merchant=data.get('merchant_name', ''),
            card_type=data.get('card_type', ''),
        )


def _decimal_to_number(value: Decimal) -> Union[int, float]:
    # Integral amounts stay ints so 100 is not written as 100.0
    if value.is_finite() and value == value.to_integral_value():
        return int(value)
    return float(value)
