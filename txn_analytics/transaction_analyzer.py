"""
In-memory analyzer over a list of transactions.

Every query performs a fresh linear scan over the current list; nothing
is cached between calls. The only mutation is add_transaction().
"""

import logging
from collections import Counter
from decimal import Decimal
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from txn_analytics.models import Transaction, parse_amount, parse_date
from txn_analytics.models.transaction import DateLike

logger = logging.getLogger(__name__)

AmountLike = Union[Decimal, int, float, str]

MONTHS = range(1, 13)


class TransactionAnalyzer:
    """
    Ordered store of transactions with filtering and aggregation queries.

    Insertion order is preserved and is the only implicit ordering.
    Records are not validated here; see transaction_loader for parsing.

    Example:
        >>> analyzer = TransactionAnalyzer.from_records(records)
        >>> analyzer.calculate_total_amount()
        Decimal('150')
        >>> analyzer.most_transaction_types()
        'equal'
    """

    def __init__(self, transactions: Iterable[Union[Transaction, Dict[str, Any]]] = ()):
        """
        Initialize the analyzer.

        Args:
            transactions: Transaction objects, or raw dicts keyed by the
                JSON field names (converted with Transaction.from_dict)
        """
        self._transactions: List[Transaction] = [
            t if isinstance(t, Transaction) else Transaction.from_dict(t)
            for t in transactions
        ]
        logger.debug(f"Analyzer created with {len(self._transactions)} transaction(s)")

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "TransactionAnalyzer":
        """Build an analyzer from already-parsed JSON records."""
        return cls(Transaction.from_dict(record) for record in records)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    # ============================================================
    # Mutation
    # ============================================================

    def add_transaction(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the store."""
        self._transactions.append(transaction)

    # ============================================================
    # Listing and Lookup
    # ============================================================

    def get_all_transactions(self) -> List[Transaction]:
        """Return a copy of all transactions in insertion order."""
        return list(self._transactions)

    def get_unique_transaction_types(self) -> List[str]:
        """Return the distinct transaction types in first-seen order."""
        return list(dict.fromkeys(t.type for t in self._transactions))

    def find_transaction_by_id(self, transaction_id: Union[str, int]) -> Optional[Transaction]:
        """
        Find the first transaction with the given id.

        The id is compared as a string, so 2 and "2" match the same record.

        Returns:
            The first match in insertion order, or None if there is none
        """
        wanted = str(transaction_id)
        for t in self._transactions:
            if t.id == wanted:
                return t
        return None

    def map_transaction_descriptions(self) -> List[str]:
        """Return every description, one per transaction, in order."""
        return [t.description for t in self._transactions]

    # ============================================================
    # Filters
    # ============================================================

    def get_transactions_by_type(self, transaction_type: str) -> List[Transaction]:
        return [t for t in self._transactions if t.type == transaction_type]

    def get_transactions_by_merchant(self, merchant_name: str) -> List[Transaction]:
        return [t for t in self._transactions if t.merchant == merchant_name]

    def get_transactions_in_date_range(self, start_date: DateLike, end_date: DateLike) -> List[Transaction]:
        """
        Return transactions dated between start_date and end_date.

        Both ends are inclusive. Dates may be date objects or ISO strings.
        """
        start = parse_date(start_date)
        end = parse_date(end_date)
        return [t for t in self._transactions if start <= t.date <= end]

    def get_transactions_before_date(self, cutoff_date: DateLike) -> List[Transaction]:
        """Return transactions dated strictly before cutoff_date."""
        cutoff = parse_date(cutoff_date)
        return [t for t in self._transactions if t.date < cutoff]

    def get_transactions_by_amount_range(self, min_amount: AmountLike, max_amount: AmountLike) -> List[Transaction]:
        """Return transactions with min_amount <= amount <= max_amount."""
        low = parse_amount(min_amount)
        high = parse_amount(max_amount)
        return [t for t in self._transactions if low <= t.amount <= high]

    # ============================================================
    # Aggregates
    # ============================================================

    def calculate_total_amount(self) -> Decimal:
        """Sum of all amounts; Decimal('0') for an empty store."""
        return _sum_amounts(self._transactions)

    def calculate_total_amount_by_date(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> Decimal:
        """
        Sum amounts of transactions matching the given date components.

        A component left as None matches any value. month is 1-12.

        Args:
            year: Calendar year, e.g. 2019
            month: Calendar month, 1-12
            day: Day of month, 1-31

        Returns:
            Total of the matching amounts
        """
        matching = [
            t for t in self._transactions
            if (year is None or t.date.year == year)
            and (month is None or t.date.month == month)
            and (day is None or t.date.day == day)
        ]
        logger.debug(f"{len(matching)} transaction(s) match year={year} month={month} day={day}")
        return _sum_amounts(matching)

    def calculate_total_debit_amount(self) -> Decimal:
        return _sum_amounts(self.get_transactions_by_type('debit'))

    def calculate_average_transaction_amount(self) -> Decimal:
        """
        Average amount over all transactions.

        Returns Decimal('0') for an empty store instead of dividing by zero.
        """
        if not self._transactions:
            return Decimal('0')
        return self.calculate_total_amount() / len(self._transactions)

    def find_most_transactions_month(self) -> Optional[int]:
        """
        Month (1-12) with the most transactions, across all types.

        Ties go to the lowest month. Returns None for an empty store.
        """
        return _busiest_month(self._transactions)

    def find_most_debit_transactions_month(self) -> Optional[int]:
        """Same as find_most_transactions_month, debit transactions only."""
        return _busiest_month(self.get_transactions_by_type('debit'))

    def most_transaction_types(self) -> str:
        """
        Compare the number of debit and credit transactions.

        Returns:
            "debit" or "credit" for the larger count, "equal" on a tie
            (including when there are none of either)
        """
        debit_count = len(self.get_transactions_by_type('debit'))
        credit_count = len(self.get_transactions_by_type('credit'))

        if debit_count > credit_count:
            return 'debit'
        if credit_count > debit_count:
            return 'credit'
        return 'equal'


def _sum_amounts(transactions: Iterable[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal('0'))


def _busiest_month(transactions: Iterable[Transaction]) -> Optional[int]:
    counts = Counter(t.date.month for t in transactions)
    if not counts:
        return None

    # First maximal month in 1..12 order wins
    best_month = None
    best_count = 0
    for month in MONTHS:
        if counts[month] > best_count:
            best_month = month
            best_count = counts[month]
    return best_month
