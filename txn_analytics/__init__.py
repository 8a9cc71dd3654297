"""
Transaction analytics: in-memory queries over a transactions JSON file.
"""

from .models import Transaction
from .transaction_analyzer import TransactionAnalyzer
from .transaction_loader import TransactionLoadError, load_transactions

__all__ = ['Transaction', 'TransactionAnalyzer', 'TransactionLoadError', 'load_transactions']
