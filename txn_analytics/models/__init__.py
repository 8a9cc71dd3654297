"""
Data models for transaction analytics.

This module exports the typed transaction record and its parsing
helpers.
"""

from .transaction import Transaction, parse_amount, parse_date

__all__ = ['Transaction', 'parse_amount', 'parse_date']
