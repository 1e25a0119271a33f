"""Mini README: Per-tab transaction ledgers.

Exposes the ``Ledger`` that records income and expense entries for one tab
and computes its net income, along with the transaction record types and
the amount formatting helper shared with the interface.
"""

from .ledger import Ledger, Transaction, TransactionType, format_amount, parse_amount

__all__ = ["Ledger", "Transaction", "TransactionType", "format_amount", "parse_amount"]
