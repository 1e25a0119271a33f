"""Mini README: Core package initializer for Tab Ledger.

Tab Ledger records income and expense entries under user-named tabs and
shows each tab's net balance. The package root re-exports the session and
the types most callers need so the interface layer does not have to know
the module layout.
"""

from .confirmation import ConfirmationDecision, ConfirmationRequest
from .errors import InvalidAmountError, InvalidNameError, TrackerError
from .finance import Ledger, Transaction, TransactionType
from .logging_utils import get_logger
from .session import TrackerSession
from .tabs import TabRegistry

__all__ = [
    "ConfirmationDecision",
    "ConfirmationRequest",
    "InvalidAmountError",
    "InvalidNameError",
    "Ledger",
    "TabRegistry",
    "TrackerError",
    "TrackerSession",
    "Transaction",
    "TransactionType",
    "get_logger",
]
