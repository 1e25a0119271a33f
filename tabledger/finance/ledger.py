"""Mini README: In-memory ledger recording a tab's income and expenses.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Transaction - immutable record of a single entry.
    * Ledger - append-only list of transactions with net income aggregation.

Amounts are parsed into ``Decimal`` so totals stay exact. The sign of an
entry lives in its type; the stored amount is whatever the user typed, which
means zero and negative values are accepted as long as they parse. Amounts
with digits beyond 10**30 or finer than 10**-30 are rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation, localcontext
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ..errors import InvalidAmountError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

ZERO = Decimal("0")

# Accepted amounts keep every digit between 10**MAX_AMOUNT_EXPONENT and
# 10**MIN_AMOUNT_EXPONENT, so SUM_PRECISION digits hold any realistic total exactly.
MAX_AMOUNT_EXPONENT = 30
MIN_AMOUNT_EXPONENT = -30
SUM_PRECISION = 100


class TransactionType(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a recorded ledger entry."""

    transaction_id: str
    transaction_type: TransactionType
    amount: Decimal
    occurred_on: date

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign implied by the transaction type."""

        if self.transaction_type is TransactionType.INCOME:
            return self.amount
        return -self.amount

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "transaction_type": self.transaction_type.value,
            "amount": format_amount(self.amount),
            "occurred_on": self.occurred_on.isoformat(),
        }


def format_amount(value: Decimal) -> str:
    """Render a decimal with two fraction digits for display."""

    return f"{value:.2f}"


def parse_amount(amount_text: str) -> Decimal:
    """Parse user supplied text into a finite decimal."""

    if amount_text is None:
        raise InvalidAmountError()
    candidate = str(amount_text).strip()
    if not candidate:
        raise InvalidAmountError()
    try:
        amount = Decimal(candidate)
    except InvalidOperation as error:
        raise InvalidAmountError() from error
    if not amount.is_finite():
        raise InvalidAmountError()
    if (
        amount.adjusted() > MAX_AMOUNT_EXPONENT
        or amount.as_tuple().exponent < MIN_AMOUNT_EXPONENT
    ):
        raise InvalidAmountError()
    return amount


class Ledger:
    """Hold one tab's transactions in insertion order."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._transactions: List[Transaction] = []
        self._sequence = 0
        LOGGER.debug("Ledger initialised for tab '%s'", name)

    def _next_id(self) -> str:
        """Generate the next identifier; never rewound by ``reset``."""

        self._sequence += 1
        return f"txn_{self._sequence:04d}"

    @property
    def is_empty(self) -> bool:
        return not self._transactions

    def __len__(self) -> int:
        return len(self._transactions)

    def add_transaction(
        self,
        amount_text: str,
        transaction_type: Union[TransactionType, str],
        *,
        occurred_on: Optional[date] = None,
    ) -> Transaction:
        """Validate the amount and append a new transaction."""

        try:
            amount = parse_amount(amount_text)
        except InvalidAmountError:
            LOGGER.warning("Rejected amount %r for tab '%s'", amount_text, self.name)
            raise
        if not isinstance(transaction_type, TransactionType):
            transaction_type = TransactionType.from_str(transaction_type)

        transaction = Transaction(
            transaction_id=self._next_id(),
            transaction_type=transaction_type,
            amount=amount,
            occurred_on=occurred_on or date.today(),
        )
        self._transactions.append(transaction)
        LOGGER.info(
            "Recorded %s of %s on tab '%s' (%s)",
            transaction_type.value,
            format_amount(amount),
            self.name,
            transaction.transaction_id,
        )
        return transaction

    def list_transactions(self) -> Tuple[Transaction, ...]:
        """Return transactions oldest first."""

        return tuple(self._transactions)

    def totals(self) -> Dict[TransactionType, Decimal]:
        """Sum amounts per transaction type."""

        totals = {TransactionType.INCOME: ZERO, TransactionType.EXPENSE: ZERO}
        with localcontext() as context:
            context.prec = SUM_PRECISION
            for transaction in self._transactions:
                totals[transaction.transaction_type] += transaction.amount
        return totals

    def net_income(self) -> Decimal:
        """Total income minus total expense over the current entries."""

        totals = self.totals()
        with localcontext() as context:
            context.prec = SUM_PRECISION
            return totals[TransactionType.INCOME] - totals[TransactionType.EXPENSE]

    def reset(self) -> int:
        """Discard every transaction, returning how many were removed."""

        removed = len(self._transactions)
        self._transactions.clear()
        LOGGER.info("Reset ledger for tab '%s' (%s transactions removed)", self.name, removed)
        return removed

    def export_snapshot(self) -> Dict[str, object]:
        """Export the ledger for JSON responses."""

        totals = self.totals()
        return {
            "tab": self.name,
            "net_income": format_amount(self.net_income()),
            "total_income": format_amount(totals[TransactionType.INCOME]),
            "total_expense": format_amount(totals[TransactionType.EXPENSE]),
            "transactions": [transaction.as_dict() for transaction in self._transactions],
        }
