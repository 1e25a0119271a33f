"""Mini README: User-input errors raised by the tab ledger core.

Both errors are recoverable: they are raised before any state changes and
the interface layer reports them back to the person who typed the value.
"""

from __future__ import annotations


class TrackerError(ValueError):
    """Base class for validation failures surfaced to the user."""

    default_message = "Invalid input."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidAmountError(TrackerError):
    """Raised when an amount is blank or not a finite number."""

    default_message = "Please enter a valid amount."


class InvalidNameError(TrackerError):
    """Raised when a tab name is blank or whitespace only."""

    default_message = "Please enter a valid tab name."
