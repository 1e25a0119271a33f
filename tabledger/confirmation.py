"""Mini README: Synchronous confirmation decisions for destructive actions.

Structure:
    * ConfirmationDecision - enum with ``PROCEED`` and ``CANCEL``.
    * ConfirmationRequest - title and prompt shown to the user.
    * Confirmer - callable type answering a request with a decision.
    * always_proceed / always_cancel / decision_from_flag - stock confirmers.

The core asks a ``Confirmer`` and acts on the answer itself, so deleting a
tab or resetting a ledger can be driven from a browser form, a terminal
prompt, or a test without any callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ConfirmationDecision(str, Enum):
    """Outcome of a confirmation prompt."""

    PROCEED = "proceed"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class ConfirmationRequest:
    """Question presented before a destructive action."""

    title: str
    prompt: str


Confirmer = Callable[[ConfirmationRequest], ConfirmationDecision]


def always_proceed(request: ConfirmationRequest) -> ConfirmationDecision:
    return ConfirmationDecision.PROCEED


def always_cancel(request: ConfirmationRequest) -> ConfirmationDecision:
    return ConfirmationDecision.CANCEL


def decision_from_flag(confirmed: bool) -> Confirmer:
    """Build a confirmer that answers with a decision the caller already made."""

    decision = ConfirmationDecision.PROCEED if confirmed else ConfirmationDecision.CANCEL

    def _confirm(request: ConfirmationRequest) -> ConfirmationDecision:
        return decision

    return _confirm
