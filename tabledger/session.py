"""Mini README: Explicit session state tying tabs to their ledgers.

Structure:
    * TrackerSession - owns a ``TabRegistry`` plus one ``Ledger`` per tab name.

The session is the object the interface holds for the lifetime of the
process. Selecting a tab creates its ledger on first use; deleting a tab
destroys the ledger too, so a tab recreated under the same name starts empty.
Deleting tabs and resetting ledgers both go through a ``Confirmer``, and the
requests they ask with are available to the interface for rendering.

``select_tab`` does not check the registry: callers that take names from
outside (the web interface) must check ``has_tab`` first. ``net_income``
refuses unregistered names.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Optional, Tuple

from .confirmation import ConfirmationDecision, ConfirmationRequest, Confirmer
from .finance import Ledger
from .logging_utils import get_logger
from .tabs import TabRegistry

LOGGER = get_logger(__name__)


class TrackerSession:
    """In-memory state for one running tracker."""

    def __init__(self, tab_names: Optional[Iterable[str]] = None) -> None:
        self.registry = TabRegistry(tab_names)
        self._ledgers: Dict[str, Ledger] = {}

    def create_tab(self, name: str) -> str:
        return self.registry.create_tab(name)

    def list_tabs(self) -> Tuple[str, ...]:
        return self.registry.list_tabs()

    def has_tab(self, name: str) -> bool:
        return name in self.registry

    def select_tab(self, name: str) -> Ledger:
        """Return the ledger for ``name``, creating an empty one on first use."""

        ledger = self._ledgers.get(name)
        if ledger is None:
            ledger = Ledger(name)
            self._ledgers[name] = ledger
            LOGGER.debug("Created ledger for tab '%s'", name)
        return ledger

    def has_ledger(self, name: str) -> bool:
        return name in self._ledgers

    def net_income(self, name: str) -> Decimal:
        """Net income of a registered tab."""

        if not self.has_tab(name):
            raise KeyError(f"Tab '{name}' is not registered")
        return self.select_tab(name).net_income()

    @staticmethod
    def delete_request(name: str) -> ConfirmationRequest:
        return ConfirmationRequest(
            title="Delete Tab",
            prompt=f'Are you sure you want to delete the "{name}" tab?',
        )

    @staticmethod
    def reset_request() -> ConfirmationRequest:
        return ConfirmationRequest(title="Reset", prompt="Are you sure you want to reset?")

    def delete_tab(self, name: str, confirm: Confirmer) -> ConfirmationDecision:
        """Ask for confirmation, then drop every matching tab and its ledger."""

        decision = confirm(self.delete_request(name))
        if decision is not ConfirmationDecision.PROCEED:
            LOGGER.info("Deletion of tab '%s' cancelled", name)
            return decision
        self.registry.delete_tab(name)
        if self._ledgers.pop(name, None) is not None:
            LOGGER.debug("Destroyed ledger for tab '%s'", name)
        return decision

    def reset_ledger(self, name: str, confirm: Confirmer) -> ConfirmationDecision:
        """Ask for confirmation, then clear the tab's transactions."""

        decision = confirm(self.reset_request())
        if decision is not ConfirmationDecision.PROCEED:
            LOGGER.info("Reset of tab '%s' cancelled", name)
            return decision
        self.select_tab(name).reset()
        return decision
