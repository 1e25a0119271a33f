"""Mini README: Ordered registry of user-created tab names.

Structure:
    * TabRegistry - create, delete, and list tab names in display order.

Names are kept exactly as entered. Duplicates are allowed; deleting a name
removes every entry equal to it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from ..errors import InvalidNameError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class TabRegistry:
    """Maintain the ordered list of tab names."""

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self._tabs: List[str] = []
        for name in names or ():
            self.create_tab(name)
        LOGGER.debug("Tab registry initialised with %s tabs", len(self._tabs))

    def create_tab(self, name: str) -> str:
        """Append a new tab name, rejecting blank input."""

        if name is None or not name.strip():
            LOGGER.warning("Rejected blank tab name %r", name)
            raise InvalidNameError()
        self._tabs.append(name)
        LOGGER.info("Created tab '%s'", name)
        return name

    def delete_tab(self, name: str) -> int:
        """Remove every tab called ``name`` and return how many were removed."""

        remaining = [tab for tab in self._tabs if tab != name]
        removed = len(self._tabs) - len(remaining)
        self._tabs = remaining
        if removed:
            LOGGER.info("Deleted %s tab(s) named '%s'", removed, name)
        else:
            LOGGER.debug("Delete requested for unknown tab '%s'", name)
        return removed

    def list_tabs(self) -> Tuple[str, ...]:
        """Return a snapshot of tab names in display order."""

        return tuple(self._tabs)

    def __contains__(self, name: object) -> bool:
        return name in self._tabs

    def __len__(self) -> int:
        return len(self._tabs)
