"""Mini README: Tab management for the tracker.

Re-exports ``TabRegistry``, the ordered collection of tab names the tab
list view renders.
"""

from .registry import TabRegistry

__all__ = ["TabRegistry"]
