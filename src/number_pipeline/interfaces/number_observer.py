"""
Number Observer Protocol.

Observers are notified of every number that passes the filter and, once,
of run completion. They are invoked in registration order.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NumberObserver(Protocol):
    """Abstract interface for pipeline observers."""

    def on_number(self, number: int) -> None:
        """Handle a number that passed the filter."""
        ...

    def on_finished(self) -> None:
        """Handle the end of the run."""
        ...
